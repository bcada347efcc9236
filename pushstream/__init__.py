from ._core.observable import Observable, Subscriber, Subscription
from ._core.observer import ErrorInfo, Observer, ObserverHandlers, Unsubscriber

__all__ = (
    "ErrorInfo",
    "Observable",
    "Observer",
    "ObserverHandlers",
    "Subscriber",
    "Subscription",
    "Unsubscriber",
)
