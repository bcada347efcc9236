__all__ = (
    "PushStreamError",
    "SubscriptionError",
    "UnsubscriberAlreadySetError",
)


class PushStreamError(Exception): ...


class SubscriptionError(PushStreamError): ...


class UnsubscriberAlreadySetError(SubscriptionError):
    __slots__ = ("__observer",)

    __observer: object

    def __init__(self, observer: object) -> None:
        super().__init__(f"`{observer}` already has an unsubscriber.")
        self.__observer = observer

    @property
    def observer(self) -> object:
        return self.__observer
