from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from logging import getLogger
from types import TracebackType
from typing import Any, Self

from pushstream._core.observer import (
    ErrorInfo,
    Observer,
    ObserverHandlers,
    Unsubscriber,
)

type Subscriber[T] = Callable[[Observer[T]], Unsubscriber | None]

_logger = getLogger("python-pushstream")


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Subscription:
    observer: Observer[Any]

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.unsubscribe()

    @property
    def closed(self) -> bool:
        return self.observer.is_unsubscribed

    def unsubscribe(self) -> None:
        self.observer.unsubscribe()


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class Observable[T]:
    subscriber: Subscriber[T]

    def subscribe(
        self,
        handlers: ObserverHandlers[T] | None = None,
        /,
        *,
        next: Callable[[T], Any] | None = None,
        error: Callable[[ErrorInfo], Any] | None = None,
        complete: Callable[[], Any] | None = None,
    ) -> Subscription:
        keywords = (next, error, complete)

        if handlers is None:
            handlers = ObserverHandlers(next=next, error=error, complete=complete)

        elif any(handler is not None for handler in keywords):
            raise TypeError(
                "Handlers must be passed either as `ObserverHandlers` "
                "or as keyword arguments, not both."
            )

        observer = Observer(handlers)

        try:
            unsubscriber = self.subscriber(observer)
        except BaseException as exc:
            _logger.debug(f"`{self.subscriber}` failed, {observer} is torn down.")
            observer.unsubscribe()
            raise exc

        observer.unsubscriber = unsubscriber
        return Subscription(observer)

    @classmethod
    def from_iterable(cls, values: Iterable[T], /) -> Observable[T]:
        snapshot = tuple(values)

        def subscriber(observer: Observer[T]) -> Unsubscriber:
            for value in snapshot:
                if observer.is_unsubscribed:
                    break

                observer.next(value)

            observer.complete()

            def unsubscriber() -> None:
                _logger.debug("unsubscribed")

            return unsubscriber

        return cls(subscriber)
