from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pushstream.exceptions import UnsubscriberAlreadySetError

type Unsubscriber = Callable[[], Any]


@dataclass(frozen=True, slots=True)
class ErrorInfo:
    code: int
    text: str


@dataclass(frozen=True, kw_only=True, slots=True)
class ObserverHandlers[T]:
    next: Callable[[T], Any] | None = None
    error: Callable[[ErrorInfo], Any] | None = None
    complete: Callable[[], Any] | None = None


class Observer[T]:
    __slots__ = (
        "__handlers",
        "__is_unsubscribed",
        "__unsubscriber",
        "__has_unsubscriber",
    )

    __handlers: ObserverHandlers[T]
    __is_unsubscribed: bool
    __unsubscriber: Unsubscriber | None
    __has_unsubscriber: bool

    def __init__(self, handlers: ObserverHandlers[T] | None = None) -> None:
        self.__handlers = handlers or ObserverHandlers()
        self.__is_unsubscribed = False
        self.__unsubscriber = None
        self.__has_unsubscriber = False

    def __repr__(self) -> str:
        state = "unsubscribed" if self.__is_unsubscribed else "active"
        return f"<{type(self).__qualname__} ({state}) at {id(self):#x}>"

    @property
    def handlers(self) -> ObserverHandlers[T]:
        return self.__handlers

    @property
    def is_unsubscribed(self) -> bool:
        return self.__is_unsubscribed

    @property
    def unsubscriber(self) -> Unsubscriber | None:
        return self.__unsubscriber

    @unsubscriber.setter
    def unsubscriber(self, unsubscriber: Unsubscriber | None) -> None:
        if self.__has_unsubscriber:
            raise UnsubscriberAlreadySetError(self)

        self.__unsubscriber = unsubscriber
        self.__has_unsubscriber = True

        # Assigned after a terminal signal, the cleanup is due right away.
        if self.__is_unsubscribed:
            self.__teardown()

    def next(self, value: T, /) -> None:
        handler = self.__handlers.next

        if handler is None or self.__is_unsubscribed:
            return

        handler(value)

    def error(self, error: ErrorInfo, /) -> None:
        if self.__is_unsubscribed:
            return

        self.__is_unsubscribed = True

        try:
            if (handler := self.__handlers.error) is not None:
                handler(error)
        finally:
            self.unsubscribe()

    def complete(self) -> None:
        if self.__is_unsubscribed:
            return

        self.__is_unsubscribed = True

        try:
            if (handler := self.__handlers.complete) is not None:
                handler()
        finally:
            self.unsubscribe()

    def unsubscribe(self) -> None:
        self.__is_unsubscribed = True
        self.__teardown()

    def __teardown(self) -> None:
        unsubscriber, self.__unsubscriber = self.__unsubscriber, None

        if unsubscriber is not None:
            unsubscriber()
