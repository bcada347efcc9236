from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple, Self

from pushstream import ObserverHandlers


class Call(NamedTuple):
    name: str
    args: tuple[Any, ...]


@dataclass(repr=False, eq=False, frozen=True, slots=True)
class CallHistory:
    __calls: list[Call] = field(default_factory=list, init=False)

    def __iter__(self) -> Iterator[Call]:
        yield from self.__calls

    def __len__(self) -> int:
        return len(self.__calls)

    @property
    def names(self) -> list[str]:
        return [call.name for call in self.__calls]

    @property
    def handlers(self) -> ObserverHandlers[Any]:
        return ObserverHandlers(
            next=self.record("next", 200),
            error=self.record("error", 500),
            complete=self.record("complete"),
        )

    def assert_length(self, length: int):
        assert len(self) == length

    def clear(self) -> Self:
        self.__calls.clear()
        return self

    def count(self, name: str) -> int:
        return self.names.count(name)

    def values(self, name: str) -> list[Any]:
        return [call.args[0] for call in self.__calls if call.name == name]

    def record(self, name: str, status: Any = None) -> Callable[..., Any]:
        def recorder(*args: Any) -> Any:
            self.__calls.append(Call(name, args))
            return status

        return recorder
