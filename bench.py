import itertools
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from decimal import Decimal
from statistics import mean
from timeit import timeit
from typing import Annotated, Any, ClassVar, Self

from tabulate import tabulate
from typer import Option, Typer

from pushstream import Observable


@dataclass(frozen=True, slots=True)
class Benchmark:
    x: Decimal
    y: Decimal

    @property
    def difference_rate(self) -> Decimal:
        return ((self.y - self.x) / self.x) * 100

    @classmethod
    def compare(
        cls,
        x: Callable[..., Any],
        y: Callable[..., Any],
        number: int = 1,
    ) -> Self:
        x = mean(cls._time_in_ns(x, number))
        y = mean(cls._time_in_ns(y, number))
        return cls(x, y)

    @staticmethod
    def _time_in_ns(callable_: Callable[..., Any], number: int) -> Iterator[Decimal]:
        for _ in range(number):
            delta = timeit(callable_, number=1)
            yield Decimal(delta) * (10**6)


@dataclass(frozen=True, slots=True)
class BenchmarkResult:
    title: str
    benchmark: Benchmark

    @property
    def row(self) -> tuple[str, str, str, str]:
        rate = self.benchmark.difference_rate
        return (
            self.title,
            f"{self.benchmark.x:.2f}μs",
            f"{self.benchmark.y:.2f}μs",
            f"{rate:.2f}% slower" if rate >= 0 else f"{abs(rate):.2f}% faster",
        )


@dataclass(frozen=True, slots=True)
class EmissionBenchmark:
    sizes: ClassVar[dict[str, int]] = {}

    def start(self, number: int = 1) -> Iterator[BenchmarkResult]:
        for title, size in self.sizes.items():
            values = tuple(range(size))

            def reference():
                received = []

                for value in values:
                    received.append(value)

                return received

            def subscription():
                received = []
                Observable.from_iterable(values).subscribe(next=received.append)
                return received

            first = Benchmark.compare(reference, subscription, number)
            yield BenchmarkResult(f"{title} (new observable)", first)

            observable = Observable.from_iterable(values)

            def replay():
                received = []
                observable.subscribe(next=received.append)
                return received

            yield BenchmarkResult(title, Benchmark.compare(reference, replay, number))

    @classmethod
    def register(cls, size: int, /, *, title: str):
        cls.sizes[title] = size


EmissionBenchmark.register(0, title="0 value")
EmissionBenchmark.register(1, title="1 value")
EmissionBenchmark.register(10, title="10 values")
EmissionBenchmark.register(100, title="100 values")
EmissionBenchmark.register(1000, title="1000 values")

cli = Typer()


@cli.command()
def main(number: Annotated[int, Option("--number", "-n", min=1)] = 1000):
    results = EmissionBenchmark().start(number)
    headers = ("", "Reference Time (μs)", "Observable Time (μs)", "Difference Rate (%)")
    data = (result.row for result in itertools.chain(results))
    table = tabulate(data, headers=headers)
    print(table)


if __name__ == "__main__":
    cli()
