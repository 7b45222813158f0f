"""Steps and pipelines: composing mappers with ``>>``."""

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable

from seqmap.core.errors import InvalidArgumentError
from seqmap.core.types import Record


def _as_step(value: "Step | Callable[[Record], Record]") -> "Step":
    """Accept a step, or wrap a plain record function in a Map step."""
    if isinstance(value, Step):
        return value
    from seqmap.transforms.data_ops import Map

    return Map(value)


class Step(ABC):
    """
    A unit of record processing.

    A step can run on its own (``Map(fn).run(records)``) or be chained with
    ``>>``. Plain functions on the right of ``>>`` become ``Map`` steps.
    """

    def __init__(self) -> None:
        self._name: str | None = None

    @abstractmethod
    def process(self, records: Iterable[Record]) -> Iterable[Record]:
        ...

    def as_step(self, name: str) -> "Step":
        """Name this step for logging and ``stop_after``."""
        self._name = name
        return self

    @property
    def name(self) -> str:
        return self._name or self.__class__.__name__

    @property
    def steps(self) -> list["Step"]:
        """Steps the runner executes, in order. A lone step runs as itself."""
        return [self]

    def __rshift__(self, other: "Step | Callable[[Record], Record]") -> "Pipeline":
        return Pipeline(self.steps + _as_step(other).steps)

    def run(
        self,
        records: Iterable[Record] | None = None,
        limit: int | None = None,
        stop_after: int | str | None = None,
        log_level: str | None = None,
    ) -> list[Record]:
        """
        Execute this step (or pipeline) and return the output records.

        Args:
            records: Initial records. Leave empty when the first step is a source.
            limit: Keep only the first N source records.
            stop_after: Stop after this step (index or name).
            log_level: Emit seqmap logs to stderr at this level for this run.

        Returns:
            A new list of output records. Nothing is returned if a step fails.
        """
        from seqmap.core.runner import run_pipeline

        return run_pipeline(
            self,
            records,
            limit=limit,
            stop_after=stop_after,
            log_level=log_level,
        )


class Pipeline(Step):
    """An ordered chain of steps, flattened: nested pipelines are inlined."""

    def __init__(self, steps: list[Step]) -> None:
        super().__init__()
        for step in steps:
            if not isinstance(step, Step):
                raise InvalidArgumentError(
                    f"pipeline steps must be Step instances, got {type(step).__name__}"
                )
        self._steps: list[Step] = [s for step in steps for s in step.steps]

    @property
    def steps(self) -> list[Step]:
        return list(self._steps)

    @property
    def name(self) -> str:
        return self._name or " >> ".join(step.name for step in self._steps)

    def process(self, records: Iterable[Record]) -> list[Record]:
        """
        Thread records through every step.

        Each step's output is collected before the next step starts, so a
        failure anywhere leaves no partially processed records behind.
        """
        current = list(records)
        for step in self._steps:
            current = list(step.process(current))
        return current

    def __len__(self) -> int:
        return len(self._steps)
