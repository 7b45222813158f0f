"""Data operation steps."""

from collections.abc import Callable, Iterable

from seqmap.core.mapper import check_transform, map_sequence
from seqmap.core.step import Step
from seqmap.core.types import Record


class Map(Step):
    """Transform each record one-to-one."""

    def __init__(self, fn: Callable[[Record], Record]) -> None:
        """
        Initialize a Map step.

        Args:
            fn: Function that takes a record and returns a transformed record.
                It should build a new record rather than modify its input.

        Example:
            >>> Map(lambda r: {**r, "level": "admin"})
            >>> Map(lambda r: {"id": r["id"], "name": r["name"].upper()})
        """
        super().__init__()
        check_transform(fn)
        self._fn = fn

    def process(self, records: Iterable[Record]) -> Iterable[Record]:
        """Apply the transformation to each record."""
        return map_sequence(list(records), self._fn)
