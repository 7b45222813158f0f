"""Source steps for starting a pipeline."""

from collections.abc import Iterable

from loguru import logger

from seqmap.core.errors import InvalidArgumentError
from seqmap.core.step import Step
from seqmap.core.types import Record


class ListSource(Step):
    """Load data from a Python list."""

    def __init__(self, records: list[Record]) -> None:
        """
        Initialize a list source.

        Args:
            records: List of records to load.
        """
        super().__init__()
        if not isinstance(records, list):
            raise InvalidArgumentError(
                f"records must be a list, got {type(records).__name__}"
            )
        self._records = records

    def process(self, records: Iterable[Record]) -> Iterable[Record]:
        """Yield records from the list."""
        logger.info(f"Loading {len(self._records)} records from list")
        yield from self._records


class Source:
    """Factory class for creating source steps."""

    @staticmethod
    def list(records: list[Record]) -> ListSource:
        """
        Load data from a Python list.

        Args:
            records: List of record dictionaries.

        Returns:
            A ListSource step.

        Examples:
            >>> Source.list([{"id": 1, "level": "user"}, {"id": 2, "level": "user"}])
        """
        return ListSource(records)
