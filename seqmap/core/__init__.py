"""Core types and base classes for seqmap."""

from seqmap.core.types import Record
from seqmap.core.errors import InvalidArgumentError
from seqmap.core.mapper import map_sequence, iter_map, builtin_map
from seqmap.core.step import Step, Pipeline

__all__ = [
    "Record",
    "InvalidArgumentError",
    "map_sequence",
    "iter_map",
    "builtin_map",
    "Step",
    "Pipeline",
]
