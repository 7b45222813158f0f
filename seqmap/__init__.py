"""seqmap - Order-preserving, non-destructive mapping over sequences."""

from seqmap.core.types import Record
from seqmap.core.errors import InvalidArgumentError
from seqmap.core.mapper import map_sequence, iter_map, builtin_map, check_transform
from seqmap.core.step import Step, Pipeline
from seqmap.core.config import RunConfig, configure_logging
from seqmap.core.runner import Runner, run_pipeline
from seqmap.sources.source import Source, ListSource
from seqmap.transforms.data_ops import Map

__all__ = [
    "Record",
    "InvalidArgumentError",
    "map_sequence",
    "iter_map",
    "builtin_map",
    "check_transform",
    "Step",
    "Pipeline",
    "RunConfig",
    "configure_logging",
    "Runner",
    "run_pipeline",
    "Source",
    "ListSource",
    "Map",
]
