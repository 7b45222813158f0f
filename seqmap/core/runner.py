"""Pipeline execution engine."""

import sys
import time
from collections.abc import Iterable
from typing import TYPE_CHECKING

from loguru import logger

from seqmap.core.config import RunConfig
from seqmap.core.types import Record

if TYPE_CHECKING:
    from seqmap.core.step import Step


class Runner:
    """
    Execution engine for steps and pipelines.

    Each step's output is materialized into a list before the next step runs,
    so a failing step never hands partial output downstream.
    """

    def __init__(self, pipeline: "Step", config: RunConfig | None = None) -> None:
        """
        Initialize the runner.

        Args:
            pipeline: The pipeline (or single step) to execute.
            config: Execution configuration. Uses defaults if None.
        """
        self.pipeline = pipeline
        self.config = config or RunConfig()

    def execute(self, records: Iterable[Record] | None = None) -> list[Record]:
        """
        Execute the pipeline.

        Args:
            records: Initial records fed to the first step. When given, ``limit``
                applies to them; otherwise it applies to the first step's output.

        Returns:
            List of output records.
        """
        handler_id = None
        if self.config.log_level:
            # Scoped to this run and to seqmap's own records; other sinks untouched
            handler_id = logger.add(
                sys.stderr, level=self.config.log_level, filter="seqmap"
            )
        try:
            return self._run_steps(records)
        finally:
            if handler_id is not None:
                logger.remove(handler_id)

    def _run_steps(self, records: Iterable[Record] | None) -> list[Record]:
        limit = self.config.limit
        seeded = records is not None
        current: list[Record] = list(records) if seeded else []
        if seeded and limit is not None:
            current = current[:limit]

        for i, step in enumerate(self.pipeline.steps):
            step_name = step.name
            records_in = len(current)

            logger.info(f"Executing step {i}: {step_name}")
            start_time = time.time()

            try:
                current = list(step.process(iter(current)))
            except Exception as e:
                logger.error(f"Step {i} ({step_name}) failed: {e!r}")
                raise

            if i == 0 and not seeded and limit is not None:
                current = current[:limit]

            elapsed = time.time() - start_time
            logger.info(
                f"Step {i} ({step_name}): {records_in} -> {len(current)} records "
                f"({elapsed:.2f}s)"
            )

            stop_after = self.config.stop_after
            if stop_after is not None and stop_after in (i, step_name):
                logger.info(f"Stopping after step: {step_name}")
                break

        return current


def run_pipeline(
    pipeline: "Step", records: Iterable[Record] | None = None, **kwargs
) -> list[Record]:
    """
    Execute a pipeline with the given configuration.

    Args:
        pipeline: The pipeline (or single step) to execute.
        records: Optional initial records.
        **kwargs: RunConfig fields.

    Returns:
        List of output records.
    """
    config = RunConfig(**kwargs)
    return Runner(pipeline, config).execute(records)
