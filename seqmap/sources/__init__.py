"""Source steps for seqmap."""

from seqmap.sources.source import Source, ListSource

__all__ = ["Source", "ListSource"]
