"""Transform steps for seqmap."""

from seqmap.transforms.data_ops import Map

__all__ = ["Map"]
