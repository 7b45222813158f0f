"""Shared type definitions for seqmap."""

from typing import Any, TypeVar

Record = dict[str, Any]

T = TypeVar("T")
U = TypeVar("U")
