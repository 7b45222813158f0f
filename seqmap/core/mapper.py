"""Mapping functions over ordered sequences.

The helpers here never shadow the built-in ``map``: the eager form is
``map_sequence``, the lazy form is ``iter_map`` and ``builtin_map`` delegates to
``builtins.map`` explicitly.

All three validate their arguments before the transform runs for any element
and let exceptions raised by the transform propagate unchanged.
"""

import builtins
import inspect
from collections.abc import Callable, Iterable, Iterator

from loguru import logger

from seqmap.core.errors import InvalidArgumentError
from seqmap.core.types import T, U


def _transform_name(transform: Callable) -> str:
    return getattr(transform, "__qualname__", type(transform).__name__)


def check_transform(transform: Callable) -> None:
    """
    Check that ``transform`` can be called with a single positional argument.

    Args:
        transform: Candidate transformation function.

    Raises:
        InvalidArgumentError: If ``transform`` is not callable, or its signature
            cannot bind exactly one positional argument.
    """
    if not callable(transform):
        raise InvalidArgumentError(
            f"transform must be callable, got {type(transform).__name__}"
        )

    try:
        signature = inspect.signature(transform)
    except (TypeError, ValueError):
        # Some builtins and C types expose no signature; trust them.
        return

    try:
        signature.bind(object())
    except TypeError as e:
        raise InvalidArgumentError(
            f"transform {_transform_name(transform)} must accept exactly one "
            f"positional argument: {e}"
        ) from e


def _iterate(sequence: Iterable[T]) -> Iterator[T]:
    """Return an iterator over ``sequence`` after checking it is ordered."""
    if isinstance(sequence, (set, frozenset)):
        raise InvalidArgumentError(
            f"sequence must be ordered, got {type(sequence).__name__}"
        )
    try:
        return iter(sequence)
    except TypeError as e:
        raise InvalidArgumentError(
            f"sequence must be iterable, got {type(sequence).__name__}"
        ) from e


def map_sequence(sequence: Iterable[T], transform: Callable[[T], U]) -> list[U]:
    """
    Apply ``transform`` to each element of ``sequence`` and return a new list.

    Elements are visited in order, and ``transform`` is invoked exactly once per
    element. The input is never modified and the returned list is always a new
    object, even for an identity transform.

    Args:
        sequence: An ordered, finite iterable of input elements.
        transform: A single-argument callable producing each output element.

    Returns:
        A list with one transformed element per input element.

    Raises:
        InvalidArgumentError: If ``sequence`` is not an ordered iterable or
            ``transform`` cannot be called with one argument.

    Example:
        >>> map_sequence([1, 2, 3], lambda x: x * 2)
        [2, 4, 6]
        >>> map_sequence([{"id": 1, "level": "user"}], lambda r: {**r, "level": "admin"})
        [{'id': 1, 'level': 'admin'}]
    """
    check_transform(transform)
    items = _iterate(sequence)

    results = [transform(item) for item in items]

    logger.debug(f"Mapped {len(results)} items with {_transform_name(transform)}")
    return results


def iter_map(sequence: Iterable[T], transform: Callable[[T], U]) -> Iterator[U]:
    """
    Lazily map ``transform`` over ``sequence``.

    Arguments are validated when ``iter_map`` is called, not on the first
    ``next()``. The transform runs only as results are consumed.

    Example:
        >>> list(iter_map((0, 1), lambda x: x + 1))
        [1, 2]
    """
    check_transform(transform)
    items = _iterate(sequence)
    return (transform(item) for item in items)


def builtin_map(sequence: Iterable[T], transform: Callable[[T], U]) -> Iterator[U]:
    """Validate the arguments, then hand them to Python's built-in ``map``."""
    check_transform(transform)
    items = _iterate(sequence)
    return builtins.map(transform, items)
