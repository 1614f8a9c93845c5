import logging
from typing import Any, Optional, Sequence, TypeVar

import numpy as np

from .core.exceptions import LengthMismatchError, SequenceShapeError
from .core.logging_config import LOGGER_NAME

K = TypeVar('K')
V = TypeVar('V')

logger = logging.getLogger(LOGGER_NAME)


def _check_operand(name: str, seq: Sequence[Any]) -> None:
    if isinstance(seq, np.ndarray) and seq.ndim != 1:
        msg = f"{name} must be one-dimensional, got shape {seq.shape}"
        logger.error(msg)
        raise SequenceShapeError(msg)


def check_parallel(keys: Sequence[Any], values: Sequence[Any]) -> None:
    """Validate that ``keys`` and ``values`` can be paired index by index.

    Raises:
        SequenceShapeError: If a numpy operand is not one-dimensional.
        LengthMismatchError: If the two sequences differ in length.
    """
    _check_operand("keys", keys)
    _check_operand("values", values)
    if len(keys) != len(values):
        msg = f"Expected {len(keys)} values to match keys, got {len(values)}"
        logger.error(msg)
        raise LengthMismatchError(msg)


def find_index(keys: Sequence[K], key: K) -> Optional[int]:
    """Return the index of the first element of ``keys`` equal to ``key``.

    Args:
        keys: Ordered sequence to scan, list, tuple or 1-D numpy array.
        key: Key to search for, compared with ``==``.

    Returns:
        int: Position of the first match, or None if no element matches.
    """
    _check_operand("keys", keys)
    for i in range(len(keys)):
        if bool(keys[i] == key):
            return i
    return None


def lookup(keys: Sequence[K], values: Sequence[V], key: K,
           default: Optional[V] = None) -> Optional[V]:
    """Find the value paired with ``key`` in two parallel sequences.

    The scan runs from index 0 upward and the first equal key wins. A key
    that is not present is a normal outcome and yields ``default``.

    Args:
        keys: Ordered sequence of keys.
        values: Ordered sequence of values, same length as ``keys``.
        key: Key to search for.
        default: Returned when no key matches.

    Returns:
        The value at the first matching index, or ``default``.

    Raises:
        LengthMismatchError: If ``keys`` and ``values`` differ in length.
        SequenceShapeError: If a numpy operand is not one-dimensional.
    """
    check_parallel(keys, values)
    index = find_index(keys, key)
    if index is None:
        return default
    return values[index]
