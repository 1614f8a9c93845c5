from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, List, Optional, Sequence, TypeVar

from .core.exceptions import KeyNotFoundError
from .core.logging_config import DictionaryLogger
from .lookup import check_parallel, find_index

K = TypeVar('K')
V = TypeVar('V')


@dataclass
class DictEntry(Generic[K, V]):
    """Represents an entry found in the dictionary."""
    key: K
    value: V
    index: int


class Dictionary(Generic[K, V]):
    """Ordered dictionary backed by parallel key and value lists.

    Keys are unique under ``==`` and keep the order in which they were
    first added. Every operation is a linear scan over ``keys``.
    """

    def __init__(self, log_dir: Optional[Path] = None):
        """Initialize an empty dictionary.

        Args:
            log_dir (Path): Directory for the log file (optional).
        """
        self.keys: List[K] = []
        self.values: List[V] = []
        self.logger = DictionaryLogger(log_dir)

    @classmethod
    def from_sequences(cls, keys: Sequence[K], values: Sequence[V],
                       log_dir: Optional[Path] = None) -> 'Dictionary[K, V]':
        """Build a dictionary from parallel key and value sequences.

        A key that appears more than once keeps its first position and its
        last value, as if each pair had been ``put`` in turn.

        Raises:
            LengthMismatchError: If the sequences differ in length.
            SequenceShapeError: If a numpy operand is not one-dimensional.
        """
        check_parallel(keys, values)
        result = cls(log_dir)
        for key, value in zip(keys, values):
            if key in result:
                result.logger.warning(f"Duplicate key {key!r} in input, keeping last value")
            result.put(key, value)
        return result

    def _index_of(self, key: K) -> Optional[int]:
        return find_index(self.keys, key)

    def put(self, key: K, value: V) -> None:
        """Insert ``key`` with ``value``, or overwrite the value of an existing key.

        Args:
            key: Key to insert or update.
            value: Value to associate with the key.
        """
        index = self._index_of(key)
        if index is not None:
            self.values[index] = value
            self.logger.debug(f"Updated key {key!r} at index {index}")
            return

        # New key goes at the end
        self.keys.append(key)
        self.values.append(value)
        self.logger.debug(f"Added key {key!r} at index {len(self.keys) - 1}")

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        """Get the value stored for ``key``.

        Args:
            key: The key to search for.
            default: Returned when the key is absent.

        Returns:
            The stored value, or ``default`` if the key is not present.
        """
        index = self._index_of(key)
        if index is None:
            return default
        return self.values[index]

    def find_entry(self, key: K) -> Optional[DictEntry[K, V]]:
        """Find the entry for ``key``.

        Unlike ``get``, this tells a stored ``None`` apart from a missing key.

        Returns:
            DictEntry: The found entry, or None if not found.
        """
        index = self._index_of(key)
        if index is None:
            return None
        return DictEntry(self.keys[index], self.values[index], index)

    def require(self, key: K) -> V:
        """Get the value for ``key``, raising if it is not present"""
        entry = self.find_entry(key)
        if entry is None:
            self.logger.error(f"Key not found: {key!r}")
            raise KeyNotFoundError(key)
        return entry.value

    def __contains__(self, key: Any) -> bool:
        return self._index_of(key) is not None

    def __len__(self) -> int:
        return len(self.keys)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{k!r}: {v!r}" for k, v in zip(self.keys, self.values))
        return f"{type(self).__name__}({{{pairs}}})"
