"""Read-only lookup tables backing compiled dictionary data.

Two storage strategies share one lookup contract: a sorted key array searched
with ``bisect`` and a hash map frozen behind ``MappingProxyType``. For any key
both return the same value.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Protocol

from hanzi_pinyin.errors import ConfigurationError, DictionaryConsistencyError

STRATEGIES = ("sorted", "hash")


class LookupTable(Protocol):
    """Lookup capability consumed by the conversion engine."""

    def lookup(self, key: str) -> str | None: ...

    def keys(self) -> Iterator[str]: ...

    def __len__(self) -> int: ...

    def __contains__(self, key: object) -> bool: ...


@dataclass(frozen=True)
class SortedTable:
    """Parallel key/value tuples sorted by key, searched in O(log n)."""

    sorted_keys: tuple[str, ...]
    values: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.sorted_keys) != len(self.values):
            raise DictionaryConsistencyError(
                f"Sorted table key/value length mismatch: {len(self.sorted_keys)} != {len(self.values)}."
            )
        for prev, current in zip(self.sorted_keys, self.sorted_keys[1:]):
            if prev >= current:
                raise DictionaryConsistencyError(
                    f"Sorted table keys are not strictly increasing at {prev!r}, {current!r}."
                )

    def lookup(self, key: str) -> str | None:
        idx = bisect_left(self.sorted_keys, key)
        if idx < len(self.sorted_keys) and self.sorted_keys[idx] == key:
            return self.values[idx]
        return None

    def keys(self) -> Iterator[str]:
        return iter(self.sorted_keys)

    def __len__(self) -> int:
        return len(self.sorted_keys)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.lookup(key) is not None


@dataclass(frozen=True)
class HashTable:
    """Hash-map backed table with O(1) lookups."""

    mapping: Mapping[str, str]

    def lookup(self, key: str) -> str | None:
        return self.mapping.get(key)

    def keys(self) -> Iterator[str]:
        return iter(self.mapping)

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, key: object) -> bool:
        return key in self.mapping


def build_table(items: Iterable[tuple[str, str]], strategy: str = "sorted") -> LookupTable:
    """Build a lookup table from ``(key, value)`` pairs.

    Args:
        items: Pairs with unique keys. Sorted input is not required.
        strategy: ``"sorted"`` for binary search or ``"hash"`` for a hash map.

    Returns:
        Read-only table honoring the shared lookup contract.

    Raises:
        ConfigurationError: If ``strategy`` is unknown.
        DictionaryConsistencyError: If a key appears more than once.
    """

    if strategy not in STRATEGIES:
        raise ConfigurationError(
            f"Unknown lookup strategy '{strategy}'; expected one of {', '.join(STRATEGIES)}."
        )

    pairs = sorted(items, key=lambda item: item[0])
    mapping = dict(pairs)
    if len(mapping) != len(pairs):
        raise DictionaryConsistencyError(
            f"Duplicate keys in table input: {len(pairs)} pairs, {len(mapping)} distinct keys."
        )

    if strategy == "hash":
        return HashTable(mapping=MappingProxyType(mapping))
    return SortedTable(
        sorted_keys=tuple(key for key, _ in pairs),
        values=tuple(value for _, value in pairs),
    )
