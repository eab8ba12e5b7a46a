"""Common SDP structures: attribute collections and sections."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import field as dataclass_field
from typing import Iterator, overload

from sdpline.helpers import slots_dataclass


__all__ = [
    "Attributes",
    "Section",
]


@slots_dataclass
class Attributes(Sequence):
    """
    Ordered collection of ``(key, value)`` attribute pairs of an SDP section.

    Unlike a mapping, the same key can appear multiple times: pairs are only ever
    appended, and lookups return the first match in insertion order.
    """

    pairs: list[tuple[str, str]] = dataclass_field(default_factory=list)

    def append(self, key: str, value: str) -> None:
        """Add a new ``key`` / ``value`` pair at the end of the collection."""
        self.pairs.append((key, value))

    def find(self, key: str) -> str | None:
        """Return the value of the first pair with the given ``key``, if any."""
        for pair_key, value in self.pairs:
            if pair_key == key:
                return value
        return None

    def find_key_by_value(self, value: str) -> str | None:
        """Return the key of the first pair with the given ``value``, if any."""
        for key, pair_value in self.pairs:
            if pair_value == value:
                return key
        return None

    def get_all(self, key: str) -> list[str]:
        """Return the values of all the pairs with the given ``key``, in order."""
        return [value for pair_key, value in self.pairs if pair_key == key]

    def keys(self) -> list[str]:
        """Return all keys, in order, including duplicates."""
        return [key for key, _ in self.pairs]

    @overload
    def __getitem__(self, index: int) -> tuple[str, str]: ...

    @overload
    def __getitem__(self, index: slice) -> list[tuple[str, str]]: ...

    def __getitem__(
        self, index: int | slice
    ) -> tuple[str, str] | list[tuple[str, str]]:
        return self.pairs[index]

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self.pairs)

    def __len__(self) -> int:
        return len(self.pairs)


@slots_dataclass
class Section:
    """
    A section (track) of a session description.

    The root section holds the session-level lines, every ``m=`` line opens a new one.
    """

    format: str
    attributes: Attributes = dataclass_field(default_factory=Attributes)
