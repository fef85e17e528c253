"""Ranks a voter gives to candidates.

A ballot holds one rank per candidate. The only thing the tally needs from a
rank is the strict comparison ``a > b``, read as "a is preferred over b", so
any type following the ``Rank`` protocol can be used in place of
``SimpleRank``.
"""

from dataclasses import dataclass
from typing import Any, Protocol, Self

from schulze.errors import ConfigurationError

MAX_RANK = 255


class Rank(Protocol):
    """What an election needs from its rank type.

    Calling the type with no arguments must produce the "unranked" value a
    fresh ballot starts with, and ``from_value`` converts raw caller input
    (for example an ``int``) into a rank.
    """

    def __gt__(self, other: Any) -> bool:
        ...

    @classmethod
    def from_value(cls, value: Any) -> Self:
        ...


@dataclass(frozen=True, eq=True)
class SimpleRank:
    """Rank from 0 (most preferred) to 255, or unranked.

    Lower values win, and every ranked value beats unranked. Two unranked
    values are equal.

    Example:
        >>> SimpleRank(0) > SimpleRank(255) > SimpleRank()
        True
    """
    value: int | None = None

    def __post_init__(self):
        if self.value is None:
            return
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ConfigurationError(f"rank must be an int or None, got {self.value!r}")
        if not 0 <= self.value <= MAX_RANK:
            raise ConfigurationError(f"rank must be between 0 and {MAX_RANK}, got {self.value}")

    @classmethod
    def ranked(cls, value: int) -> Self:
        return cls(value)

    @classmethod
    def unranked(cls) -> Self:
        return cls(None)

    @classmethod
    def from_value(cls, value: int | None) -> Self:
        """Convert an ``int`` or ``None`` into a rank."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def is_ranked(self) -> bool:
        return self.value is not None

    def _key(self) -> tuple[int, int]:
        # Larger key = more preferred
        if self.value is None:
            return (0, 0)
        return (1, -self.value)

    def __gt__(self, other: "SimpleRank") -> bool:
        if not isinstance(other, SimpleRank):
            return NotImplemented
        return self._key() > other._key()

    def __lt__(self, other: "SimpleRank") -> bool:
        if not isinstance(other, SimpleRank):
            return NotImplemented
        return self._key() < other._key()

    def __ge__(self, other: "SimpleRank") -> bool:
        if not isinstance(other, SimpleRank):
            return NotImplemented
        return self._key() >= other._key()

    def __le__(self, other: "SimpleRank") -> bool:
        if not isinstance(other, SimpleRank):
            return NotImplemented
        return self._key() <= other._key()

    def __repr__(self) -> str:
        if self.value is None:
            return "SimpleRank.unranked()"
        return f"SimpleRank({self.value})"
