"""Pairwise strength tables.

The same structure holds both the raw pairwise preference counts and the
strongest-path strengths derived from them. Entries are stored densely in a
flat tuple at ``to * size + from``; the diagonal is never read.

Example:
    >>> paths = Paths.from_matrix([[0, 8, 5], [7, 0, 9], [2, 3, 0]])
    >>> paths.strength(2, 1)
    3
    >>> list(paths)[:2]
    [(0, 1, 8), (0, 2, 5)]
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Self

from schulze.errors import ConfigurationError, SelfPairError, check_candidate_id


@dataclass(frozen=True)
class Paths:
    """Immutable N×N table of strengths between ordered candidate pairs.

    Attributes:
        size: Number of candidates
        strengths: Flat row-major values, ``strengths[to * size + from]``
    """
    size: int
    strengths: tuple[int, ...]

    def __post_init__(self):
        if len(self.strengths) != self.size * self.size:
            raise ConfigurationError(
                f"expected {self.size * self.size} strengths for {self.size} "
                f"candidates, got {len(self.strengths)}"
            )

    @classmethod
    def zeros(cls, size: int) -> Self:
        return cls(size=size, strengths=(0,) * (size * size))

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[int]]) -> Self:
        """Build from a square nested list; diagonal values are discarded."""
        size = len(matrix)
        flat = []
        for to, row in enumerate(matrix):
            if len(row) != size:
                raise ConfigurationError(f"row {to} has {len(row)} entries, expected {size}")
            flat.extend(0 if to == frm else value for frm, value in enumerate(row))
        return cls(size=size, strengths=tuple(flat))

    def to_matrix(self) -> list[list[int]]:
        """Return a mutable nested-list copy (``matrix[to][from]``)."""
        n = self.size
        return [list(self.strengths[to * n:(to + 1) * n]) for to in range(n)]

    def strength(self, to: int, from_: int) -> int:
        """Strength of ``to`` over ``from_``.

        For a preference table this is the number of ballots ranking ``to``
        above ``from_``; for a path table it is the strength of the strongest
        path from ``to`` to ``from_``.

        Raises:
            SelfPairError: If ``to == from_``
            CandidateIndexError: If either id is out of range
        """
        if to == from_:
            raise SelfPairError("candidates have no preference over themselves")
        check_candidate_id(to, self.size)
        check_candidate_id(from_, self.size)
        return self.strengths[to * self.size + from_]

    def beats(self, to: int, from_: int) -> bool:
        """Whether ``to`` is stronger against ``from_`` than the reverse."""
        return self.strength(to, from_) > self.strength(from_, to)

    def __iter__(self) -> Iterator[tuple[int, int, int]]:
        """Yield ``(to, from, strength)`` for every ordered pair, ``to`` first."""
        n = self.size
        for to in range(n):
            for frm in range(n):
                if to != frm:
                    yield to, frm, self.strengths[to * n + frm]

    def __len__(self) -> int:
        return self.size * (self.size - 1)
