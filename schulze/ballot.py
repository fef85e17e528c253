"""A single voter's ballot."""

from collections.abc import Sequence
from typing import Any, Self

from schulze.errors import ConfigurationError, check_candidate_id
from schulze.rank import Rank, SimpleRank


class Ballot:
    """One rank per candidate, indexed by candidate position.

    Ballots are normally created through ``Election.new_ballot()`` so that
    their size always matches the election's candidate count. Every position
    starts out unranked.

    Ranks may be given as instances of the election's rank type or as raw
    values, which are converted with ``rank_type.from_value``:

        >>> ballot = Ballot(3)
        >>> ballot.set(0, 2).set(2, SimpleRank(0)).ranks
        (SimpleRank(2), SimpleRank.unranked(), SimpleRank(0))
    """

    def __init__(self, candidate_count: int, name: str | None = None,
                 rank_type: type[Rank] = SimpleRank):
        self._rank_type = rank_type
        self._ranks: list[Rank] = [rank_type() for _ in range(candidate_count)]
        self._name = name

    @property
    def name(self) -> str | None:
        """Optional voter name, ignored when tallying."""
        return self._name

    def set_name(self, name: str | None) -> Self:
        self._name = name
        return self

    @property
    def candidate_count(self) -> int:
        return len(self._ranks)

    @property
    def ranks(self) -> tuple[Rank, ...]:
        """All ranks, index-aligned with the election's candidates."""
        return tuple(self._ranks)

    def get(self, candidate_id: int) -> Rank:
        check_candidate_id(candidate_id, len(self._ranks))
        return self._ranks[candidate_id]

    def set(self, candidate_id: int, rank: Any) -> Self:
        """Replace the rank given to the candidate at ``candidate_id``."""
        check_candidate_id(candidate_id, len(self._ranks))
        self._ranks[candidate_id] = self._coerce(rank)
        return self

    def set_all(self, ranks: Sequence[Any]) -> Self:
        """Replace every rank at once.

        Raises:
            ConfigurationError: If ``ranks`` does not hold exactly one entry
                per candidate. The ballot is left untouched.
        """
        if len(ranks) != len(self._ranks):
            raise ConfigurationError(
                f"expected {len(self._ranks)} ranks, got {len(ranks)}"
            )
        converted = [self._coerce(rank) for rank in ranks]
        self._ranks = converted
        return self

    def _coerce(self, rank: Any) -> Rank:
        if isinstance(rank, self._rank_type):
            return rank
        return self._rank_type.from_value(rank)

    def __repr__(self) -> str:
        return f"Ballot(name={self._name!r}, ranks={self._ranks!r})"
