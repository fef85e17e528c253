"""Data models for candidates and election results."""

from dataclasses import dataclass
from typing import Any, Self

from schulze.paths import Paths


@dataclass(frozen=True)
class Candidate:
    """A nominated candidate.

    Attributes:
        id: Position assigned at nomination, used as the index everywhere
        name: Display name, unique within an election
    """
    id: int
    name: str


@dataclass
class Placement:
    """A candidate's placement in an election result.

    Attributes:
        name: Candidate name
        rank: 1-indexed placement (tied candidates share the same rank)
        tied: Whether this candidate is tied with others at this rank
    """
    name: str
    rank: int
    tied: bool

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "rank": self.rank, "tied": self.tied}

    @classmethod
    def build_ranking(cls, groups: list[list[str]]) -> list[Self]:
        """Build Placements from ordered tie groups.

        Args:
            groups: Candidate names from 1st to last place. Each group holds
                one name, or several when those candidates are tied.
        """
        placements = []
        rank = 1
        for group in groups:
            tied = len(group) > 1
            for name in group:
                placements.append(cls(name=name, rank=rank, tied=tied))
            rank += len(group)
        return placements


@dataclass(frozen=True)
class ElectionResult:
    """Snapshot of an election at the time ``Election.result()`` was called.

    Adding ballots afterwards does not update an existing result.

    Attributes:
        ranked_candidates: Candidates from winner to last place
        tie_groups: The same candidates grouped by shared place
        paths: Strongest-path strengths between every candidate pair
        preferences: Raw pairwise counts (ballots preferring ``to`` over ``from``)
        ballot_count: Number of ballots tallied
    """
    ranked_candidates: tuple[Candidate, ...]
    tie_groups: tuple[tuple[Candidate, ...], ...]
    paths: Paths
    preferences: Paths
    ballot_count: int

    @property
    def winners(self) -> tuple[Candidate, ...]:
        """Candidates sharing first place (more than one only on a tie)."""
        return self.tie_groups[0] if self.tie_groups else ()

    def placements(self) -> list[Placement]:
        return Placement.build_ranking(
            [[c.name for c in group] for group in self.tie_groups]
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        names = [c.name for c in sorted(self.ranked_candidates, key=lambda c: c.id)]
        return {
            "candidates": names,
            "ballot_count": self.ballot_count,
            "ranking": [p.to_dict() for p in self.placements()],
            "pairwise_preferences": [
                {"to": names[to], "from": names[frm], "count": count}
                for to, frm, count in self.preferences
            ],
            "path_strengths": [
                {"to": names[to], "from": names[frm], "strength": strength}
                for to, frm, strength in self.paths
            ],
        }
