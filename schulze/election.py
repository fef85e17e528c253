"""Elections: nomination, ballot collection and tallying."""

import logging
import time
from collections.abc import Iterable

from schulze.ballot import Ballot
from schulze.errors import ConfigurationError
from schulze.models import Candidate, ElectionResult
from schulze.rank import Rank, SimpleRank
from schulze.ranking import flatten, rank_candidates
from schulze.solver import find_strongest_paths

logger = logging.getLogger(__name__)


class Nomination:
    """Collects candidates before an election is opened.

    Example:
        >>> nomination = Nomination()
        >>> election = nomination.nominate("Dianne").nominate("John").build()
        >>> [c.name for c in election.candidates]
        ['Dianne', 'John']
    """

    def __init__(self):
        self._names: list[str] = []

    def nominate(self, name: str) -> "Nomination":
        """Add a candidate.

        Raises:
            ConfigurationError: If ``name`` has been nominated already
        """
        name = str(name)
        if name in self._names:
            raise ConfigurationError(f"can't add second candidate with name {name!r}")
        self._names.append(name)
        return self

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._names)

    def build(self, rank_type: type[Rank] = SimpleRank) -> "Election":
        return Election(self._names, rank_type=rank_type)

    election = build


class Election:
    """A Schulze election over a fixed list of candidates.

    Candidates are fixed at construction. Ballots may be added at any time;
    each call to ``result()`` tallies all ballots present at that moment.

    Args:
        candidates: Unique candidate names in nomination order
        rank_type: Rank implementation used on ballots (see ``schulze.rank``)

    Raises:
        ConfigurationError: If a candidate name appears twice
    """

    def __init__(self, candidates: Iterable[str], rank_type: type[Rank] = SimpleRank):
        names = [str(name) for name in candidates]
        seen: set[str] = set()
        for name in names:
            if name in seen:
                raise ConfigurationError(f"can't add second candidate with name {name!r}")
            seen.add(name)

        self._candidates = tuple(Candidate(id=i, name=name) for i, name in enumerate(names))
        self._rank_type = rank_type
        self._ballots: list[Ballot] = []

    @property
    def candidates(self) -> tuple[Candidate, ...]:
        return self._candidates

    @property
    def ballots(self) -> tuple[Ballot, ...]:
        return tuple(self._ballots)

    @property
    def rank_type(self) -> type[Rank]:
        return self._rank_type

    def new_ballot(self, name: str | None = None) -> Ballot:
        """Append a new, fully unranked ballot and return it for filling in."""
        ballot = Ballot(len(self._candidates), name=name, rank_type=self._rank_type)
        self._ballots.append(ballot)
        return ballot

    def result(self) -> ElectionResult:
        """Tally all ballots and rank the candidates."""
        n = len(self._candidates)
        logger.debug("Computing result for %d candidates and %d ballots", n, len(self._ballots))
        start = time.perf_counter()

        preferences, paths = find_strongest_paths(self._ballots, n)
        groups = rank_candidates(paths)

        logger.debug("Result computed in %.3fs", time.perf_counter() - start)
        return ElectionResult(
            ranked_candidates=tuple(self._candidates[i] for i in flatten(groups)),
            tie_groups=tuple(
                tuple(self._candidates[i] for i in group) for group in groups
            ),
            paths=paths,
            preferences=preferences,
            ballot_count=len(self._ballots),
        )


def new_election(candidates: Iterable[str], rank_type: type[Rank] = SimpleRank) -> Election:
    """Create an election for the given candidate names."""
    return Election(candidates, rank_type=rank_type)
