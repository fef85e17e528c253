"""Schulze strongest-path computation.

Algorithm:
1. Tally pairwise preferences: d[i][j] = ballots ranking i strictly above j
2. Keep only direct wins: p[i][j] = d[i][j] if d[i][j] > d[j][i], else 0
3. Widen paths with a Floyd-Warshall variant (max of mins instead of min of sums)

Complexity: O(B·N²) for the tally and O(N³) for the widening, where B is the
number of ballots and N the number of candidates.
"""

import logging
from collections.abc import Iterable

from schulze.ballot import Ballot
from schulze.errors import ConfigurationError
from schulze.paths import Paths

logger = logging.getLogger(__name__)


def count_preferences(ballots: Iterable[Ballot], n: int) -> list[list[int]]:
    """Build the pairwise preference matrix in a single pass over the ballots.

    Ties on a ballot count toward neither direction.
    """
    d = [[0] * n for _ in range(n)]
    for ballot in ballots:
        ranks = ballot.ranks
        if len(ranks) != n:
            raise ConfigurationError(
                f"ballot has {len(ranks)} ranks but the election has {n} candidates"
            )
        for i in range(n):
            row = d[i]
            rank_i = ranks[i]
            for j in range(n):
                if i != j and rank_i > ranks[j]:
                    row[j] += 1
    return d


def direct_wins(d: list[list[int]]) -> list[list[int]]:
    """Keep d[i][j] where i beats j head to head, zero elsewhere."""
    n = len(d)
    p = [[0] * n for _ in range(n)]
    for i in range(n):
        for j in range(n):
            if i != j and d[i][j] > d[j][i]:
                p[i][j] = d[i][j]
    return p


def widen_paths(p: list[list[int]]) -> list[list[int]]:
    """Replace direct wins with strongest-path strengths, in place.

    The intermediate candidate ``i`` must be the outermost loop. Running this
    again on its own output changes nothing.
    """
    n = len(p)
    for i in range(n):
        row_i = p[i]
        for j in range(n):
            if j == i:
                continue
            row_j = p[j]
            j_i = row_j[i]
            if not j_i:
                continue
            for k in range(n):
                if k == i or k == j:
                    continue
                # Strength through i is the weaker of the two links
                via_i = min(j_i, row_i[k])
                if via_i > row_j[k]:
                    row_j[k] = via_i
    return p


def find_strongest_paths(ballots: Iterable[Ballot], n: int) -> tuple[Paths, Paths]:
    """Tally ballots and compute strongest paths.

    Returns:
        ``(preferences, paths)``: raw pairwise counts and path strengths
    """
    d = count_preferences(ballots, n)
    logger.debug("Tallied pairwise preferences for %d candidates", n)
    p = widen_paths(direct_wins(d))
    logger.debug("Widened strongest paths for %d candidates", n)
    return Paths.from_matrix(d), Paths.from_matrix(p)
