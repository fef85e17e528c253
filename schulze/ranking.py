"""Order candidates from a resolved path table."""

import logging

from schulze.paths import Paths

logger = logging.getLogger(__name__)


def rank_candidates(paths: Paths) -> list[list[int]]:
    """Group candidate ids into ordered tie groups, winners first.

    Candidate s is placed above o whenever ``path(s, o) > path(o, s)``. The
    first group holds every candidate no other candidate beats; each later
    group is found the same way among the candidates left. Within a group
    candidates stay in nomination (id) order.

    Raises:
        ValueError: If the "beats" relation in ``paths`` has a cycle, which
            cannot happen for a table produced by ``widen_paths``.
    """
    remaining = list(range(paths.size))
    groups: list[list[int]] = []
    while remaining:
        group = [
            c for c in remaining
            if not any(paths.beats(o, c) for o in remaining if o != c)
        ]
        if not group:
            raise ValueError(
                f"path strengths contain a cycle among candidates {remaining}"
            )
        groups.append(group)
        remaining = [c for c in remaining if c not in group]

    if any(len(g) > 1 for g in groups):
        logger.debug("Tie groups in ranking: %s", [g for g in groups if len(g) > 1])
    return groups


def flatten(groups: list[list[int]]) -> list[int]:
    return [c for group in groups for c in group]
