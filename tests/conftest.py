"""Shared test helpers."""

from schulze.election import Election
from schulze.models import ElectionResult


def make_election(rankings_table: dict[str, dict[str, int | None]]) -> Election:
    """Build an Election from a compact rankings table.

    Args:
        rankings_table: {voter: {candidate: rank}}. Candidates are taken from
            the first voter, in order.
    """
    candidates = list(next(iter(rankings_table.values())).keys())
    election = Election(candidates)
    for voter, ranks in rankings_table.items():
        election.new_ballot(voter).set_all([ranks[c] for c in candidates])
    return election


def vote(election: Election, count: int, order: str) -> None:
    """Add ``count`` ballots ranking single-letter candidates in ``order``.

    ``vote(e, 5, "ACB")`` adds five ballots giving A rank 0, C rank 1 and
    B rank 2.
    """
    index = {c.name: c.id for c in election.candidates}
    for _ in range(count):
        ballot = election.new_ballot()
        for position, name in enumerate(order):
            ballot.set(index[name], position)


def letter_election(letters: str) -> Election:
    return Election(list(letters))


def named_paths(result: ElectionResult) -> list[tuple[str, str, int]]:
    """Path strengths as ``(to, from, strength)`` using candidate names."""
    names = {c.id: c.name for c in result.ranked_candidates}
    return [(names[to], names[frm], s) for to, frm, s in result.paths]


def ranking_names(result: ElectionResult) -> list[str]:
    return [c.name for c in result.ranked_candidates]


def group_names(result: ElectionResult) -> list[list[str]]:
    return [[c.name for c in group] for group in result.tie_groups]
