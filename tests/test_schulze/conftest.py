"""Shared fixtures for election tests."""

import pytest
from tests.conftest import letter_election, make_election, vote


@pytest.fixture
def clear_winner():
    """Clear winner, 3 voters, 4 candidates.

         V1  V2  V3
    A     1   1   2
    B     2   3   1
    C     3   2   3
    D     4   4   4

    A beats all, B beats C and D, C beats D.
    """
    return make_election({
        "V1": {"A": 1, "B": 2, "C": 3, "D": 4},
        "V2": {"A": 1, "B": 3, "C": 2, "D": 4},
        "V3": {"A": 2, "B": 1, "C": 3, "D": 4},
    })


@pytest.fixture
def disagreement():
    """5 voters, 4 candidates, no cycles.

         V1  V2  V3  V4  V5
    A     1   2   3   1   4
    B     2   1   4   3   1
    C     3   4   1   4   2
    D     4   3   2   2   3
    """
    return make_election({
        "V1": {"A": 1, "B": 2, "C": 3, "D": 4},
        "V2": {"A": 2, "B": 1, "C": 4, "D": 3},
        "V3": {"A": 3, "B": 4, "C": 1, "D": 2},
        "V4": {"A": 1, "B": 3, "C": 4, "D": 2},
        "V5": {"A": 4, "B": 1, "C": 2, "D": 3},
    })


@pytest.fixture
def perfect_cycle():
    """Perfect cycle, 3 voters, 3 candidates.

         V1  V2  V3
    A     1   3   2
    B     2   1   3
    C     3   2   1

    A>B, B>C and C>A each 2-1, so every path strength is 2.
    """
    return make_election({
        "V1": {"A": 1, "B": 2, "C": 3},
        "V2": {"A": 3, "B": 1, "C": 2},
        "V3": {"A": 2, "B": 3, "C": 1},
    })


@pytest.fixture
def wikipedia_example():
    """Wikipedia Schulze method example: 5 candidates, 45 ballots."""
    election = letter_election("ABCDE")
    vote(election, 5, "ACBED")
    vote(election, 5, "ADECB")
    vote(election, 8, "BEDAC")
    vote(election, 3, "CABED")
    vote(election, 7, "CAEBD")
    vote(election, 2, "CBADE")
    vote(election, 7, "DCEBA")
    vote(election, 8, "EBADC")
    return election


@pytest.fixture
def electorama_example2():
    """Electorama wiki example 2: 4 candidates, 30 ballots."""
    election = letter_election("ABCD")
    vote(election, 5, "ACBD")
    vote(election, 2, "ACDB")
    vote(election, 3, "ADCB")
    vote(election, 4, "BACD")
    vote(election, 3, "CBDA")
    vote(election, 3, "CDBA")
    vote(election, 1, "DACB")
    vote(election, 5, "DBAC")
    vote(election, 4, "DCBA")
    return election


@pytest.fixture
def electorama_example3():
    """Electorama wiki example 3: 5 candidates, 30 ballots."""
    election = letter_election("ABCDE")
    vote(election, 3, "ABDEC")
    vote(election, 5, "ADEBC")
    vote(election, 1, "ADECB")
    vote(election, 2, "BADEC")
    vote(election, 2, "BDECA")
    vote(election, 4, "CABDE")
    vote(election, 6, "CBADE")
    vote(election, 2, "DBECA")
    vote(election, 5, "DECAB")
    return election


@pytest.fixture
def electorama_example4():
    """Electorama wiki example 4: 4 candidates, 9 ballots, several ties."""
    election = letter_election("ABCD")
    vote(election, 3, "ABCD")
    vote(election, 2, "DABC")
    vote(election, 2, "DBCA")
    vote(election, 2, "CBDA")
    return election
