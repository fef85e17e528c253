"""Group rankings from ranked ballots using the Schulze method."""

from schulze.ballot import Ballot
from schulze.election import Election, Nomination, new_election
from schulze.errors import (
    BallotFormatError,
    CandidateIndexError,
    ConfigurationError,
    SchulzeError,
    SelfPairError,
)
from schulze.models import Candidate, ElectionResult, Placement
from schulze.paths import Paths
from schulze.rank import Rank, SimpleRank

__all__ = [
    "Ballot",
    "BallotFormatError",
    "Candidate",
    "CandidateIndexError",
    "ConfigurationError",
    "Election",
    "ElectionResult",
    "Nomination",
    "Paths",
    "Placement",
    "Rank",
    "SchulzeError",
    "SelfPairError",
    "SimpleRank",
    "new_election",
]
