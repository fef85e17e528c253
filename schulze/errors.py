"""Exceptions raised by the schulze package."""


class SchulzeError(Exception):
    """Base class for errors raised by this package."""
    pass


class ConfigurationError(SchulzeError, ValueError):
    """Raised when an election or ballot is set up inconsistently.

    Duplicate candidate names and bulk rank assignments of the wrong length
    both end up here. Nothing is modified when this is raised.
    """
    pass


class CandidateIndexError(SchulzeError, IndexError):
    """Raised when a candidate id is outside ``0..N-1``."""
    pass


class SelfPairError(SchulzeError, ValueError):
    """Raised when asking for the preference of a candidate over itself."""
    pass


class BallotFormatError(SchulzeError, ValueError):
    """Raised when a ballot file cannot be read."""
    pass


def check_candidate_id(candidate_id: int, count: int) -> None:
    """Raise CandidateIndexError unless ``0 <= candidate_id < count``."""
    if not 0 <= candidate_id < count:
        raise CandidateIndexError(
            f"candidate id {candidate_id} out of range for {count} candidates"
        )
