"""Orchestrator: read a ballot file and compute the election result."""

from dataclasses import dataclass
from typing import Any

from schulze.election import Election
from schulze.errors import BallotFormatError, SchulzeError
from schulze.models import ElectionResult
from schulze.parsers import detect_parser, detect_parser_by_content


@dataclass
class AnalysisResult:
    """A parsed election together with its result."""
    source: str
    election: Election
    result: ElectionResult

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {"source": self.source, **self.result.to_dict()}


class AnalysisError(SchulzeError):
    """Error while reading or tallying a ballot file."""
    pass


def analyze_ballots(source: str, content: bytes) -> AnalysisResult:
    """Parse a ballot file and run the election on it.

    Args:
        source: Filename (used to detect the appropriate parser)
        content: Raw bytes of the ballot file

    Raises:
        AnalysisError: If no parser is found or parsing fails
    """
    # Try the filename first, then content detection
    parser = detect_parser(source)
    if parser is None:
        parser = detect_parser_by_content(content, source)
    if parser is None:
        raise AnalysisError(
            f"Could not determine the format of {source}. "
            f"Supported formats are CSV rank tables and ranking-line text files."
        )

    try:
        election = parser.parse(source, content)
    except BallotFormatError as e:
        raise AnalysisError(f"Failed to parse ballots: {e}") from e

    return AnalysisResult(source=source, election=election, result=election.result())
