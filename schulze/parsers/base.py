"""Abstract base class for ballot file parsers."""

from abc import ABC, abstractmethod

from schulze.election import Election


class BallotParser(ABC):
    """Abstract base class for reading ballot files into an Election.

    Each parser implementation handles one file format. Parsers are
    registered via the @register_parser decorator in schulze/parsers/__init__.py.
    """

    #: Filename extensions this parser claims, lower case with leading dot
    EXTENSIONS: tuple[str, ...] = ()

    def can_parse(self, source: str) -> bool:
        """Check if this parser handles the given filename by its extension."""
        return source.lower().endswith(self.EXTENSIONS) if self.EXTENSIONS else False

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        """Check if this parser can likely handle the given file content.

        Used when the filename gives no hint. Subclasses should override this
        to look for tell-tale signs of their format.
        """
        return False

    @abstractmethod
    def parse(self, source: str, content: bytes) -> Election:
        """Parse the content into an Election with its ballots filled in.

        Args:
            source: Original filename (for context)
            content: Raw bytes of the file

        Raises:
            BallotFormatError: If the content cannot be parsed
        """
        pass
