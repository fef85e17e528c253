"""Ballot file parsers for the supported input formats."""

from .base import BallotParser

# Parser registry - import parsers here to register them
_parsers: list[type[BallotParser]] = []


def register_parser(parser_class: type[BallotParser]) -> type[BallotParser]:
    """Decorator to register a parser class."""
    _parsers.append(parser_class)
    return parser_class


def get_all_parsers() -> list[type[BallotParser]]:
    """Return all registered parser classes."""
    return _parsers.copy()


def detect_parser(source: str) -> BallotParser | None:
    """Return a parser instance for the given filename, by extension."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse(source):
            return parser
    return None


def detect_parser_by_content(content: bytes, filename: str) -> BallotParser | None:
    """Return a parser instance by inspecting the file content."""
    for parser_class in _parsers:
        parser = parser_class()
        if parser.can_parse_content(content, filename):
            return parser
    return None
