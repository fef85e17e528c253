"""Parser for plain-text ranking lines.

    candidates: A, B, C, D
    # comments and blank lines are ignored
    3 * A > B > C > D
    2 * D > A = B > C
    C > B

The first line lists the candidates. Each following line is one ballot in
order of preference, optionally repeated ``count`` times. ``=`` puts
candidates on the same rank; candidates not mentioned stay unranked.
"""

import logging
import re

from schulze.election import Election
from schulze.errors import BallotFormatError, SchulzeError
from schulze.parsers import register_parser
from schulze.parsers.base import BallotParser

logger = logging.getLogger(__name__)

HEADER_RE = re.compile(r"^\s*candidates\s*:(.*)$", re.IGNORECASE)
COUNT_RE = re.compile(r"^\s*(\d+)\s*\*\s*(.*)$")


@register_parser
class RankingLinesParser(BallotParser):
    EXTENSIONS = (".txt",)

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError:
            return False
        for line in text.splitlines():
            if line.strip() and not line.lstrip().startswith("#"):
                return HEADER_RE.match(line) is not None
        return False

    def parse(self, source: str, content: bytes) -> Election:
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise BallotFormatError(f"{source}: not valid UTF-8") from e

        election = None
        index: dict[str, int] = {}
        for line_no, raw in enumerate(text.splitlines(), start=1):
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            if election is None:
                election = self._parse_header(source, line_no, line)
                index = {c.name: c.id for c in election.candidates}
                continue

            count, ranks = self._parse_ballot(source, line_no, line, index)
            for _ in range(count):
                election.new_ballot().set_all(ranks)

        if election is None:
            raise BallotFormatError(f"{source}: missing 'candidates:' header line")

        logger.debug("Read %d ballots from %s", len(election.ballots), source)
        return election

    def _parse_header(self, source: str, line_no: int, line: str) -> Election:
        match = HEADER_RE.match(line)
        if not match:
            raise BallotFormatError(
                f"{source}, line {line_no}: expected 'candidates:' header, got {line!r}"
            )
        names = [name.strip() for name in match.group(1).split(",") if name.strip()]
        if not names:
            raise BallotFormatError(f"{source}, line {line_no}: no candidates listed")
        try:
            return Election(names)
        except SchulzeError as e:
            raise BallotFormatError(f"{source}, line {line_no}: {e}") from e

    def _parse_ballot(self, source: str, line_no: int, line: str,
                      index: dict[str, int]) -> tuple[int, list[int | None]]:
        count = 1
        match = COUNT_RE.match(line)
        if match:
            count = int(match.group(1))
            line = match.group(2)

        ranks: list[int | None] = [None] * len(index)
        for position, level in enumerate(line.split(">")):
            for name in level.split("="):
                name = name.strip()
                if name not in index:
                    raise BallotFormatError(
                        f"{source}, line {line_no}: unknown candidate {name!r}"
                    )
                if ranks[index[name]] is not None:
                    raise BallotFormatError(
                        f"{source}, line {line_no}: candidate {name!r} ranked twice"
                    )
                ranks[index[name]] = position
        return count, ranks
