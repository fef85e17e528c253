"""Parser for CSV rank tables.

One column per candidate and one row per ballot:

    voter,Alice,Bob,Carol
    V1,1,2,3
    V2,2,,1

The ``voter`` column is optional. Cells hold integer ranks (lower is better);
blank cells leave the candidate unranked.
"""

import csv
import io
import logging

from schulze.election import Election
from schulze.errors import BallotFormatError, SchulzeError
from schulze.parsers import register_parser
from schulze.parsers.base import BallotParser

logger = logging.getLogger(__name__)

VOTER_COLUMN = "voter"


@register_parser
class RankTableParser(BallotParser):
    EXTENSIONS = (".csv",)

    def can_parse_content(self, content: bytes, filename: str) -> bool:
        try:
            first_line = content.decode("utf-8-sig").splitlines()[0]
        except (UnicodeDecodeError, IndexError):
            return False
        return "," in first_line and ">" not in first_line and ":" not in first_line

    def parse(self, source: str, content: bytes) -> Election:
        try:
            text = content.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise BallotFormatError(f"{source}: not valid UTF-8") from e

        reader = csv.reader(io.StringIO(text))
        rows = [(reader.line_num, row) for row in reader if any(cell.strip() for cell in row)]
        if not rows:
            raise BallotFormatError(f"{source}: no header row found")

        header = [cell.strip() for cell in rows[0][1]]
        has_voter = header[0].lower() == VOTER_COLUMN
        names = header[1:] if has_voter else header
        if not names:
            raise BallotFormatError(f"{source}: no candidates in header")

        try:
            election = Election(names)
        except SchulzeError as e:
            raise BallotFormatError(f"{source}: {e}") from e

        for line_no, row in rows[1:]:
            cells = [cell.strip() for cell in row]
            voter = None
            if has_voter:
                voter = cells.pop(0) or None
            if len(cells) != len(names):
                raise BallotFormatError(
                    f"{source}, line {line_no}: expected {len(names)} ranks, got {len(cells)}"
                )
            try:
                ranks = [election.rank_type.from_value(int(cell) if cell else None)
                         for cell in cells]
            except ValueError as e:
                raise BallotFormatError(f"{source}, line {line_no}: {e}") from e
            election.new_ballot(voter).set_all(ranks)

        logger.debug("Read %d ballots from %s", len(election.ballots), source)
        return election
