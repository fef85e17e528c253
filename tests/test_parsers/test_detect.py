"""Tests for parser detection."""

from schulze.parsers import detect_parser, detect_parser_by_content, get_all_parsers
from schulze.parsers.rank_table import RankTableParser
from schulze.parsers.ranking_lines import RankingLinesParser


class TestDetectParser:
    def test_registry(self):
        parsers = get_all_parsers()
        assert RankTableParser in parsers
        assert RankingLinesParser in parsers

    def test_by_extension(self):
        assert isinstance(detect_parser("votes.csv"), RankTableParser)
        assert isinstance(detect_parser("votes.txt"), RankingLinesParser)

    def test_unknown_extension(self):
        assert detect_parser("votes.pdf") is None


class TestDetectParserByContent:
    def test_detects_rank_table(self, rank_table_csv):
        parser = detect_parser_by_content(rank_table_csv, "upload")
        assert isinstance(parser, RankTableParser)

    def test_detects_ranking_lines(self, ranking_lines_txt):
        parser = detect_parser_by_content(ranking_lines_txt, "upload")
        assert isinstance(parser, RankingLinesParser)

    def test_returns_none_for_plain_text(self):
        assert detect_parser_by_content(b"Hello world", "notes") is None

    def test_returns_none_for_empty_content(self):
        assert detect_parser_by_content(b"", "empty") is None
