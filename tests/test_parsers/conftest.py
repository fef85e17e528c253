"""Shared fixtures for parser tests."""

import pytest


@pytest.fixture
def rank_table_csv():
    return (
        b"voter,Alice,Bob,Carol\n"
        b"V1,1,2,3\n"
        b"V2,2,,1\n"
        b"V3,,1,\n"
    )


@pytest.fixture
def ranking_lines_txt():
    """Electorama example 2 in ranking-line form."""
    return (
        b"# Electorama example 2\n"
        b"candidates: A, B, C, D\n"
        b"\n"
        b"5 * A > C > B > D\n"
        b"2 * A > C > D > B\n"
        b"3 * A > D > C > B\n"
        b"4 * B > A > C > D\n"
        b"3 * C > B > D > A\n"
        b"3 * C > D > B > A\n"
        b"1 * D > A > C > B\n"
        b"5 * D > B > A > C\n"
        b"4 * D > C > B > A\n"
    )
