"""Command line entry point: tally a ballot file with the Schulze method.

Usage:
    schulze-tally ballots.csv
    schulze-tally ballots.txt --format json -o result.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Import parsers to register them
from schulze.parsers import rank_table  # noqa: F401
from schulze.parsers import ranking_lines  # noqa: F401

from schulze.analyze import AnalysisResult, analyze_ballots
from schulze.errors import SchulzeError

logger = logging.getLogger(__name__)


def format_text(analysis: AnalysisResult) -> str:
    result = analysis.result
    names = [c.name for c in analysis.election.candidates]
    width = max((len(name) for name in names), default=0)

    lines = [f"{analysis.source}: {result.ballot_count} ballots, {len(names)} candidates", ""]
    lines.append("Ranking:")
    for p in result.placements():
        suffix = " (tied)" if p.tied else ""
        lines.append(f"  {p.rank:>3}. {p.name}{suffix}")

    lines.append("")
    lines.append("Strongest paths (row over column):")
    lines.append(" " * (width + 2) + " ".join(f"{name:>{width}}" for name in names))
    matrix = result.paths.to_matrix()
    for to, name in enumerate(names):
        cells = [
            f"{'-' if to == frm else matrix[to][frm]:>{width}}"
            for frm in range(len(names))
        ]
        lines.append(f"  {name:<{width}}" + " ".join(cells))
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schulze-tally",
        description="Rank candidates from a ballot file using the Schulze method",
    )
    parser.add_argument("input", type=Path, help="Ballot file (.csv rank table or .txt ranking lines)")
    parser.add_argument("-f", "--format", choices=["text", "json"], default="text",
                        help="Output format (default: text)")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Write output to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug output")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        content = args.input.read_bytes()
    except OSError as e:
        print(f"error: cannot read {args.input}: {e.strerror}", file=sys.stderr)
        return 1

    try:
        analysis = analyze_ballots(args.input.name, content)
    except SchulzeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        output = json.dumps(analysis.to_dict(), indent=2)
    else:
        output = format_text(analysis)

    if args.output:
        args.output.write_text(output + "\n")
        logger.debug("Wrote result to %s", args.output)
    else:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
