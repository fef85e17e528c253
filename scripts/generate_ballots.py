"""Generate a synthetic CSV rank table for trying out schulze-tally.

Candidate and voter names come from faker with a fixed seed so the output is
reproducible. Each voter ranks a random subset of the candidates; the rest are
left blank (unranked).

Usage:
    python scripts/generate_ballots.py -c 5 -n 200
    python scripts/generate_ballots.py -c 8 -n 1000 -o ballots.csv --seed 7
"""

import argparse
import csv
import random
from pathlib import Path

from faker import Faker

SEED = 20260201
DEFAULT_OUTPUT = Path("ballots.csv")


def generate_names(fake: Faker, count: int) -> list[str]:
    """Return ``count`` distinct full names."""
    names: list[str] = []
    while len(names) < count:
        name = fake.name()
        if name not in names:
            names.append(name)
    return names


def generate_ballot(rng: random.Random, candidate_count: int,
                    min_ranked: int) -> list[int | None]:
    """One voter's ranks: a random order over a random number of candidates."""
    ranked = rng.randint(min(min_ranked, candidate_count), candidate_count)
    order = rng.sample(range(candidate_count), ranked)
    ranks: list[int | None] = [None] * candidate_count
    for position, candidate in enumerate(order):
        ranks[candidate] = position
    return ranks


def main():
    parser = argparse.ArgumentParser(description="Generate a random Schulze ballot CSV")
    parser.add_argument("-c", "--candidates", type=int, default=5, help="Number of candidates")
    parser.add_argument("-n", "--ballots", type=int, default=100, help="Number of ballots")
    parser.add_argument("--min-ranked", type=int, default=1,
                        help="Fewest candidates each voter ranks (default: 1)")
    parser.add_argument("--seed", type=int, default=SEED, help=f"Random seed (default: {SEED})")
    parser.add_argument("-o", "--output", default=str(DEFAULT_OUTPUT),
                        help=f"Output path (default: {DEFAULT_OUTPUT})")
    args = parser.parse_args()

    fake = Faker()
    Faker.seed(args.seed)
    rng = random.Random(args.seed)

    candidates = generate_names(fake, args.candidates)
    voters = [fake.name() for _ in range(args.ballots)]

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["voter", *candidates])
        for voter in voters:
            ranks = generate_ballot(rng, len(candidates), args.min_ranked)
            writer.writerow([voter, *("" if r is None else r for r in ranks)])

    print(f"Written {len(voters)} ballots for {len(candidates)} candidates to {output_path}")


if __name__ == "__main__":
    main()
