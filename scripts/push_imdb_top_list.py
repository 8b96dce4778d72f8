#!/usr/bin/env python3
"""Push an IMDb Top list to a running Advanced Sorting API.

The rankings file is a JSON object mapping IMDb IDs to ranks:
    {"tt0111161": 1, "tt0068646": 2, ...}

Run:
  python -m scripts.push_imdb_top_list rankings.json
  python -m scripts.push_imdb_top_list --reset

Optional env vars:
  ADVANCED_SORTING_URL="http://localhost:8096"
"""

import argparse
import json
import os
import sys
from pathlib import Path

import httpx


def _load_rankings(path: Path) -> dict[str, int]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object of imdbId -> rank")
    return {str(k): int(v) for k, v in data.items()}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("rankings", nargs="?", type=Path, help="JSON file with imdbId -> rank")
    parser.add_argument("--reset", action="store_true", help="Restore the built-in default list")
    parser.add_argument(
        "--base-url",
        default=os.getenv("ADVANCED_SORTING_URL", "http://localhost:8096"),
        help="API base URL",
    )
    args = parser.parse_args(argv)

    if not args.reset and args.rankings is None:
        parser.error("either a rankings file or --reset is required")

    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        if args.reset:
            response = client.post("/AdvancedSorting/ImdbTopList/Reset")
        else:
            rankings = _load_rankings(args.rankings)
            print(f"Pushing {len(rankings)} rankings to {args.base_url}")
            response = client.post("/AdvancedSorting/ImdbTopList/Update", json=rankings)

    if response.status_code != 200:
        print(f"Request failed ({response.status_code}): {response.text}", file=sys.stderr)
        return 1

    status = response.json()
    print(f"IMDb Top list: {status['entryCount']} entries, last updated {status['lastUpdated']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
