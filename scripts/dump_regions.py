from __future__ import annotations

import argparse
import json
from pathlib import Path

from denscan import ParseError, parse_file
from denscan.format import format_error, format_outcome, to_jsonable


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="dump_regions")
    ap.add_argument("files", nargs="+")
    ap.add_argument(
        "--check",
        action="store_true",
        help="Compare against FILE's sibling .regions.json (as written by generate_corpus.py)",
    )
    args = ap.parse_args(argv)

    rc = 0
    for f in args.files:
        try:
            outcome = parse_file(f)
        except ParseError as e:
            print(format_error(e))
            rc = 1
            continue

        if not args.check:
            print(format_outcome(outcome, file=f))
            continue

        expected_path = Path(f).with_suffix(".regions.json")
        expected = json.loads(expected_path.read_text(encoding="utf-8"))
        if to_jsonable(outcome.regions) != expected:
            print(f"{f}: regions differ from {expected_path.name}")
            print(format_outcome(outcome, file=f))
            rc = 1
    return rc


if __name__ == "__main__":
    raise SystemExit(main())
