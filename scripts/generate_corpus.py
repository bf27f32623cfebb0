from __future__ import annotations

import argparse
import json
from pathlib import Path

from denscan.format import to_jsonable
from denscan.testing import generate_annotated_sources


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="generate_corpus",
        description="Write annotated .rs cases, each with a .regions.json of the regions it must parse to",
    )
    ap.add_argument("out", help="Output directory")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve()
    out_dir.mkdir(parents=True, exist_ok=True)

    cases = generate_annotated_sources(seed=args.seed, count=args.count)
    for i, (src, regions) in enumerate(cases):
        stem = f"case_{i:06d}"
        (out_dir / f"{stem}.rs").write_text(src, encoding="utf-8")
        expected = json.dumps(to_jsonable(regions), indent=2, sort_keys=True)
        (out_dir / f"{stem}.regions.json").write_text(expected + "\n", encoding="utf-8")

    print(f"{len(cases)} case(s) in {out_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
