from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .api import scan_paths
from .config import ScanConfig
from .errors import ConfigError, DenscanError
from .expand import expand_source, load_backend
from .format import format_scan_result, to_jsonable
from .log import get_logger


logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="denscan", description="Find @den annotation regions in source files")
    ap.add_argument("paths", nargs="*", default=["."], help="Files or directories to scan (default: .)")
    ap.add_argument(
        "--ext",
        action="append",
        default=None,
        help="File suffix to scan, e.g. .rs (repeatable)",
    )
    ap.add_argument(
        "--exclude",
        action="append",
        default=None,
        help="Directory name to skip (repeatable)",
    )
    ap.add_argument("-j", "--jobs", type=int, default=None, help="Parallel worker threads")
    ap.add_argument("--fail-fast", action="store_true", default=None, help="Stop at the first failing file")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("--backend", metavar="MODULE:ATTR", help="Code-generation backend to expand regions with")
    ap.add_argument("--write", action="store_true", help="With --backend, rewrite files in place")
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = _build_parser()
    args = ap.parse_args(argv)

    if args.write and not args.backend:
        ap.error("--write requires --backend")
    if args.json and args.backend and not args.write:
        ap.error("--json cannot be combined with a --backend preview, add --write")
    if args.jobs is not None and args.jobs < 1:
        ap.error("--jobs must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        env_config = ScanConfig.from_env()
    except ConfigError as e:
        ap.error(str(e))
    config = env_config.with_overrides(
        extensions=tuple(args.ext) if args.ext else None,
        exclude=tuple(args.exclude) if args.exclude else None,
        jobs=args.jobs,
        fail_fast=args.fail_fast,
    )

    try:
        res = scan_paths(args.paths, config)
    except DenscanError as e:
        print(f"error: {e}")
        return 1

    if args.json:
        payload = {
            "files": [to_jsonable(r) for r in res.reports],
            "summary": {
                "files": len(res.reports),
                "regions": res.region_count,
                "warnings": res.warning_count,
                "failed": len(res.failed),
            },
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        print(format_scan_result(res))

    if args.backend:
        try:
            _expand(res.ok, args.backend, write=args.write, encoding=config.encoding)
        except DenscanError as e:
            print(f"error: {e}")
            return 1

    return 0 if not res.failed else 1


def _expand(reports, backend_spec: str, *, write: bool, encoding: str) -> None:
    backend = load_backend(backend_spec)
    for rep in reports:
        if rep.outcome is None or not rep.outcome.regions:
            continue
        p = Path(rep.path)
        src = p.read_text(encoding=encoding)
        out = expand_source(src, backend, file=rep.path)
        if out == src:
            continue
        if write:
            p.write_text(out, encoding=encoding)
            logger.info("rewrote %s", p)
        else:
            print(f"--- {rep.path}")
            print(out, end="" if out.endswith("\n") else "\n")
