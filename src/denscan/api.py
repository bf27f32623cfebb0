from __future__ import annotations

import os
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path

from .config import ScanConfig
from .engine import Engine, ParseOutcome
from .errors import ParseError, SourceReadError
from .log import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class FileReport:
    path: str
    outcome: ParseOutcome | None = None
    error: ParseError | str | None = None  # str for I/O and decode failures

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True, slots=True)
class ScanResult:
    reports: tuple[FileReport, ...]

    @property
    def ok(self) -> tuple[FileReport, ...]:
        return tuple(r for r in self.reports if r.ok)

    @property
    def failed(self) -> tuple[FileReport, ...]:
        return tuple(r for r in self.reports if not r.ok)

    @property
    def region_count(self) -> int:
        return sum(len(r.outcome.regions) for r in self.reports if r.outcome is not None)

    @property
    def warning_count(self) -> int:
        return sum(len(r.outcome.warnings) for r in self.reports if r.outcome is not None)


def parse_source(src: str, *, file: str = "<memory>") -> ParseOutcome:
    return Engine(file=file).run(src)


def parse_file(path: str | Path, *, encoding: str = "utf-8") -> ParseOutcome:
    p = Path(path).expanduser().resolve()
    src = p.read_text(encoding=encoding)
    return parse_source(src, file=str(p))


def iter_source_files(
    paths: Iterable[str | Path],
    config: ScanConfig | None = None,
) -> list[Path]:
    cfg = config or ScanConfig()
    exts = set(cfg.extensions)
    skip = set(cfg.exclude)
    out: set[Path] = set()

    for raw in paths:
        p = Path(raw).expanduser().resolve()
        if p.is_file():
            if p.suffix in exts:
                out.add(p)
            continue
        if not p.is_dir():
            logger.warning("skipping missing path %s", raw)
            continue
        for root, dirs, files in os.walk(p):
            dirs[:] = [d for d in dirs if d not in skip]
            for fn in files:
                if os.path.splitext(fn)[1] in exts:
                    out.add(Path(root) / fn)

    return sorted(out)


def scan_paths(
    paths: Iterable[str | Path],
    config: ScanConfig | None = None,
) -> ScanResult:
    cfg = config or ScanConfig()
    files = iter_source_files(paths, cfg)
    logger.debug("scanning %d file(s) with %d job(s)", len(files), max(cfg.jobs, 1))

    def scan_one(p: Path) -> FileReport:
        logger.debug("reading %s", p)
        try:
            outcome = parse_file(p, encoding=cfg.encoding)
        except ParseError as e:
            if cfg.fail_fast:
                raise
            logger.warning("%s", e)
            return FileReport(path=str(p), error=e)
        except (OSError, UnicodeDecodeError) as e:
            if cfg.fail_fast:
                raise SourceReadError(file=str(p), message=str(e)) from e
            logger.warning("cannot read %s: %s", p, e)
            return FileReport(path=str(p), error=f"cannot read file: {e}")
        return FileReport(path=str(p), outcome=outcome)

    if cfg.jobs > 1 and len(files) > 1:
        with ThreadPoolExecutor(max_workers=cfg.jobs) as pool:
            reports = list(pool.map(scan_one, files))
    else:
        reports = [scan_one(p) for p in files]

    result = ScanResult(reports=tuple(reports))
    logger.info(
        "scanned %d file(s): %d region(s), %d warning(s), %d failed",
        len(result.reports),
        result.region_count,
        result.warning_count,
        len(result.failed),
    )
    return result
