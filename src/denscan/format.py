from __future__ import annotations

from dataclasses import fields, is_dataclass
from enum import Enum

from .api import ScanResult
from .engine import ParseOutcome
from .errors import ParseError
from .region import Region


def _mark(v: int | None) -> str:
    return "-" if v is None else str(v + 1)


def format_region(region: Region, *, file: str = "<memory>") -> str:
    return (
        f"{file}:{region.call + 1}: region {region.name!r}"
        f" attributes={_mark(region.attributes)}"
        f" items={_mark(region.items)}"
        f" start={_mark(region.start)}"
        f" output={_mark(region.output)}"
        f" end={_mark(region.end)}"
    )


def format_outcome(outcome: ParseOutcome, *, file: str = "<memory>") -> str:
    out = [format_region(r, file=file) for r in outcome.regions]
    out.extend(w.format(file) for w in outcome.warnings)
    return "\n".join(out)


def format_error(err: ParseError) -> str:
    out = [w.format(err.file) for w in err.warnings]
    out.append(f"error: {err}")
    return "\n".join(out)


def format_scan_result(result: ScanResult) -> str:
    out: list[str] = []
    for rep in result.reports:
        if isinstance(rep.error, ParseError):
            out.append(format_error(rep.error))
        elif rep.error is not None:
            out.append(f"{rep.path}: error: {rep.error}")
        elif rep.outcome is not None:
            text = format_outcome(rep.outcome, file=rep.path)
            if text:
                out.append(text)
    out.append(
        f"{len(result.reports)} file(s), {result.region_count} region(s),"
        f" {result.warning_count} warning(s), {len(result.failed)} failed"
    )
    return "\n".join(out)


def to_jsonable(obj: object) -> object:
    # Line indices stay 0-based in JSON.
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: to_jsonable(getattr(obj, f.name)) for f in fields(obj)}
    if isinstance(obj, (tuple, list)):
        return [to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    return obj
