from __future__ import annotations

from .api import FileReport, ScanResult, parse_file, parse_source, scan_paths
from .classifier import classify
from .config import ScanConfig
from .diagnostics import ParseWarning, WarningKind
from .engine import Engine, ParseOutcome
from .errors import BackendError, DenscanError, ParseError
from .expand import expand_source, load_backend
from .region import Region, RegionError
from .tags import Tag, TagKind

__all__ = [
    "BackendError",
    "DenscanError",
    "Engine",
    "FileReport",
    "ParseError",
    "ParseOutcome",
    "ParseWarning",
    "Region",
    "RegionError",
    "ScanConfig",
    "ScanResult",
    "Tag",
    "TagKind",
    "WarningKind",
    "classify",
    "expand_source",
    "load_backend",
    "parse_file",
    "parse_source",
    "scan_paths",
]
