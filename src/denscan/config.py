from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from .errors import ConfigError


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Settings for the file-scanning driver.

    Attributes:
        extensions: File suffixes to scan, including the dot.
        exclude: Directory names skipped anywhere below a scanned root.
        jobs: Worker threads used by ``scan_paths``; 1 or less scans serially.
        encoding: Text encoding of scanned files.
        fail_fast: Re-raise the first per-file error instead of recording it.
    """

    extensions: tuple[str, ...] = (".rs",)
    exclude: tuple[str, ...] = ("den", ".git", "target")
    jobs: int = 1
    encoding: str = "utf-8"
    fail_fast: bool = False

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, object]) -> "ScanConfig":
        """Build a config from a mapping, ignoring unknown keys.

        >>> ScanConfig.from_dict({"extensions": [".c"], "bogus": 1}).extensions
        ('.c',)
        """
        valid = {f.name for f in fields(cls)}
        values: dict[str, object] = {}
        for k, v in config_dict.items():
            if k not in valid:
                continue
            if isinstance(v, list):
                v = tuple(v)
            values[k] = v
        return cls(**values)  # type: ignore[arg-type]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ScanConfig":
        env = os.environ if environ is None else environ
        values: dict[str, object] = {}
        if env.get("DENSCAN_EXTENSIONS"):
            values["extensions"] = _split(env["DENSCAN_EXTENSIONS"])
        if env.get("DENSCAN_EXCLUDE"):
            values["exclude"] = _split(env["DENSCAN_EXCLUDE"])
        if env.get("DENSCAN_JOBS"):
            raw = env["DENSCAN_JOBS"]
            try:
                values["jobs"] = int(raw)
            except ValueError as e:
                raise ConfigError("DENSCAN_JOBS", raw, "expected an integer") from e
        if env.get("DENSCAN_FAIL_FAST"):
            values["fail_fast"] = env["DENSCAN_FAIL_FAST"].lower() in ("1", "true", "yes", "on")
        return cls.from_dict(values)

    def with_overrides(self, **changes: object) -> "ScanConfig":
        """Return a copy with every non-``None`` change applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


def _split(raw: str) -> tuple[str, ...]:
    return tuple(p.strip() for p in raw.split(",") if p.strip())
