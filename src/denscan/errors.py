from __future__ import annotations

from dataclasses import dataclass, field

from .diagnostics import ParseWarning
from .region import Region, RegionError


class DenscanError(Exception):
    pass


_HINTS: dict[RegionError, str] = {
    RegionError.MISSING_START: "add a // ```@den``` line after the input items",
    RegionError.MISSING_END: "add a // ```@den```end:NAME! line after the generated output",
}


@dataclass(slots=True)
class ParseError(DenscanError):
    """A region broke one of its structural invariants.

    ``trigger_line`` is the call line that forced validation, or ``None``
    when the problem was found at end of input. ``regions`` and ``warnings``
    hold what was finalized before parsing stopped.
    """

    kind: RegionError
    region: Region
    trigger_line: int | None = None
    file: str = "<memory>"
    regions: tuple[Region, ...] = field(default_factory=tuple)
    warnings: tuple[ParseWarning, ...] = field(default_factory=tuple)

    @property
    def message(self) -> str:
        what = "start" if self.kind is RegionError.MISSING_START else "end"
        where = "end of input" if self.trigger_line is None else f"line {self.trigger_line + 1}"
        return f"region {self.region.name!r} is missing its {what} marker (detected at {where})"

    @property
    def hint(self) -> str:
        return _HINTS[self.kind]

    def __str__(self) -> str:
        return f"{self.file}:{self.region.call + 1}: {self.message}\nhint: {self.hint}"


@dataclass(slots=True)
class BackendError(DenscanError):
    message: str
    file: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        if self.file is None:
            return self.message
        if self.line is None:
            return f"{self.file}: {self.message}"
        return f"{self.file}:{self.line + 1}: {self.message}"


@dataclass(slots=True)
class SourceReadError(DenscanError):
    """A scanned file could not be read or decoded."""

    file: str
    message: str

    def __str__(self) -> str:
        return f"{self.file}: cannot read file: {self.message}"


@dataclass(slots=True)
class ConfigError(DenscanError):
    variable: str
    value: str
    message: str

    def __str__(self) -> str:
        return f"{self.variable}={self.value!r}: {self.message}"
