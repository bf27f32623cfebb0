from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WarningKind(str, Enum):
    UNEXPECTED_START = "unexpected-start"
    UNEXPECTED_END = "unexpected-end"
    CALL_NO_BANG = "call-no-bang"
    END_NO_BANG = "end-no-bang"
    NAME_MISMATCH = "name-mismatch"


_MESSAGES: dict[WarningKind, str] = {
    WarningKind.UNEXPECTED_START: "start marker without an open region, or start already set",
    WarningKind.UNEXPECTED_END: "end marker without an open region, or end already set",
    WarningKind.CALL_NO_BANG: "call marker is missing its closing '!'",
    WarningKind.END_NO_BANG: "end marker is missing its closing '!'",
    WarningKind.NAME_MISMATCH: "end marker name does not match the open call",
}


@dataclass(frozen=True, slots=True)
class ParseWarning:
    """A non-fatal anomaly at a 0-based line index."""

    kind: WarningKind
    line: int

    @property
    def message(self) -> str:
        return _MESSAGES[self.kind]

    def format(self, file: str = "<memory>") -> str:
        return f"{file}:{self.line + 1}: warning: {self.message} [{self.kind.value}]"
