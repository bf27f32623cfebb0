from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


COMMENT_PREFIX = "//"
CALL_MARKER = "@den::"
FENCE_MARKER = "```@den```"
END_KEYWORD = "end:"
BANG = "!"


class TagKind(str, Enum):
    # Comment lines carrying a marker
    CALL = "call"
    CALL_NO_BANG = "call-no-bang"
    START = "start"
    END = "end"
    END_NO_BANG = "end-no-bang"

    # Any other comment line
    ATTRIBUTE = "attribute"

    # Code lines
    ITEM = "item"
    EMPTY = "empty"


@dataclass(frozen=True, slots=True)
class Tag:
    kind: TagKind
    name: str | None = None  # only for CALL and END

    def __repr__(self) -> str:
        if self.name is None:
            return f"Tag({self.kind.name})"
        return f"Tag({self.kind.name}, {self.name!r})"


EMPTY = Tag(TagKind.EMPTY)
ITEM = Tag(TagKind.ITEM)
ATTRIBUTE = Tag(TagKind.ATTRIBUTE)
START = Tag(TagKind.START)
CALL_NO_BANG = Tag(TagKind.CALL_NO_BANG)
END_NO_BANG = Tag(TagKind.END_NO_BANG)


def call(name: str) -> Tag:
    return Tag(TagKind.CALL, name)


def end(name: str) -> Tag:
    return Tag(TagKind.END, name)
