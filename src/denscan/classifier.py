from __future__ import annotations

from collections.abc import Iterator

from . import tags as T
from .tags import BANG, CALL_MARKER, COMMENT_PREFIX, END_KEYWORD, FENCE_MARKER, Tag


# Unicode White_Space. Unlike str.isspace() this excludes the \x1c-\x1f
# separators, which count as ordinary characters on a line.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    + "".join(chr(c) for c in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000"
)


def classify(line: str) -> Tag:
    """Classify a single line of source text.

    Only leading whitespace and the whitespace around names is significant;
    anything after the closing ``!`` of a call or end marker is ignored.
    """
    s = line.lstrip(WHITESPACE)

    if not s.startswith(COMMENT_PREFIX):
        return T.ITEM if s.rstrip(WHITESPACE) else T.EMPTY

    s = s[len(COMMENT_PREFIX) :].lstrip(WHITESPACE)

    if s.startswith(CALL_MARKER):
        bang = s.find(BANG, len(CALL_MARKER))
        if bang < 0:
            return T.CALL_NO_BANG
        return T.call(s[len(CALL_MARKER) : bang].strip(WHITESPACE))

    if s.startswith(FENCE_MARKER):
        s = s[len(FENCE_MARKER) :].lstrip(WHITESPACE)
        if not s.startswith(END_KEYWORD):
            return T.START
        bang = s.find(BANG, len(END_KEYWORD))
        if bang < 0:
            return T.END_NO_BANG
        return T.end(s[len(END_KEYWORD) : bang].strip(WHITESPACE))

    return T.ATTRIBUTE


def split_lines(src: str) -> list[str]:
    """Split on ``\\n`` only, dropping a trailing ``\\r`` from each line.

    A trailing newline does not produce an extra empty line.
    """
    if not src:
        return []
    lines = src.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def classify_source(src: str) -> Iterator[tuple[int, Tag]]:
    for i, line in enumerate(split_lines(src)):
        yield i, classify(line)
