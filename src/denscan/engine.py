from __future__ import annotations

from dataclasses import dataclass, field

from .classifier import classify_source
from .diagnostics import ParseWarning, WarningKind
from .errors import ParseError
from .region import Region
from .tags import Tag, TagKind


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    regions: tuple[Region, ...]
    warnings: tuple[ParseWarning, ...]


@dataclass(slots=True)
class Engine:
    """Tracks regions over a stream of classified lines.

    The last entry of ``regions`` is the open region; it stays open until the
    next call tag or :meth:`finish`. Line indices must be fed in increasing
    order.
    """

    file: str = "<memory>"
    regions: list[Region] = field(default_factory=list)
    warnings: list[ParseWarning] = field(default_factory=list)

    @property
    def current(self) -> Region | None:
        return self.regions[-1] if self.regions else None

    def run(self, src: str) -> ParseOutcome:
        for i, tag in classify_source(src):
            self.feed(i, tag)
        return self.finish()

    def feed(self, i: int, tag: Tag) -> None:
        kind = tag.kind
        region = self.current

        if kind is TagKind.EMPTY:
            return

        if kind is TagKind.CALL_NO_BANG:
            self._warn(WarningKind.CALL_NO_BANG, i)
            return

        if kind is TagKind.END_NO_BANG:
            self._warn(WarningKind.END_NO_BANG, i)
            return

        if kind is TagKind.CALL:
            self._close(trigger=i)
            self.regions.append(Region(name=tag.name or "", call=i))
            return

        if kind is TagKind.ATTRIBUTE:
            if region is not None:
                region.set_attribute(i)
            return

        if kind is TagKind.ITEM:
            if region is not None:
                region.set_item(i)
            return

        if kind is TagKind.START:
            if region is None or not region.set_start(i):
                self._warn(WarningKind.UNEXPECTED_START, i)
            return

        if kind is TagKind.END:
            if region is None or not region.set_end(i):
                self._warn(WarningKind.UNEXPECTED_END, i)
            elif region.name != tag.name:
                # The end marker still counts, only the name is off.
                self._warn(WarningKind.NAME_MISMATCH, i)
            return

        raise RuntimeError(f"unknown tag kind: {kind!r}")

    def finish(self) -> ParseOutcome:
        self._close(trigger=None)
        return ParseOutcome(regions=tuple(self.regions), warnings=tuple(self.warnings))

    def _close(self, *, trigger: int | None) -> None:
        region = self.current
        if region is None:
            return
        err = region.validate()
        if err is None:
            return
        self.regions.pop()
        raise ParseError(
            kind=err,
            region=region,
            trigger_line=trigger,
            file=self.file,
            regions=tuple(self.regions),
            warnings=tuple(self.warnings),
        )

    def _warn(self, kind: WarningKind, i: int) -> None:
        self.warnings.append(ParseWarning(kind, i))