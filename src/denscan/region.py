from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RegionError(str, Enum):
    MISSING_START = "missing-start"
    MISSING_END = "missing-end"


@dataclass(slots=True)
class Region:
    """One ``@den::name!`` invocation span.

    Every field except ``name`` is a 0-based line index. ``attributes``,
    ``items`` and ``output`` point at the first line of their group; the
    group runs until the next recorded marker.
    """

    name: str
    call: int
    attributes: int | None = None
    items: int | None = None
    start: int | None = None
    output: int | None = None
    end: int | None = None

    def validate(self) -> RegionError | None:
        if self.items is not None and self.start is None:
            return RegionError.MISSING_START
        if self.output is not None and self.end is None:
            return RegionError.MISSING_END
        return None

    @property
    def is_valid(self) -> bool:
        return self.validate() is None

    def set_attribute(self, i: int) -> None:
        # Comment lines inside the body are plain text, not attributes.
        if self.attributes is None and self.items is None and self.start is None:
            self.attributes = i

    def set_item(self, i: int) -> None:
        if self.start is None:
            if self.items is None:
                self.items = i
        elif self.end is None:
            if self.output is None:
                self.output = i

    def set_start(self, i: int) -> bool:
        if self.start is not None or self.output is not None or self.end is not None:
            return False
        self.start = i
        return True

    def set_end(self, i: int) -> bool:
        if self.end is not None:
            return False
        self.end = i
        return True

    def input_range(self) -> range:
        """Lines holding the input items, ``[items, start)``."""
        if self.items is None or self.start is None:
            return range(0)
        return range(self.items, self.start)

