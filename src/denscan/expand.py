"""Hand parsed regions to a code-generation backend and splice its output.

A backend is any callable ``backend(name, inputs) -> str``. ``name`` is the
call name from ``// @den::name!`` and ``inputs`` is the raw text of the input
item lines. The returned text replaces whatever sits between the region's
start and end markers.
"""

from __future__ import annotations

import importlib
from collections.abc import Callable

from .api import parse_source
from .classifier import WHITESPACE, split_lines
from .errors import BackendError
from .log import get_logger
from .region import Region
from .tags import COMMENT_PREFIX, END_KEYWORD, FENCE_MARKER


Backend = Callable[[str, str], str]

DEFAULT_ATTR = "den"

logger = get_logger(__name__)


def load_backend(spec: str) -> Backend:
    """Load ``package.module:attr``; ``attr`` defaults to ``den``."""
    module_name, _, attr = spec.partition(":")
    if not module_name:
        raise BackendError(f"invalid backend spec {spec!r}, expected 'module:attr'")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise BackendError(f"cannot import backend module {module_name!r}: {e}") from e
    try:
        fn = getattr(module, attr or DEFAULT_ATTR)
    except AttributeError as e:
        raise BackendError(f"backend module {module_name!r} has no attribute {attr or DEFAULT_ATTR!r}") from e
    if not callable(fn):
        raise BackendError(f"backend {spec!r} is not callable")
    return fn


def region_inputs(region: Region, lines: list[str]) -> str:
    return "\n".join(lines[i] for i in region.input_range())


def end_marker(name: str, indent: str = "") -> str:
    return f"{indent}{COMMENT_PREFIX} {FENCE_MARKER}{END_KEYWORD}{name}!"


def expand_source(src: str, backend: Backend, *, file: str = "<memory>") -> str:
    """Return ``src`` with each started region's output regenerated.

    Regions without a start marker are left alone. A region with a start but
    no end marker gets one appended after the generated output.
    """
    outcome = parse_source(src, file=file)
    lines = split_lines(src)
    out: list[str] = []
    pos = 0

    for region in outcome.regions:
        if region.start is None:
            continue
        try:
            generated = backend(region.name, region_inputs(region, lines))
        except Exception as e:
            raise BackendError(
                f"backend failed for {region.name!r}: {e}", file=file, line=region.call
            ) from e
        if not isinstance(generated, str):
            raise BackendError(
                f"backend returned {type(generated).__name__} for {region.name!r}, expected str",
                file=file,
                line=region.call,
            )

        out.extend(lines[pos : region.start + 1])
        out.extend(split_lines(generated))
        if region.end is None:
            start_line = lines[region.start]
            indent = start_line[: len(start_line) - len(start_line.lstrip(WHITESPACE))]
            out.append(end_marker(region.name, indent))
            pos = region.start + 1
        else:
            pos = region.end
        logger.debug("%s: expanded %r at line %d", file, region.name, region.call + 1)

    out.extend(lines[pos:])
    text = "\n".join(out)
    if src.endswith("\n") and out:
        text += "\n"
    return text
