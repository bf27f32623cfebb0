from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return a stdlib logger under the ``denscan`` namespace.

    >>> get_logger("walker").name
    'denscan.walker'
    """
    if not (name == "denscan" or name.startswith("denscan.")):
        name = f"denscan.{name}"
    return logging.getLogger(name)
