"""Debug logging and assertions that carry a timestamp."""

from __future__ import annotations

import logging

from dgengine.timeutil import get_time

logger = logging.getLogger("dgengine")


class DebugAssertionError(AssertionError):
    """Raised when a checked engine invariant does not hold."""


def _format(message: str, args: tuple) -> str:
    return message % args if args else message


def log(message: str, *args) -> str:
    """Log ``message % args`` prefixed with the engine time; return the line."""
    line = "{%.3f}: %s" % (get_time(), _format(message, args))
    logger.debug(line)
    return line


def check(condition, message: str, *args) -> None:
    """Log and raise DebugAssertionError when ``condition`` is false."""
    if not condition:
        text = _format(message, args)
        log("ASSERT! %s", text)
        raise DebugAssertionError(text)