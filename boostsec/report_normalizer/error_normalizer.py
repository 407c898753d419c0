"""Normalize errors raised by tests and hooks."""

import re
from typing import Any

from boostsec.report_normalizer.diff import create_inline_diff, create_unified_diff
from boostsec.report_normalizer.models.config import ReporterConfig
from boostsec.report_normalizer.models.normalized import DiffChange, NormalizedError
from boostsec.report_normalizer.models.raw import RawError
from boostsec.report_normalizer.stringify import canonical_stringify

_ANSI_ESCAPE = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")


def strip_ansi(value: str) -> str:
    """Remove ANSI escape sequences."""
    return _ANSI_ESCAPE.sub("", value)


def _same_kind(a: Any, b: Any) -> bool:
    # int and float share one numeric kind; bool stays its own
    numeric = (int, float)
    if (
        isinstance(a, numeric)
        and isinstance(b, numeric)
        and not isinstance(a, bool)
        and not isinstance(b, bool)
    ):
        return True
    return type(a) is type(b)


def normalize_error(err: RawError, config: ReporterConfig) -> NormalizedError:
    """Return a normalized error record.

    Assertion libraries do not raise consistent error objects, so the
    message is rebuilt here: ``"<name>: <message>"`` when both exist,
    otherwise the first line of the stack trace.

    Args:
        err: Error raised by the test
        config: Reporter configuration, selects the diff mode

    Returns:
        Message, ANSI-free stack trace and optional diff

    """
    diff: str | list[DiffChange] | None = None
    if (
        err.show_diff is not False
        and _same_kind(err.actual, err.expected)
        and err.expected is not None
    ):
        actual, expected = err.actual, err.expected
        if not (isinstance(actual, str) and isinstance(expected, str)):
            actual = canonical_stringify(actual)
            expected = canonical_stringify(expected)
        if config.use_inline_diffs:
            diff = create_inline_diff(actual, expected)
        else:
            diff = create_unified_diff(actual, expected)

    message: str | None = None
    if err.name and err.message:
        message = f"{err.name}: {strip_ansi(err.message)}"
    elif err.stack:
        message = err.stack.split("\n", 1)[0]

    return NormalizedError(
        message=message,
        estack=strip_ansi(err.stack) if err.stack else None,
        diff=diff,
    )
