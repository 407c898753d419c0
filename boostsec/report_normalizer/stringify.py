"""Render arbitrary values as stable, JSON-like text."""

import json
import math
import re
from collections.abc import Mapping
from datetime import date, datetime
from typing import Any

# private-use prefix marking strings that are written without JSON quotes
_TAG_MARK = "\ue000"
_TAG = re.compile(f"\"{_TAG_MARK}([^\"]*)\"")


def canonical_stringify(value: Any) -> str:
    """Render a value as canonical text for diffing.

    Mapping keys are sorted so that two equal structures always produce the
    same text. Values JSON cannot represent are written unquoted as ``NaN``,
    ``Infinity`` or bracketed tags (``[Function]``, ``[Date: ...]``,
    ``[Circular]``).

    Args:
        value: Any assertion operand

    Returns:
        Indented text representation

    """
    if isinstance(value, str):
        return value
    text = json.dumps(_canonicalize(value, []), indent=2, ensure_ascii=False)
    return _TAG.sub(r"\1", text)


def _tag(text: str) -> str:
    return f"{_TAG_MARK}{text}"


def _canonicalize(value: Any, stack: list[int]) -> Any:  # noqa: C901
    if value is None or isinstance(value, bool | int | str):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return _tag("NaN")
        if math.isinf(value):
            return _tag("Infinity" if value > 0 else "-Infinity")
        return value
    if isinstance(value, datetime | date):
        return _tag(f"[Date: {value.isoformat()}]")
    if isinstance(value, bytes | bytearray):
        return _tag(f"[Buffer: {value.hex()}]")
    if callable(value):
        return _tag("[Function]")
    if id(value) in stack:
        return _tag("[Circular]")

    stack.append(id(value))
    try:
        if isinstance(value, Mapping):
            return {
                str(key): _canonicalize(value[key], stack)
                for key in sorted(value, key=str)
            }
        if isinstance(value, set | frozenset):
            return [_canonicalize(item, stack) for item in sorted(value, key=repr)]
        if isinstance(value, list | tuple):
            return [_canonicalize(item, stack) for item in value]
        if hasattr(value, "__dict__"):
            return _canonicalize(vars(value), stack)
        return repr(value)
    finally:
        stack.pop()


def safe_stringify(value: Any, indent: int | None = 2) -> str | None:
    """Serialize a value to JSON, replacing reference cycles.

    A value that refers back to one of its ancestors is written as
    ``"[Circular ~]"`` (the root) or ``"[Circular ~.path.to.ancestor]"``.
    Non-JSON values fall back to ``str()``.

    Args:
        value: Value to serialize, usually a test context
        indent: JSON indentation

    Returns:
        JSON text, or None when value is None

    """
    if value is None:
        return None
    return json.dumps(_decycle(value, [], []), indent=indent, default=str)


def _decycle(value: Any, ancestors: list[int], path: list[str]) -> Any:
    if isinstance(value, Mapping | list | tuple):
        if id(value) in ancestors:
            depth = ancestors.index(id(value))
            return "[Circular ~" + "".join(f".{key}" for key in path[:depth]) + "]"
        ancestors.append(id(value))
        try:
            if isinstance(value, Mapping):
                return {
                    str(key): _decycle(item, ancestors, [*path, str(key)])
                    for key, item in value.items()
                }
            return [
                _decycle(item, ancestors, [*path, str(index)])
                for index, item in enumerate(value)
            ]
        finally:
            ancestors.pop()
    return value
