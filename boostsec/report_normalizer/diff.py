"""Build diffs between the actual and expected values of an assertion."""

import difflib
import re

from boostsec.report_normalizer.models.normalized import DiffChange

# whitespace runs are tokens of their own
_WORD_TOKENS = re.compile(r"\s+|[()\[\]{}'\"]|\w+|[^\w\s()\[\]{}'\"]+")
_DIFF_MARKER = re.compile(r"^([-+])")
_PATCH_CONTEXT = 4
_LINES = re.compile(r"[^\n]*\n|[^\n]+")


def create_unified_diff(actual: str, expected: str) -> str:
    """Create a unified diff between two strings.

    The patch header, hunk headers and "No newline" markers are removed, and
    each ``+``/``-`` marker is followed by a space.

    Args:
        actual: Value the assertion received
        expected: Value the assertion expected

    Returns:
        Diff text, empty when both strings are equal

    """
    patch = list(
        difflib.unified_diff(
            _split_lines(actual),
            _split_lines(expected),
            fromfile="string",
            tofile="string",
            n=_PATCH_CONTEXT,
            lineterm="",
        )
    )
    lines = [
        _DIFF_MARKER.sub(r"\1 ", line.rstrip("\r\n"))
        for line in patch[2:]
        if "@@" not in line and not line.startswith("\\ No newline")
    ]
    return "\n".join(lines)


def create_inline_diff(actual: str, expected: str) -> list[DiffChange]:
    """Create a word-level diff between two strings.

    Args:
        actual: Value the assertion received
        expected: Value the assertion expected

    Returns:
        Ordered segments; within a replaced region removed text comes first

    """
    old = _WORD_TOKENS.findall(actual)
    new = _WORD_TOKENS.findall(expected)
    matcher = difflib.SequenceMatcher(None, old, new, autojunk=False)

    changes: list[DiffChange] = []
    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            changes.append(DiffChange(value="".join(old[i1:i2]), count=i2 - i1))
            continue
        if tag in ("delete", "replace"):
            changes.append(
                DiffChange(value="".join(old[i1:i2]), count=i2 - i1, removed=True)
            )
        if tag in ("insert", "replace"):
            changes.append(
                DiffChange(value="".join(new[j1:j2]), count=j2 - j1, added=True)
            )
    return changes


def _split_lines(text: str) -> list[str]:
    # only "\n" ends a line; terminators stay so a missing final newline shows
    return _LINES.findall(text)
