"""Clean test source text for display in a report."""

import re

_LINE_BREAKS = re.compile(r"\r\n?|[\n\u2028\u2029]")
_WRAPPER_HEADER = re.compile(
    r"^(?:function\s*\(.*\)\s*(?P<fn_brace>\{)|\(.*\)\s*=>\s*(?P<arrow_brace>\{)?)"
)
_CLOSING_BRACE = re.compile(r"\s*\}$")
_LEADING_SPACES = re.compile(r"^\n?( *)")
_LEADING_TABS = re.compile(r"^\n?(\t*)")


def clean_code(code: str) -> str:
    """Strip the function wrapper from test source and dedent its body.

    Cleaning its own output again is a no-op, except when the body itself
    starts with an arrow or function expression: that leading expression is
    then taken for a wrapper and stripped on the next pass.

    Args:
        code: Source text of a test, possibly wrapped in a function header

    Returns:
        Body text with the wrapper removed, common indentation stripped, and
        surrounding whitespace trimmed

    """
    code = _LINE_BREAKS.sub("\n", code)
    code = code.removeprefix("\ufeff")

    header = _WRAPPER_HEADER.match(code)
    if header:
        code = code[header.end() :]
        # only a braced header owns the trailing brace
        if header.group("fn_brace") or header.group("arrow_brace"):
            code = _CLOSING_BRACE.sub("", code, count=1)

    spaces = len(_LEADING_SPACES.match(code).group(1))  # type: ignore[union-attr]
    tabs = len(_LEADING_TABS.match(code).group(1))  # type: ignore[union-attr]
    if tabs or spaces:
        unit = "\t" if tabs else " "
        indent = re.compile(f"^{unit}{{{tabs or spaces}}}", re.MULTILINE)
        code = indent.sub("", code)

    return code.strip()
