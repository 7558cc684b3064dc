"""Translation of date/time patterns into ``strptime`` formats."""

from __future__ import annotations

import re
from collections.abc import Iterator
from functools import lru_cache

DEFAULT_DATE_PATTERN = "yyyyMMdd"
DEFAULT_DATETIME_PATTERN = "yyyyMMddHHmmss"

_DIRECTIVES: dict[str, str] = {
    "yyyy": "%Y",
    "uuuu": "%Y",
    "yy": "%y",
    "MM": "%m",
    "dd": "%d",
    "HH": "%H",
    "mm": "%M",
    "ss": "%S",
    "SSSSSS": "%f",
    "SSS": "%f",
}

# strptime directives with a fixed number of digits; %f takes up to six.
_DIRECTIVE_INPUTS: dict[str, str] = {
    "Y": r"\d{4}",
    "y": r"\d{2}",
    "m": r"\d{2}",
    "d": r"\d{2}",
    "H": r"\d{2}",
    "M": r"\d{2}",
    "S": r"\d{2}",
    "f": r"\d{1,6}",
}


@lru_cache(maxsize=64)
def to_strptime_format(pattern: str) -> str:
    """Translate a pattern such as ``yyyy-MM-dd`` into ``%Y-%m-%d``.

    Patterns that already contain ``%`` are returned unchanged. Text wrapped
    in single quotes is copied literally; ``''`` yields a single quote.
    """
    if "%" in pattern:
        return pattern
    return "".join(
        _DIRECTIVES[text] if is_token else text
        for is_token, text in _tokenize(pattern)
    )


@lru_cache(maxsize=64)
def to_input_pattern(pattern: str) -> re.Pattern[str] | None:
    """Return a regex the text must fully match for ``pattern``.

    Every numeric field must carry all of its digits, so ``yyyyMMdd`` rejects
    ``2023125``. Returns None for ``%`` formats using directives without a
    fixed width, such as ``%b``.
    """
    if "%" in pattern:
        return _strptime_input_pattern(pattern)
    parts = [
        rf"\d{{{len(text)}}}" if is_token else re.escape(text)
        for is_token, text in _tokenize(pattern)
    ]
    return re.compile("".join(parts))


def _tokenize(pattern: str) -> Iterator[tuple[bool, str]]:
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "'":
            closing = pattern.find("'", index + 1)
            if closing == -1:
                raise ValueError(f"Unterminated quote in pattern: {pattern}")
            literal = pattern[index + 1 : closing]
            yield False, literal if literal else "'"
            index = closing + 1
            continue
        if char.isalpha():
            run_end = index
            while run_end < len(pattern) and pattern[run_end] == char:
                run_end += 1
            token = pattern[index:run_end]
            if token not in _DIRECTIVES:
                raise ValueError(f"Unsupported pattern letters '{token}' in pattern: {pattern}")
            yield True, token
            index = run_end
            continue
        yield False, char
        index += 1


def _strptime_input_pattern(strptime_format: str) -> re.Pattern[str] | None:
    parts: list[str] = []
    index = 0
    while index < len(strptime_format):
        char = strptime_format[index]
        if char != "%":
            parts.append(re.escape(char))
            index += 1
            continue
        directive = strptime_format[index + 1 : index + 2]
        if directive == "%":
            parts.append("%")
        elif directive in _DIRECTIVE_INPUTS:
            parts.append(_DIRECTIVE_INPUTS[directive])
        else:
            return None
        index += 2
    return re.compile("".join(parts))
