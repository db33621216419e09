from __future__ import annotations

"""
Line Template Engine.

Splits a line template into literal text and placeholder tokens, then
substitutes the tokens against a placeholder table. Parsing and
substitution are separate steps so templates can be parsed once and
rendered many times.

Placeholder syntax: '%' followed by a single key character, optionally
followed by an argument in braces, e.g. '%m', '%d{%H:%M}', '%S{ <- }'.
The argument ends at the first '}'. A trailing lone '%' and a '{' with no
closing '}' are kept as literal text.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Union

# -----------------------------------------------------------------------------
# PLACEHOLDER KEYS
# -----------------------------------------------------------------------------

KEY_CALLER = "c"
KEY_TIMESTAMP = "d"
KEY_ERROR = "e"
KEY_LEVEL = "l"
KEY_LEVEL_NAME = "L"
KEY_MESSAGE = "m"
KEY_NEWLINE = "n"
KEY_PID = "p"
KEY_ERROR_LINE = "s"
KEY_BACKTRACE = "S"
KEY_TAB = "t"
KEY_EXE_NAME = "x"
KEY_EXE_PATH = "X"

ERROR_KEYS: FrozenSet[str] = frozenset({KEY_ERROR, KEY_ERROR_LINE, KEY_BACKTRACE})

CASE_TRANSFORMS: Dict[str, Callable[[str], str]] = {
    "capitalize": str.capitalize,
    "downcase": str.lower,
    "swapcase": str.swapcase,
    "upcase": str.upper,
}


# -----------------------------------------------------------------------------
# TOKENS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Literal:
    """Text copied to the output as is."""
    text: str


@dataclass(frozen=True)
class Placeholder:
    """A placeholder key with its optional argument."""
    key: str
    arg: Optional[str] = None


Token = Union[Literal, Placeholder]


def tokenize(template: str) -> List[Token]:
    """
    Split a template into literal and placeholder tokens in one pass.

    Adjacent literal text is merged into a single token.

    Args:
        template: Line template string.

    Returns:
        List[Token]: Tokens in template order.
    """
    tokens: List[Token] = []
    buffer: List[str] = []
    i = 0
    size = len(template)

    while i < size:
        char = template[i]
        if char != "%" or i + 1 >= size:
            buffer.append(char)
            i += 1
            continue

        key = template[i + 1]
        i += 2
        arg: Optional[str] = None
        if i < size and template[i] == "{":
            close = template.find("}", i + 1)
            if close != -1:
                arg = template[i + 1:close]
                i = close + 1

        if buffer:
            tokens.append(Literal("".join(buffer)))
            buffer = []
        tokens.append(Placeholder(key, arg))

    if buffer:
        tokens.append(Literal("".join(buffer)))
    return tokens


def references_error(tokens: Sequence[Token]) -> bool:
    """Check whether any token reads the error placeholders."""
    return any(isinstance(t, Placeholder) and t.key in ERROR_KEYS for t in tokens)


# -----------------------------------------------------------------------------
# SUBSTITUTION
# -----------------------------------------------------------------------------

def to_text(value: Any) -> str:
    """Convert a placeholder value to its plain text form."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat(timespec="seconds")
    if isinstance(value, (list, tuple)):
        return "\n".join(str(v) for v in value)
    return str(value)


def substitute(token: Placeholder, table: Mapping[str, Any]) -> str:
    """
    Render one placeholder against a placeholder table.

    Without an argument, or when the value is absent or empty, the value is
    rendered as plain text. With an argument, only the timestamp, message
    and backtrace keys have a meaning; every other combination renders
    empty.

    Args:
        token: Placeholder to render.
        table: Placeholder values by key.

    Returns:
        str: Rendered text, possibly empty.
    """
    value = table.get(token.key)
    if token.arg is None or _is_empty(value):
        return to_text(value)

    if token.key == KEY_TIMESTAMP and isinstance(value, datetime):
        return value.strftime(token.arg)
    if token.key == KEY_MESSAGE:
        transform = CASE_TRANSFORMS.get(token.arg)
        return transform(to_text(value)) if transform else ""
    if token.key == KEY_BACKTRACE and isinstance(value, (list, tuple)):
        return token.arg + token.arg.join(str(v) for v in value)
    return ""


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list, tuple)):
        return len(value) == 0
    return False


def render(tokens: Sequence[Token], table: Mapping[str, Any]) -> str:
    """Render parsed tokens into a line, without the trailing newline."""
    parts: List[str] = []
    for token in tokens:
        if isinstance(token, Literal):
            parts.append(token.text)
        else:
            parts.append(substitute(token, table))
    return "".join(parts)

