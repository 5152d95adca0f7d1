"""Natural-language argument coercion.

Turns the text after "with"/"using" into positional argument values:

    "5, true, null, hello"   ->  [5, True, None, "hello"]
    "Alice, 3.5"             ->  ["Alice", 3.5]
    "New York, 'x'"          ->  ["New York", "'x'"]

Each comma-separated token is tried, in order, as a bare identifier (kept as
the raw string), then as a JSON literal (after auto-quoting anything that is
obviously not a number, keyword or quoted string), and finally falls back to
the raw token text. Identifiers are NOT looked up in the context.
"""

import json
import re
from dataclasses import dataclass
from enum import Enum

_IDENTIFIER = re.compile(r"[A-Za-z][A-Za-z0-9_]*")
_KEYWORDS = ("true", "false", "null")


class ArgumentKind(Enum):
    IDENTIFIER = "identifier"
    JSON_LITERAL = "json_literal"
    RAW_STRING = "raw_string"


@dataclass(frozen=True)
class ParsedArgument:
    kind: ArgumentKind
    value: object
    token: str


def coerce_arguments(text):
    """Coerce comma-separated argument text into a list of ParsedArgument."""
    return [coerce_token(token.strip()) for token in text.split(",")]


def parse_arguments(text):
    """Coerce comma-separated argument text into a list of plain values."""
    return [arg.value for arg in coerce_arguments(text)]


def coerce_token(token):
    """Coerce one trimmed token. Never raises."""
    if _IDENTIFIER.fullmatch(token) and token not in _KEYWORDS:
        return ParsedArgument(ArgumentKind.IDENTIFIER, token, token)

    literal = token
    if not literal.startswith(('"', "'")) and literal not in _KEYWORDS and not _is_number(literal):
        literal = f'"{literal}"'

    try:
        value = json.loads(literal, parse_constant=_reject_constant)
    except ValueError:
        return ParsedArgument(ArgumentKind.RAW_STRING, token, token)
    return ParsedArgument(ArgumentKind.JSON_LITERAL, value, token)


def _is_number(s):
    # Empty counts as numeric so it is left unquoted and falls through to
    # the raw-string fallback.
    if not s:
        return True
    try:
        float(s)
    except ValueError:
        return False
    return True


def _reject_constant(name):
    raise ValueError(f"not a JSON literal: {name}")


if __name__ == "__main__":
    import sys

    text = " ".join(sys.argv[1:]) or "5, true, null, hello, 'quoted', 2.5e3, New York"
    for arg in coerce_arguments(text):
        print(f"  {arg.token!r:20s} => {arg.value!r:20s} ({arg.kind.value})")
