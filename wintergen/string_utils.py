"""String helpers shared by the runtime library and the header pre-processor."""

from __future__ import annotations

import re
import string
import time

_WHITESPACE = " \t\n\v\f\r"
_ALNUM = frozenset(string.ascii_letters + string.digits)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_CAMEL_SEPARATOR = re.compile(r"[ _]([A-Za-z])")
_HEX_PREFIX = re.compile(r"[0-9A-Fa-f]+")

# Loose match of a C++ member declaration; group 4 holds the member name.
_FIELD_DECLARATION = re.compile(
    r"([a-zA-Z]+::)?([a-zA-Z_][a-zA-Z0-9_]*)\s*(<.+?>)?\s*[\*&\s]+?\s*"
    r"([a-zA-Z_][a-zA-Z0-9_]*)\s*(=\s*.+)?\s*;"
)


def trim(s: str) -> str:
    """Remove leading and trailing ASCII whitespace."""
    return s.strip(_WHITESPACE)


def strip_blank_characters(s: str) -> str:
    """Remove every ASCII whitespace character."""
    return "".join(ch for ch in s if ch not in _WHITESPACE)


def strip_special_characters(s: str) -> str:
    """Keep only ASCII letters and digits."""
    return "".join(ch for ch in s if ch in _ALNUM)


def ends_with(s: str, suffix: str) -> bool:
    """Return True when ``s`` ends with ``suffix``."""
    return s.endswith(suffix)


def starts_with(s: str, prefix: str) -> bool:
    """Return True when the shorter of ``s`` and ``prefix`` is a prefix of the other."""
    n = min(len(s), len(prefix))
    return s[:n] == prefix[:n]


def split(s: str, sep: str) -> list[str]:
    """Split on ``sep``; a trailing separator does not yield an empty last piece."""
    if not s:
        return []
    parts = s.split(sep)
    if s.endswith(sep):
        parts.pop()
    return parts


def split_array(s: str, sep: str = ",") -> list[str]:
    """Split the top-level elements of a JSON-like array or object body.

    A leading ``[`` or ``{`` is skipped together with the last character.
    Separators inside nested brackets or quoted strings are ignored.
    """
    if not s:
        return []
    has_brackets = s[0] in "[{"
    start = 1 if has_brackets else 0
    tail = len(s) - 1 if has_brackets else len(s)

    parts: list[str] = []
    depth = 0
    in_string = False
    while start < len(s):
        end = tail
        for i, ch in enumerate(s[start:], start):
            if ch in "[{":
                depth += 1
            elif ch in "]}":
                depth -= 1
            elif ch == '"' and (i == 0 or s[i - 1] != "\\"):
                in_string = not in_string
            if depth == 0 and not in_string and ch == sep:
                end = i
                break
        parts.append(s[start:end])
        start = end + 1
    return parts


def split_object_array(s: str, sep: str = ",") -> list[str]:
    """Split a sequence of ``{...}`` objects, starting at the first ``{``."""
    start = s.find("{")
    if start < 0:
        return []

    parts: list[str] = []
    depth = 0
    in_string = False
    while start < len(s):
        end = len(s)
        for i, ch in enumerate(s[start:], start):
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
            elif ch == '"' and (i == 0 or s[i - 1] != "\\"):
                in_string = not in_string
            if depth == 0 and not in_string and ch == sep:
                end = i
                break
        parts.append(s[start:end])
        start = end + 1
    return parts


def uncapitalize(s: str) -> str:
    """Lower-case every ASCII upper-case letter."""
    return s.translate(_TO_LOWER)


def rtrim(s: str) -> str:
    """Remove trailing ASCII whitespace."""
    return s.rstrip(_WHITESPACE)


def replace_char(s: str, pattern: str, replacement: str) -> str:
    """Replace every occurrence of the character ``pattern``."""
    return s.replace(pattern, replacement)


def replace_pattern(s: str, pattern: str, replacement: str) -> str:
    """Replace every occurrence of the substring ``pattern`` with ``replacement``."""
    if not pattern:
        raise ValueError("pattern must not be empty")
    return s.replace(pattern, replacement)


def to_upper_case(s: str) -> str:
    """Upper-case ASCII letters only."""
    return s.translate(_TO_UPPER)


def to_lower_case(s: str) -> str:
    """Lower-case ASCII letters only."""
    return s.translate(_TO_LOWER)


def parse_boolean(value: str) -> bool:
    """Parse ``true`` or ``false`` in any letter case."""
    lowered = to_lower_case(value)
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"Received invalid bool value: {value}")


def format_boolean(value: bool) -> str:
    """Render a truth value as ``true`` or ``false``."""
    return to_lower_case(str(bool(value)))


def to_camel_case(value: str) -> str:
    """Drop a space or underscore before a letter and upper-case that letter."""
    return _CAMEL_SEPARATOR.sub(lambda m: m.group(1).upper(), value)


def _hex_value(digits: bytes) -> int:
    match = _HEX_PREFIX.match(digits.decode("latin-1"))
    return int(match.group(), 16) if match else 0


def url_decode(text: str) -> str:
    """Decode ``%XX`` escapes and ``+`` as space; a dangling ``%`` is dropped."""
    data = text.encode("utf-8")
    out = bytearray()
    pos = 0
    while pos < len(data):
        byte = data[pos]
        if byte == ord("%"):
            digits = data[pos + 1 : pos + 3]
            if len(digits) == 2 and 0 not in digits:
                out.append(_hex_value(digits))
                pos += 3
                continue
        elif byte == ord("+"):
            out.append(ord(" "))
        else:
            out.append(byte)
        pos += 1
    return out.decode("utf-8", errors="replace")


def current_datetime() -> str:
    """Current local time in ``ctime`` format, without a trailing newline."""
    return time.ctime()


def get_field_name(line: str) -> str:
    """Name of the member declared on ``line``, or an empty string."""
    match = _FIELD_DECLARATION.search(line)
    return match.group(4) if match else ""