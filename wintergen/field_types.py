"""Field kinds of reflected classes and how JSON values map onto them."""

from __future__ import annotations

from enum import IntEnum

from wintergen.string_utils import starts_with


class JsonFieldType(IntEnum):
    NATURAL_NUMBER = 0
    REAL_NUMBER = 1
    STRING = 2
    ARRAY = 3
    OBJ = 4
    BOOL = 5


class FieldType(IntEnum):
    SHORT = 0
    INT = 1
    LONG = 2
    FLOAT = 3
    DOUBLE = 4
    CHAR = 5
    BOOL = 6
    BYTE = 7
    STRING = 8
    VECTOR = 9
    OBJ = 10
    ARRAY = 11


_PRIMITIVES = {
    "int": FieldType.INT,
    "float": FieldType.FLOAT,
    "double": FieldType.DOUBLE,
    "char": FieldType.CHAR,
    "long": FieldType.LONG,
    "short": FieldType.SHORT,
    "bool": FieldType.BOOL,
    "byte": FieldType.BYTE,
}

_COMPATIBLE = {
    JsonFieldType.NATURAL_NUMBER: frozenset(
        {FieldType.SHORT, FieldType.INT, FieldType.LONG, FieldType.FLOAT, FieldType.DOUBLE}
    ),
    JsonFieldType.REAL_NUMBER: frozenset({FieldType.FLOAT, FieldType.DOUBLE}),
    JsonFieldType.STRING: frozenset({FieldType.STRING}),
    JsonFieldType.OBJ: frozenset({FieldType.OBJ}),
    JsonFieldType.ARRAY: frozenset({FieldType.ARRAY, FieldType.VECTOR}),
    JsonFieldType.BOOL: frozenset({FieldType.BOOL}),
}

_BOOL_STARTS = frozenset("tTfF")


def convert_to_field_type(s: str) -> FieldType:
    """Map a stripped type name to its field kind; unknown names are objects."""
    if s in _PRIMITIVES:
        return _PRIMITIVES[s]
    if starts_with(s, "vector"):
        return FieldType.VECTOR
    if starts_with(s, "string"):
        return FieldType.STRING
    return FieldType.OBJ


def array_sub_type(s: str) -> tuple[str, bool]:
    """Element type name of ``vector<...>`` and whether elements are pointers."""
    open_index = s.find("<")
    close_index = s.find(">", open_index) if open_index >= 0 else -1
    if open_index < 0 or close_index < 0:
        raise ValueError(f"Unknown array sub type: {s}")
    inner = s[open_index + 1 : close_index]
    if inner.endswith("*"):
        return inner[:-1], True
    return inner, False


def get_array_sub_type(s: str) -> FieldType:
    """Field kind of the elements of ``vector<...>``."""
    type_name, _ = array_sub_type(s)
    return convert_to_field_type(type_name)


def _classify(first: str, whole: str) -> JsonFieldType:
    if first == '"':
        return JsonFieldType.STRING
    if first == "{":
        return JsonFieldType.OBJ
    if first == "[":
        return JsonFieldType.ARRAY
    if first and first in _BOOL_STARTS:
        return JsonFieldType.BOOL
    if "." in whole:
        return JsonFieldType.REAL_NUMBER
    return JsonFieldType.NATURAL_NUMBER


def get_json_field_type(s: str) -> JsonFieldType:
    """Kind of a raw JSON value, judged by its first character."""
    return _classify(s[:1], s)


def get_json_field_sub_type(s: str) -> JsonFieldType:
    """Kind of the first element of a raw JSON array."""
    rest = s[1:].lstrip(" \t\n\v\f\r")
    return _classify(rest[:1], s)


def are_types_compatible(json_type: JsonFieldType, field_type: FieldType) -> bool:
    """Whether a JSON value of ``json_type`` may be stored in ``field_type``."""
    return field_type in _COMPATIBLE.get(json_type, frozenset())