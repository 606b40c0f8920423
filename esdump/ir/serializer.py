"""Canonical serializer — deterministic, pretty-printed JSON for a syntax tree.

Fields are emitted in tree order, never sorted. JSON has no regular
expression type, so a ``value`` field holding a regex literal is written as
its literal text (``"/abc/gi"``). That is the only non-structural rewrite;
every other value JSON cannot hold is an ``EncodingError``.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

from esdump.errors import EncodingError
from esdump.ir.models import Node, Record, RegexValue, SyntaxTree

INDENT = 4
REGEX_FIELD = "value"

# JavaScript prints integral numbers without a fraction below this bound
_MAX_PLAIN_INTEGER = 1e21

_SURROGATE = re.compile("[\ud800-\udfff]")


def serialize(tree: SyntaxTree | Node, indent: int = INDENT) -> str:
    """Encode a tree as pretty-printed JSON text."""
    root = tree.root if isinstance(tree, SyntaxTree) else tree
    text = json.dumps(to_jsonable(root), indent=indent, ensure_ascii=False)
    return _escape_lone_surrogates(text)


def to_jsonable(value: Any, key: str = "", path: str = "") -> Any:
    """Turn an IR value into plain dicts, lists and scalars."""
    if value is None or isinstance(value, (bool, str)):
        return value
    if isinstance(value, int):
        return _encode_integer(value)
    if isinstance(value, float):
        return _encode_number(value)
    if isinstance(value, RegexValue):
        if key == REGEX_FIELD:
            return value.literal
        raise EncodingError(path, value)
    if isinstance(value, Node):
        encoded = {"type": value.type}
        encoded.update(_encode_fields(value, path))
        return encoded
    if isinstance(value, Record):
        return _encode_fields(value, path)
    if isinstance(value, tuple):
        return [
            to_jsonable(item, path=f"{path}[{i}]") for i, item in enumerate(value)
        ]
    raise EncodingError(path, value)


def _encode_fields(record: Record, path: str) -> dict[str, Any]:
    out = {}
    for name, field_value in record.items():
        child_path = f"{path}.{name}" if path else name
        out[name] = to_jsonable(field_value, key=name, path=child_path)
    return out


def _encode_number(number: float) -> int | float | None:
    """Match JSON.stringify: no NaN/Infinity, no ``.0`` on integral values."""
    if not math.isfinite(number):
        return None
    if number.is_integer() and abs(number) < _MAX_PLAIN_INTEGER:
        return int(number)
    return number


def _encode_integer(number: int) -> int | float | None:
    if abs(number) < _MAX_PLAIN_INTEGER:
        return number
    try:
        return float(number)
    except OverflowError:
        return None


def _escape_lone_surrogates(text: str) -> str:
    """Join surrogate pairs, then write any unpaired half as ``\\uXXXX``.

    esprima keeps string escapes like ``"\\uD800"`` as lone surrogates, which
    cannot be encoded as UTF-8. JSON.stringify escapes them the same way.
    """
    if not _SURROGATE.search(text):
        return text
    joined = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
    return _SURROGATE.sub(lambda m: f"\\u{ord(m.group()):04x}", joined)
