"""IR data models — the tagged-variant syntax tree.

The external parser hands back loosely shaped objects. These models are the
immutable form the serializer walks: every node keeps its fields in the order
the parser attached them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Iterator, Union


class GrammarMode(Enum):
    SCRIPT = "script"
    MODULE = "module"


@dataclass(frozen=True)
class SourceUnit:
    """A file path with its resolved grammar mode."""

    path: Path
    mode: GrammarMode


@dataclass(frozen=True)
class RegexValue:
    """A regular-expression literal object.

    JSON has no native form for it, so the serializer prints it as the
    literal source would: ``/pattern/flags``.
    """

    pattern: str
    flags: str = ""

    @property
    def literal(self) -> str:
        return f"/{self.pattern}/{self.flags}"


@dataclass(frozen=True)
class Record:
    """An untagged structured value, e.g. ``regex: {pattern, flags}``."""

    fields: tuple[tuple[str, Any], ...] = ()

    def get(self, name: str, default: Any = None) -> Any:
        for key, value in self.fields:
            if key == name:
                return value
        return default

    def keys(self) -> list[str]:
        return [key for key, _ in self.fields]

    def items(self) -> Iterator[tuple[str, Any]]:
        return iter(self.fields)


@dataclass(frozen=True)
class Node(Record):
    """A syntax node: a type tag plus its ordered fields."""

    type: str = ""

    @property
    def children(self) -> list[Node]:
        """Direct child nodes, in field order."""
        found = []
        for _, value in self.fields:
            if isinstance(value, Node):
                found.append(value)
            elif isinstance(value, tuple):
                found.extend(v for v in value if isinstance(v, Node))
        return found

    def walk(self) -> Iterator[Node]:
        """Depth-first, pre-order iteration over this node and its descendants."""
        yield self
        for child in self.children:
            yield from child.walk()


FieldValue = Union[None, bool, int, float, str, Node, Record, RegexValue, tuple]


@dataclass(frozen=True)
class SyntaxTree:
    """A parsed program and the grammar mode it was produced under."""

    root: Node
    mode: GrammarMode
    source_path: str = ""

    @property
    def body(self) -> tuple:
        return self.root.get("body", ())

    def nodes_of_type(self, type_tag: str) -> list[Node]:
        return [n for n in self.root.walk() if n.type == type_tag]


# --- Conversion from the parser's objects ---

# esprima-python attribute names that differ from the ESTree field names
FIELD_NAMES = {
    "isAsync": "async",
    "allowAwait": "await",
}


def from_esprima(obj: Any) -> Any:
    """Convert the parser's output into immutable IR values.

    Objects with a ``type`` tag become nodes, other attribute bags and dicts
    become records, lists become tuples. Field names are mapped to their
    ESTree spelling; fields set to None are kept. Anything unrecognised is passed
    through untouched so the serializer can reject it.
    """
    if obj is None or isinstance(obj, (bool, int, float, str)):
        return obj
    if isinstance(obj, (list, tuple)):
        return tuple(from_esprima(item) for item in obj)

    attrs = _attributes(obj)
    if attrs is None:
        return obj

    regex = attrs.get("regex")
    fields = []
    for key, value in attrs.items():
        if key == "type":
            continue
        name = FIELD_NAMES.get(key, key)
        if key == "value" and regex is not None:
            fields.append((name, _regex_value(value, regex)))
        else:
            fields.append((name, from_esprima(value)))

    type_tag = attrs.get("type")
    if isinstance(type_tag, str):
        return Node(fields=tuple(fields), type=type_tag)
    return Record(fields=tuple(fields))


def _attributes(obj: Any) -> dict[str, Any] | None:
    if isinstance(obj, dict):
        return obj
    # esprima's nodes are plain attribute bags defined in the esprima package
    if type(obj).__module__.split(".")[0] == "esprima" and hasattr(obj, "__dict__"):
        return vars(obj)
    return None


def _regex_value(value: Any, regex: Any) -> Any:
    """Build the regex literal object for a Literal node carrying ``regex`` info.

    The pattern and flags come from the node's ``regex`` record so the flags
    are the ECMAScript ones. ``value`` may be a compiled pattern or None when
    Python's ``re`` cannot express the literal.
    """
    info = _attributes(regex) or {}
    pattern = info.get("pattern")
    if pattern is None and isinstance(value, re.Pattern):
        pattern = value.pattern
    if pattern is None:
        return from_esprima(value)
    return RegexValue(pattern=pattern, flags=info.get("flags") or "")
