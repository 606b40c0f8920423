"""ECMAScript IR parser — builds a syntax tree from a .js file using esprima.

esprima does the grammar work. This module picks the grammar mode from the
file name, reads the file, invokes the parser and converts what it returns
into the immutable IR in ``esdump.ir.models``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable

import esprima
from rich.console import Console

from esdump.errors import ParseError, ReadError
from esdump.ir.models import GrammarMode, Node, SourceUnit, SyntaxTree, from_esprima
from esdump.ir.serializer import serialize

MODULE_SUFFIX = "module.js"

_stderr = Console(stderr=True, highlight=False, soft_wrap=True)


def _default_echo(message: str) -> None:
    _stderr.print(message, markup=False)


def grammar_mode(file_path: str | Path) -> GrammarMode:
    """Return MODULE if the final path segment ends with ``module.js``."""
    name = Path(file_path).name
    return GrammarMode.MODULE if name.endswith(MODULE_SUFFIX) else GrammarMode.SCRIPT


def resolve_source(file_path: str | Path) -> SourceUnit:
    path = Path(file_path)
    return SourceUnit(path=path, mode=grammar_mode(path))


def parse_source(source: str, mode: GrammarMode, source_path: str = "") -> SyntaxTree:
    """Parse source text under the given grammar mode.

    Raises:
        ParseError: the parser rejected the source. Line, column and index
            are copied from the parser's error.
    """
    parse = esprima.parseModule if mode == GrammarMode.MODULE else esprima.parseScript
    try:
        program = parse(source)
    except esprima.Error as e:
        raise ParseError(
            str(e),
            line=getattr(e, "lineNumber", None),
            column=getattr(e, "column", None),
            index=getattr(e, "index", None),
        ) from e

    root = from_esprima(program)
    if not isinstance(root, Node):
        raise ParseError(f"Parser returned {type(program).__name__}, not a Program node")
    return SyntaxTree(root=root, mode=mode, source_path=source_path)


def _read_text(path: Path) -> str:
    # newline="" keeps \r\n as written
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


async def read_source(unit: SourceUnit) -> str:
    """Read the whole file as UTF-8 text. The only suspension point."""
    try:
        return await asyncio.to_thread(_read_text, unit.path)
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(unit.path, e) from e


async def extract_ast(
    file_path: str | Path, echo: Callable[[str], None] | None = None
) -> SyntaxTree:
    """Read, mode-select and parse one file.

    The path is echoed to the diagnostic stream before the read starts so
    failures can be matched to their input.

    Raises:
        ReadError: the file could not be opened or read.
        ParseError: the contents are invalid under the selected mode.
    """
    (echo or _default_echo)(str(file_path))
    unit = resolve_source(file_path)
    source = await read_source(unit)
    return parse_source(source, unit.mode, source_path=str(unit.path))


def extract_ast_sync(
    file_path: str | Path, echo: Callable[[str], None] | None = None
) -> SyntaxTree:
    return asyncio.run(extract_ast(file_path, echo=echo))


async def dump_file(
    file_path: str | Path, echo: Callable[[str], None] | None = None
) -> str:
    """Extract a file and return its canonical JSON text."""
    tree = await extract_ast(file_path, echo=echo)
    return serialize(tree)


async def dump_files(
    file_paths: list[Path], echo: Callable[[str], None] | None = None
) -> list[str | Exception]:
    """Dump several independent files concurrently.

    Results come back in input order; a failed file yields its exception
    instead of text.
    """
    return await asyncio.gather(
        *(dump_file(p, echo=echo) for p in file_paths), return_exceptions=True
    )
