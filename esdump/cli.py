"""esdump CLI — dump ECMAScript syntax trees and build corpus fixtures."""

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from esdump import __version__
from esdump.corpus.fixtures import TEMPLATES
from esdump.errors import EsdumpError

# stdout carries only the JSON payload; everything else goes to stderr
console = Console(stderr=True, highlight=False, soft_wrap=True)


def _echo_path(path: str) -> None:
    console.print(path, markup=False)


@click.group()
@click.version_option(version=__version__)
def main():
    """esdump — ECMAScript AST extraction and canonical JSON serialization.

    Parse a script or module with esprima and print its syntax tree as
    deterministic, 4-space indented JSON. Files whose name ends in
    ``module.js`` are parsed as modules, everything else as scripts.
    """


# ── Parse ────────────────────────────────────────────────────────────


@main.command()
@click.argument("file_path")
def parse(file_path: str):
    """Print the syntax tree of FILE_PATH as JSON on stdout."""
    from esdump.ir.es_parser import dump_file

    try:
        text = asyncio.run(dump_file(file_path, echo=_echo_path))
    except EsdumpError as e:
        console.print(f"[red]{type(e).__name__}:[/] {escape(str(e))}")
        sys.exit(1)

    click.echo(text)


# ── Parse a directory ────────────────────────────────────────────────


@main.command(name="parse-dir")
@click.argument("source_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--output", "-o", default="./ast_json", help="Output directory for JSON files")
def parse_dir(source_dir: str, output: str):
    """Dump every .js file under SOURCE_DIR to a mirrored .json file."""
    from esdump.ir.es_parser import dump_files
    from esdump.utils.file_scanner import output_path_for, scan_js_files

    root = Path(source_dir)
    output_dir = Path(output)
    sources = scan_js_files(root)

    if not sources:
        console.print("[yellow]No .js files found.[/]")
        return

    console.print(f"\n[bold blue]esdump[/] — Parsing {len(sources)} files from {escape(str(root))}\n")

    results = asyncio.run(dump_files(sources, echo=_echo_path))

    failures = []
    for source, result in zip(sources, results):
        if isinstance(result, EsdumpError):
            failures.append((source, result))
            continue
        if isinstance(result, BaseException):
            raise result
        target = output_path_for(source, root, output_dir)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(result + "\n", encoding="utf-8")

    console.print(f"  [green]v[/] {len(sources) - len(failures)} written to {escape(str(output_dir))}")

    if failures:
        table = Table(title=f"Failures ({len(failures)})")
        table.add_column("File", style="cyan")
        table.add_column("Error", style="red")
        table.add_column("Detail")
        for source, error in failures:
            table.add_row(
                escape(str(source.relative_to(root))), type(error).__name__, escape(str(error))
            )
        console.print(table)
        sys.exit(1)


# ── Segment ──────────────────────────────────────────────────────────


@main.command()
@click.option("--config", "config_path", default=None, help="Path to esdump.yaml")
@click.option("--source", default=None, help="Override the corpus file")
@click.option("--output", "-o", default=None, help="Override the fixture output file")
@click.option("--template", "-t", default=None, type=click.Choice(sorted(TEMPLATES)))
def segment(config_path: str | None, source: str | None, output: str | None, template: str | None):
    """Slice the statement corpus into numbered test fixtures.

    Paths come from configuration (esdump.yaml), not from the command line,
    unless overridden.
    """
    import yaml

    from esdump.config import load_config
    from esdump.corpus.segmenter import run_segmenter

    try:
        config = load_config(config_path).with_overrides(
            source=source, output=output, template=template
        )
    except (OSError, ValueError, yaml.YAMLError) as e:
        console.print(f"[red]Invalid configuration:[/] {escape(str(e))}")
        sys.exit(1)

    try:
        count = run_segmenter(config)
    except EsdumpError as e:
        console.print(f"[red]{type(e).__name__}:[/] {escape(str(e))}")
        sys.exit(1)

    console.print(f"[green]Wrote {count} fixtures to[/] {escape(config.output)}")


if __name__ == "__main__":
    main()
