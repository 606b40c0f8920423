"""Corpus segmenter — group corpus lines into statement-sized fixtures.

Single forward pass:
1. Skip blank lines and lines starting with ``//`` or ``/*``
2. Append everything else to the pending snippet
3. Close the snippet when the raw line ends with ``;`` or ``}``

This is a best-effort boundary detector. A terminator inside a string or
regex literal closes the snippet early, and text after the last terminator
is never emitted. Existing fixtures depend on these exact boundaries.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator

from esdump.corpus.fixtures import FixtureTemplate, TestFixture, get_template
from esdump.errors import ReadError

if TYPE_CHECKING:
    from esdump.config import SegmenterConfig

COMMENT_PREFIXES = ("//", "/*")
TERMINATORS = (";", "}")


def segment(text: str) -> Iterator[TestFixture]:
    """Yield fixtures in corpus order, numbered from 1."""
    counter = 1
    pending: list[str] = []

    for line in text.split("\n"):
        if line.startswith(COMMENT_PREFIXES) or not line.strip():
            continue
        pending.append(line)
        if line.endswith(TERMINATORS):
            yield TestFixture(ordinal=counter, snippet="\n".join(pending))
            counter += 1
            pending = []


def render_fixtures(fixtures: Iterable[TestFixture], template: FixtureTemplate) -> str:
    return "".join(template.render(f) for f in fixtures)


def run_segmenter(config: SegmenterConfig) -> int:
    """Read the corpus, write every fixture to the output file.

    The corpus is read in full before anything is written, so a read failure
    leaves no partial output behind. Returns the number of fixtures written.

    Raises:
        ReadError: the corpus file could not be read.
    """
    template = get_template(config.template)
    source = Path(config.source)
    try:
        with open(source, encoding="utf-8", newline="") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ReadError(source, e) from e

    fixtures = list(segment(text))
    with open(config.output, "w", encoding="utf-8", newline="") as f:
        f.write(render_fixtures(fixtures, template))
    return len(fixtures)
