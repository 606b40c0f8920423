"""Corpus segmentation — slice a statement corpus into named test fixtures.

Boundaries are found with a line-suffix heuristic, not a tokenizer. A ``;``
or ``}`` at the end of a line closes the pending statement even when it sits
inside a string or regex literal.
"""

from esdump.corpus.fixtures import TEMPLATES, FixtureTemplate, TestFixture
from esdump.corpus.segmenter import render_fixtures, run_segmenter, segment

__all__ = [
    "TEMPLATES",
    "FixtureTemplate",
    "TestFixture",
    "render_fixtures",
    "run_segmenter",
    "segment",
]
