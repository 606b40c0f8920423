"""Configuration — fixed paths and template for the corpus segmenter.

Read from ``esdump.yaml`` in the working directory when present::

    corpus:
      source: node_modules/everything.js/es5.js
      output: es5-2.rs
      template: rust
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from esdump.corpus.fixtures import TEMPLATES

CONFIG_FILE = "esdump.yaml"
DEFAULT_CORPUS = "node_modules/everything.js/es5.js"
DEFAULT_OUTPUT = "es5-2.rs"
DEFAULT_TEMPLATE = "rust"


@dataclass(frozen=True)
class SegmenterConfig:
    source: str = DEFAULT_CORPUS
    output: str = DEFAULT_OUTPUT
    template: str = DEFAULT_TEMPLATE

    def with_overrides(self, **overrides: str | None) -> SegmenterConfig:
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        config = replace(self, **changes)
        _check_template(config.template)
        return config


def load_config(path: str | Path | None = None) -> SegmenterConfig:
    """Load segmenter configuration from a YAML file.

    With no path, ``esdump.yaml`` in the working directory is used if it
    exists; otherwise the defaults apply. An explicit path must exist.
    """
    if path is None:
        path = Path(CONFIG_FILE)
        if not path.exists():
            return SegmenterConfig()

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    corpus = data.get("corpus", {}) or {}
    config = SegmenterConfig(
        source=str(corpus.get("source", DEFAULT_CORPUS)),
        output=str(corpus.get("output", DEFAULT_OUTPUT)),
        template=str(corpus.get("template", DEFAULT_TEMPLATE)),
    )
    _check_template(config.template)
    return config


def _check_template(name: str) -> None:
    if name not in TEMPLATES:
        raise ValueError(
            f"Invalid template '{name}'. Must be one of: {sorted(TEMPLATES)}"
        )
