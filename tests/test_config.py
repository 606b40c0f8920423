"""Tests for segmenter configuration loading."""

import os
import tempfile
from pathlib import Path

import pytest
import yaml

from esdump.config import (
    DEFAULT_CORPUS,
    DEFAULT_OUTPUT,
    SegmenterConfig,
    load_config,
)


def _write_yaml(data: dict) -> str:
    """Write a dict to a temporary YAML file and return the path."""
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    yaml.dump(data, f)
    f.close()
    return f.name


def test_defaults_match_corpus_layout():
    config = SegmenterConfig()
    assert config.source == DEFAULT_CORPUS == "node_modules/everything.js/es5.js"
    assert config.output == DEFAULT_OUTPUT == "es5-2.rs"
    assert config.template == "rust"


def test_load_config_from_yaml():
    path = _write_yaml(
        {"corpus": {"source": "corpus/es5.js", "output": "fixtures.py", "template": "pytest"}}
    )
    config = load_config(path)
    assert config == SegmenterConfig(
        source="corpus/es5.js", output="fixtures.py", template="pytest"
    )


def test_load_config_partial_uses_defaults():
    config = load_config(_write_yaml({"corpus": {"output": "out.rs"}}))
    assert config.source == DEFAULT_CORPUS
    assert config.output == "out.rs"


def test_load_config_empty_file():
    f = tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False)
    f.close()
    assert load_config(f.name) == SegmenterConfig()


def test_load_config_invalid_template():
    with pytest.raises(ValueError):
        load_config(_write_yaml({"corpus": {"template": "cobol"}}))


def test_load_config_without_file_in_cwd():
    cwd = os.getcwd()
    with tempfile.TemporaryDirectory() as tmpdir:
        os.chdir(tmpdir)
        try:
            assert load_config() == SegmenterConfig()
            Path("esdump.yaml").write_text("corpus:\n  output: local.rs\n")
            assert load_config().output == "local.rs"
        finally:
            os.chdir(cwd)


def test_explicit_missing_config_raises():
    with pytest.raises(FileNotFoundError):
        load_config("/nonexistent/esdump.yaml")


def test_with_overrides_skips_none():
    config = SegmenterConfig().with_overrides(source="x.js", output=None, template=None)
    assert config.source == "x.js"
    assert config.output == DEFAULT_OUTPUT
    with pytest.raises(ValueError):
        SegmenterConfig().with_overrides(template="cobol")
