"""Tests for the file scanner utility."""

import tempfile
from pathlib import Path

from esdump.utils.file_scanner import SKIP_DIRS, output_path_for, scan_js_files


def test_scan_finds_js_files():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "main.js").write_text("a;")
        (root / "lib").mkdir()
        (root / "lib" / "util.module.js").write_text("export default 1;")
        (root / "lib" / "esm.mjs").write_text("export default 1;")
        (root / "readme.md").write_text("# readme")

        files = scan_js_files(root)
        names = [f.name for f in files]
        assert names == ["esm.mjs", "util.module.js", "main.js"]
        assert "readme.md" not in names


def test_scan_skips_excluded_dirs():
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir)
        (root / "src").mkdir()
        (root / "src" / "app.js").write_text("a;")
        (root / "node_modules").mkdir()
        (root / "node_modules" / "lib.js").write_text("b;")
        (root / "dist").mkdir()
        (root / "dist" / "bundle.js").write_text("c;")

        paths_str = [str(f) for f in scan_js_files(root)]
        assert any("app.js" in p for p in paths_str)
        assert not any("node_modules" in p for p in paths_str)
        assert not any("bundle.js" in p for p in paths_str)


def test_scan_root_inside_skipped_name_is_allowed():
    # only parts below the scan root are checked
    with tempfile.TemporaryDirectory() as tmpdir:
        root = Path(tmpdir) / "build"
        root.mkdir()
        (root / "a.js").write_text("a;")
        assert [f.name for f in scan_js_files(root)] == ["a.js"]


def test_output_path_mirrors_layout():
    root = Path("/src")
    target = output_path_for(Path("/src/lib/a.module.js"), root, Path("/out"))
    assert target == Path("/out/lib/a.module.js.json")


def test_skip_dirs_contains_expected():
    assert ".git" in SKIP_DIRS
    assert "node_modules" in SKIP_DIRS
