"""File scanner — discover ECMAScript sources for batch extraction."""

from pathlib import Path

# Directories to always skip
SKIP_DIRS = {
    ".git", "node_modules", "bower_components", "__pycache__", ".venv", "venv",
    "dist", "build", "coverage", ".next", ".nuxt", ".cache", "target",
}

SOURCE_SUFFIXES = {".js", ".mjs", ".cjs"}


def scan_js_files(root: Path) -> list[Path]:
    """Recursively collect ECMAScript files under root, sorted by path."""
    files = []
    for item in root.rglob("*"):
        if item.is_file() and _should_include(item.relative_to(root)):
            files.append(item)
    return sorted(files)


def _should_include(path: Path) -> bool:
    """Check if a file (relative to the scan root) should be extracted."""
    for part in path.parts:
        if part in SKIP_DIRS:
            return False
    return path.suffix in SOURCE_SUFFIXES


def output_path_for(source: Path, root: Path, output_dir: Path) -> Path:
    """Mirror a source's location under output_dir with a .json suffix."""
    relative = source.relative_to(root)
    return output_dir / relative.with_name(relative.name + ".json")
