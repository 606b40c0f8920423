"""esdump — ECMAScript AST extraction and canonical JSON serialization."""

__version__ = "0.1.0"
