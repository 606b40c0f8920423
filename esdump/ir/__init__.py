"""Syntax-tree IR for ECMAScript sources.

The IR sits between esprima's parse objects and the JSON output:
- models: the immutable tagged-variant tree and the grammar mode
- es_parser: grammar-mode selection and the read/parse pipeline
- serializer: the canonical, field-ordered JSON encoding
"""
