"""Error types raised by the extraction pipeline and the serializer.

None of these are retried or recovered internally. The CLI is the one place
that turns them into stderr output and an exit status.
"""

from __future__ import annotations

from pathlib import Path


class EsdumpError(Exception):
    """Base class for all esdump failures."""


class ReadError(EsdumpError):
    """A source file could not be opened or read."""

    def __init__(self, path: str | Path, cause: Exception):
        self.path = str(path)
        self.cause = cause
        super().__init__(f"Cannot read {self.path}: {cause}")


class ParseError(EsdumpError):
    """The source is not valid under the selected grammar mode.

    Carries the position information reported by the parser verbatim.
    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        index: int | None = None,
    ):
        self.line = line
        self.column = column
        self.index = index
        super().__init__(message)


class EncodingError(EsdumpError):
    """A value reached the serializer that JSON cannot represent."""

    def __init__(self, path: str, value: object):
        self.path = path
        self.value = value
        super().__init__(
            f"Cannot encode {type(value).__name__} at {path or '<root>'}"
        )
