"""
Exception hierarchy for table loading.

Callers branch on three categories:

- ``MalformedInputError``: the file violates the table format.
- ``PayloadSelectionError``: no single payload column could be chosen.
- ``EmptyResultError``: the file is well-formed but holds no data rows.

Every error names the source file, and where it applies the column
and 1-based line number involved.
"""

from pathlib import Path


class DataExtractorError(Exception):
    """Base class for all table loading errors."""

    def __init__(
        self,
        message: str,
        *,
        path: Path | str,
        column: str | None = None,
        line: int | None = None,
    ) -> None:
        self.path = Path(path)
        self.column = column
        self.line = line
        self.reason = message
        super().__init__(f"{message} (file: '{self.path}')")


class MalformedInputError(DataExtractorError):
    """The file does not follow the two-header-row table format."""


class StructuralError(MalformedInputError):
    """Wrong number of rows or cells."""


class SchemaError(MalformedInputError):
    """Unusable column type declaration."""


class HeaderMismatchError(StructuralError, SchemaError):
    """The type header row and the name header row differ in length."""


class ConversionError(MalformedInputError):
    """A cell cannot be converted to its column's declared type."""


class PayloadSelectionError(DataExtractorError):
    """Zero or more than one column matches the payload group."""


class EmptyResultError(DataExtractorError):
    """The table was parsed but contains no data rows."""


class UnsupportedFormatError(DataExtractorError):
    """No backend can read files of this kind."""
