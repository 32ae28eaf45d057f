"""
Dataextractor: tabular lookup-table loading for interpolation.

This package turns schema-annotated delimited-text files into
column-oriented tables: a dense numeric payload plus typed,
named coordinate columns bound to lookup dimensions.
"""

from importlib.metadata import version

from dataextractor.backends import CsvBackend, ExtractorBackend, create_backend, load_table
from dataextractor.errors import (
    ConversionError,
    DataExtractorError,
    EmptyResultError,
    HeaderMismatchError,
    MalformedInputError,
    PayloadSelectionError,
    SchemaError,
    StructuralError,
    UnsupportedFormatError,
)
from dataextractor.table import ExtractedTable

__version__ = version("dataextractor")

__all__ = [
    "ConversionError",
    "CsvBackend",
    "DataExtractorError",
    "EmptyResultError",
    "ExtractedTable",
    "ExtractorBackend",
    "HeaderMismatchError",
    "MalformedInputError",
    "PayloadSelectionError",
    "SchemaError",
    "StructuralError",
    "UnsupportedFormatError",
    "__version__",
    "create_backend",
    "load_table",
]
