"""
Pandera schemas for tables exported to pandas.

The column set of a lookup table is only known once its header rows
have been read, so the schema is built from the loaded table rather
than declared as a ``DataFrameModel``.
"""

from dataextractor.schemas.table import build_table_schema, column_schema_for

__all__ = ["build_table_schema", "column_schema_for"]
