"""Schema derivation for ``ExtractedTable.to_frame``."""

from typing import TYPE_CHECKING

import pandera.pandas as pa

from dataextractor.columns import Column, ColumnKind

if TYPE_CHECKING:
    from dataextractor.table import ExtractedTable


def _is_str(value: object) -> bool:
    return isinstance(value, str)


def column_schema_for(column: Column, name: str) -> pa.Column:
    """
    Pandera column matching a typed column.

    Missing values are stored as sentinels, so no column is nullable.
    String dtypes differ between pandas versions; string columns are
    checked element-wise instead.
    """
    if column.kind is ColumnKind.INT:
        return pa.Column("int64", nullable=False, name=name)
    if column.kind is ColumnKind.FLOAT:
        return pa.Column("float64", nullable=False, name=name)
    return pa.Column(
        nullable=False,
        name=name,
        checks=pa.Check(_is_str, element_wise=True, error="value is not a string"),
    )


def build_table_schema(table: "ExtractedTable") -> pa.DataFrameSchema:
    """
    Build the DataFrame schema for a loaded table.

    Args:
        table: Table whose coordinate columns and payload define the schema.

    Returns:
        Strict, ordered schema: coordinates in file order, then the payload.
    """
    columns = {
        name: column_schema_for(column, name)
        for name, column in table.coordinate_columns.items()
    }
    columns[table.payload_name] = pa.Column("float64", nullable=False, name=table.payload_name)
    return pa.DataFrameSchema(
        columns,
        strict=True,
        ordered=True,
        name="ExtractedTableSchema",
    )
