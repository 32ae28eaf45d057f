"""
CSV table backend.

Expected file layout:

    lat,lon,value@ObsBias
    float,float,float
    10.0,20.0,5.5
    11.0,21.0,_

Line 1 names the columns, line 2 declares their types (``int``,
``integer``, ``float``, ``string`` or ``datetime``) and every further
line holds one value per column. ``_`` marks a missing value and an
empty line is ignored.
"""

import csv
from pathlib import Path

from dataextractor.backends.base import ExtractorBackend
from dataextractor.columns import (
    ColumnBuffer,
    ColumnSchema,
    append_cell,
    parse_type_tag,
    to_payload_array,
)
from dataextractor.config.settings import ExtractorConfig
from dataextractor.errors import (
    ConversionError,
    EmptyResultError,
    HeaderMismatchError,
    PayloadSelectionError,
    SchemaError,
    StructuralError,
)
from dataextractor.naming import find_payload_candidates, to_group_path
from dataextractor.parsing import GridParser, csv_grid_parser
from dataextractor.table import ExtractedTable
from dataextractor.utils.logging import get_logger, log_context

log = get_logger(__name__)

NUM_HEADER_ROWS = 2

# Every coordinate column read from a CSV file indexes the first dimension.
FIRST_DIMENSION = 0


def _is_blank(row: list[str]) -> bool:
    return len(row) == 1 and row[0] == ""


class CsvBackend(ExtractorBackend):
    """Loads lookup tables from CSV files with two header rows."""

    def __init__(
        self,
        path: Path | str,
        config: ExtractorConfig | None = None,
        *,
        parse_grid: GridParser | None = None,
    ) -> None:
        """
        Initialize CSV backend.

        Args:
            path: CSV file to read.
            config: Extractor configuration; defaults apply when omitted.
            parse_grid: Parser turning file text into rows of cells.
                Defaults to a CSV parser using the configured delimiter.
        """
        super().__init__(path, config)
        self.parse_grid = (
            parse_grid
            if parse_grid is not None
            else csv_grid_parser(self.config.parser.delimiter)
        )

    def load_data(self, payload_group: str) -> ExtractedTable:
        """
        Load the table whose payload column belongs to ``payload_group``.

        Args:
            payload_group: Group name; the payload column is the one
                named ``<payload_group>/...`` or ``...@<payload_group>``.

        Returns:
            The loaded table.

        Raises:
            FileNotFoundError: If the file does not exist.
            StructuralError: Too few rows or a row of the wrong length.
            SchemaError: Bad type header or a non-numeric payload column.
            ConversionError: A cell does not match its column type.
            PayloadSelectionError: Zero or several payload candidates.
            EmptyResultError: No data rows.
        """
        with log_context(path=str(self.path), payload_group=payload_group):
            log.info("Loading data table")
            grid = self._read_grid()
            table = self._build_table(grid, payload_group)
            log.info(
                "Loaded data table",
                rows=table.num_rows,
                payload=table.payload_name,
                coordinates=table.coordinate_names,
            )
            return table

    def _read_grid(self) -> list[list[str]]:
        """Read the whole file and split it into cells."""
        self._require_file()
        encoding = self.config.parser.encoding
        try:
            with self.path.open(encoding=encoding, newline="") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            msg = f"File is not valid {encoding} text"
            raise StructuralError(msg, path=self.path) from e
        try:
            return self.parse_grid(text)
        except csv.Error as e:
            msg = f"File could not be parsed as CSV: {e}"
            raise StructuralError(msg, path=self.path) from e

    def _build_table(self, grid: list[list[str]], payload_group: str) -> ExtractedTable:
        num_rows = len(grid)
        # Column names, column types and at least one row of values.
        if num_rows <= NUM_HEADER_ROWS:
            msg = "No data could be loaded from the file"
            raise StructuralError(msg, path=self.path)

        names = list(grid[0])
        num_columns = len(names)
        type_tags = grid[1]
        if len(type_tags) != num_columns:
            msg = (
                f"The number of columns in line 2 ({len(type_tags)}) "
                f"differs from that in line 1 ({num_columns})"
            )
            raise HeaderMismatchError(msg, path=self.path, line=2)

        payload_index = self._find_payload_column(names, payload_group)

        # Error messages from here on use the Group/var form.
        names = [to_group_path(name) for name in names]
        schemas = self._resolve_schemas(names, type_tags, payload_index)

        buffers = [
            ColumnBuffer(schema.declared_type.kind, num_rows - NUM_HEADER_ROWS)
            for schema in schemas
        ]
        for row_index in range(NUM_HEADER_ROWS, num_rows):
            self._append_row(grid[row_index], row_index + 1, schemas, buffers)

        columns = [buffer.freeze() for buffer in buffers]
        payload = to_payload_array(columns[payload_index])
        if payload.shape[0] == 0:
            msg = "No data could be loaded from the file"
            raise EmptyResultError(msg, path=self.path)

        coordinates = [
            (schema.name, column)
            for index, (schema, column) in enumerate(zip(schemas, columns, strict=True))
            if index != payload_index
        ]
        return ExtractedTable.from_columns(
            payload,
            schemas[payload_index].name,
            coordinates,
            dimension=FIRST_DIMENSION,
        )

    def _find_payload_column(self, names: list[str], payload_group: str) -> int:
        """Index of the single column belonging to ``payload_group``."""
        prefix = f"{payload_group}/"
        suffix = f"@{payload_group}"
        candidates = find_payload_candidates(names, payload_group)
        if not candidates:
            msg = (
                f"No payload column found: no column name begins with '{prefix}' "
                f"or ends with '{suffix}'"
            )
            raise PayloadSelectionError(msg, path=self.path)
        if len(candidates) > 1:
            found = ", ".join(f"'{names[i]}'" for i in candidates)
            msg = (
                f"Multiple payload candidates found: more than one column name "
                f"begins with '{prefix}' or ends with '{suffix}' ({found})"
            )
            raise PayloadSelectionError(
                msg, path=self.path, column=", ".join(names[i] for i in candidates)
            )
        return candidates[0]

    def _resolve_schemas(
        self, names: list[str], type_tags: list[str], payload_index: int
    ) -> list[ColumnSchema]:
        """Pair names with declared types, rejecting anything unusable."""
        schemas: list[ColumnSchema] = []
        seen: set[str] = set()
        for index, (name, tag) in enumerate(zip(names, type_tags, strict=True)):
            if name in seen:
                msg = f"Duplicate column name '{name}'"
                raise SchemaError(msg, path=self.path, column=name, line=1)
            seen.add(name)

            declared_type = parse_type_tag(tag)
            if declared_type is None:
                msg = f"Unsupported data type '{tag}' for column '{name}'"
                raise SchemaError(msg, path=self.path, column=name, line=2)
            if index == payload_index and not declared_type.is_numeric:
                msg = (
                    f"The payload column '{name}' must contain numeric data, "
                    f"not '{tag}'"
                )
                raise SchemaError(msg, path=self.path, column=name, line=2)
            schemas.append(ColumnSchema(name, declared_type))
        return schemas

    def _append_row(
        self,
        row: list[str],
        line: int,
        schemas: list[ColumnSchema],
        buffers: list[ColumnBuffer],
    ) -> None:
        """Append one data row to the column buffers."""
        if _is_blank(row):
            log.debug("Skipping empty line", line=line)
            return
        if len(row) != len(schemas):
            msg = (
                f"The number of columns in line {line} ({len(row)}) "
                f"differs from that in line 1 ({len(schemas)})"
            )
            raise StructuralError(msg, path=self.path, line=line)

        for schema, buffer, cell in zip(schemas, buffers, row, strict=True):
            try:
                append_cell(buffer, cell)
            except ValueError as e:
                msg = (
                    f"Cannot convert {cell!r} in line {line}, column '{schema.name}' "
                    f"to {schema.declared_type.value}"
                )
                raise ConversionError(
                    msg, path=self.path, column=schema.name, line=line
                ) from e
