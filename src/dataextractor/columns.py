"""
Typed columns of a lookup table.

A column is exactly one of ``IntColumn``, ``FloatColumn`` or
``StringColumn``. Columns are filled one cell at a time through a
``ColumnBuffer`` and frozen into read-only numpy arrays once the
whole file has been read.
"""

import math
import re
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

# Cell text standing for "no value" (as in NetCDF CDL).
MISSING_PLACEHOLDER = "_"

MISSING_INT = -2147483643
MISSING_FLOAT = -3.3687953e38
MISSING_STRING = "MISSING*"

_INT_LITERAL = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_LITERAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)

_INT64 = np.iinfo(np.int64)


class ColumnKind(str, Enum):
    """Storage kind of a column."""

    INT = "int"
    FLOAT = "float"
    STRING = "string"


class ColumnType(str, Enum):
    """Type declared for a column in the type header row."""

    INTEGER = "integer"
    FLOAT = "float"
    STRING = "string"
    DATETIME = "datetime"  # kept as opaque text

    @property
    def kind(self) -> ColumnKind:
        """Storage kind used for values of this type."""
        return _KIND_BY_TYPE[self]

    @property
    def is_numeric(self) -> bool:
        """Whether values of this type can form a payload."""
        return self.kind is not ColumnKind.STRING


_KIND_BY_TYPE: dict[ColumnType, ColumnKind] = {
    ColumnType.INTEGER: ColumnKind.INT,
    ColumnType.FLOAT: ColumnKind.FLOAT,
    ColumnType.STRING: ColumnKind.STRING,
    ColumnType.DATETIME: ColumnKind.STRING,
}

# Type header tags, matched case-sensitively.
TYPE_TAGS: dict[str, ColumnType] = {
    "int": ColumnType.INTEGER,
    "integer": ColumnType.INTEGER,
    "float": ColumnType.FLOAT,
    "string": ColumnType.STRING,
    "datetime": ColumnType.DATETIME,
}

MISSING_VALUES: dict[ColumnKind, int | float | str] = {
    ColumnKind.INT: MISSING_INT,
    ColumnKind.FLOAT: MISSING_FLOAT,
    ColumnKind.STRING: MISSING_STRING,
}

_DTYPES: dict[ColumnKind, type] = {
    ColumnKind.INT: np.int64,
    ColumnKind.FLOAT: np.float64,
    ColumnKind.STRING: object,
}


def parse_type_tag(tag: str) -> ColumnType | None:
    """Return the column type for a type header tag, or None if unknown."""
    return TYPE_TAGS.get(tag)


@dataclass(frozen=True)
class ColumnSchema:
    """Name and declared type of one column."""

    name: str
    declared_type: ColumnType


def _readonly(values: np.ndarray) -> np.ndarray:
    values.flags.writeable = False
    return values


@dataclass(frozen=True, eq=False)
class _Column:
    values: np.ndarray

    kind = ColumnKind.STRING

    def __len__(self) -> int:
        return len(self.values)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(np.array_equal(self.values, other.values))

    def tolist(self) -> list:
        """Values as a plain Python list."""
        return self.values.tolist()

    @property
    def missing_count(self) -> int:
        """Number of cells holding the missing-value sentinel."""
        return int(np.count_nonzero(self.values == MISSING_VALUES[self.kind]))


@dataclass(frozen=True, eq=False)
class IntColumn(_Column):
    """Column of 64-bit signed integers."""

    kind = ColumnKind.INT


@dataclass(frozen=True, eq=False)
class FloatColumn(_Column):
    """Column of 64-bit floats."""

    kind = ColumnKind.FLOAT


@dataclass(frozen=True, eq=False)
class StringColumn(_Column):
    """Column of strings (also used for ``datetime`` columns)."""

    kind = ColumnKind.STRING


Column = IntColumn | FloatColumn | StringColumn

_COLUMN_CLASSES: dict[ColumnKind, type[_Column]] = {
    ColumnKind.INT: IntColumn,
    ColumnKind.FLOAT: FloatColumn,
    ColumnKind.STRING: StringColumn,
}


def make_column(kind: ColumnKind, values: list | np.ndarray) -> Column:
    """Build a read-only column of the given kind from a copy of ``values``."""
    array = np.array(values, dtype=_DTYPES[kind])
    return _COLUMN_CLASSES[kind](_readonly(array))


def parse_int(text: str) -> int:
    """
    Parse an integral literal.

    Raises:
        ValueError: If text is not an integer literal or does not fit
            in 64 bits.
    """
    stripped = text.strip()
    if not _INT_LITERAL.fullmatch(stripped):
        msg = f"not an integer literal: {text!r}"
        raise ValueError(msg)
    value = int(stripped)
    if not _INT64.min <= value <= _INT64.max:
        msg = f"integer out of range: {text!r}"
        raise ValueError(msg)
    return value


def parse_float(text: str) -> float:
    """
    Parse a decimal literal (optionally with an exponent).

    Raises:
        ValueError: If text is not a decimal literal or overflows float64.
    """
    stripped = text.strip()
    if not _FLOAT_LITERAL.fullmatch(stripped):
        msg = f"not a decimal literal: {text!r}"
        raise ValueError(msg)
    value = float(stripped)
    if not math.isfinite(value):
        msg = f"float out of range: {text!r}"
        raise ValueError(msg)
    return value


@dataclass
class ColumnBuffer:
    """
    Fixed-capacity buffer that a column is appended into while reading.

    Capacity is the number of non-header rows; blank lines leave the
    buffer short and ``freeze`` trims it.
    """

    kind: ColumnKind
    capacity: int
    size: int = 0
    _data: np.ndarray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._data = np.empty(self.capacity, dtype=_DTYPES[self.kind])

    def append(self, value: int | float | str) -> None:
        """Append an already converted value."""
        self._data[self.size] = value
        self.size += 1

    def freeze(self) -> Column:
        """Return the filled part of the buffer as a read-only column."""
        return make_column(self.kind, self._data[: self.size])


def append_cell(buffer: ColumnBuffer, text: str) -> None:
    """
    Convert a cell and append it to a buffer.

    The placeholder ``_`` (full cell only) becomes the buffer kind's
    missing-value sentinel.

    Raises:
        ValueError: If the cell cannot be converted to the buffer kind.
    """
    if text == MISSING_PLACEHOLDER:
        buffer.append(MISSING_VALUES[buffer.kind])
    elif buffer.kind is ColumnKind.INT:
        buffer.append(parse_int(text))
    elif buffer.kind is ColumnKind.FLOAT:
        buffer.append(parse_float(text))
    elif buffer.kind is ColumnKind.STRING:
        buffer.append(text)
    else:
        msg = f"Unhandled column kind: {buffer.kind}"
        raise TypeError(msg)


def to_payload_array(column: Column) -> np.ndarray:
    """
    Convert a numeric column into a dense ``(n, 1)`` float64 array.

    Raises:
        TypeError: If the column holds strings.
    """
    if isinstance(column, (IntColumn, FloatColumn)):
        array = column.values.astype(np.float64).reshape(-1, 1)
        return _readonly(array)
    if isinstance(column, StringColumn):
        msg = "String columns cannot be converted to a payload array"
        raise TypeError(msg)
    msg = f"Unhandled column type: {type(column).__name__}"
    raise TypeError(msg)
