"""Tests for typed columns and cell conversion."""

import numpy as np
import pytest

from dataextractor.columns import (
    MISSING_FLOAT,
    MISSING_INT,
    MISSING_STRING,
    MISSING_VALUES,
    TYPE_TAGS,
    ColumnBuffer,
    ColumnKind,
    ColumnType,
    FloatColumn,
    IntColumn,
    StringColumn,
    append_cell,
    make_column,
    parse_float,
    parse_int,
    parse_type_tag,
    to_payload_array,
)


class TestTypeTags:
    """Tests for the type header vocabulary."""

    def test_recognized_tags(self) -> None:
        """Exactly five tags are recognized."""
        assert set(TYPE_TAGS) == {"int", "integer", "float", "string", "datetime"}
        assert parse_type_tag("int") is ColumnType.INTEGER
        assert parse_type_tag("integer") is ColumnType.INTEGER
        assert parse_type_tag("datetime") is ColumnType.DATETIME

    @pytest.mark.parametrize("tag", ["INT", "Float", "double", "", " float"])
    def test_unknown_tags(self, tag: str) -> None:
        """Anything else, including case variants, is unknown."""
        assert parse_type_tag(tag) is None

    def test_storage_kinds(self) -> None:
        """Datetime is stored as text; only int and float are numeric."""
        assert ColumnType.DATETIME.kind is ColumnKind.STRING
        assert ColumnType.INTEGER.is_numeric
        assert ColumnType.FLOAT.is_numeric
        assert not ColumnType.STRING.is_numeric
        assert not ColumnType.DATETIME.is_numeric


class TestMissingValues:
    """Tests for the missing-value sentinel table."""

    def test_sentinel_table(self) -> None:
        """Each kind has its own sentinel."""
        assert MISSING_VALUES == {
            ColumnKind.INT: MISSING_INT,
            ColumnKind.FLOAT: MISSING_FLOAT,
            ColumnKind.STRING: MISSING_STRING,
        }

    @pytest.mark.parametrize(
        ("kind", "expected"),
        [
            (ColumnKind.INT, MISSING_INT),
            (ColumnKind.FLOAT, MISSING_FLOAT),
            (ColumnKind.STRING, MISSING_STRING),
        ],
    )
    def test_placeholder_substitution(self, kind: ColumnKind, expected: object) -> None:
        """'_' is replaced, not parsed."""
        buffer = ColumnBuffer(kind, capacity=1)
        append_cell(buffer, "_")

        assert buffer.freeze().tolist() == [expected]

    def test_missing_count(self) -> None:
        """missing_count counts sentinel cells."""
        column = make_column(ColumnKind.INT, [1, MISSING_INT, MISSING_INT])

        assert column.missing_count == 2


class TestParsing:
    """Tests for numeric literal parsing."""

    @pytest.mark.parametrize(("text", "expected"), [("0", 0), ("-12", -12), ("+7", 7), (" 3 ", 3)])
    def test_parse_int(self, text: str, expected: int) -> None:
        """Integral literals parse."""
        assert parse_int(text) == expected

    @pytest.mark.parametrize("text", ["1.0", "1e2", "0x10", "1_000", "", "-", "\u0663"])
    def test_parse_int_rejects(self, text: str) -> None:
        """Non-integral literals are rejected."""
        with pytest.raises(ValueError):
            parse_int(text)

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("1", 1.0), ("1.", 1.0), (".5", 0.5), ("-2.5e2", -250.0), ("3E-1", 0.3)],
    )
    def test_parse_float(self, text: str, expected: float) -> None:
        """Decimal literals parse."""
        assert parse_float(text) == expected

    @pytest.mark.parametrize(
        "text", ["nan", "inf", "1,0", ".", "e5", "1e", "1e400", "-1e400", "\u0661.5"]
    )
    def test_parse_float_rejects(self, text: str) -> None:
        """Non-decimal literals are rejected."""
        with pytest.raises(ValueError):
            parse_float(text)


class TestColumnBuffer:
    """Tests for building columns row by row."""

    def test_freeze_trims_to_size(self) -> None:
        """Unused capacity is dropped."""
        buffer = ColumnBuffer(ColumnKind.FLOAT, capacity=4)
        append_cell(buffer, "1.5")
        append_cell(buffer, "2.5")

        column = buffer.freeze()

        assert isinstance(column, FloatColumn)
        assert column.tolist() == [1.5, 2.5]

    def test_string_cells_kept_verbatim(self) -> None:
        """String cells are not stripped or converted."""
        buffer = ColumnBuffer(ColumnKind.STRING, capacity=2)
        append_cell(buffer, " padded ")
        append_cell(buffer, "12")

        assert buffer.freeze().tolist() == [" padded ", "12"]

    def test_frozen_column_is_read_only(self) -> None:
        """Frozen values cannot be modified."""
        buffer = ColumnBuffer(ColumnKind.INT, capacity=1)
        append_cell(buffer, "5")
        column = buffer.freeze()

        with pytest.raises(ValueError):
            column.values[0] = 6


class TestColumns:
    """Tests for column equality and payload conversion."""

    def test_equality(self) -> None:
        """Columns compare by kind and values."""
        assert make_column(ColumnKind.INT, [1, 2]) == make_column(ColumnKind.INT, [1, 2])
        assert make_column(ColumnKind.INT, [1, 2]) != make_column(ColumnKind.INT, [2, 1])
        assert make_column(ColumnKind.INT, [1, 2]) != make_column(ColumnKind.FLOAT, [1.0, 2.0])

    def test_int_payload(self) -> None:
        """Integer columns convert to a float (n, 1) array."""
        array = to_payload_array(make_column(ColumnKind.INT, [1, 2, 3]))

        assert array.shape == (3, 1)
        assert array.dtype == np.float64
        assert array.tolist() == [[1.0], [2.0], [3.0]]

    def test_float_payload(self) -> None:
        """Float columns keep their values."""
        array = to_payload_array(make_column(ColumnKind.FLOAT, [0.25]))

        assert array.tolist() == [[0.25]]

    def test_string_payload_rejected(self) -> None:
        """String columns cannot become a payload."""
        with pytest.raises(TypeError):
            to_payload_array(make_column(ColumnKind.STRING, ["a"]))

    def test_column_classes(self) -> None:
        """make_column returns the class matching the kind."""
        assert isinstance(make_column(ColumnKind.INT, []), IntColumn)
        assert isinstance(make_column(ColumnKind.FLOAT, []), FloatColumn)
        assert isinstance(make_column(ColumnKind.STRING, []), StringColumn)
