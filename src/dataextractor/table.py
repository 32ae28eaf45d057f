"""
The table produced by every backend.

``ExtractedTable`` is what interpolation code consumes: a dense
payload array plus coordinate columns keyed by name and bound to
lookup dimensions. It does not depend on the storage format the
data came from.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

import numpy as np

from dataextractor.columns import Column

if TYPE_CHECKING:
    import pandas as pd


@dataclass(frozen=True, eq=False)
class ExtractedTable:
    """
    Loaded lookup table.

    Attributes:
        payload: Read-only float64 array of shape (num_rows, 1).
        payload_name: Name of the payload column in ``Group/var`` form.
        coordinate_columns: Coordinate columns by name, in file order.
        column_name_to_dimension: Dimension index of each coordinate column.
        dimension_to_column_names: Coordinate names bound to each dimension.
    """

    payload: np.ndarray
    payload_name: str
    coordinate_columns: Mapping[str, Column]
    column_name_to_dimension: Mapping[str, int]
    dimension_to_column_names: tuple[tuple[str, ...], ...]

    @classmethod
    def from_columns(
        cls,
        payload: np.ndarray,
        payload_name: str,
        coordinates: Sequence[tuple[str, Column]],
        dimension: int = 0,
    ) -> "ExtractedTable":
        """
        Assemble a table whose coordinate columns all share one dimension.

        Args:
            payload: Dense (n, 1) payload array.
            payload_name: Normalized payload column name.
            coordinates: (name, column) pairs in file order.
            dimension: Dimension the coordinate columns are bound to.
        """
        names = tuple(name for name, _ in coordinates)
        dims: list[tuple[str, ...]] = [() for _ in range(dimension)]
        dims.append(names)
        return cls(
            payload=payload,
            payload_name=payload_name,
            coordinate_columns=MappingProxyType(dict(coordinates)),
            column_name_to_dimension=MappingProxyType({name: dimension for name in names}),
            dimension_to_column_names=tuple(dims),
        )

    @property
    def num_rows(self) -> int:
        """Number of data rows."""
        return int(self.payload.shape[0])

    @property
    def coordinate_names(self) -> list[str]:
        """Coordinate column names in file order."""
        return list(self.coordinate_columns)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExtractedTable):
            return NotImplemented
        return (
            self.payload_name == other.payload_name
            and np.array_equal(self.payload, other.payload)
            and dict(self.coordinate_columns) == dict(other.coordinate_columns)
            and list(self.coordinate_columns) == list(other.coordinate_columns)
            and dict(self.column_name_to_dimension) == dict(other.column_name_to_dimension)
            and self.dimension_to_column_names == other.dimension_to_column_names
        )

    def to_frame(self, *, validate: bool = True) -> "pd.DataFrame":
        """
        Return the table as a DataFrame.

        Coordinate columns come first in file order, followed by the
        payload column.

        Args:
            validate: Check the frame against the schema derived from
                the column kinds.

        Returns:
            DataFrame with one row per data row.
        """
        import pandas as pd

        data = {name: column.values for name, column in self.coordinate_columns.items()}
        data[self.payload_name] = self.payload[:, 0]
        df = pd.DataFrame(data)

        if validate:
            from dataextractor.schemas import build_table_schema

            df = build_table_schema(self).validate(df)
        return df
