"""
Generic delimited-text grid parsing.

The parser knows nothing about header rows or column types: it turns
text into rows of raw string cells and leaves all table semantics to
the backend that calls it.
"""

import csv
import io
from collections.abc import Callable

# text -> rows of raw cells
GridParser = Callable[[str], list[list[str]]]


def parse_csv_grid(text: str, delimiter: str = ",") -> list[list[str]]:
    """
    Split CSV text into rows of string cells.

    Quoted cells follow the usual CSV rules and cells are not
    stripped. An empty line comes back as a row holding one empty
    cell.

    Args:
        text: Full file contents.
        delimiter: Single-character field separator.

    Returns:
        List of rows, each a list of cells.
    """
    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter)
    return [row if row else [""] for row in reader]


def csv_grid_parser(delimiter: str = ",") -> GridParser:
    """Return a ``GridParser`` bound to the given delimiter."""

    def parse(text: str) -> list[list[str]]:
        return parse_csv_grid(text, delimiter=delimiter)

    return parse
