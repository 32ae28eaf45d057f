"""
Console reporter for loaded tables.

Formats an ``ExtractedTable`` using Rich.
"""

import numpy as np
from rich.console import Console
from rich.table import Table

from dataextractor.columns import MISSING_FLOAT, MISSING_INT
from dataextractor.table import ExtractedTable


class TableReporter:
    """Prints column and payload summaries of a loaded table."""

    def __init__(self, console: Console) -> None:
        """
        Initialize reporter.

        Args:
            console: Rich Console instance for output.
        """
        self.console = console

    def print_table(self, table: ExtractedTable, title: str) -> None:
        """Print one row per coordinate column, then a payload summary."""
        summary = Table(title=title, show_header=True)
        summary.add_column("Column", style="cyan", no_wrap=True)
        summary.add_column("Kind", style="blue")
        summary.add_column("Dimension", justify="right")
        summary.add_column("Rows", justify="right")
        summary.add_column("Missing", justify="right")

        for name, column in table.coordinate_columns.items():
            missing = column.missing_count
            summary.add_row(
                name,
                column.kind.value,
                str(table.column_name_to_dimension[name]),
                str(len(column)),
                f"[yellow]{missing}[/yellow]" if missing else "0",
            )

        self.console.print(summary)
        self._print_payload(table)

    def _print_payload(self, table: ExtractedTable) -> None:
        values = table.payload[:, 0]
        # Integer payloads carry the integer sentinel converted to float.
        present = values[~np.isin(values, [MISSING_FLOAT, float(MISSING_INT)])]
        self.console.print(f"\n[bold]Payload:[/bold] {table.payload_name}")
        self.console.print(f"  Rows: {table.num_rows}")
        self.console.print(f"  Missing: {table.num_rows - len(present)}")
        if len(present):
            self.console.print(
                f"  Range: {np.min(present):g} .. {np.max(present):g}"
            )
