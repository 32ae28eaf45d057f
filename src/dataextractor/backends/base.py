"""
Base class for table backends.

A backend reads one file format and returns an ``ExtractedTable``;
callers never see which format the table came from.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from dataextractor.config.settings import ExtractorConfig
from dataextractor.table import ExtractedTable


class ExtractorBackend(ABC):
    """
    Abstract base class for table backends.

    Backends keep no state between calls, so one instance may serve
    several threads, each loading its own table.
    """

    def __init__(self, path: Path | str, config: ExtractorConfig | None = None) -> None:
        """
        Initialize backend.

        Args:
            path: File to read.
            config: Extractor configuration; defaults apply when omitted.
        """
        self.path = Path(path)
        self.config = config if config is not None else ExtractorConfig()

    @abstractmethod
    def load_data(self, payload_group: str) -> ExtractedTable:
        """
        Load the table whose payload column belongs to ``payload_group``.

        Raises:
            FileNotFoundError: If the file does not exist.
            dataextractor.errors.DataExtractorError: If the file cannot
                be turned into a table.
        """
        ...

    def _require_file(self) -> None:
        if not self.path.exists():
            msg = f"Data file not found: {self.path}"
            raise FileNotFoundError(msg)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={str(self.path)!r})"
