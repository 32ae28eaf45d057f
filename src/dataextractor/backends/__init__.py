"""
Table backends and backend selection.

``create_backend`` picks a backend from the file extension;
``load_table`` is the one-call entry point most callers need.
"""

from pathlib import Path

from dataextractor.backends.base import ExtractorBackend
from dataextractor.backends.csv_backend import CsvBackend
from dataextractor.config.settings import ExtractorConfig
from dataextractor.errors import UnsupportedFormatError
from dataextractor.table import ExtractedTable

BACKENDS_BY_SUFFIX: dict[str, type[ExtractorBackend]] = {
    ".csv": CsvBackend,
    ".dat": CsvBackend,
    ".txt": CsvBackend,
}


def create_backend(path: Path | str, config: ExtractorConfig | None = None) -> ExtractorBackend:
    """
    Create the backend able to read ``path``.

    Args:
        path: Data file; its extension (case-insensitive) selects the backend.
        config: Extractor configuration passed to the backend.

    Raises:
        UnsupportedFormatError: If no backend handles the extension.
    """
    path = Path(path)
    backend_cls = BACKENDS_BY_SUFFIX.get(path.suffix.lower())
    if backend_cls is None:
        supported = ", ".join(sorted(BACKENDS_BY_SUFFIX))
        msg = f"Unsupported file format '{path.suffix}'. Supported: {supported}"
        raise UnsupportedFormatError(msg, path=path)
    return backend_cls(path, config)


def load_table(
    path: Path | str,
    payload_group: str | None = None,
    *,
    config: ExtractorConfig | None = None,
) -> ExtractedTable:
    """
    Load a lookup table from ``path``.

    Args:
        path: Data file.
        payload_group: Group of the payload column. Falls back to
            ``config.default_payload_group``.
        config: Extractor configuration.

    Raises:
        ValueError: If no payload group is given or configured.
    """
    group = payload_group
    if group is None and config is not None:
        group = config.default_payload_group
    if group is None:
        msg = "No payload group given and none configured"
        raise ValueError(msg)
    return create_backend(path, config).load_data(group)


__all__ = [
    "BACKENDS_BY_SUFFIX",
    "CsvBackend",
    "ExtractorBackend",
    "create_backend",
    "load_table",
]
