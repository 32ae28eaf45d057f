"""Basic package tests to verify installation."""


def test_package_imports() -> None:
    """Verify the main package can be imported."""
    import dataextractor

    assert dataextractor.__version__


def test_top_level_exports() -> None:
    """Verify the public API is re-exported from the package root."""
    from dataextractor import (
        ConversionError,
        CsvBackend,
        DataExtractorError,
        EmptyResultError,
        ExtractedTable,
        ExtractorBackend,
        PayloadSelectionError,
        SchemaError,
        StructuralError,
        create_backend,
        load_table,
    )

    assert issubclass(CsvBackend, ExtractorBackend)
    assert issubclass(StructuralError, DataExtractorError)
    assert issubclass(SchemaError, DataExtractorError)
    assert issubclass(ConversionError, DataExtractorError)
    assert issubclass(PayloadSelectionError, DataExtractorError)
    assert issubclass(EmptyResultError, DataExtractorError)
    assert ExtractedTable is not None
    assert create_backend is not None
    assert load_table is not None


def test_config_module_imports() -> None:
    """Verify config module structure is correct."""
    from dataextractor.config import (
        ExtractorConfig,
        LoggingConfig,
        ParserConfig,
        config_from_dict,
        load_config,
    )

    assert ExtractorConfig is not None
    assert LoggingConfig is not None
    assert ParserConfig is not None
    assert config_from_dict is not None
    assert load_config is not None
