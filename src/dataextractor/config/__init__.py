"""
Configuration management with typed Pydantic models.

Covers grid parsing and logging; every setting has a default.
"""

from dataextractor.config.loader import config_from_dict, load_config
from dataextractor.config.settings import ExtractorConfig, LoggingConfig, ParserConfig

__all__ = [
    "ExtractorConfig",
    "LoggingConfig",
    "ParserConfig",
    "config_from_dict",
    "load_config",
]
