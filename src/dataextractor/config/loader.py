"""
Configuration loading utilities.

Reads YAML with ``${VAR}`` / ``${VAR:default}`` environment
interpolation. Every key is optional:

    parser:
      delimiter: ","
      encoding: utf-8
    logging:
      level: ${DATAEXTRACTOR_LOG_LEVEL:INFO}
      json_output: false
    default_payload_group: ObsBias
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from dataextractor.config.settings import ExtractorConfig, LoggingConfig, ParserConfig

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")
_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _interpolate_env_vars(value: str) -> str:
    """Replace ``${VAR}`` and ``${VAR:default}`` with environment values."""

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        default = match.group(2)
        return os.environ.get(var_name, default if default is not None else "")

    return _ENV_PATTERN.sub(replacer, value)


def _process_config_values(obj: Any) -> Any:
    """Recursively interpolate environment variables in config values."""
    if isinstance(obj, str):
        return _interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _process_config_values(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_process_config_values(item) for item in obj]
    return obj


def _as_bool(value: Any) -> bool:
    """Interpret YAML booleans and interpolated strings alike."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML mapping and interpolate environment variables."""
    with path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        msg = f"Config file must contain a mapping, got {type(data).__name__}: {path}"
        raise ValueError(msg)
    return _process_config_values(data)


def config_from_dict(data: dict[str, Any]) -> ExtractorConfig:
    """
    Build an ``ExtractorConfig`` from an already parsed mapping.

    Args:
        data: Mapping with optional ``parser``, ``logging`` and
            ``default_payload_group`` keys.

    Returns:
        Validated configuration.
    """
    parser_data = data.get("parser") or {}
    parser = ParserConfig(
        delimiter=parser_data.get("delimiter", ","),
        encoding=parser_data.get("encoding", "utf-8"),
    )

    logging_data = data.get("logging") or {}
    logging = LoggingConfig(
        level=logging_data.get("level") or "INFO",
        json_output=_as_bool(logging_data.get("json_output", False)),
    )

    return ExtractorConfig(
        parser=parser,
        logging=logging,
        default_payload_group=data.get("default_payload_group") or None,
    )


def load_config(config_path: Path) -> ExtractorConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to the configuration file.

    Returns:
        Fully validated ExtractorConfig instance.

    Raises:
        FileNotFoundError: If the file does not exist.
        pydantic.ValidationError: If a value is invalid.
    """
    config_path = Path(config_path)
    if not config_path.exists():
        msg = f"Config file not found: {config_path}"
        raise FileNotFoundError(msg)
    return config_from_dict(load_yaml(config_path))
