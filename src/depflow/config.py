"""YAML configuration file loading."""

from pathlib import Path

import yaml

from .models import LayoutConfig


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values; empty for an empty file.

    Raises:
        ValueError: If the top level of the file is not a mapping.
    """
    with open(config_path) as f:
        config = yaml.safe_load(f)
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ValueError(f"{config_path}: expected a mapping at the top level")
    return config


def layout_config_from(config: dict, **overrides) -> LayoutConfig:
    """Build a LayoutConfig from the ``layout:`` section plus explicit overrides.

    Overrides set to ``None`` are ignored, so unset command-line flags fall
    back to the config file and then to the defaults.

    Raises:
        ValueError: If the section is not a mapping or names an unknown option.
    """
    section = config.get("layout") or {}
    if not isinstance(section, dict):
        raise ValueError("'layout' must be a mapping of layout options")
    return LayoutConfig.from_dict(section).with_overrides(**overrides)


def _non_negative_int(key: str, value) -> int | None:
    if value is None:
        return None
    if isinstance(value, str) and value.strip().isdigit():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value


def _extensions(value) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list) or not all(isinstance(ext, str) and ext for ext in value):
        raise ValueError(f"'extensions' must be a list of file suffixes, got {value!r}")
    return tuple(ext if ext.startswith(".") else f".{ext}" for ext in value)


def code_options_from(config: dict) -> dict:
    """Read and validate the code-mode keys of a loaded config.

    Args:
        config: Mapping returned by ``load_config``.

    Returns:
        Dictionary with ``local_only``, ``extensions``, ``max_files`` and
        ``max_file_size``; each is ``None`` when the key is absent.

    Raises:
        ValueError: If a value has the wrong type or is negative.
    """
    local_only = config.get("local-only")
    if local_only is not None and not isinstance(local_only, bool):
        raise ValueError(f"'local-only' must be true or false, got {local_only!r}")

    return {
        "local_only": local_only,
        "extensions": _extensions(config.get("extensions")),
        "max_files": _non_negative_int("max-files", config.get("max-files")),
        "max_file_size": _non_negative_int("max-file-size", config.get("max-file-size")),
    }
