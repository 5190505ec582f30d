"""
taxotree.config - Configuration loading and defaults

Configuration comes from three layers, later ones winning:
DEFAULT_CONFIG, the ``.taxotree.toml`` file, and ``TAXOTREE_*``
environment variables.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

import tomlkit

from taxotree.config.defaults import CONFIG_FILENAME, DEFAULT_CONFIG, ENV_PREFIX

logger = logging.getLogger(__name__)


def parse_toml_document(content: str) -> tomlkit.TOMLDocument:
    """Parse TOML text into a round-trippable tomlkit document."""
    return tomlkit.parse(content)


def parse_toml(content: str) -> dict[str, Any]:
    """Parse TOML text into plain Python dicts and lists."""
    return parse_toml_document(content).unwrap()


def merge_configs(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep-merge ``override`` onto a copy of ``base``.

    Nested dicts merge key by key; any other value replaces the base
    value outright.
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def find_config_file(start: Path) -> Path | None:
    """Walk up from ``start`` looking for ``.taxotree.toml``.

    Returns:
        Path to the config file, or None if none is found.
    """
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def _try_parse_env_value(value: str) -> Any:
    """Convert an environment string to a typed value.

    JSON arrays/objects, ``true``/``false`` and numbers are converted;
    anything else, including malformed JSON, is returned unchanged.
    """
    stripped = value.strip()
    if stripped[:1] in ("[", "{"):
        try:
            return json.loads(stripped)
        except json.JSONDecodeError:
            return value
    lowered = stripped.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    try:
        return int(stripped)
    except ValueError:
        pass
    try:
        return float(stripped)
    except ValueError:
        return value


def _apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """Apply ``TAXOTREE_<SECTION>_<KEY>`` variables to ``config`` in place.

    ``TAXOTREE_LAYOUT_HORIZONTAL_SPACING=300`` sets
    ``config["layout"]["horizontal_spacing"] = 300``. Keys whose current
    value is a string keep the raw text, so a category named ``2001``
    stays ``"2001"``.
    """
    for name, raw in os.environ.items():
        if not name.startswith(ENV_PREFIX):
            continue
        remainder = name[len(ENV_PREFIX):].lower()
        section, sep, key = remainder.partition("_")
        if not sep or not key:
            continue
        target = config.setdefault(section, {})
        if not isinstance(target, dict):
            logger.warning("Ignoring %s: [%s] is not a table", name, section)
            continue
        if isinstance(target.get(key), str):
            target[key] = raw
        else:
            target[key] = _try_parse_env_value(raw)
        logger.debug("Config override from %s", name)
    return config


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load the effective configuration.

    Args:
        config_path: Explicit TOML file. When None, only defaults and
            environment overrides apply.

    Returns:
        Merged configuration dict. ``data.source`` is resolved relative
        to the config file's directory.

    Raises:
        OSError: If the file cannot be read.
        tomlkit.exceptions.ParseError: If the file is not valid TOML.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        file_config = parse_toml(config_path.read_text(encoding="utf-8"))
        config = merge_configs(config, file_config)
        source = config.get("data", {}).get("source")
        if source and not Path(source).is_absolute():
            config["data"]["source"] = str(config_path.parent / source)
        logger.info("Loaded config from %s", config_path)
    return _apply_env_overrides(config)


__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_CONFIG",
    "find_config_file",
    "load_config",
    "merge_configs",
    "parse_toml",
    "parse_toml_document",
]
