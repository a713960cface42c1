"""Configuration management for envfixture."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from envfixture.selector import DEFAULT_KEYS

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class Config:
    """Layered configuration system."""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        self._config = self._load_config(Path(path) if path is not None else None)
        self._validate(self._config)

    def _load_config(self, explicit_path: Optional[Path]) -> Dict[str, Any]:
        """Load configuration from multiple sources with proper layering."""
        # Start with built-in defaults
        config = self._get_defaults()

        # Layer user config
        user_config_path = Path.home() / ".envfixture.yaml"
        if user_config_path.exists():
            config = self._merge_configs(config, self._read_yaml(user_config_path))

        # Layer project config
        project_config_path = Path("./envfixture.yaml")
        if project_config_path.exists():
            config = self._merge_configs(config, self._read_yaml(project_config_path))

        # Layer explicitly requested config
        if explicit_path is not None:
            if not explicit_path.exists():
                raise ValueError(f"Config file not found: {explicit_path}")
            config = self._merge_configs(config, self._read_yaml(explicit_path))

        return config

    def _read_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Malformed config file {path}: {e}") from e
        except OSError as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")

        logger.debug("Loaded config layer %s", path)
        return data

    def _get_defaults(self) -> Dict[str, Any]:
        """Get built-in defaults."""
        return {
            "fixture": {
                "const_name": "FIXTURE",
                "indent": 4,
            },
            "default_keys": list(DEFAULT_KEYS),
        }

    def _merge_configs(self, base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge overlay config into base config."""
        result = base.copy()

        for key, value in overlay.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _validate(self, config: Dict[str, Any]) -> None:
        fixture = config.get("fixture")
        if not isinstance(fixture, dict):
            raise ValueError("'fixture' must be a mapping")
        validate_const_name(fixture.get("const_name"))
        validate_indent(fixture.get("indent"))

        keys = config.get("default_keys")
        if not isinstance(keys, list) or not all(isinstance(k, str) for k in keys):
            raise ValueError("'default_keys' must be a list of strings")

    def get_default_keys(self) -> List[str]:
        """Get the name table used when no names are given."""
        return list(self._config["default_keys"])

    def resolve(self, **overrides) -> Dict[str, Any]:
        """Resolve final configuration with overrides."""
        fixture = self._config["fixture"]

        resolved = {
            "const_name": fixture["const_name"],
            "indent": fixture["indent"],
            "default_keys": self.get_default_keys(),
        }

        for key, value in overrides.items():
            if value is not None:
                resolved[key] = value

        validate_const_name(resolved["const_name"])
        validate_indent(resolved["indent"])
        return resolved


def validate_const_name(name: Any) -> str:
    """Check that ``name`` can be used as a Rust constant identifier."""
    if not isinstance(name, str) or not _IDENTIFIER.match(name):
        raise ValueError(f"Invalid constant name: {name!r}")
    return name


def validate_indent(indent: Any) -> int:
    # bool is an int subclass
    if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
        raise ValueError(f"Invalid indent: {indent!r}")
    return indent

