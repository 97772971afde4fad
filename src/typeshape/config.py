"""
Configuration loading and management.

This module loads YAML configuration files for the command-line driver and
turns them into validated `DriverSettings`.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional
import os

import yaml

from .core.lattice import is_type_name
from .core.render import DEFAULT_TYPE_NAME
from .core.sampling import SamplingStrategy

DEFAULT_INDENT = 2


class Config:
    """
    A wrapper around a dictionary for managing configuration.

    It provides a `get` method that allows accessing nested values using
    dot-notation (e.g., 'sampling.strategy').
    """

    def __init__(self, config_data: Dict[str, Any]):
        self._config = config_data or {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Access a config value using dot notation.

        Example:
            >>> config = Config({'a': {'b': 1}})
            >>> config.get('a.b')
            1
            >>> config.get('a.c', 'default_value')
            'default_value'

        :param key: The dot-separated key for the desired value.
        :param default: The value to return if the key is not found.
        :return: The configuration value or the default.
        """
        keys = key.split(".")
        value = self._config
        for k in keys:
            if not isinstance(value, dict) or k not in value:
                return default
            value = value[k]
        return value

    def __repr__(self) -> str:
        return f"Config(config_data={self._config})"


def load_config(path: Optional[str]) -> Config:
    """
    Loads a YAML configuration file from the given path.

    If the path is None or does not exist, it returns an empty Config object.

    :param path: The path to the YAML configuration file.
    :return: A Config object with the loaded data.
    :raises ValueError: If the file does not hold a YAML mapping.
    """
    if not path or not os.path.exists(path):
        return Config({})

    with open(path, "r") as f:
        # Use safe_load to avoid arbitrary code execution
        config_data = yaml.safe_load(f)

    if config_data is not None and not isinstance(config_data, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return Config(config_data)


@dataclass
class DriverSettings:
    """
    Settings for one run of the command-line driver.

    Attributes:
        name (str): The name of the emitted type declaration.
        strategy (SamplingStrategy): How array elements are sampled.
        indent (Optional[int]): Spaces per nesting level, or None for
            single-line output.
    """

    name: str = DEFAULT_TYPE_NAME
    strategy: SamplingStrategy = SamplingStrategy.ALL
    indent: Optional[int] = DEFAULT_INDENT

    def __post_init__(self):
        if not isinstance(self.name, str) or not is_type_name(self.name):
            raise ValueError(
                f"Type name {self.name!r} is not a valid identifier or is reserved"
            )
        self.strategy = SamplingStrategy.parse(self.strategy)
        if self.indent is not None:
            if isinstance(self.indent, bool) or not isinstance(self.indent, int):
                raise ValueError(f"indent must be an integer, got {self.indent!r}")
            if self.indent < 0:
                raise ValueError(f"indent must not be negative, got {self.indent}")
            if self.indent == 0:
                self.indent = None

    @classmethod
    def from_config(cls, config: Config, **overrides: Any) -> "DriverSettings":
        """
        Builds settings from a `Config`, letting non-None overrides win.

        Recognised keys are ``declaration.name``, ``sampling.strategy`` and
        ``output.indent``.
        """
        values = {
            "name": config.get("declaration.name", DEFAULT_TYPE_NAME),
            "strategy": config.get("sampling.strategy", SamplingStrategy.ALL.value),
            "indent": config.get("output.indent", DEFAULT_INDENT),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
