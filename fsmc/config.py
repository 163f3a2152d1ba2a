"""
Optional YAML settings for the command line driver.

    output_dir: build
    targets: [c, dot]
    log_level: INFO
"""
import logging
from dataclasses import dataclass, field
from typing import List

import yaml

from .errors import ConfigError

TARGETS = ("c", "dot")


@dataclass
class Config:
    output_dir: str = "."
    targets: List[str] = field(default_factory=lambda: list(TARGETS))
    log_level: str = "WARNING"


def load_config(data):
    """Builds a Config from parsed YAML (a dict, or None for an empty file)."""
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError("Config must be a mapping")

    unknown = set(data) - {"output_dir", "targets", "log_level"}
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    config = Config()

    if 'output_dir' in data:
        if not isinstance(data['output_dir'], str):
            raise ConfigError("output_dir must be a string")
        config.output_dir = data['output_dir']

    if 'targets' in data:
        targets = data['targets']
        if not isinstance(targets, list) or not targets:
            raise ConfigError("targets must be a non-empty list")
        for t in targets:
            if t not in TARGETS:
                raise ConfigError(f"Unknown target: {t}")
        if len(set(targets)) != len(targets):
            raise ConfigError("targets must not repeat a target")
        config.targets = targets

    if 'log_level' in data:
        level = str(data['log_level']).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ConfigError(f"Unknown log level: {data['log_level']}")
        config.log_level = level

    return config


def read_config(path):
    try:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Error reading config '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in '{path}': {e}") from e
    return load_config(data)
