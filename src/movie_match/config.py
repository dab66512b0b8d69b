"""
Configuration for the movie match engine.

Values come from, in increasing priority: dataclass defaults, a YAML
config file, then MOVIE_MATCH_* environment variables.
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

# Environment variable naming the default config file
CONFIG_ENV_VAR = "MOVIE_MATCH_CONFIG"

# Environment overrides: variable -> (field, converter)
_ENV_OVERRIDES = {
    "MOVIE_MATCH_DELIMITER": ("delimiter", str),
    "MOVIE_MATCH_HINT_LENGTH": ("hint_length", int),
    "MOVIE_MATCH_LOG_LEVEL": ("log_level", str),
}


class ConfigError(Exception):
    """Raised when a configuration file or override is malformed."""

    pass


@dataclass
class MovieMatchConfig:
    """Tunable settings for loading and querying a movie database."""

    # Input format
    delimiter: str = "/"  # Field separator within a database line

    # Prefix hinting
    hint_length: int = 6  # Query prefix is truncated to this many characters
    hint_pad: str = "zz"  # Appended to the prefix for the upper-bound search
    hint_margin: int = 2  # Extra entries shown on each side of the match range
    max_suggestions: int | None = None  # Cap on names returned by hint()

    # Shuffle
    shuffle_seed: int | None = None  # Seed for reproducible adjacency shuffles

    log_level: str = "INFO"

    def __post_init__(self):
        if not self.delimiter:
            raise ConfigError("delimiter must be a non-empty string")
        if self.hint_length < 1:
            raise ConfigError(f"hint_length must be positive, got {self.hint_length}")
        if self.hint_margin < 0:
            raise ConfigError(f"hint_margin must be non-negative, got {self.hint_margin}")


def load_config(path: Path | str | None = None) -> MovieMatchConfig:
    """
    Build a config from an optional YAML file plus environment overrides.

    Args:
        path: YAML file with a mapping of MovieMatchConfig fields. If None,
              the file named by $MOVIE_MATCH_CONFIG is used when set.

    Returns:
        MovieMatchConfig

    Raises:
        ConfigError: If the file is not valid YAML or not a mapping, names
                     unknown keys, or an override cannot be converted
        OSError: If the file cannot be opened
    """
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR)

    values: dict = {}
    if path is not None:
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"{path}: invalid YAML: {e}") from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping, got {type(data).__name__}")
        known = {f.name for f in fields(MovieMatchConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"{path}: unknown config keys: {', '.join(unknown)}")
        values.update(data)

    for var, (name, convert) in _ENV_OVERRIDES.items():
        raw = os.environ.get(var)
        if raw is None:
            continue
        try:
            values[name] = convert(raw)
        except ValueError as e:
            raise ConfigError(f"{var}={raw!r}: {e}") from e

    return MovieMatchConfig(**values)
