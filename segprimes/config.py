"""
Configuration for prime counting queries.

Values come from the [tool.segprimes] table of a TOML file (pyproject.toml in
the working directory unless SEGPRIMES_CONFIG points elsewhere), then from
SEGPRIMES_* environment variables.
"""

import logging
import os
import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Optional

from .sieve import BACKENDS

logger = logging.getLogger(__name__)

# Largest sieve allocated at once; 2**30 one-byte flags is about 1GB per segment.
DEFAULT_MAX_SIEVE_LENGTH = 1 << 30

_TRUE_STRINGS = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SieveConfig:
    max_sieve_length: int = DEFAULT_MAX_SIEVE_LENGTH
    small_primes_bound: Optional[int] = None  # None: derive from the query
    backend: str = "numpy"
    validate: bool = False

    def __post_init__(self):
        for name, value in (("max_sieve_length", self.max_sieve_length),
                            ("small_primes_bound", self.small_primes_bound)):
            if value is not None and (isinstance(value, bool) or not isinstance(value, int)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
        if not isinstance(self.validate, bool):
            raise ValueError(f"validate must be true or false, got {self.validate!r}")
        if self.max_sieve_length is None or self.max_sieve_length <= 0:
            raise ValueError(f"max_sieve_length must be positive, got {self.max_sieve_length}")
        if self.small_primes_bound is not None and self.small_primes_bound < 2:
            raise ValueError(f"small_primes_bound must be at least 2, got {self.small_primes_bound}")
        if self.backend not in BACKENDS:
            raise ValueError(f"backend must be one of {BACKENDS}, got {self.backend!r}")


def get_config_file() -> Path:
    """Get the configuration file path."""
    if config_file := os.getenv("SEGPRIMES_CONFIG"):
        return Path(config_file)
    return Path("pyproject.toml")


def _read_table(config_file: Path) -> dict:
    try:
        with open(config_file, "rb") as f:
            config = tomllib.load(f)
    except (FileNotFoundError, tomllib.TOMLDecodeError):
        logger.warning(f"Could not load {config_file}, using defaults")
        return {}
    return config.get("tool", {}).get("segprimes", {})


def _env_overrides() -> dict:
    overrides = {}
    if value := os.getenv("SEGPRIMES_MAX_SIEVE_LENGTH"):
        overrides["max_sieve_length"] = int(value)
    if value := os.getenv("SEGPRIMES_BACKEND"):
        overrides["backend"] = value
    if value := os.getenv("SEGPRIMES_VALIDATE"):
        overrides["validate"] = value.strip().lower() in _TRUE_STRINGS
    return overrides


def load_config(path: Optional[Path] = None, **overrides) -> SieveConfig:
    """
    Build a SieveConfig from file, environment and explicit overrides, in
    increasing order of precedence. Overrides set to None are ignored.
    """
    config_file = Path(path) if path is not None else get_config_file()
    known = {f.name for f in fields(SieveConfig)}

    # A missing default pyproject.toml is normal outside a project directory.
    table = {}
    if path is not None or os.getenv("SEGPRIMES_CONFIG") or config_file.exists():
        table = _read_table(config_file)

    values = {}
    for key, value in table.items():
        key = key.replace("-", "_")
        if key not in known:
            logger.warning(f"Ignoring unknown setting {key!r} in {config_file}")
            continue
        values[key] = value

    values.update(_env_overrides())
    values.update({k: v for k, v in overrides.items() if v is not None})
    return replace(SieveConfig(), **values)
