"""
Configuration management for cidrcalc.

Loads default mask and within values from a dotenv-style config file and
environment variables.
"""

import logging
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Mapping

from dotenv import dotenv_values

from cidrcalc.address.core import DEFAULT_MASK, DEFAULT_WITHIN

logger = logging.getLogger(__name__)

MASK_ENV = "CIDR_MASK"
WITHIN_ENV = "CIDR_WITHIN"


class ConfigError(Exception):
    """Configuration could not be loaded."""
    pass


def config_locations(home: Path) -> list[Path]:
    """Return the config file locations searched, in order."""
    return [
        home / ".cidr",
        home / ".cidr.env",
        home / ".config" / "cidr" / ".env",
    ]


@dataclass
class CidrConfig:
    """Default inputs for the cidr command."""

    # Field widths, most significant first
    mask: str = DEFAULT_MASK

    # Base address OR-ed into every result
    within: str = DEFAULT_WITHIN

    # File the values came from, if any
    config_file: Path | None = None

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        base: "CidrConfig | None" = None,
    ) -> "CidrConfig":
        """Load configuration from environment variables."""
        environ = os.environ if environ is None else environ
        base = base or cls()
        return cls(
            mask=environ.get(MASK_ENV) or base.mask,
            within=environ.get(WITHIN_ENV) or base.within,
            config_file=base.config_file,
        )

    @classmethod
    def from_file(cls, path: Path) -> "CidrConfig":
        """Load configuration from a dotenv-style file."""
        try:
            values = dotenv_values(path)
        except OSError as e:
            raise ConfigError(f"cannot read config file {path}: {e}") from e
        return cls(
            mask=values.get(MASK_ENV) or DEFAULT_MASK,
            within=values.get(WITHIN_ENV) or DEFAULT_WITHIN,
            config_file=path,
        )


def find_config_file() -> Path | None:
    """Find the first config file in the home directory."""
    try:
        home = Path.home()
    except RuntimeError as e:
        raise ConfigError(f"cannot determine home directory: {e}") from e

    for path in config_locations(home):
        if path.is_file():
            return path
    return None


def load_config(
    config_file: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> CidrConfig:
    """Load configuration from a file and the environment.

    Args:
        config_file: Explicit config file; must exist
        environ: Environment mapping (defaults to os.environ)

    Returns:
        Configuration with environment values taking precedence over the file
    """
    if config_file:
        path = Path(config_file).expanduser()
        if not path.is_file():
            raise ConfigError(f"config file not found: {path}")
    else:
        path = find_config_file()

    if path is not None:
        logger.info("Using config file: %s", path)
        base = CidrConfig.from_file(path)
    else:
        base = CidrConfig()

    return CidrConfig.from_env(environ, base=base)
