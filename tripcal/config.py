"""Configuration file management for tripcal."""

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomli_w

from tripcal.api import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT

API_URL_ENV = "TRIPCAL_API_URL"


@dataclass(frozen=True)
class Settings:
    """Immutable effective settings."""

    api_base_url: str = DEFAULT_API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    persons: int = 1


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_dir() -> Path:
    """Directory holding tripcal's config and session files."""
    return get_xdg_config_home() / "tripcal"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_config_dir() / "config.toml"


def default_config() -> dict[str, Any]:
    defaults = Settings()
    return {
        "api_base_url": defaults.api_base_url,
        "timeout": defaults.timeout,
        "persons": defaults.persons,
    }


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)
    save_config(default_config(), config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_settings(config_path: Path | None = None) -> Settings:
    """Load effective settings: defaults, then config file, then environment.

    A missing config file is not an error; defaults are used.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Settings instance.

    Raises:
        ValueError: If a config value has the wrong type.
        tomllib.TOMLDecodeError: If the config file is not valid TOML.
    """
    try:
        config = load_config(config_path)
    except FileNotFoundError:
        config = {}

    defaults = Settings()
    api_base_url = os.environ.get(API_URL_ENV) or config.get("api_base_url", defaults.api_base_url)
    timeout = config.get("timeout", defaults.timeout)
    persons = config.get("persons", defaults.persons)

    if not isinstance(api_base_url, str) or not api_base_url:
        raise ValueError("api_base_url must be a non-empty string")
    if not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ValueError("timeout must be a positive number")
    if not isinstance(persons, int) or persons < 1:
        raise ValueError("persons must be a positive integer")

    return Settings(api_base_url=api_base_url, timeout=float(timeout), persons=persons)
