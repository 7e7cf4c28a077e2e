"""Configuration structures and loading for whatsup."""

import os
import tomllib
from pathlib import Path
from typing import Annotated

import msgspec
import tomli_w

from whatsup import __version__
from whatsup.core.transport import DEFAULT_TIMEOUT

DEFAULT_USER_AGENT = f"whatsup/{__version__}"

# What load_config raises for an unreadable or invalid file or env var
CONFIG_ERRORS = (ValueError, tomllib.TOMLDecodeError, msgspec.ValidationError)

Timeout = Annotated[float, msgspec.Meta(gt=0)]


# Fetch configuration
class FetchConfig(msgspec.Struct, omit_defaults=True):
    """Request settings."""

    timeout: Timeout = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT


# Main configuration
class Config(msgspec.Struct, omit_defaults=True):
    """Main configuration structure."""

    slack: bool = True  # Include Slack in `whatsup status`
    fetch: FetchConfig = msgspec.field(default_factory=FetchConfig)
    pages: dict[str, str] = msgspec.field(default_factory=dict)  # name -> URL


def _load_from_toml(path: Path) -> dict:
    """Load configuration from TOML file."""
    if not path.exists():
        return {}

    with path.open("rb") as f:
        return tomllib.load(f)


def _save_to_toml(data: dict, path: Path) -> None:
    """Save configuration to TOML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        tomli_w.dump(data, f)


def convert_config(data: dict) -> Config:
    """Convert raw dict to Config struct.

    Raises:
        msgspec.ValidationError: If the data does not match the schema
    """
    return msgspec.convert(data, type=Config)


def _parse_pages(value: str) -> dict[str, str]:
    """Parse ``name=url,name=url`` into a page mapping."""
    pages = {}
    for item in value.split(","):
        name, sep, url = item.partition("=")
        if sep and name.strip() and url.strip():
            pages[name.strip()] = url.strip()
    return pages


def _parse_timeout(value: str) -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise ValueError(f"WHATSUP_TIMEOUT must be a number, got {value!r}") from None
    if not timeout > 0:
        raise ValueError(f"WHATSUP_TIMEOUT must be greater than 0, got {value!r}")
    return timeout


def _apply_env_overrides(config: Config) -> Config:
    """Apply environment variable overrides to config.

    WHATSUP_TIMEOUT: Request timeout in seconds
    WHATSUP_PAGES: Comma-separated name=url pairs, merged over configured pages

    Raises:
        ValueError: If WHATSUP_TIMEOUT is not a positive number
    """
    if timeout := os.environ.get("WHATSUP_TIMEOUT"):
        fetch = msgspec.structs.replace(config.fetch, timeout=_parse_timeout(timeout))
        config = msgspec.structs.replace(config, fetch=fetch)

    if pages := os.environ.get("WHATSUP_PAGES"):
        merged = {**config.pages, **_parse_pages(pages)}
        config = msgspec.structs.replace(config, pages=merged)

    return config


# Config state storage
_config: Config | None = None


def get_config() -> Config:
    """Get the current configuration (singleton)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> Config:
    """Reload configuration from disk."""
    global _config
    _config = load_config()
    return _config


def load_config(path: Path | None = None) -> Config:
    """Load configuration from file with defaults.

    Raises:
        One of CONFIG_ERRORS if the file or an env override is invalid
    """
    from .paths import config_file

    config_path = path or config_file()

    raw_data = _load_from_toml(config_path)
    if not raw_data:
        config = Config()
    else:
        config = convert_config(raw_data)

    return _apply_env_overrides(config)


def save_config(config: Config, path: Path | None = None) -> None:
    """Save configuration to file."""
    from .paths import config_file

    config_path = path or config_file()
    _save_to_toml(msgspec.to_builtins(config), config_path)

    # Update singleton
    global _config
    _config = config
