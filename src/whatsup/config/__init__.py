"""Configuration for whatsup."""

from whatsup.config.paths import config_dir
from whatsup.config.paths import config_file
from whatsup.config.settings import CONFIG_ERRORS
from whatsup.config.settings import Config
from whatsup.config.settings import FetchConfig
from whatsup.config.settings import get_config
from whatsup.config.settings import load_config
from whatsup.config.settings import reload_config
from whatsup.config.settings import save_config

__all__ = [
    "CONFIG_ERRORS",
    "Config",
    "FetchConfig",
    "config_dir",
    "config_file",
    "get_config",
    "load_config",
    "reload_config",
    "save_config",
]
