"""Configuration management for the daptest client."""

from daptest.config.client_config import DEFAULT_CONFIG
from daptest.config.client_config import ClientConfig
from daptest.config.client_config import InitializeConfig
from daptest.config.config_manager import ConfigContext
from daptest.config.config_manager import config_context
from daptest.config.config_manager import get_config
from daptest.config.config_manager import reset_config
from daptest.config.config_manager import set_config
from daptest.config.config_manager import update_config

__all__ = [
    "DEFAULT_CONFIG",
    "ClientConfig",
    "ConfigContext",
    "InitializeConfig",
    "config_context",
    "get_config",
    "reset_config",
    "set_config",
    "update_config",
]
