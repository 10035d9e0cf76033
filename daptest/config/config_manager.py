"""Process-wide configuration state for daptest.

Sessions read the current configuration when they are created; changing it
afterwards does not affect sessions that are already open.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    import types

from daptest.config.client_config import DEFAULT_CONFIG
from daptest.config.client_config import ClientConfig

logger = logging.getLogger(__name__)

_UPDATABLE_KEYS = frozenset({"seq_start", "log_level", "initialize"})


class ConfigManager:
    """Thread-safe manager for process-wide configuration state."""

    def __init__(self, default_config: ClientConfig) -> None:
        self._lock = threading.RLock()
        self._default_config = default_config
        self._current_config = default_config

    def get_config(self) -> ClientConfig:
        """Get the current configuration in a thread-safe manner."""
        with self._lock:
            return self._current_config

    def set_config(self, config: ClientConfig) -> None:
        """Validate and install a new configuration."""
        with self._lock:
            config.validate()
            self._current_config = config

    def _replaced(self, changes: dict[str, Any]) -> ClientConfig:
        unknown_keys = sorted(set(changes) - _UPDATABLE_KEYS)
        if unknown_keys:
            logger.warning("Ignoring unknown config key(s): %s", ", ".join(unknown_keys))
        known = {key: value for key, value in changes.items() if key in _UPDATABLE_KEYS}
        new_config = dataclasses.replace(self._current_config, **known)
        new_config.validate()
        return new_config

    def update_config(self, **kwargs: Any) -> None:
        """Update the current configuration with new values."""
        with self._lock:
            self._current_config = self._replaced(kwargs)

    def reset_config(self) -> None:
        """Reset configuration to defaults."""
        with self._lock:
            self._current_config = self._default_config

    def apply_context_changes(self, changes: dict[str, Any]) -> tuple[ClientConfig, ClientConfig]:
        """Apply temporary configuration changes atomically.

        Returns:
            Tuple of (original_config, new_config).
        """
        with self._lock:
            original = self._current_config
            new_config = self._replaced(changes)
            self._current_config = new_config
            return original, new_config

    def restore_config(self, config: ClientConfig) -> None:
        """Restore a previously captured configuration."""
        with self._lock:
            self._current_config = config


_config_manager = ConfigManager(DEFAULT_CONFIG)


def get_config() -> ClientConfig:
    """Get the current configuration in a thread-safe manner."""
    return _config_manager.get_config()


def set_config(config: ClientConfig) -> None:
    """Set the current configuration in a thread-safe manner.

    Args:
        config: The new configuration to set
    """
    _config_manager.set_config(config)


def update_config(**kwargs: Any) -> None:
    """Update the current configuration with new values.

    Args:
        **kwargs: Configuration values to update
    """
    _config_manager.update_config(**kwargs)


def reset_config() -> None:
    """Reset configuration to defaults."""
    _config_manager.reset_config()


class ConfigContext:
    """Context manager for temporary configuration changes.

    The original configuration is restored when the context exits.
    """

    def __init__(self, **kwargs: Any):
        self._manager = _config_manager
        self._changes = kwargs
        self._original_config: ClientConfig | None = None

    def __enter__(self) -> ClientConfig:
        self._original_config, new_config = self._manager.apply_context_changes(self._changes)
        return new_config

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: types.TracebackType | None,
    ) -> None:
        if self._original_config is not None:
            self._manager.restore_config(self._original_config)


def config_context(**kwargs: Any) -> ConfigContext:
    """Create a context manager for temporary configuration changes."""
    return ConfigContext(**kwargs)
