"""Configuration for the daptest client.

Holds the fixed ``initialize`` arguments the client advertises and the
session-level settings (sequence start, log level).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from dataclasses import field
from typing import TYPE_CHECKING
from typing import Literal

from daptest.errors import ConfigurationError

if TYPE_CHECKING:
    from daptest.protocol.requests import InitializeRequestArguments

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

# Eventually this can just be logging.getLevelNamesMapping()
NAME_TO_LEVEL: dict[str, int] = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


@dataclass
class InitializeConfig:
    """Arguments sent with every ``initialize`` request."""

    adapter_id: str = "go"
    path_format: Literal["path", "uri"] = "path"
    lines_start_at1: bool = True
    columns_start_at1: bool = True
    supports_variable_type: bool = True
    supports_variable_paging: bool = True
    supports_run_in_terminal_request: bool = True
    locale: str = "en-us"

    def to_arguments(self) -> InitializeRequestArguments:
        return {
            "adapterID": self.adapter_id,
            "pathFormat": self.path_format,
            "linesStartAt1": self.lines_start_at1,
            "columnsStartAt1": self.columns_start_at1,
            "supportsVariableType": self.supports_variable_type,
            "supportsVariablePaging": self.supports_variable_paging,
            "supportsRunInTerminalRequest": self.supports_run_in_terminal_request,
            "locale": self.locale,
        }


@dataclass
class ClientConfig:
    """Settings shared by every client session."""

    # Match VS Code numbering
    seq_start: int = 1
    initialize: InitializeConfig = field(default_factory=InitializeConfig)
    log_level: LogLevel = "INFO"

    @property
    def level(self) -> int:
        return NAME_TO_LEVEL.get(self.log_level, logging.INFO)

    def validate(self) -> None:
        """Validate configuration and raise errors for invalid setups."""
        if self.seq_start < 1:
            raise ConfigurationError(
                "Sequence numbers must start at 1 or above",
                config_key="seq_start",
                details={"seq_start": self.seq_start},
            )

        if self.log_level not in NAME_TO_LEVEL:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                config_key="log_level",
                details={"choices": sorted(NAME_TO_LEVEL)},
            )

        if not self.initialize.adapter_id:
            raise ConfigurationError(
                "An adapter ID is required for the initialize request",
                config_key="adapter_id",
            )


DEFAULT_CONFIG = ClientConfig()
