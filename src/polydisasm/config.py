"""
Service Configuration
=====================

Configuration for the disassembly boundary (request handler, JSON-RPC
server and CLI). Configuration can come from:
- Default values (defined here)
- Environment variables (ServiceConfig.from_env)

Environment variables (all optional):
    POLYDISASM_LOG_LEVEL: Logging level name (e.g., "DEBUG", "INFO")
    POLYDISASM_MAX_INPUT_BYTES: Largest accepted buffer, in bytes
    POLYDISASM_DEFAULT_SYNTAX: Syntax used when a request names none

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging
import os
from dataclasses import dataclass


logger = logging.getLogger(__name__)

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class ServiceConfig:
    """
    Configuration for the disassembly service boundary.

    Attributes:
        log_level: Logging level name for the CLI and server (default: "WARNING")
        max_input_bytes: Largest buffer a request may carry (default: 1 MiB)
        default_syntax: Syntax for adapters that have several, used when the
                        request names none (default: "intel")
    """

    log_level: str = "WARNING"
    max_input_bytes: int = 1024 * 1024
    default_syntax: str = "intel"

    @classmethod
    def from_env(cls) -> "ServiceConfig":
        """
        Create ServiceConfig from environment variables.

        Invalid values are ignored (with a warning) and the default is kept.

        Returns:
            ServiceConfig with values from environment variables
        """
        config = cls()

        if level := os.environ.get("POLYDISASM_LOG_LEVEL"):
            level = level.strip().upper()
            if level in _LOG_LEVELS:
                config.log_level = level
            else:
                logger.warning("Ignoring invalid POLYDISASM_LOG_LEVEL: %s", level)

        if max_bytes := os.environ.get("POLYDISASM_MAX_INPUT_BYTES"):
            try:
                value = int(max_bytes)
            except ValueError:
                value = -1
            if value > 0:
                config.max_input_bytes = value
            else:
                logger.warning(
                    "Ignoring invalid POLYDISASM_MAX_INPUT_BYTES: %s", max_bytes
                )

        if syntax := os.environ.get("POLYDISASM_DEFAULT_SYNTAX"):
            config.default_syntax = syntax.strip()

        return config

    @property
    def logging_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return getattr(logging, self.log_level, logging.WARNING)
