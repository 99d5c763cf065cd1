"""
Unit Tests for Service Configuration
====================================

Copyright (c) 2025-2026 Hugo José Pinto & Contributors
"""

import logging

from polydisasm.config import ServiceConfig


class TestServiceConfig:
    """Tests for ServiceConfig defaults and environment loading."""

    def test_defaults(self):
        config = ServiceConfig()
        assert config.log_level == "WARNING"
        assert config.max_input_bytes == 1024 * 1024
        assert config.default_syntax == "intel"
        assert config.logging_level == logging.WARNING

    def test_from_env_empty(self, monkeypatch):
        for name in ("POLYDISASM_LOG_LEVEL", "POLYDISASM_MAX_INPUT_BYTES",
                     "POLYDISASM_DEFAULT_SYNTAX"):
            monkeypatch.delenv(name, raising=False)
        assert ServiceConfig.from_env() == ServiceConfig()

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("POLYDISASM_LOG_LEVEL", "debug")
        monkeypatch.setenv("POLYDISASM_MAX_INPUT_BYTES", "4096")
        monkeypatch.setenv("POLYDISASM_DEFAULT_SYNTAX", "att")

        config = ServiceConfig.from_env()

        assert config.log_level == "DEBUG"
        assert config.logging_level == logging.DEBUG
        assert config.max_input_bytes == 4096
        assert config.default_syntax == "att"

    def test_invalid_values_keep_defaults(self, monkeypatch, caplog):
        monkeypatch.setenv("POLYDISASM_LOG_LEVEL", "chatty")
        monkeypatch.setenv("POLYDISASM_MAX_INPUT_BYTES", "lots")

        with caplog.at_level(logging.WARNING, logger="polydisasm.config"):
            config = ServiceConfig.from_env()

        assert config.log_level == "WARNING"
        assert config.max_input_bytes == 1024 * 1024
        assert "POLYDISASM_LOG_LEVEL" in caplog.text
        assert "POLYDISASM_MAX_INPUT_BYTES" in caplog.text

    def test_non_positive_size_rejected(self, monkeypatch):
        monkeypatch.setenv("POLYDISASM_MAX_INPUT_BYTES", "0")
        assert ServiceConfig.from_env().max_input_bytes == 1024 * 1024
