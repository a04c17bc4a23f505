"""Tests for configuration and memory path resolution."""

import logging
import sys

import pytest

from memvid_mcp.config import (
    DEFAULT_CLI,
    MemvidConfig,
    configure_logging,
    resolve_path,
)
from memvid_mcp.errors import ConfigurationError


class TestResolvePath:
    """Tests for resolve_path."""

    def test_returns_input_path(self, bare_config):
        """An explicit path is returned unchanged."""
        assert resolve_path("/custom/path.mv2", bare_config) == "/custom/path.mv2"

    def test_prefers_input_over_default(self, config):
        """Explicit path wins over the configured default."""
        assert resolve_path("/custom/path.mv2", config) == "/custom/path.mv2"

    def test_falls_back_to_default(self, config):
        """Missing path uses the configured default."""
        assert resolve_path(None, config) == "/default/path.mv2"

    def test_empty_string_uses_default(self, config):
        """An empty path counts as missing."""
        assert resolve_path("", config) == "/default/path.mv2"

    def test_raises_without_default(self, bare_config):
        """No path and no default is a configuration error."""
        with pytest.raises(ConfigurationError) as exc:
            resolve_path(None, bare_config)

        assert "No memory file path provided" in str(exc.value)
        assert "MEMVID_DEFAULT_PATH" in str(exc.value)
        assert exc.value.kind == "configuration"


class TestMemvidConfig:
    """Tests for MemvidConfig.from_env."""

    def test_defaults_with_empty_environment(self):
        """Nothing set gives no default path and the bare binary name."""
        config = MemvidConfig.from_env({})

        assert config.default_path == ""
        assert config.cli_path == DEFAULT_CLI
        assert config.timeout is None
        assert config.log_level == "INFO"

    def test_reads_environment(self):
        """All variables are picked up."""
        config = MemvidConfig.from_env({
            "MEMVID_DEFAULT_PATH": "/data/memory.mv2",
            "MEMVID_CLI_PATH": "/opt/memvid/bin/memvid",
            "MEMVID_CLI_TIMEOUT": "2.5",
            "MEMVID_LOG_LEVEL": "debug",
        })

        assert config.default_path == "/data/memory.mv2"
        assert config.cli_path == "/opt/memvid/bin/memvid"
        assert config.timeout == 2.5
        assert config.log_level == "DEBUG"

    def test_blank_cli_path_falls_back(self):
        """An empty MEMVID_CLI_PATH still means PATH lookup."""
        assert MemvidConfig.from_env({"MEMVID_CLI_PATH": "  "}).cli_path == DEFAULT_CLI

    def test_zero_timeout_means_unbounded(self):
        assert MemvidConfig.from_env({"MEMVID_CLI_TIMEOUT": "0"}).timeout is None

    @pytest.mark.parametrize("raw", ["soon", "-1"])
    def test_invalid_timeout_rejected(self, raw):
        """Non-numeric or negative timeouts fail at startup."""
        with pytest.raises(ConfigurationError):
            MemvidConfig.from_env({"MEMVID_CLI_TIMEOUT": raw})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv("MEMVID_DEFAULT_PATH", "/env/memory.mv2")
        monkeypatch.delenv("MEMVID_CLI_PATH", raising=False)

        config = MemvidConfig.from_env()

        assert config.default_path == "/env/memory.mv2"
        assert config.cli_path == DEFAULT_CLI

    def test_is_immutable(self, config):
        with pytest.raises(AttributeError):
            config.default_path = "/other.mv2"


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        yield
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_logs_to_stderr(self):
        """A single stderr handler is installed at the requested level."""
        configure_logging("DEBUG")
        root = logging.getLogger()

        assert len(root.handlers) == 1
        assert root.handlers[0].stream is sys.stderr
        assert root.level == logging.DEBUG

    def test_unknown_level_uses_info(self):
        configure_logging("CHATTY")

        assert logging.getLogger().level == logging.INFO
