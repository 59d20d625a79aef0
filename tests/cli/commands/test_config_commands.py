"""Tests for config commands."""
import json

import pytest

from taskpad.cli.main import cli


@pytest.fixture
def invoke(cli_runner, data_dir):
    """Invoke the CLI against the test data directory."""
    def _invoke(*args, **kwargs):
        return cli_runner.invoke(cli, ['--data-dir', str(data_dir), *args], **kwargs)
    return _invoke


class TestConfigCommand:
    """Test config command functionality."""

    def test_config_help(self, invoke):
        """Test config command help."""
        result = invoke('config', '--help')

        assert result.exit_code == 0
        for cmd in ['show', 'set', 'reset']:
            assert cmd in result.output

    def test_show_defaults(self, invoke):
        """Test showing the default configuration."""
        result = invoke('config', 'show')

        assert result.exit_code == 0
        assert "default_category" in result.output
        assert "Work" in result.output
        assert "No configuration file found" in result.output

    def test_set_priority(self, invoke, data_dir):
        """Test setting the default priority."""
        result = invoke('config', 'set', 'default_priority', 'high')

        assert result.exit_code == 0
        config = json.loads((data_dir / "config.json").read_text())
        assert config["default_priority"] == "High"

    def test_set_log_level(self, invoke, data_dir):
        """Test setting the log level."""
        result = invoke('config', 'set', 'log_level', 'info')

        assert result.exit_code == 0
        config = json.loads((data_dir / "config.json").read_text())
        assert config["log_level"] == "INFO"

    def test_set_invalid_value(self, invoke, data_dir):
        """Test that an invalid value is rejected."""
        result = invoke('config', 'set', 'default_category', 'Errand')

        assert result.exit_code == 1
        assert "Error" in result.output
        assert not (data_dir / "config.json").exists()

    def test_set_invalid_log_level(self, invoke):
        """Test that an unknown log level is rejected."""
        result = invoke('config', 'set', 'log_level', 'LOUD')

        assert result.exit_code == 1
        assert "Valid levels" in result.output

    def test_set_unknown_key(self, invoke):
        """Test that an unknown key is rejected."""
        result = invoke('config', 'set', 'color', 'blue')

        assert result.exit_code == 2

    def test_show_after_set(self, invoke):
        """Test that show reflects a saved value."""
        invoke('config', 'set', 'default_category', 'Personal')

        result = invoke('config', 'show')

        assert "Personal" in result.output
        assert "No configuration file found" not in result.output

    def test_reset(self, invoke, data_dir):
        """Test resetting configuration to defaults."""
        invoke('config', 'set', 'default_priority', 'Low')

        result = invoke('config', 'reset')

        assert result.exit_code == 0
        config = json.loads((data_dir / "config.json").read_text())
        assert config["default_priority"] == "Medium"
