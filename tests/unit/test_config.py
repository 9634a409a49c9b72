"""Tests for configuration management."""

from pathlib import Path

import pytest
import yaml

from kubecheck.core.config import (
    CheckConfig,
    CheckSettings,
    ClusterConnectionConfig,
    LoggingConfig,
)
from kubecheck.core.exceptions import ConfigurationError


def test_connection_config_defaults():
    """Test connection config defaults."""
    config = ClusterConnectionConfig()
    assert config.api_server is None
    assert config.api_version == "v1"
    assert config.in_cluster is False
    assert config.request_timeout is None


def test_check_settings_defaults():
    """Test check settings defaults."""
    settings = CheckSettings()
    assert settings.minimal == 1
    assert settings.node_filter is None


def test_check_settings_rejects_negative_minimal():
    """Test that a negative threshold is invalid."""
    with pytest.raises(ValueError):
        CheckSettings(minimal=-1)


def test_logging_config_defaults():
    """Test logging defaults keep stdout for the status line."""
    config = LoggingConfig()
    assert config.level == "WARNING"
    assert config.output == "stderr"


@pytest.mark.parametrize(
    "options, fragment",
    [
        ({"user": "admin"}, "also pass a password"),
        ({"password": "secret"}, "requires a user"),
        ({"client_key": "/k"}, "requires a client certificate"),
        ({"client_cert": "/c"}, "requires a client key"),
        ({"token": "a", "token_file": "/t"}, "not both"),
        ({"user": "u", "password": "p", "token": "t"}, "basic auth or a bearer token"),
        ({"user": "u", "password": "p", "token_file": "/t"}, "basic auth or a bearer token"),
        ({"api_version": "v2"}, "Unsupported API version"),
    ],
)
def test_connection_config_rejects_inconsistent_options(options, fragment):
    """Test auth option validation."""
    with pytest.raises(ValueError) as exc_info:
        ClusterConnectionConfig(**options)

    assert fragment in str(exc_info.value)


def test_connection_config_accepts_basic_auth():
    """Test that user and password together are accepted."""
    config = ClusterConnectionConfig(user="admin", password="secret")
    assert config.user == "admin"


def test_check_config_from_dict(sample_config_data):
    """Test creating CheckConfig from dictionary."""
    config = CheckConfig.from_dict(sample_config_data)
    assert config.connection.api_server == "https://k8s.example.com:6443"
    assert config.check.minimal == 3
    assert config.check.node_filter == "node-role.kubernetes.io/worker"
    assert config.logging.format == "json"


def test_check_config_from_dict_invalid():
    """Test invalid data raises ConfigurationError."""
    with pytest.raises(ConfigurationError) as exc_info:
        CheckConfig.from_dict({"check": {"minimal": "many"}})

    assert "Invalid configuration" in str(exc_info.value)


def test_check_config_from_file(tmp_path: Path, sample_config_data):
    """Test loading config from YAML file."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(yaml.dump(sample_config_data))

    config = CheckConfig.from_file(config_file)
    assert config.connection.token == "s3cr3t"
    assert config.check.minimal == 3


def test_check_config_from_empty_file(tmp_path: Path):
    """Test an empty file yields defaults."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("")

    config = CheckConfig.from_file(config_file)
    assert config.check.minimal == 1


def test_check_config_file_not_found(tmp_path: Path):
    """Test error when config file doesn't exist."""
    with pytest.raises(ConfigurationError) as exc_info:
        CheckConfig.from_file(tmp_path / "missing.yaml")

    assert "not found" in str(exc_info.value)


def test_check_config_invalid_yaml(tmp_path: Path):
    """Test error when YAML cannot be parsed."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("check: [unclosed")

    with pytest.raises(ConfigurationError) as exc_info:
        CheckConfig.from_file(config_file)

    assert "Failed to load configuration" in str(exc_info.value)


def test_check_config_non_mapping(tmp_path: Path):
    """Test error when the YAML document is not a mapping."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ConfigurationError):
        CheckConfig.from_file(config_file)


def test_with_overrides_ignores_none(sample_config_data):
    """Test that None overrides keep existing values."""
    config = CheckConfig.from_dict(sample_config_data)

    merged = config.with_overrides(
        connection={"api_server": None, "token": None},
        check={"minimal": 5, "node_filter": None},
    )

    assert merged.connection.api_server == "https://k8s.example.com:6443"
    assert merged.check.minimal == 5
    assert merged.check.node_filter == "node-role.kubernetes.io/worker"
    # The source config is untouched
    assert config.check.minimal == 3


def test_with_overrides_revalidates():
    """Test that merged values are validated."""
    with pytest.raises(ConfigurationError):
        CheckConfig().with_overrides(connection={"user": "admin"})


def test_with_overrides_unknown_section():
    """Test that unknown sections are rejected."""
    with pytest.raises(ConfigurationError):
        CheckConfig().with_overrides(metrics={"enabled": True})
