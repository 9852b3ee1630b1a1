"""Tests for user configuration."""
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from llmrelay.config import LoggingConfig, UserConfig, configure_logging
from llmrelay.config.base import DEFAULT_LOG_FORMAT
from llmrelay.llm.models import ProviderSetting


@pytest.fixture
def sample_user_config():
    """Sample user configuration for testing."""
    return {
        "api_keys": {"OpenAI": "test-key-openai"},
        "provider_settings": {
            "GLM": {"api_key": "test-key-glm", "base_url": "https://glm-proxy.test/v4"},
            "Deepseek": {"enabled": False},
        },
        "default_provider": "GLM",
        "default_model": "glm-4-plus",
        "default_preset": "debug",
        "logging": {"level": "debug"},
    }


def test_defaults():
    config = UserConfig()
    assert config.api_keys == {}
    assert config.provider_settings == {}
    assert config.default_provider == "OpenAI"
    assert config.default_preset == "codeGeneration"
    assert config.logging.level == "INFO"


def test_from_yaml(tmp_path, sample_user_config):
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump(sample_user_config))

    config = UserConfig.from_yaml(path)

    assert config.api_keys == {"OpenAI": "test-key-openai"}
    assert config.provider_settings["GLM"] == ProviderSetting(
        api_key="test-key-glm", base_url="https://glm-proxy.test/v4"
    )
    assert config.provider_settings["Deepseek"].enabled is False
    assert config.default_model == "glm-4-plus"
    assert config.logging.level == "DEBUG"


def test_from_empty_yaml(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert UserConfig.from_yaml(path) == UserConfig()


def test_yaml_round_trip_keeps_non_secret_settings(tmp_path, sample_user_config):
    config = UserConfig.model_validate(sample_user_config)
    path = tmp_path / "out.yaml"
    config.to_yaml(path)

    loaded = UserConfig.from_yaml(path)

    assert loaded.api_keys == {}
    assert loaded.provider_settings == {
        "GLM": ProviderSetting(base_url="https://glm-proxy.test/v4"),
        "Deepseek": ProviderSetting(enabled=False),
    }
    assert loaded.default_provider == config.default_provider
    assert loaded.default_model == config.default_model
    assert loaded.default_preset == config.default_preset
    assert loaded.logging == config.logging


def test_to_yaml_never_writes_api_keys(tmp_path):
    config = UserConfig(
        api_keys={"OpenAI": "sk-secret"},
        provider_settings={"GLM": {"api_key": "glm-secret", "base_url": "https://glm.test"}},
    )
    path = tmp_path / "out.yaml"
    config.to_yaml(path)

    written = path.read_text()
    assert "sk-secret" not in written
    assert "glm-secret" not in written
    assert "api_key" not in written
    assert "https://glm.test" in written
    # Saving does not strip keys from the in-memory config
    assert config.api_keys == {"OpenAI": "sk-secret"}


def test_from_env():
    environ = {
        "LLMRELAY_DEFAULT_PROVIDER": "Anthropic",
        "LLMRELAY_DEFAULT_MODEL": "claude-3-5-haiku-latest",
        "LLMRELAY_LOG_LEVEL": "warning",
        "GLM_BASE_URL": "https://glm.internal/v4",
        "OPENAI_API_KEY": "not-copied",
    }

    config = UserConfig.from_env(environ, provider_names=["OpenAI", "GLM"])

    assert config.default_provider == "Anthropic"
    assert config.default_model == "claude-3-5-haiku-latest"
    assert config.default_preset == "codeGeneration"
    assert config.logging.level == "WARNING"
    assert config.provider_settings == {"GLM": ProviderSetting(base_url="https://glm.internal/v4")}
    assert config.api_keys == {}


def test_from_env_base_url_matches_provider_override(default_registry):
    openai = default_registry.get("OpenAI")
    environ = {openai.config.base_url_key: "https://gateway.test/v1"}

    config = UserConfig.from_env(environ, provider_names=["OpenAI"])

    assert config.provider_settings == {"OpenAI": ProviderSetting(base_url="https://gateway.test/v1")}


def test_invalid_log_level():
    with pytest.raises(ValidationError):
        LoggingConfig(level="LOUD")


def test_configure_logging():
    with patch("llmrelay.config.base.logging.basicConfig") as basic_config:
        configure_logging(LoggingConfig(level="warning", file="llmrelay.log"))
    basic_config.assert_called_once_with(
        level="WARNING", format=DEFAULT_LOG_FORMAT, filename="llmrelay.log", force=True
    )


def test_configure_logging_defaults():
    with patch("llmrelay.config.base.logging.basicConfig") as basic_config:
        configure_logging()
    assert basic_config.call_args.kwargs["level"] == "INFO"
    assert basic_config.call_args.kwargs["filename"] is None
