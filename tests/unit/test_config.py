"""Tests for EsaClientConfig."""

import pytest
from pydantic import ValidationError

from esa_client import ConfigurationError, EsaClientConfig


class TestEsaClientConfig:
    def test_defaults(self):
        config = EsaClientConfig(access_token="token")

        assert config.team_name is None
        assert config.timeout == 30.0
        assert config.max_rate_limit_retries is None
        assert config.default_retry_after == 60
        assert config.strict_response_decoding is False

    def test_empty_token_is_rejected(self):
        with pytest.raises(ValidationError):
            EsaClientConfig(access_token="")

    def test_blank_team_name_is_unset(self):
        assert EsaClientConfig(access_token="token", team_name="  ").team_name is None

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            EsaClientConfig(access_token="token", timeout=0)

    def test_negative_retry_bound_is_rejected(self):
        with pytest.raises(ValidationError):
            EsaClientConfig(access_token="token", max_rate_limit_retries=-1)


class TestFromEnv:
    def test_reads_all_variables(self):
        config = EsaClientConfig.from_env(
            {
                "ESA_ACCESS_TOKEN": "token",
                "ESA_TEAM_NAME": "docs",
                "ESA_TIMEOUT": "12.5",
                "ESA_MAX_RATE_LIMIT_RETRIES": "3",
            }
        )

        assert config.access_token == "token"
        assert config.team_name == "docs"
        assert config.timeout == 12.5
        assert config.max_rate_limit_retries == 3

    def test_optional_variables_fall_back_to_defaults(self):
        config = EsaClientConfig.from_env({"ESA_ACCESS_TOKEN": "token"})

        assert config.team_name is None
        assert config.timeout == 30.0
        assert config.max_rate_limit_retries is None

    def test_missing_token(self):
        with pytest.raises(ConfigurationError, match="ESA_ACCESS_TOKEN"):
            EsaClientConfig.from_env({"ESA_TEAM_NAME": "docs"})

    def test_invalid_value_is_a_configuration_error(self):
        with pytest.raises(ConfigurationError, match="Invalid esa client configuration"):
            EsaClientConfig.from_env(
                {"ESA_ACCESS_TOKEN": "token", "ESA_TIMEOUT": "not-a-number"}
            )

    def test_reads_process_environment_by_default(self, monkeypatch):
        monkeypatch.setenv("ESA_ACCESS_TOKEN", "env-token")
        monkeypatch.delenv("ESA_TEAM_NAME", raising=False)
        monkeypatch.delenv("ESA_TIMEOUT", raising=False)
        monkeypatch.delenv("ESA_MAX_RATE_LIMIT_RETRIES", raising=False)

        config = EsaClientConfig.from_env()

        assert config.access_token == "env-token"
        assert config.team_name is None
