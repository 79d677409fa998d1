import pytest
from pydantic import ValidationError

from lambda_sampler.core.config import SamplerSettings, get_settings


def test_sampler_settings_reads_env(monkeypatch):
    monkeypatch.setenv("LAMBDA_FUNCTION_NAME", "echoFn")
    monkeypatch.setenv("LAMBDA_PAYLOAD", '{"k":"v"}')
    monkeypatch.setenv("LAMBDA_QUALIFIER", "live")
    monkeypatch.setenv("AWS_REGION", "eu-west-1")
    monkeypatch.setenv("INVOKE_READ_TIMEOUT", "30")
    monkeypatch.setenv("REUSE_CLIENT", "false")

    settings = SamplerSettings()

    assert settings.lambda_function_name == "echoFn"
    assert settings.lambda_payload == '{"k":"v"}'
    assert settings.lambda_qualifier == "live"
    assert settings.aws_region == "eu-west-1"
    assert settings.invoke_read_timeout == 30.0
    assert settings.reuse_client is False


def test_sampler_settings_accepts_legacy_lambda_name(monkeypatch):
    monkeypatch.setenv("LAMBDA_NAME", "legacyFn")

    assert SamplerSettings().lambda_function_name == "legacyFn"


def test_sampler_settings_defaults(monkeypatch):
    monkeypatch.delenv("AWS_REGION", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)

    settings = SamplerSettings(_env_file=None)

    assert settings.sample_label == "AWS Lambda Sampler"
    assert settings.lambda_function_name == ""
    assert settings.aws_region == "ap-southeast-2"
    assert settings.invoke_connect_timeout == 10.0
    assert settings.invoke_read_timeout == 900.0
    assert settings.invoke_max_attempts == 1
    assert settings.reuse_client is True


def test_sampler_settings_rejects_non_positive_timeout(monkeypatch):
    monkeypatch.setenv("INVOKE_CONNECT_TIMEOUT", "0")

    with pytest.raises(ValidationError):
        SamplerSettings()


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
