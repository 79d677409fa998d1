import pytest

from lambda_sampler.core import aws_client
from lambda_sampler.core.aws_client import build_client_config, create_lambda_client, lambda_client
from lambda_sampler.core.config import SamplerSettings
from lambda_sampler.core.exceptions import ClientConstructionError


def test_client_config_applies_timeout_policy():
    settings = SamplerSettings(
        aws_region="eu-west-1",
        invoke_connect_timeout=3,
        invoke_read_timeout=120,
        invoke_max_attempts=2,
        max_pool_connections=16,
    )

    config = build_client_config(settings)

    assert config.region_name == "eu-west-1"
    assert config.connect_timeout == 3
    assert config.read_timeout == 120
    assert config.retries == {"total_max_attempts": 2, "mode": "standard"}
    assert config.max_pool_connections == 16


def test_create_lambda_client_uses_region_and_endpoint():
    settings = SamplerSettings(aws_region="eu-west-1", aws_endpoint_url="http://localhost:4566")

    client = create_lambda_client(settings)
    try:
        assert client.meta.region_name == "eu-west-1"
        assert client.meta.endpoint_url.startswith("http://localhost:4566")
    finally:
        client.close()


def test_create_lambda_client_wraps_unknown_profile():
    settings = SamplerSettings(aws_profile="does-not-exist")

    with pytest.raises(ClientConstructionError, match="does-not-exist"):
        create_lambda_client(settings)


def test_lambda_client_context_closes_client(monkeypatch):
    class Closable:
        closed = False

        def close(self):
            self.closed = True

    client = Closable()
    monkeypatch.setattr(aws_client, "create_lambda_client", lambda settings: client)

    with lambda_client(SamplerSettings()) as yielded:
        assert yielded is client
        assert client.closed is False

    assert client.closed is True
