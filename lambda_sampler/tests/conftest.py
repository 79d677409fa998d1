import pytest

from lambda_sampler.core.config import get_settings
from lambda_sampler.service.dependencies import get_invoker


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    # Keep boto3 away from real credentials and profiles.
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_CONFIG_FILE", str(tmp_path / "aws-config"))
    monkeypatch.setenv("AWS_SHARED_CREDENTIALS_FILE", str(tmp_path / "aws-credentials"))
    for name in ("LAMBDA_FUNCTION_NAME", "LAMBDA_NAME", "LAMBDA_PAYLOAD", "LAMBDA_QUALIFIER"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_invoker.cache_clear()
    yield
    get_settings.cache_clear()
    get_invoker.cache_clear()
