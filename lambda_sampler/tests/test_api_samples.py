import pytest
from httpx import ASGITransport, AsyncClient

from lambda_sampler.core.types import InvocationOutcome
from lambda_sampler.sampler.invoker import LambdaInvoker
from lambda_sampler.service.dependencies import get_invoker
from lambda_sampler.service.main import app


class EchoInvoker:
    def __init__(self):
        self.requests = []

    def invoke(self, request):
        self.requests.append(request)
        return InvocationOutcome.succeeded(200, request.payload_bytes())


class FailingInvoker:
    def invoke(self, request):
        raise RuntimeError(f"function not found: {request.function_name!r}")


@pytest.fixture
def override_invoker():
    def _override(invoker):
        app.dependency_overrides[get_invoker] = lambda: invoker
        return invoker

    yield _override
    app.dependency_overrides.clear()


async def _post(path, **kwargs):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        return await client.post(path, **kwargs)


@pytest.mark.asyncio
async def test_samples_endpoint_returns_success(override_invoker):
    invoker = override_invoker(EchoInvoker())

    response = await _post(
        "/samples/",
        json={"function_name": "echoFn", "payload": '{"k":"v"}', "label": "echo"},
    )

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is True
    assert payload["response_code"] == "200"
    assert payload["response_message"] == "OK"
    assert payload["response_body"] == '{"k":"v"}'
    assert payload["label"] == "echo"
    assert payload["elapsed_ms"] >= 0
    assert invoker.requests[0].function_name == "echoFn"


@pytest.mark.asyncio
async def test_samples_endpoint_falls_back_to_settings(monkeypatch, override_invoker):
    monkeypatch.setenv("LAMBDA_FUNCTION_NAME", "configuredFn")
    monkeypatch.setenv("LAMBDA_PAYLOAD", "configured-payload")
    invoker = override_invoker(EchoInvoker())

    response = await _post("/samples/")

    assert response.status_code == 200
    assert response.json()["request_payload"] == "configured-payload"
    assert invoker.requests[0].function_name == "configuredFn"


@pytest.mark.asyncio
async def test_samples_endpoint_reports_failure_without_http_error(override_invoker):
    override_invoker(FailingInvoker())

    response = await _post("/samples/", json={"function_name": "", "payload": "{}"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["success"] is False
    assert payload["response_code"] == "500"
    assert "function not found" in payload["response_message"]
    assert payload["response_body"] == ""


@pytest.mark.asyncio
async def test_health_endpoint():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_get_invoker_is_shared():
    invoker = get_invoker()

    assert isinstance(invoker, LambdaInvoker)
    assert get_invoker() is invoker
