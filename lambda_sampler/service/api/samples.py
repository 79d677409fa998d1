"""Sample endpoints."""

from fastapi import APIRouter, Depends

from ...core.config import get_settings
from ...core.logging_config import get_logger
from ...sampler.config_source import SamplerConfig, StaticConfigSource
from ...sampler.invocation_sampler import InvocationSampler
from ...sampler.invoker import RemoteInvoker
from ..dependencies import get_invoker
from ..schemas.sample import SampleRequest, SampleResponse

router = APIRouter(prefix="/samples", tags=["samples"])
logger = get_logger(__name__)


@router.post("/", response_model=SampleResponse)
def run_sample(
    request: SampleRequest | None = None,
    invoker: RemoteInvoker = Depends(get_invoker),
) -> SampleResponse:
    """Take one sample; failures come back as ``success=false``, never as HTTP errors."""

    settings = get_settings()
    overrides = request or SampleRequest()
    config = SamplerConfig(
        function_name=(
            overrides.function_name
            if overrides.function_name is not None
            else settings.lambda_function_name
        ),
        payload=overrides.payload if overrides.payload is not None else settings.lambda_payload,
        qualifier=overrides.qualifier or settings.lambda_qualifier,
    )
    logger.info("sample_request_received", function_name=config.function_name)

    sampler = InvocationSampler(StaticConfigSource(config), invoker, name=overrides.label)
    result = sampler.sample()

    logger.info(
        "sample_request_completed",
        label=result.label,
        success=result.success,
        response_code=result.response_code,
        elapsed_ms=round(result.elapsed_ms, 3),
    )
    return SampleResponse.from_result(result)
