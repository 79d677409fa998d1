"""Single-shot, timed Lambda invocation sampler."""

from __future__ import annotations

import time
from datetime import datetime, timezone

from ..core.config import get_settings
from ..core.exceptions import InvocationConfigError, InvocationFault
from ..core.logging_config import get_logger
from ..core.types import (
    FAILURE_CODE,
    SUCCESS_CODE,
    SUCCESS_MESSAGE,
    InvocationOutcome,
    InvocationRequest,
    SampleResult,
)
from .config_source import ConfigSource
from .invoker import RemoteInvoker, classify_exception

logger = get_logger(__name__)


def invoke_safely(invoker: RemoteInvoker, request: InvocationRequest) -> InvocationOutcome:
    """Run one invocation, returning any raised exception as a fault outcome."""

    try:
        outcome = invoker.invoke(request)
    except Exception as exc:
        return InvocationOutcome.failed(classify_exception(exc, request.function_name))

    if not isinstance(outcome, InvocationOutcome):
        return InvocationOutcome.failed(
            InvocationFault(
                f"Invoker returned {type(outcome).__name__}, expected InvocationOutcome",
                function_name=request.function_name,
            )
        )
    if outcome.fault is not None and not isinstance(outcome.fault, InvocationFault):
        return InvocationOutcome.failed(classify_exception(outcome.fault, request.function_name))
    return outcome


class InvocationSampler:
    """Produces one SampleResult per ``sample()`` call and never raises.

    Instances are not meant to be shared between threads; the invoker may be.
    """

    def __init__(
        self,
        config_source: ConfigSource,
        invoker: RemoteInvoker,
        *,
        name: str | None = None,
        response_encoding: str | None = None,
    ) -> None:
        self._config_source = config_source
        self._invoker = invoker
        settings = get_settings()
        self._name = name or settings.sample_label
        self._response_encoding = response_encoding or settings.response_encoding

    @property
    def title(self) -> str:
        return self._name

    def get_title(self) -> str:
        return self.title

    def sample(self) -> SampleResult:
        label = self.title
        timestamp = datetime.now(tz=timezone.utc)
        payload = ""
        try:
            payload = self._config_source.get_payload()
            function_name = self._config_source.get_function_name()
            qualifier = self._config_source.get_qualifier()
        except Exception as exc:
            now = time.perf_counter()
            fault = InvocationConfigError(f"Cannot read sampler configuration: {exc}")
            fault.__cause__ = exc
            return self._failure(label, timestamp, payload, now, now, fault)

        request = InvocationRequest(
            function_name=function_name, payload=payload, qualifier=qualifier
        )

        start_time = time.perf_counter()
        outcome = invoke_safely(self._invoker, request)
        body: str | None = None
        fault = outcome.fault
        if fault is None:
            try:
                body = outcome.decode(self._response_encoding)
            except Exception as exc:
                fault = classify_exception(exc, function_name)
        end_time = time.perf_counter()

        if fault is not None:
            return self._failure(label, timestamp, payload, start_time, end_time, fault)

        result = SampleResult(
            label=label,
            start_time=start_time,
            end_time=end_time,
            timestamp=timestamp,
            request_payload=payload,
            response_body=body or "",
            response_code=SUCCESS_CODE,
            response_message=SUCCESS_MESSAGE,
            success=True,
        )
        logger.debug(
            "sample_completed",
            label=label,
            function_name=function_name,
            status_code=outcome.status_code,
            elapsed_ms=round(result.elapsed_ms, 3),
        )
        return result

    def _failure(
        self,
        label: str,
        timestamp: datetime,
        payload: str,
        start_time: float,
        end_time: float,
        fault: InvocationFault,
    ) -> SampleResult:
        logger.warning(
            "sample_failed",
            label=label,
            function_name=fault.function_name,
            category=fault.category.value,
            error=fault.description,
        )
        logger.debug("sample_failure_traceback", exc_info=fault)

        return SampleResult(
            label=label,
            start_time=start_time,
            end_time=end_time,
            timestamp=timestamp,
            request_payload=payload,
            response_body="",
            response_code=FAILURE_CODE,
            response_message=fault.description,
            success=False,
        )
