"""Remote-call layer: invoking Lambda functions through boto3."""

from __future__ import annotations

import json
import threading
from typing import Any, Protocol, runtime_checkable

from botocore import exceptions as boto_exc

from ..core.aws_client import create_lambda_client, lambda_client
from ..core.config import SamplerSettings, get_settings
from ..core.exceptions import (
    AuthenticationError,
    ClientConstructionError,
    InvocationConfigError,
    InvocationFault,
    RemoteExecutionError,
    ResponseDecodeError,
    TransportError,
)
from ..core.logging_config import get_logger
from ..core.types import InvocationOutcome, InvocationRequest

logger = get_logger(__name__)

_CONFIGURATION_ERROR_CODES = frozenset(
    {
        "ResourceNotFoundException",
        "InvalidParameterValueException",
        "InvalidRequestContentException",
        "RequestTooLargeException",
        "UnsupportedMediaTypeException",
        "ValidationException",
    }
)
_AUTHENTICATION_ERROR_CODES = frozenset(
    {
        "AccessDeniedException",
        "UnrecognizedClientException",
        "InvalidSignatureException",
        "ExpiredTokenException",
        "InvalidClientTokenId",
        "MissingAuthenticationToken",
    }
)


@runtime_checkable
class RemoteInvoker(Protocol):
    def invoke(self, request: InvocationRequest) -> InvocationOutcome: ...


def classify_exception(exc: BaseException, function_name: str | None = None) -> InvocationFault:
    """Map an arbitrary exception onto the InvocationFault hierarchy.

    Faults pass through, picking up ``function_name`` when they lack one; anything
    else is wrapped with ``exc`` as its cause.
    """

    if isinstance(exc, InvocationFault):
        if exc.function_name is None and function_name is not None:
            exc.function_name = function_name
        return exc
    fault = _classify(exc, function_name)
    fault.__cause__ = exc
    return fault


def _classify(exc: BaseException, function_name: str | None) -> InvocationFault:
    message = str(exc) or type(exc).__name__
    if isinstance(exc, boto_exc.ParamValidationError):
        return InvocationConfigError(message, function_name=function_name)
    if isinstance(
        exc,
        (
            boto_exc.NoCredentialsError,
            boto_exc.PartialCredentialsError,
            boto_exc.NoRegionError,
            boto_exc.ProfileNotFound,
        ),
    ):
        return ClientConstructionError(message, function_name=function_name)
    if isinstance(exc, (boto_exc.ConnectionError, boto_exc.HTTPClientError)):
        return TransportError(message, function_name=function_name)
    if isinstance(exc, boto_exc.ClientError):
        code = exc.response.get("Error", {}).get("Code", "")
        if code in _CONFIGURATION_ERROR_CODES:
            return InvocationConfigError(message, function_name=function_name)
        if code in _AUTHENTICATION_ERROR_CODES:
            return AuthenticationError(message, function_name=function_name)
        return RemoteExecutionError(message, function_name=function_name)
    if isinstance(exc, (TimeoutError, ConnectionError)):
        return TransportError(message, function_name=function_name)
    if isinstance(exc, UnicodeDecodeError):
        return ResponseDecodeError(message, function_name=function_name)
    return InvocationFault(message, function_name=function_name)


def _function_error_message(function_error: str, body: bytes) -> str:
    """Build a description from a Lambda error payload."""

    try:
        payload = json.loads(body)
    except ValueError:
        payload = None

    if isinstance(payload, dict) and payload.get("errorMessage"):
        error_type = payload.get("errorType") or function_error
        return f"{error_type}: {payload['errorMessage']}"
    text = body.decode("utf-8", errors="replace").strip()
    return f"Function error ({function_error}): {text}" if text else f"Function error ({function_error})"


class LambdaInvoker:
    """Synchronous Lambda invoker, safe to share across sampler threads.

    With ``reuse_client`` (the default) one client is created lazily and kept for the
    life of the invoker. Otherwise every call builds its own client and closes it.
    """

    def __init__(self, settings: SamplerSettings | None = None, *, client: Any = None) -> None:
        self._settings = settings or get_settings()
        self._client = client
        self._lock = threading.Lock()

    @property
    def settings(self) -> SamplerSettings:
        return self._settings

    def _shared_client(self) -> Any:
        if self._client is None:
            with self._lock:
                if self._client is None:
                    self._client = create_lambda_client(self._settings)
                    logger.info(
                        "lambda_client_created",
                        region=self._settings.aws_region,
                        endpoint=str(self._settings.aws_endpoint_url or "default"),
                    )
        return self._client

    def invoke(self, request: InvocationRequest) -> InvocationOutcome:
        """Invoke the function and wait for its response.

        Raises an InvocationFault subclass when no usable response was received.
        """

        try:
            if self._client is not None or self._settings.reuse_client:
                return self._call(self._shared_client(), request)
            with lambda_client(self._settings) as client:
                return self._call(client, request)
        except InvocationFault:
            raise
        except Exception as exc:
            raise classify_exception(exc, request.function_name) from exc

    def _call(self, client: Any, request: InvocationRequest) -> InvocationOutcome:
        params: dict[str, Any] = {
            "FunctionName": request.function_name,
            "InvocationType": request.mode.value,
            "Payload": request.payload_bytes(),
        }
        if request.qualifier:
            params["Qualifier"] = request.qualifier

        logger.debug(
            "lambda_invoke_request",
            function_name=request.function_name,
            qualifier=request.qualifier,
            payload_bytes=len(params["Payload"]),
        )
        response = client.invoke(**params)

        stream = response.get("Payload")
        try:
            body = stream.read() if stream is not None else b""
        finally:
            if stream is not None:
                stream.close()

        status_code = int(response.get("StatusCode", 0))
        logger.debug(
            "lambda_invoke_response",
            function_name=request.function_name,
            status_code=status_code,
            response_bytes=len(body),
            executed_version=response.get("ExecutedVersion"),
        )

        function_error = response.get("FunctionError")
        if function_error:
            raise RemoteExecutionError(
                _function_error_message(function_error, body),
                function_name=request.function_name,
            )

        return InvocationOutcome.succeeded(
            status_code, body, executed_version=response.get("ExecutedVersion")
        )
