"""Shared type definitions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .exceptions import InvocationFault

SUCCESS_CODE = "200"
FAILURE_CODE = "500"
SUCCESS_MESSAGE = "OK"


class InvocationMode(str, Enum):
    """Lambda ``InvocationType`` values; the sampler only issues synchronous calls."""

    REQUEST_RESPONSE = "RequestResponse"


class FaultCategory(str, Enum):
    CONFIGURATION = "configuration"
    CLIENT = "client"
    AUTHENTICATION = "authentication"
    TRANSPORT = "transport"
    REMOTE = "remote"
    DECODING = "decoding"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """One synchronous invocation of a named function."""

    function_name: str
    payload: str
    mode: InvocationMode = InvocationMode.REQUEST_RESPONSE
    qualifier: str | None = None

    def payload_bytes(self) -> bytes:
        return self.payload.encode("utf-8")


@dataclass(frozen=True, slots=True)
class InvocationOutcome:
    """Result of the remote-call layer: a response or the fault that prevented one."""

    status_code: int | None = None
    payload: bytes = b""
    fault: InvocationFault | None = None
    executed_version: str | None = None

    @classmethod
    def succeeded(
        cls, status_code: int, payload: bytes, *, executed_version: str | None = None
    ) -> InvocationOutcome:
        return cls(status_code=status_code, payload=payload, executed_version=executed_version)

    @classmethod
    def failed(cls, fault: InvocationFault) -> InvocationOutcome:
        return cls(fault=fault)

    @property
    def ok(self) -> bool:
        return self.fault is None

    def decode(self, encoding: str = "utf-8") -> str:
        """Decode the response bytes, raising ResponseDecodeError on bad input."""

        from .exceptions import ResponseDecodeError

        try:
            return self.payload.decode(encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ResponseDecodeError(f"Response is not valid {encoding}: {exc}") from exc


@dataclass(frozen=True, slots=True)
class SampleResult:
    """Timed record of one sample, as reported to the host."""

    label: str
    start_time: float
    end_time: float
    timestamp: datetime
    request_payload: str
    response_body: str
    response_code: str
    response_message: str
    success: bool
    data_type: str = "text"

    @property
    def elapsed_ms(self) -> float:
        return (self.end_time - self.start_time) * 1000.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "elapsed_ms": self.elapsed_ms,
            "timestamp": self.timestamp,
            "request_payload": self.request_payload,
            "response_body": self.response_body,
            "response_code": self.response_code,
            "response_message": self.response_message,
            "success": self.success,
            "data_type": self.data_type,
        }
