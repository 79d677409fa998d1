"""Custom exception hierarchy for the Lambda sampler."""

from __future__ import annotations

from .types import FaultCategory


class SamplerError(Exception):
    """Base exception for sampler-level issues."""


class InvocationFault(SamplerError):
    """An invocation that did not produce a usable response.

    Faults never reach the host: the sampler records them as failed samples.
    ``category`` is kept for diagnostics only.
    """

    category: FaultCategory = FaultCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        function_name: str | None = None,
        category: FaultCategory | None = None,
    ) -> None:
        super().__init__(message)
        self.function_name = function_name
        if category is not None:
            self.category = category

    @property
    def description(self) -> str:
        """Text recorded as the sample's response message."""

        return str(self) or type(self).__name__


class InvocationConfigError(InvocationFault):
    """Function name or request parameters rejected."""

    category = FaultCategory.CONFIGURATION


class ClientConstructionError(InvocationFault):
    """The Lambda client or its credentials could not be set up."""

    category = FaultCategory.CLIENT


class AuthenticationError(InvocationFault):
    """The service refused the caller's identity or permissions."""

    category = FaultCategory.AUTHENTICATION


class TransportError(InvocationFault):
    """Connection failure or timeout while talking to the service."""

    category = FaultCategory.TRANSPORT


class RemoteExecutionError(InvocationFault):
    """The function itself, or the invoke service, reported an error."""

    category = FaultCategory.REMOTE


class ResponseDecodeError(InvocationFault):
    """Response bytes could not be decoded as text."""

    category = FaultCategory.DECODING
