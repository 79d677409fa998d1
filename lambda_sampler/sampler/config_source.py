"""Where a sampler reads its function name and payload from."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from ..core.config import SamplerSettings, get_settings


@runtime_checkable
class ConfigSource(Protocol):
    def get_function_name(self) -> str: ...

    def get_payload(self) -> str: ...

    def get_qualifier(self) -> str | None: ...


@dataclass(frozen=True, slots=True)
class SamplerConfig:
    """Immutable per-sampler configuration."""

    function_name: str
    payload: str = ""
    qualifier: str | None = None

    @classmethod
    def from_settings(cls, settings: SamplerSettings) -> SamplerConfig:
        return cls(
            function_name=settings.lambda_function_name,
            payload=settings.lambda_payload,
            qualifier=settings.lambda_qualifier,
        )


class StaticConfigSource:
    """ConfigSource over a fixed SamplerConfig."""

    def __init__(self, config: SamplerConfig) -> None:
        self._config = config

    @property
    def config(self) -> SamplerConfig:
        return self._config

    def get_function_name(self) -> str:
        return self._config.function_name

    def get_payload(self) -> str:
        return self._config.payload

    def get_qualifier(self) -> str | None:
        return self._config.qualifier


class SettingsConfigSource:
    """ConfigSource that reads the current SamplerSettings on every call."""

    def __init__(self, settings: SamplerSettings | None = None) -> None:
        self._settings = settings

    def _current(self) -> SamplerSettings:
        return self._settings or get_settings()

    def get_function_name(self) -> str:
        return self._current().lambda_function_name

    def get_payload(self) -> str:
        return self._current().lambda_payload

    def get_qualifier(self) -> str | None:
        return self._current().lambda_qualifier
