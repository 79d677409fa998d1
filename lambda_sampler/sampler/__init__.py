"""Sampler layer exports."""

from .config_source import ConfigSource, SamplerConfig, SettingsConfigSource, StaticConfigSource
from .invocation_sampler import InvocationSampler, invoke_safely
from .invoker import LambdaInvoker, RemoteInvoker, classify_exception

__all__ = [
    "ConfigSource",
    "InvocationSampler",
    "LambdaInvoker",
    "RemoteInvoker",
    "SamplerConfig",
    "SettingsConfigSource",
    "StaticConfigSource",
    "classify_exception",
    "invoke_safely",
]
