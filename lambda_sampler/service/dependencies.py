"""FastAPI dependency providers."""

from functools import lru_cache

from ..sampler.invoker import LambdaInvoker, RemoteInvoker


@lru_cache
def get_invoker() -> RemoteInvoker:
    """Process-wide invoker shared by every request."""

    return LambdaInvoker()
