"""HTTP API routers."""

from .health import router as health_router
from .samples import router as samples_router

__all__ = ["health_router", "samples_router"]
