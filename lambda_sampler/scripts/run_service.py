"""Run the Lambda sampler HTTP service locally."""

from __future__ import annotations

import uvicorn

from lambda_sampler.core.config import get_settings
from lambda_sampler.service.main import app


def main() -> None:
    settings = get_settings()
    reload_enabled = settings.app_env == "development"
    if reload_enabled:
        uvicorn.run(
            "lambda_sampler.service.main:app",
            host=settings.sampler_host,
            port=settings.sampler_port,
            reload=True,
        )
    else:
        uvicorn.run(
            app,
            host=settings.sampler_host,
            port=settings.sampler_port,
            reload=False,
        )


if __name__ == "__main__":
    main()
