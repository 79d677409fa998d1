"""Reusable AWS Lambda client utilities."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import boto3
from botocore.config import Config

from .config import SamplerSettings
from .exceptions import ClientConstructionError


def build_client_config(settings: SamplerSettings) -> Config:
    """Timeout and retry policy applied to every Lambda client."""

    return Config(
        region_name=settings.aws_region,
        connect_timeout=settings.invoke_connect_timeout,
        read_timeout=settings.invoke_read_timeout,
        retries={"total_max_attempts": settings.invoke_max_attempts, "mode": "standard"},
        max_pool_connections=settings.max_pool_connections,
    )


def create_lambda_client(settings: SamplerSettings) -> Any:
    """Build a boto3 Lambda client from settings.

    A dedicated session is used because boto3's default session is not thread-safe.
    """

    endpoint_url = str(settings.aws_endpoint_url) if settings.aws_endpoint_url else None
    try:
        session = boto3.Session(
            profile_name=settings.aws_profile,
            region_name=settings.aws_region,
        )
        return session.client(
            "lambda",
            endpoint_url=endpoint_url,
            config=build_client_config(settings),
        )
    except Exception as exc:
        raise ClientConstructionError(f"Cannot create Lambda client: {exc}") from exc


@contextmanager
def lambda_client(settings: SamplerSettings) -> Iterator[Any]:
    """Yield a configured Lambda client and close it afterwards."""

    client = create_lambda_client(settings)
    try:
        yield client
    finally:
        client.close()
