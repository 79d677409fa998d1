"""Configuration management for the Lambda sampler."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import AliasChoices, AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_REPO_ROOT = Path(__file__).resolve().parents[2]
_PACKAGE_DIR = Path(__file__).resolve().parents[1]
# Repo-root .env first, then the package directory and the working directory
_ENV_FILE_CANDIDATES: tuple[str, ...] = (
    str(_REPO_ROOT / ".env"),
    str(_PACKAGE_DIR / ".env"),
    ".env",
)


class SamplerSettings(BaseSettings):
    """Centralised configuration derived from environment variables."""

    app_env: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: str | None = Field(
        None,
        description="Log file path; None or empty string keeps output on stdout only",
    )

    sampler_host: str = Field("0.0.0.0", description="FastAPI bind host")
    sampler_port: int = Field(8002, description="FastAPI bind port")

    sample_label: str = Field("AWS Lambda Sampler", description="Default sample label")
    lambda_function_name: str = Field(
        "",
        description="Name, ARN or partial ARN of the function to invoke",
        validation_alias=AliasChoices("LAMBDA_FUNCTION_NAME", "LAMBDA_NAME"),
    )
    lambda_payload: str = Field("", description="Request payload sent verbatim")
    lambda_qualifier: str | None = Field(None, description="Version or alias to invoke")

    aws_region: str = Field(
        "ap-southeast-2",
        validation_alias=AliasChoices("AWS_REGION", "AWS_DEFAULT_REGION"),
    )
    aws_profile: str | None = None
    aws_endpoint_url: AnyHttpUrl | None = Field(
        None, description="Override endpoint, e.g. a local Lambda emulator"
    )

    invoke_connect_timeout: float = Field(10.0, gt=0)
    invoke_read_timeout: float = Field(
        900.0, gt=0, description="Matches the maximum Lambda execution time"
    )
    invoke_max_attempts: int = Field(1, ge=1, description="botocore total_max_attempts")
    max_pool_connections: int = Field(50, ge=1)
    reuse_client: bool = Field(
        True, description="Share one client across calls instead of building one per call"
    )
    response_encoding: str = "utf-8"

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE_CANDIDATES,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> SamplerSettings:
    """Return a cached SamplerSettings instance."""

    return SamplerSettings()


def resolved_env_file() -> str | None:
    """Return the first readable .env file from the candidate list."""

    for candidate in _ENV_FILE_CANDIDATES:
        path = Path(candidate).expanduser()
        if path.is_file():
            return str(path)
    return None


def env_file_candidates() -> tuple[str, ...]:
    """Expose configured env file search order for diagnostics."""

    return _ENV_FILE_CANDIDATES
