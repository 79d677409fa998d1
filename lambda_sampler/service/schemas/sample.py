"""Pydantic schemas for sample endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from ...core.types import SampleResult


class SampleRequest(BaseModel):
    function_name: str | None = Field(None, description="Overrides the configured function")
    payload: str | None = Field(None, description="Overrides the configured payload")
    qualifier: str | None = None
    label: str | None = None


class SampleResponse(BaseModel):
    label: str
    timestamp: datetime
    start_time: float
    end_time: float
    elapsed_ms: float
    request_payload: str
    response_body: str
    response_code: str
    response_message: str
    success: bool
    data_type: str = "text"

    @classmethod
    def from_result(cls, result: SampleResult) -> SampleResponse:
        return cls(**result.to_dict())
