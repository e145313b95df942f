"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    patterns: list[str] = Field(default_factory=list)


class GenerateResponse(BaseModel):
    svg: str
    bytes: int = 0
    pattern: str = ""
    meta: dict[str, Any] = Field(default_factory=dict)
    processing_time_ms: float = 0.0
