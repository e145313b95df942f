"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from topfill.config import settings
from topfill.engine.config import GenerationConfig


class GenerateRequest(BaseModel):
    document: str | dict[str, Any] | list[Any] = Field(
        ...,
        description="Path data: a raw d string, {path|d}, {paths: [...]}, or a list of paths",
    )
    name: str = Field(default="top", description="Used for the pattern id (pat_<name>)")
    seed: int | None = Field(default=None, description="RNG seed; omit for a non-reproducible run")
    canvas: int = Field(default=settings.default_canvas, gt=0)
    decimals: int = Field(default=settings.default_decimals, ge=0, le=6)
    minify: bool = settings.default_minify

    # bars
    colors: int | None = Field(default=None, description="Palette size; only 3, 6 or 9 are honoured")
    angle: float | None = Field(default=None, allow_inf_nan=False, description="Stripe angle in degrees")
    density: float = Field(
        default=settings.default_density, allow_inf_nan=False, description="Clamped to [0.6, 3.0]"
    )

    # faces
    faces: int = Field(default=settings.default_faces, ge=0, le=500)
    ascii_only: bool = True
    fill: str | None = Field(default=None, description="Background colour override")

    def to_config(self) -> GenerationConfig:
        return GenerationConfig(
            canvas=self.canvas,
            decimals=self.decimals,
            minify=self.minify,
            seed=self.seed,
            colors=self.colors,
            angle=self.angle,
            density=self.density,
            faces=self.faces,
            ascii_only=self.ascii_only,
            fill=self.fill,
        )
