"""Pydantic v2 configuration models for vecrand."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

_UINT64_LIMIT = 1 << 64

SampleKind = Literal[
    "uniform",
    "range",
    "uniform3",
    "unit-vector",
    "disc",
    "disc-angle",
    "int",
    "uint64",
]


class SamplerConfig(BaseModel):
    """How to seed a sampler."""

    model_config = ConfigDict(extra="forbid")

    seed: int = Field(
        default=0,
        ge=0,
        lt=_UINT64_LIMIT,
        description="Shared logical seed; 0 seeds from entropy",
    )
    index: int = Field(default=0, ge=0, lt=_UINT64_LIMIT, description="Worker index")


class DrawConfig(BaseModel):
    """What to draw for the ``draw`` command."""

    model_config = ConfigDict(extra="forbid")

    kind: SampleKind = "uniform"
    count: int = Field(default=10, ge=1, le=10_000_000)
    radius: float = Field(default=1.0, ge=0, description="Disc radius")
    start: float = Field(default=0.0, description="Range start (inclusive)")
    end: float = Field(default=1.0, description="Range end (exclusive)")
    n: int = Field(default=10, gt=0, description="Upper bound for integer draws")

    @model_validator(mode="after")
    def _validate_range(self) -> DrawConfig:
        if self.end < self.start:
            raise ValueError("end must not be less than start")
        return self


class CheckConfig(BaseModel):
    """Parameters of the unit-sphere uniformity check."""

    model_config = ConfigDict(extra="forbid")

    samples: int = Field(default=100_000, ge=1, le=100_000_000)
    workers: int = Field(default=4, ge=1, le=1024)
    seed: int = Field(default=0, ge=0, lt=_UINT64_LIMIT)
    mean_tolerance: float = Field(default=0.015, gt=0)
    variance_tolerance: float = Field(default=0.01, gt=0)
    octant_tolerance: float = Field(default=0.15, gt=0, le=1)


class RunConfig(BaseModel):
    """Top-level YAML run configuration."""

    model_config = ConfigDict(extra="forbid")

    sampler: SamplerConfig = Field(default_factory=SamplerConfig)
    draw: DrawConfig = Field(default_factory=DrawConfig)
    check: CheckConfig = Field(default_factory=CheckConfig)
