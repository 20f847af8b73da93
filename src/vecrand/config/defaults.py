"""Default configuration values for vecrand."""

from __future__ import annotations

from vecrand.config.schema import CheckConfig, DrawConfig, RunConfig, SamplerConfig


def default_sampler_config() -> SamplerConfig:
    """Entropy-seeded sampler for worker 0."""
    return SamplerConfig()


def default_draw_config() -> DrawConfig:
    return DrawConfig()


def default_check_config() -> CheckConfig:
    """100k unit vectors over 4 workers, with the tolerances of the moment tests."""
    return CheckConfig()


def default_run_config() -> RunConfig:
    return RunConfig(
        sampler=default_sampler_config(),
        draw=default_draw_config(),
        check=default_check_config(),
    )
