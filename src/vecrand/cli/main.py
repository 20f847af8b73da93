"""CLI entry point for vecrand."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, get_args

import click
from pydantic import ValidationError

from vecrand.analytics.check import assert_uniform_sphere, run_sphere_check
from vecrand.config.defaults import default_run_config
from vecrand.config.schema import CheckConfig, DrawConfig, RunConfig, SampleKind
from vecrand.core.sampler import Sampler
from vecrand.io.yaml_loader import load_run_config
from vecrand.utils.exceptions import ConfigError, SamplingError

KINDS = list(get_args(SampleKind))


def _load(config_path: Path | None) -> RunConfig:
    if config_path is None:
        return default_run_config()
    try:
        return load_run_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e


def _override(model: Any, **updates: Any) -> Any:
    """Re-validate ``model`` with the options actually given on the command line."""
    data = model.model_dump()
    data.update({k: v for k, v in updates.items() if v is not None})
    try:
        return type(model).model_validate(data)
    except ValidationError as e:
        raise click.UsageError(str(e)) from e


def _format(value: Any) -> str:
    if isinstance(value, tuple):
        return " ".join(repr(float(v)) for v in value)
    return repr(value)


def _draw_one(sampler: Sampler, draw: DrawConfig) -> Any:
    if draw.kind == "uniform":
        return sampler.uniform_float()
    if draw.kind == "range":
        return sampler.uniform_range(draw.start, draw.end)
    if draw.kind == "uniform3":
        return sampler.uniform3()
    if draw.kind == "unit-vector":
        return sampler.unit_vector3()
    if draw.kind == "disc":
        return sampler.in_disc(draw.radius)
    if draw.kind == "disc-angle":
        return sampler.in_disc_angle(draw.radius)
    if draw.kind == "int":
        return sampler.bounded_int(draw.n)
    return sampler.raw_uint64()


@click.group()
@click.version_option(package_name="vecrand")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """vecrand: per-worker random sampling for simulations and ray tracing."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command()
@click.argument("kind", type=click.Choice(KINDS), required=False)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to YAML run config. Uses defaults if not provided.",
)
@click.option("--count", default=None, type=int, help="Number of samples.")
@click.option("--seed", default=None, type=int, help="Seed (0 = from entropy).")
@click.option("--index", default=None, type=int, help="Worker index.")
@click.option("--radius", default=None, type=float, help="Disc radius.")
@click.option("--start", default=None, type=float, help="Range start.")
@click.option("--end", default=None, type=float, help="Range end.")
@click.option("--n", "bound", default=None, type=int, help="Upper bound for 'int'.")
def draw(
    kind: str | None,
    config_path: Path | None,
    count: int | None,
    seed: int | None,
    index: int | None,
    radius: float | None,
    start: float | None,
    end: float | None,
    bound: int | None,
) -> None:
    """Print samples of KIND, one per line."""
    run_config = _load(config_path)
    sampler_config = _override(run_config.sampler, seed=seed, index=index)
    draw_config = _override(
        run_config.draw,
        kind=kind,
        count=count,
        radius=radius,
        start=start,
        end=end,
        n=bound,
    )

    sampler = Sampler.create_indexed(sampler_config.index, sampler_config.seed)
    pair = sampler.seed_pair
    click.echo(f"# {draw_config.kind} x{draw_config.count}, seed pair ({pair.seed1}, {pair.seed2})")
    for _ in range(draw_config.count):
        click.echo(_format(_draw_one(sampler, draw_config)))


@cli.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to YAML run config. Uses defaults if not provided.",
)
@click.option("--samples", default=None, type=int, help="Number of unit vectors.")
@click.option("--seed", default=None, type=int, help="Seed (0 = from entropy).")
@click.option("--workers", default=None, type=int, help="Number of per-worker samplers.")
def check(
    config_path: Path | None,
    samples: int | None,
    seed: int | None,
    workers: int | None,
) -> None:
    """Check that unit vectors are uniform over the sphere."""
    run_config = _load(config_path)
    check_config: CheckConfig = _override(
        run_config.check, samples=samples, seed=seed, workers=workers
    )

    click.echo(
        f"Checking {check_config.samples} unit vectors on {check_config.workers} workers, "
        f"seed={check_config.seed}"
    )
    moments = run_sphere_check(check_config)

    click.echo("Mean: " + " ".join(f"{m:+.6f}" for m in moments.mean))
    click.echo("Variance: " + " ".join(f"{v:.6f}" for v in moments.variance))
    click.echo("Octants: " + " ".join(str(c) for c in moments.octant_counts))
    click.echo(f"Max length error: {moments.max_length_error:.3e}")

    try:
        assert_uniform_sphere(moments, check_config)
    except SamplingError as e:
        raise click.ClickException(f"Distribution check failed: {e}") from e
    click.echo("OK")


if __name__ == "__main__":
    cli()
