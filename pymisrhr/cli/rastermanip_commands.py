"""CLI commands for MISR grid resampling using PyMisrHR's rastermanip utilities."""

import sys

import click
import numpy as np

import pymisrhr as pmh

from ._taichi import init_taichi

_KIND_CHOICES = [kind.value for kind in pmh.rastermanip.GridKind]

arch_option = click.option(
    "--arch",
    type=click.Choice(["cpu", "gpu"]),
    default="cpu",
    show_default=True,
    help="Taichi backend (gpu falls back to cpu when unavailable)",
)


@click.command()
@click.argument("input_npy", type=click.Path(exists=True))
@click.argument("output_npy", type=click.Path())
@arch_option
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def grid_upsample(input_npy, output_npy, arch, verbose):
    """Replicate the 1.1 km grid in INPUT_NPY onto the 275 m grid and save to OUTPUT_NPY."""
    try:
        init_taichi(arch)
        grid = np.load(input_npy)
        if verbose:
            click.echo(
                f"Upsampling '{input_npy}' {grid.shape} {grid.dtype} -> '{output_npy}'"
            )
        result = pmh.rastermanip.upsample(grid)
        np.save(output_npy, result)
        if verbose:
            click.echo(f"Upsampling completed successfully! Output shape: {result.shape}")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_npy", type=click.Path(exists=True))
@click.argument("output_npy", type=click.Path())
@click.option(
    "--kind",
    "-k",
    type=click.Choice(_KIND_CHOICES, case_sensitive=False),
    required=True,
    help="Grid kind, selects the aggregation rule",
)
@arch_option
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def grid_downsample(input_npy, output_npy, kind, arch, verbose):
    """Aggregate the 275 m grid in INPUT_NPY onto the 1.1 km grid and save to OUTPUT_NPY."""
    try:
        init_taichi(arch)
        grid = np.load(input_npy)
        if verbose:
            click.echo(
                f"Downsampling '{input_npy}' {grid.shape} {grid.dtype} -> '{output_npy}' as {kind}"
            )
        result = pmh.rastermanip.downsample(grid, kind)
        np.save(output_npy, result)
        if verbose:
            click.echo(f"Downsampling completed successfully! Output shape: {result.shape}")
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["grid_upsample", "grid_downsample"]
