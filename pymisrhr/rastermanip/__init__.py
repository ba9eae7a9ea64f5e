"""Raster manipulation module for PyMisrHR.

Provides GPU-accelerated resampling between the MISR 275 m block grid
(2048 x 512) and the 1.1 km block grid (512 x 128). Upsampling replicates
pixels; downsampling aggregates 4x4 windows with a rule chosen by the grid
kind. All functions accept NumPy arrays or Taichi fields and return NumPy
arrays by default.

Author: B.G.
"""

from .kinds import GridKind
from .packing import (
    pack_scaled_radiance,
    unpack_scaled_radiance,
    is_usable_scaled_radiance,
)
from .upscaling import upsample, upsample_block, replicate_kernel, lr2hr
from .downscaling import (
    downsample,
    downsample_block,
    downsample_kernel_rdqi,
    downsample_kernel_mask,
    downsample_kernel_scaled_radiance,
    downsample_kernel_bounded_mean,
    hr2lr,
)

__all__ = [
    "GridKind",
    "pack_scaled_radiance",
    "unpack_scaled_radiance",
    "is_usable_scaled_radiance",
    "upsample",
    "upsample_block",
    "replicate_kernel",
    "lr2hr",
    "downsample",
    "downsample_block",
    "downsample_kernel_rdqi",
    "downsample_kernel_mask",
    "downsample_kernel_scaled_radiance",
    "downsample_kernel_bounded_mean",
    "hr2lr",
]
