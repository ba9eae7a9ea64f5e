"""
Upsampling operations for PyMisrHR.

Expands MISR 1.1 km grids (512 x 128 pixels per block) onto the 275 m grid
(2048 x 512) by nearest-neighbour replication: every source cell fills a 4x4
block of the target unchanged. No interpolation is done, so upsampled grids
can be compared pixel-by-pixel with true 275 m products without inventing
information. Upsampling a downsampled grid is not an identity: variation
inside each 4x4 window of the original 275 m grid is lost.

Author: B.G.
"""

import taichi as ti

from .. import constants as cte
from ._grid import as_numpy_grid, check_shape, run_on_fields


@ti.kernel
def replicate_kernel(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    factor: ti.i32,
):
    """
    Replicate each source cell into a factor x factor block of the target.

    Args:
        source_field: Original field (nx * ny elements)
        target_field: Output field ((nx*factor) * (ny*factor) elements)
        nx: Number of columns in original grid
        ny: Number of rows in original grid
        factor: Replication factor along each axis
    """
    target_nx = nx * factor

    for target_idx in target_field:
        target_j = target_idx // target_nx
        target_i = target_idx % target_nx

        source_idx = (target_j // factor) * nx + target_i // factor
        target_field[target_idx] = source_field[source_idx]


def upsample_block(grid_data, factor: int = cte.RESAMPLING_FACTOR, return_field: bool = False):
    """
    Replicate every cell of a 2D grid into a factor x factor block.

    Shape-generic variant of ``upsample``: any non-empty 2D grid is accepted.

    Args:
        grid_data: Input grid (numpy array or Taichi field), shape (ny, nx)
        factor: Replication factor along each axis (default: 4)
        return_field: If True, return the flat Taichi field instead of a numpy array

    Returns:
        numpy.ndarray or taichi.Field: Grid of shape (ny*factor, nx*factor),
        same dtype as the input

    Raises:
        InvalidArgument: If grid_data is not a numeric array/field
        ShapeMismatch: If grid_data is not 2D or is empty
        ValueError: If factor is not a positive integer
    """
    data = as_numpy_grid(grid_data)
    if data.ndim != 2 or data.size == 0:
        raise ShapeMismatch(("ny", "nx"), data.shape)
    if int(factor) != factor or factor < 1:
        raise ValueError(f"factor must be a positive integer, got {factor}")
    factor = int(factor)

    ny, nx = data.shape
    target_ny = ny * factor
    target_nx = nx * factor

    return run_on_fields(
        data, (target_ny, target_nx), return_field, replicate_kernel, nx, ny, factor
    )


def upsample(grid_data, return_field: bool = False):
    """
    Upsample a 1.1 km MISR block grid to the 275 m grid.

    Output cell (4*j + dj, 4*i + di) equals input cell (j, i) for all
    dj, di in [0, 3].

    Args:
        grid_data: Low-resolution grid, numpy array or Taichi field of shape
                   (128, 512) (rows, columns) and any integer or float dtype
        return_field: If True, return the flat Taichi field instead of a numpy array

    Returns:
        numpy.ndarray or taichi.Field: High-resolution grid of shape
        (512, 2048) with the input dtype

    Raises:
        InvalidArgument: If grid_data is not numeric
        ShapeMismatch: If grid_data is not of shape (128, 512)

    Example:
        hr_mask = upsample(lr_mask)
    """
    data = as_numpy_grid(grid_data)
    check_shape(data, cte.LR_SHAPE)
    return upsample_block(data, cte.RESAMPLING_FACTOR, return_field=return_field)


lr2hr = upsample
