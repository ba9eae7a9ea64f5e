"""
Downsampling operations for PyMisrHR.

Reduces MISR 275 m grids (2048 x 512 pixels per block) to the 1.1 km grid
(512 x 128). Each 4x4 window of the source becomes one target cell, using an
aggregation rule chosen by the grid kind:

- RDQI: maximum (quality propagates pessimistically)
- Mask: majority vote over land/water/cloud, ties to the larger code, unless
  obscured/edge sentinels are at least as numerous as usable codes
- ScaledRadianceWithFlag: rounded mean of the unpacked radiances, re-packed
  with the worst RDQI; max raw value when nothing is usable
- Radiance / ReflectanceFactor: mean of values in ]0, max]; 0.0 when nothing
  is usable

Degenerate windows always produce a value, never an error.

Author: B.G.
"""

import taichi as ti

from .. import constants as cte
from ..errors import InvalidArgument, ShapeMismatch, TypeKindMismatch
from ._grid import as_numpy_grid, check_shape, run_on_fields
from .kinds import GridKind
from .packing import pack_ti, unpack_flag_ti, unpack_radiance_ti


@ti.kernel
def downsample_kernel_rdqi(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    factor: ti.i32,
):
    """
    Downsample an RDQI grid: each window becomes its maximum value.

    Args:
        source_field: Original field (nx * ny elements)
        target_field: Output field ((nx/factor) * (ny/factor) elements)
        nx: Number of columns in original grid
        ny: Number of rows in original grid
        factor: Window size along each axis
    """
    target_nx = nx // factor

    for target_idx in target_field:
        source_base_j = (target_idx // target_nx) * factor
        source_base_i = (target_idx % target_nx) * factor

        max_val = 0
        for sub_j in range(factor):
            for sub_i in range(factor):
                source_idx = (source_base_j + sub_j) * nx + source_base_i + sub_i
                max_val = ti.max(max_val, ti.cast(source_field[source_idx], ti.i32))

        target_field[target_idx] = ti.cast(max_val, ti.u8)


@ti.kernel
def downsample_kernel_mask(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    factor: ti.i32,
):
    """
    Downsample a land/water/cloud mask by majority vote.

    If obscured (253) and edge (254) codes together are at least as frequent
    as land/water/cloud codes, the more frequent sentinel wins (ties to
    edge). Otherwise the most frequent of land (1), water (2) and cloud (3)
    wins, ties to the larger code. Any other code is not counted.

    Args:
        source_field: Original field (nx * ny elements)
        target_field: Output field ((nx/factor) * (ny/factor) elements)
        nx: Number of columns in original grid
        ny: Number of rows in original grid
        factor: Window size along each axis
    """
    target_nx = nx // factor

    for target_idx in target_field:
        source_base_j = (target_idx // target_nx) * factor
        source_base_i = (target_idx % target_nx) * factor

        n_land = 0
        n_water = 0
        n_cloud = 0
        n_obscured = 0
        n_edge = 0
        for sub_j in range(factor):
            for sub_i in range(factor):
                source_idx = (source_base_j + sub_j) * nx + source_base_i + sub_i
                val = ti.cast(source_field[source_idx], ti.i32)
                if val == cte.LAND:
                    n_land += 1
                elif val == cte.WATER:
                    n_water += 1
                elif val == cte.CLOUD:
                    n_cloud += 1
                elif val == cte.MASK_OBSCURED:
                    n_obscured += 1
                elif val == cte.MASK_EDGE:
                    n_edge += 1

        result = cte.MASK_EDGE
        if n_obscured + n_edge >= n_land + n_water + n_cloud:
            if n_obscured > n_edge:
                result = cte.MASK_OBSCURED
        else:
            # ">=" hands ties to the larger code
            result = cte.LAND
            best = n_land
            if n_water >= best:
                result = cte.WATER
                best = n_water
            if n_cloud >= best:
                result = cte.CLOUD

        target_field[target_idx] = ti.cast(result, ti.u8)


@ti.kernel
def downsample_kernel_scaled_radiance(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    factor: ti.i32,
):
    """
    Downsample packed scaled radiances carrying an RDQI in their 2 low bits.

    Usable values (0 < v <= 65506) are unpacked; the output radiance is the
    mean of the radiances rounded half away from zero and the output RDQI the
    largest RDQI seen. Windows with no usable value keep their largest raw
    value, which preserves the sentinel code.

    Args:
        source_field: Original field (nx * ny elements)
        target_field: Output field ((nx/factor) * (ny/factor) elements)
        nx: Number of columns in original grid
        ny: Number of rows in original grid
        factor: Window size along each axis
    """
    target_nx = nx // factor

    for target_idx in target_field:
        source_base_j = (target_idx // target_nx) * factor
        source_base_i = (target_idx % target_nx) * factor

        n_usable = 0
        radiance_sum = 0
        flag_max = 0
        raw_max = 0
        for sub_j in range(factor):
            for sub_i in range(factor):
                source_idx = (source_base_j + sub_j) * nx + source_base_i + sub_i
                val = ti.cast(source_field[source_idx], ti.i32)
                raw_max = ti.max(raw_max, val)
                if val > 0 and val <= cte.SCALED_RADIANCE_MAX_USABLE:
                    n_usable += 1
                    radiance_sum += unpack_radiance_ti(val)
                    flag_max = ti.max(flag_max, unpack_flag_ti(val))

        result = raw_max
        if n_usable > 0:
            mean = ti.cast(radiance_sum, ti.f64) / ti.cast(n_usable, ti.f64)
            radiance = ti.cast(ti.floor(mean + 0.5), ti.i32)
            result = pack_ti(radiance, flag_max)

        target_field[target_idx] = ti.cast(result, ti.u16)


@ti.kernel
def downsample_kernel_bounded_mean(
    source_field: ti.template(),
    target_field: ti.template(),
    nx: ti.i32,
    ny: ti.i32,
    factor: ti.i32,
    upper: ti.f64,
):
    """
    Downsample a physical quantity by the mean of its usable values.

    A value is usable when 0 < v <= upper. Windows without a
    usable value become 0.0.

    Args:
        source_field: Original field (nx * ny elements)
        target_field: Output field ((nx/factor) * (ny/factor) elements)
        nx: Number of columns in original grid
        ny: Number of rows in original grid
        factor: Window size along each axis
        upper: Inclusive upper bound of usable values
    """
    target_nx = nx // factor

    for target_idx in target_field:
        source_base_j = (target_idx // target_nx) * factor
        source_base_i = (target_idx % target_nx) * factor

        n_usable = 0
        sum_val = ti.cast(0.0, ti.f64)
        for sub_j in range(factor):
            for sub_i in range(factor):
                source_idx = (source_base_j + sub_j) * nx + source_base_i + sub_i
                val = ti.cast(source_field[source_idx], ti.f64)
                if val > 0.0 and val <= upper:
                    n_usable += 1
                    sum_val += val

        result = ti.cast(cte.FLOAT_FILL, ti.f64)
        if n_usable > 0:
            result = sum_val / ti.cast(n_usable, ti.f64)

        target_field[target_idx] = ti.cast(result, target_field.dtype)


def _run_rdqi(source, target, nx, ny, factor):
    downsample_kernel_rdqi(source, target, nx, ny, factor)


def _run_mask(source, target, nx, ny, factor):
    downsample_kernel_mask(source, target, nx, ny, factor)


def _run_scaled_radiance(source, target, nx, ny, factor):
    downsample_kernel_scaled_radiance(source, target, nx, ny, factor)


def _run_radiance(source, target, nx, ny, factor):
    _, upper = GridKind.RADIANCE.usable_range
    downsample_kernel_bounded_mean(source, target, nx, ny, factor, upper)


def _run_reflectance(source, target, nx, ny, factor):
    _, upper = GridKind.REFLECTANCE_FACTOR.usable_range
    downsample_kernel_bounded_mean(source, target, nx, ny, factor, upper)


# One aggregation rule per kind
_KIND_RUNNERS = {
    GridKind.RDQI: _run_rdqi,
    GridKind.MASK: _run_mask,
    GridKind.SCALED_RADIANCE_WITH_FLAG: _run_scaled_radiance,
    GridKind.RADIANCE: _run_radiance,
    GridKind.REFLECTANCE_FACTOR: _run_reflectance,
}

_SUPPORTED_DTYPES = tuple(
    sorted({dt for kind in GridKind for dt in kind.dtypes}, key=str)
)


def _validate(grid_data, kind):
    """Run every precondition check in order; return (data, kind)."""
    data = as_numpy_grid(grid_data)
    if data.dtype not in _SUPPORTED_DTYPES:
        names = ", ".join(str(d) for d in _SUPPORTED_DTYPES)
        raise InvalidArgument(f"grid_data dtype must be one of ({names}), got {data.dtype}")

    kind = GridKind.coerce(kind)
    if not kind.accepts(data.dtype):
        raise TypeKindMismatch(kind, data.dtype, kind.dtypes)
    return data, kind


def downsample_block(
    grid_data,
    kind,
    factor: int = cte.RESAMPLING_FACTOR,
    return_field: bool = False,
):
    """
    Aggregate every factor x factor window of a 2D grid into one cell.

    Shape-generic variant of ``downsample``: any 2D grid whose dimensions are
    non-zero multiples of factor is accepted.

    Args:
        grid_data: Input grid (numpy array or Taichi field), shape (ny, nx)
        kind: GridKind or kind name selecting the aggregation rule
        factor: Window size along each axis (default: 4)
        return_field: If True, return the flat Taichi field instead of a numpy array

    Returns:
        numpy.ndarray or taichi.Field: Grid of shape (ny//factor, nx//factor),
        same dtype as the input

    Raises:
        InvalidArgument: If grid_data is not an array of a supported dtype
        UnrecognizedKind: If kind is not a known grid kind
        TypeKindMismatch: If kind does not accept the grid dtype
        ShapeMismatch: If grid_data is not 2D or not divisible by factor
        ValueError: If factor is not a positive integer
    """
    data, kind = _validate(grid_data, kind)
    if int(factor) != factor or factor < 1:
        raise ValueError(f"factor must be a positive integer, got {factor}")
    factor = int(factor)
    if data.ndim != 2 or data.size == 0 or data.shape[0] % factor or data.shape[1] % factor:
        raise ShapeMismatch((f"k*{factor}", f"k*{factor}"), data.shape)

    return _downsample(data, kind, factor, return_field)


def _downsample(data, kind, factor, return_field):
    ny, nx = data.shape
    target_ny = ny // factor
    target_nx = nx // factor

    return run_on_fields(
        data, (target_ny, target_nx), return_field, _KIND_RUNNERS[kind], nx, ny, factor
    )


def downsample(grid_data, kind, return_field: bool = False):
    """
    Downsample a 275 m MISR block grid to the 1.1 km grid.

    Output cell (j, i) is computed from the 4x4 window at (4*j, 4*i) with the
    aggregation rule of ``kind``.

    Args:
        grid_data: High-resolution grid, numpy array or Taichi field of shape
                   (512, 2048) (rows, columns). uint8 for RDQI and Mask,
                   uint16 for ScaledRadianceWithFlag, float32/float64 for
                   Radiance and ReflectanceFactor
        kind: GridKind or kind name ('RDQI', 'Mask', 'ScaledRadianceWithFlag',
              'Radiance', 'ReflectanceFactor', 'BRF', ...)
        return_field: If True, return the flat Taichi field instead of a numpy array

    Returns:
        numpy.ndarray or taichi.Field: Low-resolution grid of shape (128, 512)
        with the input dtype

    Raises:
        InvalidArgument: If grid_data is not an array of a supported dtype
        UnrecognizedKind: If kind is not a known grid kind
        TypeKindMismatch: If kind does not accept the grid dtype
        ShapeMismatch: If grid_data is not of shape (512, 2048)

    Example:
        # Land/water/cloud mask at 1.1 km
        lr_mask = downsample(hr_mask, "Mask")

        # Packed L1B2 radiances, keeping the worst RDQI of each window
        lr_rad = downsample(hr_rad, GridKind.SCALED_RADIANCE_WITH_FLAG)
    """
    data, kind = _validate(grid_data, kind)
    check_shape(data, cte.HR_SHAPE)
    return _downsample(data, kind, cte.RESAMPLING_FACTOR, return_field)


hr2lr = downsample
