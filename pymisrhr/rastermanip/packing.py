"""
Scaled radiance / RDQI bit packing.

MISR L1B2 radiances are stored as unsigned 16-bit integers whose two low bits
hold the Radiometric Data Quality Indicator. The helpers below split and join
that representation on Python ints and numpy arrays; the ``ti.func`` variants
do the same inside kernels.

Author: B.G.
"""

import numpy as np
import taichi as ti

from .. import constants as cte


def unpack_scaled_radiance(value):
    """
    Split packed values into (scaled radiance, RDQI).

    Args:
        value: int or integer numpy array of packed values

    Returns:
        tuple: (radiance, flag) where radiance = value >> 2 and
               flag = value - (radiance << 2)
    """
    if isinstance(value, np.ndarray):
        if not np.issubdtype(value.dtype, np.integer):
            raise TypeError("Packed scaled radiances must be integers")
        radiance = value >> cte.RDQI_BITS
        flag = value - (radiance << cte.RDQI_BITS)
        return radiance, flag
    value = int(value)
    radiance = value >> cte.RDQI_BITS
    return radiance, value - (radiance << cte.RDQI_BITS)


def pack_scaled_radiance(radiance, flag):
    """Join a scaled radiance and its RDQI back into one packed value."""
    if isinstance(radiance, np.ndarray) or isinstance(flag, np.ndarray):
        return (np.asarray(radiance) << cte.RDQI_BITS) + np.asarray(flag)
    flag = int(flag)
    if not cte.RDQI_MIN <= flag <= cte.RDQI_MAX:
        raise ValueError(f"RDQI must be in [{cte.RDQI_MIN}, {cte.RDQI_MAX}], got {flag}")
    return (int(radiance) << cte.RDQI_BITS) + flag


def is_usable_scaled_radiance(value):
    """True where 0 < value <= 65506 (sentinel codes sit above that)."""
    if isinstance(value, np.ndarray):
        return (value > 0) & (value <= cte.SCALED_RADIANCE_MAX_USABLE)
    return 0 < value <= cte.SCALED_RADIANCE_MAX_USABLE


@ti.func
def unpack_radiance_ti(value: ti.i32) -> ti.i32:
    return value >> cte.RDQI_BITS


@ti.func
def unpack_flag_ti(value: ti.i32) -> ti.i32:
    return value - ((value >> cte.RDQI_BITS) << cte.RDQI_BITS)


@ti.func
def pack_ti(radiance: ti.i32, flag: ti.i32) -> ti.i32:
    return (radiance << cte.RDQI_BITS) + flag
