"""
Input handling and field round-trips shared by the resampling wrappers.

Author: B.G.
"""

import threading

import numpy as np

from .. import constants as cte
from .. import pool
from ..errors import InvalidArgument, ShapeMismatch

# The Taichi runtime is not thread-safe: one upload/launch/readback at a time
_launch_lock = threading.Lock()


def as_numpy_grid(grid_data):
    """
    Return grid_data as a numpy array, without copying numpy input.

    Accepts numpy arrays and Taichi fields (anything with ``to_numpy``).

    Raises:
        InvalidArgument: If grid_data is neither, or its dtype is not a
                         supported integer/floating type
    """
    if isinstance(grid_data, np.ndarray):
        data = grid_data
    elif hasattr(grid_data, "to_numpy") and hasattr(grid_data, "shape"):
        data = grid_data.to_numpy()
    else:
        raise InvalidArgument(
            f"grid_data must be a numpy array or Taichi field, got {type(grid_data).__name__}"
        )

    if data.dtype not in cte.NP_TO_TI_DTYPE:
        raise InvalidArgument(f"grid_data must be numeric, got dtype {data.dtype}")
    return data


def check_shape(data, expected):
    if data.shape != tuple(expected):
        raise ShapeMismatch(expected, data.shape)


def temp_like(data, size):
    """Borrow a pooled flat field with the dtype of data."""
    return pool.get_temp_field(cte.NP_TO_TI_DTYPE[data.dtype], (size,))


def run_on_fields(data, target_shape, return_field, kernel, *args):
    """
    Run ``kernel(source, target, *args)`` on pooled copies of a grid.

    data is uploaded to a flat source field, the kernel fills a flat target
    field of the same dtype, and the target is read back with target_shape.
    Calls from several threads are serialized. Pooled fields go back to the
    pool even when the kernel raises.

    Args:
        data: numpy grid from as_numpy_grid
        target_shape: (rows, columns) of the result
        return_field: If True, hand the flat target field to the caller
        kernel: Taichi kernel taking (source_field, target_field, *args)

    Returns:
        numpy.ndarray of target_shape, or the flat target field
    """
    target_size = int(np.prod(target_shape))
    with _launch_lock:
        source = temp_like(data, data.size)
        target = temp_like(data, target_size)
        keep_target = False
        try:
            source.field.from_numpy(np.ascontiguousarray(data).reshape(-1))
            kernel(source.field, target.field, *args)
            if return_field:
                keep_target = True
                return target.field
            return target.field.to_numpy().reshape(target_shape)
        finally:
            source.release()
            if not keep_target:
                target.release()
