"""
Constants for PyMisrHR.

Grid geometry, MISR fill/sentinel codes and value ranges shared by the
resampling kernels and the identifier helpers. Imported as ``cte`` across the
package.

Author: B.G.
"""

import numpy as np
import taichi as ti

# Block grid geometry. Arrays are (ny, nx) = (rows, columns).
HR_NX = 2048
HR_NY = 512
LR_NX = 512
LR_NY = 128
RESAMPLING_FACTOR = 4

HR_SHAPE = (HR_NY, HR_NX)
LR_SHAPE = (LR_NY, LR_NX)

# Radiometric Data Quality Indicator
RDQI_MIN = 0
RDQI_MAX = 3
RDQI_BITS = 2

# Land/water/cloud mask codes
LAND = 1
WATER = 2
CLOUD = 3
MASK_OBSCURED = 253
MASK_EDGE = 254

# Scaled radiance with the RDQI packed in the 2 low bits
SCALED_RADIANCE_MAX_USABLE = 65506
SCALED_RADIANCE_OBSCURED = 65511
SCALED_RADIANCE_EDGE = 65515
SCALED_RADIANCE_BAD = 65523

# Physical quantities, usable range is ]0, MAX]
RADIANCE_MAX = 800.0
BRF_MAX = 2.0
FLOAT_FILL = 0.0

# numpy dtype -> Taichi dtype for field allocation
NP_TO_TI_DTYPE = {
    np.dtype(np.int8): ti.i8,
    np.dtype(np.int16): ti.i16,
    np.dtype(np.int32): ti.i32,
    np.dtype(np.int64): ti.i64,
    np.dtype(np.uint8): ti.u8,
    np.dtype(np.uint16): ti.u16,
    np.dtype(np.uint32): ti.u32,
    np.dtype(np.uint64): ti.u64,
    np.dtype(np.float16): ti.f16,
    np.dtype(np.float32): ti.f32,
    np.dtype(np.float64): ti.f64,
}
