"""
PyMisrHR: utilities for the MISR-HR processing system.

Provides GPU-accelerated resampling between the MISR 1.1 km and 275 m pixel
grids (Taichi kernels), together with MISR identifier checks, static
instrument metadata and product filename parsing.

Submodules:
- rastermanip: upsample (lr2hr) and downsample (hr2lr) of MISR block grids
- identifiers: PATH/ORBIT/BLOCK/CAMERA/BAND/MODE/field checks and converters
- instrument: camera, band and channel tables
- filenames: metadata extraction from product filenames
- cli: command line tools
- pool: reusable temporary Taichi fields for the kernels

Example:
    import taichi as ti
    import pymisrhr as pmh

    ti.init(arch=ti.cpu)
    lr = pmh.rastermanip.downsample(hr_radiance, "Radiance")
    hr = pmh.rastermanip.upsample(lr)

Author: B.G.
"""

__version__ = "0.1.0"

from . import constants
from . import errors
from . import pool
from . import rastermanip
from . import identifiers
from . import instrument
from . import filenames
from . import cli

__all__ = [
    "constants",
    "errors",
    "pool",
    "rastermanip",
    "identifiers",
    "instrument",
    "filenames",
    "cli",
]
