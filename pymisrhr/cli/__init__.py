"""
Command Line Interface for PyMisrHR

This module provides command line utilities for PyMisrHR, giving access to
the MISR grid resampling and filename helpers from the terminal without
writing Python scripts.

Available Commands:
- grid_upsample: Replicate a 1.1 km grid (.npy) onto the 275 m grid
- grid_downsample: Aggregate a 275 m grid (.npy) onto the 1.1 km grid
- fileinfo: Print the identifiers encoded in MISR product filenames

Author: B.G.
"""

_CLI_SUBMODULES = {
    "grid_upsample": (".rastermanip_commands", "grid_upsample"),
    "grid_downsample": (".rastermanip_commands", "grid_downsample"),
    "fileinfo": (".fileinfo_commands", "fileinfo"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
