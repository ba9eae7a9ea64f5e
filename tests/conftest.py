"""
Pytest configuration and fixtures for PyMisrHR test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Full-block kernels compile and run on ~1M cells
        if "full_block" in item.name.lower():
            item.add_marker("slow")

        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture(scope="session", autouse=True)
def taichi_cpu():
    """Initialise Taichi on CPU once for the session."""
    import taichi as ti

    ti.init(arch=ti.cpu, offline_cache=False)
    return ti


class GridDataManager:
    """Helper class for building MISR block grids for tests."""

    HR_SHAPE = (512, 2048)
    LR_SHAPE = (128, 512)

    @staticmethod
    def hr_grid(dtype, fill=0):
        return np.full(GridDataManager.HR_SHAPE, fill, dtype=dtype)

    @staticmethod
    def lr_grid(dtype, fill=0):
        return np.full(GridDataManager.LR_SHAPE, fill, dtype=dtype)

    @staticmethod
    def set_window(grid, j, i, values):
        """Write 16 values (row-major) into the 4x4 window feeding output cell (j, i)."""
        window = np.asarray(values, dtype=grid.dtype).reshape(4, 4)
        grid[4 * j:4 * j + 4, 4 * i:4 * i + 4] = window
        return grid

    @staticmethod
    def window_values(*counts):
        """Build 16 window values from (value, count) pairs, padding with 0."""
        values = []
        for value, count in counts:
            values.extend([value] * count)
        values.extend([0] * (16 - len(values)))
        return values

    @staticmethod
    def random_radiance(seed=42, high=400.0, dtype=np.float32):
        rng = np.random.default_rng(seed)
        return rng.uniform(0.5, high, GridDataManager.HR_SHAPE).astype(dtype)


@pytest.fixture
def grid_data_manager():
    """Provide access to grid creation utilities."""
    return GridDataManager()
