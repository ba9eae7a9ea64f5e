"""
Test suite for PyMisrHR package.

This test suite covers:
- Import tests for all modules and submodules
- Unit tests for resampling kernels, bit packing, identifiers and the CLI
- Integration tests for block-level workflows (full 512 x 2048 grids)

Run with: pytest
"""
