"""
Unit tests for the temporary Taichi field pool.
"""
import numpy as np
import pytest
import taichi as ti

from pymisrhr.pool import FieldPool, taipool
from pymisrhr.rastermanip._grid import run_on_fields


class TestFieldPool:

    @pytest.mark.unit
    def test_released_field_is_reused(self):
        pool = FieldPool()
        first = pool.get_temp_field(ti.f32, (16,))
        field = first.field
        first.release()

        second = pool.get_temp_field(ti.f32, (16,))
        assert second.field is field
        assert pool.stats() == {"allocated": 1, "free": 0}

    @pytest.mark.unit
    def test_keys_separate_dtype_and_shape(self):
        pool = FieldPool()
        a = pool.get_temp_field(ti.f32, (16,))
        a.release()
        b = pool.get_temp_field(ti.u8, (16,))
        c = pool.get_temp_field(ti.f32, (32,))
        assert b.field is not a.field
        assert c.field is not a.field
        assert pool.stats()["allocated"] == 3

    @pytest.mark.unit
    def test_double_release_is_harmless(self):
        pool = FieldPool()
        temp = pool.get_temp_field(ti.i32, (4,))
        temp.release()
        temp.release()
        assert pool.stats()["free"] == 1

    @pytest.mark.unit
    def test_reinit_drops_stale_fields(self):
        pool = FieldPool()
        temp = pool.get_temp_field(ti.f32, (8,))
        temp.release()

        ti.init(arch=ti.cpu, offline_cache=False)

        fresh = pool.get_temp_field(ti.f32, (8,))
        assert fresh.field is not temp.field
        fresh.field.fill(1.0)
        assert fresh.field.to_numpy().sum() == 8.0


class TestRunOnFields:

    @pytest.mark.unit
    def test_fields_return_to_pool_when_kernel_raises(self):
        data = np.ones((4, 4), dtype=np.float32)

        def failing_kernel(source, target):
            raise RuntimeError("kernel failed")

        with pytest.raises(RuntimeError):
            run_on_fields(data, (2, 2), False, failing_kernel)
        after_first = taipool.stats()

        with pytest.raises(RuntimeError):
            run_on_fields(data, (2, 2), False, failing_kernel)
        assert taipool.stats() == after_first
