"""
Temporary Taichi field pool for PyMisrHR.

Kernels taking ``ti.template()`` fields are compiled once per field, so the
resampling wrappers borrow their source and target fields from this pool
instead of allocating new ones on every call. Fields are keyed by
(dtype, shape) and handed back with ``release()``.

A ``ti.init`` call resets the Taichi runtime and invalidates every field;
the pool notices the new runtime and drops what it held.

Usage:
    tmp = pool.get_temp_field(ti.f32, (nx * ny,))
    tmp.field.from_numpy(data)
    ...
    tmp.release()

Author: B.G.
"""

import threading

import taichi as ti
from taichi.lang import impl


class TempField:
    """A pooled field on loan; call release() to return it."""

    def __init__(self, owner, key, field, runtime):
        self._owner = owner
        self._key = key
        self._runtime = runtime
        self.field = field
        self.released = False

    def release(self):
        if not self.released:
            self.released = True
            self._owner._give_back(self)


class FieldPool:
    """Free lists of Taichi fields keyed by (dtype, shape)."""

    def __init__(self):
        self._lock = threading.Lock()
        self._free = {}
        self._runtime = None
        self._allocated = 0

    def _sync_runtime(self):
        runtime = impl.get_runtime()
        if runtime is not self._runtime:
            self._free = {}
            self._allocated = 0
            self._runtime = runtime

    def get_temp_field(self, dtype, shape):
        key = (str(dtype), tuple(shape))
        with self._lock:
            self._sync_runtime()
            free = self._free.get(key)
            if free:
                return TempField(self, key, free.pop(), self._runtime)
            # Taichi field construction is not thread-safe
            field = ti.field(dtype=dtype, shape=key[1])
            self._allocated += 1
            return TempField(self, key, field, self._runtime)

    def _give_back(self, temp):
        with self._lock:
            self._sync_runtime()
            # Fields from a previous runtime are dead, drop them
            if temp._runtime is not self._runtime:
                return
            self._free.setdefault(temp._key, []).append(temp.field)

    def stats(self):
        with self._lock:
            free = sum(len(v) for v in self._free.values())
            return {"allocated": self._allocated, "free": free}


taipool = FieldPool()


def get_temp_field(dtype, shape):
    """Borrow a field of the given Taichi dtype and shape from the global pool."""
    return taipool.get_temp_field(dtype, shape)
