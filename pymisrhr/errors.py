"""
Exceptions raised by PyMisrHR.

Every resampling precondition failure is a ``ResamplingError``. The concrete
classes also inherit the builtin exception numpy code raises for the same
condition, so ``except ValueError`` / ``except TypeError`` still work.

Author: B.G.
"""


class ResamplingError(Exception):
    """Base class for resampling precondition failures."""


class InvalidArgument(ResamplingError, TypeError):
    """Input is not an array, or its element type is not supported."""


class ShapeMismatch(ResamplingError, ValueError):
    """Input array has the wrong dimensions."""

    def __init__(self, expected, got):
        self.expected = tuple(expected)
        self.got = tuple(got)
        super().__init__(f"Expected grid of shape {self.expected}, got {self.got}")


class UnrecognizedKind(ResamplingError, ValueError):
    """Grid kind is not one of the known kinds."""


class TypeKindMismatch(ResamplingError, TypeError):
    """Grid kind is incompatible with the array element type."""

    def __init__(self, kind, dtype, allowed):
        self.kind = kind
        self.dtype = dtype
        self.allowed = tuple(allowed)
        names = ", ".join(str(d) for d in self.allowed)
        super().__init__(
            f"Grid kind '{kind}' requires element type in ({names}), got {dtype}"
        )


class InvalidIdentifier(ValueError):
    """A MISR identifier (path, orbit, block, camera, ...) failed validation."""


__all__ = [
    "ResamplingError",
    "InvalidArgument",
    "ShapeMismatch",
    "UnrecognizedKind",
    "TypeKindMismatch",
    "InvalidIdentifier",
]
