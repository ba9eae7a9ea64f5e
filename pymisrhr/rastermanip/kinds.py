"""
Grid kinds for MISR downsampling.

A grid kind names the semantic nature of a grid's elements and therefore the
aggregation rule applied when reducing its resolution. The set of kinds is
closed.

Author: B.G.
"""

from enum import Enum

import numpy as np

from .. import constants as cte
from ..errors import UnrecognizedKind

_BYTE = (np.dtype(np.uint8),)
_UINT16 = (np.dtype(np.uint16),)
_FLOAT = (np.dtype(np.float32), np.dtype(np.float64))


class GridKind(Enum):
    """Closed enumeration of MISR grid kinds."""

    RDQI = "RDQI"
    MASK = "Mask"
    SCALED_RADIANCE_WITH_FLAG = "ScaledRadianceWithFlag"
    RADIANCE = "Radiance"
    REFLECTANCE_FACTOR = "ReflectanceFactor"

    def __str__(self):
        return self.value

    @property
    def dtypes(self):
        """numpy dtypes accepted for grids of this kind."""
        return _KIND_DTYPES[self]

    @property
    def usable_range(self):
        """(low, high) bounds of usable values, low exclusive for all but RDQI."""
        return _KIND_RANGES[self]

    def accepts(self, dtype) -> bool:
        return np.dtype(dtype) in self.dtypes

    @classmethod
    def coerce(cls, value):
        """
        Convert a member or a name to a GridKind.

        Names are matched case-insensitively, ignoring spaces, underscores,
        dashes and slashes, against the member values, member names and a few
        common aliases ('brf', 'scaled radiance with rdqi', ...).

        Raises:
            UnrecognizedKind: If value does not name a kind
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            kind = _ALIASES.get(_normalize(value))
            if kind is not None:
                return kind
        valid = ", ".join(k.value for k in cls)
        raise UnrecognizedKind(f"Unrecognized grid kind {value!r}. Expected one of: {valid}")


def _normalize(name: str) -> str:
    return "".join(c for c in name.lower() if c not in " _-/")


_KIND_DTYPES = {
    GridKind.RDQI: _BYTE,
    GridKind.MASK: _BYTE,
    GridKind.SCALED_RADIANCE_WITH_FLAG: _UINT16,
    GridKind.RADIANCE: _FLOAT,
    GridKind.REFLECTANCE_FACTOR: _FLOAT,
}

_KIND_RANGES = {
    GridKind.RDQI: (cte.RDQI_MIN, cte.RDQI_MAX),
    GridKind.MASK: (cte.LAND, cte.CLOUD),
    GridKind.SCALED_RADIANCE_WITH_FLAG: (0, cte.SCALED_RADIANCE_MAX_USABLE),
    GridKind.RADIANCE: (0.0, cte.RADIANCE_MAX),
    GridKind.REFLECTANCE_FACTOR: (0.0, cte.BRF_MAX),
}

_ALIASES = {}
for _kind in GridKind:
    _ALIASES[_normalize(_kind.value)] = _kind
    _ALIASES[_normalize(_kind.name)] = _kind
_ALIASES.update(
    {
        "landwatercloudmask": GridKind.MASK,
        "scaledradiance": GridKind.SCALED_RADIANCE_WITH_FLAG,
        "scaledradiancewithrdqi": GridKind.SCALED_RADIANCE_WITH_FLAG,
        "radiancerdqi": GridKind.SCALED_RADIANCE_WITH_FLAG,
        "brf": GridKind.REFLECTANCE_FACTOR,
        "bidirectionalreflectancefactor": GridKind.REFLECTANCE_FACTOR,
    }
)
