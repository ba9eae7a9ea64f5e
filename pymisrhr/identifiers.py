"""
MISR identifier checks and conversions.

Validators normalise their argument and return it, raising InvalidIdentifier
when it is out of range. Converters format identifiers the way they appear
in MISR product names (P168, O068050, B110) and parse them back.

Author: B.G.
"""

import re

from .errors import InvalidIdentifier
from .instrument import BANDS, CAMERAS, MODES
from .rastermanip.kinds import GridKind

PATH_MIN, PATH_MAX = 1, 233
ORBIT_MIN, ORBIT_MAX = 995, 999999
BLOCK_MIN, BLOCK_MAX = 1, 180

_PATH_RE = re.compile(r"^P(\d{3})$", re.IGNORECASE)
_ORBIT_RE = re.compile(r"^O(\d{6})$", re.IGNORECASE)
_BLOCK_RE = re.compile(r"^B(\d{3})$", re.IGNORECASE)


def _check_int(value, name, low, high):
    if isinstance(value, bool):
        raise InvalidIdentifier(f"{name} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidIdentifier(f"{name} must be an integer, got {value!r}") from None
    if number != value and not isinstance(value, str):
        raise InvalidIdentifier(f"{name} must be an integer, got {value!r}")
    if not low <= number <= high:
        raise InvalidIdentifier(f"{name} must be in [{low}, {high}], got {number}")
    return number


def check_path(path):
    """Return path as an int in [1, 233]."""
    return _check_int(path, "PATH", PATH_MIN, PATH_MAX)


def check_orbit(orbit):
    """Return orbit as an int in [995, 999999]."""
    return _check_int(orbit, "ORBIT", ORBIT_MIN, ORBIT_MAX)


def check_block(block):
    """Return block as an int in [1, 180]."""
    return _check_int(block, "BLOCK", BLOCK_MIN, BLOCK_MAX)


def check_camera(camera):
    """Return the canonical upper-case camera code."""
    if isinstance(camera, str) and camera.upper() in CAMERAS:
        return camera.upper()
    raise InvalidIdentifier(f"CAMERA must be one of {', '.join(CAMERAS)}, got {camera!r}")


def check_band(band):
    """Return the canonical band name for a name or 0-based index."""
    if isinstance(band, str):
        for name in BANDS:
            if band.lower() == name.lower():
                return name
    elif isinstance(band, int) and not isinstance(band, bool) and 0 <= band < len(BANDS):
        return BANDS[band]
    raise InvalidIdentifier(f"BAND must be one of {', '.join(BANDS)} or 0-3, got {band!r}")


def check_mode(mode):
    """Return 'GM' or 'LM'."""
    if isinstance(mode, str) and mode.upper() in MODES:
        return mode.upper()
    raise InvalidIdentifier(f"MODE must be one of {', '.join(MODES)}, got {mode!r}")


# Product field name suffixes per band
FIELD_SUFFIXES = ("Radiance/RDQI", "Radiance", "Brf", "RDQI")


def check_field(field):
    """
    Validate a product field name such as 'Red Radiance/RDQI' or 'NIR Brf'.

    Returns:
        str: The field name with canonical band and suffix spelling
    """
    if isinstance(field, str):
        parts = field.strip().split(" ", 1)
        if len(parts) == 2:
            try:
                band = check_band(parts[0])
            except InvalidIdentifier:
                band = None
            for suffix in FIELD_SUFFIXES:
                if band is not None and parts[1].lower() == suffix.lower():
                    return f"{band} {suffix}"
    valid = ", ".join(f"<Band> {s}" for s in FIELD_SUFFIXES)
    raise InvalidIdentifier(f"Unrecognized product field {field!r}. Expected one of: {valid}")


def check_grid_kind(kind):
    """Return the GridKind named by kind (raises UnrecognizedKind)."""
    return GridKind.coerce(kind)


def path2str(path):
    return f"P{check_path(path):03d}"


def orbit2str(orbit):
    return f"O{check_orbit(orbit):06d}"


def block2str(block):
    return f"B{check_block(block):03d}"


def _parse(text, pattern, name, check):
    if not isinstance(text, str):
        raise InvalidIdentifier(f"{name} string expected, got {text!r}")
    match = pattern.match(text.strip())
    if match is None:
        raise InvalidIdentifier(f"Malformed {name} string {text!r}")
    return check(int(match.group(1)))


def str2path(text):
    """Parse 'P168' into 168."""
    return _parse(text, _PATH_RE, "PATH", check_path)


def str2orbit(text):
    """Parse 'O068050' into 68050."""
    return _parse(text, _ORBIT_RE, "ORBIT", check_orbit)


def str2block(text):
    """Parse 'B110' into 110."""
    return _parse(text, _BLOCK_RE, "BLOCK", check_block)
