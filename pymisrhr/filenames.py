"""
Metadata extraction from MISR and MISR-HR product filenames.

Product names are underscore-separated tokens, for example

    MISR_AM1_GRP_TERRAIN_GM_P168_O068050_AN_F03_0024.hdf
    MISR_AM1_AGP_P168_F01_24.hdf
    MISR_HR_BRF_P168_O068050_B110_AN.nc

Only the directory-independent base name is looked at.

Author: B.G.
"""

import os
import re
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidIdentifier
from .identifiers import check_block, check_camera, check_mode, check_orbit, check_path

_TOKEN_PATTERNS = {
    "path": re.compile(r"^P(\d{3})$"),
    "orbit": re.compile(r"^O(\d{6})$"),
    "block": re.compile(r"^B(\d{3})$"),
}
_VERSION_RE = re.compile(r"_(F\d{2}_\d{2,4})(?:[._]|$)")


@dataclass(frozen=True)
class ProductName:
    """Identifiers found in a product filename; None when absent."""

    filename: str
    path: Optional[int] = None
    orbit: Optional[int] = None
    block: Optional[int] = None
    camera: Optional[str] = None
    mode: Optional[str] = None
    version: Optional[str] = None

    def as_dict(self):
        return {
            "path": self.path,
            "orbit": self.orbit,
            "block": self.block,
            "camera": self.camera,
            "mode": self.mode,
            "version": self.version,
        }


_CHECKS = {"path": check_path, "orbit": check_orbit, "block": check_block}


def parse_filename(filename):
    """
    Extract PATH, ORBIT, BLOCK, CAMERA, MODE and version from a filename.

    Args:
        filename: File name or path

    Returns:
        ProductName: Parsed identifiers

    Raises:
        InvalidIdentifier: If no identifier token is found, or a token is out
                           of range (e.g. P999)

    Example:
        info = parse_filename("MISR_AM1_GRP_TERRAIN_GM_P168_O068050_AN_F03_0024.hdf")
        info.path, info.orbit, info.camera  # (168, 68050, 'AN')
    """
    base = os.path.basename(os.fspath(filename))
    stem = base.split(".", 1)[0]

    found = {}
    version_match = _VERSION_RE.search(stem)
    if version_match:
        found["version"] = version_match.group(1)
        stem = stem.replace(version_match.group(1), "")

    for token in stem.split("_"):
        upper = token.upper()
        for name, pattern in _TOKEN_PATTERNS.items():
            match = pattern.match(upper)
            if match and name not in found:
                found[name] = _CHECKS[name](int(match.group(1)))
                break
        else:
            if "camera" not in found and _is_camera(upper):
                found["camera"] = check_camera(upper)
            elif "mode" not in found and upper in ("GM", "LM"):
                found["mode"] = check_mode(upper)

    if not found:
        raise InvalidIdentifier(f"No MISR identifiers found in filename {base!r}")
    return ProductName(filename=base, **found)


def _is_camera(token):
    try:
        check_camera(token)
    except InvalidIdentifier:
        return False
    return True
