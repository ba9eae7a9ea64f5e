"""
Static MISR instrument metadata.

The instrument has nine pushbroom cameras, named by lens (D, C, B, A) and
view direction (f = forward, a = aft, n = nadir), each imaging in four
spectral bands: 36 channels in all. In Global Mode only the nadir camera and
the red band of the off-nadir cameras are transmitted at 275 m; the other
channels are averaged on board to 1.1 km. In Local Mode every channel is at
275 m.

Author: B.G.
"""

from . import constants as cte
from .errors import InvalidIdentifier

# Forward-most to aft-most
CAMERAS = ("DF", "CF", "BF", "AF", "AN", "AA", "BA", "CA", "DA")
BANDS = ("Blue", "Green", "Red", "NIR")
MODES = ("GM", "LM")

NADIR_CAMERA = "AN"
RED_BAND = "Red"

FULL_RESOLUTION_M = 275
REDUCED_RESOLUTION_M = 1100

N_CHANNELS = len(CAMERAS) * len(BANDS)


def channel_index(camera, band):
    """
    Return the 0-based channel number of (camera, band), camera-major.

    Example:
        channel_index("DF", "Blue")  # 0
        channel_index("AN", "Red")   # 18
    """
    from .identifiers import check_band, check_camera

    return CAMERAS.index(check_camera(camera)) * len(BANDS) + BANDS.index(check_band(band))


def channel_from_index(index):
    """Inverse of channel_index: (camera, band) for a channel number."""
    index = int(index)
    if not 0 <= index < N_CHANNELS:
        raise InvalidIdentifier(f"Channel index must be in [0, {N_CHANNELS - 1}], got {index}")
    return CAMERAS[index // len(BANDS)], BANDS[index % len(BANDS)]


def native_resolution(camera, band, mode="GM"):
    """
    Ground resolution (m) at which a channel is transmitted.

    Args:
        camera: Camera code ('DF' ... 'DA')
        band: Band name or index
        mode: Acquisition mode, 'GM' (Global) or 'LM' (Local)

    Returns:
        int: 275 or 1100
    """
    from .identifiers import check_band, check_camera, check_mode

    camera = check_camera(camera)
    band = check_band(band)
    if check_mode(mode) == "LM":
        return FULL_RESOLUTION_M
    if camera == NADIR_CAMERA or band == RED_BAND:
        return FULL_RESOLUTION_M
    return REDUCED_RESOLUTION_M


def native_shape(camera, band, mode="GM"):
    """Per-block grid shape (rows, columns) of a channel as transmitted."""
    if native_resolution(camera, band, mode) == FULL_RESOLUTION_M:
        return cte.HR_SHAPE
    return cte.LR_SHAPE


def needs_upsampling(camera, band, mode="GM"):
    """True for channels delivered on the 1.1 km grid."""
    return native_resolution(camera, band, mode) == REDUCED_RESOLUTION_M


def channels(mode="GM", resolution=None):
    """
    List (camera, band) channels in channel order, optionally filtered.

    Args:
        mode: Acquisition mode
        resolution: If given (275 or 1100), keep only channels at that resolution
    """
    result = []
    for camera in CAMERAS:
        for band in BANDS:
            if resolution is None or native_resolution(camera, band, mode) == resolution:
                result.append((camera, band))
    return result
