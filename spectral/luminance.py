# spectral/luminance.py
import numpy as np
from spectral.errors import UnsupportedFormatError

# Rec. 709 weights
LUMA_R, LUMA_G, LUMA_B = 0.2126, 0.7152, 0.0722

def _as_unit_float(channel: np.ndarray, dtype: np.dtype) -> np.ndarray:
    """Map integer samples linearly onto [0, 1] using the dtype's full range."""
    info = np.iinfo(dtype)
    lo, hi = float(info.min), float(info.max)
    return (channel.astype(np.float64) - lo) / (hi - lo)

def to_luminance(pixels: np.ndarray) -> np.ndarray:
    """
    pixels: HxWxN integer buffer, N >= 3 (alpha and extra channels ignored)
    returns HxW float64, 0.2126 R + 0.7152 G + 0.0722 B with channels in [0, 1]
    """
    pixels = np.asarray(pixels)
    if pixels.ndim != 3:
        raise UnsupportedFormatError(
            f"expected an HxWxN pixel buffer, got shape {pixels.shape}")
    if pixels.shape[2] < 3:
        raise UnsupportedFormatError(
            f"need at least 3 channels, got {pixels.shape[2]}")
    if not np.issubdtype(pixels.dtype, np.integer):
        raise UnsupportedFormatError(
            f"expected integer samples, got {pixels.dtype}")

    r = _as_unit_float(pixels[..., 0], pixels.dtype)
    g = _as_unit_float(pixels[..., 1], pixels.dtype)
    b = _as_unit_float(pixels[..., 2], pixels.dtype)
    return LUMA_R * r + LUMA_G * g + LUMA_B * b
