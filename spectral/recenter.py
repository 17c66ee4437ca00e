# spectral/recenter.py
import numpy as np
from typing import Optional
from spectral.errors import DimensionMismatchError, InvalidDimensionError

def quadrant_swap(src: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
    """
    FFT-shift: swap top-left <-> bottom-right and top-right <-> bottom-left so
    the (0, 0) term lands at (H/2, W/2).

        out[y, x] = src[(y + H/2) % H, (x + W/2) % W]

    `out` must have the same shape as `src` and its own storage.
    Pure index permutation, so applying it twice gives back `src` exactly.
    """
    src = np.asarray(src)
    if src.ndim != 2:
        raise InvalidDimensionError(f"expected a 2D field, got shape {src.shape}")
    if out is None:
        out = np.empty_like(src)
    elif out.shape != src.shape:
        raise DimensionMismatchError(
            f"output shape {out.shape} does not match input shape {src.shape}")
    elif np.shares_memory(src, out):
        raise ValueError("quadrant_swap cannot run in place; out must not alias src")

    H, W = src.shape
    if H % 2 or W % 2:
        raise InvalidDimensionError(f"quadrant swap needs even dimensions, got {W}x{H}")
    hh, hw = H // 2, W // 2

    out[:hh, :hw] = src[hh:, hw:]
    out[hh:, hw:] = src[:hh, :hw]
    out[:hh, hw:] = src[hh:, :hw]
    out[hh:, :hw] = src[:hh, hw:]
    return out
