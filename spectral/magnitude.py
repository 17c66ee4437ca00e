# spectral/magnitude.py
import logging
import math
import numpy as np
from spectral.errors import DegenerateRangeError

logger = logging.getLogger(__name__)

DEFAULT_DISPLAY_SCALE = 64.0

def magnitude(field: np.ndarray) -> np.ndarray:
    """sqrt(re^2 + im^2) per sample, as a new real field."""
    return np.abs(np.asarray(field)).astype(np.float64)

def normalize_magnitude(mag: np.ndarray,
                        display_scale: float = DEFAULT_DISPLAY_SCALE,
                        strict: bool = False) -> np.ndarray:
    """
    Linear remap of `mag` from [min, max] to [0, display_scale].
    display_scale: 64.0 gives a compressed range for visual inspection, not dB.
    A flat field (max == min) maps to all zeros, or raises DegenerateRangeError
    when strict is set.
    """
    display_scale = float(display_scale)
    if not math.isfinite(display_scale) or display_scale <= 0.0:
        raise ValueError(f"display_scale must be positive, got {display_scale}")

    mag = np.asarray(mag, dtype=np.float64)
    lo, hi = float(mag.min()), float(mag.max())
    span = hi - lo
    if span == 0.0:
        if strict:
            raise DegenerateRangeError(f"flat magnitude field (min == max == {lo})")
        logger.debug("flat magnitude field (%g), output is zero", lo)
        return np.zeros_like(mag)
    return ((mag - lo) / span) * display_scale
