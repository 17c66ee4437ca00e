# spectral/pipeline.py
import logging
import numpy as np
from dataclasses import dataclass
from typing import Optional, Tuple
from spectral.centering import subtract_mean
from spectral.fft2d import fft2d
from spectral.field import as_complex_field, require_power_of_two
from spectral.luminance import to_luminance
from spectral.magnitude import DEFAULT_DISPLAY_SCALE, magnitude, normalize_magnitude
from spectral.recenter import quadrant_swap
from utils.imaging import load_pixels

logger = logging.getLogger(__name__)

@dataclass
class SpectrumRun:
    """Everything one run produces, from decoded pixels to the display buffer."""
    pixels: np.ndarray
    display_scale: float = DEFAULT_DISPLAY_SCALE
    luminance: Optional[np.ndarray] = None
    centered: Optional[np.ndarray] = None
    spectrum: Optional[np.ndarray] = None
    magnitude: Optional[np.ndarray] = None
    display: Optional[np.ndarray] = None

    @property
    def size(self) -> Tuple[int, int]:
        h, w = self.pixels.shape[:2]
        return w, h

def run_spectrum(pixels: np.ndarray,
                 display_scale: float = DEFAULT_DISPLAY_SCALE,
                 workers: Optional[int] = None,
                 method: str = "fft") -> SpectrumRun:
    """
    pixels -> luminance -> mean removal -> 2D DFT -> normalized magnitude
    -> quadrant swap.

    Raises UnsupportedFormatError for <3 channels and InvalidDimensionError
    for non power-of-two sizes, before any transform work is done.
    """
    run = SpectrumRun(pixels=np.asarray(pixels), display_scale=float(display_scale))
    run.luminance = to_luminance(run.pixels)
    w, h = run.size
    logger.info("spectrum run: %dx%d, %d channel(s), display_scale=%g",
                w, h, run.pixels.shape[2], run.display_scale)
    require_power_of_two(run.luminance.shape)

    run.centered = subtract_mean(run.luminance)
    # every sample is shifted by the same amount
    logger.debug("removed mean %g", float(run.luminance.flat[0] - run.centered.flat[0]))

    run.spectrum = fft2d(as_complex_field(run.centered),
                         inverse=False, method=method, workers=workers)

    run.magnitude = magnitude(run.spectrum)
    normalized = normalize_magnitude(run.magnitude, display_scale=run.display_scale)
    run.display = quadrant_swap(normalized)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("magnitude range [%g, %g]",
                     float(run.magnitude.min()), float(run.magnitude.max()))
    return run

def on_file_dropped(path: str,
                    display_scale: float = DEFAULT_DISPLAY_SCALE,
                    workers: Optional[int] = None,
                    method: str = "fft") -> SpectrumRun:
    """Decode a dropped image file and run it through the spectrum pipeline."""
    logger.info("file dropped: %s", path)
    return run_spectrum(load_pixels(path), display_scale=display_scale,
                        workers=workers, method=method)

def peak_position(field: np.ndarray) -> Tuple[int, int]:
    """(y, x) of the largest sample; first occurrence on ties."""
    y, x = np.unravel_index(int(np.argmax(field)), field.shape)
    return int(y), int(x)
