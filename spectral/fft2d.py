# spectral/fft2d.py
import logging
import numpy as np
from typing import Optional
from scipy.fft import fft, ifft

logger = logging.getLogger(__name__)

METHODS = ("fft", "naive")

# above this length the O(N^2) fallback is noticeably slow
NAIVE_WARN_LEN = 64

def dft_naive(x: np.ndarray, inverse: bool = False) -> np.ndarray:
    """
    O(N^2) DFT along the last axis by explicit kernel matrix.
    Performance fallback for tiny images and for cross-checking the FFT path.
    inverse uses the conjugate kernel and 1/N scaling (same convention as scipy).
    """
    x = np.asarray(x, dtype=np.complex128)
    n = x.shape[-1]
    k = np.arange(n)
    sign = 1.0 if inverse else -1.0
    kernel = np.exp(sign * 2j * np.pi * np.outer(k, k) / n)
    out = x @ kernel.T
    if inverse:
        out /= n
    return out

def _transform_1d(buf: np.ndarray, inverse: bool, method: str,
                  workers: Optional[int]) -> np.ndarray:
    """1D transform of every row of `buf` (last axis)."""
    if method == "naive":
        return dft_naive(buf, inverse=inverse)
    if inverse:
        return ifft(buf, axis=-1, workers=workers)
    return fft(buf, axis=-1, workers=workers)

def _check_method(field: np.ndarray, method: str) -> None:
    if not np.iscomplexobj(field):
        raise TypeError(f"transform needs a complex field, got {field.dtype}")
    if method not in METHODS:
        raise ValueError(f"unknown method {method!r}, expected one of {METHODS}")

def transform_rows(field: np.ndarray, inverse: bool = False, method: str = "fft",
                   workers: Optional[int] = None) -> np.ndarray:
    """Row pass: each of the H rows replaced by its length-W transform (in place)."""
    _check_method(field, method)
    # rows are independent; scipy spreads the batch over `workers`
    field[:, :] = _transform_1d(field, inverse, method, workers)
    return field

def transform_columns(field: np.ndarray, inverse: bool = False, method: str = "fft",
                      workers: Optional[int] = None) -> np.ndarray:
    """
    Column pass: each of the W columns is gathered into a contiguous buffer,
    transformed (length H) and scattered back into `field`.
    """
    _check_method(field, method)
    # gather: column x becomes contiguous row x of the temporary
    cols = np.ascontiguousarray(field.T)
    cols = _transform_1d(cols, inverse, method, workers)
    # scatter
    field[:, :] = cols.T
    return field

def fft2d(field: np.ndarray, inverse: bool = False, method: str = "fft",
          workers: Optional[int] = None) -> np.ndarray:
    """
    Separable 2D DFT of a complex HxW field, in place: rows first, then columns
    on the row-pass output.

    inverse: conjugate kernel with 1/W scaling on the row pass and 1/H on the
             column pass, so fft2d(fft2d(a), inverse=True) == a.
    method:  "fft" (scipy.fft, O(WH log WH)) or "naive" (O(W^2 H + W H^2)).
    workers: forwarded to scipy.fft for parallel row batches.
    """
    if field.ndim != 2:
        raise ValueError(f"expected a 2D field, got shape {field.shape}")
    if method == "naive" and max(field.shape) > NAIVE_WARN_LEN:
        logger.warning("naive DFT on a %dx%d field; this is a slow fallback",
                       field.shape[1], field.shape[0])
    transform_rows(field, inverse=inverse, method=method, workers=workers)
    transform_columns(field, inverse=inverse, method=method, workers=workers)
    return field
