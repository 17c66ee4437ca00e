# spectral/centering.py
import numpy as np
from spectral.field import as_scalar_field

def field_mean(field: np.ndarray) -> float:
    # numpy reduces with pairwise summation, deterministic for a fixed input
    return float(np.sum(field, dtype=np.float64) / field.size)

def subtract_mean(field: np.ndarray) -> np.ndarray:
    """Return a new field with the arithmetic mean (the DC bias) removed."""
    out = as_scalar_field(field)
    # rounding can put the mean an ulp outside [min, max]; a flat field must go to exact zeros
    mean = min(max(field_mean(out), float(out.min())), float(out.max()))
    out -= mean
    return out
