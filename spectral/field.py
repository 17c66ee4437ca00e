# spectral/field.py
import numpy as np
from typing import List, Tuple
from spectral.errors import InvalidDimensionError

def is_power_of_two(n: int) -> bool:
    n = int(n)
    return n > 0 and (n & (n - 1)) == 0

def require_power_of_two(shape: Tuple[int, ...]) -> None:
    """Raise InvalidDimensionError unless both axes of an (H, W) shape are powers of two."""
    h, w = shape[:2]
    for name, n in (("height", h), ("width", w)):
        if not is_power_of_two(n):
            raise InvalidDimensionError(
                f"{name} {n} is not a power of two (image is {w}x{h})")

def _check_2d(a: np.ndarray) -> None:
    if a.ndim != 2:
        raise InvalidDimensionError(f"expected a 2D field, got shape {a.shape}")
    if a.shape[0] < 1 or a.shape[1] < 1:
        raise InvalidDimensionError(f"field must be non-empty, got shape {a.shape}")

def as_scalar_field(a) -> np.ndarray:
    """New float64, C-contiguous (H, W) copy of `a`."""
    a = np.asarray(a)
    _check_2d(a)
    return np.array(a, dtype=np.float64, order="C", copy=True)

def as_complex_field(a) -> np.ndarray:
    """
    New complex128 (H, W) copy of `a`. Real input is promoted.
    The copy is what the transform engine mutates in place.
    """
    a = np.asarray(a)
    _check_2d(a)
    return np.array(a, dtype=np.complex128, order="C", copy=True)

def mip_sizes(width: int, height: int) -> List[Tuple[int, int]]:
    """Pyramid level sizes, halving each axis (min 1) down to 1x1."""
    width, height = int(width), int(height)
    if width < 1 or height < 1:
        raise InvalidDimensionError(f"invalid size {width}x{height}")
    sizes = [(width, height)]
    while width > 1 or height > 1:
        width = max(1, width // 2)
        height = max(1, height // 2)
        sizes.append((width, height))
    return sizes
