# spectral/errors.py


class SpectrumError(Exception):
    """Base class for errors that abort a single spectrum run."""


class UnsupportedFormatError(SpectrumError):
    """Pixel buffer has fewer than 3 channels or a non-integer sample type."""


class InvalidDimensionError(SpectrumError):
    """Field dimensions are empty, not 2D, or not a power of two where required."""


class DimensionMismatchError(SpectrumError):
    """Two fields that must share a shape do not."""


class DegenerateRangeError(SpectrumError):
    """Magnitude field is flat (max == min); only raised in strict mode."""
