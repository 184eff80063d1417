import numpy as np

# Darkest (most ink) first, lightest last
RAMP = "@#S%?*+;:,."


def glyph_index(p: int, n: int = len(RAMP)) -> int:
    """Map a luminance value 0-255 onto one of ``n`` equal-width buckets."""
    return p * (n - 1) // 255


def quantize(samples: np.ndarray, n: int = len(RAMP)) -> np.ndarray:
    """Vectorised :func:`glyph_index` over a uint8 luminance grid."""
    return samples.astype(np.intp) * (n - 1) // 255


def glyph_rows(samples: np.ndarray, ramp: str = RAMP) -> list[str]:
    """Convert a (rows, cols) luminance grid to one string of glyphs per row."""
    indices = quantize(samples, len(ramp))
    return ["".join(ramp[i] for i in row) for row in indices]
