from numbers import Integral

import numpy as np
from PIL import Image

from asciiart.errors import DegenerateImage, InvalidWidth

# Terminal/monospace glyphs render roughly twice as tall as they are wide
CHAR_ASPECT_RATIO = 2.0

# Rec. 709 luma weights, integer form, summing to LUMA_DIVISOR
LUMA_WEIGHTS = (2126, 7152, 722)
LUMA_DIVISOR = 10000


def check_width(width) -> int:
    if isinstance(width, bool) or not isinstance(width, Integral) or width < 1:
        raise InvalidWidth(width)
    return int(width)


def check_image(image: Image.Image) -> None:
    if image.width == 0 or image.height == 0:
        raise DegenerateImage(image.width, image.height)


def output_height(source_width: int, source_height: int, width: int) -> int:
    """Number of text rows for ``width`` columns, truncated toward zero.

    May be 0 for a wide, short source at a narrow width.
    """
    aspect_ratio = source_height / source_width
    return int(width * aspect_ratio / CHAR_ASPECT_RATIO)


def resample_nearest(image: Image.Image, width: int, height: int) -> Image.Image:
    """Resize to exactly ``width`` x ``height`` by point sampling, returning RGB.

    Target pixel (x, y) reads source pixel (x * src_w // width, y * src_h // height),
    so no two source pixels are ever blended and the result is reproducible.
    Alpha is dropped.
    """
    check_image(image)
    width = check_width(width)
    if height < 1:
        raise DegenerateImage(width, height)

    arr = np.asarray(image.convert("RGB"))
    src_h, src_w = arr.shape[:2]
    rows = np.arange(height) * src_h // height
    cols = np.arange(width) * src_w // width
    return Image.fromarray(np.ascontiguousarray(arr[rows[:, None], cols]))


def luminance(image: Image.Image) -> np.ndarray:
    """Rec. 709 luma of an image as a (rows, cols) uint8 array, truncated toward zero.

    Alpha is dropped before weighting.
    """
    arr = np.asarray(image.convert("RGB"), dtype=np.uint32)
    r, g, b = LUMA_WEIGHTS
    luma = (arr[..., 0] * r + arr[..., 1] * g + arr[..., 2] * b) // LUMA_DIVISOR
    return luma.astype(np.uint8)
