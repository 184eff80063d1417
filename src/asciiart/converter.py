import logging

from PIL import Image

from asciiart.ramp import glyph_rows
from asciiart.sampling import check_image, check_width, luminance, output_height, resample_nearest

logger = logging.getLogger(__name__)


def image_to_ascii(image: Image.Image, width: int) -> str:
    """Render ``image`` as ``width`` columns of ramp glyphs.

    Every line, the last included, ends with a newline. Returns an empty string
    when the aspect-corrected height truncates to zero rows.

    Raises:
        InvalidWidth: ``width`` is not a positive integer.
        DegenerateImage: the source has zero width or height.
    """
    width = check_width(width)
    check_image(image)

    height = output_height(image.width, image.height, width)
    logger.debug("Converting %dx%d %s image to %dx%d glyphs", image.width, image.height, image.mode, width, height)
    if height == 0:
        return ""

    resized = resample_nearest(image, width, height)
    lines = glyph_rows(luminance(resized))
    return "".join(line + "\n" for line in lines)
