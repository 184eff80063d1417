import numpy as np
from PIL import Image

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)


def checkerboard() -> Image.Image:
    """2x2 image: black, white on the top row; white, black below."""
    img = Image.new("RGB", (2, 2))
    img.putdata([BLACK, WHITE, WHITE, BLACK])
    return img


def horizontal_gradient(width: int = 256, height: int = 2) -> Image.Image:
    """Grayscale image whose column x has luminance x * 255 // (width - 1)."""
    row = np.arange(width, dtype=np.intp) * 255 // (width - 1)
    return Image.fromarray(np.tile(row.astype(np.uint8), (height, 1)))
