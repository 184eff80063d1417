from pathlib import Path

from PIL import Image

from asciiart.sampling import check_image, luminance, resample_nearest

PREVIEW_SIZE = (100, 100)


def grayscale_preview(image: Image.Image) -> Image.Image:
    check_image(image)
    return Image.fromarray(luminance(image))


def resized_preview(image: Image.Image, size: tuple[int, int] = PREVIEW_SIZE) -> Image.Image:
    """Point-sampled grayscale thumbnail, stretched to ``size`` regardless of aspect."""
    gray = grayscale_preview(image)
    return Image.fromarray(luminance(resample_nearest(gray, size[0], size[1])))


def save_previews(image: Image.Image, directory: str | Path) -> dict[str, Path]:
    """Write the original, grayscale and resized bitmaps as PNGs into ``directory``."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    images = {
        "original": image.convert("RGBA"),
        "grayscale": grayscale_preview(image),
        "resized": resized_preview(image),
    }
    paths = {}
    for name, img in images.items():
        path = directory / f"{name}.png"
        img.save(path)
        paths[name] = path
    return paths
