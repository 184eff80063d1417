from __future__ import annotations

import io
import sys
from pathlib import Path
from typing import Protocol, TextIO

from PIL import Image, UnidentifiedImageError

from asciiart.converter import image_to_ascii
from asciiart.errors import UnsupportedImage


class ImageSource(Protocol):
    def load(self) -> Image.Image:
        """Return a fully decoded image."""
        ...


class TextSink(Protocol):
    def write(self, text: str) -> None: ...


def _decode(fp, name: str) -> Image.Image:
    try:
        image = Image.open(fp)
        image.load()
    except (UnidentifiedImageError, OSError) as e:
        raise UnsupportedImage(f"Cannot decode image {name}: {e}") from e
    return image


class FileImageSource:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> Image.Image:
        if not self.path.exists():
            raise FileNotFoundError(f"File not found: {self.path}")
        with self.path.open("rb") as f:
            return _decode(f, str(self.path))


class BytesImageSource:
    """Decodes an image already read into memory, e.g. from stdin or an upload."""

    def __init__(self, data: bytes, name: str = "<bytes>"):
        self.data = data
        self.name = name

    def load(self) -> Image.Image:
        return _decode(io.BytesIO(self.data), self.name)


class StreamTextSink:
    def __init__(self, stream: TextIO | None = None):
        self.stream = stream

    def write(self, text: str) -> None:
        stream = self.stream if self.stream is not None else sys.stdout
        stream.write(text)
        stream.flush()


class FileTextSink:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def write(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")


def render(source: ImageSource, sink: TextSink, width: int) -> str:
    """Load an image from ``source``, convert it and hand the text to ``sink``."""
    text = image_to_ascii(source.load(), width)
    sink.write(text)
    return text
