class ConversionError(ValueError):
    """Base class for failures raised while turning an image into text."""


class InvalidWidth(ConversionError):
    def __init__(self, width):
        super().__init__(f"Width must be a positive integer, got {width!r}")
        self.width = width


class UnsupportedImage(ConversionError):
    pass


class DegenerateImage(UnsupportedImage):
    def __init__(self, width: int, height: int):
        super().__init__(f"Image has zero area: {width}x{height}")
        self.width = width
        self.height = height
