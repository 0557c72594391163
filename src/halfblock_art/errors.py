"""Exception types raised by halfblock_art."""


class HalfblockError(Exception):
    """Base class for every error raised by this package."""


# -----------------------------
# Argument-level errors (fatal)
# -----------------------------

class PaddingError(HalfblockError, ValueError):
    pass


class PaddingParseError(PaddingError):
    def __init__(self, text: str):
        super().__init__(f"Invalid input: {text}")
        self.text = text


class PaddingArityError(PaddingError):
    def __init__(self, count: int):
        super().__init__("Invalid number of values")
        self.count = count


# -----------------------------
# Per-image errors (collected)
# -----------------------------

class ImageLoadError(HalfblockError):
    """An input path that could not be turned into an image."""

    reason = "Failed to load image"

    def __init__(self, path: str, reason: str | None = None):
        if reason is not None:
            self.reason = reason
        self.path = path
        super().__init__(str(self))

    def __str__(self):
        # lone surrogates from undecodable file names cannot be printed as-is
        shown = self.path.encode("utf-8", "backslashreplace").decode("utf-8")
        return f"{self.reason}: {shown}"


class InvalidPathError(ImageLoadError):
    reason = "Invalid characters in path"


class DecodeError(ImageLoadError):
    reason = "Failed to decode image"


class ScaleError(ImageLoadError):
    reason = "Scaled image is empty"
