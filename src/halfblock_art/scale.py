import logging
from typing import Tuple

from PIL import Image

# Pillow's bicubic filter is Catmull-Rom (a = -0.5); it antialiases on
# downscale and stays smooth on upscale.
RESAMPLE = Image.Resampling.BICUBIC


def scaled_size(size: Tuple[int, int], factor: float) -> Tuple[int, int]:
    """Multiply (w, h) by factor, truncating toward zero."""
    w, h = size
    return int(w * factor), int(h * factor)


def scale_image(img: Image.Image, factor: float) -> Image.Image:
    """
    Return a new image resized by `factor`.

    The source image is never modified. A factor of exactly 1.0 hands back
    the input unchanged. A result with zero width or height is an error;
    no minimum size is substituted.
    """
    if factor <= 0:
        raise ValueError(f"scale factor must be positive, got {factor}")
    if factor == 1.0:
        return img

    size = scaled_size(img.size, factor)
    logging.getLogger(__name__).debug(
        "Scaling %dx%d by %g -> %dx%d", img.width, img.height, factor, *size
    )
    if size[0] == 0 or size[1] == 0:
        # the caller attaches the path
        raise ValueError(f"scaling {img.width}x{img.height} by {factor} gives {size[0]}x{size[1]}")
    return img.resize(size, resample=RESAMPLE)
