import logging
from typing import Optional, Sequence

import numpy as np
from PIL import Image

from .cells import NO_PIXEL, TRANSPARENT, BlockColor, Cell, CellBuffer
from .padding import Padding

logger = logging.getLogger(__name__)


# -----------------------------
# Pixel classification
# -----------------------------

def pixel_to_block(pixel: Optional[Sequence[int]]) -> BlockColor:
    """
    Map one RGBA pixel (or None when nothing was sampled) to a block color.

    Only fully opaque pixels keep their color; any alpha below 255 is
    blank. There is no blending.
    """
    if pixel is None:
        return NO_PIXEL
    r, g, b, a = (int(c) for c in pixel)
    if a == 255:
        return BlockColor.opaque(r, g, b)
    return TRANSPARENT


def _pixel_at(pixels: np.ndarray, x: int, y: int) -> Optional[np.ndarray]:
    h, w = pixels.shape[:2]
    if 0 <= x < w and 0 <= y < h:
        return pixels[y, x]
    return None


# -----------------------------
# Cell rendering
# -----------------------------

def render_cells(img: Image.Image, padding: Optional[Padding] = None) -> CellBuffer:
    """
    Walk the padded canvas two pixel rows at a time and build one cell per
    (column, row pair).

    An odd canvas height drops the last unpaired row. The padding test is
    made once per cell from the upper row (2y) and applies to both halves.
    """
    top, right, bottom, left = padding if padding is not None else (0, 0, 0, 0)
    width = img.width + left + right
    height = img.height + top + bottom
    rows = height // 2

    pixels = np.asarray(img.convert("RGBA"), dtype=np.uint8)
    logger.debug(
        "Rendering %dx%d image on %dx%d canvas -> %dx%d cells",
        img.width, img.height, width, height, width, rows,
    )

    buffer = CellBuffer(width, rows)
    for y in range(rows):
        y2 = y * 2
        for x in range(width):
            if y2 < top or y2 >= height - bottom or x < left or x >= width - right:
                upper = lower = None
            else:
                upper = _pixel_at(pixels, x - left, y2 - top)
                lower = _pixel_at(pixels, x - left, y2 + 1 - top)

            buffer.cells[buffer.index(x, y)] = Cell(
                char=None,
                char_color=None,
                upper_block=pixel_to_block(upper),
                lower_block=pixel_to_block(lower),
            )
    return buffer
