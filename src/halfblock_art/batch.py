import logging
import os
import sys
from typing import Iterable, List, Optional, TextIO

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, ImageLoadError, InvalidPathError, ScaleError
from .paint import paint
from .padding import Padding
from .renderer import render_cells
from .scale import scale_image

logger = logging.getLogger(__name__)

SEPARATOR = "\n\n"


def load_image(path: str) -> Image.Image:
    """Open and fully decode `path` as RGBA. The file is closed on return."""
    try:
        os.fsencode(path)
    except UnicodeEncodeError:
        raise InvalidPathError(path) from None
    if "\x00" in path:
        raise InvalidPathError(path)

    try:
        src = Image.open(path)
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(path) from e
    except OSError as e:
        raise DecodeError(path, "Invalid image path") from e

    with src:
        try:
            return src.convert("RGBA")
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            raise DecodeError(path) from e


def render_batch(
    paths: Iterable[str],
    scale: Optional[float] = None,
    padding: Optional[Padding] = None,
    out: Optional[TextIO] = None,
) -> List[ImageLoadError]:
    """
    Decode, scale, render and paint each path in order.

    A path that fails is skipped and its error returned, in input order,
    once every path has been tried. Nothing here stops the loop early.
    """
    if out is None:
        out = sys.stdout

    errors: List[ImageLoadError] = []
    for path in paths:
        try:
            img = load_image(path)
        except ImageLoadError as e:
            logger.warning("%s", e)
            errors.append(e)
            continue
        logger.debug("Loaded %s: %dx%d", path, img.width, img.height)

        if scale is not None and scale != 1.0:
            try:
                img = scale_image(img, scale)
            except ValueError as e:
                logger.warning("Cannot scale %s: %s", path, e)
                errors.append(ScaleError(path))
                continue

        paint(render_cells(img, padding), out)
        out.write(SEPARATOR)

    return errors


def report_errors(errors: Iterable[ImageLoadError], out: Optional[TextIO] = None) -> None:
    if out is None:
        out = sys.stdout
    for err in errors:
        out.write(f"{err}\n")
    out.flush()
