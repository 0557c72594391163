import sys
from typing import List, Optional, TextIO, Tuple

from .cells import RGB, Cell, CellBuffer

ESC = "\x1b"
RESET = f"{ESC}[0m"

UPPER_HALF = "\u2580"  # ▀
LOWER_HALF = "\u2584"  # ▄

Style = Tuple[Optional[RGB], Optional[RGB]]  # (fg, bg)


def cell_glyph(cell: Cell) -> Tuple[str, Style]:
    """Pick the character and (fg, bg) colors that draw one cell."""
    upper = cell.upper_block.rgb if cell.upper_block.is_opaque else None
    lower = cell.lower_block.rgb if cell.lower_block.is_opaque else None

    if upper is not None:
        return UPPER_HALF, (upper, lower)
    if lower is not None:
        return LOWER_HALF, (lower, None)
    if cell.char is not None:
        return cell.char, (cell.char_color, None)
    return " ", (None, None)


def _sgr(style: Style) -> str:
    fg, bg = style
    parts = [RESET]
    if fg is not None:
        parts.append(f"{ESC}[38;2;{fg[0]};{fg[1]};{fg[2]}m")
    if bg is not None:
        parts.append(f"{ESC}[48;2;{bg[0]};{bg[1]};{bg[2]}m")
    return "".join(parts)


def cells_to_ansi_lines(buffer: CellBuffer) -> List[str]:
    """Return one 24-bit ANSI-colored line per buffer row."""
    out_lines = []
    for cells in buffer.rows():
        prev: Optional[Style] = None
        row = []
        for cell in cells:
            ch, style = cell_glyph(cell)

            if style == (None, None):
                if prev is not None:
                    row.append(RESET)
                    prev = None
                row.append(ch)
                continue

            if style != prev:
                row.append(_sgr(style))
                prev = style

            row.append(ch)

        row.append(RESET)
        out_lines.append("".join(row))
    return out_lines


def paint(buffer: CellBuffer, stream: Optional[TextIO] = None) -> None:
    """Write the buffer to `stream` (stdout by default)."""
    if stream is None:
        stream = sys.stdout
    for line in cells_to_ansi_lines(buffer):
        stream.write(line + "\n")
    stream.flush()
