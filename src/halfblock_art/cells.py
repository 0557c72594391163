from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

RGB = Tuple[int, int, int]


class BlockKind(Enum):
    NO_PIXEL = "no-pixel"        # padding or outside the image
    TRANSPARENT = "transparent"  # pixel exists, alpha < 255
    OPAQUE = "opaque"            # pixel exists, alpha == 255


@dataclass(frozen=True)
class BlockColor:
    """Color of one half of a cell. `rgb` is set only for OPAQUE."""

    kind: BlockKind
    rgb: Optional[RGB] = None

    @classmethod
    def opaque(cls, r: int, g: int, b: int) -> "BlockColor":
        return cls(BlockKind.OPAQUE, (r, g, b))

    @property
    def is_opaque(self) -> bool:
        return self.kind is BlockKind.OPAQUE


NO_PIXEL = BlockColor(BlockKind.NO_PIXEL)
TRANSPARENT = BlockColor(BlockKind.TRANSPARENT)


@dataclass(frozen=True)
class Cell:
    char: Optional[str] = None
    char_color: Optional[RGB] = None
    upper_block: BlockColor = NO_PIXEL
    lower_block: BlockColor = NO_PIXEL


@dataclass
class CellBuffer:
    """Row-major grid of `width * height` cells."""

    width: int
    height: int
    cells: List[Cell] = field(default_factory=list)

    def __post_init__(self):
        if not self.cells:
            self.cells = [Cell()] * (self.width * self.height)
        elif len(self.cells) != self.width * self.height:
            raise ValueError(
                f"expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    def index(self, x: int, y: int) -> int:
        return y * self.width + x

    def get(self, x: int, y: int) -> Cell:
        return self.cells[self.index(x, y)]

    def rows(self) -> Iterator[List[Cell]]:
        for y in range(self.height):
            start = y * self.width
            yield self.cells[start:start + self.width]
