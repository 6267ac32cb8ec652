# actuators/display.py

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
GREEN: Color = (0, 255, 0)


class Display(ABC):
    """Drawing surface shared by the status renderer.

    Coordinates are pixels on a 240x240 panel; ``color`` is an RGB tuple.
    """

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int, color: Color) -> None:
        ...

    @abstractmethod
    def get_rendered_text(self) -> Optional[str]:
        """Return the current frame as text, or None if the backend cannot."""


class SimulationDisplay(Display):
    """Bordered character grid standing in for the panel.

    Pixel coordinates map to cells by integer division with the glyph size.
    Only interior cells are ever written; anything else is clipped.
    """

    def __init__(self, columns: int = 50, rows: int = 15, glyph_width: int = 10, glyph_height: int = 20):
        if columns < 3 or rows < 3:
            raise ValueError("simulated display needs at least 3x3 cells")
        self._columns = columns
        self._rows = rows
        self._glyph_width = glyph_width
        self._glyph_height = glyph_height
        self._grid: List[List[str]] = []
        self.clear()

    def _blank_frame(self) -> List[List[str]]:
        inner = self._columns - 2
        grid = [list("╔" + "═" * inner + "╗")]
        for _ in range(self._rows - 2):
            grid.append(list("║" + " " * inner + "║"))
        grid.append(list("╚" + "═" * inner + "╝"))
        return grid

    def clear(self) -> None:
        self._grid = self._blank_frame()

    def draw_text(self, text: str, x: int, y: int, color: Color) -> None:
        col = x // self._glyph_width
        row = y // self._glyph_height

        # Border rows are never written.
        if row < 1 or row > self._rows - 2:
            return

        line = self._grid[row]
        start = col + 1
        last = self._columns - 2
        for offset, ch in enumerate(text):
            pos = start + offset
            if pos > last:
                break
            if pos >= 1:
                line[pos] = ch

    def get_rendered_text(self) -> Optional[str]:
        return "".join("".join(line) + "\n" for line in self._grid)
