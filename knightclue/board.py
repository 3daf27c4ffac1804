"""The board map: a square grid of tile codes read from a text file."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from pathlib import Path

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080
BOARD_CELLS = 25
CELL_PIXELS = 32
TILE_IMAGE_COUNT = 17

MAP_SIZE = 27
DEFAULT_MAP_PATH = Path("RESSOURCES/MAP/plateau.txt")


@dataclass(frozen=True)
class BoardMap:
    """A MAP_SIZE x MAP_SIZE grid of single-character tile codes."""

    rows: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.rows) != MAP_SIZE or any(len(row) != MAP_SIZE for row in self.rows):
            raise ValueError(f"board map must be {MAP_SIZE} rows of {MAP_SIZE} tiles")

    @classmethod
    def from_text(cls, text: str) -> BoardMap:
        """Build a map from text holding at least MAP_SIZE lines of MAP_SIZE tiles."""
        lines = text.splitlines()
        if len(lines) < MAP_SIZE:
            raise ValueError(f"board map has {len(lines)} rows, expected {MAP_SIZE}")
        rows = []
        for number, line in enumerate(lines[:MAP_SIZE], start=1):
            if len(line) < MAP_SIZE:
                raise ValueError(f"board map row {number} is shorter than {MAP_SIZE} tiles")
            rows.append(line[:MAP_SIZE])
        return cls(tuple(rows))

    @classmethod
    def load(cls, path: str | PathLike[str] = DEFAULT_MAP_PATH) -> BoardMap:
        """Read a map from a text file."""
        return cls.from_text(Path(path).read_text(encoding="utf-8"))

    def tile(self, x: int, y: int) -> str:
        """Tile code at column x, row y."""
        if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
            raise IndexError(f"tile ({x}, {y}) is outside the board")
        return self.rows[y][x]

    def render(self) -> str:
        """The map as text, one line per row."""
        return "\n".join(self.rows)