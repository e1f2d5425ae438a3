"""Tile type definitions, shared aliases and errors for tilemaze."""
from __future__ import annotations

from dataclasses import dataclass

Coord = tuple[int, int]

# Sentinel "infinite" distance. Also the cost of stepping onto a wall, so a
# wall is priced out of every path as long as real path sums stay below it.
MAX_DISTANCE = 10000


@dataclass(frozen=True)
class TileType:
    """Immutable tile category.

    Attributes:
        name: Unique identifier for this tile type.
        path_cost: Cost of stepping onto a tile of this type (must be >= 0).
        is_blocking: Whether agents can never traverse this tile.
        symbol: One-character glyph used by text maps.
    """

    name: str
    path_cost: int = 1
    is_blocking: bool = False
    symbol: str = "."

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TileType name must be non-empty")
        if self.path_cost < 0:
            raise ValueError(f"path_cost must be >= 0, got {self.path_cost}")
        if len(self.symbol) != 1:
            raise ValueError(f"symbol must be a single character, got {self.symbol!r}")


ENTRY = TileType(name="entry", path_cost=1, symbol="E")
EXIT = TileType(name="exit", path_cost=0, symbol="X")
FREE = TileType(name="free", path_cost=1, symbol=".")
WALL = TileType(name="wall", path_cost=MAX_DISTANCE, is_blocking=True, symbol="#")

TILE_SYMBOLS: dict[str, TileType] = {t.symbol: t for t in (ENTRY, EXIT, FREE, WALL)}


class OutOfBoundsError(ValueError):
    """Raised when a coordinate lies outside the map."""

    def __init__(self, x: int, y: int, message: str) -> None:
        self.x = x
        self.y = y
        super().__init__(message)


class GenerationError(RuntimeError):
    """Raised when no solvable maze could be generated."""


class PathTreeError(AssertionError):
    """Raised when the successor/predecessor links break an invariant."""
