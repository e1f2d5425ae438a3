"""Tile - a single grid cell with its pathfinding state."""
from __future__ import annotations

from tilemaze.types import MAX_DISTANCE, Coord, TileType


class Tile:
    """One addressable cell of a TileMap.

    Path Tree links are stored as coordinates; the owning TileMap resolves
    them. ``successor`` is the next hop towards the exit and
    ``predecessors`` holds every tile whose successor is this one.
    """

    __slots__ = ("_x", "_y", "type", "visited", "distance", "successor", "predecessors")

    def __init__(self, x: int, y: int, tile_type: TileType) -> None:
        self._x = x
        self._y = y
        self.type = tile_type
        self.visited = False
        self.distance = MAX_DISTANCE
        self.successor: Coord | None = None
        self.predecessors: set[Coord] = set()

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def pos(self) -> Coord:
        return (self._x, self._y)

    @property
    def reachable(self) -> bool:
        return self.distance < MAX_DISTANCE

    def reset(self) -> None:
        """Forget all pathfinding state."""
        self.visited = False
        self.distance = MAX_DISTANCE
        self.successor = None
        self.predecessors.clear()

    def __repr__(self) -> str:
        return f"Tile({self._x}, {self._y}, {self.type.name})"
