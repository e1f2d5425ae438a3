"""TileMap - tile grid with an incrementally maintained shortest-path tree."""
from __future__ import annotations

import heapq
import logging
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Callable

from tilemaze import mazegen
from tilemaze.path import PathSequence
from tilemaze.tile import Tile
from tilemaze.types import (
    ENTRY,
    EXIT,
    FREE,
    MAX_DISTANCE,
    WALL,
    Coord,
    OutOfBoundsError,
    PathTreeError,
    TileType,
)

if TYPE_CHECKING:
    import random

logger = logging.getLogger(__name__)

ResetHook = Callable[["TileMap", Tile], None]

# Up, down, left, right.
_DIRECTIONS: tuple[Coord, ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))


class TileMap:
    """Dense grid of tiles with one entry, one exit and a Path Tree.

    Distances are measured towards the exit, so a single relaxation pass
    answers the shortest path from every tile at once. Each tile points at
    its successor (next hop to the exit) and remembers its predecessors, which
    lets ``set_wall`` invalidate only the subtree that routed through the new
    wall.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"TileMap dimensions must be positive, got {width}x{height}")
        if width * height >= MAX_DISTANCE:
            raise ValueError(
                f"{width}x{height} map has too many tiles, "
                f"at most {MAX_DISTANCE - 1} are supported"
            )
        self._width = width
        self._height = height
        self._tiles = [Tile(x, y, FREE) for y in range(height) for x in range(width)]
        self._entry: Coord | None = None
        self._exit: Coord | None = None
        self._path_origin: Coord | None = None
        self._path: PathSequence | None = None
        self._on_reset: list[ResetHook] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    # --- Tile access ---

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise OutOfBoundsError(
                x, y, f"({x}, {y}) out of bounds for {self._width}x{self._height} map"
            )

    def _at(self, pos: Coord) -> Tile:
        return self._tiles[pos[1] * self._width + pos[0]]

    def _own(self, tile: Tile) -> None:
        self._check_bounds(tile.x, tile.y)
        if self._at(tile.pos) is not tile:
            raise ValueError(f"{tile!r} does not belong to this map")

    def tile(self, x: int, y: int) -> Tile:
        self._check_bounds(x, y)
        return self._at((x, y))

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def neighbors(self, tile: Tile) -> list[Tile]:
        result: list[Tile] = []
        for dx, dy in _DIRECTIONS:
            nx, ny = tile.x + dx, tile.y + dy
            if 0 <= nx < self._width and 0 <= ny < self._height:
                result.append(self._tiles[ny * self._width + nx])
        return result

    def successor(self, tile: Tile) -> Tile | None:
        if tile.successor is None:
            return None
        return self._at(tile.successor)

    def predecessors(self, tile: Tile) -> list[Tile]:
        return [self._at(pos) for pos in sorted(tile.predecessors)]

    # --- Entry / Exit / retyping ---

    @property
    def entry(self) -> Tile | None:
        return None if self._entry is None else self._at(self._entry)

    @property
    def exit(self) -> Tile | None:
        return None if self._exit is None else self._at(self._exit)

    def set_entry(self, x: int, y: int) -> Tile:
        self.set_tile_type(x, y, ENTRY)
        return self._at((x, y))

    def set_exit(self, x: int, y: int) -> Tile:
        self.set_tile_type(x, y, EXIT)
        return self._at((x, y))

    def set_tile_type(self, x: int, y: int, tile_type: TileType) -> None:
        self.set_tile_types({(x, y): tile_type})

    def set_tile_types(self, types: Mapping[Coord, TileType]) -> None:
        """Retype many tiles, then rebuild the Path Tree once.

        At most one entry and one exit exist: assigning either type moves it
        and turns the previous holder into a free tile.
        """
        for x, y in types:
            self._check_bounds(x, y)
        for pos, tile_type in types.items():
            self._retype(self._at(pos), tile_type)
        self.recompute_all()

    def _retype(self, tile: Tile, tile_type: TileType) -> None:
        pos = tile.pos
        if pos == self._entry and tile_type != ENTRY:
            self._entry = None
        if pos == self._exit and tile_type != EXIT:
            self._exit = None
        if tile_type == ENTRY and self._entry != pos:
            if self._entry is not None:
                self._at(self._entry).type = FREE
            self._entry = pos
        elif tile_type == EXIT and self._exit != pos:
            if self._exit is not None:
                self._at(self._exit).type = FREE
            self._exit = pos
        tile.type = tile_type

    # --- Relaxation ---

    def recompute_all(self) -> int:
        """Rebuild the whole Path Tree. Returns the number of tiles settled."""
        for tile in self._tiles:
            tile.reset()
        settled = self._relax()
        logger.debug("recompute_all settled %d of %d tiles", settled, len(self._tiles))
        self._refresh_path()
        return settled

    def _relax(self) -> int:
        exit_tile = self.exit
        if exit_tile is not None and not exit_tile.visited:
            exit_tile.distance = 0

        heap: list[tuple[int, int, Coord]] = [
            (t.distance, i, t.pos)
            for i, t in enumerate(self._tiles)
            if not t.visited and t.distance < MAX_DISTANCE
        ]
        heapq.heapify(heap)
        counter = len(self._tiles)
        settled = 0

        while heap:
            distance, _, pos = heapq.heappop(heap)
            current = self._at(pos)
            if current.visited or distance != current.distance:
                continue
            current.visited = True
            settled += 1
            for neighbor in self.neighbors(current):
                if neighbor.visited:
                    continue
                candidate = distance + neighbor.type.path_cost
                if candidate < neighbor.distance:
                    self._link(neighbor, current, candidate)
                    heapq.heappush(heap, (candidate, counter, neighbor.pos))
                    counter += 1

        return settled

    def _link(self, tile: Tile, successor: Tile, distance: int) -> None:
        if tile.successor is not None:
            self._at(tile.successor).predecessors.discard(tile.pos)
        tile.distance = distance
        tile.successor = successor.pos
        successor.predecessors.add(tile.pos)

    # --- Walls ---

    def set_wall(self, tile: Tile) -> bool:
        """Turn a tile into a wall and repair the Path Tree around it.

        Returns False, leaving the map untouched, for the entry, the exit and
        tiles that already are walls.
        """
        self._own(tile)
        if tile.type == ENTRY or tile.type == EXIT or tile.type.is_blocking:
            logger.debug("set_wall rejected for %r", tile)
            return False

        tile.type = WALL
        reset = self._invalidate(tile)
        settled = self._relax()
        logger.debug("set_wall %r reset %d tiles, settled %d", tile, len(reset), settled)

        if self._path is not None and any(pos in self._path for pos in reset):
            self._refresh_path()
        return True

    def _invalidate(self, root: Tile) -> list[Coord]:
        # Everything upstream of root loses its path; neighbours of every
        # reset tile become the frontier the relaxation restarts from.
        reset: list[Coord] = []
        stack = [root]
        while stack:
            current = stack.pop()
            if current.successor is not None:
                self._at(current.successor).predecessors.discard(current.pos)
                current.successor = None
            current.distance = MAX_DISTANCE

            for neighbor in self.neighbors(current):
                if not neighbor.type.is_blocking:
                    neighbor.visited = False

            stack.extend(self._at(pos) for pos in current.predecessors)
            current.predecessors.clear()
            reset.append(current.pos)
            for cb in self._on_reset:
                cb(self, current)
        return reset

    def clear_wall(self, tile: Tile) -> bool:
        """Turn a wall back into a free tile. Returns False for non-walls."""
        self._own(tile)
        if tile.type != WALL:
            return False
        tile.type = FREE
        self.recompute_all()
        return True

    def clear_walls(self) -> None:
        self.set_tile_types({t.pos: FREE for t in self._tiles if t.type == WALL})

    # --- Generation ---

    def randomize_walls(
        self,
        wall_spawn_rate: float,
        rng: random.Random | None = None,
        max_attempts: int = mazegen.DEFAULT_MAX_ATTEMPTS,
    ) -> int:
        return mazegen.randomize_walls(
            self, wall_spawn_rate, rng=rng, max_attempts=max_attempts
        )

    def fill_dead_ends(self) -> int:
        return mazegen.fill_dead_ends(self)

    # --- Paths ---

    def path(self, tile: Tile) -> PathSequence:
        """Follow successor links from ``tile`` to the end of its chain."""
        self._own(tile)
        tiles = [tile]
        seen = {tile.pos}
        current = tile
        while current.successor is not None:
            current = self._at(current.successor)
            if current.pos in seen:
                raise PathTreeError(f"successor chain from {tile!r} loops at {current!r}")
            seen.add(current.pos)
            tiles.append(current)
        return PathSequence(tiles)

    def set_path_origin(self, tile: Tile) -> PathSequence:
        self._own(tile)
        self._path_origin = tile.pos
        self._path = self.path(tile)
        return self._path

    @property
    def path_origin(self) -> Tile | None:
        return None if self._path_origin is None else self._at(self._path_origin)

    @property
    def current_path(self) -> PathSequence | None:
        return self._path

    def _refresh_path(self) -> None:
        if self._path_origin is not None:
            self._path = self.path(self._at(self._path_origin))

    # --- Hooks ---

    def on_reset(self, callback: ResetHook) -> None:
        self._on_reset.append(callback)

    def off_reset(self, callback: ResetHook) -> None:
        try:
            self._on_reset.remove(callback)
        except ValueError:
            pass

    # --- Verification ---

    def verify(self) -> None:
        """Check every Path Tree invariant, raising PathTreeError on the first miss."""
        exit_tile = self.exit
        if exit_tile is not None and (exit_tile.successor is not None or exit_tile.distance != 0):
            raise PathTreeError(f"exit {exit_tile!r} must have no successor and distance 0")

        for tile in self._tiles:
            for pos in tile.predecessors:
                pred = self._at(pos)
                if pred.successor != tile.pos:
                    raise PathTreeError(
                        f"{pred!r} is listed as predecessor of {tile!r} but points at {pred.successor}"
                    )

            if tile.successor is None:
                if tile.type != EXIT and tile.distance < MAX_DISTANCE:
                    raise PathTreeError(f"{tile!r} has distance {tile.distance} but no successor")
            else:
                succ = self._at(tile.successor)
                if abs(succ.x - tile.x) + abs(succ.y - tile.y) != 1:
                    raise PathTreeError(f"{tile!r} points at non-adjacent {succ!r}")
                if tile.type.is_blocking or succ.type.is_blocking:
                    raise PathTreeError(f"blocking tile on link {tile!r} -> {succ!r}")
                if tile.pos not in succ.predecessors:
                    raise PathTreeError(f"{tile!r} missing from predecessors of {succ!r}")
                if tile.distance != succ.distance + tile.type.path_cost:
                    raise PathTreeError(
                        f"{tile!r} distance {tile.distance} != "
                        f"{succ.distance} + {tile.type.path_cost}"
                    )

            if tile.type.is_blocking:
                continue
            for neighbor in self.neighbors(tile):
                if neighbor.distance >= MAX_DISTANCE:
                    continue
                if neighbor.distance + tile.type.path_cost < tile.distance:
                    raise PathTreeError(
                        f"{tile!r} distance {tile.distance} is not minimal, "
                        f"{neighbor!r} offers {neighbor.distance + tile.type.path_cost}"
                    )
