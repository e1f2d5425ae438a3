"""PathSequence - ordered view of a successor chain."""
from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, overload

from tilemaze.types import EXIT, Coord

if TYPE_CHECKING:
    from tilemaze.tile import Tile


class PathSequence(Sequence):
    """Tiles from an origin to the end of its successor chain.

    A path that does not end on the exit is a "no path" answer: it holds
    only the origin. Membership accepts tiles or ``(x, y)`` coordinates.
    """

    def __init__(self, tiles: list[Tile]) -> None:
        if not tiles:
            raise ValueError("PathSequence needs at least an origin tile")
        self._tiles = tuple(tiles)
        self._coords = frozenset(t.pos for t in self._tiles)

    @property
    def origin(self) -> Tile:
        return self._tiles[0]

    @property
    def end(self) -> Tile:
        return self._tiles[-1]

    @property
    def reachable(self) -> bool:
        return self.end.type == EXIT

    @property
    def cost(self) -> int | None:
        """Cost from the origin to the exit, or None when unreachable."""
        if not self.reachable:
            return None
        return self.origin.distance

    def coords(self) -> list[Coord]:
        return [t.pos for t in self._tiles]

    @overload
    def __getitem__(self, index: int) -> Tile: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Tile, ...]: ...

    def __getitem__(self, index: Any) -> Any:
        return self._tiles[index]

    def __len__(self) -> int:
        return len(self._tiles)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, tuple):
            return item in self._coords
        pos = getattr(item, "pos", None)
        return pos is not None and pos in self._coords

    def __repr__(self) -> str:
        return f"PathSequence({self.coords()!r})"
