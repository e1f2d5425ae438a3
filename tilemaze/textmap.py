"""Text maps: build and print a TileMap from rows of tile symbols."""
from __future__ import annotations

from collections.abc import Sequence

from tilemaze.grid import TileMap
from tilemaze.path import PathSequence
from tilemaze.types import ENTRY, EXIT, FREE, TILE_SYMBOLS, Coord, TileType

PATH_SYMBOL = "*"


def parse_rows(rows: Sequence[str]) -> TileMap:
    """Build a TileMap from equal-length rows, e.g. ``["E..", ".#.", "..X"]``.

    Symbols: ``E`` entry, ``X`` exit, ``.`` free, ``#`` wall.
    """
    if not rows or not rows[0]:
        raise ValueError("text map needs at least one non-empty row")
    width = len(rows[0])
    layout: dict[Coord, TileType] = {}
    counts = {ENTRY.symbol: 0, EXIT.symbol: 0}

    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(f"row {y} has length {len(row)}, expected {width}")
        for x, symbol in enumerate(row):
            tile_type = TILE_SYMBOLS.get(symbol)
            if tile_type is None:
                raise ValueError(f"unknown tile symbol {symbol!r} at ({x}, {y})")
            if symbol in counts:
                counts[symbol] += 1
            if tile_type != FREE:
                layout[(x, y)] = tile_type

    for symbol, count in counts.items():
        if count > 1:
            raise ValueError(f"text map has {count} {symbol!r} tiles, at most one allowed")

    tilemap = TileMap(width, len(rows))
    tilemap.set_tile_types(layout)
    return tilemap


def format_rows(tilemap: TileMap, path: PathSequence | None = None) -> list[str]:
    """Render a TileMap as rows of symbols, marking ``path`` tiles with ``*``."""
    rows: list[str] = []
    for y in range(tilemap.height):
        chars: list[str] = []
        for x in range(tilemap.width):
            tile = tilemap.tile(x, y)
            if path is not None and (x, y) in path and tile.type not in (ENTRY, EXIT):
                chars.append(PATH_SYMBOL)
            else:
                chars.append(tile.type.symbol)
        rows.append("".join(chars))
    return rows
