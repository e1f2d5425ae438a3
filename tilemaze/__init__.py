"""tilemaze - Incremental shortest paths over an editable tile maze."""
from tilemaze.config import MazeConfig
from tilemaze.engine import Engine
from tilemaze.game import Game
from tilemaze.grid import TileMap
from tilemaze.monsters import Monster, Swarm
from tilemaze.path import PathSequence
from tilemaze.textmap import format_rows, parse_rows
from tilemaze.tile import Tile
from tilemaze.types import (
    ENTRY,
    EXIT,
    FREE,
    MAX_DISTANCE,
    WALL,
    Coord,
    GenerationError,
    OutOfBoundsError,
    PathTreeError,
    TileType,
)

__all__ = [
    "TileMap",
    "Tile",
    "TileType",
    "PathSequence",
    "ENTRY",
    "EXIT",
    "FREE",
    "WALL",
    "MAX_DISTANCE",
    "Coord",
    "OutOfBoundsError",
    "GenerationError",
    "PathTreeError",
    "parse_rows",
    "format_rows",
    "Engine",
    "Monster",
    "Swarm",
    "MazeConfig",
    "Game",
]
