"""Tests for tile types and error classes."""
from __future__ import annotations

import dataclasses

import pytest

from tilemaze.types import (
    ENTRY,
    EXIT,
    FREE,
    MAX_DISTANCE,
    TILE_SYMBOLS,
    WALL,
    GenerationError,
    OutOfBoundsError,
    PathTreeError,
    TileType,
)


class TestBuiltinTypes:
    def test_costs(self) -> None:
        assert ENTRY.path_cost == 1
        assert EXIT.path_cost == 0
        assert FREE.path_cost == 1
        assert WALL.path_cost == MAX_DISTANCE

    def test_only_wall_blocks(self) -> None:
        assert WALL.is_blocking is True
        assert not any(t.is_blocking for t in (ENTRY, EXIT, FREE))

    def test_registries(self) -> None:
        assert TILE_SYMBOLS["E"] is ENTRY
        assert TILE_SYMBOLS["X"] is EXIT
        assert TILE_SYMBOLS["."] is FREE
        assert TILE_SYMBOLS["#"] is WALL

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            FREE.path_cost = 5  # type: ignore[misc]


class TestTileTypeValidation:
    def test_empty_name(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            TileType(name="")

    def test_negative_cost(self) -> None:
        with pytest.raises(ValueError, match="path_cost"):
            TileType(name="mud", path_cost=-1)

    def test_symbol_length(self) -> None:
        with pytest.raises(ValueError, match="symbol"):
            TileType(name="mud", symbol="~~")

    def test_custom_type(self) -> None:
        mud = TileType(name="mud", path_cost=3, symbol="~")
        assert mud.path_cost == 3
        assert mud.is_blocking is False


class TestErrors:
    def test_out_of_bounds_is_value_error(self) -> None:
        err = OutOfBoundsError(4, -1, "nope")
        assert isinstance(err, ValueError)
        assert (err.x, err.y) == (4, -1)

    def test_generation_error_is_runtime_error(self) -> None:
        assert issubclass(GenerationError, RuntimeError)

    def test_path_tree_error_is_assertion(self) -> None:
        assert issubclass(PathTreeError, AssertionError)
