"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from xbetza.core.board import GridBoard
from xbetza.core.move_generator import generate_moves
from xbetza.core.notation import compile_notation
from xbetza.core.types import Coord


@pytest.fixture
def open_board() -> GridBoard:
    """Empty 9x9 board; the centre is (4, 4)."""
    return GridBoard(9, 9)


@pytest.fixture
def moves() -> Callable[[str, int, int, GridBoard], list[Coord]]:
    """Compile notation and return sorted destinations from an origin."""

    def _moves(notation: str, x: int, y: int, board: GridBoard) -> list[Coord]:
        return sorted(generate_moves(compile_notation(notation), x, y, board))

    return _moves
