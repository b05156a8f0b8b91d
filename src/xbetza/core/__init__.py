"""Core domain layer: XBetza compilation and move generation, zero dependencies.

Quick start::

    from xbetza.core import GridBoard, Piece

    knight = Piece.from_notation("knight", "N")
    board = GridBoard.from_rows(["....."] * 5)
    print(sorted(knight.destinations(2, 2, board)))
"""

from xbetza.core.atoms import BASE_ATOMS, FAMILY_DELTAS, BaseAtom
from xbetza.core.board import BoardQuery, GridBoard
from xbetza.core.enums import (
    AtomFamily,
    Direction,
    HopStyle,
    MoveKind,
    Orientation,
    SquareState,
)
from xbetza.core.geometry import (
    SQUARE_GEOMETRY,
    Geometry,
    GeometryContext,
    SquareGeometry,
    apply_geometry,
)
from xbetza.core.modifiers import ModifierSet
from xbetza.core.move import MoveAtom
from xbetza.core.move_generator import MoveGenerator, generate_moves
from xbetza.core.notation import UnknownAtomError, compile_notation, tokenize
from xbetza.core.piece import Piece
from xbetza.core.types import Coord, Delta, DeltaSet

__all__ = [
    # Enums
    "AtomFamily",
    "Direction",
    "HopStyle",
    "MoveKind",
    "Orientation",
    "SquareState",
    # Types
    "Coord",
    "Delta",
    "DeltaSet",
    # Tables
    "BASE_ATOMS",
    "FAMILY_DELTAS",
    "BaseAtom",
    # Domain objects
    "BoardQuery",
    "GridBoard",
    "ModifierSet",
    "MoveAtom",
    "MoveGenerator",
    "Piece",
    # Geometry
    "SQUARE_GEOMETRY",
    "Geometry",
    "GeometryContext",
    "SquareGeometry",
    "apply_geometry",
    # Notation / generation
    "UnknownAtomError",
    "compile_notation",
    "generate_moves",
    "tokenize",
]
