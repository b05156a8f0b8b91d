"""Piece value object: a notation string compiled for one board context."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from xbetza.core.board import BoardQuery
from xbetza.core.geometry import SQUARE_GEOMETRY, Geometry, GeometryContext, apply_geometry
from xbetza.core.move import MoveAtom
from xbetza.core.move_generator import generate_moves
from xbetza.core.notation import compile_notation
from xbetza.core.types import Coord

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable piece definition with board-resolved move atoms."""

    id: str
    notation: str
    atoms: tuple[MoveAtom, ...]
    context: GeometryContext = GeometryContext()

    @classmethod
    def from_notation(
        cls,
        piece_id: str,
        notation: str,
        context: GeometryContext | None = None,
        geometry: Geometry = SQUARE_GEOMETRY,
    ) -> Piece:
        """Compile *notation*, e.g. ``'mfWcfF'``, and resolve it for *context*.

        Raises :class:`~xbetza.core.notation.UnknownAtomError` on bad notation.
        """
        ctx = context if context is not None else GeometryContext()
        atoms = tuple(apply_geometry(a, geometry, ctx) for a in compile_notation(notation))
        _LOGGER.debug("Built piece %s from %r (%d atoms)", piece_id, notation, len(atoms))
        return cls(piece_id, notation, atoms, ctx)

    # ── Move generation ──────────────────────────────────────────────────

    def generate_moves(self, x: int, y: int, board: BoardQuery) -> list[Coord]:
        """Destinations from ``(x, y)``; may contain duplicates across atoms."""
        return generate_moves(self.atoms, x, y, board)

    def destinations(self, x: int, y: int, board: BoardQuery) -> set[Coord]:
        """De-duplicated destinations from ``(x, y)``."""
        return set(self.generate_moves(x, y, board))

    def __str__(self) -> str:
        return f"{self.id} ({self.notation})"
