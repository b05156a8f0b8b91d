"""Board geometry adapters.

The move generator only ever sees integer ``(dx, dy)`` pairs. A geometry
turns the abstract deltas of a compiled atom into board-relative ones for a
given :class:`GeometryContext`, once, when a piece is built.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Protocol

from xbetza.core.enums import Orientation
from xbetza.core.move import MoveAtom
from xbetza.core.types import Delta

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class GeometryContext:
    """Board dimensions and side orientation used to resolve deltas."""

    board_width: int = 8
    board_height: int = 8
    orientation: Orientation = Orientation.NORTH

    def fits(self, delta: Delta) -> bool:
        """Whether *delta* can land anywhere on a board of this size."""
        dx, dy = delta
        return abs(dx) < self.board_width and abs(dy) < self.board_height


class Geometry(Protocol):
    """Maps abstract deltas to board-relative deltas."""

    def transform(self, delta: Delta, context: GeometryContext) -> Delta: ...


class SquareGeometry:
    """Rectangular square-cell board; south-facing sides mirror ``dy``."""

    __slots__ = ()

    def transform(self, delta: Delta, context: GeometryContext) -> Delta:
        dx, dy = delta
        if context.orientation == Orientation.SOUTH:
            return (dx, -dy)
        return (dx, dy)


SQUARE_GEOMETRY = SquareGeometry()


def apply_geometry(atom: MoveAtom, geometry: Geometry, context: GeometryContext) -> MoveAtom:
    """Return *atom* with its deltas resolved for *context*."""
    resolved = [geometry.transform(d, context) for d in atom.deltas]
    kept = tuple(d for d in resolved if context.fits(d))
    if len(kept) != len(resolved):
        _LOGGER.debug(
            "Dropped %d deltas of %s that cannot fit a %dx%d board",
            len(resolved) - len(kept),
            atom,
            context.board_width,
            context.board_height,
        )
    return replace(atom, deltas=kept)
