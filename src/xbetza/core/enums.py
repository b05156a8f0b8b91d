"""Core enumerations for the XBetza domain."""

from __future__ import annotations

from enum import Enum, IntEnum


class SquareState(IntEnum):
    """Occupancy of a board square as seen by the moving side."""

    EMPTY = 0
    FRIENDLY = 1
    ENEMY = 2

    def __str__(self) -> str:
        return self.name.lower()


class MoveKind(IntEnum):
    """Traversal algorithm used for a compiled move atom."""

    LEAP = 0
    SLIDE = 1
    HOP = 2

    def __str__(self) -> str:
        return self.name.lower()


class HopStyle(Enum):
    """Hopper flavour selected by the hop letter (``g`` or ``k``)."""

    GRASSHOPPER = "grasshopper"
    CANNON = "cannon"

    def __str__(self) -> str:
        return self.value


class Direction(Enum):
    """Direction restriction letters (``f b l r v s``).

    Forward is increasing ``y``; the geometry adapter mirrors it for sides
    that face the other way.
    """

    FORWARD = "f"
    BACKWARD = "b"
    LEFT = "l"
    RIGHT = "r"
    VERTICAL = "v"
    SIDEWAYS = "s"

    def matches(self, dx: int, dy: int) -> bool:
        if self is Direction.FORWARD:
            return dy > 0
        if self is Direction.BACKWARD:
            return dy < 0
        if self is Direction.LEFT:
            return dx < 0
        if self is Direction.RIGHT:
            return dx > 0
        if self is Direction.VERTICAL:
            return abs(dy) > abs(dx)
        return abs(dx) > abs(dy)


class AtomFamily(IntEnum):
    """Named leaper / rider families addressable by a base-atom letter."""

    WAZIR = 1
    FERZ = 2
    KNIGHT = 3
    DABBABA = 4
    ALFIL = 5
    ELEPHANT = 6
    CAMEL = 7
    ZEBRA = 8
    NIGHTRIDER = 9
    GIRAFFE = 10
    SQUIRREL = 11
    PAWN = 12
    ROOK = 13
    BISHOP = 14
    QUEEN = 15
    KING = 16

    def __str__(self) -> str:
        return self.name.lower()


class Orientation(IntEnum):
    """Which way "forward" points on the board for the moving side."""

    NORTH = 0  # towards increasing y
    SOUTH = 1  # towards decreasing y

    @property
    def opposite(self) -> Orientation:
        return Orientation(1 - self.value)
