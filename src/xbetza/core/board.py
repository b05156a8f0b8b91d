"""Board query protocol and an in-memory rectangular board snapshot."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

from xbetza.core.enums import SquareState
from xbetza.core.types import Coord

_CHAR_MAP: dict[str, SquareState] = {
    ".": SquareState.EMPTY,
    "F": SquareState.FRIENDLY,
    "E": SquareState.ENEMY,
}
_STATE_CHARS: dict[SquareState, str] = {v: k for k, v in _CHAR_MAP.items()}


class BoardQuery(Protocol):
    """Read-only occupancy view consumed by the move generator."""

    def get(self, x: int, y: int) -> SquareState | None:
        """State of square ``(x, y)``, or ``None`` when off the board."""
        ...


class GridBoard:
    """Immutable ``width`` x ``height`` occupancy grid.

    Row ``0`` of :meth:`from_rows` is ``y == 0``.
    """

    __slots__ = ("_width", "_height", "_squares")

    def __init__(
        self,
        width: int,
        height: int,
        occupied: Iterable[tuple[Coord, SquareState]] = (),
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid board size: {width}x{height}")
        self._width = width
        self._height = height
        squares = [SquareState.EMPTY] * (width * height)
        for (x, y), state in occupied:
            if not self.in_bounds(x, y):
                raise ValueError(f"Square off the board: {(x, y)!r}")
            squares[y * width + x] = state
        self._squares: tuple[SquareState, ...] = tuple(squares)

    # -- Element access -----------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def get(self, x: int, y: int) -> SquareState | None:
        if not self.in_bounds(x, y):
            return None
        return self._squares[y * self._width + x]

    # -- Derived snapshots --------------------------------------------------

    def with_square(self, x: int, y: int, state: SquareState) -> GridBoard:
        """Copy of the board with ``(x, y)`` set to *state*."""
        occupied = [(sq, st) for sq, st in self.occupied() if sq != (x, y)]
        occupied.append(((x, y), state))
        return GridBoard(self._width, self._height, occupied)

    def occupied(self) -> list[tuple[Coord, SquareState]]:
        """Non-empty squares in row-major order."""
        w = self._width
        return [
            ((i % w, i // w), state)
            for i, state in enumerate(self._squares)
            if state is not SquareState.EMPTY
        ]

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> GridBoard:
        """Build from text rows of ``.`` (empty), ``F`` (friendly), ``E`` (enemy)."""
        if not rows:
            raise ValueError("Board needs at least one row")
        width = len(rows[0])
        occupied: list[tuple[Coord, SquareState]] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Invalid board row width at row {y}: {row!r}")
            for x, ch in enumerate(row):
                try:
                    state = _CHAR_MAP[ch]
                except KeyError:
                    raise ValueError(f"Invalid board character: {ch!r}") from None
                if state is not SquareState.EMPTY:
                    occupied.append(((x, y), state))
        return cls(width, len(rows), occupied)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridBoard):
            return NotImplemented
        return (self._width, self._height, self._squares) == (
            other._width,
            other._height,
            other._squares,
        )

    def __hash__(self) -> int:
        return hash((self._width, self._height, self._squares))

    def __repr__(self) -> str:
        w = self._width
        return "\n".join(
            "".join(_STATE_CHARS[s] for s in self._squares[y * w : (y + 1) * w])
            for y in range(self._height)
        )
