"""Destination generation for compiled XBetza atoms.

Each atom is generated independently and the results are concatenated in
atom order. Off-board squares simply end the current direction; generation
never raises.
"""

from __future__ import annotations

from collections.abc import Iterable

from xbetza.core.board import BoardQuery
from xbetza.core.enums import MoveKind, SquareState
from xbetza.core.modifiers import ModifierSet
from xbetza.core.move import MoveAtom
from xbetza.core.types import Coord, Delta, DeltaSet, path_offsets


def can_land(mods: ModifierSet, state: SquareState) -> bool:
    """Landing-eligibility rule shared by leaps, hops and plain slides."""
    if state is SquareState.EMPTY:
        return not (mods.capture_only or mods.must_capture_first)
    if state is SquareState.ENEMY:
        return not (mods.move_only or mods.must_not_capture_first)
    return False


def zigzag_delta(pattern: DeltaSet, step: int) -> Delta:
    """Delta active at *step* (1-based): odd steps use the first entry."""
    return pattern[(step - 1) % len(pattern)]


class MoveGenerator:
    """Enumerates destination squares of move atoms on a board snapshot.

    The generator never mutates the board, so one instance can be shared
    across origins and pieces.
    """

    __slots__ = ("_board",)

    def __init__(self, board: BoardQuery) -> None:
        self._board = board

    # -- Public API ---------------------------------------------------------

    def generate(self, atoms: Iterable[MoveAtom], x: int, y: int) -> list[Coord]:
        """Destinations of every atom from origin ``(x, y)``.

        Duplicates across atoms are kept.
        """
        out: list[Coord] = []
        for atom in atoms:
            if atom.kind == MoveKind.LEAP:
                self._gen_leap(atom, x, y, out)
            elif atom.kind == MoveKind.SLIDE:
                self._gen_slide(atom, x, y, out)
            else:
                self._gen_hop(atom, x, y, out)
        return out

    # -- Helpers ------------------------------------------------------------

    def _path_clear(self, x: int, y: int, dx: int, dy: int) -> bool:
        board = self._board
        return all(
            board.get(x + px, y + py) is SquareState.EMPTY
            for px, py in path_offsets(dx, dy)
        )

    def _capture_then_leap(
        self,
        state: SquareState,
        nx: int,
        ny: int,
        dx: int,
        dy: int,
        out: list[Coord],
    ) -> None:
        # First stage must hit an enemy, second stage must land on empty.
        if state is not SquareState.ENEMY:
            return
        lx, ly = nx + dx, ny + dy
        if self._board.get(lx, ly) is SquareState.EMPTY:
            out.append((lx, ly))

    # -- Leap ---------------------------------------------------------------

    def _gen_leap(self, atom: MoveAtom, x: int, y: int, out: list[Coord]) -> None:
        board = self._board
        mods = atom.modifiers
        for dx, dy in atom.deltas:
            nx, ny = x + dx, y + dy
            state = board.get(nx, ny)
            if state is None:
                continue
            if mods.requires_clear_path and not self._path_clear(x, y, dx, dy):
                continue
            if mods.capture_then_leap:
                self._capture_then_leap(state, nx, ny, dx, dy, out)
            elif can_land(mods, state):
                out.append((nx, ny))

    # -- Slide --------------------------------------------------------------

    def _gen_slide(self, atom: MoveAtom, x: int, y: int, out: list[Coord]) -> None:
        if atom.modifiers.zigzag and len(atom.deltas) >= 2:
            self._walk(atom, x, y, atom.deltas[:2], out)
            return
        for delta in atom.deltas:
            self._walk(atom, x, y, (delta,), out)

    def _walk(
        self,
        atom: MoveAtom,
        x: int,
        y: int,
        pattern: DeltaSet,
        out: list[Coord],
    ) -> None:
        board = self._board
        mods = atom.modifiers
        limit = atom.max_steps
        step = 1
        px, py = x, y
        while limit is None or step <= limit:
            dx, dy = zigzag_delta(pattern, step)
            nx, ny = x + dx * step, y + dy * step
            state = board.get(nx, ny)
            if state is None:
                break
            if mods.requires_clear_path and not self._path_clear(px, py, nx - px, ny - py):
                break

            if mods.take_and_continue:
                emit = state is not SquareState.FRIENDLY
                stop = state is SquareState.FRIENDLY
            else:
                emit = can_land(mods, state)
                stop = state is not SquareState.EMPTY

            if emit:
                out.append((nx, ny))
            if stop and not mods.unblockable:
                break
            px, py = nx, ny
            step += 1

    # -- Hop ----------------------------------------------------------------

    def _gen_hop(self, atom: MoveAtom, x: int, y: int, out: list[Coord]) -> None:
        board = self._board
        mods = atom.modifiers
        hurdles = atom.hop_count

        for dx, dy in atom.deltas:
            cx, cy = x + dx, y + dy
            hops = 0
            while hops < hurdles:
                state = board.get(cx, cy)
                if state is None:
                    break
                if state is not SquareState.EMPTY:
                    hops += 1
                cx += dx
                cy += dy
            if hops < hurdles:
                continue

            state = board.get(cx, cy)
            if state is None:
                continue
            if mods.capture_then_leap:
                self._capture_then_leap(state, cx, cy, dx, dy, out)
            elif can_land(mods, state):
                out.append((cx, cy))


def generate_moves(
    atoms: Iterable[MoveAtom],
    x: int,
    y: int,
    board: BoardQuery,
) -> list[Coord]:
    """Destinations of *atoms* from ``(x, y)`` on *board*."""
    return MoveGenerator(board).generate(atoms, x, y)
