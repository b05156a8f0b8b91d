"""Base-atom table: notation letter → family → canonical delta set."""

from __future__ import annotations

from dataclasses import dataclass

from xbetza.core.enums import AtomFamily
from xbetza.core.types import DeltaSet, symmetric_deltas

ORTHO: DeltaSet = symmetric_deltas((1, 0))
DIAG: DeltaSet = symmetric_deltas((1, 1))
KNIGHT: DeltaSet = symmetric_deltas((1, 2))
DABBABA: DeltaSet = symmetric_deltas((2, 0))
ALFIL: DeltaSet = symmetric_deltas((2, 2))
ELEPHANT: DeltaSet = symmetric_deltas((1, 1), (2, 2))
CAMEL: DeltaSet = symmetric_deltas((1, 3))
ZEBRA: DeltaSet = symmetric_deltas((2, 3))
GIRAFFE: DeltaSet = symmetric_deltas((1, 4))
SQUIRREL: DeltaSet = symmetric_deltas((2, 0), (2, 2), (1, 2))
PAWN: DeltaSet = ((0, 1),)
ROYAL: DeltaSet = symmetric_deltas((1, 0), (1, 1))


@dataclass(frozen=True, slots=True)
class BaseAtom:
    """Immutable table entry for one base-atom letter."""

    letter: str
    family: AtomFamily
    deltas: DeltaSet
    rider: bool = False


_TABLE: tuple[BaseAtom, ...] = (
    BaseAtom("W", AtomFamily.WAZIR, ORTHO),
    BaseAtom("F", AtomFamily.FERZ, DIAG),
    BaseAtom("N", AtomFamily.KNIGHT, KNIGHT),
    BaseAtom("D", AtomFamily.DABBABA, DABBABA),
    BaseAtom("A", AtomFamily.ALFIL, ALFIL),
    BaseAtom("E", AtomFamily.ELEPHANT, ELEPHANT),
    BaseAtom("C", AtomFamily.CAMEL, CAMEL),
    BaseAtom("Z", AtomFamily.ZEBRA, ZEBRA),
    BaseAtom("H", AtomFamily.NIGHTRIDER, KNIGHT, rider=True),
    BaseAtom("G", AtomFamily.GIRAFFE, GIRAFFE),
    BaseAtom("S", AtomFamily.SQUIRREL, SQUIRREL),
    BaseAtom("P", AtomFamily.PAWN, PAWN),
    # Standard Betza shorthands
    BaseAtom("R", AtomFamily.ROOK, ORTHO, rider=True),
    BaseAtom("B", AtomFamily.BISHOP, DIAG, rider=True),
    BaseAtom("Q", AtomFamily.QUEEN, ROYAL, rider=True),
    BaseAtom("K", AtomFamily.KING, ROYAL),
)

BASE_ATOMS: dict[str, BaseAtom] = {atom.letter: atom for atom in _TABLE}
FAMILY_DELTAS: dict[AtomFamily, DeltaSet] = {atom.family: atom.deltas for atom in _TABLE}


def is_atom_letter(char: str) -> bool:
    return char in BASE_ATOMS


def base_atom(letter: str) -> BaseAtom:
    """Look up the table entry for *letter*, e.g. ``'N'`` → knight."""
    try:
        return BASE_ATOMS[letter]
    except KeyError:
        raise ValueError(f"Invalid base-atom letter: {letter!r}") from None
