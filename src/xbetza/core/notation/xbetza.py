"""XBetza notation tokenizing and compilation.

A notation string is a sequence of atoms; each atom is an optional run of
lower-case modifier letters followed by one upper-case base-atom letter::

    >>> [str(a) for a in compile_notation("mWcF")]
    ['mW', 'cF']
"""

from __future__ import annotations

import logging

from xbetza.core.atoms import base_atom, is_atom_letter
from xbetza.core.enums import MoveKind
from xbetza.core.modifiers import ModifierSet, is_modifier_letter
from xbetza.core.move import MoveAtom
from xbetza.core.notation.models import AtomToken

_LOGGER = logging.getLogger(__name__)


class UnknownAtomError(ValueError):
    """Raised for unrecognized characters or a dangling modifier run."""

    def __init__(self, char: str, position: int, reason: str = "unknown token") -> None:
        super().__init__(f"Invalid XBetza notation: {reason} {char!r} at position {position}")
        self.char = char
        self.position = position


def tokenize(notation: str) -> list[AtomToken]:
    """Split *notation* into one token per base-atom letter."""
    tokens: list[AtomToken] = []
    run_start: int | None = None

    for pos, ch in enumerate(notation):
        if is_modifier_letter(ch):
            if run_start is None:
                run_start = pos
            continue
        if not is_atom_letter(ch):
            raise UnknownAtomError(ch, pos)

        start = pos if run_start is None else run_start
        tokens.append(AtomToken(notation[start:pos], ch, start))
        run_start = None

    if run_start is not None:
        raise UnknownAtomError(notation[run_start], run_start, "dangling modifier")
    return tokens


def expand_atom(letter: str, modifiers: ModifierSet, notation: str = "") -> MoveAtom:
    """Build the descriptor for base *letter* carrying *modifiers*."""
    try:
        base = base_atom(letter)
    except ValueError:
        raise UnknownAtomError(letter, 0) from None

    mods = modifiers.normalized()
    unbounded = mods.again_rider or base.rider

    if mods.hop_count > 0:
        kind = MoveKind.HOP
    elif unbounded:
        kind = MoveKind.SLIDE
    else:
        kind = MoveKind.LEAP

    return MoveAtom(
        family=base.family,
        kind=kind,
        deltas=mods.filter_deltas(base.deltas),
        max_steps=None if unbounded else 1,
        modifiers=mods,
        notation=notation or letter,
    )


def compile_notation(notation: str) -> list[MoveAtom]:
    """Compile *notation* into move atoms, in source order."""
    atoms: list[MoveAtom] = []
    for token in tokenize(notation):
        mods = ModifierSet()
        for letter in token.modifiers:
            mods = mods.with_letter(letter)
        atom = expand_atom(token.letter, mods, token.text)
        _LOGGER.debug(
            "Compiled %s -> %s, %d deltas, max_steps=%s",
            token.text,
            atom.kind,
            len(atom.deltas),
            atom.max_steps,
        )
        atoms.append(atom)
    return atoms
