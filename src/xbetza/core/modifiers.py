"""Modifier table and the per-atom modifier record.

Modifier letters are lower case and always precede the base-atom letter they
apply to. Letters accumulate into a :class:`ModifierSet`; the override rule
is applied once, by :meth:`ModifierSet.normalized`, after the whole run has
been read, so the result does not depend on letter order.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from xbetza.core.enums import Direction, HopStyle
from xbetza.core.types import DeltaSet

# Letter → boolean field switched on by it.
FLAG_LETTERS: dict[str, str] = {
    "m": "move_only",
    "c": "capture_only",
    "o": "must_capture_first",
    "x": "must_not_capture_first",
    "y": "capture_then_leap",
    "z": "zigzag",
    "t": "take_and_continue",
    "u": "unblockable",
    "p": "requires_clear_path",
    "a": "again_rider",
}

# Letter → hop style; each occurrence also adds one hurdle.
HOP_LETTERS: dict[str, HopStyle] = {
    "g": HopStyle.GRASSHOPPER,
    "k": HopStyle.CANNON,
}

DIRECTION_LETTERS: dict[str, Direction] = {d.value: d for d in Direction}


def is_modifier_letter(char: str) -> bool:
    return char in FLAG_LETTERS or char in HOP_LETTERS or char in DIRECTION_LETTERS


@dataclass(frozen=True, slots=True)
class ModifierSet:
    """Resolved flags attached to one notation atom."""

    move_only: bool = False
    capture_only: bool = False
    must_capture_first: bool = False
    must_not_capture_first: bool = False
    capture_then_leap: bool = False
    zigzag: bool = False
    take_and_continue: bool = False
    unblockable: bool = False
    requires_clear_path: bool = False
    again_rider: bool = False
    hop_count: int = 0
    hop_style: HopStyle | None = None
    allowed_directions: frozenset[Direction] | None = None

    @property
    def directions_restricted(self) -> bool:
        return self.allowed_directions is not None

    # ── Accumulation ─────────────────────────────────────────────────────

    def with_letter(self, letter: str) -> ModifierSet:
        """Return a copy with modifier *letter* applied."""
        field = FLAG_LETTERS.get(letter)
        if field is not None:
            return replace(self, **{field: True})

        style = HOP_LETTERS.get(letter)
        if style is not None:
            return replace(self, hop_style=style, hop_count=self.hop_count + 1)

        direction = DIRECTION_LETTERS.get(letter)
        if direction is not None:
            current = self.allowed_directions or frozenset()
            return replace(self, allowed_directions=current | {direction})

        raise ValueError(f"Invalid modifier letter: {letter!r}")

    def normalized(self) -> ModifierSet:
        """Apply the override rule: capture-then-leap clears capture gating."""
        if self.capture_then_leap:
            return replace(self, must_capture_first=False, must_not_capture_first=False)
        return self

    def filter_deltas(self, deltas: DeltaSet) -> DeltaSet:
        """Keep deltas matching any allowed direction, preserving order."""
        if self.allowed_directions is None:
            return deltas
        allowed = self.allowed_directions
        return tuple(d for d in deltas if any(a.matches(*d) for a in allowed))
