"""Compiled move-atom value object."""

from __future__ import annotations

from dataclasses import dataclass, field

from xbetza.core.enums import AtomFamily, HopStyle, MoveKind
from xbetza.core.modifiers import ModifierSet
from xbetza.core.types import DeltaSet


@dataclass(frozen=True, slots=True)
class MoveAtom:
    """One compiled notation atom, ready for move generation.

    ``max_steps`` is ``None`` for unbounded riders.
    """

    family: AtomFamily
    kind: MoveKind
    deltas: DeltaSet
    max_steps: int | None = 1
    modifiers: ModifierSet = field(default_factory=ModifierSet)
    notation: str = ""

    # ── Derived views ────────────────────────────────────────────────────

    @property
    def hop_count(self) -> int:
        return self.modifiers.hop_count

    @property
    def hop_style(self) -> HopStyle | None:
        return self.modifiers.hop_style

    @property
    def is_unbounded(self) -> bool:
        return self.max_steps is None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.notation or str(self.family)
