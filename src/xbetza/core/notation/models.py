"""Shared notation-layer data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AtomToken:
    """A base-atom letter together with the modifier run preceding it."""

    modifiers: str
    letter: str
    position: int

    @property
    def text(self) -> str:
        return self.modifiers + self.letter
