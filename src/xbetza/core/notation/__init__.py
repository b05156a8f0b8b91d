"""Notation package: XBetza tokenizing and compilation."""

from xbetza.core.notation.models import AtomToken
from xbetza.core.notation.xbetza import UnknownAtomError, compile_notation, tokenize

__all__ = [
    "AtomToken",
    "UnknownAtomError",
    "compile_notation",
    "tokenize",
]
