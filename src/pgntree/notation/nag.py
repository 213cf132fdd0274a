"""Numeric Annotation Glyphs.

Codes are taken from ``chess.pgn`` so both packages agree on their meaning.
"""

from __future__ import annotations

from enum import IntEnum

import chess.pgn

MAX_NAG = 255


class Nag(IntEnum):
    """Commonly used NAG codes; any value in ``0..255`` is valid in PGN."""

    NULL = chess.pgn.NAG_NULL
    GOOD_MOVE = chess.pgn.NAG_GOOD_MOVE
    MISTAKE = chess.pgn.NAG_MISTAKE
    BRILLIANT_MOVE = chess.pgn.NAG_BRILLIANT_MOVE
    BLUNDER = chess.pgn.NAG_BLUNDER
    SPECULATIVE_MOVE = chess.pgn.NAG_SPECULATIVE_MOVE
    DUBIOUS_MOVE = chess.pgn.NAG_DUBIOUS_MOVE
    FORCED_MOVE = chess.pgn.NAG_FORCED_MOVE
    SINGULAR_MOVE = chess.pgn.NAG_SINGULAR_MOVE
    WORST_MOVE = chess.pgn.NAG_WORST_MOVE
    DRAWISH_POSITION = chess.pgn.NAG_DRAWISH_POSITION
    QUIET_POSITION = chess.pgn.NAG_QUIET_POSITION
    ACTIVE_POSITION = chess.pgn.NAG_ACTIVE_POSITION
    UNCLEAR_POSITION = chess.pgn.NAG_UNCLEAR_POSITION
    WHITE_SLIGHT_ADVANTAGE = chess.pgn.NAG_WHITE_SLIGHT_ADVANTAGE
    BLACK_SLIGHT_ADVANTAGE = chess.pgn.NAG_BLACK_SLIGHT_ADVANTAGE
    WHITE_MODERATE_ADVANTAGE = chess.pgn.NAG_WHITE_MODERATE_ADVANTAGE
    BLACK_MODERATE_ADVANTAGE = chess.pgn.NAG_BLACK_MODERATE_ADVANTAGE
    WHITE_DECISIVE_ADVANTAGE = chess.pgn.NAG_WHITE_DECISIVE_ADVANTAGE
    BLACK_DECISIVE_ADVANTAGE = chess.pgn.NAG_BLACK_DECISIVE_ADVANTAGE
    WHITE_ZUGZWANG = chess.pgn.NAG_WHITE_ZUGZWANG
    BLACK_ZUGZWANG = chess.pgn.NAG_BLACK_ZUGZWANG
    WHITE_MODERATE_COUNTERPLAY = chess.pgn.NAG_WHITE_MODERATE_COUNTERPLAY
    BLACK_MODERATE_COUNTERPLAY = chess.pgn.NAG_BLACK_MODERATE_COUNTERPLAY
    WHITE_DECISIVE_COUNTERPLAY = chess.pgn.NAG_WHITE_DECISIVE_COUNTERPLAY
    BLACK_DECISIVE_COUNTERPLAY = chess.pgn.NAG_BLACK_DECISIVE_COUNTERPLAY
    WHITE_MODERATE_TIME_PRESSURE = chess.pgn.NAG_WHITE_MODERATE_TIME_PRESSURE
    BLACK_MODERATE_TIME_PRESSURE = chess.pgn.NAG_BLACK_MODERATE_TIME_PRESSURE
    WHITE_SEVERE_TIME_PRESSURE = chess.pgn.NAG_WHITE_SEVERE_TIME_PRESSURE
    BLACK_SEVERE_TIME_PRESSURE = chess.pgn.NAG_BLACK_SEVERE_TIME_PRESSURE
    NOVELTY = chess.pgn.NAG_NOVELTY

    @property
    def glyph(self) -> str | None:
        """Move-suffix shorthand (``!``, ``?!``…), if the code has one."""
        return NAG_TO_GLYPH.get(self)


GLYPH_TO_NAG: dict[str, int] = {
    "!": chess.pgn.NAG_GOOD_MOVE,
    "?": chess.pgn.NAG_MISTAKE,
    "!!": chess.pgn.NAG_BRILLIANT_MOVE,
    "??": chess.pgn.NAG_BLUNDER,
    "!?": chess.pgn.NAG_SPECULATIVE_MOVE,
    "?!": chess.pgn.NAG_DUBIOUS_MOVE,
}
NAG_TO_GLYPH: dict[int, str] = {v: k for k, v in GLYPH_TO_NAG.items()}


def nag_from_glyph(glyph: str) -> int:
    """NAG code for a shorthand glyph such as ``'?!'``."""
    try:
        return GLYPH_TO_NAG[glyph]
    except KeyError:
        raise ValueError(f"Unknown annotation glyph: {glyph!r}") from None


def format_nag(nag: int) -> str:
    """``$n`` form of a NAG code."""
    return f"${nag}"
