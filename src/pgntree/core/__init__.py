"""Core value types: squares, moves, colors, piece kinds and results."""

from pgntree.core.enums import RESULT_TOKENS, Color, PieceKind, Result
from pgntree.core.move import Move
from pgntree.core.types import Square

__all__ = [
    "RESULT_TOKENS",
    "Color",
    "Move",
    "PieceKind",
    "Result",
    "Square",
]
