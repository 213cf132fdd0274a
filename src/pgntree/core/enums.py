"""Core enumerations shared by the board model, the tree and the notation layer."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds.

    Values match the piece-type numbering used by ``python-chess`` so the
    standard board model can convert without a lookup table.
    """

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    @classmethod
    def from_letter(cls, letter: str) -> PieceKind:
        """Piece kind for an uppercase SAN letter, e.g. ``"N"``."""
        try:
            return _SAN_LETTERS[letter]
        except KeyError:
            raise ValueError(f"Invalid piece letter: {letter!r}") from None


_SAN_LETTERS: dict[str, PieceKind] = {
    "N": PieceKind.KNIGHT,
    "B": PieceKind.BISHOP,
    "R": PieceKind.ROOK,
    "Q": PieceKind.QUEEN,
    "K": PieceKind.KING,
}


class Result(IntEnum):
    """Terminal marker of a game."""

    UNKNOWN = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @property
    def token(self) -> str:
        """PGN result token."""
        return _RESULT_TOKENS[self]

    @classmethod
    def from_token(cls, token: str) -> Result:
        """Parse a PGN result token; raises ``ValueError`` on anything else."""
        try:
            return _RESULT_TOKENS_REV[token]
        except KeyError:
            raise ValueError(f"Invalid result token: {token!r}") from None


_RESULT_TOKENS: dict[Result, str] = {
    Result.WHITE_WINS: "1-0",
    Result.BLACK_WINS: "0-1",
    Result.DRAW: "1/2-1/2",
    Result.UNKNOWN: "*",
}
_RESULT_TOKENS_REV: dict[str, Result] = {v: k for k, v in _RESULT_TOKENS.items()}
RESULT_TOKENS: frozenset[str] = frozenset(_RESULT_TOKENS_REV)
