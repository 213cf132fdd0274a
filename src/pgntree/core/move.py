"""Move value object: one resolved ply."""

from __future__ import annotations

from dataclasses import dataclass

from pgntree.core.enums import PieceKind
from pgntree.core.types import Square

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}
_PROMO_CHARS_REV: dict[str, PieceKind] = {v: k for k, v in _PROMO_CHARS.items()}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single resolved move.

    ``san`` keeps the spelling the move was read from; the serializer writes
    it back verbatim unless SAN normalisation is requested.
    """

    from_sq: Square
    to_sq: Square
    piece: PieceKind
    captured: PieceKind | None = None
    promotion: PieceKind | None = None
    is_check: bool = False
    is_checkmate: bool = False
    san: str = ""

    # ── Derived ──────────────────────────────────────────────────────────

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation, e.g. ``'e7e8q'``."""
        base = f"{self.from_sq.name}{self.to_sq.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS[self.promotion]
        return base

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    @property
    def is_castling(self) -> bool:
        return (
            self.piece == PieceKind.KING
            and self.from_sq.rank == self.to_sq.rank
            and abs(self.from_sq.file - self.to_sq.file) == 2
        )

    def same_as(self, other: Move) -> bool:
        """Whether *other* is the same board move, ignoring spelling and flags."""
        return (
            self.from_sq == other.from_sq
            and self.to_sq == other.to_sq
            and self.promotion == other.promotion
        )

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def from_uci(
        cls,
        uci: str,
        piece: PieceKind,
        *,
        captured: PieceKind | None = None,
        is_check: bool = False,
        is_checkmate: bool = False,
        san: str = "",
    ) -> Move:
        """Build a move from UCI text such as ``'g1f3'`` or ``'e7e8q'``."""
        if len(uci) not in (4, 5):
            raise ValueError(f"Invalid UCI move: {uci!r}")
        promotion: PieceKind | None = None
        if len(uci) == 5:
            try:
                promotion = _PROMO_CHARS_REV[uci[4]]
            except KeyError:
                raise ValueError(f"Invalid UCI promotion: {uci!r}") from None
        return cls(
            Square.from_name(uci[:2]),
            Square.from_name(uci[2:4]),
            piece,
            captured=captured,
            promotion=promotion,
            is_check=is_check,
            is_checkmate=is_checkmate,
            san=san,
        )

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.san or self.uci
