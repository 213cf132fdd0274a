"""SAN token decomposition and matching against a list of candidate moves."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from pgntree.core.enums import PieceKind
from pgntree.core.move import Move
from pgntree.core.types import Square
from pgntree.errors import AmbiguousMoveError, IllegalMoveError

_SAN_RE = re.compile(
    r"^(?P<piece>[NBRQK])?"
    r"(?P<file>[a-h])?(?P<rank>[1-8])?"
    r"(?P<capture>x)?"
    r"(?P<dest>[a-h][1-8])"
    r"(?:=?(?P<promotion>[NBRQ]))?$"
)
_KINGSIDE = ("O-O", "0-0")
_QUEENSIDE = ("O-O-O", "0-0-0")


@dataclass(slots=True, frozen=True)
class SanParts:
    """Pieces of information a SAN token pins down."""

    piece: PieceKind
    to_sq: Square | None
    from_file: int | None = None
    from_rank: int | None = None
    promotion: PieceKind | None = None
    # +2 for kingside castling, -2 for queenside, None otherwise.
    castle: int | None = None


def split_san(token: str) -> SanParts:
    """Decompose a SAN token; check/mate suffixes are ignored."""
    clean = token.rstrip("+#")

    if clean in _KINGSIDE:
        return SanParts(PieceKind.KING, None, castle=2)
    if clean in _QUEENSIDE:
        return SanParts(PieceKind.KING, None, castle=-2)

    match = _SAN_RE.match(clean)
    if match is None:
        raise IllegalMoveError(f"Malformed SAN: {token}")

    piece = PieceKind.from_letter(match["piece"]) if match["piece"] else PieceKind.PAWN
    promotion = (
        PieceKind.from_letter(match["promotion"]) if match["promotion"] else None
    )
    if promotion is not None and piece != PieceKind.PAWN:
        raise IllegalMoveError(f"Malformed SAN: {token}")

    return SanParts(
        piece=piece,
        to_sq=Square.from_name(match["dest"]),
        from_file=ord(match["file"]) - ord("a") if match["file"] else None,
        from_rank=int(match["rank"]) - 1 if match["rank"] else None,
        promotion=promotion,
    )


def _matches(move: Move, parts: SanParts) -> bool:
    if move.piece != parts.piece:
        return False
    if parts.castle is not None:
        return (
            move.from_sq.rank == move.to_sq.rank
            and move.to_sq.file - move.from_sq.file == parts.castle
        )
    if move.to_sq != parts.to_sq:
        return False
    if move.promotion != parts.promotion:
        return False
    if parts.from_file is not None and move.from_sq.file != parts.from_file:
        return False
    if parts.from_rank is not None and move.from_sq.rank != parts.from_rank:
        return False
    return True


def select_move(candidates: Iterable[Move], token: str) -> Move:
    """Pick the single candidate *token* describes."""
    parts = split_san(token)
    found = [m for m in candidates if _matches(m, parts)]

    if len(found) == 1:
        return found[0]
    if not found:
        raise IllegalMoveError(f"Illegal move: {token}")
    choices = ", ".join(m.uci for m in found)
    raise AmbiguousMoveError(f"Ambiguous move: {token} ({choices})")
