"""Board model driven by a fixed table of legal moves.

The table maps the SAN line played so far to the moves allowed next::

    table = {
        (): [Move.from_uci("e2e4", PieceKind.PAWN, san="e4")],
        ("e4",): [Move.from_uci("e7e5", PieceKind.PAWN, san="e5")],
    }

Lines are keyed by the canonical SAN stored in the table, whatever spelling
the input used. No chess rules are involved, which makes the model handy for
exercising the parser in isolation.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace

from pgntree.board.san import select_move
from pgntree.core.enums import Color
from pgntree.core.move import Move
from pgntree.errors import IllegalMoveError


@dataclass(slots=True, frozen=True)
class TablePosition:
    """Position identified by the line that reached it."""

    line: tuple[str, ...] = ()
    start_ply: int = 0

    @property
    def ply(self) -> int:
        return self.start_ply + len(self.line)


class TableBoardModel:
    """Legal moves come from a lookup table instead of chess rules."""

    def __init__(self, table: Mapping[Sequence[str], Sequence[Move]]) -> None:
        self._table: dict[tuple[str, ...], tuple[Move, ...]] = {
            tuple(line): tuple(moves) for line, moves in table.items()
        }

    def initial_position(self, fen: str | None = None) -> TablePosition:
        if fen is None:
            return TablePosition()
        # Only side to move and move number matter here.
        parts = fen.split()
        side = parts[1] if len(parts) > 1 else "w"
        if side not in ("w", "b"):
            raise ValueError(f"Invalid FEN side-to-move field: {side!r}")
        fullmove = int(parts[5]) if len(parts) > 5 else 1
        return TablePosition((), (fullmove - 1) * 2 + (1 if side == "b" else 0))

    def apply(self, position: TablePosition, move: Move) -> TablePosition:
        canonical = self._lookup(position, move)
        return TablePosition(position.line + (canonical.san,), position.start_ply)

    def legal_moves(self, position: TablePosition) -> list[Move]:
        return list(self._table.get(position.line, ()))

    def resolve_san(self, position: TablePosition, token: str) -> Move:
        move = select_move(self._table.get(position.line, ()), token)
        return replace(move, san=token)

    def san(self, position: TablePosition, move: Move) -> str:
        return self._lookup(position, move).san

    def turn(self, position: TablePosition) -> Color:
        return Color.WHITE if position.ply % 2 == 0 else Color.BLACK

    def fullmove_number(self, position: TablePosition) -> int:
        return position.ply // 2 + 1

    def _lookup(self, position: TablePosition, move: Move) -> Move:
        for candidate in self._table.get(position.line, ()):
            if candidate.same_as(move):
                return candidate
        raise IllegalMoveError(f"Illegal move: {move}")
