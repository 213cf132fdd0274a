"""Board model backed by ``python-chess``."""

from __future__ import annotations

import chess

from pgntree.core.enums import Color, PieceKind
from pgntree.core.move import Move
from pgntree.core.types import Square
from pgntree.errors import AmbiguousMoveError, IllegalMoveError


class StandardBoardModel:
    """Standard chess rules; positions are :class:`chess.Board` instances.

    Boards handed out by this model are never pushed to after creation.
    """

    def initial_position(self, fen: str | None = None) -> chess.Board:
        if fen is None:
            return chess.Board()
        return chess.Board(fen)

    def apply(self, position: chess.Board, move: Move) -> chess.Board:
        chess_move = _to_chess_move(move)
        if not position.is_legal(chess_move):
            raise IllegalMoveError(f"Illegal move: {move}")
        after = position.copy(stack=False)
        after.push(chess_move)
        return after

    def legal_moves(self, position: chess.Board) -> list[Move]:
        return [
            _from_chess_move(position, m, position.san(m))
            for m in position.legal_moves
        ]

    def resolve_san(self, position: chess.Board, token: str) -> Move:
        try:
            chess_move = position.parse_san(token)
        except chess.AmbiguousMoveError as exc:
            raise AmbiguousMoveError(f"Ambiguous move: {token}") from exc
        except ValueError as exc:
            raise IllegalMoveError(f"Illegal move: {token}") from exc
        return _from_chess_move(position, chess_move, token)

    def san(self, position: chess.Board, move: Move) -> str:
        chess_move = _to_chess_move(move)
        if not position.is_legal(chess_move):
            raise IllegalMoveError(f"Illegal move: {move}")
        return position.san(chess_move)

    def turn(self, position: chess.Board) -> Color:
        return Color.WHITE if position.turn == chess.WHITE else Color.BLACK

    def fullmove_number(self, position: chess.Board) -> int:
        return position.fullmove_number

    # ── Extras beyond the protocol ───────────────────────────────────────

    def piece_at(
        self, position: chess.Board, square: Square
    ) -> tuple[Color, PieceKind] | None:
        """Occupant of *square*, or ``None`` when it is empty."""
        piece = position.piece_at(square.index)
        if piece is None:
            return None
        color = Color.WHITE if piece.color == chess.WHITE else Color.BLACK
        return color, PieceKind(piece.piece_type)

    def fen(self, position: chess.Board) -> str:
        return position.fen()

    def legal_move(
        self,
        position: chess.Board,
        src: Square,
        dst: Square,
        promotion: PieceKind | None = None,
    ) -> Move | None:
        """The legal move from *src* to *dst*, or ``None`` if there is none.

        A pawn reaching the last rank promotes to a queen unless *promotion*
        names another piece.
        """
        if (
            promotion is None
            and position.piece_type_at(src.index) == chess.PAWN
            and dst.rank in (0, 7)
        ):
            promotion = PieceKind.QUEEN
        chess_move = chess.Move(
            src.index,
            dst.index,
            promotion=int(promotion) if promotion is not None else None,
        )
        if not position.is_legal(chess_move):
            return None
        return _from_chess_move(position, chess_move, position.san(chess_move))

    def destinations(self, position: chess.Board, src: Square) -> list[Square]:
        """Squares the piece on *src* can legally move to, in index order."""
        return _targets(position, src, captures_only=False)

    def captures(self, position: chess.Board, src: Square) -> list[Square]:
        """Subset of :meth:`destinations` that capture something."""
        return _targets(position, src, captures_only=True)


def _targets(position: chess.Board, src: Square, *, captures_only: bool) -> list[Square]:
    indices = {
        m.to_square
        for m in position.legal_moves
        if m.from_square == src.index
        and (not captures_only or position.is_capture(m))
    }
    return [Square.from_index(i) for i in sorted(indices)]


def _to_chess_move(move: Move) -> chess.Move:
    promotion = int(move.promotion) if move.promotion is not None else None
    return chess.Move(move.from_sq.index, move.to_sq.index, promotion=promotion)


def _from_chess_move(board: chess.Board, move: chess.Move, san: str) -> Move:
    piece_type = board.piece_type_at(move.from_square)
    if piece_type is None:
        raise IllegalMoveError(f"No piece on {chess.square_name(move.from_square)}")

    captured: PieceKind | None = None
    if board.is_en_passant(move):
        captured = PieceKind.PAWN
    elif not board.is_castling(move):
        captured_type = board.piece_type_at(move.to_square)
        if captured_type is not None:
            captured = PieceKind(captured_type)

    after = board.copy(stack=False)
    after.push(move)

    return Move(
        Square.from_index(move.from_square),
        Square.from_index(move.to_square),
        PieceKind(piece_type),
        captured=captured,
        promotion=PieceKind(move.promotion) if move.promotion else None,
        is_check=after.is_check(),
        is_checkmate=after.is_checkmate(),
        san=san,
    )
