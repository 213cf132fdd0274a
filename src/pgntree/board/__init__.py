"""Board models: the chess-rules capability the game tree is built against."""

from pgntree.board.interface import IBoardModel, Position
from pgntree.board.san import SanParts, select_move, split_san
from pgntree.board.standard import StandardBoardModel
from pgntree.board.table import TableBoardModel, TablePosition

# Used whenever a tree or facade is created without an explicit model.
DefaultBoardModel: type[IBoardModel] = StandardBoardModel

__all__ = [
    "DefaultBoardModel",
    "IBoardModel",
    "Position",
    "SanParts",
    "StandardBoardModel",
    "TableBoardModel",
    "TablePosition",
    "select_move",
    "split_san",
]
