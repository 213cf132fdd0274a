"""pgntree: PGN parsing into an annotated game tree, and back to text.

Quick start::

    from pgntree import Game

    game = Game.from_text('1. d4 Nc6?! { comment } (1... d5) 2. e4 *')
    print(game.to_text())
    # 1. d4 Nc6 $6 { comment } (1... d5) 2. e4 *
"""

from pgntree.board import (
    DefaultBoardModel,
    IBoardModel,
    StandardBoardModel,
    TableBoardModel,
)
from pgntree.config import ReaderOptions, WriterOptions
from pgntree.core import Color, Move, PieceKind, Result, Square
from pgntree.errors import (
    AmbiguousMoveError,
    IllegalMoveError,
    LexError,
    ParseError,
    PgnError,
    StructuralError,
)
from pgntree.facade import Game
from pgntree.game import Annotation, GameTree, Node
from pgntree.notation import parse_movetext, read_game, render, tokenize

__all__ = [
    # Facade
    "Game",
    # Value types
    "Color",
    "Move",
    "PieceKind",
    "Result",
    "Square",
    # Tree
    "Annotation",
    "GameTree",
    "Node",
    # Board models
    "DefaultBoardModel",
    "IBoardModel",
    "StandardBoardModel",
    "TableBoardModel",
    # Notation
    "parse_movetext",
    "read_game",
    "render",
    "tokenize",
    # Options
    "ReaderOptions",
    "WriterOptions",
    # Errors
    "AmbiguousMoveError",
    "IllegalMoveError",
    "LexError",
    "ParseError",
    "PgnError",
    "StructuralError",
]
