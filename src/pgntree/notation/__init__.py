"""PGN notation: lexer, tree builder, serializer and their helpers.

Quick start::

    from pgntree.notation import read_game, render

    tree = read_game('1. e4 e5 2. Nf3 (2. f4 exf4) Nc6 *')
    print(render(tree))
"""

from pgntree.notation.evaluation import Evaluation, format_evaluation, parse_evaluation
from pgntree.notation.headers import format_headers, setup_fen, split_headers
from pgntree.notation.lexer import Token, TokenKind, tokenize
from pgntree.notation.nag import GLYPH_TO_NAG, MAX_NAG, NAG_TO_GLYPH, Nag, format_nag, nag_from_glyph
from pgntree.notation.reader import parse_movetext, read_game
from pgntree.notation.writer import PgnWriter, render

__all__ = [
    # Lexing
    "Token",
    "TokenKind",
    "tokenize",
    # Reading / writing
    "PgnWriter",
    "parse_movetext",
    "read_game",
    "render",
    # Headers
    "format_headers",
    "setup_fen",
    "split_headers",
    # Annotations
    "Evaluation",
    "GLYPH_TO_NAG",
    "MAX_NAG",
    "NAG_TO_GLYPH",
    "Nag",
    "format_evaluation",
    "format_nag",
    "nag_from_glyph",
    "parse_evaluation",
]
