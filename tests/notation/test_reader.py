"""Tests for building game trees from PGN movetext."""

import pytest

from pgntree.board import StandardBoardModel, TableBoardModel
from pgntree.config import ReaderOptions
from pgntree.core.enums import Result
from pgntree.errors import (
    AmbiguousMoveError,
    IllegalMoveError,
    LexError,
    ParseError,
)
from pgntree.notation.lexer import tokenize
from pgntree.notation.reader import parse_movetext, read_game

SCHOLARS_MATE = "1. e4 e5 2. Bc4 Nc6 3. Qh5 Nf6 4. Qxf7# 1-0"


class TestMainline:
    def test_simple_line(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 e5 *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert e4.move is not None and e4.move.san == "e4"
        e5 = e4.mainline
        assert e5 is not None
        assert e5.move is not None and e5.move.san == "e5"
        assert e5.is_leaf
        assert tree.result == Result.UNKNOWN

    def test_move_numbers_are_optional(self, table_board: TableBoardModel) -> None:
        tree = read_game("e4 e5 Nf3", board=table_board)
        assert [m.san for m in tree.mainline_moves()] == ["e4", "e5", "Nf3"]

    def test_full_game(self, standard_board: StandardBoardModel) -> None:
        tree = read_game(SCHOLARS_MATE, board=standard_board)
        moves = tree.mainline_moves()
        assert len(moves) == 7
        assert moves[-1].is_checkmate
        assert tree.result == Result.WHITE_WINS

    def test_checkmate_from_fen(self, standard_board: StandardBoardModel) -> None:
        text = (
            '[SetUp "1"]\n'
            '[FEN "2r3k1/5ppp/8/8/8/8/5PPP/2Q3K1 w - - 0 1"]\n'
            "\n"
            "1. Qxc8# 1-0"
        )
        tree = read_game(text, board=standard_board)
        last = tree.end()
        assert last.move is not None
        assert last.move.is_checkmate
        assert tree.result == Result.WHITE_WINS

    def test_positions_are_cached(self, standard_board: StandardBoardModel) -> None:
        tree = read_game("1. e4 e5 2. Nf3 *", board=standard_board)
        fen = standard_board.fen(tree.position_at(tree.end()))
        assert fen.startswith("rnbqkbnr/pppp1ppp/8/4p3/4P3/5N2/PPPP1PPP/RNBQKB1R b")

    def test_parse_movetext_from_tokens(self, table_board: TableBoardModel) -> None:
        tree = parse_movetext(list(tokenize("1. d4 d5 2. c4")), table_board)
        assert [m.san for m in tree.mainline_moves()] == ["d4", "d5", "c4"]


class TestVariations:
    def test_variation_is_alternative(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. d4 Nc6?! { comment } (1... d5) 2. e4 *", board=table_board)
        d4 = tree.root.mainline
        assert d4 is not None
        nc6 = d4.mainline
        assert nc6 is not None and nc6.move is not None
        assert nc6.move.san == "Nc6"
        assert nc6.nags == [6]
        assert nc6.comments == ["comment"]
        assert [v.move.san for v in d4.variations if v.move] == ["d5"]
        assert nc6.mainline is not None
        assert nc6.mainline.move is not None and nc6.mainline.move.san == "e4"

    def test_nested_variations(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 e5 (1... c5 (1... e5) 2. Nf3) 2. Nf3 *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        c5 = e4.variations[0]
        assert c5.move is not None and c5.move.san == "c5"
        assert c5.mainline is not None
        # The nested line is an alternative to c5, so it lands beside it.
        assert len(e4.variations) == 2
        assert e4.variations[1].move is not None
        assert e4.variations[1].move.san == "e5"

    def test_consecutive_variations(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 (1. d4) (1. Nf3) e5 *", board=table_board)
        assert [v.move.san for v in tree.root.variations if v.move] == ["d4", "Nf3"]
        assert tree.root.mainline is not None
        assert tree.root.mainline.mainline is not None

    def test_unterminated_variation(self, table_board: TableBoardModel) -> None:
        text = "1. e4 (1. d4"
        with pytest.raises(ParseError, match="Unterminated variation") as exc_info:
            read_game(text, board=table_board)
        assert exc_info.value.offset == len(text)
        assert "column 7" in exc_info.value.message

    def test_unbalanced_black_variation(self, standard_board: StandardBoardModel) -> None:
        with pytest.raises(ParseError):
            read_game("1. e4 (1... c5", board=standard_board)

    def test_unmatched_close(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError, match="Unmatched"):
            read_game("1. e4 ) e5", board=table_board)

    def test_variation_before_any_move(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError):
            read_game("(1. e4) *", board=table_board)

    def test_depth_limit(self, table_board: TableBoardModel) -> None:
        text = "1. e4 e5 (1... c5 (1... e5)) *"
        read_game(text, board=table_board)
        with pytest.raises(ParseError, match="nested deeper"):
            read_game(text, board=table_board, options=ReaderOptions(max_variation_depth=1))


class TestComments:
    def test_comments_stay_separate(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 { a } { b } *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert e4.comments == ["a", "b"]
        assert e4.comment == "a b"

    def test_nag_keeps_position_between_comments(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 { a } $1 { b } *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert [(a.nag, a.comment) for a in e4.annotations] == [
            (None, "a"),
            (1, None),
            (None, "b"),
        ]

    def test_comment_before_first_move(self, table_board: TableBoardModel) -> None:
        tree = read_game("{ intro } 1. e4 *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert e4.starting_comments == ["intro"]
        assert tree.root.comments == []

    def test_comment_at_variation_start(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 ( { alt } 1. d4 ) e5 *", board=table_board)
        assert tree.root.variations[0].starting_comment == "alt"

    def test_comment_in_empty_variation(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 ( { lonely } ) e5 *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert e4.comments == ["lonely"]
        assert tree.root.variations == []

    def test_moveless_game_comment(self, table_board: TableBoardModel) -> None:
        tree = read_game("{ just a comment } *", board=table_board)
        assert tree.root.comment == "just a comment"
        assert tree.root.is_leaf

    def test_line_comment(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4 ; king pawn\ne5 *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert e4.comments == ["king pawn"]

    def test_unterminated_comment(self, table_board: TableBoardModel) -> None:
        with pytest.raises(LexError):
            read_game("1. e4 { oops", board=table_board)


class TestNags:
    def test_nag_before_move(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError, match="NAG before"):
            read_game("$1 1. e4 *", board=table_board)

    def test_nag_out_of_range(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError, match="out of range"):
            read_game("1. e4 $256 *", board=table_board)

    def test_nags_in_order(self, table_board: TableBoardModel) -> None:
        tree = read_game("1. e4!? $14 *", board=table_board)
        e4 = tree.root.mainline
        assert e4 is not None
        assert e4.nags == [5, 14]


class TestResults:
    def test_result_in_variation(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError, match="inside a variation"):
            read_game("1. e4 (1. d4 *) e5", board=table_board)

    def test_malformed_result(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError, match="Malformed result"):
            read_game("1. e4 2-1", board=table_board)

    def test_token_after_result(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError, match="after the result"):
            read_game("1. e4 * e5", board=table_board)

    def test_header_result_used_when_missing(self, table_board: TableBoardModel) -> None:
        text = '[Result "1/2-1/2"]\n\n1. e4 e5'
        assert read_game(text, board=table_board).result == Result.DRAW
        no_fallback = ReaderOptions(use_header_result=False)
        tree = read_game(text, board=table_board, options=no_fallback)
        assert tree.result == Result.UNKNOWN

    def test_movetext_result_wins_over_header(self, table_board: TableBoardModel) -> None:
        tree = read_game('[Result "1-0"]\n\n1. e4 e5 0-1', board=table_board)
        assert tree.result == Result.BLACK_WINS


class TestMoveErrors:
    def test_illegal_move_position(self, standard_board: StandardBoardModel) -> None:
        with pytest.raises(IllegalMoveError) as exc_info:
            read_game("1. e4 e5 2. Ke3 *", board=standard_board)
        assert exc_info.value.column == 13
        assert exc_info.value.token is not None
        assert exc_info.value.token.value == "Ke3"

    def test_ambiguous_move_position(self, standard_board: StandardBoardModel) -> None:
        text = (
            '[SetUp "1"]\n'
            '[FEN "7k/8/8/8/8/8/8/K1N3N1 w - - 0 1"]\n'
            "\n"
            "1. Ne2 *"
        )
        with pytest.raises(AmbiguousMoveError) as exc_info:
            read_game(text, board=standard_board)
        assert exc_info.value.line == 4
        assert exc_info.value.column == 4

    def test_unknown_word(self, table_board: TableBoardModel) -> None:
        with pytest.raises(LexError):
            read_game("1. e4 hello", board=table_board)


class TestHeaders:
    def test_headers_passed_through(self, table_board: TableBoardModel) -> None:
        tree = read_game('[Event "Casual"]\n[White "A"]\n\n1. e4 *', board=table_board)
        assert tree.headers == {"Event": "Casual", "White": "A"}

    def test_fen_starts_with_black(self, standard_board: StandardBoardModel) -> None:
        text = (
            '[FEN "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"]\n'
            "\n"
            "1... c5 2. Nf3 *"
        )
        tree = read_game(text, board=standard_board)
        assert [m.san for m in tree.mainline_moves()] == ["c5", "Nf3"]

    def test_setup_zero_ignores_fen(self, standard_board: StandardBoardModel) -> None:
        text = '[SetUp "0"]\n[FEN "8/8/8/8/8/8/8/8 w - - 0 1"]\n\n1. e4 *'
        tree = read_game(text, board=standard_board)
        assert len(tree.mainline_moves()) == 1

    def test_invalid_fen(self, standard_board: StandardBoardModel) -> None:
        with pytest.raises(ParseError, match="Invalid FEN"):
            read_game('[FEN "nonsense"]\n\n*', board=standard_board)

    def test_invalid_header_line(self, table_board: TableBoardModel) -> None:
        with pytest.raises(ParseError):
            read_game("[Event Casual]\n\n1. e4 *", board=table_board)
