"""Tree builder: token stream → :class:`GameTree`."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pgntree.board import DefaultBoardModel, IBoardModel
from pgntree.config import DEFAULT_READER_OPTIONS, ReaderOptions
from pgntree.core.enums import Result
from pgntree.errors import (
    AmbiguousMoveError,
    IllegalMoveError,
    LexError,
    ParseError,
)
from pgntree.game.node import Node
from pgntree.game.tree import GameTree
from pgntree.notation.headers import setup_fen, split_headers
from pgntree.notation.lexer import Token, TokenKind, tokenize
from pgntree.notation.nag import MAX_NAG

_LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame:
    """Insertion point of one line (the game itself or an open variation)."""

    node: Node
    opened_by: Token | None = None
    has_moved: bool = False
    # Comments seen before the first move of this line.
    pending: list[str] = field(default_factory=list)


def parse_movetext(
    tokens: Iterable[Token],
    board: IBoardModel,
    *,
    headers: dict[str, str] | None = None,
    options: ReaderOptions | None = None,
) -> GameTree:
    """Build a game tree from movetext tokens.

    Raises :class:`LexError` on an ``ERROR`` token and :class:`ParseError`
    (or one of its move-resolution subclasses) on anything structurally
    wrong; the error carries the offending token's position.
    """
    opts = options or DEFAULT_READER_OPTIONS
    headers = dict(headers) if headers else {}

    fen = setup_fen(headers)
    try:
        initial = board.initial_position(fen)
    except ValueError as exc:
        raise ParseError(f"Invalid FEN tag: {fen}") from exc

    tree = GameTree(board, headers=headers, initial_position=initial)
    stack = [_Frame(tree.root)]
    result_token: Token | None = None

    for token in tokens:
        kind = token.kind
        frame = stack[-1]

        if kind is TokenKind.END_OF_INPUT:
            break
        if kind is TokenKind.ERROR:
            raise LexError(token.value, token=token)
        if result_token is not None:
            raise ParseError(f"Unexpected {token.value!r} after the result", token=token)

        if kind is TokenKind.MOVE_NUMBER:
            # Numbers are informational; the tree knows whose move it is.
            continue

        if kind is TokenKind.SAN_MOVE:
            try:
                node = tree.add_move(frame.node, token.value, merge=False)
            except (IllegalMoveError, AmbiguousMoveError) as exc:
                raise type(exc)(exc.message, token=token) from exc
            if frame.pending:
                node.starting_comments.extend(frame.pending)
                frame.pending.clear()
            frame.node = node
            frame.has_moved = True

        elif kind is TokenKind.COMMENT_TEXT:
            text = token.value.strip()
            if frame.has_moved:
                frame.node.add_comment(text)
            else:
                frame.pending.append(text)

        elif kind in (TokenKind.COMMENT_OPEN, TokenKind.COMMENT_CLOSE):
            continue

        elif kind is TokenKind.NAG:
            if not frame.has_moved:
                raise ParseError("NAG before any move", token=token)
            nag = token.nag
            if not 0 <= nag <= MAX_NAG:
                raise ParseError(f"NAG out of range: {token.value}", token=token)
            frame.node.push_nag(nag)

        elif kind is TokenKind.VARIATION_OPEN:
            if not frame.has_moved or frame.node.parent is None:
                raise ParseError("Variation must follow a move", token=token)
            if len(stack) > opts.max_variation_depth:
                raise ParseError(
                    f"Variations nested deeper than {opts.max_variation_depth}",
                    token=token,
                )
            stack.append(_Frame(frame.node.parent, opened_by=token))

        elif kind is TokenKind.VARIATION_CLOSE:
            if len(stack) == 1:
                raise ParseError("Unmatched ')'", token=token)
            closed = stack.pop()
            for text in closed.pending:
                stack[-1].node.add_comment(text)

        elif kind is TokenKind.RESULT:
            if len(stack) > 1:
                raise ParseError("Result inside a variation", token=token)
            try:
                tree.result = Result.from_token(token.value)
            except ValueError:
                raise ParseError(f"Malformed result: {token.value}", token=token) from None
            result_token = token

    else:
        # A bare token iterable without END_OF_INPUT is treated the same way.
        token = None

    if len(stack) > 1:
        opened = stack[-1].opened_by
        assert opened is not None
        raise ParseError(
            f"Unterminated variation opened at line {opened.line}, column {opened.column}",
            token=token,
        )

    for text in stack[0].pending:
        tree.root.add_comment(text)

    if result_token is None and opts.use_header_result and "Result" in headers:
        try:
            tree.result = Result.from_token(headers["Result"])
        except ValueError:
            _LOGGER.debug("Ignoring unrecognised Result tag %r", headers["Result"])

    _LOGGER.debug(
        "Parsed game: %d mainline moves, result %s",
        len(tree.mainline_moves()),
        tree.result.token,
    )
    return tree


def read_game(
    text: str,
    *,
    board: IBoardModel | None = None,
    options: ReaderOptions | None = None,
) -> GameTree:
    """Parse one PGN game: optional tag pairs followed by movetext."""
    headers, movetext, first_line = split_headers(text)
    return parse_movetext(
        tokenize(movetext, first_line=first_line),
        board if board is not None else DefaultBoardModel(),
        headers=headers,
        options=options,
    )
