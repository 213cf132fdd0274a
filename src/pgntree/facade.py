"""``Game`` facade: PGN text in, PGN text out."""

from __future__ import annotations

import logging

from pgntree.board import IBoardModel
from pgntree.config import ReaderOptions, WriterOptions
from pgntree.core.enums import Result
from pgntree.errors import PgnError
from pgntree.game import GameTree, Node
from pgntree.notation.reader import read_game
from pgntree.notation.writer import render

_LOGGER = logging.getLogger(__name__)


class Game:
    """A parsed game plus the diagnostic of a failed parse, if any."""

    __slots__ = ("_tree", "_error")

    def __init__(self, tree: GameTree | None = None) -> None:
        self._tree = tree if tree is not None else GameTree()
        self._error: PgnError | None = None

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        board: IBoardModel | None = None,
        options: ReaderOptions | None = None,
        strict: bool = False,
    ) -> Game:
        """Parse *text*.

        Unparseable input gives an empty game whose :attr:`error` holds the
        failure, unless *strict* is set, in which case the error is raised.
        """
        if not text.strip():
            return cls(GameTree(board))
        try:
            tree = read_game(text, board=board, options=options)
        except PgnError as exc:
            if strict:
                raise
            _LOGGER.warning("Could not parse PGN, using an empty game: %s", exc)
            game = cls(GameTree(board))
            game._error = exc
            return game
        return cls(tree)

    def to_text(self, options: WriterOptions | None = None) -> str:
        return render(self._tree, options)

    # ── Accessors ────────────────────────────────────────────────────────

    @property
    def tree(self) -> GameTree:
        return self._tree

    @property
    def root(self) -> Node:
        return self._tree.root

    @property
    def headers(self) -> dict[str, str]:
        return self._tree.headers

    @property
    def result(self) -> Result:
        return self._tree.result

    @property
    def error(self) -> PgnError | None:
        """Why parsing failed; ``None`` for games that parsed (or were empty)."""
        return self._error

    def __str__(self) -> str:
        return self.to_text()
