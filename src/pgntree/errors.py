"""Exception hierarchy for lexing, parsing, move resolution and tree checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pgntree.notation.lexer import Token


class PgnError(Exception):
    """Base error; carries the source position when one is known."""

    def __init__(
        self,
        message: str,
        *,
        token: Token | None = None,
        offset: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        if token is not None:
            offset = token.offset if offset is None else offset
            line = token.line if line is None else line
            column = token.column if column is None else column
        self.message = message
        self.token = token
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(self._format())

    def _format(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} (line {self.line}, column {self.column})"


class LexError(PgnError):
    """Raw text could not be split into tokens."""


class ParseError(PgnError):
    """Token stream does not describe a valid game."""


class IllegalMoveError(ParseError):
    """A move cannot be resolved in the position it is played from."""


class AmbiguousMoveError(ParseError):
    """A SAN token matches more than one legal move."""


class StructuralError(PgnError):
    """A game tree violates its mainline/variation invariants."""
