"""Board model protocol consumed by the tree builder, the tree and the writer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from pgntree.core.enums import Color
    from pgntree.core.move import Move

# Positions are opaque to the core; each board model picks its own type.
Position = Any


class IBoardModel(Protocol):
    """Chess-rules capability the game tree depends on.

    Implementations must treat positions as values: :meth:`apply` returns a
    new position and never mutates its argument, so positions cached on
    tree nodes stay valid.
    """

    def initial_position(self, fen: str | None = None) -> Position:
        """Standard start position, or the one described by *fen*."""
        ...

    def apply(self, position: Position, move: Move) -> Position:
        """Position after *move*; raises ``IllegalMoveError``."""
        ...

    def legal_moves(self, position: Position) -> list[Move]: ...

    def resolve_san(self, position: Position, token: str) -> Move:
        """Resolve a SAN token; raises ``IllegalMoveError`` or ``AmbiguousMoveError``."""
        ...

    def san(self, position: Position, move: Move) -> str:
        """Canonical SAN for *move* played from *position*."""
        ...

    def turn(self, position: Position) -> Color: ...

    def fullmove_number(self, position: Position) -> int: ...
