"""Game tree: headers, board model, initial position, root node and result."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import replace

from pgntree.board import DefaultBoardModel, IBoardModel, Position
from pgntree.core.enums import Result
from pgntree.core.move import Move
from pgntree.errors import IllegalMoveError, StructuralError
from pgntree.game.node import Node

_LOGGER = logging.getLogger(__name__)


class GameTree:
    """One game with all of its variations.

    Positions are derived by replaying moves from the initial position and
    cached on the nodes; moves are immutable, so edits never stale a cache.
    """

    __slots__ = ("board", "headers", "root", "result", "initial_position")

    def __init__(
        self,
        board: IBoardModel | None = None,
        *,
        headers: dict[str, str] | None = None,
        initial_position: Position | None = None,
        result: Result = Result.UNKNOWN,
    ) -> None:
        self.board: IBoardModel = board if board is not None else DefaultBoardModel()
        self.headers: dict[str, str] = dict(headers) if headers else {}
        self.initial_position: Position = (
            initial_position
            if initial_position is not None
            else self.board.initial_position()
        )
        self.root = Node()
        self.result = result

    # ── Positions ────────────────────────────────────────────────────────

    def position_at(self, node: Node) -> Position:
        """Position after *node*'s move (the initial position for the root)."""
        path: list[Node] = []
        current = node
        while current._position is None and current.parent is not None:
            path.append(current)
            current = current.parent

        if current._position is None:
            if current is not self.root:
                raise ValueError("Node does not belong to this game")
            current._position = self.initial_position

        position = current._position
        for step in reversed(path):
            assert step.move is not None
            position = self.board.apply(position, step.move)
            step._position = position
        return position

    def position_before(self, node: Node) -> Position:
        """Position *node*'s move is played from."""
        if node.parent is None:
            return self.initial_position
        return self.position_at(node.parent)

    def moves_before(self, node: Node) -> list[Move]:
        """Moves leading from the root to the position before *node*'s move."""
        moves: list[Move] = []
        current = node.parent
        while current is not None and current.move is not None:
            moves.append(current.move)
            current = current.parent
        moves.reverse()
        return moves

    def ply_of(self, node: Node) -> int:
        """Number of moves from the root to *node* (0 for the root)."""
        depth = 0
        current = node
        while current.parent is not None:
            depth += 1
            current = current.parent
        return depth

    # ── Traversal ────────────────────────────────────────────────────────

    def mainline_nodes(self) -> Iterator[Node]:
        node = self.root.mainline
        while node is not None:
            yield node
            node = node.mainline

    def mainline_moves(self) -> list[Move]:
        return [node.move for node in self.mainline_nodes() if node.move is not None]

    def iter_nodes(self) -> Iterator[Node]:
        """Every node, root first, depth-first with the mainline child first."""
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def end(self) -> Node:
        """Last node of the mainline (the root for an empty game)."""
        node = self.root
        while node.mainline is not None:
            node = node.mainline
        return node

    # ── Editing ──────────────────────────────────────────────────────────

    def add_move(
        self, parent: Node, move: Move | str, *, merge: bool = True
    ) -> Node:
        """Play *move* (a :class:`Move` or a SAN token) after *parent*.

        The move is checked against the board model and stored the way the
        board describes it (piece, capture, check flags); only a SAN spelling
        given by the caller is kept. With *merge* set, an existing child
        playing the same move is returned instead of adding a duplicate line.
        """
        position = self.position_at(parent)
        if isinstance(move, str):
            move = self.board.resolve_san(position, move)
        else:
            move = self._legal_version(position, move)

        if merge:
            existing = parent.find_child(move)
            if existing is not None:
                return existing

        after = self.board.apply(position, move)
        child = parent.add_variation(move)
        child._position = after
        _LOGGER.debug("Added %s after %r", move, parent)
        return child

    def remove_node(self, node: Node) -> Node:
        """Detach *node* with its subtree and return it."""
        parent = self._owned_parent(node)
        parent.remove_child(node)
        _LOGGER.debug("Removed %r", node)
        return node

    def promote_variation(self, node: Node) -> bool:
        """Make *node* the mainline continuation of its parent.

        Returns ``False`` when it already was.
        """
        parent = self._owned_parent(node)
        if parent.mainline is node:
            return False
        parent.promote_to_main(node)
        _LOGGER.debug("Promoted %r to mainline", node)
        return True

    def _owned_parent(self, node: Node) -> Node:
        if node.parent is None:
            raise ValueError("The root node cannot be edited this way")
        top = node
        while top.parent is not None:
            top = top.parent
        if top is not self.root:
            raise ValueError("Node does not belong to this game")
        return node.parent

    def _legal_version(self, position: Position, move: Move) -> Move:
        for legal in self.board.legal_moves(position):
            if legal.same_as(move):
                return replace(legal, san=move.san) if move.san else legal
        raise IllegalMoveError(f"Illegal move: {move}")

    # ── Checks ───────────────────────────────────────────────────────────

    def validate(self) -> None:
        """Raise :class:`StructuralError` if the tree breaks its invariants."""
        root = self.root
        if root.parent is not None or root.move is not None:
            raise StructuralError("Root node must have neither parent nor move")
        if root.nags:
            raise StructuralError("Root node cannot carry NAGs")

        seen: set[int] = set()
        stack = [root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                raise StructuralError(f"Node reachable more than once: {node!r}")
            seen.add(id(node))

            if node is not root and node.move is None:
                raise StructuralError("Non-root node without a move")
            if node.mainline is None and node.variations:
                raise StructuralError(f"Variations without a mainline: {node!r}")
            if any(v is node.mainline for v in node.variations):
                raise StructuralError(f"Mainline listed as a variation: {node!r}")

            for child in node.children:
                if child.parent is not node:
                    raise StructuralError(f"Broken parent link: {child!r}")
                stack.append(child)

    def __repr__(self) -> str:
        return (
            f"<GameTree moves={len(self.mainline_moves())} "
            f"result={self.result.token}>"
        )
