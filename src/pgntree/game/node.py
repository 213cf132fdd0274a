"""Game tree node."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pgntree.core.move import Move

if TYPE_CHECKING:
    from pgntree.notation.evaluation import Evaluation


@dataclass(slots=True, frozen=True)
class Annotation:
    """Either a NAG code or a comment attached after a move."""

    nag: int | None = None
    comment: str | None = None

    def __post_init__(self) -> None:
        if (self.nag is None) == (self.comment is None):
            raise ValueError("Annotation holds exactly one of nag or comment")


class Node:
    """A position reached by one move; the root carries no move.

    ``mainline`` is the preferred continuation and ``variations`` hold the
    alternatives in order. ``starting_comments`` are written before the
    move, ``annotations`` after it.
    """

    __slots__ = (
        "move",
        "parent",
        "mainline",
        "variations",
        "starting_comments",
        "annotations",
        "_position",
    )

    def __init__(self, move: Move | None = None, parent: Node | None = None) -> None:
        self.move = move
        self.parent = parent
        self.mainline: Node | None = None
        self.variations: list[Node] = []
        self.starting_comments: list[str] = []
        self.annotations: list[Annotation] = []
        # Board position after ``move``; filled lazily by the owning tree.
        self._position: object | None = None

    # ── Navigation ───────────────────────────────────────────────────────

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return self.mainline is None

    @property
    def children(self) -> list[Node]:
        """Mainline child first, then the variations."""
        if self.mainline is None:
            return []
        return [self.mainline, *self.variations]

    @property
    def siblings(self) -> list[Node]:
        """The parent's other children; empty for the root."""
        if self.parent is None:
            return []
        return [c for c in self.parent.children if c is not self]

    def is_mainline(self) -> bool:
        """Whether every step from the root to this node follows the mainline."""
        node = self
        while node.parent is not None:
            if node.parent.mainline is not node:
                return False
            node = node.parent
        return True

    # ── Children ─────────────────────────────────────────────────────────

    def add_variation(self, move: Move) -> Node:
        """Append a child; the first child becomes the mainline."""
        child = Node(move, self)
        if self.mainline is None:
            self.mainline = child
        else:
            self.variations.append(child)
        return child

    def find_child(self, move: Move) -> Node | None:
        for child in self.children:
            if child.move is not None and child.move.same_as(move):
                return child
        return None

    def promote_to_main(self, child: Node) -> None:
        """Swap *child* with the current mainline child.

        The demoted mainline becomes the first variation.
        """
        if child is self.mainline:
            return
        try:
            self.variations.remove(child)
        except ValueError:
            raise ValueError("Node is not a child of this node") from None
        if self.mainline is not None:
            self.variations.insert(0, self.mainline)
        self.mainline = child

    def remove_child(self, child: Node) -> None:
        """Detach *child*; removing the mainline promotes the first variation."""
        if child is self.mainline:
            self.mainline = self.variations.pop(0) if self.variations else None
        else:
            try:
                self.variations.remove(child)
            except ValueError:
                raise ValueError("Node is not a child of this node") from None
        child.parent = None

    # ── Annotations ──────────────────────────────────────────────────────

    @property
    def nags(self) -> list[int]:
        return [a.nag for a in self.annotations if a.nag is not None]

    @property
    def comments(self) -> list[str]:
        return [a.comment for a in self.annotations if a.comment is not None]

    @property
    def comment(self) -> str:
        """All trailing comments joined by a space."""
        return " ".join(self.comments)

    @comment.setter
    def comment(self, text: str) -> None:
        kept = [a for a in self.annotations if a.nag is not None]
        if text:
            kept.append(Annotation(comment=text))
        self.annotations = kept

    @property
    def starting_comment(self) -> str:
        return " ".join(self.starting_comments)

    @starting_comment.setter
    def starting_comment(self, text: str) -> None:
        self.starting_comments = [text] if text else []

    def push_nag(self, nag: int) -> None:
        self.annotations.append(Annotation(nag=nag))

    def add_comment(self, text: str) -> None:
        self.annotations.append(Annotation(comment=text))

    def set_nags(self, nags: Iterable[int]) -> None:
        """Replace the NAGs, keeping the comments after them."""
        comments = [a for a in self.annotations if a.comment is not None]
        self.annotations = [Annotation(nag=n) for n in nags] + comments

    @property
    def evaluation(self) -> Evaluation | None:
        """First ``[%eval ...]`` found in the trailing comments."""
        from pgntree.notation.evaluation import parse_evaluation

        for text in self.comments:
            found = parse_evaluation(text)
            if found is not None:
                return found
        return None

    # ── Display ──────────────────────────────────────────────────────────

    def __repr__(self) -> str:
        label = str(self.move) if self.move is not None else "root"
        return f"<Node {label} children={len(self.children)}>"
