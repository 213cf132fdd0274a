"""Serializer: :class:`GameTree` → PGN text."""

from __future__ import annotations

from pgntree.config import DEFAULT_WRITER_OPTIONS, WriterOptions
from pgntree.core.enums import Color
from pgntree.game.node import Node
from pgntree.game.tree import GameTree
from pgntree.notation.headers import format_headers
from pgntree.notation.nag import NAG_TO_GLYPH, format_nag


def _comment(text: str) -> str:
    if not text:
        return "{ }"
    return "{ " + text.replace("}", "\\}") + " }"


def _wrap(tokens: list[str], width: int | None) -> str:
    if width is None:
        return " ".join(tokens)
    lines: list[str] = []
    current = ""
    for token in tokens:
        if current and len(current) + 1 + len(token) > width:
            lines.append(current)
            current = token
        else:
            current = f"{current} {token}" if current else token
    if current:
        lines.append(current)
    return "\n".join(lines)


class PgnWriter:
    """Renders game trees with one set of :class:`WriterOptions`.

    Movetext is produced as a list of tokens first (a move number is kept in
    the same token as its move) and wrapped afterwards.
    """

    def __init__(self, options: WriterOptions | None = None) -> None:
        self.options = options or DEFAULT_WRITER_OPTIONS

    def write(self, tree: GameTree) -> str:
        tree.validate()

        parts: list[str] = []
        if tree.headers and self.options.include_headers:
            headers = dict(tree.headers)
            if "Result" in headers:
                headers["Result"] = tree.result.token
            parts.append("\n".join(format_headers(headers)))
            parts.append("")
        parts.append(_wrap(self.movetext_tokens(tree), self.options.max_width))
        return "\n".join(parts)

    def movetext_tokens(self, tree: GameTree) -> list[str]:
        out: list[str] = [_comment(text) for text in tree.root.comments]

        board = tree.board
        initial = tree.initial_position
        start_ply = (board.fullmove_number(initial) - 1) * 2
        if board.turn(initial) is Color.BLACK:
            start_ply += 1

        self._write_line(tree, out, tree.root, start_ply, force_number=True)
        out.append(tree.result.token)
        return out

    # ── Lines ────────────────────────────────────────────────────────────

    def _write_line(
        self,
        tree: GameTree,
        out: list[str],
        node: Node,
        ply: int,
        *,
        force_number: bool,
    ) -> None:
        """Write the continuation after *node*, alternatives included."""
        while node.mainline is not None:
            child = node.mainline
            force_number = self._write_move(tree, out, child, ply, force_number)
            for variation in node.variations:
                self._write_variation(tree, out, variation, ply)
                force_number = True
            node = child
            ply += 1

    def _write_variation(
        self, tree: GameTree, out: list[str], first: Node, ply: int
    ) -> None:
        start = len(out)
        force_number = self._write_move(tree, out, first, ply, True)
        self._write_line(tree, out, first, ply + 1, force_number=force_number)
        out[start] = "(" + out[start]
        out[-1] += ")"

    def _write_move(
        self,
        tree: GameTree,
        out: list[str],
        node: Node,
        ply: int,
        force_number: bool,
    ) -> bool:
        """Write one move with its comments; returns whether the next move
        needs an explicit number."""
        for text in node.starting_comments:
            out.append(_comment(text))
            force_number = True

        san = self._san(tree, node)
        number = ply // 2 + 1
        if ply % 2 == 0:
            out.append(f"{number}. {san}")
        elif force_number:
            out.append(f"{number}... {san}")
        else:
            out.append(san)

        after_comment = False
        for idx, annotation in enumerate(node.annotations):
            if annotation.nag is not None:
                glyph = NAG_TO_GLYPH.get(annotation.nag)
                if self.options.nag_glyphs and idx == 0 and glyph is not None:
                    out[-1] += glyph
                else:
                    out.append(format_nag(annotation.nag))
            else:
                out.append(_comment(annotation.comment or ""))
                after_comment = True
        return after_comment

    def _san(self, tree: GameTree, node: Node) -> str:
        move = node.move
        assert move is not None
        if self.options.normalize_san or not move.san:
            return tree.board.san(tree.position_before(node), move)
        return move.san


def render(tree: GameTree, options: WriterOptions | None = None) -> str:
    """PGN text for *tree*; raises :class:`StructuralError` on a broken tree."""
    return PgnWriter(options).write(tree)
