"""PGN movetext lexer.

A single left-to-right scan turning movetext into a flat stream of typed
tokens. Variation depth is not tracked here; unbalanced parentheses are
the tree builder's concern. Malformed input never raises: it produces an
``ERROR`` token whose value describes the problem.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum, auto

from pgntree.core.enums import RESULT_TOKENS
from pgntree.notation.nag import GLYPH_TO_NAG


class TokenKind(Enum):
    MOVE_NUMBER = auto()
    SAN_MOVE = auto()
    COMMENT_OPEN = auto()
    COMMENT_TEXT = auto()
    COMMENT_CLOSE = auto()
    VARIATION_OPEN = auto()
    VARIATION_CLOSE = auto()
    NAG = auto()
    RESULT = auto()
    END_OF_INPUT = auto()
    ERROR = auto()


@dataclass(slots=True, frozen=True)
class Token:
    """One lexical unit with its position in the source text."""

    kind: TokenKind
    value: str
    offset: int
    line: int
    column: int

    @property
    def nag(self) -> int:
        """Numeric code of a ``NAG`` token (``$n`` or a shorthand glyph)."""
        if self.kind is not TokenKind.NAG:
            raise ValueError(f"Not a NAG token: {self.kind.name}")
        if self.value.startswith("$"):
            return int(self.value[1:])
        return GLYPH_TO_NAG[self.value]


_WORD_STOP = frozenset("{}();$!?[]")
_MOVE_NUMBER_RE = re.compile(r"^\d+\.+")
_ZERO_CASTLE_RE = re.compile(r"^0-0(?:-0)?[+#]?$")
_RESULT_LIKE_RE = re.compile(r"^[0-9½/]+-[0-9½/]+$|^[0-9½]+/[0-9½]+$")
_SAN_RE = re.compile(
    r"^(?:[NBRQK]?[a-h]?[1-8]?x?[a-h][1-8](?:=?[NBRQ])?|O-O(?:-O)?)[+#]{0,2}$"
)


class _Source:
    """Offset → (line, column) translation."""

    __slots__ = ("_line_starts", "_first_line")

    def __init__(self, text: str, first_line: int) -> None:
        self._first_line = first_line
        self._line_starts = [0]
        for idx, ch in enumerate(text):
            if ch == "\n":
                self._line_starts.append(idx + 1)

    def token(self, kind: TokenKind, value: str, offset: int) -> Token:
        line_idx = bisect_right(self._line_starts, offset) - 1
        column = offset - self._line_starts[line_idx] + 1
        return Token(kind, value, offset, line_idx + self._first_line, column)


def tokenize(text: str, *, first_line: int = 1) -> Iterator[Token]:
    """Lazily yield the tokens of *text*, ending with ``END_OF_INPUT``.

    *first_line* is the line number of the first line of *text* in the
    document it was cut from; it only affects reported positions.
    """
    src = _Source(text, first_line)
    idx = 0
    total = len(text)

    while idx < total:
        ch = text[idx]

        if ch.isspace():
            idx += 1
            continue

        # Escape line: "%" in the first column hides the whole line.
        if ch == "%" and (idx == 0 or text[idx - 1] == "\n"):
            end = text.find("\n", idx)
            idx = total if end < 0 else end + 1
            continue

        if ch == "{":
            yield src.token(TokenKind.COMMENT_OPEN, "{", idx)
            body_start = idx + 1
            parts: list[str] = []
            pos = body_start
            close = -1
            while pos < total:
                c = text[pos]
                if c == "\\" and pos + 1 < total and text[pos + 1] == "}":
                    parts.append("}")
                    pos += 2
                    continue
                if c == "}":
                    close = pos
                    break
                parts.append(c)
                pos += 1
            yield src.token(TokenKind.COMMENT_TEXT, "".join(parts), body_start)
            if close < 0:
                yield src.token(TokenKind.ERROR, "Unterminated comment", idx)
                idx = total
                break
            yield src.token(TokenKind.COMMENT_CLOSE, "}", close)
            idx = close + 1
            continue

        if ch == ";":
            end = text.find("\n", idx + 1)
            if end < 0:
                end = total
            yield src.token(TokenKind.COMMENT_OPEN, ";", idx)
            yield src.token(TokenKind.COMMENT_TEXT, text[idx + 1 : end], idx + 1)
            yield src.token(TokenKind.COMMENT_CLOSE, "", end)
            idx = end
            continue

        if ch == "(":
            yield src.token(TokenKind.VARIATION_OPEN, "(", idx)
            idx += 1
            continue

        if ch == ")":
            yield src.token(TokenKind.VARIATION_CLOSE, ")", idx)
            idx += 1
            continue

        if ch == "$":
            end = idx + 1
            while end < total and text[end].isdigit():
                end += 1
            if end == idx + 1:
                yield src.token(TokenKind.ERROR, "NAG without a number", idx)
                idx += 1
                continue
            yield src.token(TokenKind.NAG, text[idx:end], idx)
            idx = end
            continue

        if ch in "!?":
            # Every run of one or two of these is a known glyph.
            end = idx
            while end < total and end - idx < 2 and text[end] in "!?":
                end += 1
            yield src.token(TokenKind.NAG, text[idx:end], idx)
            idx = end
            continue

        if ch == "*":
            yield src.token(TokenKind.RESULT, "*", idx)
            idx += 1
            continue

        if ch in _WORD_STOP:
            yield src.token(TokenKind.ERROR, f"Unexpected character {ch!r}", idx)
            idx += 1
            continue

        end = idx
        while end < total and not text[end].isspace() and text[end] not in _WORD_STOP:
            end += 1
        word = text[idx:end]

        if word in RESULT_TOKENS:
            yield src.token(TokenKind.RESULT, word, idx)
        elif _ZERO_CASTLE_RE.match(word):
            yield src.token(TokenKind.SAN_MOVE, word, idx)
        elif (number := _MOVE_NUMBER_RE.match(word)) is not None:
            yield src.token(TokenKind.MOVE_NUMBER, number.group(), idx)
            # Whatever is glued to the number ("1.e4") is scanned next.
            end = idx + number.end()
        elif _RESULT_LIKE_RE.match(word):
            yield src.token(TokenKind.RESULT, word, idx)
        elif word.isdigit():
            yield src.token(TokenKind.MOVE_NUMBER, word, idx)
        elif _SAN_RE.match(word):
            yield src.token(TokenKind.SAN_MOVE, word, idx)
        else:
            yield src.token(TokenKind.ERROR, f"Unexpected token {word!r}", idx)
        idx = end

    yield src.token(TokenKind.END_OF_INPUT, "", total)
