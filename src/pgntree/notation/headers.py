"""Tag-pair section: split it off the movetext and write it back."""

from __future__ import annotations

import re

from pgntree.errors import ParseError

_PGN_HEADER_RE = re.compile(r'^\[(\w+)\s+"((?:[^"\\]|\\.)*)"\]\s*$')


def split_headers(pgn_text: str) -> tuple[dict[str, str], str, int]:
    """Separate the tag pairs from the movetext.

    Returns the headers, the movetext and the line number (1-based) on which
    the movetext starts, so token positions can be reported against the
    original text.
    """
    headers: dict[str, str] = {}
    lines = pgn_text.splitlines()

    idx = 0
    while idx < len(lines):
        line = lines[idx].strip()
        if not line:
            idx += 1
            continue
        if not line.startswith("["):
            break
        match = _PGN_HEADER_RE.match(line)
        if match is None:
            raise ParseError(
                f"Invalid PGN header line: {line}", line=idx + 1, column=1
            )
        key, raw_value = match.groups()
        headers[key] = raw_value.replace('\\"', '"').replace("\\\\", "\\")
        idx += 1

    return headers, "\n".join(lines[idx:]), idx + 1


def setup_fen(headers: dict[str, str]) -> str | None:
    """Starting FEN from the headers, unless ``SetUp`` explicitly disables it."""
    fen = headers.get("FEN")
    if fen is None or headers.get("SetUp") == "0":
        return None
    return fen


def format_headers(headers: dict[str, str]) -> list[str]:
    """One ``[Key "Value"]`` line per header, in insertion order."""
    lines: list[str] = []
    for key, value in headers.items():
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'[{key} "{escaped}"]')
    return lines
