"""Square value type and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from dataclasses import dataclass

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True)
class Square:
    """Immutable board coordinate; ``file`` and ``rank`` are both 0–7."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise ValueError(
                f"Square out of range: file={self.file!r}, rank={self.rank!r}"
            )

    @property
    def index(self) -> int:
        """Index 0–63, e.g. a1 → 0, h8 → 63."""
        return self.rank * 8 + self.file

    @property
    def name(self) -> str:
        """Human-readable name, e.g. ``'e4'``."""
        return _FILES[self.file] + _RANKS[self.rank]

    @classmethod
    def from_index(cls, index: int) -> Square:
        if not 0 <= index < 64:
            raise ValueError(f"Square index out of range: {index!r}")
        return cls(index & 7, index >> 3)

    @classmethod
    def from_name(cls, name: str) -> Square:
        """Parse a square name, e.g. ``'e4'``."""
        if len(name) != 2 or name[0] not in _FILES or name[1] not in _RANKS:
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(name[0]), _RANKS.index(name[1]))

    def __str__(self) -> str:
        return self.name
