"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from pgntree.board import StandardBoardModel, TableBoardModel
from pgntree.core.enums import PieceKind
from pgntree.core.move import Move


def _pawn(uci: str, san: str) -> Move:
    return Move.from_uci(uci, PieceKind.PAWN, san=san)


def _knight(uci: str, san: str) -> Move:
    return Move.from_uci(uci, PieceKind.KNIGHT, san=san)


# A handful of opening lines; enough to drive the parser without chess rules.
OPENING_TABLE: dict[tuple[str, ...], list[Move]] = {
    (): [_pawn("e2e4", "e4"), _pawn("d2d4", "d4"), _knight("g1f3", "Nf3")],
    ("e4",): [_pawn("e7e5", "e5"), _pawn("c7c5", "c5")],
    ("d4",): [_pawn("d7d5", "d5"), _knight("b8c6", "Nc6"), _knight("g8f6", "Nf6")],
    ("d4", "Nc6"): [_pawn("e2e4", "e4")],
    ("d4", "d5"): [_pawn("c2c4", "c4")],
    ("e4", "e5"): [_knight("g1f3", "Nf3")],
    ("e4", "c5"): [_knight("g1f3", "Nf3")],
}


@pytest.fixture()
def standard_board() -> StandardBoardModel:
    return StandardBoardModel()


@pytest.fixture()
def table_board() -> TableBoardModel:
    return TableBoardModel(OPENING_TABLE)
