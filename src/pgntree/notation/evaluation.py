"""Engine evaluations embedded in comments as ``[%eval ...]`` commands."""

from __future__ import annotations

import re
from dataclasses import dataclass

# [%eval 0.31], [%eval -1.5,18], [%eval #-3], [%eval #4,22]
_EVAL_RE = re.compile(
    r"\[%eval\s+(?:#(?P<mate>[+-]?\d+)|(?P<pawns>[+-]?(?:\d+(?:\.\d*)?|\.\d+)))"
    r"(?:,(?P<depth>\d+))?\s*\]"
)


@dataclass(slots=True, frozen=True)
class Evaluation:
    """Engine assessment from White's point of view.

    Exactly one of ``centipawns`` and ``mate`` is set.
    """

    centipawns: int | None = None
    mate: int | None = None
    depth: int | None = None

    @property
    def is_mate(self) -> bool:
        return self.mate is not None

    @property
    def pawns(self) -> float | None:
        return None if self.centipawns is None else self.centipawns / 100


def parse_evaluation(comment: str) -> Evaluation | None:
    """First ``[%eval ...]`` command found in *comment*, if any."""
    match = _EVAL_RE.search(comment)
    if match is None:
        return None
    depth = int(match["depth"]) if match["depth"] else None
    if match["mate"] is not None:
        return Evaluation(mate=int(match["mate"]), depth=depth)
    return Evaluation(centipawns=round(float(match["pawns"]) * 100), depth=depth)


def format_evaluation(evaluation: Evaluation) -> str:
    """``[%eval ...]`` command text for *evaluation*."""
    if evaluation.mate is not None:
        body = f"#{evaluation.mate}"
    else:
        body = f"{(evaluation.centipawns or 0) / 100:.2f}"
    if evaluation.depth is not None:
        body += f",{evaluation.depth}"
    return f"[%eval {body}]"
