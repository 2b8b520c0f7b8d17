"""Per-position memo of statically scored legal moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

import chess

from . import rules
from .evaluation import MoveEvaluator


@dataclass(frozen=True)
class MoveWeight:
    """A legal move paired with its weight for the side to move."""

    move: chess.Move
    weight: int

    def __str__(self) -> str:
        return f"({self.move.uci()} Weight: {self.weight})"


class MoveCache:
    """Read-through cache keyed by position identity.

    Each entry holds every legal move of the position with its static score,
    best first. Entries are never invalidated; two positions that share an
    identity key share an entry.
    """

    def __init__(self, evaluator: MoveEvaluator) -> None:
        self.evaluator = evaluator
        self._entries: Dict[int, List[MoveWeight]] = {}
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, board: chess.Board) -> List[MoveWeight]:
        key = rules.identity(board)
        cached = self._entries.get(key)
        if cached is not None:
            self.hits += 1
            return cached

        self.misses += 1
        generated = [
            MoveWeight(move=move, weight=self.evaluator.evaluate(board, move))
            for move in rules.legal_moves(board)
        ]
        generated.sort(key=lambda item: item.weight, reverse=True)
        self._entries[key] = generated
        return generated

    def clear(self) -> None:
        self._entries.clear()
        self.hits = 0
        self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, board: object) -> bool:
        if not isinstance(board, chess.Board):
            return False
        return rules.identity(board) in self._entries


__all__ = ["MoveCache", "MoveWeight"]
