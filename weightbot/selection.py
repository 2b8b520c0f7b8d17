"""Pick a move among the best-weighted candidates."""

from __future__ import annotations

import random
from typing import Callable, List, Optional, Sequence, Tuple

import chess

from .cache import MoveWeight


class MoveSelector:
    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._rng = rng or random.Random()
        self._logger = logger or (lambda *_: None)

    def best_moves(self, move_weights: Sequence[MoveWeight]) -> Tuple[Optional[int], List[chess.Move]]:
        best_weight: Optional[int] = None
        best: List[chess.Move] = []
        for move_weight in move_weights:
            if best_weight is None or move_weight.weight > best_weight:
                best_weight = move_weight.weight
                best = [move_weight.move]
            elif move_weight.weight == best_weight:
                best.append(move_weight.move)
        return best_weight, best

    def select(self, move_weights: Sequence[MoveWeight]) -> chess.Move:
        """Return one of the moves sharing the highest weight, uniformly at random."""

        if not move_weights:
            raise ValueError("cannot select a move from an empty candidate list")

        self._logger("Candidate moves: " + ", ".join(str(item) for item in move_weights))
        best_weight, best = self.best_moves(move_weights)
        move = best[self._rng.randrange(len(best))]
        self._logger(f"Making {move.uci()} Weight: {best_weight}")
        return move


__all__ = ["MoveSelector"]
