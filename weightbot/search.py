"""Recursive adversarial search over cached move weights.

Every node starts from the static weights held in the :class:`MoveCache` and
rewrites each move's weight as ``static weight - best opponent reply``,
recursively, until the depth budget runs out. There is no alpha-beta window:
all moves at a node are searched, except for two shortcuts. A node whose best
static weight is above ``auto_accept_weight`` is returned as-is, and moves
weighted below ``prune_weight`` keep their static weight.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

import chess

from . import rules
from .cache import MoveCache, MoveWeight
from .depth import DepthController
from .params import BotParams


class Analyzer:
    def __init__(
        self,
        cache: MoveCache,
        depth_controller: DepthController,
        params: Optional[BotParams] = None,
        *,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.cache = cache
        self.depth_controller = depth_controller
        self.params = params or depth_controller.params
        self._logger = logger or (lambda *_: None)
        self.nodes = 0

    def analyze(
        self,
        board: chess.Board,
        depth: int,
        my_turn: bool,
        total_depth: int,
        time_remaining_ms: float,
    ) -> List[MoveWeight]:
        """Return the weighted moves of ``board`` searched ``depth`` plies deep.

        ``my_turn`` records whose perspective the node is scored from; the
        weights themselves are always relative to the side to move at the node.
        The returned list follows the cached (static) order.
        """

        self.nodes += 1
        move_weights = self.cache.get_or_compute(board)

        if depth < 1 or not move_weights:
            return move_weights

        if move_weights[0].weight > self.params.auto_accept_weight:
            return move_weights

        return [
            self._search_move(board, move_weight, depth, my_turn, total_depth, time_remaining_ms)
            for move_weight in move_weights
        ]

    def _search_move(
        self,
        board: chess.Board,
        move_weight: MoveWeight,
        depth: int,
        my_turn: bool,
        total_depth: int,
        time_remaining_ms: float,
    ) -> MoveWeight:
        # Static weights rarely get this low, so this almost never fires.
        if move_weight.weight < self.params.prune_weight:
            self._logger(f"Pruned {move_weight.move.uci()}")
            return move_weight

        move = move_weight.move
        extended_depth = self.depth_controller.extend(board, move, depth, total_depth, time_remaining_ms)

        with rules.applied(board, move):
            if rules.is_in_checkmate(board):
                return move_weight
            replies = self.analyze(board, extended_depth - 1, not my_turn, total_depth + 1, time_remaining_ms)

        if not replies:
            return move_weight

        return MoveWeight(move=move, weight=move_weight.weight - highest_weight(replies))


def highest_weight(move_weights: Sequence[MoveWeight]) -> int:
    return max(move_weight.weight for move_weight in move_weights)


__all__ = ["Analyzer", "highest_weight"]
