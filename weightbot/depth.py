"""Search depth decisions: how deep overall, and where to look further."""

from __future__ import annotations

from typing import Optional

import chess

from . import rules
from .params import BotParams


class DepthController:
    def __init__(self, params: Optional[BotParams] = None) -> None:
        self.params = params or BotParams()

    def max_depth(self, time_remaining_ms: float) -> int:
        """Deepest total ply count allowed with ``time_remaining_ms`` on the clock."""

        params = self.params
        for threshold, reduction in params.depth_tiers:
            if time_remaining_ms > threshold:
                return max(0, params.maximum_depth - reduction)
        return max(0, params.maximum_depth - params.lowest_tier_reduction)

    def extend(
        self,
        board: chess.Board,
        move: chess.Move,
        depth: int,
        total_depth: int,
        time_remaining_ms: float,
    ) -> int:
        """Return the remaining depth to search below ``move``.

        Captures and checking moves get one extra ply once the search is at
        its last ply, never beyond the budget-derived maximum.
        """

        if depth > 1:
            return depth

        extended = depth
        if rules.is_capture(board, move):
            extended += 1
        else:
            with rules.applied(board, move):
                if rules.is_in_check(board):
                    extended += 1

        return min(self.max_depth(time_remaining_ms), total_depth + extended) - total_depth


__all__ = ["DepthController"]
