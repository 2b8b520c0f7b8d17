"""Tunable weights and limits for the WeightBot move chooser."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Optional, Tuple

import chess


PIECE_VALUES: Dict[int, int] = {
    chess.PAWN: 100,
    chess.KNIGHT: 300,
    chess.BISHOP: 300,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 10000,
}


@dataclass(slots=True, frozen=True)
class BotParams:
    piece_values: Dict[int, int] = field(default_factory=lambda: dict(PIECE_VALUES))

    pawn_advance_weight: int = 1  # per rank travelled
    check_weight: int = 10
    checkmate_weight: int = 100_000
    draw_weight: int = -50
    no_more_castle_weight: int = -5
    capture_weight: int = -1  # let the opponent capture first
    develop_weight: int = 5
    castle_weight: int = 5
    early_queen_weight: int = -10
    early_queen_ply: int = 10

    minimum_depth: int = 2
    maximum_depth: int = 9
    # (threshold_ms, depth reduction) pairs, highest threshold first.
    depth_tiers: Tuple[Tuple[int, int], ...] = ((30_000, 0), (10_000, 2), (3_000, 4))
    lowest_tier_reduction: int = 6

    prune_weight: int = -1000
    auto_accept_weight: int = 10_000

    persist_cache: bool = False

    def clamp(self) -> "BotParams":
        minimum_depth = max(0, int(self.minimum_depth))
        tiers = tuple(
            sorted(
                ((int(threshold), max(0, int(reduction))) for threshold, reduction in self.depth_tiers),
                reverse=True,
            )
        )
        return replace(
            self,
            piece_values=dict(self.piece_values),
            minimum_depth=minimum_depth,
            maximum_depth=max(minimum_depth, int(self.maximum_depth)),
            depth_tiers=tiers,
            lowest_tier_reduction=max(0, int(self.lowest_tier_reduction)),
            early_queen_ply=max(0, int(self.early_queen_ply)),
        )

    def piece_value(self, piece_type: Optional[int]) -> int:
        if piece_type is None:
            return 0
        return self.piece_values.get(piece_type, 0)


class ParamRegistry:
    PRESETS: Dict[str, BotParams] = {
        "default": BotParams(),
        "blitz": BotParams(
            maximum_depth=5,
            depth_tiers=((20_000, 0), (5_000, 2)),
            lowest_tier_reduction=2,
        ),
        "deep": BotParams(
            minimum_depth=3,
            maximum_depth=11,
            depth_tiers=((60_000, 0), (20_000, 2), (5_000, 4)),
            lowest_tier_reduction=8,
            persist_cache=True,
        ),
    }

    @classmethod
    def resolve(cls, preset: str) -> BotParams:
        if preset not in cls.PRESETS:
            raise ValueError(f"Unknown parameter preset '{preset}'")
        return cls.PRESETS[preset].clamp()


__all__ = ["BotParams", "ParamRegistry", "PIECE_VALUES"]
