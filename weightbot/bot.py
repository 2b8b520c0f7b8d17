"""Top-level move chooser.

:class:`WeightBot` wires the evaluator, cache, depth controller, analyzer and
selector together and exposes :meth:`WeightBot.choose_move`, called once per
turn with the current board and the time left on the clock.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import Callable, Optional

import chess

from . import rules
from .cache import MoveCache
from .depth import DepthController
from .evaluation import MoveEvaluator
from .params import BotParams, ParamRegistry
from .search import Analyzer
from .selection import MoveSelector


@dataclass
class SearchSummary:
    max_depth: int
    nodes: int
    cache_entries: int
    cache_hits: int
    move: chess.Move
    weight: Optional[int]
    time_spent: float


class WeightBot:
    def __init__(
        self,
        params: Optional[BotParams] = None,
        *,
        preset: str = "default",
        rng: Optional[random.Random] = None,
        logger: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.params = params.clamp() if params is not None else ParamRegistry.resolve(preset)
        self._logger = logger or (lambda *_: None)

        self.evaluator = MoveEvaluator(self.params)
        self.cache = MoveCache(self.evaluator)
        self.depth_controller = DepthController(self.params)
        self.analyzer = Analyzer(self.cache, self.depth_controller, self.params, logger=self._logger)
        self.selector = MoveSelector(rng, logger=self._logger)
        self.last_search: Optional[SearchSummary] = None

    def new_game(self) -> None:
        self.cache.clear()
        self.last_search = None

    def choose_move(self, board: chess.Board, time_remaining_ms: float) -> chess.Move:
        if rules.ply_count(board) == 0:
            opening = chess.Move.from_uci(rules.OPENING_MOVE_UCI)
            if board.is_legal(opening):
                self._logger(f"opening with {opening.uci()}")
                self.last_search = None
                return opening

        if not self.params.persist_cache:
            self.cache.clear()

        max_depth = self.depth_controller.max_depth(time_remaining_ms)
        self._logger(f"budget={time_remaining_ms:.0f}ms max_depth={max_depth} cache={len(self.cache)}")

        hits_before = self.cache.hits
        start = time.perf_counter()
        self.analyzer.nodes = 0
        move_weights = self.analyzer.analyze(board, self.params.minimum_depth, True, 0, time_remaining_ms)
        move = self.selector.select(move_weights)
        weight = next(item.weight for item in move_weights if item.move == move)
        elapsed = time.perf_counter() - start

        self.last_search = SearchSummary(
            max_depth=max_depth,
            nodes=self.analyzer.nodes,
            cache_entries=len(self.cache),
            cache_hits=self.cache.hits - hits_before,
            move=move,
            weight=weight,
            time_spent=elapsed,
        )
        self._logger(
            f"completed max_depth={max_depth} nodes={self.analyzer.nodes} "
            f"cache={len(self.cache)} time={elapsed:.2f}s"
        )
        return move


def choose_move(
    board: chess.Board,
    time_remaining_ms: float,
    *,
    rng: Optional[random.Random] = None,
) -> chess.Move:
    """Choose a move with a fresh default-configured :class:`WeightBot`."""

    return WeightBot(rng=rng).choose_move(board, time_remaining_ms)


__all__ = ["SearchSummary", "WeightBot", "choose_move"]
