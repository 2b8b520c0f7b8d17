import chess
import pytest

from weightbot import rules
from weightbot.cache import MoveCache, MoveWeight
from weightbot.evaluation import MoveEvaluator


@pytest.fixture()
def cache() -> MoveCache:
    return MoveCache(MoveEvaluator())


def test_entries_cover_all_legal_moves_best_first(cache: MoveCache) -> None:
    board = chess.Board("4k3/8/8/3q4/4P3/8/8/4K3 w - - 0 20")
    weights = cache.get_or_compute(board)
    assert {item.move for item in weights} == set(board.legal_moves)
    assert [item.weight for item in weights] == sorted((item.weight for item in weights), reverse=True)
    assert weights[0].move == chess.Move.from_uci("e4d5")


def test_second_lookup_is_a_hit(cache: MoveCache) -> None:
    board = chess.Board()
    board.push_uci("e2e4")
    first = cache.get_or_compute(board)
    second = cache.get_or_compute(board)
    assert second is first
    assert [str(item) for item in second] == [str(item) for item in first]
    assert (cache.hits, cache.misses, len(cache)) == (1, 1, 1)
    assert board in cache


def test_identity_collisions_share_an_entry(cache: MoveCache, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(rules, "identity", lambda board: 42)
    first = cache.get_or_compute(chess.Board())
    other = chess.Board("4k3/8/8/8/8/8/8/1R2K3 w - - 0 60")
    assert cache.get_or_compute(other) is first


def test_clear_empties_cache(cache: MoveCache) -> None:
    board = chess.Board()
    board.push_uci("d2d4")
    cache.get_or_compute(board)
    cache.clear()
    assert len(cache) == 0
    assert board not in cache
    assert (cache.hits, cache.misses) == (0, 0)
    assert "not a board" not in cache


def test_move_weight_renders_uci_and_weight() -> None:
    item = MoveWeight(move=chess.Move.from_uci("e2e4"), weight=12)
    assert str(item) == "(e2e4 Weight: 12)"
