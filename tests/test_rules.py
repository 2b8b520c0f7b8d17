import chess
import pytest

from weightbot import rules


def test_applied_restores_board_on_exit() -> None:
    board = chess.Board()
    before = board.fen()
    with rules.applied(board, chess.Move.from_uci("e2e4")):
        assert board.piece_type_at(chess.E4) == chess.PAWN
    assert board.fen() == before
    assert not board.move_stack


def test_applied_restores_board_when_block_raises() -> None:
    board = chess.Board()
    key = rules.identity(board)
    with pytest.raises(RuntimeError):
        with rules.applied(board, chess.Move.from_uci("g1f3")):
            raise RuntimeError("boom")
    assert rules.identity(board) == key


def test_is_draw_detects_stalemate_and_bare_kings() -> None:
    assert rules.is_draw(chess.Board("k7/8/1Q6/8/8/8/8/7K b - - 0 40"))
    assert rules.is_draw(chess.Board("k7/8/8/8/8/8/8/7K w - - 0 40"))
    assert not rules.is_draw(chess.Board())


def test_castle_rights_follow_side_to_move() -> None:
    board = chess.Board("r3k2r/8/8/8/8/8/8/R3K2R b Kq - 0 20")
    assert not rules.has_kingside_castle_right(board)
    assert rules.has_queenside_castle_right(board)


def test_counters_come_from_board() -> None:
    board = chess.Board("4k3/8/8/8/8/8/8/1R2K3 w - - 37 60")
    assert rules.fifty_move_counter(board) == 37
    assert rules.ply_count(board) == 118
    assert rules.ply_count(chess.Board()) == 0
