"""Rules-engine capabilities the move chooser relies on.

Everything chess specific (move generation, check and draw detection,
position hashing) is answered by ``python-chess``; this module only gives
those queries the names the search code uses.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, List, Optional

import chess
from chess import polyglot


OPENING_MOVE_UCI = "e2e4"


def legal_moves(board: chess.Board) -> List[chess.Move]:
    return list(board.legal_moves)


def make_move(board: chess.Board, move: chess.Move) -> None:
    board.push(move)


def undo_move(board: chess.Board) -> chess.Move:
    return board.pop()


@contextmanager
def applied(board: chess.Board, move: chess.Move) -> Iterator[chess.Board]:
    """Play ``move`` for the duration of the block and always take it back."""

    make_move(board, move)
    try:
        yield board
    finally:
        undo_move(board)


def is_in_check(board: chess.Board) -> bool:
    return board.is_check()


def is_in_checkmate(board: chess.Board) -> bool:
    return board.is_checkmate()


def is_draw(board: chess.Board) -> bool:
    return (
        board.is_stalemate()
        or board.is_insufficient_material()
        or board.is_fifty_moves()
        or board.is_repetition(3)
    )


def identity(board: chess.Board) -> int:
    return polyglot.zobrist_hash(board)


def has_kingside_castle_right(board: chess.Board) -> bool:
    return board.has_kingside_castling_rights(board.turn)


def has_queenside_castle_right(board: chess.Board) -> bool:
    return board.has_queenside_castling_rights(board.turn)


def ply_count(board: chess.Board) -> int:
    return board.ply()


def fifty_move_counter(board: chess.Board) -> int:
    return board.halfmove_clock


def piece_type_at(board: chess.Board, square: chess.Square) -> Optional[int]:
    return board.piece_type_at(square)


def moved_piece_type(board: chess.Board, move: chess.Move) -> Optional[int]:
    return board.piece_type_at(move.from_square)


def is_capture(board: chess.Board, move: chess.Move) -> bool:
    return board.is_capture(move)


def is_castle(board: chess.Board, move: chess.Move) -> bool:
    return board.is_castling(move)


__all__ = [
    "OPENING_MOVE_UCI",
    "applied",
    "fifty_move_counter",
    "has_kingside_castle_right",
    "has_queenside_castle_right",
    "identity",
    "is_capture",
    "is_castle",
    "is_draw",
    "is_in_check",
    "is_in_checkmate",
    "legal_moves",
    "make_move",
    "moved_piece_type",
    "piece_type_at",
    "ply_count",
    "undo_move",
]
