"""Static move scoring.

The evaluator looks at a single candidate move and returns an integer score
from the point of view of the side making it. It never searches: the only
lookahead is playing the move once to ask the rules engine whether it gives
check, mates or draws.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

import chess

from . import rules
from .params import BotParams


# Home squares of the pieces that earn a development bonus, per colour.
_HOME_SQUARES: Dict[bool, Dict[int, Tuple[chess.Square, ...]]] = {
    chess.WHITE: {
        chess.KNIGHT: (chess.B1, chess.G1),
        chess.BISHOP: (chess.C1, chess.F1),
        chess.ROOK: (chess.A1, chess.H1),
        chess.QUEEN: (chess.D1,),
    },
    chess.BLACK: {
        chess.KNIGHT: (chess.B8, chess.G8),
        chess.BISHOP: (chess.C8, chess.F8),
        chess.ROOK: (chess.A8, chess.H8),
        chess.QUEEN: (chess.D8,),
    },
}

_QUEENSIDE_ROOK_HOME = {chess.WHITE: chess.A1, chess.BLACK: chess.A8}
_KINGSIDE_ROOK_HOME = {chess.WHITE: chess.H1, chess.BLACK: chess.H8}


class MoveEvaluator:
    """Additive material and positional heuristics for one move."""

    def __init__(self, params: Optional[BotParams] = None) -> None:
        self.params = params or BotParams()

    def evaluate(self, board: chess.Board, move: chess.Move) -> int:
        params = self.params
        piece_type = rules.moved_piece_type(board, move)
        castles = rules.is_castle(board, move)

        weight = params.piece_value(rules.piece_type_at(board, move.to_square))

        if piece_type == chess.PAWN:
            distance = abs(chess.square_rank(move.from_square) - chess.square_rank(move.to_square))
            weight += distance * params.pawn_advance_weight
            if move.promotion is not None:
                weight += params.piece_value(move.promotion) - params.piece_value(chess.PAWN)

        if castles:
            weight += params.castle_weight

        if rules.is_capture(board, move):
            weight += params.capture_weight

        if piece_type == chess.QUEEN and rules.ply_count(board) < params.early_queen_ply:
            weight += params.early_queen_weight

        weight -= rules.fifty_move_counter(board)

        if not castles and self._forfeits_castling(board, move, piece_type):
            weight += params.no_more_castle_weight

        if self._is_development(board, move, piece_type):
            weight += params.develop_weight

        with rules.applied(board, move):
            if rules.is_in_check(board):
                weight += params.check_weight
                if rules.is_in_checkmate(board):
                    weight += params.checkmate_weight
            if rules.is_draw(board):
                weight += params.draw_weight

        return weight

    def _forfeits_castling(self, board: chess.Board, move: chess.Move, piece_type: Optional[int]) -> bool:
        kingside = rules.has_kingside_castle_right(board)
        queenside = rules.has_queenside_castle_right(board)
        if piece_type == chess.KING:
            return kingside or queenside
        if piece_type == chess.ROOK:
            if move.from_square == _QUEENSIDE_ROOK_HOME[board.turn]:
                return queenside
            if move.from_square == _KINGSIDE_ROOK_HOME[board.turn]:
                return kingside
        return False

    def _is_development(self, board: chess.Board, move: chess.Move, piece_type: Optional[int]) -> bool:
        if piece_type is None:
            return False
        return move.from_square in _HOME_SQUARES[board.turn].get(piece_type, ())


__all__ = ["MoveEvaluator"]
