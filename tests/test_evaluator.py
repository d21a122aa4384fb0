from __future__ import annotations

import chess
import pytest

from chessai import Evaluator, MATE_SCORE
from chessai.evaluator import evaluate


def test_white_mated_scores_minus_mate(fools_mate):
    assert Evaluator().evaluate(fools_mate) == -MATE_SCORE == -10000


def test_black_mated_scores_plus_mate(scholars_mate):
    assert Evaluator().evaluate(scholars_mate) == MATE_SCORE == 10000


def test_stalemate_and_draws_score_zero(stalemate):
    assert Evaluator().evaluate(stalemate) == 0
    assert evaluate(chess.Board("8/8/8/4k3/8/8/8/4K3 w - - 0 1")) == 0


def test_starting_position_only_counts_mobility_of_side_to_move():
    # Material and center cancel out; White to move with 20 moves
    assert evaluate(chess.Board()) == pytest.approx(2.0)


def test_center_and_one_sided_mobility_after_e4():
    board = chess.Board()
    board.push_san("e4")
    # +0.5 for the pawn on e4, Black to move with 20 moves
    assert evaluate(board) == pytest.approx(0.5 - 2.0)


def test_material_is_signed_by_color():
    # White has an extra queen; Black to move with a lone king in the corner
    board = chess.Board("7k/8/8/8/8/8/8/Q6K b - - 0 1")
    black_moves = board.legal_moves.count()
    expected = (100 + 9) - 100 - 0.1 * black_moves
    assert evaluate(board) == pytest.approx(expected)


def test_black_piece_in_center_counts_against_white():
    board = chess.Board("7k/8/8/8/3n4/8/P7/7K w - - 0 1")
    white_moves = board.legal_moves.count()
    expected = 1 - 3 - 0.5 + 0.1 * white_moves
    assert evaluate(board) == pytest.approx(expected)


def test_evaluate_does_not_touch_board(scholars_mate):
    fen = scholars_mate.fen()
    Evaluator().evaluate(scholars_mate)
    assert scholars_mate.fen() == fen
