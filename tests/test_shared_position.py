from __future__ import annotations

import random
import threading

import chess
import pytest

from chessai import ChessAI, Difficulty, Evaluator, MoveScorer, SearchEngine


class RecordingBoard(chess.Board):
    """Board that logs every push/pop made on this very instance."""

    def __init__(self, *args, **kwargs) -> None:
        self.calls = []
        super().__init__(*args, **kwargs)

    def push(self, move: chess.Move) -> None:
        self.calls.append(("push", move.uci()))
        super().push(move)

    def pop(self) -> chess.Move:
        self.calls.append(("pop",))
        return super().pop()


def _repeating_board() -> RecordingBoard:
    # The start position occurs twice, so repetition checks have to look back
    board = RecordingBoard()
    for san in ("Nf3", "Nf6", "Ng1", "Ng8"):
        board.push_san(san)
    board.calls.clear()
    return board


@pytest.mark.parametrize("tier", list(Difficulty))
def test_get_best_move_never_pushes_on_callers_board(tier):
    board = _repeating_board()
    fen = board.fen()
    move = ChessAI(tier, rng=random.Random(5)).get_best_move(board)
    assert move is not None and move.san
    assert board.calls == []
    assert board.fen() == fen


def test_components_never_push_on_callers_board(rules):
    board = _repeating_board()
    Evaluator(rules).evaluate(board)
    SearchEngine(rules).best_move(board, 2, True)
    SearchEngine(rules).search_root(board, 1, True)
    scorer = MoveScorer(rules)
    for move in rules.generate_legal_moves(board):
        scorer.score(board, move)
        rules.annotate(board, move)
    assert rules.is_draw(board) is False
    assert board.calls == []


def test_threads_can_share_one_board():
    board = chess.Board()
    board.push_san("e4")
    fen = board.fen()
    stack = list(board.move_stack)
    legal = {m.uci() for m in board.legal_moves}
    illegal = []

    def worker(seed: int) -> None:
        ai = ChessAI(Difficulty.EASY, rng=random.Random(seed))
        for _ in range(150):
            move = ai.get_best_move(board)
            if move is None or move.uci() not in legal:
                illegal.append(move)

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert illegal == []
    assert board.fen() == fen
    assert board.move_stack == stack
