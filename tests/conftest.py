from __future__ import annotations

import random

import chess
import pytest

from chessai import RulesEngine


# White to move, two legal moves: Nxg8 and the smothered mate Nf7#
MATE_IN_ONE_FEN = "1r4rk/6pp/5p1N/5Pp1/6P1/p7/P7/K7 w - - 0 1"
# Black to move and stalemated
STALEMATE_FEN = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
# White's only legal move is h2h3
SINGLE_MOVE_FEN = "1r5k/8/8/8/7p/p7/P6P/K7 w - - 0 1"


@pytest.fixture
def rules() -> RulesEngine:
    return RulesEngine()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def mate_in_one() -> chess.Board:
    return chess.Board(MATE_IN_ONE_FEN)


@pytest.fixture
def stalemate() -> chess.Board:
    return chess.Board(STALEMATE_FEN)


@pytest.fixture
def single_move() -> chess.Board:
    return chess.Board(SINGLE_MOVE_FEN)


@pytest.fixture
def fools_mate() -> chess.Board:
    board = chess.Board()
    for san in ("f3", "e5", "g4", "Qh4#"):
        board.push_san(san)
    return board


@pytest.fixture
def scholars_mate() -> chess.Board:
    board = chess.Board()
    for san in ("e4", "e5", "Bc4", "Nc6", "Qh5", "Nf6", "Qxf7#"):
        board.push_san(san)
    return board
