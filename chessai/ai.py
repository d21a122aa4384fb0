from __future__ import annotations

import enum
import logging
import math
import random
from typing import List, Optional, Union

import chess

from .rules import Move, RulesEngine
from .scorer import MoveScorer
from .search import SEARCH_DEPTH, SearchEngine


logger = logging.getLogger(__name__)

# Chance that the easy tier goes looking for a bad move
EASY_BLUNDER_RATE = 0.3
# Share of the ranked moves the medium tier picks from
MEDIUM_TOP_FRACTION = 0.3


class Difficulty(enum.Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["Difficulty", str]) -> "Difficulty":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty: {value!r} (expected one of {choices})") from None


class ChessAI:
    """Picks a move for the side to move according to the current difficulty.

    - easy: random move, and 30% of the time a deliberately bad one when available
    - medium: random pick among the best ranked moves of a one-ply heuristic
    - hard: depth-3 minimax with alpha-beta pruning, deterministic

    The difficulty is the only mutable state. Do not change it while a
    selection is running; callers that share an instance across threads
    must serialize access or use one instance each.
    """

    def __init__(
        self,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
        rules: Optional[RulesEngine] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self._difficulty = Difficulty.parse(difficulty)
        self.rules = rules or RulesEngine()
        self.scorer = MoveScorer(self.rules)
        self.search = SearchEngine(self.rules)
        self.rng = rng or random.Random()

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    def set_difficulty(self, difficulty: Union[Difficulty, str]) -> None:
        self._difficulty = Difficulty.parse(difficulty)

    def get_best_move(self, position: chess.Board) -> Optional[Move]:
        moves = self.rules.generate_legal_moves(position)
        if not moves:
            return None

        if self._difficulty is Difficulty.EASY:
            move = self._easy_move(position, moves)
        elif self._difficulty is Difficulty.MEDIUM:
            move = self._medium_move(position, moves)
        else:
            move = self._hard_move(position, moves)

        move = self.rules.annotate(position, move)
        logger.debug("%s picked %s out of %d moves", self._difficulty.value, move, len(moves))
        return move

    def _easy_move(self, position: chess.Board, moves: List[Move]) -> Move:
        if self.rng.random() < EASY_BLUNDER_RATE:
            bad_moves = [m for m in moves if self._is_bad_move(position, m)]
            if bad_moves:
                return self.rng.choice(bad_moves)
        return self.rng.choice(moves)

    def _is_bad_move(self, position: chess.Board, move: Move) -> bool:
        after = self.rules.apply_move(position, move)
        return self.rules.is_checkmate(after) or self.rules.is_check(after)

    def _medium_move(self, position: chess.Board, moves: List[Move]) -> Move:
        # sorted() is stable, so equal scores keep generation order
        ranked = sorted(moves, key=lambda m: self.scorer.score(position, m), reverse=True)
        top_count = max(1, math.ceil(len(ranked) * MEDIUM_TOP_FRACTION))
        return self.rng.choice(ranked[:top_count])

    def _hard_move(self, position: chess.Board, moves: List[Move]) -> Move:
        maximizing = self.rules.side_to_move(position) == chess.WHITE
        result = self.search.search_root(position, SEARCH_DEPTH, maximizing)
        return result.best_move if result.best_move is not None else moves[0]
