from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import chess

from .evaluator import Evaluator
from .rules import Move, RulesEngine


logger = logging.getLogger(__name__)

SEARCH_DEPTH = 3

INF = float("inf")


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: float
    nodes: int
    scored_moves: List[Tuple[Move, float]] = field(default_factory=list)


class SearchEngine:
    """Fixed-depth minimax with alpha-beta pruning.

    Moves are searched in the order the rules engine generates them. Every
    child position is a fresh copy, so the board handed in is never touched.
    """

    def __init__(
        self,
        rules: Optional[RulesEngine] = None,
        evaluator: Optional[Evaluator] = None,
    ) -> None:
        self.rules = rules or RulesEngine()
        self.evaluator = evaluator or Evaluator(self.rules)

    def best_move(
        self,
        position: chess.Board,
        depth: int,
        maximizing: bool,
        alpha: float = -INF,
        beta: float = INF,
    ) -> float:
        """Return the minimax value of ``position`` searched ``depth`` plies deep."""
        score, nodes = self._alphabeta(position, depth, alpha, beta, maximizing)
        logger.debug("search depth=%d nodes=%d score=%s", depth, nodes, score)
        return score

    def search_root(self, position: chess.Board, depth: int, maximizing: bool) -> SearchResult:
        """Score every root move and keep the first strictly best one.

        Each root move gets its own full window so the recorded values are
        exact, which makes the choice independent of pruning.
        """
        best_move: Optional[Move] = None
        best_score = -INF if maximizing else INF
        nodes = 0
        scored_moves: List[Tuple[Move, float]] = []

        for move in self.rules.generate_legal_moves(position):
            child = self.rules.apply_move(position, move)
            score, sub_nodes = self._alphabeta(child, depth - 1, -INF, INF, not maximizing)
            nodes += sub_nodes + 1
            scored_moves.append((move, score))
            if best_move is None:
                best_move, best_score = move, score
            elif (score > best_score) if maximizing else (score < best_score):
                best_move, best_score = move, score

        if best_move is None:
            best_score = self.evaluator.evaluate(position)

        logger.debug("root search depth=%d nodes=%d best=%s score=%s", depth, nodes, best_move, best_score)
        return SearchResult(best_move=best_move, score=best_score, nodes=nodes, scored_moves=scored_moves)

    def root_values(self, position: chess.Board, depth: int, maximizing: bool) -> List[Tuple[Move, float]]:
        return self.search_root(position, depth, maximizing).scored_moves

    def _alphabeta(
        self,
        board: chess.Board,
        depth: int,
        alpha: float,
        beta: float,
        maximizing: bool,
    ) -> Tuple[float, int]:
        if depth <= 0 or self.rules.is_terminal(board):
            return self.evaluator.evaluate(board), 1

        moves = self.rules.generate_legal_moves(board)
        if not moves:
            return self.evaluator.evaluate(board), 1

        nodes = 0

        if maximizing:
            value = -INF
            for move in moves:
                child = self.rules.apply_move(board, move)
                score, child_nodes = self._alphabeta(child, depth - 1, alpha, beta, maximizing=False)
                nodes += child_nodes + 1
                value = max(value, score)
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
            return value, nodes
        else:
            value = INF
            for move in moves:
                child = self.rules.apply_move(board, move)
                score, child_nodes = self._alphabeta(child, depth - 1, alpha, beta, maximizing=True)
                nodes += child_nodes + 1
                value = min(value, score)
                beta = min(beta, value)
                if beta <= alpha:
                    break
            return value, nodes
