"""Chess opponent with three difficulty tiers, built on python-chess.

Modules:
- rules: python-chess backed rules engine and the typed Move
- evaluator: static evaluation of positions
- scorer: one-ply move heuristic used by the medium tier
- search: fixed-depth minimax with alpha-beta pruning used by the hard tier
- ai: difficulty tiers and move selection
- game: single-player game session against the AI
"""

from .ai import ChessAI, Difficulty
from .evaluator import Evaluator, MATE_SCORE
from .game import Game, MoveRecord
from .rules import Move, RulesEngine
from .scorer import MoveScorer
from .search import SEARCH_DEPTH, SearchEngine, SearchResult

__all__ = [
    "ChessAI",
    "Difficulty",
    "Evaluator",
    "MATE_SCORE",
    "Game",
    "MoveRecord",
    "Move",
    "RulesEngine",
    "MoveScorer",
    "SEARCH_DEPTH",
    "SearchEngine",
    "SearchResult",
]
