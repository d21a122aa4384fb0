from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import List, Optional, Tuple

import chess


Cell = Optional[Tuple[chess.Color, chess.PieceType]]


@dataclass(frozen=True)
class Move:
    """A legal move as produced by the rules engine.

    Notation is informational only and does not take part in equality, so a
    move annotated with SAN still compares equal to the generated move.
    """

    from_square: chess.Square
    to_square: chess.Square
    promotion: Optional[chess.PieceType] = None
    captured: Optional[chess.PieceType] = None
    san: Optional[str] = field(default=None, compare=False)

    @classmethod
    def from_chess(cls, board: chess.Board, move: chess.Move) -> "Move":
        captured: Optional[chess.PieceType] = None
        if board.is_en_passant(move):
            captured = chess.PAWN
        else:
            target = board.piece_at(move.to_square)
            if target is not None:
                captured = target.piece_type
        return cls(move.from_square, move.to_square, move.promotion, captured)

    def to_chess(self) -> chess.Move:
        return chess.Move(self.from_square, self.to_square, promotion=self.promotion)

    def uci(self) -> str:
        return self.to_chess().uci()

    def __str__(self) -> str:
        return self.san or self.uci()


class RulesEngine:
    """Chess rules backed by python-chess.

    Positions are ``chess.Board`` instances. Nothing here mutates a board that
    was passed in, even temporarily: anything python-chess implements with
    push/pop runs on a copy, so one board can be shared by concurrent readers.
    """

    def generate_legal_moves(self, position: chess.Board) -> List[Move]:
        return [Move.from_chess(position, m) for m in position.legal_moves]

    def apply_move(self, position: chess.Board, move: Move) -> chess.Board:
        child = position.copy()
        child.push(move.to_chess())
        return child

    def is_checkmate(self, position: chess.Board) -> bool:
        return position.is_checkmate()

    def is_check(self, position: chess.Board) -> bool:
        return position.is_check()

    def is_stalemate(self, position: chess.Board) -> bool:
        return position.is_stalemate()

    def is_draw(self, position: chess.Board) -> bool:
        return (
            position.is_stalemate()
            or position.is_insufficient_material()
            or position.is_fifty_moves()
            # is_repetition pops and re-pushes moves, so it runs on a copy
            or position.copy().is_repetition(3)
        )

    def is_terminal(self, position: chess.Board) -> bool:
        return self.is_checkmate(position) or self.is_draw(position)

    def side_to_move(self, position: chess.Board) -> chess.Color:
        return position.turn

    def board_contents(self, position: chess.Board) -> List[List[Cell]]:
        grid: List[List[Cell]] = [[None] * 8 for _ in range(8)]
        for square, piece in position.piece_map().items():
            grid[chess.square_rank(square)][chess.square_file(square)] = (
                piece.color,
                piece.piece_type,
            )
        return grid

    def annotate(self, position: chess.Board, move: Move) -> Move:
        """Return ``move`` with its SAN filled in for ``position``."""
        # san() pushes and pops on the board it is called on
        return replace(move, san=position.copy(stack=False).san(move.to_chess()))
