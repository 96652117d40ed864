# chessrules/position.py
"""
Value types for squares and moves.

Rows and columns are 1-indexed: row 1 is White's back rank, column 1 is
the a-file. Conversion to python-chess square indices is exact since
python-chess counts files and ranks from zero in the same orientation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import chess  # python-chess

from .errors import InvalidMoveError, InvalidPositionError
from .piece import PieceType

BOARD_MIN = 1
BOARD_MAX = 8


@dataclass(frozen=True)
class ChessPosition:
    row: int
    column: int

    def get_row(self) -> int:
        return self.row

    def get_column(self) -> int:
        return self.column

    def in_bounds(self) -> bool:
        return BOARD_MIN <= self.row <= BOARD_MAX and BOARD_MIN <= self.column <= BOARD_MAX

    def offset(self, dr: int, dc: int) -> "ChessPosition":
        # bisa keluar papan, caller yang cek in_bounds()
        return ChessPosition(self.row + dr, self.column + dc)

    def to_square(self) -> chess.Square:
        if not self.in_bounds():
            raise InvalidPositionError(f"position {self.row},{self.column} is off the board")
        return chess.square(self.column - 1, self.row - 1)

    @classmethod
    def from_square(cls, sq: chess.Square) -> "ChessPosition":
        return cls(chess.square_rank(sq) + 1, chess.square_file(sq) + 1)

    @property
    def name(self) -> str:
        return chess.square_name(self.to_square())

    @classmethod
    def from_name(cls, name: str) -> "ChessPosition":
        try:
            return cls.from_square(chess.parse_square(name))
        except ValueError as e:
            raise InvalidPositionError(f"invalid square name: {name!r}") from e

    def __str__(self) -> str:
        return f"({self.row},{self.column})"


@dataclass(frozen=True)
class ChessMove:
    start: ChessPosition
    end: ChessPosition
    promotion: Optional[PieceType] = None

    def get_start_position(self) -> ChessPosition:
        return self.start

    def get_end_position(self) -> ChessPosition:
        return self.end

    def get_promotion_piece(self) -> Optional[PieceType]:
        return self.promotion

    def to_chess_move(self) -> chess.Move:
        promo = None
        if self.promotion is not None:
            promo = chess.Piece.from_symbol(self.promotion.letter).piece_type
        return chess.Move(self.start.to_square(), self.end.to_square(), promotion=promo)

    def uci(self) -> str:
        return self.to_chess_move().uci()

    @classmethod
    def from_uci(cls, uci: str) -> "ChessMove":
        try:
            mv = chess.Move.from_uci(uci)
        except ValueError as e:
            raise InvalidMoveError(f"invalid uci move: {uci!r}") from e
        if not mv:
            raise InvalidMoveError("null move has no start square")

        promo = None
        if mv.promotion is not None:
            promo = PieceType.from_letter(chess.piece_symbol(mv.promotion))
        return cls(
            ChessPosition.from_square(mv.from_square),
            ChessPosition.from_square(mv.to_square),
            promo,
        )

    def __str__(self) -> str:
        if self.promotion is None:
            return f"{self.start}->{self.end}"
        return f"{self.start}->{self.end}={self.promotion.letter}"
