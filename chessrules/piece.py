# chessrules/piece.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

import chess  # python-chess

from .errors import InvalidPieceError


class TeamColor(Enum):
    WHITE = "w"
    BLACK = "b"

    @property
    def opponent(self) -> "TeamColor":
        return TeamColor.BLACK if self is TeamColor.WHITE else TeamColor.WHITE

    @property
    def code(self) -> str:
        return self.value

    def to_chess(self) -> chess.Color:
        # python-chess: chess.WHITE True, chess.BLACK False
        return chess.WHITE if self is TeamColor.WHITE else chess.BLACK


class PieceType(Enum):
    KING = "K"
    QUEEN = "Q"
    BISHOP = "B"
    KNIGHT = "N"
    ROOK = "R"
    PAWN = "P"

    @property
    def letter(self) -> str:
        return self.value

    @classmethod
    def from_letter(cls, letter: str) -> "PieceType":
        return cls(letter.upper())


# Urutan ini juga urutan output promosi di UI
PROMOTION_TYPES = (PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT)


@dataclass(frozen=True)
class ChessPiece:
    """Bidak klasik: warna + jenis, tidak berubah setelah dibuat."""
    color: TeamColor
    type: PieceType

    def get_team_color(self) -> TeamColor:
        return self.color

    def get_piece_type(self) -> PieceType:
        return self.type

    @property
    def code(self) -> str:
        # key sprite, misal 'wK'
        return f"{self.color.code}{self.type.letter}"

    @property
    def symbol(self) -> str:
        """python-chess style: uppercase white, lowercase black."""
        letter = self.type.letter
        return letter if self.color is TeamColor.WHITE else letter.lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> "ChessPiece":
        try:
            kind = PieceType.from_letter(symbol)
        except ValueError as e:
            raise InvalidPieceError(f"invalid piece symbol: {symbol!r}") from e
        color = TeamColor.WHITE if symbol.isupper() else TeamColor.BLACK
        return cls(color, kind)

    def piece_moves(self, board, position):
        """
        Semua move yang bisa dilakukan bidak ini dari `position`.
        Tidak memperhitungkan apakah king sendiri jadi kena check.
        """
        from .rules import Rules
        return Rules.piece_moves(board, position)
