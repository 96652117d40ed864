from .board import ChessBoard
from .errors import ChessRulesError, InvalidMoveError, InvalidPieceError, InvalidPositionError, NoPieceError
from .piece import PROMOTION_TYPES, ChessPiece, PieceType, TeamColor
from .position import ChessMove, ChessPosition
from .rules import Rules

__all__ = [
    "ChessBoard",
    "ChessMove",
    "ChessPiece",
    "ChessPosition",
    "ChessRulesError",
    "InvalidMoveError",
    "InvalidPieceError",
    "InvalidPositionError",
    "NoPieceError",
    "PROMOTION_TYPES",
    "PieceType",
    "Rules",
    "TeamColor",
]
