# chessrules/errors.py
"""Exceptions raised by the move generator and board helpers."""


class ChessRulesError(Exception):
    """Base class for all errors raised by chessrules."""


class NoPieceError(ChessRulesError):
    """Move query for a square that holds no piece."""

    def __init__(self, position):
        self.position = position
        super().__init__(f"no piece at position {position}")


class InvalidPositionError(ChessRulesError, ValueError):
    pass


class InvalidMoveError(ChessRulesError, ValueError):
    pass


class InvalidPieceError(ChessRulesError, ValueError):
    pass
