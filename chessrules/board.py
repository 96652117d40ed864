# chessrules/board.py
"""
8x8 board of ChessPiece | None.

FEN parsing / printing is delegated to python-chess; only the piece
placement is kept (turn, castling rights, en passant are out of scope
for move generation).
"""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple

import chess  # python-chess

from .errors import InvalidMoveError, InvalidPositionError
from .piece import ChessPiece, PieceType, TeamColor
from .position import BOARD_MAX, ChessMove, ChessPosition

logger = logging.getLogger(__name__)

BACK_ROW = (
    PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
    PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
)


class ChessBoard:
    def __init__(self, setup: bool = False):
        # grid[row-1][col-1], row 1 = rank 1 (sisi putih)
        self.grid: List[List[Optional[ChessPiece]]] = [[None] * BOARD_MAX for _ in range(BOARD_MAX)]
        if setup:
            self.reset_board()

    def reset_board(self) -> None:
        """Kosongkan papan lalu pasang posisi awal standar."""
        self.grid = [[None] * BOARD_MAX for _ in range(BOARD_MAX)]
        for i, kind in enumerate(BACK_ROW):
            col = i + 1
            self.add_piece(ChessPosition(1, col), ChessPiece(TeamColor.WHITE, kind))
            self.add_piece(ChessPosition(2, col), ChessPiece(TeamColor.WHITE, PieceType.PAWN))
            self.add_piece(ChessPosition(7, col), ChessPiece(TeamColor.BLACK, PieceType.PAWN))
            self.add_piece(ChessPosition(8, col), ChessPiece(TeamColor.BLACK, kind))

    # --- basic helpers ---
    def add_piece(self, position: ChessPosition, piece: Optional[ChessPiece]) -> None:
        if not position.in_bounds():
            raise InvalidPositionError(f"cannot place a piece at {position}")
        self.grid[position.row - 1][position.column - 1] = piece

    def get_piece(self, position: ChessPosition) -> Optional[ChessPiece]:
        if position.in_bounds():
            return self.grid[position.row - 1][position.column - 1]
        return None

    def remove_piece(self, position: ChessPosition) -> Optional[ChessPiece]:
        piece = self.get_piece(position)
        if piece is not None:
            self.grid[position.row - 1][position.column - 1] = None
        return piece

    def pieces(self) -> Iterator[Tuple[ChessPosition, ChessPiece]]:
        for r in range(BOARD_MAX):
            for c in range(BOARD_MAX):
                p = self.grid[r][c]
                if p is not None:
                    yield ChessPosition(r + 1, c + 1), p

    def apply_move(self, move: ChessMove) -> Optional[ChessPiece]:
        """
        Pindahkan bidak tanpa validasi rules. Return bidak yang tertangkap (atau None).
        Dipakai oleh explorer; move generation tidak pernah memanggil ini.
        """
        piece = self.get_piece(move.start)
        if piece is None:
            raise InvalidMoveError(f"no piece to move at {move.start}")

        captured = self.get_piece(move.end)
        if move.promotion is not None:
            piece = ChessPiece(piece.color, move.promotion)
        self.remove_piece(move.start)
        self.add_piece(move.end, piece)
        logger.debug("applied %s (captured=%s)", move, captured.code if captured else None)
        return captured

    def copy(self) -> "ChessBoard":
        # ChessPiece immutable, cukup copy list per row
        new_board = ChessBoard()
        new_board.grid = [row[:] for row in self.grid]
        return new_board

    # --- python-chess interop ---
    @classmethod
    def from_fen(cls, fen: str) -> "ChessBoard":
        """Accepts either a full FEN or just the placement field."""
        try:
            base = chess.BaseBoard(fen.split()[0])
        except (ValueError, IndexError) as e:
            raise InvalidPositionError(f"invalid fen: {fen!r}") from e

        board = cls()
        for sq, p in base.piece_map().items():
            board.add_piece(ChessPosition.from_square(sq), ChessPiece.from_symbol(p.symbol()))
        return board

    def to_chess_board(self) -> chess.BaseBoard:
        base = chess.BaseBoard(None)
        for pos, p in self.pieces():
            base.set_piece_at(pos.to_square(), chess.Piece.from_symbol(p.symbol))
        return base

    def to_fen(self) -> str:
        """Placement field only, misal 'rnbqkbnr/pppppppp/8/...'."""
        return self.to_chess_board().board_fen()

    def __eq__(self, other) -> bool:
        if not isinstance(other, ChessBoard):
            return NotImplemented
        return self.grid == other.grid

    __hash__ = None

    def __str__(self) -> str:
        return str(self.to_chess_board())
