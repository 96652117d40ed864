# chessrules/rules.py
"""
Pseudo-legal move generation per piece.

Move yang dihasilkan TIDAK dicek terhadap check (king sendiri bisa
terekspos). Filter itu tanggung jawab layer di atas ini.
"""
from __future__ import annotations

import logging
from typing import Iterable, Set, Tuple

from .board import ChessBoard
from .errors import NoPieceError
from .piece import PROMOTION_TYPES, ChessPiece, PieceType, TeamColor
from .position import BOARD_MAX, BOARD_MIN, ChessMove, ChessPosition

logger = logging.getLogger(__name__)

Direction = Tuple[int, int]

DIAGONALS: Tuple[Direction, ...] = ((1, 1), (1, -1), (-1, 1), (-1, -1))
ORTHOGONALS: Tuple[Direction, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))
KNIGHT_OFFSETS: Tuple[Direction, ...] = (
    (2, 1), (2, -1), (-2, 1), (-2, -1), (1, 2), (1, -2), (-1, 2), (-1, -2),
)
KING_OFFSETS: Tuple[Direction, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)

# color -> (arah maju, home row, back rank)
PAWN_RULES = {
    TeamColor.WHITE: (1, BOARD_MIN + 1, BOARD_MAX),
    TeamColor.BLACK: (-1, BOARD_MAX - 1, BOARD_MIN),
}


class Rules:
    @staticmethod
    def piece_moves(board: ChessBoard, position: ChessPosition) -> Set[ChessMove]:
        piece = board.get_piece(position)
        if piece is None:
            raise NoPieceError(position)

        generator = _GENERATORS[piece.type]
        moves = generator(board, position, piece)
        logger.debug("%s at %s: %d moves", piece.code, position, len(moves))
        return moves

    @staticmethod
    def team_moves(board: ChessBoard, color: TeamColor) -> Set[ChessMove]:
        moves: Set[ChessMove] = set()
        for pos, p in board.pieces():
            if p.color is color:
                moves |= Rules.piece_moves(board, pos)
        return moves

    # --- predicates ---
    @staticmethod
    def in_bounds(move: ChessMove) -> bool:
        return move.end.in_bounds()

    @staticmethod
    def same_color_at_destination(move: ChessMove, board: ChessBoard) -> bool:
        """True kalau tujuan diisi bidak teman (move diblok). Musuh = boleh capture."""
        target = board.get_piece(move.end)
        if target is None:
            return False
        mover = board.get_piece(move.start)
        return mover is not None and target.color is mover.color

    # --- per-type generators ---
    @staticmethod
    def king_moves(board: ChessBoard, position: ChessPosition, piece: ChessPiece) -> Set[ChessMove]:
        return Rules._step_moves(board, position, KING_OFFSETS)

    @staticmethod
    def knight_moves(board: ChessBoard, position: ChessPosition, piece: ChessPiece) -> Set[ChessMove]:
        return Rules._step_moves(board, position, KNIGHT_OFFSETS)

    @staticmethod
    def bishop_moves(board: ChessBoard, position: ChessPosition, piece: ChessPiece) -> Set[ChessMove]:
        return Rules._slide_moves(board, position, DIAGONALS)

    @staticmethod
    def rook_moves(board: ChessBoard, position: ChessPosition, piece: ChessPiece) -> Set[ChessMove]:
        return Rules._slide_moves(board, position, ORTHOGONALS)

    @staticmethod
    def queen_moves(board: ChessBoard, position: ChessPosition, piece: ChessPiece) -> Set[ChessMove]:
        return Rules._slide_moves(board, position, DIAGONALS + ORTHOGONALS)

    @staticmethod
    def pawn_moves(board: ChessBoard, position: ChessPosition, piece: ChessPiece) -> Set[ChessMove]:
        direction, home_row, back_rank = PAWN_RULES[piece.color]
        moves: Set[ChessMove] = set()

        # Forward 1
        one = position.offset(direction, 0)
        if one.in_bounds() and board.get_piece(one) is None:
            moves.update(Rules._pawn_move(position, one, back_rank))

            # Forward 2, kotak di tengah sudah pasti kosong di sini
            two = position.offset(2 * direction, 0)
            if position.row == home_row and board.get_piece(two) is None:
                moves.add(ChessMove(position, two))

        # Captures
        for dc in (-1, 1):
            target_pos = position.offset(direction, dc)
            if not target_pos.in_bounds():
                continue
            target = board.get_piece(target_pos)
            if target is not None and target.color is not piece.color:
                moves.update(Rules._pawn_move(position, target_pos, back_rank))

        return moves

    # --- helpers ---
    @staticmethod
    def walk_ray(board: ChessBoard, start: ChessPosition, direction: Direction) -> Set[ChessMove]:
        """Jalan satu arah sampai keluar papan atau kena bidak."""
        mover = board.get_piece(start)
        dr, dc = direction
        moves: Set[ChessMove] = set()

        pos = start.offset(dr, dc)
        while pos.in_bounds():
            target = board.get_piece(pos)
            if target is None:
                moves.add(ChessMove(start, pos))
            else:
                if mover is not None and target.color is not mover.color:
                    moves.add(ChessMove(start, pos))
                break  # tabrak bidak, stop
            pos = pos.offset(dr, dc)
        return moves

    @staticmethod
    def _slide_moves(board: ChessBoard, position: ChessPosition, directions: Iterable[Direction]) -> Set[ChessMove]:
        moves: Set[ChessMove] = set()
        for direction in directions:
            moves |= Rules.walk_ray(board, position, direction)
        return moves

    @staticmethod
    def _step_moves(board: ChessBoard, position: ChessPosition, offsets: Iterable[Direction]) -> Set[ChessMove]:
        moves: Set[ChessMove] = set()
        for dr, dc in offsets:
            mv = ChessMove(position, position.offset(dr, dc))
            if Rules.in_bounds(mv) and not Rules.same_color_at_destination(mv, board):
                moves.add(mv)
        return moves

    @staticmethod
    def _pawn_move(start: ChessPosition, end: ChessPosition, back_rank: int) -> Tuple[ChessMove, ...]:
        if end.row == back_rank:
            return tuple(ChessMove(start, end, promo) for promo in PROMOTION_TYPES)
        return (ChessMove(start, end),)


_GENERATORS = {
    PieceType.KING: Rules.king_moves,
    PieceType.QUEEN: Rules.queen_moves,
    PieceType.BISHOP: Rules.bishop_moves,
    PieceType.KNIGHT: Rules.knight_moves,
    PieceType.ROOK: Rules.rook_moves,
    PieceType.PAWN: Rules.pawn_moves,
}
