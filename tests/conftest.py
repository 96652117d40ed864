from __future__ import annotations

import os

import pytest

# pygame tanpa display beneran
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from chessrules import ChessBoard, ChessPiece, ChessPosition, PieceType, TeamColor

W = TeamColor.WHITE
B = TeamColor.BLACK


def pos(row: int, col: int) -> ChessPosition:
    return ChessPosition(row, col)


def piece(color: TeamColor, kind: PieceType) -> ChessPiece:
    return ChessPiece(color, kind)


def board_with(pieces: dict) -> ChessBoard:
    """Empty board with pieces placed; keys are (row, col), values ChessPiece."""
    board = ChessBoard()
    for (r, c), p in pieces.items():
        board.add_piece(pos(r, c), p)
    return board


def ends(moves) -> set:
    """Destination squares as (row, col) tuples."""
    return {(mv.end.row, mv.end.column) for mv in moves}


@pytest.fixture
def empty_board() -> ChessBoard:
    return ChessBoard()


@pytest.fixture
def start_board() -> ChessBoard:
    return ChessBoard(setup=True)
