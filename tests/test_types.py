from __future__ import annotations

import dataclasses

import chess
import pytest

from chessrules import (
    ChessMove,
    ChessPiece,
    ChessPosition,
    InvalidMoveError,
    InvalidPieceError,
    InvalidPositionError,
    PieceType,
    TeamColor,
)


def test_team_color_opponent():
    assert TeamColor.WHITE.opponent is TeamColor.BLACK
    assert TeamColor.BLACK.opponent is TeamColor.WHITE
    assert TeamColor.WHITE.to_chess() == chess.WHITE


def test_piece_is_immutable():
    p = ChessPiece(TeamColor.WHITE, PieceType.QUEEN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.color = TeamColor.BLACK
    assert p.get_team_color() is TeamColor.WHITE
    assert p.get_piece_type() is PieceType.QUEEN


@pytest.mark.parametrize("symbol,code", [("K", "wK"), ("n", "bN"), ("p", "bP"), ("Q", "wQ")])
def test_piece_symbol_roundtrip(symbol, code):
    p = ChessPiece.from_symbol(symbol)
    assert p.symbol == symbol
    assert p.code == code


def test_position_bounds_and_offset():
    assert ChessPosition(1, 1).in_bounds()
    assert ChessPosition(8, 8).in_bounds()
    assert not ChessPosition(0, 4).in_bounds()
    assert not ChessPosition(4, 9).in_bounds()
    assert ChessPosition(4, 4).offset(-4, 1) == ChessPosition(0, 5)


def test_position_names():
    assert ChessPosition(1, 1).name == "a1"
    assert ChessPosition(4, 5).name == "e4"
    assert ChessPosition.from_name("h8") == ChessPosition(8, 8)
    assert ChessPosition.from_square(chess.E2) == ChessPosition(2, 5)


def test_position_off_board_has_no_name():
    with pytest.raises(InvalidPositionError):
        ChessPosition(9, 1).name
    with pytest.raises(InvalidPositionError):
        ChessPosition.from_name("z9")


def test_move_equality_includes_promotion():
    a, b = ChessPosition(7, 1), ChessPosition(8, 1)
    assert ChessMove(a, b) == ChessMove(a, b)
    assert ChessMove(a, b, PieceType.QUEEN) != ChessMove(a, b)
    assert ChessMove(a, b, PieceType.QUEEN) != ChessMove(a, b, PieceType.ROOK)
    assert len({ChessMove(a, b), ChessMove(a, b)}) == 1


def test_move_uci():
    mv = ChessMove(ChessPosition(7, 5), ChessPosition(8, 5), PieceType.KNIGHT)
    assert mv.uci() == "e7e8n"
    assert ChessMove.from_uci("e7e8n") == mv
    assert ChessMove.from_uci("g1f3") == ChessMove(ChessPosition(1, 7), ChessPosition(3, 6))
    assert mv.to_chess_move() == chess.Move.from_uci("e7e8n")


@pytest.mark.parametrize("bad", ["", "e9e4", "0000", "hello"])
def test_move_from_bad_uci(bad):
    with pytest.raises(InvalidMoveError):
        ChessMove.from_uci(bad)


@pytest.mark.parametrize("bad", ["x", "Z", ""])
def test_piece_from_bad_symbol(bad):
    with pytest.raises(InvalidPieceError):
        ChessPiece.from_symbol(bad)
