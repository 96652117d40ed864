"""Pawn generation for both colors: steps, double steps, captures, promotion."""
from __future__ import annotations

import pytest

from chessrules import PROMOTION_TYPES, ChessMove, PieceType, Rules

from conftest import B, W, board_with, ends, piece, pos


def pawn_moves(board, r, c):
    return Rules.piece_moves(board, pos(r, c))


@pytest.mark.parametrize("color,start,one,two", [
    (W, (2, 5), (3, 5), (4, 5)),
    (B, (7, 5), (6, 5), (5, 5)),
])
def test_home_rank_single_and_double_step(color, start, one, two):
    board = board_with({start: piece(color, PieceType.PAWN)})
    assert ends(pawn_moves(board, *start)) == {one, two}


@pytest.mark.parametrize("color,start,one", [
    (W, (3, 4), (4, 4)),
    (B, (6, 4), (5, 4)),
])
def test_off_home_rank_single_step_only(color, start, one):
    board = board_with({start: piece(color, PieceType.PAWN)})
    assert ends(pawn_moves(board, *start)) == {one}


@pytest.mark.parametrize("blocker_color", [W, B])
def test_pawn_cannot_capture_straight_ahead(blocker_color):
    board = board_with({
        (4, 4): piece(W, PieceType.PAWN),
        (5, 4): piece(blocker_color, PieceType.KNIGHT),
    })
    assert pawn_moves(board, 4, 4) == set()


def test_double_step_blocked_by_intervening_piece():
    board = board_with({
        (2, 3): piece(W, PieceType.PAWN),
        (3, 3): piece(B, PieceType.BISHOP),
    })
    assert pawn_moves(board, 2, 3) == set()


def test_double_step_blocked_on_destination():
    board = board_with({
        (7, 3): piece(B, PieceType.PAWN),
        (5, 3): piece(W, PieceType.BISHOP),
    })
    assert ends(pawn_moves(board, 7, 3)) == {(6, 3)}


def test_white_diagonal_captures():
    board = board_with({
        (4, 4): piece(W, PieceType.PAWN),
        (5, 3): piece(B, PieceType.ROOK),
        (5, 5): piece(B, PieceType.PAWN),
        (3, 5): piece(B, PieceType.PAWN),  # di belakang, tidak bisa ditangkap
    })
    assert ends(pawn_moves(board, 4, 4)) == {(5, 4), (5, 3), (5, 5)}


def test_black_diagonal_captures_only_enemies():
    board = board_with({
        (5, 1): piece(B, PieceType.PAWN),
        (4, 2): piece(W, PieceType.QUEEN),
        (4, 1): piece(W, PieceType.PAWN),
    })
    # edge column: hanya satu diagonal, maju diblok
    assert ends(pawn_moves(board, 5, 1)) == {(4, 2)}


def test_pawn_does_not_capture_friend_diagonally():
    board = board_with({
        (4, 4): piece(B, PieceType.PAWN),
        (3, 3): piece(B, PieceType.KNIGHT),
        (3, 5): piece(B, PieceType.KNIGHT),
    })
    assert ends(pawn_moves(board, 4, 4)) == {(3, 4)}


@pytest.mark.parametrize("color,start,dest", [
    (W, (7, 2), (8, 2)),
    (B, (2, 7), (1, 7)),
])
def test_promotion_forward(color, start, dest):
    board = board_with({start: piece(color, PieceType.PAWN)})
    moves = pawn_moves(board, *start)
    expected = {ChessMove(pos(*start), pos(*dest), promo) for promo in PROMOTION_TYPES}
    assert moves == expected
    assert ChessMove(pos(*start), pos(*dest)) not in moves


def test_promotion_with_capture():
    board = board_with({
        (2, 2): piece(B, PieceType.PAWN),
        (1, 1): piece(W, PieceType.ROOK),
        (1, 2): piece(W, PieceType.KNIGHT),
        (1, 3): piece(B, PieceType.BISHOP),
    })
    moves = pawn_moves(board, 2, 2)
    assert len(moves) == 4
    assert {mv.end for mv in moves} == {pos(1, 1)}
    assert {mv.promotion for mv in moves} == set(PROMOTION_TYPES)


def test_promotion_types_are_the_four_expected():
    assert set(PROMOTION_TYPES) == {PieceType.QUEEN, PieceType.ROOK, PieceType.BISHOP, PieceType.KNIGHT}


def test_non_promotion_moves_have_no_promotion_piece():
    board = board_with({(2, 4): piece(W, PieceType.PAWN), (3, 5): piece(B, PieceType.PAWN)})
    assert all(mv.promotion is None for mv in pawn_moves(board, 2, 4))


def test_pawn_on_own_back_rank_never_leaves_board():
    # posisi tidak realistis, tetap tidak boleh keluar papan
    board = board_with({(8, 4): piece(W, PieceType.PAWN), (1, 4): piece(B, PieceType.PAWN)})
    assert pawn_moves(board, 8, 4) == set()
    assert pawn_moves(board, 1, 4) == set()
