"""Tests for GameController."""

import logging

import pytest

from seasons.core.corners import HOME_CORNERS
from seasons.core.enums import Player, PieceType
from seasons.core.piece import Piece
from seasons.game.controller import GameController
from seasons.game.interfaces import GamePhase
from seasons.game.outcome import PieceInfo


def _custom(
    pieces: dict[tuple[int, int], tuple[PieceType, Player]],
    kings: tuple[Player, ...] = tuple(Player),
) -> GameController:
    """Controller on a cleared board with the given kings plus *pieces*."""
    ctrl = GameController()
    ctrl.board.clear()
    for player in kings:
        ctrl.board.set_piece(*HOME_CORNERS[player], Piece(PieceType.KING, player))
    for (row, col), (piece_type, owner) in pieces.items():
        ctrl.board.set_piece(row, col, Piece(piece_type, owner))
    return ctrl


def _mate_in_one() -> GameController:
    """Spring to play (4, 5) -> (0, 5), boxing Summer's king in its corner."""
    return _custom(
        {
            (1, 6): (PieceType.ROOK, Player.SPRING),
            (4, 5): (PieceType.ROOK, Player.SPRING),
            (2, 0): (PieceType.PAWN, Player.SUMMER),
        }
    )


def _pinned_rook() -> GameController:
    """Spring's rook on (0, 3) is pinned against its king on (0, 7)."""
    return _custom(
        {
            (0, 3): (PieceType.ROOK, Player.SPRING),
            (0, 1): (PieceType.ROOK, Player.SUMMER),
            (3, 0): (PieceType.KING, Player.SUMMER),
        },
        kings=(Player.SPRING,),
    )


class TestControllerInitial:
    def test_initial_state(self) -> None:
        ctrl = GameController()
        assert ctrl.current_player == Player.SPRING
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.active_player_count == 4
        assert not ctrl.is_game_over
        assert ctrl.winner is None

    def test_piece_at(self) -> None:
        ctrl = GameController()
        assert ctrl.piece_at((0, 7)) == PieceInfo(
            PieceType.KING, Player.SPRING, Player.SPRING
        )
        assert ctrl.piece_at((4, 4)) is None
        assert ctrl.piece_at((9, 9)) is None

    def test_ownership_queries(self) -> None:
        ctrl = GameController()
        assert ctrl.controlling_player((7, 6)) == Player.WINTER
        assert ctrl.original_owner((7, 6)) == Player.WINTER
        assert ctrl.controlling_player((4, 4)) is None
        assert ctrl.original_owner((-1, 0)) is None

    def test_custom_first_player(self) -> None:
        ctrl = GameController(first_player=Player.FALL)
        assert ctrl.current_player == Player.FALL
        ctrl.reset_game()
        assert ctrl.current_player == Player.FALL


class TestLegalMoves:
    def test_knight(self) -> None:
        ctrl = GameController()
        assert ctrl.legal_moves((0, 6)) == {(1, 4), (2, 5)}

    def test_blocked_piece(self) -> None:
        ctrl = GameController()
        assert ctrl.legal_moves((0, 7)) == set()

    def test_other_players_piece(self) -> None:
        ctrl = GameController()
        assert ctrl.legal_moves((0, 2)) == set()
        assert not ctrl.can_control((0, 2))
        assert ctrl.can_control((0, 6))

    @pytest.mark.parametrize("sq", [(4, 4), (8, 0), (0, -1), "a1", None, (1, 2, 3)])
    def test_empty_or_invalid_square(self, sq: object) -> None:
        ctrl = GameController()
        assert ctrl.legal_moves(sq) == set()  # type: ignore[arg-type]

    def test_check_filtered(self) -> None:
        ctrl = _pinned_rook()
        assert ctrl.legal_moves((0, 3)) == {(0, 1), (0, 2), (0, 4), (0, 5), (0, 6)}


class TestAttemptMove:
    def test_legal_move_applies_and_rotates(self) -> None:
        ctrl = GameController()
        outcome = ctrl.attempt_move((1, 5), (1, 4))
        assert outcome.applied
        assert outcome.mover == Player.SPRING
        assert outcome.from_sq == (1, 5)
        assert outcome.to_sq == (1, 4)
        assert outcome.captured is None
        assert not outcome.promoted
        assert outcome.messages == ()
        assert ctrl.piece_at((1, 4)) is not None
        assert ctrl.piece_at((1, 5)) is None
        assert ctrl.current_player == Player.SUMMER

    def test_illegal_pattern_rejected(self) -> None:
        ctrl = GameController()
        before = repr(ctrl.board)
        outcome = ctrl.attempt_move((1, 5), (2, 5))
        assert not outcome.applied
        assert repr(ctrl.board) == before
        assert ctrl.current_player == Player.SPRING

    def test_opponent_piece_rejected(self) -> None:
        ctrl = GameController()
        before = repr(ctrl.board)
        outcome = ctrl.attempt_move((0, 2), (0, 3))
        assert not outcome.applied
        assert repr(ctrl.board) == before
        assert ctrl.current_player == Player.SPRING

    def test_out_of_range_rejected(self) -> None:
        ctrl = GameController()
        assert not ctrl.attempt_move((1, 5), (1, 9)).applied
        assert not ctrl.attempt_move((-1, 5), (1, 4)).applied
        assert ctrl.current_player == Player.SPRING

    def test_empty_origin_rejected(self) -> None:
        ctrl = GameController()
        assert not ctrl.attempt_move((4, 4), (4, 5)).applied

    def test_self_check_rejected(self) -> None:
        ctrl = _pinned_rook()
        outcome = ctrl.attempt_move((0, 3), (1, 3))
        assert not outcome.applied
        assert ctrl.piece_at((0, 3)) is not None

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = GameController()
        with caplog.at_level(logging.DEBUG, logger="seasons.game.controller"):
            ctrl.attempt_move((1, 5), (2, 5))
        assert "Rejected move" in caplog.text

    def test_capture_is_reported(self) -> None:
        ctrl = _custom(
            {
                (3, 3): (PieceType.ROOK, Player.SPRING),
                (3, 6): (PieceType.KNIGHT, Player.FALL),
            }
        )
        outcome = ctrl.attempt_move((3, 3), (3, 6))
        assert outcome.applied
        assert outcome.captured == PieceInfo(
            PieceType.KNIGHT, Player.FALL, Player.FALL
        )

    def test_promotion(self) -> None:
        ctrl = _custom({(6, 3): (PieceType.PAWN, Player.SPRING)})
        outcome = ctrl.attempt_move((6, 3), (7, 3))
        assert outcome.applied
        assert outcome.promoted
        info = ctrl.piece_at((7, 3))
        assert info is not None
        assert info.piece_type == PieceType.GENERAL

    def test_check_is_reported(self) -> None:
        ctrl = _custom({(4, 3): (PieceType.KNIGHT, Player.SPRING)})
        outcome = ctrl.attempt_move((4, 3), (6, 2))
        assert outcome.applied
        assert outcome.checks_delivered == frozenset({Player.FALL})
        assert outcome.eliminations == frozenset()
        assert outcome.messages == ("Fall is in check!",)
        assert ctrl.is_in_check(Player.FALL)
        assert ctrl.current_player == Player.SUMMER


class TestElimination:
    def test_checkmate_eliminates_and_transfers(self) -> None:
        ctrl = _mate_in_one()
        outcome = ctrl.attempt_move((4, 5), (0, 5))
        assert outcome.applied
        assert outcome.eliminations == frozenset({Player.SUMMER})
        assert outcome.messages == (
            "Spring checkmates Summer! Spring now controls Summer's pieces.",
        )
        assert ctrl.piece_at((0, 0)) is None
        assert ctrl.is_player_eliminated(Player.SUMMER)
        assert ctrl.active_player_count == 3
        assert ctrl.controlling_player((2, 0)) == Player.SPRING
        assert ctrl.original_owner((2, 0)) == Player.SUMMER
        info = ctrl.piece_at((2, 0))
        assert info is not None and info.is_inherited

    def test_elimination_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        ctrl = _mate_in_one()
        with caplog.at_level(logging.INFO, logger="seasons.game.controller"):
            ctrl.attempt_move((4, 5), (0, 5))
        assert "Summer eliminated by Spring" in caplog.text

    def test_eliminated_player_is_skipped(self) -> None:
        ctrl = _mate_in_one()
        ctrl.attempt_move((4, 5), (0, 5))
        seen = [ctrl.current_player]
        for from_sq, to_sq in (((7, 0), (6, 0)), ((7, 7), (6, 7)), ((0, 7), (1, 7))):
            assert ctrl.attempt_move(from_sq, to_sq).applied
            seen.append(ctrl.current_player)
        assert seen == [Player.FALL, Player.WINTER, Player.SPRING, Player.FALL]

    def test_inherited_pawn_moves_for_new_controller(self) -> None:
        ctrl = _mate_in_one()
        ctrl.attempt_move((4, 5), (0, 5))
        ctrl.attempt_move((7, 0), (6, 0))
        ctrl.attempt_move((7, 7), (6, 7))
        assert ctrl.current_player == Player.SPRING
        assert ctrl.can_control((2, 0))
        # Still advances the way Summer's pawns do.
        assert ctrl.legal_moves((2, 0)) == {(3, 0)}

    def test_stalemate_eliminates(self) -> None:
        ctrl = _custom(
            {
                (1, 6): (PieceType.ROOK, Player.SPRING),
                (5, 3): (PieceType.ROOK, Player.SPRING),
            }
        )
        outcome = ctrl.attempt_move((5, 3), (5, 1))
        assert outcome.applied
        assert outcome.eliminations == frozenset({Player.SUMMER})
        assert not ctrl.is_in_check(Player.SUMMER)
        assert ctrl.piece_at((0, 0)) is None


class TestGameOver:
    def _last_two(self) -> GameController:
        ctrl = _mate_in_one()
        ctrl.board.remove_piece(7, 0)
        ctrl.board.remove_piece(7, 7)
        ctrl.state.eliminated_players.update({Player.FALL, Player.WINTER})
        return ctrl

    def test_last_elimination_ends_game(self) -> None:
        ctrl = self._last_two()
        outcome = ctrl.attempt_move((4, 5), (0, 5))
        assert outcome.game_over
        assert outcome.winner == Player.SPRING
        assert outcome.messages[-1] == "Game Over! Spring wins!"
        assert ctrl.is_game_over
        assert ctrl.phase == GamePhase.GAME_OVER
        assert ctrl.winner == Player.SPRING
        assert ctrl.active_player_count == 1
        assert ctrl.current_player == Player.SPRING

    def test_no_moves_after_game_over(self) -> None:
        ctrl = self._last_two()
        ctrl.attempt_move((4, 5), (0, 5))
        before = repr(ctrl.board)
        assert ctrl.legal_moves((0, 5)) == set()
        assert not ctrl.can_control((0, 5))
        assert not ctrl.attempt_move((0, 5), (0, 4)).applied
        assert repr(ctrl.board) == before


class TestReset:
    def test_reset_restores_initial_position(self) -> None:
        ctrl = _mate_in_one()
        ctrl.attempt_move((4, 5), (0, 5))
        ctrl.reset_game()
        assert ctrl.current_player == Player.SPRING
        assert ctrl.active_player_count == 4
        assert not ctrl.is_player_eliminated(Player.SUMMER)
        assert len(list(ctrl.board.occupied_cells())) == 32
        assert ctrl.piece_at((0, 0)) == PieceInfo(
            PieceType.KING, Player.SUMMER, Player.SUMMER
        )

    def test_new_game_after_game_over(self) -> None:
        ctrl = GameController()
        ctrl.attempt_move((1, 5), (1, 4))
        ctrl.new_game()
        assert ctrl.current_player == Player.SPRING
        assert ctrl.phase == GamePhase.AWAITING_MOVE
        assert ctrl.piece_at((1, 5)) is not None
