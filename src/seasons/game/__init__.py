"""Game management layer — controller, turn rotation, eliminations.

Quick start::

    from seasons.game import GameController

    ctrl = GameController()
    outcome = ctrl.attempt_move((1, 5), (1, 4))
    if outcome.applied:
        print(ctrl.current_player)
"""

from seasons.game.controller import GameController
from seasons.game.interfaces import GamePhase, IGameController
from seasons.game.outcome import MoveOutcome, PieceInfo
from seasons.game.state import GameState

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameController",
    # Concrete
    "GameController",
    "GameState",
    "MoveOutcome",
    "PieceInfo",
]
