import random
from dataclasses import dataclass
from typing import Optional

from fleetcommand.domain.config import OPPONENT, PHASE_PLAYING, PLAYER
from fleetcommand.engine.opponent import select_opponent_move
from fleetcommand.game.actions import AutoPlace, CellClick, OpponentTurn
from fleetcommand.game.orchestrator import apply_action
from fleetcommand.game.state import GameState, new_game, shots_fired


@dataclass(frozen=True)
class MatchResult:
    winner: Optional[str]
    player_shots: int
    opponent_shots: int
    final_state: GameState


def simulate_match(rng: Optional[random.Random] = None, max_turns: int = 500) -> MatchResult:
    """Play one game without a UI.

    Both fleets are auto-placed and the player side fires with the same
    uniform selector the opponent uses.
    """
    if rng is None:
        rng = random.Random()

    state = apply_action(new_game(), AutoPlace(), rng)
    turns = 0
    while state.phase == PHASE_PLAYING and turns < max_turns:
        if state.turn == PLAYER:
            target = select_opponent_move(state.opponent_grid, rng)
            state = apply_action(state, CellClick(target.x, target.y, OPPONENT), rng)
        else:
            state = apply_action(state, OpponentTurn(), rng)
        turns += 1

    return MatchResult(
        winner=state.winner,
        player_shots=shots_fired(state, PLAYER),
        opponent_shots=shots_fired(state, OPPONENT),
        final_state=state,
    )
