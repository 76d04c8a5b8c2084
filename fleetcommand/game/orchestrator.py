"""Turn orchestration: every action maps one game snapshot to the next.

``apply_action`` never mutates its input and never raises for an illegal
action; it hands back the same state object instead, so callers can detect
a rejected action with ``new is old``.
"""

import random
from dataclasses import replace
from typing import List, Optional, Tuple

from fleetcommand.domain.board import get_cell, in_bounds, is_resolved, ship_cells
from fleetcommand.domain.config import (
    HORIZONTAL,
    OPPONENT,
    OPPONENT_DELAY_MS_MAX,
    OPPONENT_DELAY_MS_MIN,
    PHASE_GAME_OVER,
    PHASE_PLACEMENT,
    PHASE_PLAYING,
    PLAYER,
    VERTICAL,
)
from fleetcommand.domain.fleet import build_fleet, find_ship, first_unplaced, replace_ship
from fleetcommand.domain.types import Coordinate
from fleetcommand.engine.attack import AttackOutcome, check_win_condition, resolve_attack
from fleetcommand.engine.opponent import select_opponent_move
from fleetcommand.engine.placement import is_valid_placement, place_ship_on_grid, place_ships_randomly

from .actions import AutoPlace, CellClick, OpponentTurn, Reset, SelectShip, ToggleOrientation
from .state import (
    EVENT_BATTLE_STARTED,
    EVENT_GAME_WON,
    EVENT_HIT,
    EVENT_MISS,
    EVENT_SUNK,
    GameEvent,
    GameState,
    new_game,
)


def apply_action(state: GameState, action, rng: Optional[random.Random] = None) -> GameState:
    if isinstance(action, CellClick):
        return _on_cell_click(state, action, rng)
    if isinstance(action, OpponentTurn):
        return _opponent_turn(state, rng)
    if isinstance(action, SelectShip):
        return _select_ship(state, action.ship_id)
    if isinstance(action, ToggleOrientation):
        return _toggle_orientation(state)
    if isinstance(action, AutoPlace):
        return _auto_place(state, rng)
    if isinstance(action, Reset):
        return new_game(welcome=False)
    raise TypeError(f"unknown action: {action!r}")


def accepts_player_input(state: GameState) -> bool:
    """Whether a click on the opponent board would be processed."""
    return state.phase == PHASE_PLAYING and state.turn == PLAYER


def opponent_delay_ms(rng: Optional[random.Random] = None) -> int:
    if rng is None:
        rng = random.Random()
    return rng.randint(OPPONENT_DELAY_MS_MIN, OPPONENT_DELAY_MS_MAX)


def placement_preview(state: GameState, x: int, y: int) -> Tuple[List[Coordinate], bool]:
    """Cells the selected ship would cover at (x, y), clipped to the board, and whether it fits."""
    if state.phase != PHASE_PLACEMENT:
        return [], False
    ship = find_ship(state.player_fleet, state.selected_ship_id)
    if ship is None:
        return [], False
    board_size = len(state.player_grid)
    coords = [
        c for c in ship_cells(x, y, ship.size, state.orientation)
        if in_bounds(c.x, c.y, board_size)
    ]
    valid = is_valid_placement(state.player_grid, ship.size, x, y, state.orientation)
    return coords, valid


# -----------------------------
# Placement
# -----------------------------
def _select_ship(state: GameState, ship_id: str) -> GameState:
    if state.phase != PHASE_PLACEMENT:
        return state
    ship = find_ship(state.player_fleet, ship_id)
    if ship is None or ship.placed or state.selected_ship_id == ship_id:
        return state
    return replace(state, selected_ship_id=ship_id)


def _toggle_orientation(state: GameState) -> GameState:
    if state.phase != PHASE_PLACEMENT:
        return state
    orientation = VERTICAL if state.orientation == HORIZONTAL else HORIZONTAL
    return replace(state, orientation=orientation)


def _place_selected(state: GameState, x: int, y: int, rng: Optional[random.Random]) -> GameState:
    ship = find_ship(state.player_fleet, state.selected_ship_id)
    if ship is None or ship.placed:
        return state
    if not is_valid_placement(state.player_grid, ship.size, x, y, state.orientation):
        return state

    grid, placed = place_ship_on_grid(state.player_grid, ship, x, y, state.orientation)
    fleet = replace_ship(state.player_fleet, placed)
    next_ship = first_unplaced(fleet)
    state = replace(
        state,
        player_grid=grid,
        player_fleet=fleet,
        selected_ship_id=next_ship.id if next_ship else None,
    )
    if next_ship is None:
        return _start_battle(state, rng)
    return state


def _auto_place(state: GameState, rng: Optional[random.Random]) -> GameState:
    if state.phase != PHASE_PLACEMENT:
        return state
    grid, fleet = place_ships_randomly(build_fleet(), rng)
    state = replace(state, player_grid=grid, player_fleet=fleet, selected_ship_id=None)
    return _start_battle(state, rng)


def _start_battle(state: GameState, rng: Optional[random.Random]) -> GameState:
    grid, fleet = place_ships_randomly(build_fleet(), rng)
    return replace(
        state,
        phase=PHASE_PLAYING,
        turn=PLAYER,
        opponent_grid=grid,
        opponent_fleet=fleet,
        log=state.log + (GameEvent(EVENT_BATTLE_STARTED),),
    )


# -----------------------------
# Combat
# -----------------------------
def _on_cell_click(state: GameState, action: CellClick, rng: Optional[random.Random]) -> GameState:
    if not in_bounds(action.x, action.y, len(state.player_grid)):
        return state
    if state.phase == PHASE_PLACEMENT and action.board in (None, PLAYER):
        return _place_selected(state, action.x, action.y, rng)
    if accepts_player_input(state) and action.board in (None, OPPONENT):
        return _player_attack(state, action.x, action.y)
    return state


def _shot_event(side: str, outcome: AttackOutcome) -> GameEvent:
    if outcome.sunk:
        kind = EVENT_SUNK
    elif outcome.hit:
        kind = EVENT_HIT
    else:
        kind = EVENT_MISS
    return GameEvent(kind, side, outcome.coordinate, outcome.ship_name)


def _player_attack(state: GameState, x: int, y: int) -> GameState:
    if is_resolved(get_cell(state.opponent_grid, x, y)):
        return state

    grid, fleet, outcome = resolve_attack(state.opponent_grid, state.opponent_fleet, x, y)
    log = state.log + (_shot_event(PLAYER, outcome),)

    if check_win_condition(fleet):
        return replace(
            state,
            opponent_grid=grid,
            opponent_fleet=fleet,
            phase=PHASE_GAME_OVER,
            winner=PLAYER,
            log=log + (GameEvent(EVENT_GAME_WON, PLAYER),),
        )
    return replace(state, opponent_grid=grid, opponent_fleet=fleet, turn=OPPONENT, log=log)


def _opponent_turn(state: GameState, rng: Optional[random.Random]) -> GameState:
    if state.phase != PHASE_PLAYING or state.turn != OPPONENT:
        return state

    move = select_opponent_move(state.player_grid, rng)
    grid, fleet, outcome = resolve_attack(state.player_grid, state.player_fleet, move.x, move.y)
    log = state.log + (_shot_event(OPPONENT, outcome),)

    if check_win_condition(fleet):
        return replace(
            state,
            player_grid=grid,
            player_fleet=fleet,
            phase=PHASE_GAME_OVER,
            winner=OPPONENT,
            log=log + (GameEvent(EVENT_GAME_WON, OPPONENT),),
        )
    return replace(state, player_grid=grid, player_fleet=fleet, turn=PLAYER, log=log)
