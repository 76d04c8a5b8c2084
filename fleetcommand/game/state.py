from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from fleetcommand.domain.board import create_empty_grid
from fleetcommand.domain.config import HORIZONTAL, PHASE_PLACEMENT, PLAYER
from fleetcommand.domain.fleet import build_fleet, first_unplaced
from fleetcommand.domain.types import Coordinate, Fleet, Grid

# Event kinds
EVENT_WELCOME = "WELCOME"
EVENT_RESET = "RESET"
EVENT_BATTLE_STARTED = "BATTLE_STARTED"
EVENT_HIT = "HIT"
EVENT_MISS = "MISS"
EVENT_SUNK = "SUNK"
EVENT_GAME_WON = "GAME_WON"


@dataclass(frozen=True)
class GameEvent:
    kind: str
    side: Optional[str] = None  # who acted (the shooter, or the winner)
    coordinate: Optional[Coordinate] = None
    ship_name: Optional[str] = None


@dataclass(frozen=True)
class GameState:
    phase: str
    turn: str
    winner: Optional[str]
    log: Tuple[GameEvent, ...]
    player_grid: Grid
    opponent_grid: Grid
    player_fleet: Fleet
    opponent_fleet: Fleet
    selected_ship_id: Optional[str] = None
    orientation: str = HORIZONTAL


def new_game(welcome: bool = True) -> GameState:
    """A fresh game in the placement phase with both sides empty."""
    player_fleet = build_fleet()
    first = first_unplaced(player_fleet)
    event = GameEvent(EVENT_WELCOME if welcome else EVENT_RESET)
    return GameState(
        phase=PHASE_PLACEMENT,
        turn=PLAYER,
        winner=None,
        log=(event,),
        player_grid=create_empty_grid(),
        opponent_grid=create_empty_grid(),
        player_fleet=player_fleet,
        opponent_fleet=build_fleet(),
        selected_ship_id=first.id if first else None,
        orientation=HORIZONTAL,
    )


def _coord_dict(coord: Optional[Coordinate]) -> Optional[Dict[str, int]]:
    if coord is None:
        return None
    return {"x": coord.x, "y": coord.y}


def _grid_rows(grid: Grid):
    return [[{"status": c.status, "ship_id": c.ship_id} for c in row] for row in grid]


def _fleet_list(fleet: Fleet):
    return [
        {
            "id": s.id,
            "name": s.name,
            "size": s.size,
            "hits": s.hits,
            "placed": s.placed,
            "orientation": s.orientation,
            "coordinates": [_coord_dict(c) for c in s.coordinates],
        }
        for s in fleet
    ]


def state_to_dict(state: GameState) -> Dict[str, Any]:
    """JSON-ready snapshot of ``state``."""
    return {
        "phase": state.phase,
        "turn": state.turn,
        "winner": state.winner,
        "selected_ship_id": state.selected_ship_id,
        "orientation": state.orientation,
        "log": [
            {
                "kind": e.kind,
                "side": e.side,
                "coordinate": _coord_dict(e.coordinate),
                "ship_name": e.ship_name,
            }
            for e in state.log
        ],
        "player_grid": _grid_rows(state.player_grid),
        "opponent_grid": _grid_rows(state.opponent_grid),
        "player_fleet": _fleet_list(state.player_fleet),
        "opponent_fleet": _fleet_list(state.opponent_fleet),
    }


def shots_fired(state: GameState, side: str) -> int:
    return sum(1 for e in state.log if e.side == side and e.kind in (EVENT_HIT, EVENT_MISS, EVENT_SUNK))
