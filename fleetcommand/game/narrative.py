from fleetcommand.domain.board import coordinate_label
from fleetcommand.domain.config import PLAYER

from .state import (
    EVENT_BATTLE_STARTED,
    EVENT_GAME_WON,
    EVENT_HIT,
    EVENT_MISS,
    EVENT_RESET,
    EVENT_SUNK,
    EVENT_WELCOME,
    GameEvent,
)


def _label(event: GameEvent) -> str:
    if event.coordinate is None:
        return "?"
    return coordinate_label(event.coordinate.x, event.coordinate.y)


def describe_event(event: GameEvent) -> str:
    """Battle-log text for a game event."""
    by_player = event.side == PLAYER

    if event.kind == EVENT_WELCOME:
        return "Bienvenido, Comandante. Coloque su flota para iniciar la batalla."
    if event.kind == EVENT_RESET:
        return "Sistema reiniciado. Esperando órdenes."
    if event.kind == EVENT_BATTLE_STARTED:
        return "COMBATE INICIADO. ¡A sus puestos de batalla!"
    if event.kind == EVENT_HIT:
        if by_player:
            return f"¡Impacto confirmado en coordenadas {_label(event)}!"
        return f"¡Impacto recibido en {event.ship_name}!"
    if event.kind == EVENT_SUNK:
        if by_player:
            return f"¡Confirmado! Has hundido el {event.ship_name} enemigo."
        return f"¡ALERTA! El enemigo ha hundido nuestro {event.ship_name}."
    if event.kind == EVENT_MISS:
        if by_player:
            return f"Disparo fallido en {_label(event)}."
        return f"El enemigo disparó al agua en {_label(event)}."
    if event.kind == EVENT_GAME_WON:
        if by_player:
            return "¡VICTORIA! Toda la flota enemiga ha sido neutralizada."
        return "¡Flota destruida! Hemos perdido la batalla."
    return event.kind
