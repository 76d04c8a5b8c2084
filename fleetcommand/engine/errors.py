class EngineError(Exception):
    """Base class for engine precondition failures."""


class PlacementError(EngineError):
    """Random placement could not fit a ship within the retry cap."""


class NoMovesLeftError(EngineError):
    """Opponent asked to fire at a board with no unresolved cells."""


class BoardMismatchError(EngineError):
    """A grid cell and the fleet disagree about which ship is there."""
