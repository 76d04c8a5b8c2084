import random

from fleetcommand.game.narrative import describe_event
from fleetcommand.sim.match import simulate_match


def main() -> None:
    result = simulate_match(random.Random(0))
    print(describe_event(result.final_state.log[-1]))
    print(f"Smoke OK: winner={result.winner} shots={result.player_shots}/{result.opponent_shots}")


if __name__ == "__main__":
    main()
