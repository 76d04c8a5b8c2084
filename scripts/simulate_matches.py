#!/usr/bin/env python3
import argparse
import hashlib
import json
import random
import statistics
import time
from typing import Iterable, List

from fleetcommand.domain.config import OPPONENT, PLAYER
from fleetcommand.fleets import classic_fleet
from fleetcommand.game.state import state_to_dict
from fleetcommand.sim.match import simulate_match


def _stable_seed(global_seed: int, game_index: int) -> int:
    payload = f"{int(global_seed)}|{int(game_index)}".encode("utf-8")
    digest = hashlib.blake2b(payload, digest_size=8).digest()
    return int.from_bytes(digest, "little") & 0x7FFFFFFF


def _summary(values: List[int]) -> str:
    if not values:
        return "n/a"
    return (
        f"mean {statistics.mean(values):.2f}  median {statistics.median(values):.0f}  "
        f"min {min(values)}  max {max(values)}"
    )


def main(argv: Iterable[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Play seeded headless games and report the results.")
    parser.add_argument("--games", type=int, default=200, help="Number of games to play")
    parser.add_argument("--seed", type=int, default=1337, help="Global seed")
    parser.add_argument("--json", action="store_true", help="Print the final state of the last game as JSON")
    args = parser.parse_args(list(argv) if argv is not None else None)

    fleet = classic_fleet()
    print(f"Fleet: {fleet.name} [{fleet.fleet_hash}]")
    print(f"Games: {args.games}, Seed: {args.seed}")
    print()

    wins = {PLAYER: 0, OPPONENT: 0}
    shots: List[int] = []
    last = None
    start = time.perf_counter()
    for i in range(args.games):
        rng = random.Random(_stable_seed(args.seed, i))
        last = simulate_match(rng)
        if last.winner in wins:
            wins[last.winner] += 1
        shots.append(last.player_shots if last.winner == PLAYER else last.opponent_shots)
    elapsed = time.perf_counter() - start

    print(f"Player wins:   {wins[PLAYER]}")
    print(f"Opponent wins: {wins[OPPONENT]}")
    print(f"Winning shots: {_summary(shots)}")
    print(f"Time: {elapsed:.2f}s")

    if args.json and last is not None:
        print(json.dumps(state_to_dict(last.final_state), indent=2, ensure_ascii=False))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
