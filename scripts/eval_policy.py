#!/usr/bin/env python
"""
Replay learned policies greedily from a snapshot.

Corridor and maze are replayed once per episode; for tic-tac-toe the learned
slot plays against a random opponent.

Example:
    python -m scripts.eval_policy --game tictactoe --snapshot data/snapshots/tictactoe.yaml --games 200 --slot 0
"""

from __future__ import annotations

import argparse
from collections import Counter

import numpy as np

from qarena.agents import GreedyAgent, RandomAgent
from qarena.games import GAMES, get_game
from qarena.io import load_snapshots
from qarena.simulation import Player, Simulation


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate a saved value table with greedy play.")
    parser.add_argument("--game", choices=list(GAMES.keys()), required=True)
    parser.add_argument("--snapshot", type=str, required=True, help="Snapshot YAML to evaluate.")
    parser.add_argument("--games", type=int, default=100, help="Number of games.")
    parser.add_argument("--slot", type=int, default=0, help="Cohort slot played by the learned policy.")
    parser.add_argument("--seed", type=int, default=1234, help="Seed for random opponents.")
    parser.add_argument("--max-ticks", type=int, default=1_000, help="Per-game tick limit.")
    return parser.parse_args()


def main() -> None:
    args = _parse_args()
    snapshots = load_snapshots(args.snapshot)
    factory = get_game(args.game).cohort_factory
    scores = []
    outcomes: Counter = Counter()
    for game_index in range(args.games):
        environments = list(factory())
        players = []
        for slot, environment in enumerate(environments):
            if slot == args.slot:
                agent = GreedyAgent(snapshots.get(slot, {}))
            else:
                agent = RandomAgent(seed=args.seed + game_index)
            players.append(Player(environment, agent))
        Simulation(players).run(max_ticks=args.max_ticks)
        score = environments[args.slot].current_score()
        scores.append(score)
        outcomes["win" if score > 0 else "loss" if score < 0 else "even"] += 1

    values = np.asarray(scores, dtype=np.float64)
    print(f"[eval] game={args.game} games={args.games} mean_score={values.mean():.3f} std={values.std():.3f}")
    print(f"[eval] outcomes={dict(outcomes)}")


if __name__ == "__main__":
    main()
