from __future__ import annotations

import argparse
import logging
import os
from typing import Optional

from qarena import config
from qarena.games import GAMES, get_game
from qarena.models import LearningParams
from qarena.pretty import _b, _dim
from qarena.trainer import Trainer, summarize


def default_snapshot_path(game: str) -> str:
    return os.path.join(config.DEFAULT_SNAPSHOT_DIR, f"{game}.yaml")


def build_trainer(game: str, epsilon: float, seed: Optional[int], max_ticks: Optional[int]) -> Trainer:
    entry = get_game(game)
    return Trainer(
        entry.cohort_factory,
        LearningParams(epsilon=epsilon),
        seed=seed,
        max_ticks=max_ticks,
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Train tabular SARSA(lambda) agents and watch them play.")
    parser.add_argument("game", choices=list(GAMES.keys()), help="Game to play")
    parser.add_argument("--episodes", type=int, default=100, help="Silent training episodes before the shown one")
    parser.add_argument("--snapshot", type=str, default=None, help="Snapshot YAML to resume from and save to")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--epsilon", type=float, default=config.EXPLORATION_RATE, help="Exploration probability")
    parser.add_argument("--max-ticks", type=int, default=10_000, help="Abort an episode after this many ticks (0 = unlimited)")
    parser.add_argument("--quiet", action="store_true", help="Skip rendering the final episode")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors in the output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if args.no_color:
        config.USE_COLOR = False

    snapshot_path = args.snapshot or default_snapshot_path(args.game)
    trainer = build_trainer(args.game, args.epsilon, args.seed, args.max_ticks or None)
    if os.path.isfile(snapshot_path):
        trainer.load(snapshot_path)
        print(_dim(f"Resumed from {snapshot_path}"))

    results = trainer.train(args.episodes)
    if results:
        stats = summarize(results)
        print(
            f"[train] episodes={stats['episodes']} mean_score={stats['mean_score']:.2f} "
            f"min={stats['min_score']:.0f} max={stats['max_score']:.0f} mean_ticks={stats['mean_ticks']:.1f}"
        )

    renderers = [] if args.quiet else [get_game(args.game).renderer_factory(None)]
    final = trainer.step(observers=renderers)
    print(_b("== END =="))
    print(f"Episode {final.episode}: ticks={final.ticks} scores={final.scores}")

    trainer.save(snapshot_path)


if __name__ == "__main__":
    main()
