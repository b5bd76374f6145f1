#!/usr/bin/env python
"""
Unattended SARSA(lambda) training with periodic snapshot checkpoints.

Usage:
    python -m scripts.train_agents --game maze --episodes 500 --checkpoint data/snapshots/maze.yaml
"""

from __future__ import annotations

import argparse
import logging
import os
from typing import List

import numpy as np

from qarena import config
from qarena.games import GAMES, get_game
from qarena.models import EpisodeResult, LearningParams, TraceScope
from qarena.trainer import Trainer


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Train tabular agents and checkpoint their value tables.")
    parser.add_argument("--game", choices=list(GAMES.keys()), default="corridor", help="Game to train on.")
    parser.add_argument("--episodes", type=int, default=500, help="Number of training episodes.")
    parser.add_argument("--epsilon", type=float, default=config.EXPLORATION_RATE, help="Exploration probability.")
    parser.add_argument("--lr", type=float, default=config.LEARNING_RATE, help="Learning rate (alpha).")
    parser.add_argument("--gamma", type=float, default=config.DISCOUNT_RATE, help="Discount rate.")
    parser.add_argument("--trace-decay", type=float, default=config.TRACE_DECAY, help="Eligibility trace decay (lambda).")
    parser.add_argument(
        "--trace-scope",
        choices=[scope.value for scope in TraceScope],
        default=TraceScope.EPISODE.value,
        help="Reset eligibility traces every episode or keep them for the whole run.",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed.")
    parser.add_argument("--checkpoint", type=str, default=None, help="Snapshot YAML to resume from and checkpoint to.")
    parser.add_argument("--checkpoint-interval", type=int, default=50, help="Save a checkpoint every N episodes.")
    parser.add_argument("--report-interval", type=int, default=25, help="Print a score summary every N episodes.")
    parser.add_argument("--max-ticks", type=int, default=10_000, help="Per-episode tick limit (0 = unlimited).")
    return parser.parse_args()


def window_summary(results: List[EpisodeResult]) -> str:
    scores = np.asarray([r.scores for r in results], dtype=np.float64)
    ticks = np.asarray([r.ticks for r in results], dtype=np.float64)
    per_slot = " ".join(f"slot{i}={mean:.2f}" for i, mean in enumerate(scores.mean(axis=0)))
    return f"mean_ticks={ticks.mean():.1f} {per_slot}"


def train_in_windows(
    trainer: Trainer,
    episodes: int,
    *,
    checkpoint: str,
    checkpoint_interval: int,
    report_interval: int,
) -> List[EpisodeResult]:
    """Train in report-sized windows, printing a summary after each one."""
    results: List[EpisodeResult] = []
    remaining = episodes
    while remaining > 0:
        size = min(report_interval, remaining) if report_interval > 0 else remaining
        window = trainer.train(size, checkpoint_path=checkpoint, checkpoint_every=checkpoint_interval)
        print(f"[train] episode={trainer.episodes} {window_summary(window)}")
        results.extend(window)
        remaining -= size
    trainer.save(checkpoint)
    print(f"[checkpoint] Saved {checkpoint}")
    return results


def main() -> None:
    args = _parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    params = LearningParams(
        epsilon=args.epsilon,
        learning_rate=args.lr,
        discount_rate=args.gamma,
        trace_decay=args.trace_decay,
    )
    trainer = Trainer(
        get_game(args.game).cohort_factory,
        params,
        seed=args.seed,
        trace_scope=TraceScope(args.trace_scope),
        max_ticks=args.max_ticks or None,
    )
    checkpoint = args.checkpoint or os.path.join(config.DEFAULT_SNAPSHOT_DIR, f"{args.game}.yaml")
    if os.path.isfile(checkpoint):
        trainer.load(checkpoint)
        print(f"[train] resumed from {checkpoint}")

    train_in_windows(
        trainer,
        args.episodes,
        checkpoint=checkpoint,
        checkpoint_interval=args.checkpoint_interval,
        report_interval=args.report_interval,
    )


if __name__ == "__main__":
    main()
