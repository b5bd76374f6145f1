"""Tests for the unattended training script."""
from __future__ import annotations

from qarena.envs import Corridor
from qarena.io import load_snapshots
from qarena.trainer import Trainer
from scripts.train_agents import train_in_windows


def test_windows_delegate_checkpointing_to_trainer(greedy_params, tmp_path, capsys):
    """
    Given: Five episodes, reports every two and checkpoints every two
    When: The script trains in windows
    Then: Each window is one Trainer.train call carrying the checkpoint settings
    """
    path = str(tmp_path / "corridor.yaml")
    trainer = Trainer(lambda: [Corridor()], greedy_params, max_ticks=10_000)
    calls = []
    train = trainer.train

    def recording_train(episodes, **kwargs):
        calls.append((episodes, kwargs))
        return train(episodes, **kwargs)

    trainer.train = recording_train

    results = train_in_windows(trainer, 5, checkpoint=path, checkpoint_interval=2, report_interval=2)

    assert [episodes for episodes, _ in calls] == [2, 2, 1]
    assert all(kwargs == {"checkpoint_path": path, "checkpoint_every": 2} for _, kwargs in calls)
    assert len(results) == 5
    assert load_snapshots(path) == trainer.snapshots

    reports = [line for line in capsys.readouterr().out.splitlines() if line.startswith("[train]")]
    assert [line.split()[1] for line in reports] == ["episode=2", "episode=4", "episode=5"]


def test_without_report_interval_trains_in_one_window(greedy_params, tmp_path):
    trainer = Trainer(lambda: [Corridor()], greedy_params, max_ticks=10_000)
    results = train_in_windows(
        trainer, 3, checkpoint=str(tmp_path / "c.yaml"), checkpoint_interval=0, report_interval=0
    )
    assert [result.episode for result in results] == [1, 2, 3]
