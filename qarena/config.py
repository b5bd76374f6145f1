from __future__ import annotations

# Default learning hyperparameters.
EXPLORATION_RATE = 0.1       # Probability of picking a random action instead of the best known one.
LEARNING_RATE = 0.9          # Step size (alpha) of the temporal-difference update.
DISCOUNT_RATE = 0.9          # Discount (gamma) applied to the lookahead value.
TRACE_DECAY = 0.5            # Eligibility trace decay (lambda).

# Five-cell corridor.
CORRIDOR_CELLS = (-1, -1, -10, -10, 100)
CORRIDOR_START = 2

# Maze layout: '#' wall, '.' floor, 'S' start, 'G' goal.
MAZE_LAYOUT = (
    "#######",
    "#S....#",
    "#####.#",
    "#G....#",
    "#######",
)
MAZE_STEP_SCORE = -1
MAZE_GOAL_SCORE = 100

# Tic-tac-toe outcome scores.
TICTACTOE_WIN_SCORE = 1
TICTACTOE_LOSS_SCORE = -1

DEFAULT_SNAPSHOT_DIR = "data/snapshots"
USE_COLOR = True             # Toggle ANSI colours in console output.
