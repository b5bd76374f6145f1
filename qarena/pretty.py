from __future__ import annotations

from typing import List, Optional

from . import config
from .envs.corridor import LEFT, RIGHT, Corridor
from .envs.maze import MOVES, WALL, Maze
from .envs.tictactoe import EMPTY, Board
from .value_table import ValueTable

ARROWS = {"up": "^", "down": "v", "left": "<", "right": ">"}


def _c(text: str, code: str) -> str:
    if not config.USE_COLOR:
        return text
    return f"\033[{code}m{text}\033[0m"


def _b(text: str) -> str:
    return _c(text, '1')


def _red(text: str) -> str:
    return _c(text, '31')


def _green(text: str) -> str:
    return _c(text, '32')


def _yellow(text: str) -> str:
    return _c(text, '33')


def _cyan(text: str) -> str:
    return _c(text, '36')


def _dim(text: str) -> str:
    return _c(text, '2')


def _score(value: float) -> str:
    text = f"{value:g}"
    if value > 0:
        return _green(text)
    if value < 0:
        return _red(text)
    return text


def best_action_arrow(table: ValueTable, state: str, actions: List[str]) -> str:
    """Arrow for the best learned action at ``state``; '?' when nothing beats the rest."""
    ranked = table.action_values(actions, state)
    if not ranked or (len(ranked) > 1 and ranked[0].value == ranked[1].value):
        return '?'
    return ARROWS.get(str(ranked[0].action), '?')


def pretty_corridor(env: Corridor, last_action: Optional[str] = None) -> str:
    cells = [' o ' if i == env.index else '   ' for i in range(len(env.cells))]
    header = f"move {_cyan(str(last_action or '-'))} score: {_score(env.current_score())}"
    return header + '\n' + '|' + '|'.join(cells) + '|'


def pretty_corridor_policy(table: ValueTable, size: int) -> str:
    marks = []
    for index in range(size):
        left = table.value(str(index), LEFT)
        right = table.value(str(index), RIGHT)
        if left > right:
            marks.append(' < ')
        elif left < right:
            marks.append(' > ')
        else:
            marks.append(' ? ')
    return _dim('|' + '|'.join(marks) + '|')


def pretty_maze(env: Maze, table: Optional[ValueTable] = None) -> str:
    lines: List[str] = []
    for r, row in enumerate(env.rows):
        out = []
        for c, ch in enumerate(row):
            if (r, c) == env.position:
                out.append(_yellow('o'))
            elif ch == WALL:
                out.append(_dim(WALL))
            elif (r, c) == env.goal:
                out.append(_green(ch))
            elif table is not None:
                cell_actions = [a for a, (dr, dc) in MOVES.items() if env.is_open((r + dr, c + dc))]
                out.append(_cyan(best_action_arrow(table, f"{r},{c}", cell_actions)))
            else:
                out.append(ch)
        lines.append(''.join(out))
    lines.append(f"moves: {env.moves}  score: {_score(env.current_score())}")
    return '\n'.join(lines)


def pretty_board(board: Board) -> str:
    rows = []
    for start in (0, 3, 6):
        cells = board.cells[start:start + 3]
        rows.append(' ' + ' | '.join(_dim(str(start + i)) if cell == EMPTY else _b(cell) for i, cell in enumerate(cells)))
    winner = board.winner()
    if winner is not None:
        rows.append(_b(f"== {winner} wins =="))
    elif board.is_over():
        rows.append(_b("== draw =="))
    return '\n'.join(rows)


__all__ = [
    'pretty_corridor',
    'pretty_corridor_policy',
    'pretty_maze',
    'pretty_board',
    'best_action_arrow',
    '_b',
    '_dim',
]
