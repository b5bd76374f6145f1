"""Tests for the shipped environments."""
from __future__ import annotations

import pytest

from qarena.envs import Board, Corridor, Environment, Maze, TicTacToe, tictactoe_cohort
from qarena.exceptions import ConfigurationError, InvalidActionError

MAZE_PATH = ["right"] * 4 + ["down"] * 2 + ["left"] * 4


class TestCorridor:
    def test_initial_state(self):
        env = Corridor()
        assert env.state_key() == "2"
        assert env.legal_actions() == ["left", "right"]
        assert env.current_score() == 0
        assert not env.is_terminal()

    def test_left_edge_only_allows_right(self):
        env = Corridor(start=0)
        assert env.legal_actions() == ["right"]

    def test_moves_score_entered_cells(self):
        env = Corridor()
        env.apply("left")
        env.apply("left")
        assert env.current_score() == -2
        env.apply("right")
        assert env.current_score() == -3

    def test_reaching_the_end_is_terminal(self):
        env = Corridor()
        env.apply("right")
        env.apply("right")
        assert env.is_terminal()
        assert env.legal_actions() == []
        assert env.current_score() == 90

    def test_illegal_moves_raise(self):
        with pytest.raises(InvalidActionError):
            Corridor(start=0).apply("left")
        env = Corridor(start=3)
        env.apply("right")
        with pytest.raises(InvalidActionError):
            env.apply("left")


class TestMaze:
    def test_start_and_moves(self):
        env = Maze()
        assert env.state_key() == "1,1"
        assert env.legal_actions() == ["right"]
        env.apply("right")
        assert env.legal_actions() == ["left", "right"]

    def test_shortest_path_length(self):
        assert Maze().shortest_path_length() == 10

    def test_walking_the_path_reaches_goal(self):
        env = Maze()
        for action in MAZE_PATH:
            env.apply(action)
        assert env.is_terminal()
        assert env.moves == 10
        assert env.current_score() == 100 - (10 - 1)

    def test_walls_are_not_legal(self):
        env = Maze()
        with pytest.raises(InvalidActionError):
            env.apply("up")

    def test_unreachable_goal(self):
        layout = ("#####", "#S#G#", "#####")
        assert Maze(layout).shortest_path_length() is None

    @pytest.mark.parametrize("layout", [("#S..#",), ("#S.G#", "#..G#"), ("#..G#",)])
    def test_layout_needs_one_start_and_goal(self, layout):
        with pytest.raises(ConfigurationError):
            Maze(layout)


class TestTicTacToe:
    def test_cohort_shares_one_board(self):
        x, o = tictactoe_cohort()
        assert x.board is o.board
        x.apply(4)
        assert o.state_key() == "....X...."
        assert o.legal_actions() == [0, 1, 2, 3, 5, 6, 7, 8]

    def test_out_of_turn_move_raises(self):
        x, o = tictactoe_cohort()
        with pytest.raises(InvalidActionError):
            o.apply(0)
        x.apply(0)
        with pytest.raises(InvalidActionError):
            o.apply(0)

    def test_win_scores_both_sides(self):
        x, o = tictactoe_cohort()
        for cell_x, cell_o in [(0, 3), (1, 4)]:
            x.apply(cell_x)
            o.apply(cell_o)
        x.apply(2)
        assert x.is_terminal() and o.is_terminal()
        assert x.current_score() == 1
        assert o.current_score() == -1
        assert o.legal_actions() == []

    def test_full_board_is_a_draw(self):
        board = Board("XOXXOOOX.")
        x = TicTacToe(board, "X")
        x.apply(8)
        assert board.winner() is None
        assert x.is_terminal()
        assert x.current_score() == 0

    def test_bad_construction(self):
        with pytest.raises(ValueError):
            Board("XO")
        with pytest.raises(ValueError):
            TicTacToe(Board(), "Z")


@pytest.mark.parametrize("env", [Corridor(), Maze(), TicTacToe(Board(), "X")])
def test_environments_satisfy_protocol(env):
    assert isinstance(env, Environment)
    assert (env.legal_actions() == []) == env.is_terminal()
