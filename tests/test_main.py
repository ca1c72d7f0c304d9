from __future__ import annotations

import logging

from tetris_state.__main__ import format_grid, main, play

from conftest import make_state


def test_format_grid():
    assert format_grid([[0, 1], [2, 0]]) == ".#\n#."


def test_play_stops_when_spawn_is_blocked():
    state = make_state(rows=4, cols=4)
    play(state, pieces=10)
    assert state.is_game_over
    assert state.num_pieces_dropped == 1
    assert not state.is_running()


def test_play_respects_piece_limit():
    state = make_state(rows=20, cols=10)
    play(state, pieces=3)
    assert state.num_pieces_dropped == 3
    assert state.has_started
    assert len(state.board) == 200


def test_main_prints_board(capsys, caplog):
    with caplog.at_level(logging.INFO, logger="tetris_state.__main__"):
        main(["--rows", "8", "--cols", "6", "--seed", "1", "--pieces", "4"])
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 8
    assert all(len(line) == 6 and set(line) <= {".", "#"} for line in lines)
    assert "Dropped" in caplog.text
