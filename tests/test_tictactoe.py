import pytest

from glplayground.tictactoe import TicTacToe


def test_new_board_is_empty_and_cross_starts():
    game = TicTacToe()
    assert game.cells == [" "] * 9
    assert game.turn == "X"
    assert game.status == "X turn"


def test_click_places_mark_and_passes_turn():
    game = TicTacToe()
    assert game.click(4) is True
    assert game.cells[4] == "X"
    assert game.turn == "O"
    assert game.click(0) is True
    assert game.cells[0] == "O"
    assert game.turn == "X"


def test_click_on_occupied_cell_changes_nothing():
    game = TicTacToe()
    game.click(2)
    before = list(game.cells)
    assert game.click(2) is False
    assert game.cells == before
    assert game.turn == "O"


def test_restart_clears_board_but_keeps_turn():
    game = TicTacToe()
    game.click(0)
    game.restart()
    assert game.cells == [" "] * 9
    assert game.turn == "O"


@pytest.mark.parametrize("cell", [-1, 9, 100])
def test_click_outside_board_raises(cell):
    game = TicTacToe()
    with pytest.raises(IndexError):
        game.click(cell)


def test_full_board_alternates_marks():
    game = TicTacToe()
    for cell in range(9):
        assert game.click(cell)
    assert game.cells.count("X") == 5
    assert game.cells.count("O") == 4
    assert all(not game.click(cell) for cell in range(9))


def test_rows_split_board_in_threes():
    game = TicTacToe()
    game.click(3)
    rows = game.rows()
    assert len(rows) == 3
    assert rows[1][0] == "X"
    assert sum(rows, []) == game.cells