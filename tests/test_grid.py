import numpy as np
import pytest

from falling_blocks.game import Block, Colour, GameGrid, Position

X = Colour.FILLED
_ = Colour.EMPTY


def _grid_from_rows(rows):
    grid = GameGrid(len(rows[0]), len(rows))
    for r, row in enumerate(rows):
        for c, value in enumerate(row):
            grid.set(Position(r, c), value)
    return grid


def test_position_addition_and_equality():
    assert Position(1, 2) + Position(3, -4) == Position(4, -2)
    assert Position(0, 0) != Position(0, 1)


def test_collision_outside_bounds():
    grid = GameGrid(4, 5)
    assert grid.collision(Position(-1, 0))
    assert grid.collision(Position(0, -1))
    assert grid.collision(Position(5, 0))
    assert grid.collision(Position(0, 4))
    assert not grid.collision(Position(4, 3))


def test_collision_with_occupied_cell():
    grid = GameGrid(4, 4)
    grid.set(Position(2, 1), Colour.FILLED)
    assert grid.collision(Position(2, 1))
    assert not grid.collision(Position(2, 2))
    assert grid.get(Position(2, 1)) == Colour.FILLED


def test_out_of_range_access_is_an_error():
    grid = GameGrid(4, 4)
    with pytest.raises(AssertionError):
        grid.get(Position(4, 0))
    with pytest.raises(AssertionError):
        grid.set(Position(0, -1), Colour.FILLED)


def test_row_full_detection():
    grid = _grid_from_rows(
        [
            [_, _, _, _],
            [X, X, _, X],
            [X, X, X, X],
        ]
    )
    assert grid.is_row_full(2)
    assert not grid.is_row_full(1)
    assert not grid.is_row_full(0)


def test_clear_stacked_full_rows():
    grid = _grid_from_rows(
        [
            [_, _, _, _],
            [X, _, _, X],
            [X, X, X, X],
            [X, X, X, X],
        ]
    )
    assert grid.clear_full_rows() == 2
    expected = np.array(
        [
            [_, _, _, _],
            [_, _, _, _],
            [_, _, _, _],
            [X, _, _, X],
        ],
        dtype=np.uint8,
    )
    np.testing.assert_array_equal(grid.cells, expected)


def test_clear_separated_full_rows_keeps_order():
    grid = _grid_from_rows(
        [
            [X, _, _, _],
            [X, X, X, X],
            [_, X, _, _],
            [X, X, X, X],
            [_, _, X, _],
        ]
    )
    assert grid.clear_full_rows() == 2
    assert grid.occupancy().tolist() == [
        [0, 0, 0, 0],
        [0, 0, 0, 0],
        [1, 0, 0, 0],
        [0, 1, 0, 0],
        [0, 0, 1, 0],
    ]


def test_full_top_row_is_cleared():
    grid = _grid_from_rows([[X, X, X, X], [_, X, _, _], [_, _, _, _], [_, _, _, _]])
    assert grid.clear_full_rows() == 1
    assert grid.occupancy().tolist()[0] == [0, 0, 0, 0]
    assert grid.occupancy().tolist()[1] == [0, 1, 0, 0]


def test_clear_without_full_rows_is_noop():
    grid = _grid_from_rows([[_, _, _, _], [X, _, X, X]])
    before = grid.clone_state()
    assert grid.clear_full_rows() == 0
    np.testing.assert_array_equal(grid.cells, before)


def test_cells_view_is_read_only():
    grid = GameGrid(4, 4)
    with pytest.raises(ValueError):
        grid.cells[0, 0] = 1
    assert grid.shape == (4, 4)


def test_filled_positions_and_reset():
    grid = GameGrid(4, 4)
    grid.fill([Position(0, 1), Position(3, 2)])
    assert grid.filled_positions() == [Position(0, 1), Position(3, 2)]
    grid.reset()
    assert grid.filled_positions() == []


def test_blocks_equal_only_when_both_empty():
    assert Block(Position(0, 0), Colour.EMPTY) == Block(Position(3, 3), Colour.EMPTY)
    assert Block(Position(0, 0)) != Block(Position(0, 0))
    assert Block(Position(0, 0), Colour.EMPTY) != Block(Position(0, 0))
