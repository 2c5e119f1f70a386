# -*-  coding: utf-8 -*-
"""
Set of test for the Board value type, directions and rotation.
"""
from unittest import TestCase, main

import numpy as np

from mergegrid.core.board import Board, Direction, as_board, create_empty_board, rotate


class TestBoard(TestCase):
    """
    Test for the Board class.
    This class tests construction, validation and value semantics.
    """

    def test_create_empty_board(self):
        """Empty board has the requested size and no tile."""
        board = create_empty_board(4)
        self.assertEqual(board.size, 4)
        self.assertEqual(board.cells.shape, (4, 4))
        self.assertTrue(board.is_empty)
        self.assertEqual(len(board.empty_cells()), 16)

    def test_create_empty_board_invalid_size(self):
        """Non-positive sizes are rejected."""
        for size in (0, -1, 2.5, True):
            with self.assertRaises(ValueError):
                create_empty_board(size)

    def test_non_square_rejected(self):
        """Non-square grids fail fast."""
        with self.assertRaises(ValueError):
            Board([[2, 0, 0], [0, 0, 0]])
        with self.assertRaises(ValueError):
            Board([2, 0, 0, 0])
        with self.assertRaises(ValueError):
            Board([])

    def test_negative_rejected(self):
        """Negative cells fail fast."""
        with self.assertRaises(ValueError):
            Board([[2, -2], [0, 0]])

    def test_non_integer_rejected(self):
        """Float, string and boolean cells fail fast instead of being cast."""
        for cells in ([[2.7, 0], [0, 0]], [['2', '0'], ['0', '0']], [[True, False], [False, False]]):
            with self.assertRaises(ValueError, msg=repr(cells)):
                Board(cells)
        with self.assertRaises(ValueError):
            Board(np.array([[2.0, 0.0], [0.0, 0.0]]))

    def test_unsigned_integers_accepted(self):
        """Any integer dtype is stored as int64."""
        board = Board(np.array([[2, 0], [0, 4]], dtype=np.uint8))
        self.assertEqual(board.cells.dtype, np.int64)
        self.assertEqual(board, Board([[2, 0], [0, 4]]))

    def test_immutable(self):
        """The backing array can't be written."""
        board = Board([[2, 0], [0, 0]])
        with self.assertRaises(ValueError):
            board.cells[0, 0] = 4

    def test_copies_input(self):
        """Changing the source array doesn't change the board."""
        source = np.array([[2, 0], [0, 4]])
        board = Board(source)
        source[0, 0] = 8
        self.assertEqual(board[0, 0], 2)

    def test_deep_equality(self):
        """Boards compare by value, not identity."""
        first = Board([[2, 4], [0, 8]])
        second = Board.from_rows([[2, 4], [0, 8]])
        self.assertIsNot(first, second)
        self.assertEqual(first, second)
        self.assertEqual(hash(first), hash(second))
        self.assertNotEqual(first, Board([[2, 4], [8, 0]]))

    def test_queries(self):
        """Queries report tiles and empty cells."""
        board = Board([[2, 0, 0], [0, 16, 0], [4, 0, 2]])
        self.assertEqual(board.tile_count, 4)
        self.assertEqual(board.max_tile, 16)
        self.assertEqual(board.total, 24)
        self.assertFalse(board.is_full)
        self.assertFalse(board.is_empty)
        self.assertEqual(board.empty_cells(), [(0, 1), (0, 2), (1, 0), (1, 2), (2, 1)])
        self.assertEqual(board.to_list(), [[2, 0, 0], [0, 16, 0], [4, 0, 2]])
        self.assertIsInstance(board[1, 1], int)

    def test_as_board(self):
        """Coercion keeps boards and converts lists."""
        board = Board([[2, 0], [0, 0]])
        self.assertIs(as_board(board), board)
        self.assertEqual(as_board([[2, 0], [0, 0]]), board)
        self.assertEqual(as_board(np.array([[2, 0], [0, 0]])), board)

    def test_str(self):
        """Text rendering has one line per row."""
        board = Board([[2, 0], [128, 4]])
        lines = str(board).splitlines()
        self.assertEqual(len(lines), 2)
        self.assertEqual(lines[1].split(), ['128', '4'])


class TestRotate(TestCase):
    """
    Test for the rotation primitive.
    """

    def test_single_turn_mapping(self):
        """One turn sends cell (r, c) to (c, N - 1 - r)."""
        board = Board(np.arange(9).reshape(3, 3))
        rotated = rotate(board, 1)
        for r in range(3):
            for c in range(3):
                self.assertEqual(rotated[c, 2 - r], board[r, c])

    def test_small_example(self):
        """A 2x2 board turns clockwise."""
        np.testing.assert_array_equal(rotate([[1, 2], [3, 4]], 1).cells, np.array([[3, 1], [4, 2]]))

    def test_four_turns_identity(self):
        """Four quarter turns give back the original board, for any size."""
        generator = np.random.default_rng(0)
        for size in range(1, 7):
            board = Board(generator.integers(0, 64, size=(size, size)))
            result = board
            for _ in range(4):
                result = rotate(result, 1)
            self.assertEqual(result, board)
            self.assertEqual(rotate(board, 4), board)

    def test_negative_turns(self):
        """Negative turns undo positive ones."""
        board = Board([[2, 4, 0], [0, 8, 0], [16, 0, 32]])
        self.assertEqual(rotate(rotate(board, 1), -1), board)
        self.assertEqual(rotate(board, -1), rotate(board, 3))


class TestDirection(TestCase):
    """
    Test for the Direction enum.
    """

    def test_parse(self):
        """Members, values and names are accepted."""
        self.assertIs(Direction.parse(Direction.UP), Direction.UP)
        self.assertIs(Direction.parse('up'), Direction.UP)
        self.assertIs(Direction.parse(' Right '), Direction.RIGHT)
        self.assertIs(Direction.parse(3), Direction.DOWN)
        self.assertIs(Direction.parse(np.int64(2)), Direction.RIGHT)

    def test_parse_invalid(self):
        """Anything outside the four directions fails fast."""
        for value in ('diagonal', 4, -1, None, True, 1.0, 2.5):
            with self.assertRaises(ValueError):
                Direction.parse(value)

    def test_rotations_cancel(self):
        """Pre and post turns add up to a full turn."""
        self.assertEqual(Direction.LEFT.rotations, (0, 0))
        self.assertEqual(Direction.RIGHT.rotations, (2, 2))
        for direction in Direction:
            pre, post = direction.rotations
            self.assertEqual((pre + post) % 4, 0)


if __name__ == "__main__":
    main()
