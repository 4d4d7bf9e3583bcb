# -*-  coding: utf-8 -*-
"""
Set of test for the grid primitives.
"""
from unittest import TestCase, main

import numpy as np

from slide2048.core.gameboard import (
    empty_cells,
    is_done,
    is_won,
    merge_line,
    move_board,
    slide_and_merge,
    spawn_tile,
)
from slide2048.core.gamemove import Direction


class FixedRandom:
    """Random source returning scripted answers."""

    def __init__(self, choices=(), coins=()):
        self.choices = list(choices)
        self.coins = list(coins)
        self.calls = []

    def choice(self, n):
        self.calls.append(("choice", n))
        return self.choices.pop(0) if self.choices else 0

    def coin(self, probability):
        self.calls.append(("coin", probability))
        return self.coins.pop(0) if self.coins else True


class TestMergeLine(TestCase):
    """Test the compact-and-merge primitive."""

    def test_merge_empty_line(self):
        """Empty line merges to nothing with zero score."""
        score, result = merge_line(np.array([0, 0, 0, 0]))
        self.assertEqual(score, 0)
        self.assertEqual(len(result), 0)

    def test_merge_single_tile(self):
        """A lone tile is compacted without scoring."""
        score, result = merge_line(np.array([0, 0, 4, 0]))
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_merged_tile_does_not_merge_again(self):
        """[2, 2, 2, 2] gives two 4s, not one 8."""
        score, result = merge_line(np.array([2, 2, 2, 2]))
        self.assertEqual(score, 8)
        np.testing.assert_array_equal(result, np.array([4, 4]))

    def test_score_of_two_merges(self):
        """[2, 2, 4, 4] gives [4, 8] and scores 12."""
        score, result = merge_line(np.array([2, 2, 4, 4]))
        self.assertEqual(score, 12)
        np.testing.assert_array_equal(result, np.array([4, 8]))

    def test_merge_across_gaps(self):
        """Zeros between equal tiles do not prevent the merge."""
        score, result = merge_line(np.array([2, 0, 0, 2]))
        self.assertEqual(score, 4)
        np.testing.assert_array_equal(result, np.array([4]))

    def test_leading_pair_wins(self):
        """With three equal tiles the first two merge."""
        score, result = merge_line(np.array([0, 8, 8, 8]))
        self.assertEqual(score, 16)
        np.testing.assert_array_equal(result, np.array([16, 8]))

    def test_no_merge_between_different_values(self):
        score, result = merge_line(np.array([2, 4, 2, 4]))
        self.assertEqual(score, 0)
        np.testing.assert_array_equal(result, np.array([2, 4, 2, 4]))


class TestSlideAndMerge(TestCase):
    """Test whole-board moves."""

    def test_slide_and_merge(self):
        """Every row slides left and is padded with zeros."""
        board = np.array([[2, 2, 4, 4], [0, 2, 2, 4], [2, 0, 0, 2], [2, 2, 2, 2]])
        score, result = slide_and_merge(board)
        expected = np.array([[4, 8, 0, 0], [4, 4, 0, 0], [4, 0, 0, 0], [4, 4, 0, 0]])
        self.assertEqual(score, 28)
        np.testing.assert_array_equal(result, expected)

    def test_move_right(self):
        board = np.array([[2, 2, 4, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result, score = move_board(board, Direction.RIGHT)
        np.testing.assert_array_equal(result[0], np.array([0, 0, 4, 4]))
        self.assertEqual(score, 4)

    def test_move_up(self):
        board = np.array([[0, 0, 0, 0], [2, 0, 0, 0], [2, 0, 0, 0], [4, 0, 0, 0]])
        result, score = move_board(board, Direction.UP)
        np.testing.assert_array_equal(result[:, 0], np.array([4, 4, 0, 0]))
        self.assertEqual(score, 4)

    def test_move_down(self):
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0]])
        result, score = move_board(board, Direction.DOWN)
        np.testing.assert_array_equal(result[:, 0], np.array([0, 0, 2, 4]))
        self.assertEqual(score, 4)

    def test_move_does_not_modify_input(self):
        board = np.array([[2, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        original = board.copy()
        move_board(board, Direction.LEFT)
        np.testing.assert_array_equal(board, original)

    def test_move_rejects_plain_integers(self):
        with self.assertRaises(TypeError):
            move_board(np.zeros((4, 4), dtype=np.int64), 0)

    def test_random_boards_keep_shape_and_values(self):
        """Moves keep the board shape, the tile total and powers of two."""
        generator = np.random.default_rng(7)
        for _ in range(50):
            board = generator.choice([0, 0, 2, 4, 8, 16, 32], size=(4, 4)).astype(np.int64)
            for direction in Direction:
                result, score = move_board(board, direction)

                # ##>: Shape and total value are preserved.
                self.assertEqual(result.shape, (4, 4))
                self.assertEqual(result.sum(), board.sum())

                # ##>: Non-zero values stay powers of two.
                tiles = result[result != 0]
                self.assertTrue(np.all(tiles >= 2))
                self.assertTrue(np.all((tiles & (tiles - 1)) == 0))
                self.assertGreaterEqual(score, 0)


class TestSpawnTile(TestCase):
    """Test tile spawning."""

    def test_spawn_in_chosen_cell(self):
        board = np.array([[2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        cell = spawn_tile(board, FixedRandom(choices=[2], coins=[True]))

        # ##>: Third empty cell in row-major order is (0, 3).
        self.assertEqual(cell, (0, 3))
        self.assertEqual(board[0, 3], 2)

    def test_spawn_four_when_coin_fails(self):
        board = np.zeros((4, 4), dtype=np.int64)
        random = FixedRandom(choices=[5], coins=[False])
        cell = spawn_tile(board, random, probability_two=0.9)
        self.assertEqual(board[cell], 4)
        self.assertIn(("choice", 16), random.calls)
        self.assertIn(("coin", 0.9), random.calls)

    def test_spawn_on_full_board_is_noop(self):
        board = np.full((4, 4), 2, dtype=np.int64)
        random = FixedRandom()
        self.assertIsNone(spawn_tile(board, random))
        self.assertTrue(np.all(board == 2))
        self.assertEqual(random.calls, [])

    def test_empty_cells_row_major(self):
        board = np.array([[2, 0], [0, 4]])
        self.assertEqual(empty_cells(board), [(0, 1), (1, 0)])


class TestTerminalChecks(TestCase):
    """Test win and game-over detection."""

    def test_is_won(self):
        board = np.zeros((4, 4), dtype=np.int64)
        self.assertFalse(is_won(board))
        board[2, 1] = 2048
        self.assertTrue(is_won(board))

    def test_is_won_custom_target(self):
        board = np.array([[256, 0], [0, 0]])
        self.assertTrue(is_won(board, target=256))

    def test_is_done_full_board_without_pairs(self):
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertTrue(is_done(board))

    def test_not_done_with_horizontal_pair(self):
        board = np.array([[2, 2, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_done(board))

    def test_not_done_with_vertical_pair(self):
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 16], [512, 1024, 2048, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_done(board))

    def test_not_done_with_empty_cell(self):
        board = np.array([[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 0, 4096], [8192, 16384, 32768, 65536]])
        self.assertFalse(is_done(board))


if __name__ == "__main__":
    main()
