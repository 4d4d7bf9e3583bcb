from unittest import TestCase, main

from numpy import array, zeros

from slide2048.core.gamemove import Direction, legal_moves, legal_moves_mask


class TestGameMove(TestCase):
    def test_legal_moves(self):
        """
        Test if legal moves are correctly identified.
        """
        board = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_moves(board)
        self.assertEqual(set(legal), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_mask_order(self):
        """
        Mask entries follow the direction values.
        """
        board = array([[0, 0, 0, 2], [0, 0, 0, 4], [0, 0, 0, 8], [0, 0, 0, 16]])
        self.assertEqual(legal_moves_mask(board), (True, False, False, False))

    def test_empty_board_has_no_move(self):
        self.assertEqual(legal_moves(zeros((4, 4))), [])

    def test_stuck_board_has_no_move(self):
        board = array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_moves(board), [])


class TestDirection(TestCase):
    def test_parse(self):
        self.assertIs(Direction.parse("left"), Direction.LEFT)
        self.assertIs(Direction.parse(" Down "), Direction.DOWN)

    def test_parse_unknown(self):
        with self.assertRaises(ValueError):
            Direction.parse("sideways")

    def test_values_are_quarter_turns(self):
        self.assertEqual([int(direction) for direction in Direction], [0, 1, 2, 3])


if __name__ == '__main__':
    main()
