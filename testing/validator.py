import unittest

from pawnchess.Utils.Board import Board
from pawnchess.Utils.Move import parseAN
from pawnchess.Utils.const import WHITE, BLACK, EMPTY
from pawnchess.Utils.validator import isLegal, validate, isEnPassant, isDoubleStep, \
    enPassantAfter, EnPassant, NO_ENPASSANT


class ValidatorTestCase(unittest.TestCase):
    def test_single_step(self):
        self.assertTrue(isLegal(4, 1, 4, 2, WHITE, EMPTY))
        self.assertTrue(isLegal(4, 3, 4, 4, WHITE, EMPTY))
        self.assertTrue(isLegal(4, 6, 4, 5, BLACK, EMPTY))
        self.assertTrue(isLegal(4, 4, 4, 3, BLACK, EMPTY))

    def test_backwards_and_sideways(self):
        self.assertFalse(isLegal(4, 3, 4, 2, WHITE, EMPTY))
        self.assertFalse(isLegal(4, 3, 4, 4, BLACK, EMPTY))
        self.assertFalse(isLegal(4, 3, 4, 3, WHITE, EMPTY))
        self.assertFalse(isLegal(4, 3, 5, 3, WHITE, BLACK))

    def test_straight_onto_occupied(self):
        """Testing that pawns never move straight onto an occupied square"""

        for color in (WHITE, BLACK):
            for dest in (WHITE, BLACK):
                for y0 in range(8):
                    for y1 in range(8):
                        self.assertFalse(isLegal(2, y0, 2, y1, color, dest))

    def test_double_step(self):
        """Testing that two ranks are allowed only from the start rank"""

        self.assertTrue(isLegal(4, 1, 4, 3, WHITE, EMPTY))
        self.assertTrue(isLegal(4, 6, 4, 4, BLACK, EMPTY))

        for y0 in range(2, 6):
            self.assertFalse(isLegal(4, y0, 4, y0 + 2, WHITE, EMPTY))
        for y0 in range(2, 6):
            self.assertFalse(isLegal(4, y0, 4, y0 - 2, BLACK, EMPTY))

        # Three ranks is too far even from the start
        self.assertFalse(isLegal(4, 1, 4, 4, WHITE, EMPTY))
        self.assertFalse(isLegal(4, 6, 4, 3, BLACK, EMPTY))

        # A two rank capture is not a thing
        self.assertFalse(isLegal(4, 1, 3, 3, WHITE, BLACK))
        self.assertFalse(isLegal(4, 6, 5, 4, BLACK, WHITE))

    def test_capture(self):
        self.assertTrue(isLegal(4, 3, 3, 4, WHITE, BLACK))
        self.assertTrue(isLegal(4, 3, 5, 4, WHITE, BLACK))
        self.assertTrue(isLegal(4, 1, 5, 2, WHITE, BLACK))
        self.assertTrue(isLegal(3, 4, 4, 3, BLACK, WHITE))

        # Not onto own pawns
        self.assertFalse(isLegal(4, 3, 3, 4, WHITE, WHITE))
        self.assertFalse(isLegal(3, 4, 4, 3, BLACK, BLACK))

        # Not onto empty squares
        self.assertFalse(isLegal(4, 3, 3, 4, WHITE, EMPTY))

        # Not two files away
        self.assertFalse(isLegal(4, 3, 2, 4, WHITE, BLACK))
        self.assertFalse(isLegal(0, 3, 7, 4, WHITE, BLACK))

        # Not backwards
        self.assertFalse(isLegal(4, 3, 3, 2, WHITE, BLACK))
        self.assertFalse(isLegal(3, 4, 4, 5, BLACK, WHITE))

    def test_enpassant(self):
        """Testing captures onto the square a pawn just passed over"""

        # Black played d7d5, white pawn on e5
        enpassant = EnPassant(True, 3, 5)
        self.assertTrue(isLegal(4, 4, 3, 5, WHITE, EMPTY, enpassant))
        self.assertTrue(isLegal(2, 4, 3, 5, WHITE, EMPTY, enpassant))
        self.assertFalse(isLegal(4, 4, 3, 5, WHITE, EMPTY, NO_ENPASSANT))
        self.assertFalse(isLegal(4, 4, 5, 5, WHITE, EMPTY, enpassant))

        # Only onto the passed over square, not anywhere on that file
        self.assertFalse(isLegal(2, 1, 3, 2, WHITE, EMPTY, enpassant))

        # White played e2e4, black pawn on d4
        enpassant = EnPassant(True, 4, 2)
        self.assertTrue(isLegal(3, 3, 4, 2, BLACK, EMPTY, enpassant))
        self.assertFalse(isLegal(3, 3, 4, 2, BLACK, EMPTY, EnPassant(False, 4, 2)))

    def test_isDoubleStep(self):
        self.assertTrue(isDoubleStep(1, 3, WHITE))
        self.assertTrue(isDoubleStep(6, 4, BLACK))
        self.assertFalse(isDoubleStep(1, 2, WHITE))
        self.assertFalse(isDoubleStep(2, 4, WHITE))
        self.assertFalse(isDoubleStep(1, 3, BLACK))

        self.assertEqual(enPassantAfter(4, 1, 3, WHITE), EnPassant(True, 4, 2))
        self.assertEqual(enPassantAfter(3, 6, 4, BLACK), EnPassant(True, 3, 5))
        self.assertEqual(enPassantAfter(3, 6, 5, BLACK), NO_ENPASSANT)

    def test_validate(self):
        """Testing validate on board positions"""

        board = Board(setup=True)
        self.assertTrue(validate(board, parseAN("e2e4"), WHITE))
        self.assertTrue(validate(board, parseAN("e2e3"), WHITE))
        self.assertFalse(validate(board, parseAN("e2e5"), WHITE))
        self.assertFalse(validate(board, parseAN("e2d3"), WHITE))
        self.assertFalse(validate(board, parseAN("e7e5"), WHITE))
        self.assertFalse(validate(board, parseAN("e3e4"), WHITE))
        self.assertTrue(validate(board, parseAN("e7e5"), BLACK))

        board = Board(pawns={"e5": WHITE, "d5": BLACK})
        move = parseAN("e5d6")
        enpassant = EnPassant(True, 3, 5)
        self.assertTrue(validate(board, move, WHITE, enpassant))
        self.assertTrue(isEnPassant(move, board[move.cord1], enpassant))
        self.assertFalse(validate(board, move, WHITE))
        self.assertFalse(isEnPassant(move, board[move.cord1], NO_ENPASSANT))

        board = Board(pawns={"e4": WHITE, "d5": BLACK})
        move = parseAN("e4d5")
        self.assertTrue(validate(board, move, WHITE))
        self.assertFalse(isEnPassant(move, board[move.cord1], EnPassant(True, 3, 4)))


if __name__ == '__main__':
    unittest.main()
