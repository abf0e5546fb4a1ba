import unittest

from nxn_cube.core.types import Move, PuzzleSize
from nxn_cube.logic.moves import (
    base_face,
    format_move,
    inverse_move,
    invert_sequence,
    parse_move,
    parse_sequence,
)


class TestParseMove(unittest.TestCase):
    def test_plain_and_suffixes(self):
        self.assertEqual(parse_move("R"), Move("R", 1, 1))
        self.assertEqual(parse_move("U'"), Move("U", 1, 3))
        self.assertEqual(parse_move("F2"), Move("F", 1, 2))

    def test_wide_moves(self):
        self.assertEqual(parse_move("Rw"), Move("R", 2, 1))
        self.assertEqual(parse_move("Rw2"), Move("R", 2, 2))
        self.assertEqual(parse_move("3Rw'"), Move("R", 3, 3))
        self.assertEqual(parse_move("2R"), Move("R", 2, 1))
        self.assertEqual(parse_move("4Dw"), Move("D", 4, 1))

    def test_double_wins_over_prime(self):
        self.assertEqual(parse_move("R2'"), Move("R", 1, 2))
        self.assertEqual(parse_move("Uw2'"), Move("U", 2, 2))

    def test_human_typed_tokens(self):
        self.assertEqual(parse_move("(R"), Move("R", 1, 1))
        self.assertEqual(parse_move("U')"), Move("U", 1, 3))
        self.assertEqual(parse_move(" B’ "), Move("B", 1, 3))

    def test_unrecognized_tokens(self):
        for tok in ["", "x", "y'", "M2", "r", "E", "0R", "()"]:
            self.assertIsNone(parse_move(tok), msg=tok)

    def test_parse_sequence_skips_unknown(self):
        moves = parse_sequence("R U x R' y2 U'")
        self.assertEqual(
            moves, [Move("R"), Move("U"), Move("R", 1, 3), Move("U", 1, 3)]
        )
        self.assertEqual(parse_sequence("   "), [])


class TestNotation(unittest.TestCase):
    def test_format_move(self):
        self.assertEqual(format_move(Move("R")), "R")
        self.assertEqual(format_move(Move("L", 2, 3)), "Lw'")
        self.assertEqual(format_move(Move("F", 3, 2)), "3Fw2")

    def test_inverse_move(self):
        self.assertEqual(inverse_move("R"), "R'")
        self.assertEqual(inverse_move("R'"), "R")
        self.assertEqual(inverse_move("R2"), "R2")
        self.assertEqual(inverse_move("3Rw'"), "3Rw")
        self.assertEqual(inverse_move("x"), "")

    def test_invert_sequence(self):
        self.assertEqual(invert_sequence("R U R' U'"), "U R U' R'")
        self.assertEqual(invert_sequence("(R U2' R') Fw"), "Fw' R U2 R'")

    def test_base_face(self):
        self.assertEqual(base_face("3Rw'"), "R")
        self.assertEqual(base_face("Dw2"), "D")
        self.assertIsNone(base_face("M"))

    def test_move_validation(self):
        with self.assertRaises(ValueError):
            Move("X")
        with self.assertRaises(ValueError):
            Move("R", 0, 1)
        with self.assertRaises(ValueError):
            Move("R", 1, 4)


class TestPuzzleSize(unittest.TestCase):
    def test_from_label(self):
        self.assertIs(PuzzleSize.from_label("3x3"), PuzzleSize.THREE)
        self.assertIs(PuzzleSize.from_label("4×4"), PuzzleSize.FOUR)
        self.assertIs(PuzzleSize.from_label("7"), PuzzleSize.SEVEN)
        with self.assertRaises(ValueError):
            PuzzleSize.from_label("8x8")

    def test_table(self):
        lengths = {p.value: p.scramble_length for p in PuzzleSize}
        self.assertEqual(
            lengths,
            {"2x2": 9, "3x3": 20, "4x4": 44, "5x5": 60, "6x6": 80, "7x7": 100},
        )
        self.assertEqual(PuzzleSize.TWO.moves, ["R", "U", "F"])
        self.assertFalse(PuzzleSize.THREE.supports_wide_moves)
        self.assertTrue(PuzzleSize.FOUR.supports_wide_moves)
        self.assertEqual(PuzzleSize.SIX.size, 6)
        self.assertEqual(PuzzleSize.FIVE.display_name, "5×5")
        self.assertIs(PuzzleSize.for_size(2), PuzzleSize.TWO)
        self.assertIsNone(PuzzleSize.for_size(9))


if __name__ == "__main__":
    unittest.main()
