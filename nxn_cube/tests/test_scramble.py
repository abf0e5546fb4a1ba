import random
import unittest

from nxn_cube.core import CubeState, PuzzleSize
from nxn_cube.core.types import axis_of
from nxn_cube.logic.moves import parse_move
from nxn_cube.logic.scramble import generate_scramble


class TestScramble(unittest.TestCase):
    def test_length_matches_table(self):
        for puzzle in PuzzleSize:
            for seed in range(5):
                tokens = generate_scramble(puzzle, seed=seed).split()
                self.assertEqual(len(tokens), puzzle.scramble_length, msg=puzzle.value)

    def test_no_repeat_and_no_triple_axis(self):
        for puzzle in PuzzleSize:
            for seed in range(30):
                tokens = generate_scramble(puzzle, seed=seed).split()
                faces = [t[0] for t in tokens]
                for a, b in zip(faces, faces[1:]):
                    self.assertNotEqual(a, b, msg=" ".join(tokens))
                for a, b, c in zip(faces, faces[1:], faces[2:]):
                    self.assertFalse(
                        axis_of(a) == axis_of(b) == axis_of(c), msg=" ".join(tokens)
                    )

    def test_2x2_only_uses_R_U_F(self):
        for seed in range(50):
            tokens = generate_scramble(PuzzleSize.TWO, seed=seed).split()
            self.assertTrue(all(t[0] in "RUF" for t in tokens), msg=" ".join(tokens))

    def test_3x3_has_no_wide_moves(self):
        for seed in range(20):
            self.assertNotIn("w", generate_scramble("3x3", seed=seed))

    def test_tokens_are_parseable(self):
        for puzzle in PuzzleSize:
            for tok in generate_scramble(puzzle, seed=7).split():
                m = parse_move(tok)
                self.assertIsNotNone(m, msg=tok)
                self.assertLessEqual(m.layer_count, puzzle.size)

    def test_big_cubes_use_wide_moves(self):
        text = " ".join(generate_scramble(PuzzleSize.SEVEN, seed=s) for s in range(5))
        self.assertIn("w", text)

    def test_scramble_is_deterministic_for_fixed_seed(self):
        s1 = generate_scramble(PuzzleSize.FOUR, seed=123)
        s2 = generate_scramble(PuzzleSize.FOUR, seed=123)
        self.assertEqual(s1, s2)
        s3 = generate_scramble(PuzzleSize.FOUR, rng=random.Random(123))
        self.assertEqual(s1, s3)

    def test_length_override(self):
        self.assertEqual(len(generate_scramble("3x3", seed=1, length=5).split()), 5)
        with self.assertRaises(ValueError):
            generate_scramble("3x3", length=0)

    def test_empty_pool_falls_back_to_full_vocabulary(self):
        with self.assertLogs("nxn_cube.logic.scramble", level="DEBUG") as logs:
            tokens = generate_scramble("3x3", seed=5, vocabulary=["R"]).split()
        self.assertEqual(len(tokens), PuzzleSize.THREE.scramble_length)
        self.assertTrue(all(t[0] == "R" for t in tokens))
        self.assertTrue(any("vocabulario completo" in line for line in logs.output))

    def test_custom_vocabulary_respects_filters(self):
        tokens = generate_scramble("4x4", seed=2, vocabulary=["R", "L", "U"]).split()
        faces = [t[0] for t in tokens]
        for a, b in zip(faces, faces[1:]):
            self.assertNotEqual(a, b)
        with self.assertRaises(ValueError):
            generate_scramble("3x3", vocabulary=[])

    def test_unknown_puzzle(self):
        with self.assertRaises(ValueError):
            generate_scramble("9x9")

    def test_scramble_preserves_colors(self):
        for puzzle in PuzzleSize:
            c = CubeState.from_scramble(generate_scramble(puzzle, seed=3), puzzle)
            counts = c.sticker_counts()
            self.assertEqual(set(counts.values()), {puzzle.size ** 2})


if __name__ == "__main__":
    unittest.main()
