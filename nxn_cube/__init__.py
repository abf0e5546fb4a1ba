# nxn_cube/__init__.py
from nxn_cube.core import CubeState, Move, PuzzleSize
from nxn_cube.logic.moves import parse_move, parse_sequence
from nxn_cube.logic.scramble import generate_scramble

__version__ = "0.1.0"

__all__ = [
    "CubeState",
    "Move",
    "PuzzleSize",
    "generate_scramble",
    "parse_move",
    "parse_sequence",
]
