# nxn_cube/core/__init__.py
from nxn_cube.core.cube_state import CubeInvariantError, CubeState
from nxn_cube.core.types import Face, Move, PuzzleSize

__all__ = ["CubeInvariantError", "CubeState", "Face", "Move", "PuzzleSize"]
