# nxn_cube/logic/algorithms.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from nxn_cube.core.cube_state import CubeState
from nxn_cube.logic.moves import invert_sequence


class AlgorithmCategory(Enum):
    F2L = "F2L"
    OLL = "OLL"
    PLL = "PLL"

    @property
    def full_name(self) -> str:
        return {
            AlgorithmCategory.F2L: "F2L - First 2 Layers",
            AlgorithmCategory.OLL: "OLL - Orientation of Last Layer",
            AlgorithmCategory.PLL: "PLL - Permutation of Last Layer",
        }[self]


@dataclass(frozen=True)
class AlgorithmCase:
    """Caso de referencia: un algoritmo y el estado "antes" que resuelve.

    El setup se deriva invirtiendo el algoritmo, de modo que
    setup + algoritmo siempre vuelve al cubo resuelto.
    """

    name: str
    algorithm: str

    @property
    def setup_moves(self) -> str:
        return invert_sequence(self.algorithm)

    def setup_state(self, size: int = 3) -> CubeState:
        """Cubo resuelto con el setup aplicado (estado a resolver)."""
        c = CubeState(size)
        c.apply_sequence(self.setup_moves)
        return c

    def solved_state(self, size: int = 3) -> CubeState:
        """Estado "setup y luego algoritmo" (debería quedar resuelto)."""
        c = self.setup_state(size)
        c.apply_sequence(self.algorithm)
        return c


@dataclass(frozen=True)
class AlgorithmSection:
    title: str
    cases: Tuple[AlgorithmCase, ...]


F2L_SECTIONS: List[AlgorithmSection] = [
    AlgorithmSection("Basic Inserts", (
        AlgorithmCase("Right Insert", "U (R U' R')"),
        AlgorithmCase("Left Insert", "U' (L' U L)"),
    )),
    # Los casos con rotación "y'" están escritos sin rotar: y' (R' U R) == (F' U F)
    AlgorithmSection("F2L Case 1", (
        AlgorithmCase("Case 1a", "U' (R U' R' U) (F' U' F)"),
        AlgorithmCase("Case 1b", "U' (R U2' R' U) (F' U' F)"),
        AlgorithmCase("Case 1c", "U (F' U F U') (F' U' F)"),
    )),
    AlgorithmSection("F2L Case 2", (
        AlgorithmCase("Case 2a", "(R U R')"),
        AlgorithmCase("Case 2b", "U' (R U R' U) (R U R')"),
        AlgorithmCase("Case 2c", "U' (R U' R' U) (R U R')"),
        AlgorithmCase("Case 2d", "(U' R U R') U2 (R U' R')"),
        AlgorithmCase("Case 2e", "U' (R U2' R') U2 (R U' R')"),
    )),
    AlgorithmSection("F2L Case 3", (
        AlgorithmCase("Case 3a", "(U F' U' F) U2' (F' U F)"),
        AlgorithmCase("Case 3b", "U (F' U2 F) U2' (F' U F)"),
        AlgorithmCase("Case 3c", "U (R U2 R') U (R U' R')"),
        AlgorithmCase("Case 3d", "U2 (R U R' U) (R U' R')"),
    )),
    AlgorithmSection("Special Cases", (
        AlgorithmCase("Incorrectly Connected", "(F' U F) U2' (R U R')"),
        AlgorithmCase("Incorrectly Connected (Alternative)", "(R U2 R') U' (R U R')"),
        AlgorithmCase("Corner in Place, Edge in U Face", "(R U' R' U) (R U' R')"),
        AlgorithmCase("Edge in Place, Corner in U Face", "(R U' R' U) (F' U F)"),
        AlgorithmCase("Edge and Corner in Place (Flipped Edge)", "(R U R' U') (R U R')"),
        AlgorithmCase("Edge and Corner in Place (Twisted Corner)", "U (R U R') U2 (R U R')"),
    )),
]

OLL_SECTIONS: List[AlgorithmSection] = [
    AlgorithmSection("All Edges Oriented Correctly", (
        AlgorithmCase("OCLL6 (Sune)", "R U R' U R U2 R'"),
        AlgorithmCase("OCLL7 (Anti-Sune)", "R U2 R' U' R U' R'"),
        AlgorithmCase("OCLL1 (H)", "(R U2 R') (U' R U R') (U' R U' R')"),
        AlgorithmCase("OCLL2 (Pi)", "R U2' R2' U' R2 U' R2' U2' R"),
        AlgorithmCase("OCLL4 (U)", "(Rw U R' U') (Rw' F R F')"),
        AlgorithmCase("OCLL5 (L)", "R' (Bw U B' U') Bw' R B"),
        AlgorithmCase("OCLL3 (Antisune+)", "R2 D (R' U2 R) D' (R' U2 R')"),
    )),
    AlgorithmSection("T-Shapes", (
        AlgorithmCase("T1 (T)", "(R U R' U') (R' F R F')"),
        AlgorithmCase("T2 (Anti-T)", "F (R U R' U') F'"),
    )),
]

PLL_SECTIONS: List[AlgorithmSection] = [
    AlgorithmSection("Permutations of Edges Only", (
        AlgorithmCase("Ub", "R2 U (R U R' U') R' U' (R' U R')"),
        AlgorithmCase("Ua", "(R U' R U) R U (R U' R' U') R2"),
        AlgorithmCase("Z", "(R' U' R U') (R U R U') (R' U R U) (R2 U' R')"),
        AlgorithmCase("H", "R2 U2 R U2 R2 U2 R2 U2 R U2 R2"),
    )),
    # Sin rotaciones: x (R' U R') == (R' F R')
    AlgorithmSection("Permutations of Corners Only", (
        AlgorithmCase("Aa", "(R' F R') B2 (R F' R') B2 R2"),
        AlgorithmCase("Ab", "R2 B2 (R F R') B2 (R F' R)"),
        AlgorithmCase("E", "(R B' R' F) (R B R' F') (R B R' F) (R B' R' F')"),
    )),
    AlgorithmSection("Permutations of Corners and Edges", (
        AlgorithmCase("T", "(R U R' U') (R' F R2 U') (R' U' R U) (R' F')"),
        AlgorithmCase("Jb", "(R U R' F') (R U R' U') (R' F R2 U') R'"),
        AlgorithmCase("Y", "F (R U' R' U') (R U R' F') (R U R' U') (R' F R F')"),
    )),
]

_SECTIONS: Dict[AlgorithmCategory, List[AlgorithmSection]] = {
    AlgorithmCategory.F2L: F2L_SECTIONS,
    AlgorithmCategory.OLL: OLL_SECTIONS,
    AlgorithmCategory.PLL: PLL_SECTIONS,
}


def get_sections(category: AlgorithmCategory) -> List[AlgorithmSection]:
    """Devuelve las secciones (en orden) de una categoría de algoritmos."""
    return list(_SECTIONS[category])


def all_cases(category: AlgorithmCategory) -> List[AlgorithmCase]:
    return [case for section in get_sections(category) for case in section.cases]
