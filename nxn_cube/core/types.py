# nxn_cube/core/types.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Literal, Optional, Tuple

Face = Literal["U", "D", "F", "B", "L", "R"]
Color = str  # Letras: "W", "Y", "G", "B", "O", "R"

FACES: List[Face] = ["U", "D", "F", "B", "L", "R"]
COLORS_SOLVED: Dict[Face, Color] = {
    "U": "W",
    "D": "Y",
    "F": "G",
    "B": "B",
    "L": "O",
    "R": "R",
}

OPPOSITE: Dict[Face, Face] = {
    "R": "L",
    "L": "R",
    "U": "D",
    "D": "U",
    "F": "B",
    "B": "F",
}

# Pares de caras que comparten eje de giro
AXES: List[Tuple[Face, Face]] = [("R", "L"), ("U", "D"), ("F", "B")]

MODIFIERS: List[str] = ["", "'", "2"]

STANDARD_MOVES: List[str] = ["R", "L", "U", "D", "F", "B"]
WIDE_MOVES: List[str] = ["Rw", "Lw", "Uw", "Dw", "Fw", "Bw"]


def axis_of(face: Face) -> int:
    """Devuelve el índice del eje (0: R/L, 1: U/D, 2: F/B) de una cara."""
    for i, pair in enumerate(AXES):
        if face in pair:
            return i
    raise ValueError(f"Cara inválida: {face}")


@dataclass(frozen=True)
class Move:
    """Movimiento ya interpretado (independiente del texto original).

    Attributes:
        face: Cara que gira.
        layer_count: Cantidad de capas que giran juntas (1 = solo la exterior).
        quarter_turns: Cuartos de vuelta en sentido horario (1, 2 o 3).
    """

    face: Face
    layer_count: int = 1
    quarter_turns: int = 1

    def __post_init__(self) -> None:
        if self.face not in COLORS_SOLVED:
            raise ValueError(f"Cara inválida: {self.face}")
        if self.layer_count < 1:
            raise ValueError(f"layer_count debe ser >= 1: {self.layer_count}")
        if self.quarter_turns not in (1, 2, 3):
            raise ValueError(f"quarter_turns debe ser 1, 2 o 3: {self.quarter_turns}")


class PuzzleSize(Enum):
    """Tamaños de cubo soportados, con su largo de scramble y vocabulario."""

    TWO = "2x2"
    THREE = "3x3"
    FOUR = "4x4"
    FIVE = "5x5"
    SIX = "6x6"
    SEVEN = "7x7"

    @property
    def size(self) -> int:
        return int(self.value[0])

    @property
    def display_name(self) -> str:
        return self.value.replace("x", "×")

    @property
    def scramble_length(self) -> int:
        return _SCRAMBLE_LENGTH[self]

    @property
    def moves(self) -> List[str]:
        """Movimientos base legales (sin sufijo) para este tamaño."""
        if self is PuzzleSize.TWO:
            # El 2x2 solo usa R, U, F
            return ["R", "U", "F"]
        if self is PuzzleSize.THREE:
            return list(STANDARD_MOVES)
        return STANDARD_MOVES + WIDE_MOVES

    @property
    def supports_wide_moves(self) -> bool:
        return any("w" in m for m in self.moves)

    @classmethod
    def from_label(cls, label: str) -> "PuzzleSize":
        """Convierte un texto como "3x3", "3×3" o "3" en un `PuzzleSize`.

        Args:
            label: Texto ingresado por el usuario.

        Returns:
            El tamaño correspondiente.

        Raises:
            ValueError: Si el texto no corresponde a ningún tamaño soportado.
        """
        text = label.strip().lower().replace("×", "x")
        if text.isdigit():
            text = f"{text}x{text}"
        for p in cls:
            if p.value == text:
                return p
        raise ValueError(f"Tamaño de cubo no soportado: {label}")

    @classmethod
    def for_size(cls, n: int) -> Optional["PuzzleSize"]:
        for p in cls:
            if p.size == n:
                return p
        return None


_SCRAMBLE_LENGTH: Dict[PuzzleSize, int] = {
    PuzzleSize.TWO: 9,
    PuzzleSize.THREE: 20,
    PuzzleSize.FOUR: 44,
    PuzzleSize.FIVE: 60,
    PuzzleSize.SIX: 80,
    PuzzleSize.SEVEN: 100,
}
