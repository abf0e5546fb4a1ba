# nxn_cube/logic/scramble.py
from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence, Union

from nxn_cube.core.types import MODIFIERS, PuzzleSize, axis_of

logger = logging.getLogger(__name__)


def _is_allowed(move: str, last: Optional[str], second_last: Optional[str]) -> bool:
    """Indica si `move` puede seguir a los dos movimientos anteriores.

    - No repetir la cara del movimiento anterior (R luego R2 o Rw).
    - No hacer tres movimientos seguidos sobre el mismo eje (R L R, U Dw U).
    """
    if last is None:
        return True
    if move[0] == last[0]:
        return False
    if second_last is not None:
        axis = axis_of(move[0])
        if axis == axis_of(last[0]) == axis_of(second_last[0]):
            return False
    return True


def _candidates(vocabulary: List[str], last: Optional[str], second_last: Optional[str]) -> List[str]:
    """Filtra el vocabulario; si no queda ningún movimiento, lo devuelve completo."""
    candidates = [m for m in vocabulary if _is_allowed(m, last, second_last)]
    if not candidates:
        logger.debug("Sin candidatos tras %s %s; se usa el vocabulario completo", second_last, last)
        return list(vocabulary)
    return candidates


def generate_scramble(
    puzzle: Union[PuzzleSize, str] = PuzzleSize.THREE,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    length: Optional[int] = None,
    vocabulary: Optional[Sequence[str]] = None,
) -> str:
    """Genera una secuencia de mezcla (scramble) aleatoria para un tamaño de cubo.

    Para cada posición se filtra el vocabulario del tamaño:
    - se descartan los movimientos sobre la misma cara que el anterior;
    - si los dos anteriores comparten eje, se descartan los de ese eje.
    Si el filtro deja la lista vacía se usa el vocabulario completo. Luego se
    elige un movimiento base y un sufijo ("", "'", "2") al azar.

    Args:
        puzzle: Tamaño del cubo (`PuzzleSize` o texto como "4x4").
        seed: Semilla opcional para obtener resultados reproducibles.
        rng: Generador aleatorio a usar; si se indica, `seed` se ignora.
        length: Largo alternativo; por defecto `puzzle.scramble_length`.
        vocabulary: Movimientos base alternativos; por defecto `puzzle.moves`.

    Returns:
        Un string con movimientos separados por espacios, por ejemplo:
        "R U' F2 L D2 ..."

    Raises:
        ValueError: Si el tamaño no es soportado, `length` es menor o igual a 0
            o `vocabulary` está vacío.
    """
    if not isinstance(puzzle, PuzzleSize):
        puzzle = PuzzleSize.from_label(puzzle)

    n = puzzle.scramble_length if length is None else length
    if n <= 0:
        raise ValueError("length debe ser mayor que 0.")

    if rng is None:
        rng = random.Random(seed)

    available = list(puzzle.moves if vocabulary is None else vocabulary)
    if not available:
        raise ValueError("vocabulary no puede estar vacío.")
    seq: List[str] = []
    last: Optional[str] = None
    second_last: Optional[str] = None

    for _ in range(n):
        candidates = _candidates(available, last, second_last)

        move = rng.choice(candidates)
        seq.append(move + rng.choice(MODIFIERS))

        second_last, last = last, move

    return " ".join(seq)
