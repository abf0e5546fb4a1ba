# nxn_cube/core/cube_state.py
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Hashable, List, Literal, Mapping, Sequence, Tuple, Union

from nxn_cube.core.types import COLORS_SOLVED, FACES, OPPOSITE, Face, Move, PuzzleSize
from nxn_cube.logic.moves import parse_move

logger = logging.getLogger(__name__)

Sticker = Hashable
Grid = List[List[Sticker]]
CubeHash = Tuple[Tuple[Tuple[Sticker, ...], ...], ...]
LineKind = Literal["row", "col"]

# Ciclo del borde ("rim") que rodea a cada cara, a profundidad d.
# Cada entrada es (cara vecina, fila/columna, índice lejano?, invertir?):
#   - índice lejano: True usa N-1-d, False usa d.
#   - la entrada k recibe los valores de la entrada k+1 (la última recibe los
#     de la primera), invertidos si `invertir` es True.
RimSlot = Tuple[Face, LineKind, bool, bool]
RIM_CYCLES: Dict[Face, List[RimSlot]] = {
    "R": [("F", "col", True, False), ("D", "col", True, True),
          ("B", "col", False, True), ("U", "col", True, False)],
    "L": [("F", "col", False, False), ("U", "col", False, True),
          ("B", "col", True, True), ("D", "col", False, False)],
    "U": [("F", "row", False, False), ("R", "row", False, False),
          ("B", "row", False, False), ("L", "row", False, False)],
    "D": [("F", "row", True, False), ("L", "row", True, False),
          ("B", "row", True, False), ("R", "row", True, False)],
    "F": [("U", "row", True, True), ("L", "col", True, False),
          ("D", "row", False, True), ("R", "col", False, False)],
    "B": [("U", "row", False, False), ("R", "col", True, True),
          ("D", "row", True, False), ("L", "col", False, True)],
}


class CubeInvariantError(RuntimeError):
    """Se rompió un invariante interno del modelo (tamaño de grilla, índice)."""


class CubeState:
    """Estado de stickers de un cubo NxN.

    Representación:
        - `faces[face]` es una grilla NxN (`grid[fila][columna]`) por cada cara.
        - Caras laterales (F, R, B, L) vistas desde afuera, fila 0 arriba.
        - U vista desde arriba con la fila 0 junto a B; D vista desde abajo
          con la fila 0 junto a F (red desplegada estándar).

    El modelo nunca razona sobre colores, solo sobre posiciones: los stickers
    son valores opacos.

    Notación de movimientos (ver `nxn_cube.logic.moves`):
        - Caras: U D L R F B
        - Capas: "w" (2 capas) o prefijo numérico ("3Rw")
        - Sufijos: "" (90° horario), "'" (3 giros horarios), "2" (180°)
    """

    FACES: List[Face] = FACES
    COLORS_SOLVED: Dict[Face, str] = COLORS_SOLVED

    def __init__(self, size: int = 3) -> None:
        """Inicializa el cubo en estado resuelto.

        Args:
            size: Cantidad de stickers por lado (N >= 1).

        Raises:
            ValueError: Si `size` es menor que 1.
        """
        if size < 1:
            raise ValueError(f"El tamaño del cubo debe ser >= 1: {size}")
        self.size: int = size
        self.faces: Dict[Face, Grid] = {}
        self.reset()

    @classmethod
    def for_puzzle(cls, puzzle: Union[PuzzleSize, str]) -> "CubeState":
        """Crea un cubo resuelto para un tamaño soportado ("2x2" ... "7x7")."""
        if not isinstance(puzzle, PuzzleSize):
            puzzle = PuzzleSize.from_label(puzzle)
        return cls(puzzle.size)

    @classmethod
    def from_faces(cls, size: int, faces: Mapping[Face, Sequence[Sequence[Sticker]]]) -> "CubeState":
        """Crea un cubo a partir de grillas explícitas (por ejemplo stickers numerados).

        Args:
            size: Tamaño N del cubo.
            faces: Grilla NxN por cada una de las seis caras.

        Returns:
            Un nuevo `CubeState` con copias de las grillas.

        Raises:
            ValueError: Si faltan caras o alguna grilla no es NxN.
        """
        state = cls(size)
        if set(faces) != set(cls.FACES):
            raise ValueError(f"Se esperaban las caras {cls.FACES}, se recibió {sorted(faces)}")
        for f in cls.FACES:
            grid = [list(row) for row in faces[f]]
            if len(grid) != size or any(len(row) != size for row in grid):
                raise ValueError(f"La cara {f} no es una grilla {size}x{size}")
            state.faces[f] = grid
        return state

    @classmethod
    def from_scramble(cls, scramble: str, puzzle: Union[PuzzleSize, str]) -> "CubeState":
        """Reconstruye un estado reproduciendo un scramble guardado.

        Args:
            scramble: Secuencia en notación, separada por espacios.
            puzzle: Tamaño del cubo con el que se generó.

        Returns:
            El cubo resultante de aplicar `scramble` sobre un cubo resuelto.
        """
        state = cls.for_puzzle(puzzle)
        state.apply_sequence(scramble)
        return state

    # --------------------------
    # Public API
    # --------------------------
    def reset(self) -> None:
        """Reinicia el cubo a estado resuelto."""
        n = self.size
        self.faces = {f: [[self.COLORS_SOLVED[f]] * n for _ in range(n)] for f in self.FACES}

    def is_solved(self) -> bool:
        """Indica si el cubo está resuelto (cada cara con un solo color).

        Returns:
            True si el cubo está resuelto; False en caso contrario.
        """
        for f in self.FACES:
            grid = self.faces[f]
            first = grid[0][0]
            if any(x != first for row in grid for x in row):
                return False
        return True

    def to_hashable(self) -> CubeHash:
        """Convierte el estado del cubo a una estructura inmutable y hasheable.

        Returns:
            Tupla (por cara, en el orden de `FACES`) de filas como tuplas.
        """
        return tuple(tuple(tuple(row) for row in self.faces[f]) for f in self.FACES)

    def face(self, face: Face) -> Grid:
        """Devuelve una copia de la grilla de una cara (fila mayor)."""
        return [list(row) for row in self.faces[face]]

    def sticker_counts(self) -> Counter:
        """Cuenta cuántas veces aparece cada sticker en todo el cubo."""
        return Counter(x for f in self.FACES for row in self.faces[f] for x in row)

    def copy(self) -> "CubeState":
        c = CubeState(self.size)
        c.faces = _copy_faces(self.faces)
        return c

    def apply_sequence(self, seq: str) -> None:
        """Aplica una secuencia de movimientos separada por espacios.

        Args:
            seq: String con movimientos, por ejemplo: "R U R' U'".
        """
        for token in seq.split():
            self.apply_move(token)

    def apply_move(self, move: str) -> None:
        """Aplica un movimiento individual escrito en notación.

        Los tokens no reconocidos se ignoran (no modifican el estado).

        Args:
            move: Movimiento en notación (por ejemplo: "R", "U'", "3Rw2").
        """
        parsed = parse_move(move)
        if parsed is not None:
            self.apply(parsed)

    def apply(self, move: Move) -> None:
        """Aplica un `Move` ya interpretado.

        Por cada cuarto de vuelta: rota la grilla de la cara 90° en sentido
        horario y luego rota el borde a cada profundidad `0..layer_count-1`.

        Extensión a esa regla básica: si el movimiento abarca todas las capas
        (`layer_count == N`, rotación del cubo entero), la cara opuesta también
        gira, en sentido antihorario vista desde sí misma. Con menos capas la
        cara opuesta nunca se toca.

        El estado se actualiza de una sola vez: si el movimiento no se puede
        aplicar, el cubo queda sin cambios.

        Args:
            move: Movimiento a aplicar.
        """
        n = self.size
        if move.layer_count > n:
            logger.warning(
                "Movimiento ignorado: %d capas en un cubo %dx%d", move.layer_count, n, n
            )
            return

        new = _copy_faces(self.faces)
        for _ in range(move.quarter_turns):
            new[move.face] = _rotate_grid_cw(new[move.face])
            if move.layer_count == n:
                opp = OPPOSITE[move.face]
                for _ in range(3):
                    new[opp] = _rotate_grid_cw(new[opp])
            for depth in range(move.layer_count):
                _rotate_rim(new, move.face, depth, n)

        self.faces = new

    def to_text(self) -> str:
        """Devuelve la red desplegada del cubo como texto plano.

        Formato (cada bloque es una cara NxN):
                U
            L   F   R   B
                D
        """
        n = self.size
        width = max(len(str(x)) for f in self.FACES for row in self.faces[f] for x in row)

        def line(f: Face, r: int) -> str:
            return " ".join(str(x).ljust(width) for x in self.faces[f][r])

        pad = " " * (n * (width + 1))
        out: List[str] = []
        for r in range(n):
            out.append((pad + line("U", r)).rstrip())
        for r in range(n):
            out.append(" ".join(line(f, r) for f in ("L", "F", "R", "B")).rstrip())
        for r in range(n):
            out.append((pad + line("D", r)).rstrip())
        return "\n".join(out)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CubeState):
            return NotImplemented
        return self.size == other.size and self.faces == other.faces

    def __repr__(self) -> str:
        return f"CubeState(size={self.size}, solved={self.is_solved()})"


# --------------------------
# Core rotation logic
# --------------------------
def _copy_faces(faces: Mapping[Face, Grid]) -> Dict[Face, Grid]:
    return {f: [list(row) for row in grid] for f, grid in faces.items()}


def _rotate_grid_cw(grid: Grid) -> Grid:
    """Rota una grilla NxN 90° en sentido horario: (i, j) -> (j, N-1-i)."""
    n = len(grid)
    if any(len(row) != n for row in grid):
        raise CubeInvariantError(f"Grilla no cuadrada: {[len(row) for row in grid]}")
    return [[grid[n - 1 - c][r] for c in range(n)] for r in range(n)]


def _get_line(grid: Grid, kind: LineKind, idx: int) -> List[Sticker]:
    n = len(grid)
    if not 0 <= idx < n:
        raise CubeInvariantError(f"Índice fuera de rango: {kind} {idx} (N={n})")
    if kind == "row":
        return list(grid[idx])
    return [row[idx] for row in grid]


def _set_line(grid: Grid, kind: LineKind, idx: int, values: List[Sticker]) -> None:
    n = len(grid)
    if len(values) != n or not 0 <= idx < n:
        raise CubeInvariantError(f"Línea inválida: {kind} {idx} con {len(values)} valores (N={n})")
    if kind == "row":
        grid[idx] = list(values)
    else:
        for i in range(n):
            grid[i][idx] = values[i]


def _rotate_rim(faces: Dict[Face, Grid], face: Face, depth: int, n: int) -> None:
    """Rota el borde de `face` a la profundidad `depth` (0 = capa exterior)."""
    cycle = RIM_CYCLES[face]
    idx = [n - 1 - depth if far else depth for _, _, far, _ in cycle]
    lines = [_get_line(faces[f], kind, i) for (f, kind, _, _), i in zip(cycle, idx)]
    for k, (f, kind, _, rev) in enumerate(cycle):
        values = lines[(k + 1) % len(cycle)]
        if rev:
            values = values[::-1]
        _set_line(faces[f], kind, idx[k], values)
