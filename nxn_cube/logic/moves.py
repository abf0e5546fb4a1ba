# nxn_cube/logic/moves.py
from __future__ import annotations

import logging
from typing import List, Optional, Set

from nxn_cube.core.types import Move

logger = logging.getLogger(__name__)

VALID_FACES: Set[str] = {"U", "D", "L", "R", "F", "B"}
SUFFIX_BY_TURNS = {1: "", 2: "2", 3: "'"}


def normalize_token(tok: str) -> str:
    """Limpia un token de movimiento antes de interpretarlo.

    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Quita paréntesis de agrupación, por ejemplo "(R" o "U')".

    Args:
        tok: Token tal como fue escrito.

    Returns:
        Token limpio (puede ser un string vacío).
    """
    return tok.strip().replace("’", "'").replace("‘", "'").strip("()")


def parse_move(tok: str) -> Optional[Move]:
    """Interpreta un token de notación y devuelve el `Move` correspondiente.

    Gramática aceptada: ``[dígito] cara ["w"] ["2" | "'"]``.

    Reglas:
    - Un dígito inicial es la cantidad explícita de capas (ej: "3Rw'").
    - La cara es la primera letra R, L, U, D, F o B que aparezca.
    - Sin prefijo numérico, "w" significa 2 capas; sin "w", 1 capa.
    - "2" gana sobre "'" (un giro de 180° es su propio inverso: "R2'" == "R2").

    Los tokens no reconocidos (por ejemplo rotaciones "x", "y" o slices "M")
    no lanzan excepción: retornan None y se ignoran.

    Args:
        tok: Token de movimiento, por ejemplo "R", "Rw2", "3Rw'", "U2".

    Returns:
        El movimiento interpretado, o None si el token no es reconocido.
    """
    tok = normalize_token(tok)
    if not tok:
        return None

    layer_count: Optional[int] = None
    rest = tok
    if rest[0].isdigit():
        layer_count = int(rest[0])
        rest = rest[1:]

    face = next((ch for ch in rest if ch in VALID_FACES), None)
    if face is None or layer_count == 0:
        logger.debug("Token ignorado: %r", tok)
        return None

    if layer_count is None:
        layer_count = 2 if "w" in rest else 1

    if "2" in rest:
        turns = 2
    elif "'" in rest:
        turns = 3
    else:
        turns = 1

    return Move(face=face, layer_count=layer_count, quarter_turns=turns)


def parse_sequence(text: str) -> List[Move]:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    La entrada separa movimientos por espacios. Por ejemplo:
        "R U R' U'" -> [Move("R"), Move("U"), Move("R", 1, 3), Move("U", 1, 3)]

    Los tokens no reconocidos se descartan.

    Args:
        text: Secuencia de movimientos escrita como string.

    Returns:
        Lista de movimientos, en el mismo orden.
    """
    out: List[Move] = []
    for t in text.split():
        m = parse_move(t)
        if m is not None:
            out.append(m)
    return out


def format_move(move: Move) -> str:
    """Escribe un `Move` en notación canónica ("R", "Rw'", "3Rw2")."""
    if move.layer_count == 1:
        base = move.face
    elif move.layer_count == 2:
        base = move.face + "w"
    else:
        base = f"{move.layer_count}{move.face}w"
    return base + SUFFIX_BY_TURNS[move.quarter_turns]


def base_face(tok: str) -> Optional[str]:
    """Devuelve la letra de cara de un token (ignorando capas y sufijos)."""
    m = parse_move(tok)
    return m.face if m is not None else None


def inverse_move(m: str) -> str:
    """Devuelve el movimiento inverso de un token.

    Ejemplos:
        - "R"    -> "R'"
        - "Rw'"  -> "Rw"
        - "3Rw2" -> "3Rw2"

    Args:
        m: Movimiento en notación, por ejemplo: "R", "U'", "F2".

    Returns:
        El movimiento inverso en notación canónica. Si `m` no es reconocido,
        retorna "".
    """
    move = parse_move(m)
    if move is None:
        return ""
    inv = Move(move.face, move.layer_count, 4 - move.quarter_turns)
    return format_move(inv)


def invert_sequence(text: str) -> str:
    """Devuelve la secuencia inversa (orden invertido y cada movimiento invertido).

    Ejemplo:
        "R U R' U'" -> "U R U' R'"
    """
    return " ".join(format_move(Move(m.face, m.layer_count, 4 - m.quarter_turns))
                    for m in reversed(parse_sequence(text)))
