# nxn_cube/app/cli.py
from __future__ import annotations

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence

from nxn_cube.core.cube_state import CubeState
from nxn_cube.core.types import PuzzleSize
from nxn_cube.logic.algorithms import AlgorithmCategory, get_sections
from nxn_cube.logic.scramble import generate_scramble

logger = logging.getLogger(__name__)


def _puzzle(label: str) -> PuzzleSize:
    try:
        return PuzzleSize.from_label(label)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser de argumentos de la línea de comandos."""
    parser = argparse.ArgumentParser(
        prog="nxn-cube",
        description="Scrambles y estados de cubos NxN (2x2 a 7x7).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log en nivel DEBUG")
    sub = parser.add_subparsers(dest="command", required=True)

    p_scr = sub.add_parser("scramble", help="Genera scrambles")
    p_scr.add_argument("puzzle", nargs="?", type=_puzzle, default=PuzzleSize.THREE)
    p_scr.add_argument("--seed", type=int, default=None)
    p_scr.add_argument("--count", type=int, default=1)

    p_app = sub.add_parser("apply", help="Aplica una secuencia sobre un cubo resuelto")
    p_app.add_argument("puzzle", type=_puzzle)
    p_app.add_argument("sequence", help="Movimientos separados por espacios, ej: \"R U R' U'\"")

    p_alg = sub.add_parser("algorithms", help="Lista los algoritmos de referencia")
    p_alg.add_argument(
        "category",
        nargs="?",
        choices=[c.value for c in AlgorithmCategory],
        default=None,
    )
    return parser


def _cmd_scramble(args: argparse.Namespace) -> List[str]:
    if args.count < 1:
        raise ValueError("--count debe ser mayor que 0.")
    rng = random.Random(args.seed)
    return [generate_scramble(args.puzzle, rng=rng) for _ in range(args.count)]


def _cmd_apply(args: argparse.Namespace) -> List[str]:
    state = CubeState.from_scramble(args.sequence, args.puzzle)
    status = "resuelto" if state.is_solved() else "mezclado"
    return [state.to_text(), "", f"Estado: {status}"]


def _cmd_algorithms(args: argparse.Namespace) -> List[str]:
    categories = list(AlgorithmCategory) if args.category is None else [AlgorithmCategory(args.category)]
    out: List[str] = []
    for category in categories:
        out.append(f"== {category.full_name}")
        for section in get_sections(category):
            out.append(f"-- {section.title}")
            for case in section.cases:
                out.append(f"{case.name}: {case.algorithm}  (setup: {case.setup_moves})")
    return out


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Punto de entrada de la línea de comandos.

    Args:
        argv: Argumentos (sin el nombre del programa). Por defecto `sys.argv[1:]`.

    Returns:
        Código de salida (0 si todo salió bien).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    handlers = {
        "scramble": _cmd_scramble,
        "apply": _cmd_apply,
        "algorithms": _cmd_algorithms,
    }
    logger.debug("Comando: %s", args.command)
    try:
        lines = handlers[args.command](args)
    except ValueError as e:
        parser.error(str(e))

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
