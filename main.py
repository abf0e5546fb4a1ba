# main.py
from __future__ import annotations

import sys
from typing import NoReturn

from nxn_cube.app.cli import main as cli_main


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Delega en la línea de comandos de `nxn_cube` (scramble, apply, algorithms)
    y finaliza el proceso con su código de salida.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
