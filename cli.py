"""
cli.py
=================

Ejecuta un fichero de comandos contra el simulador de parking e imprime la
salida de cada comando.

Uso:
  python cli.py commands.txt
"""

from __future__ import annotations

import sys
from typing import List

from parking_sim.core.interpreter import CommandInterpreter


def main(argv: List[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("Usage: parking-lot <filename>")
        return 1
    try:
        # bytes no UTF-8 se sustituyen por U+FFFD
        fh = open(args[0], encoding="utf-8", errors="replace")
    except OSError as e:
        print(f"Error opening file: {e}")
        return 1
    interpreter = CommandInterpreter()
    with fh:
        try:
            for out in interpreter.run(fh):
                print(out)
        except OSError as e:
            print(f"Error reading file: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
