"""Demonstration entry point."""

from __future__ import annotations

from typing import Sequence

from biblioteca.lista import Lista
from biblioteca.material import Libro, Material
from biblioteca.usuario import Usuario


def main(argv: Sequence[str] | None = None) -> int:
    """Build sample lists of users and materials and print them."""
    usuarios: Lista[Usuario] = Lista()
    usuarios.insertar_final(Usuario("119560085", "Sebastian", "Gomez", "Gomez", True))
    print(usuarios)

    materiales: Lista[Material] = Lista()
    materiales.insertar_final(
        Libro("123", "456", "El principito", "Antoine de Saint-Exupéry",
              "principito, amor, soledad", "Disponible")
    )
    print(materiales)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())