"""Library users."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Usuario:
    """A registered library user."""

    id: str = "-"
    nombre: str = "-"
    apellido1: str = "-"
    apellido2: str = "-"
    estado: bool = True

    def to_string(self) -> str:
        """Return the user's details as labelled lines."""
        return (
            f"ID: {self.id}\n"
            f"Nombre: {self.nombre}\n"
            f"Apellido1: {self.apellido1}\n"
            f"Apellido2: {self.apellido2}\n"
            f"Estado: {int(bool(self.estado))}\n"
        )

    def __str__(self) -> str:
        return (
            "\tInformacion usuario: \n"
            f"Id: {self.id}\n"
            f"Nombre: {self.nombre}\n"
            f"Apellido 1: {self.apellido1}\n"
            f"Apellido 2: {self.apellido2}\n"
            f"Estado: {int(bool(self.estado))}\n"
        )