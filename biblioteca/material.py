"""Library materials."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Material(ABC):
    """A catalogued item of the library."""

    numero_clasificacion: str = "-"
    numero_catalogo: str = "-"
    titulo: str = "-"
    autor: str = "-"
    palabras_clave: str = "-"
    estado_material: str = "-"

    @abstractmethod
    def tipo_material(self) -> str:
        """Return the kind of material."""

    @abstractmethod
    def mostrar(self) -> str:
        """Return a printable description of the material."""

    def __str__(self) -> str:
        return self.mostrar()


@dataclass
class Libro(Material):
    """A book."""

    def tipo_material(self) -> str:
        return "Libro"

    def mostrar(self) -> str:
        return (
            "--------- INFORMACION DEL LIBRO ---------\n"
            f"Tipo de material: {self.tipo_material()}\n"
            f"Numero de clasificacion: {self.numero_clasificacion}\n"
            f"Numero de catalogo: {self.numero_catalogo}\n"
            f"Titulo: {self.titulo}\n"
            f"Autor: {self.autor}\n"
            f"Palabras clave: {self.palabras_clave}\n"
            f"Estado del material: {self.estado_material}\n"
        )