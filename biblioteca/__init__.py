"""Library records: users, catalogued materials and books in ordered lists."""

__version__ = "0.1.0"
__all__ = ["usuario", "material", "lista", "main"]