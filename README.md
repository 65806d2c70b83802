# biblioteca

A small set of classes for library records. It covers users, catalogued
materials and books. These are kept in ordered lists that print as plain text
reports.

## Installation

```
pip install .
```

## Command line

```
biblioteca
```

This runs a short demonstration. It creates one user and one book, puts each
one in its own list, prints both lists, and exits with status 0.

## Use from Python

```python
from biblioteca.usuario import Usuario
from biblioteca.material import Libro
from biblioteca.lista import Lista

usuarios = Lista()
usuarios.insertar_final(Usuario("1", "Ana", "Perez", "Mora", True))
print(usuarios)

libros = Lista()
libros.insertar_final(
    Libro("123", "456", "El principito", "Antoine de Saint-Exupery",
          "principito, amor, soledad", "Disponible")
)
print(libros)
```

### `biblioteca.usuario`

`Usuario` is a dataclass. It holds:

- `id`
- `nombre`
- `apellido1`
- `apellido2`
- `estado`

Every text field defaults to `"-"`, and `estado` defaults to `True`.

There are two text forms:

- `str(usuario)` begins with the header `Informacion usuario:` and then gives
  `Id`, `Nombre`, `Apellido 1`, `Apellido 2` and `Estado`.
- `usuario.to_string()` gives the lines `ID`, `Nombre`, `Apellido1`,
  `Apellido2` and `Estado`.

In both forms `Estado` is written as `1` or `0`.

### `biblioteca.material`

`Material` is an abstract dataclass for catalogued items. Its fields are:

- `numero_clasificacion`
- `numero_catalogo`
- `titulo`
- `autor`
- `palabras_clave`
- `estado_material`

Each field defaults to `"-"`. Subclasses provide `tipo_material()` and
`mostrar()`, and `str()` returns `mostrar()`.

`Libro` is the book type of material:

- `tipo_material()` returns `"Libro"`.
- `mostrar()` returns an information sheet. It begins with the header
  `INFORMACION DEL LIBRO` and then gives every field on a line of its own.

### `biblioteca.lista`

`Lista` is an ordered collection:

- `insertar_inicio(dato)` adds an item at the front.
- `insertar_final(dato)` adds an item at the end.
- `len()` and iteration are supported.
- `str()` gives every item's `str()` followed by a newline, or `Lista vacia!`
  when the list is empty.
- `mostrar()` gives each item's `to_string()` when the item has one, and its
  `str()` when it does not.

### `biblioteca.main`

`main(argv=None)` runs the demonstration that the `biblioteca` command starts.

## What it does not do

The package has no interactive menu. It also has no loans, no search, and no
storage: records live only in memory for as long as the program runs. The only
command is the fixed demonstration above.

## Tests

```
pip install .[test]
pytest
```