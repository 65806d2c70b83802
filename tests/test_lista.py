from biblioteca.lista import Lista
from biblioteca.material import Libro
from biblioteca.usuario import Usuario


def test_empty_list():
    lista = Lista()
    assert len(lista) == 0
    assert list(lista) == []
    assert str(lista) == "Lista vacia!\n"


def test_insertion_order():
    lista = Lista()
    lista.insertar_final("b")
    lista.insertar_inicio("a")
    lista.insertar_final("c")
    assert list(lista) == ["a", "b", "c"]
    assert len(lista) == 3


def test_str_joins_items():
    lista = Lista()
    u = Usuario("1", "Ana", "Mora", "Soto", True)
    lista.insertar_final(u)
    assert str(lista) == str(u) + "\n"


def test_str_with_material():
    lista = Lista()
    book = Libro("1", "2", "T", "A", "k", "Disponible")
    lista.insertar_final(book)
    lista.insertar_inicio(book)
    assert str(lista) == (book.mostrar() + "\n") * 2


def test_mostrar_uses_to_string():
    lista = Lista()
    u = Usuario("1", "Ana", "Mora", "Soto", False)
    lista.insertar_final(u)
    assert lista.mostrar() == u.to_string() + "\n"


def test_mostrar_empty():
    assert Lista().mostrar() == ""