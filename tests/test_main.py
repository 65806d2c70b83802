from biblioteca.main import main


def test_main_returns_zero(capsys):
    assert main() == 0
    capsys.readouterr()


def test_main_prints_user_and_book(capsys):
    main([])
    out = capsys.readouterr().out
    assert "\tInformacion usuario: \n" in out
    assert "Id: 119560085\n" in out
    assert "Estado: 1\n" in out
    assert "Tipo de material: Libro\n" in out
    assert "Titulo: El principito\n" in out


def test_main_order(capsys):
    main()
    out = capsys.readouterr().out
    assert out.index("Informacion usuario") < out.index("INFORMACION DEL LIBRO")
    assert "Lista vacia!" not in out