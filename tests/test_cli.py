import io
from unittest import mock

import pytest

from estante.books import Catalog
from estante.cli import main, run
from estante.menu import Screen, banner


def _session(text, catalog=None):
    catalog = catalog if catalog is not None else Catalog()
    out = io.StringIO()
    clears = []
    status = run(catalog, io.StringIO(text), out, lambda: clears.append(1))
    return status, out.getvalue(), catalog, len(clears)


def _stocked():
    catalog = Catalog()
    catalog.add("Dom Casmurro", "Machado", 3)
    catalog.add("Vidas Secas", "Graciliano", 0)
    return catalog


def test_exit_option_returns_one_and_says_goodbye():
    status, out, _, clears = _session("0\n")
    assert status == 1
    assert out.endswith("Saindo...")
    assert clears == 2


def test_end_of_input_returns_zero():
    status, out, _, _ = _session("")
    assert status == 0
    assert out.startswith(banner(Screen.WELCOME))


def test_register_then_list():
    status, out, catalog, _ = _session(
        "1\nDom Casmurro\nMachado\n3\nx\n2\nx\n0\n"
    )
    assert status == 1
    assert "Livro (Dom Casmurro) cadastrado com sucesso!" in out
    assert "ID: 0\nTitulo: Dom Casmurro\nAutor: Machado\nQuantidade: 3\n" in out
    assert [(b.title, b.author, b.quantity) for b in catalog] == [
        ("Dom Casmurro", "Machado", 3)
    ]
    assert banner(Screen.REGISTER) in out
    assert banner(Screen.LIST) in out


def test_list_empty_catalog():
    _, out, _, _ = _session("2\nx\n0\n")
    assert "\nEstoque Vazio\n" in out


def test_invalid_option():
    _, out, _, clears = _session("9\nx\nabc\nx\n0\n")
    assert out.count("Opcao invalida! Por favor, digite novamente") == 2
    assert clears == 6


def test_search_found_and_missing():
    _, out, _, _ = _session("3\nVidas Secas\nx\n3\nNada\nx\n0\n", _stocked())
    assert "ID: 1\nTitulo: Vidas Secas\nAutor: Graciliano\nQuantidade: 0\n" in out
    assert "Não existe livro com este titulo" in out


def test_search_empty_does_not_prompt():
    _, out, _, _ = _session("3\nx\n0\n")
    assert "Estoque Vazio" in out
    assert "Digite o nome do livro: " not in out


def test_update_book():
    catalog = _stocked()
    _, out, _, _ = _session("4\n0\nMemorias\nMachado de Assis\n7\nx\n0\n", catalog)
    assert "Livro encontrado. Dados atuais:" in out
    assert "Livro atualizado com sucesso!" in out
    book = catalog.get(0)
    assert (book.title, book.author, book.quantity) == ("Memorias", "Machado de Assis", 7)


def test_update_missing_id():
    _, out, _, _ = _session("4\n42\nx\n0\n", _stocked())
    assert "Livro com ID 42 não encontrado." in out


def test_remove_book():
    catalog = _stocked()
    _, out, _, _ = _session("5\n0\nx\n0\n", catalog)
    assert "Livro 'Dom Casmurro' removido com sucesso!" in out
    assert [b.id for b in catalog] == [1]


def test_lend_and_out_of_stock():
    catalog = _stocked()
    _, out, _, _ = _session("6\n0\nx\n6\n1\nx\n0\n", catalog)
    assert "Livro 'Dom Casmurro' emprestado com sucesso! Quantidade restante: 2" in out
    assert "Livro 'Vidas Secas' está indisponível para empréstimo (quantidade esgotada)." in out
    assert catalog.get(0).quantity == 2


def test_lend_on_empty_catalog_still_prompts():
    _, out, _, _ = _session("6\n3\nx\n0\n")
    assert "Estoque Vazio" in out
    assert "Digite o ID do livro que deseja emprestar: " in out
    assert "Livro com ID 3 não encontrado." in out


def test_give_back():
    catalog = _stocked()
    _, out, _, _ = _session("7\n1\nx\n0\n", catalog)
    assert "Livro 'Vidas Secas' devolvido com sucesso! Quantidade atual: 1" in out
    assert catalog.get(1).quantity == 1


def test_non_numeric_id_is_asked_again():
    catalog = _stocked()
    _, out, _, _ = _session("7\nabc\n0\nx\n0\n", catalog)
    assert out.count("Digite o ID do livro que deseja devolver: ") == 2
    assert catalog.get(0).quantity == 4


@mock.patch("estante.cli.subprocess.run")
def test_main_runs_on_standard_streams(fake_run, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 1
    out = capsys.readouterr().out
    assert out.startswith(banner(Screen.WELCOME))
    assert out.endswith("Saindo...")
    assert fake_run.call_count == 2
    assert all(call.args[0] in (["clear"], "cls") for call in fake_run.call_args_list)


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2