"""Interactive text front end for the book catalog."""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
from typing import Callable, TextIO

from estante.books import (
    BookNotFoundError,
    Catalog,
    EmptyCatalogError,
    OutOfStockError,
)
from estante.menu import Screen, back_to_menu_prompt, banner, menu_options

EMPTY = "\nEstoque Vazio\n"
EXIT_STATUS = 1


def clear_screen() -> None:
    """Clear the terminal using the platform's own command."""
    try:
        if os.name == "nt":
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


class _Input:
    """Reads answers line by line, skipping blank lines like the prompts expect."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def _next_line(self) -> str:
        while True:
            line = self._stream.readline()
            if not line:
                raise EOFError
            if line.strip():
                return line.rstrip("\r\n")

    def text(self) -> str:
        return self._next_line().lstrip()

    def number(self) -> int | None:
        try:
            return int(self._next_line().strip())
        except ValueError:
            return None

    def key(self) -> None:
        self._next_line()


class _Session:
    def __init__(self, catalog: Catalog, stdin: TextIO, stdout: TextIO) -> None:
        self.catalog = catalog
        self.answers = _Input(stdin)
        self.out = stdout
        self.actions: dict[int, tuple[Screen, Callable[[], None]]] = {
            1: (Screen.REGISTER, self.register),
            2: (Screen.LIST, self.list_books),
            3: (Screen.SEARCH, self.search),
            4: (Screen.UPDATE, self.update),
            5: (Screen.REMOVE, self.remove),
            6: (Screen.LEND, self.lend),
            7: (Screen.RETURN, self.give_back),
        }

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def ask_text(self, prompt: str) -> str:
        self.write(prompt)
        return self.answers.text()

    def ask_int(self, prompt: str) -> int:
        while True:
            self.write(prompt)
            value = self.answers.number()
            if value is not None:
                return value

    def not_found(self, book_id: int) -> None:
        self.write(f"\nLivro com ID {book_id} não encontrado.\n")

    def show(self, book) -> None:
        self.write(
            f"ID: {book.id}\nTitulo: {book.title}\n"
            f"Autor: {book.author}\nQuantidade: {book.quantity}\n"
        )

    def register(self) -> None:
        title = self.ask_text("Digite o nome do livro: ")
        author = self.ask_text("Digite o nome do autor: ")
        quantity = self.ask_int("Digite a quantidade de livros: ")
        book = self.catalog.add(title, author, quantity)
        self.write(f"\nLivro ({book.title}) cadastrado com sucesso!\n")

    def list_books(self) -> None:
        if not len(self.catalog):
            self.write(EMPTY)
            return
        for book in self.catalog:
            self.show(book)

    def search(self) -> None:
        if not len(self.catalog):
            self.write(EMPTY)
            return
        title = self.ask_text("Digite o nome do livro: ")
        try:
            self.show(self.catalog.find_by_title(title))
        except BookNotFoundError:
            self.write("\nNão existe livro com este titulo\n")

    def update(self) -> None:
        if not len(self.catalog):
            self.write(EMPTY)
            return
        book_id = self.ask_int("Digite o ID do livro que deseja atualizar: ")
        try:
            book = self.catalog.get(book_id)
        except BookNotFoundError:
            self.not_found(book_id)
            return
        self.write("\nLivro encontrado. Dados atuais:\n")
        self.write(
            f"Titulo: {book.title}\nAutor: {book.author}\nQuantidade: {book.quantity}\n"
        )
        title = self.ask_text("\nDigite o novo titulo: ")
        author = self.ask_text("Digite o novo autor: ")
        quantity = self.ask_int("Digite a nova quantidade: ")
        self.catalog.update(book_id, title, author, quantity)
        self.write("\nLivro atualizado com sucesso!\n")

    def remove(self) -> None:
        if not len(self.catalog):
            self.write(EMPTY)
            return
        book_id = self.ask_int("Digite o ID do livro que deseja remover: ")
        try:
            book = self.catalog.remove(book_id)
        except BookNotFoundError:
            self.not_found(book_id)
            return
        self.write(f"\nLivro '{book.title}' removido com sucesso!\n")

    def lend(self) -> None:
        if not len(self.catalog):
            self.write(EMPTY)
        book_id = self.ask_int("Digite o ID do livro que deseja emprestar: ")
        try:
            book = self.catalog.lend(book_id)
        except BookNotFoundError:
            self.not_found(book_id)
        except OutOfStockError as error:
            self.write(
                f"\nLivro '{error.book.title}' está indisponível para empréstimo "
                "(quantidade esgotada).\n"
            )
        else:
            self.write(
                f"\nLivro '{book.title}' emprestado com sucesso! "
                f"Quantidade restante: {book.quantity}\n"
            )

    def give_back(self) -> None:
        if not len(self.catalog):
            self.write(EMPTY)
        book_id = self.ask_int("Digite o ID do livro que deseja devolver: ")
        try:
            book = self.catalog.give_back(book_id)
        except BookNotFoundError:
            self.not_found(book_id)
        else:
            self.write(
                f"\nLivro '{book.title}' devolvido com sucesso! "
                f"Quantidade atual: {book.quantity}\n"
            )

    def loop(self, clear: Callable[[], None]) -> int:
        while True:
            clear()
            self.write(banner(Screen.WELCOME))
            self.write(menu_options())
            choice = self.answers.number()
            clear()
            if choice == 0:
                self.write("Saindo...")
                return EXIT_STATUS
            action = self.actions.get(choice) if choice is not None else None
            if action is None:
                self.write("\nOpcao invalida! Por favor, digite novamente\n")
            else:
                screen, handler = action
                self.write(banner(screen))
                try:
                    handler()
                except EmptyCatalogError:
                    self.write(EMPTY)
            self.write(back_to_menu_prompt())
            self.answers.key()


def run(
    catalog: Catalog,
    stdin: TextIO,
    stdout: TextIO,
    clear: Callable[[], None] = clear_screen,
) -> int:
    """Drive the menu until the user leaves; return the exit status.

    Choosing 0 returns 1, as the program always has; running out of
    input ends the session with 0.
    """
    session = _Session(catalog, stdin, stdout)
    try:
        return session.loop(clear)
    except EOFError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive catalog on the terminal."""
    parser = argparse.ArgumentParser(
        prog="estante", description="Keep a small library's books in stock."
    )
    parser.parse_args(argv)
    return run(Catalog(), sys.stdin, sys.stdout, clear_screen)


if __name__ == "__main__":
    raise SystemExit(main())