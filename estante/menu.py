"""Screen banners and menu prompts for the interactive front end."""

from __future__ import annotations

from enum import Enum


class Screen(Enum):
    """The screens that open with a banner."""

    WELCOME = "welcome"
    REGISTER = "register"
    LIST = "list"
    SEARCH = "search"
    UPDATE = "update"
    REMOVE = "remove"
    LEND = "lend"
    RETURN = "return"


_GLYPH_HEIGHT = 6
_WORD_GAP = "  "

# Block-letter font: six rows per letter, drawn on a light-shade background.
_GLYPHS: dict[str, tuple[str, ...]] = {
    "A": ("░█████╗░", "██╔══██╗", "███████║", "██╔══██║", "██║░░██║", "╚═╝░░╚═╝"),
    "B": ("██████╗░", "██╔══██╗", "██████╦╝", "██╔══██╗", "██████╦╝", "╚═════╝░"),
    "C": ("░█████╗░", "██╔══██╗", "██║░░╚═╝", "██║░░██╗", "╚█████╔╝", "░╚════╝░"),
    "D": ("██████╗░", "██╔══██╗", "██║░░██║", "██║░░██║", "██████╔╝", "╚═════╝░"),
    "E": ("███████╗", "██╔════╝", "█████╗░░", "██╔══╝░░", "███████╗", "╚══════╝"),
    "I": ("██╗", "██║", "██║", "██║", "██║", "╚═╝"),
    "L": ("██╗░░░░░", "██║░░░░░", "██║░░░░░", "██║░░░░░", "███████╗", "╚══════╝"),
    "M": (
        "███╗░░░███╗",
        "████╗░████║",
        "██╔████╔██║",
        "██║╚██╔╝██║",
        "██║░╚═╝░██║",
        "╚═╝░░░░░╚═╝",
    ),
    "N": ("███╗░░██╗", "████╗░██║", "██╔██╗██║", "██║╚████║", "██║░╚███║", "╚═╝░░╚══╝"),
    "O": ("░█████╗░", "██╔══██╗", "██║░░██║", "██║░░██║", "╚█████╔╝", "░╚════╝░"),
    "P": ("██████╗░", "██╔══██╗", "██████╔╝", "██╔═══╝░", "██║░░░░░", "╚═╝░░░░░"),
    "R": ("██████╗░", "██╔══██╗", "██████╔╝", "██╔══██╗", "██║░░██║", "╚═╝░░╚═╝"),
    "S": ("░██████╗", "██╔════╝", "╚█████╗░", "░╚═══██╗", "██████╔╝", "╚═════╝░"),
    "T": ("████████╗", "╚══██╔══╝", "░░░██║░░░", "░░░██║░░░", "░░░██║░░░", "░░░╚═╝░░░"),
    "U": ("██╗░░░██╗", "██║░░░██║", "██║░░░██║", "██║░░░██║", "╚██████╔╝", "░╚═════╝░"),
    "V": ("██╗░░░██╗", "██║░░░██║", "╚██╗░██╔╝", "░╚████╔╝░", "░░╚██╔╝░░", "░░░╚═╝░░░"),
    "Z": ("███████╗", "╚════██║", "░░███╔═╝", "██╔══╝░░", "███████╗", "╚══════╝"),
}

# Each screen's title, one phrase per block of rows.
_TITLES: dict[Screen, tuple[str, ...]] = {
    Screen.WELCOME: ("BEM VINDO",),
    Screen.REGISTER: ("CADASTRO DE", "LIVRO"),
    Screen.LIST: ("LISTAR LIVROS",),
    Screen.SEARCH: ("BUSCAR LIVRO", "POR NOME"),
    Screen.UPDATE: ("ATUALIZAR LIVRO",),
    Screen.REMOVE: ("REMOVER LIVRO",),
    Screen.LEND: ("EMPRESTAR LIVRO",),
    Screen.RETURN: ("DEVOLVER LIVRO",),
}

_MENU_OPTIONS = (
    "Digite 1 para cadastrar um livro",
    "Digite 2 para listar todos os livros",
    "Digite 3 para buscar livro por titulo",
    "Digite 4 para atualizar dados de um livro",
    "Digite 5 remover livro",
    "Digite 6 para efetuar o emprestimo de um livro",
    "Digite 7 para efetuar a devolucao de um livro livro",
    "Digite 0 para sair do programa",
)


def _render_phrase(phrase: str) -> list[str]:
    words = phrase.split()
    return [
        _WORD_GAP.join("".join(_GLYPHS[letter][row] for letter in word) for word in words)
        for row in range(_GLYPH_HEIGHT)
    ]


def _banner_rows(screen: Screen) -> list[str]:
    rows: list[str] = []
    for position, phrase in enumerate(_TITLES[screen]):
        if position:
            rows.append("")
        rows.extend(_render_phrase(phrase))
    return rows


def banner(screen: Screen) -> str:
    """Return the banner text shown at the top of a screen."""
    rows = _banner_rows(Screen(screen))
    return "\n" + "".join(f"{row}\n" for row in rows) + "\n"


def menu_options() -> str:
    """Return the main menu text, ending with the choice prompt."""
    return "\n".join(_MENU_OPTIONS) + "\n\nDigite a sua opcao: "


def back_to_menu_prompt() -> str:
    """Return the prompt shown before going back to the main menu."""
    return "\nDigite qualquer tecla para voltar ao menu: "