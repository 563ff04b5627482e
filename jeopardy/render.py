"""
Board presentation.

Renders a board as an HTML table (one header cell per category, one body row
per clue index) or as a plain-text grid for the terminal. Cells are addressed
by ``"{category_index}-{clue_index}"``, the same coordinates the reveal state
machine uses.
"""

from typing import List, Optional

from bs4 import BeautifulSoup # type: ignore

from .constants import (
    ANSWER_CELL_CLASSES,
    EMPTY_CELL_CLASS,
    LOADING_ICON_CLASS,
    PLACEHOLDER_GLYPH,
    PLACEHOLDER_ICON_CLASS
)
from .models import Board, Clue, RevealState
from .utils.text_processor import TextProcessor


def cell_id(category_index: int, clue_index: int) -> str:
    return f"{category_index}-{clue_index}"


def render_cell(clue: Clue) -> str:
    """Text a cell displays for the clue's current reveal state."""
    if clue.showing is RevealState.QUESTION:
        return clue.question
    if clue.showing is RevealState.ANSWER:
        return clue.answer
    return PLACEHOLDER_GLYPH


def _build_table(soup: BeautifulSoup, board: Board):
    table = soup.new_tag('table', id='jeopardy')
    thead = soup.new_tag('thead')
    tbody = soup.new_tag('tbody')
    table.append(thead)
    table.append(tbody)

    header_row = soup.new_tag('tr')
    for k, category in enumerate(board):
        th = soup.new_tag('th', id=f"cat-{k}")
        th.string = TextProcessor.to_title_case(category.title)
        header_row.append(th)
    thead.append(header_row)

    for j in range(board.row_count):
        row = soup.new_tag('tr')
        for k in range(len(board)):
            clue = board.get_clue(k, j)
            td = soup.new_tag('td', id=cell_id(k, j))

            if clue is None:
                td['class'] = EMPTY_CELL_CLASS
            elif clue.showing is RevealState.HIDDEN:
                td.append(soup.new_tag('i', attrs={'class': PLACEHOLDER_ICON_CLASS}))
            else:
                td.string = render_cell(clue)
                if clue.showing is RevealState.ANSWER:
                    td['class'] = ' '.join(ANSWER_CELL_CLASSES)

            row.append(td)
        tbody.append(row)

    return table


def render_board_html(board: Board) -> str:
    """Render the board as an HTML ``<table>`` fragment."""
    soup = BeautifulSoup('', 'html.parser')
    soup.append(_build_table(soup, board))
    return str(soup)


def render_page_html(board: Optional[Board], button_label: str,
                     button_enabled: bool = True, loading: bool = False) -> str:
    """
    Render a standalone page: the action button and the table container.

    While loading, the container holds a spinner instead of the board.
    """
    soup = BeautifulSoup(
        '<!DOCTYPE html><html><head><meta charset="utf-8"><title>Jeopardy!</title></head>'
        '<body></body></html>',
        'html.parser'
    )

    button = soup.new_tag('button', id='start')
    button.string = button_label
    if not button_enabled:
        button['class'] = 'not-allowed'
        button['disabled'] = 'disabled'
    soup.body.append(button)

    container = soup.new_tag('div', id='table-container')
    if loading:
        container.append(soup.new_tag('i', attrs={'class': LOADING_ICON_CLASS}))
    elif board is not None:
        container.append(_build_table(soup, board))
    soup.body.append(container)

    return str(soup)


def render_board_text(board: Board, width: int = 22) -> str:
    """
    Render the board as a fixed-width text grid.

    Hidden cells show their coordinate and the placeholder glyph; answered
    cells are wrapped in brackets.
    """
    if not len(board):
        return "(empty board)"

    def fit(text: str) -> str:
        return f"{TextProcessor.truncate_text(text, width):<{width}}"

    lines: List[str] = []
    lines.append(" | ".join(fit(TextProcessor.to_title_case(c.title)) for c in board))
    lines.append("-+-".join("-" * width for _ in board))

    for j in range(board.row_count):
        cells = []
        for k in range(len(board)):
            clue = board.get_clue(k, j)
            if clue is None:
                text = ""
            elif clue.showing is RevealState.HIDDEN:
                text = f"{cell_id(k, j)} {PLACEHOLDER_GLYPH}"
            elif clue.showing is RevealState.ANSWER:
                text = f"[{clue.answer}]"
            else:
                text = clue.question
            cells.append(fit(text))
        lines.append(" | ".join(cells))

    return "\n".join(lines)
