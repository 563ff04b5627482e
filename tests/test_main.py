import asyncio

import pytest
from bs4 import BeautifulSoup

from jeopardy import main as cli
from jeopardy.errors import ConfigError
from jeopardy.main import apply_overrides, parse_args, parse_command, write_html_board
from jeopardy.session import GameSession
from jeopardy.utils.settings import load_settings


@pytest.mark.parametrize("text, expected", [
    ("s", ('restart', None)),
    (" Restart ", ('restart', None)),
    ("b", ('board', None)),
    ("h", ('help', None)),
    ("q", ('quit', None)),
    ("2-3", ('select', (2, 3))),
    ("2 3", ('select', (2, 3))),
    ("9,9", ('select', (9, 9))),
    ("-1-0", ('select', (-1, 0))),
    ("two three", ('unknown', None)),
    ("", ('unknown', None)),
])
def test_parse_command(text, expected):
    assert parse_command(text) == expected


def test_cli_overrides_settings():
    args = parse_args(['--categories', '4', '--questions', '3',
                       '--base-url', 'http://localhost:8000', '--log-level', 'debug'])
    settings = apply_overrides(load_settings(None), args)

    assert settings['board']['category_count'] == 4
    assert settings['board']['question_count'] == 3
    assert settings['api']['base_url'] == 'http://localhost:8000'
    assert settings['logging']['level'] == 'DEBUG'


def test_cli_rejects_invalid_override():
    args = parse_args(['--categories', '0'])
    with pytest.raises(ConfigError):
        apply_overrides(load_settings(None), args)


def test_write_html_board(builder, settings, tmp_path, capsys):
    output = tmp_path / "out" / "board.html"
    session = GameSession(builder, settings)

    asyncio.run(write_html_board(session, str(output)))

    soup = BeautifulSoup(output.read_text(encoding='utf-8'), 'html.parser')
    assert soup.find('button').get_text() == "Restart!"
    assert len(soup.select('thead th')) == 6
    assert len(soup.select('tbody td')) == 30
    assert "6 categories" in capsys.readouterr().out


def test_run_exits_cleanly_on_ctrl_c(monkeypatch, capsys):
    async def interrupted(argv=None):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, 'main', interrupted)

    with pytest.raises(SystemExit) as excinfo:
        cli.run()

    assert excinfo.value.code == 130
    assert "interrupted" in capsys.readouterr().out
