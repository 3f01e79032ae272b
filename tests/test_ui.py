import pytest

from game.board import Board
from game.keys import type_guess
from ui.cli import gameloop, handle_line
from ui.colors import contrast_color, display_color, swatch_svg


def test_display_color():
    assert display_color("A1B2C3") == "#a1b2c3"
    assert display_color("#000000") == "#000000"


@pytest.mark.parametrize(
    "color, expected",
    [
        ("#ffffff", "#000000"),
        ("#000000", "#ffffff"),
        ("ffff00", "#000000"),
        ("#0000ff", "#ffffff"),
    ],
)
def test_contrast_color(color, expected):
    assert contrast_color(color) == expected


def test_contrast_color_rejects_short_colors():
    with pytest.raises(ValueError):
        contrast_color("#fff")


def test_swatch_svg():
    svg = swatch_svg("#a1b2c3", size=32)
    assert 'fill="#a1b2c3"' in svg
    assert 'fill="#000000"' in svg
    assert 'width="32"' in svg


def test_handle_line_types_lowercased_digits():
    board = Board(secret="000000")
    state = handle_line(board, "A b1")
    assert state.rows[0][:3] == ("a", "b", "1")


def test_handle_line_commands():
    board = Board(secret="000000")
    handle_line(board, "123")
    assert handle_line(board, "back").cursor == (0, 2)
    assert handle_line(board, "left").cursor == (0, 1)
    assert handle_line(board, "right").cursor == (0, 2)
    handle_line(board, "3456")
    assert handle_line(board, "").cursor == (1, 0)


def test_gameloop_plays_to_win(capsys):
    inputs = iter(["111111", "", "abcdef", "enter"])
    board = Board(secret="abcdef")
    result = gameloop(board=board, input_fn=lambda _: next(inputs))
    out = capsys.readouterr().out
    assert result.is_won
    assert "Congratulations" in out
    assert "#abcdef" in out


def test_gameloop_exit_and_eof(capsys):
    board = Board(secret="abcdef")
    gameloop(board=board, input_fn=lambda _: "exit")
    assert "Exiting game." in capsys.readouterr().out

    def eof(_):
        raise EOFError

    gameloop(board=Board(secret="abcdef"), input_fn=eof)
    assert "Exiting game." in capsys.readouterr().out


def test_gameloop_new_game_resets(capsys):
    inputs = iter(["12", "new", "exit"])
    board = Board(secret="abcdef")
    gameloop(board=board, input_fn=lambda _: next(inputs))
    assert board.cursor == (0, 0)
    assert "New game started." in capsys.readouterr().out


def test_web_board_html():
    web = pytest.importorskip("ui.web")
    board = Board(secret="000000")
    type_guess(board, "111111")
    board.insert_digit("e")
    html = web.render_board_html(board.snapshot())
    assert html.count('class="tile') == 36
    assert html.count("rgba(220,38,38,0.5)") == 6
    assert 'class="tile active"' in html
    assert ">e</div>" in html


def test_web_keyboard_html():
    web = pytest.importorskip("ui.web")
    html = web.render_keyboard_html(disabled=False, reset_nonce=3)
    assert "sendKey('f')" in html
    assert "sendKey('Backspace')" in html
    assert "__hexleResetNonce = 3" in html
    assert "__hexleDisabled = false" in html


def test_web_keyboard_highlight_resets_in_browser():
    web = pytest.importorskip("ui.web")
    html = web.render_keyboard_html(disabled=False, reset_nonce=0, highlight_ms=250)
    assert 'data-key="a"' in html
    assert 'classList.remove("pressed"), 250)' in html
    assert ".kbkey.pressed { background: #6b7280; }" in html
    # No key starts out highlighted
    assert 'class="kbkey pressed"' not in html


def test_web_keyboard_disabled():
    web = pytest.importorskip("ui.web")
    html = web.render_keyboard_html(disabled=True, reset_nonce=0)
    assert "__hexleDisabled = true" in html
    assert html.count("disabled>") == 18


@pytest.fixture
def bridge_session():
    web = pytest.importorskip("ui.web")
    session = {}
    web.init_state(session, board=Board(secret="000000"))
    return web, session


def test_bridge_valid_payload_inserts_digit(bridge_session):
    web, session = bridge_session
    session[web.hkey("kb_value")] = "a|n1|0"
    assert web.consume_keyboard_bridge(session)
    state = session[web.hkey("board")].snapshot()
    assert state.rows[0][0] == "a"
    assert state.cursor == (0, 1)
    assert session[web.hkey("kb_last_nonce")] == "n1"


def test_bridge_repeated_nonce_dispatches_once(bridge_session):
    web, session = bridge_session
    session[web.hkey("kb_value")] = "a|n1|0"
    assert web.consume_keyboard_bridge(session)
    assert not web.consume_keyboard_bridge(session)
    assert not web.consume_keyboard_bridge(session)
    state = session[web.hkey("board")].snapshot()
    assert state.rows[0][:2] == ("a", None)
    assert state.cursor == (0, 1)


def test_bridge_same_key_with_new_nonce_dispatches_again(bridge_session):
    web, session = bridge_session
    session[web.hkey("kb_value")] = "a|n1|0"
    web.consume_keyboard_bridge(session)
    session[web.hkey("kb_value")] = "a|n2|0"
    assert web.consume_keyboard_bridge(session)
    assert session[web.hkey("board")].snapshot().rows[0][:2] == ("a", "a")


def test_bridge_ignores_events_from_before_reset(bridge_session):
    web, session = bridge_session
    board = session[web.hkey("board")]
    web.new_game(session)
    assert session[web.hkey("kb_reset_nonce")] == 1
    before = board.snapshot()

    session[web.hkey("kb_value")] = "a|n1|0"
    assert not web.consume_keyboard_bridge(session)
    assert board.snapshot() == before

    session[web.hkey("kb_value")] = "a|n1|1"
    assert web.consume_keyboard_bridge(session)
    assert board.snapshot().rows[0][0] == "a"


@pytest.mark.parametrize("raw", ["", "a", "a|n1", "a|n1|x", None])
def test_bridge_ignores_malformed_payloads(bridge_session, raw):
    web, session = bridge_session
    board = session[web.hkey("board")]
    before = board.snapshot()
    session[web.hkey("kb_value")] = raw
    assert not web.consume_keyboard_bridge(session)
    assert board.snapshot() == before
    assert session[web.hkey("kb_last_nonce")] == ""


def test_bridge_control_keys(bridge_session):
    web, session = bridge_session
    for i, key in enumerate(["1", "2", "Backspace"]):
        session[web.hkey("kb_value")] = f"{key}|n{i}|0"
        web.consume_keyboard_bridge(session)
    state = session[web.hkey("board")].snapshot()
    assert state.rows[0][:2] == ("1", None)
    assert state.cursor == (0, 1)


def test_init_state_keeps_existing_board(bridge_session):
    web, session = bridge_session
    board = session[web.hkey("board")]
    web.init_state(session)
    assert session[web.hkey("board")] is board
