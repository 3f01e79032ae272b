# Browser front end. Run with: streamlit run ui/web.py
import streamlit as st
import streamlit.components.v1 as components

from game.board import Board
from game.keys import BACKSPACE, CONTROL_KEYS, ENTER, dispatch_key
from game.ruleset import DEFAULT_RULES
from ui.colors import contrast_color, display_color, swatch_svg

SYMBOLS = DEFAULT_RULES["symbols"]
KEY_ROWS = [
    SYMBOLS[:8],
    SYMBOLS[8:],
    [BACKSPACE, ENTER],
]
KEY_LABELS = {BACKSPACE: "←", ENTER: "Enter"}

STYLE = """
<style>
.block-container { max-width: 760px; padding-top: 1.0rem; }
.hexle-title { font-size: 3rem; font-weight: 900; text-align: center; margin: 0;
               background: #000; border-radius: 18px; padding: 8px 0; }
.hexle-sub { text-align: center; color: rgba(0,0,0,0.6); margin: 0.25rem 0 0 0; }

.board { display:flex; flex-direction:column; gap:8px; margin: 12px 0; }
.row { display:flex; gap:8px; justify-content:center; }
.tile {
    width: 52px; height: 52px;
    border: 2px solid rgba(0,0,0,0.18);
    border-radius: 10px;
    display:flex; align-items:center; justify-content:center;
    font-size: 26px; font-weight: 800; font-family: ui-monospace, monospace;
    box-sizing:border-box;
    background: rgba(255,255,255,0.95);
}
.tile.active { border-color: rgba(0,0,0,0.55); transform: scale(1.1); }

.kbd-bridge [data-testid="stTextInput"] { display:none !important; height:0 !important; }
.kbd-bridge [data-testid="stButton"] { display:none !important; height:0 !important; }
</style>
"""


def hkey(name: str) -> str:
    return f"hexle::{name}"


def _session(session=None):
    # Any mapping works; the app passes nothing and gets st.session_state
    return st.session_state if session is None else session


def init_state(session=None, board=None):
    session = _session(session)
    # One board per browser session, created before any input is read
    if hkey("board") not in session:
        session[hkey("board")] = board or Board(rules=DEFAULT_RULES)

    # keyboard bridge (NON-widget keys only)
    if hkey("kb_last_nonce") not in session:
        session[hkey("kb_last_nonce")] = ""
    if hkey("kb_reset_nonce") not in session:
        session[hkey("kb_reset_nonce")] = 0


def new_game(session=None):
    session = _session(session)
    session[hkey("board")].reset()
    # Invalidate any in-flight keyboard events without touching widget keys
    session[hkey("kb_last_nonce")] = ""
    session[hkey("kb_reset_nonce")] += 1


def handle_key(key: str, session=None):
    return dispatch_key(_session(session)[hkey("board")], key)


def render_board_html(state, rules=None) -> str:
    """Build the grid markup from a GameState snapshot."""
    rules = rules or DEFAULT_RULES
    colors = rules["display"]["tile_colors"]
    rows_html = []
    for r, row in enumerate(state.rows):
        tiles = []
        for c, symbol in enumerate(row):
            classes = "tile active" if state.is_active(r, c) else "tile"
            fb = state.feedback_at(r, c)
            style = f' style="background:{colors[fb.value]};"' if fb is not None else ""
            tiles.append(f'<div class="{classes}"{style}>{symbol or ""}</div>')
        rows_html.append(f'<div class="row">{"".join(tiles)}</div>')
    return f'<div class="board">{"".join(rows_html)}</div>'


def render_keyboard_html(disabled: bool, reset_nonce: int, highlight_ms=None) -> str:
    """
    On-screen hex keyboard plus a physical keyboard listener.
    Both send KEY|NONCE|RESETNONCE into a hidden text input, then click the
    hidden button. The pressed key is greyed for highlight_ms in the browser.
    """
    if highlight_ms is None:
        highlight_ms = DEFAULT_RULES["display"]["highlight_ms"]
    rows_html = []
    for row in KEY_ROWS:
        keys_html = []
        for k in row:
            w = "84px" if k in KEY_LABELS else "48px"
            op = "0.55" if disabled else "1.0"
            keys_html.append(
                f"""<button class="kbkey" data-key="{k}" style="width:{w}; opacity:{op};"
                        onclick="sendKey('{k}')" {"disabled" if disabled else ""}>
                    {KEY_LABELS.get(k, k)}
                </button>"""
            )
        rows_html.append(f"""<div class="kbrow">{''.join(keys_html)}</div>""")

    accepted = ", ".join(f"'{k}'" for k in SYMBOLS + list(CONTROL_KEYS))
    return f"""
    <div class="kbwrap">
      {''.join(rows_html)}
    </div>

    <script>
      const parentWin = window.parent;
      parentWin.__hexleResetNonce = {reset_nonce};
      parentWin.__hexleDisabled = {str(disabled).lower()};

      // Presentation only: grey the key, then restore it after a moment
      function flashKey(k) {{
        const btn = document.querySelector('.kbkey[data-key="' + k + '"]');
        if (!btn) return;
        btn.classList.add("pressed");
        setTimeout(() => btn.classList.remove("pressed"), {highlight_ms});
      }}

      function sendKey(k) {{
        if (parentWin.__hexleDisabled) return;
        flashKey(k);

        const nonce = String(Date.now()) + "_" + Math.floor(Math.random()*1000000);
        const payload = k + "|" + nonce + "|" + String(parentWin.__hexleResetNonce);

        const bridge = parentWin.document.querySelector(".kbd-bridge");
        const tinp = bridge ? bridge.querySelector("input") : null;
        if (!tinp) return;

        const nativeSetter = Object.getOwnPropertyDescriptor(parentWin.HTMLInputElement.prototype, "value").set;
        nativeSetter.call(tinp, payload);
        tinp.dispatchEvent(new Event('input', {{ bubbles: true }}));

        const btn = bridge.querySelector("button");
        if (btn) btn.click();
      }}

      // Each render replaces the listener, so it always calls this frame's sendKey
      const accepted = [{accepted}];
      if (parentWin.__hexleKeyListener) {{
        parentWin.document.removeEventListener("keydown", parentWin.__hexleKeyListener);
      }}
      parentWin.__hexleKeyListener = (e) => {{
        if (accepted.includes(e.key)) sendKey(e.key);
      }};
      parentWin.document.addEventListener("keydown", parentWin.__hexleKeyListener);
    </script>

    <style>
      .kbwrap {{ display:flex; flex-direction:column; gap: 6px; margin: 8px 0; }}
      .kbrow {{ display:flex; justify-content:center; gap: 4px; }}
      .kbkey {{
        height: 46px;
        border: 1px solid rgba(0,0,0,0.12);
        border-radius: 12px;
        background: #e5e7eb;
        font-weight: 900;
        font-size: 16px;
        user-select:none;
      }}
      .kbkey.pressed {{ background: #6b7280; }}
    </style>
    """


def consume_keyboard_bridge(session=None):
    """
    Reads payload from hidden widget key hexle::kb_value, but NEVER writes to it.
    Payload format: KEY|NONCE|RESETNONCE
    Returns True when the key reached the board.
    """
    session = _session(session)
    raw = session.get(hkey("kb_value"), "") or ""
    if raw.count("|") < 2:
        return False

    key, nonce, rnonce_str = raw.split("|", 2)

    # Ignore events from before the last reset
    try:
        rnonce = int(rnonce_str)
    except ValueError:
        return False

    if rnonce != session.get(hkey("kb_reset_nonce"), 0):
        return False

    # Ignore duplicate replays
    if nonce == session.get(hkey("kb_last_nonce"), ""):
        return False

    session[hkey("kb_last_nonce")] = nonce
    handle_key(key, session)
    return True


def render_result(state):
    color = display_color(state.secret_code)
    contrast = contrast_color(color)
    if state.is_won:
        st.success(f"You win! The hex was {color}.")
    else:
        st.error(f"You lose! The hex was {color}.")
    st.markdown(
        f'<div style="display:flex; justify-content:center;">{swatch_svg(color, contrast, size=96)}</div>',
        unsafe_allow_html=True,
    )


def main():
    st.set_page_config(page_title="Hexle", page_icon="🎨", layout="centered")
    st.markdown(STYLE, unsafe_allow_html=True)
    init_state()

    # Hidden bridge widgets for the HTML keyboard (widget keys exist, but we never set them in Python)
    st.markdown('<div class="kbd-bridge">', unsafe_allow_html=True)
    st.text_input("kbd_bridge_value", key=hkey("kb_value"), label_visibility="collapsed")
    st.button("kbd_bridge_btn", key=hkey("kb_btn"))
    st.markdown("</div>", unsafe_allow_html=True)

    # Consume keypress event (if any)
    consume_keyboard_bridge()

    board = st.session_state[hkey("board")]
    state = board.snapshot()
    color = board.display_color()

    st.markdown(
        f'<p class="hexle-title" style="color:{color};">Hexle</p>'
        '<p class="hexle-sub">Guess the color of this title to win. '
        "Blue means too low, red means too high.</p>",
        unsafe_allow_html=True,
    )

    st.markdown(render_board_html(state), unsafe_allow_html=True)

    components.html(
        render_keyboard_html(
            disabled=state.is_over,
            reset_nonce=st.session_state[hkey("kb_reset_nonce")],
        ),
        height=190,
    )

    if state.is_over:
        render_result(state)

    if st.button("New game", use_container_width=True):
        new_game()
        st.rerun()


if __name__ == "__main__":
    main()
