"""
Result Sharing and Keyboard Rendering

Text encoding of a finished game for the clipboard, and the on-screen
keyboard rows with their colors.
"""

from typing import Dict, List

from ..models.game import CLEAR, ENTER, Color
from ..services.game_engine import GameEngine

SHARE_GLYPHS: Dict[Color, str] = {
    Color.EXACT: "🟩",
    Color.PRESENT: "🟨",
    Color.ABSENT: "⬛",
}

KEYBOARD_ROWS: List[List[str]] = [
    list("QWERTYUIOP"),
    list("ASDFGHJKL"),
    [ENTER, *"ZXCVBNM", CLEAR],
]


def build_share_text(engine: GameEngine) -> str:
    """
    Encode the submitted rows as colored squares.

    The header counts submitted rows: "Wordle 3/6" after three guesses,
    "Wordle 6/6" for a game lost on the last row.
    """
    submitted = engine.current_row()
    header = f"Wordle {submitted}/{engine.max_attempts}"

    lines = [
        "".join(SHARE_GLYPHS[color] for color in engine.row_colors(row))
        for row in range(submitted)
    ]
    if not lines:
        return header
    return header + "\n\n" + "\n".join(lines)


def keyboard_layout(engine: GameEngine) -> List[List[Dict]]:
    """Keyboard rows with per-key color; keys known to be absent are disabled."""
    layout = []
    for key_row in KEYBOARD_ROWS:
        row = []
        for key in key_row:
            color = engine.key_color(key)
            row.append({
                'key': key,
                'color': color.value,
                'wide': key in (ENTER, CLEAR),
                'disabled': color == Color.ABSENT,
            })
        layout.append(row)
    return layout
