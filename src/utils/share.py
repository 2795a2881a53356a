"""Share text for a finished or in-progress game."""

from typing import List, Sequence


def render_letter_diagram(letters: Sequence[str], columns: int) -> str:
    """Render the board letters one row per line, joined with dashes."""
    rows: List[str] = [
        "-".join(letters[i:i + columns])
        for i in range(0, len(letters), columns)
    ]
    return "\n".join(rows)


def build_share_text(
    letters: Sequence[str],
    columns: int,
    score: int,
    max_score: int,
    status: str,
    game_id: int | str,
    domain: str,
) -> str:
    """
    Build the text a player copies to share their game.

    The score line is only included once the game is won or lost.

    Example:
        2 of 3

        A-C-E-F
        M-N-R-D

        words.xyz/7
    """
    text = ""
    if status in ("won", "lost"):
        text = f"{score} of {max_score}\n\n"

    text += render_letter_diagram(letters, columns)
    text += f"\n\n{domain}/{game_id}"
    return text
