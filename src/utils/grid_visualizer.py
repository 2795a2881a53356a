"""Plain-text rendering of a game session for the terminal."""

from typing import List

from ..engine.models import SessionSnapshot, TileView


INACTIVE_TEXT = "Select a Tile"
SUBMIT_TEXT = "Submit"
PLAY_AGAIN_TEXT = "Play again?"


def render_tile(tile: TileView) -> str:
    """
    Render a single tile as three characters.

    [A] end of the path, (A) selected, " A " selectable, " a " disabled
    """
    if tile.status == "selected-last":
        return f"[{tile.letter}]"
    if tile.status == "selected":
        return f"({tile.letter})"
    if tile.status == "eligible":
        return f" {tile.letter} "
    return f" {tile.letter.lower()} "


def render_board(snapshot: SessionSnapshot, show_ids: bool = True) -> str:
    """Render the board, optionally followed by a key of tile ids per row."""
    columns = snapshot.columns or 1
    width = len(str(max(len(snapshot.tiles) - 1, 0)))
    lines: List[str] = []
    for start in range(0, len(snapshot.tiles), columns):
        row = snapshot.tiles[start:start + columns]
        line = " ".join(render_tile(t) for t in row)
        if show_ids:
            line += "    " + " ".join(str(t.id).rjust(width) for t in row)
        lines.append(line)
    return "\n".join(lines)


def describe_word(snapshot: SessionSnapshot) -> str:
    """The text shown in the word entry area."""
    if snapshot.status == "won":
        return f"You won! Score: {snapshot.score} of {snapshot.max_score}"
    if snapshot.status == "lost":
        return f"Invalid word. Game over! Score: {snapshot.score} of {snapshot.max_score}"
    if snapshot.last_result is not None:
        return snapshot.last_result.message
    return snapshot.current_word or INACTIVE_TEXT


def submit_label(snapshot: SessionSnapshot) -> str:
    if snapshot.status != "in-progress":
        return PLAY_AGAIN_TEXT
    if snapshot.last_result is not None:
        return snapshot.last_result.short_message
    return SUBMIT_TEXT


def render_session(snapshot: SessionSnapshot, show_ids: bool = True) -> str:
    """Render score, board and word entry as one block."""
    lines = [
        f"Score: {snapshot.score}    Max Score: {snapshot.max_score}",
        "",
        render_board(snapshot, show_ids=show_ids),
        "",
        f"> {describe_word(snapshot)}",
        f"  [{submit_label(snapshot)}]",
    ]
    return "\n".join(lines)
