"""
Main entry point for playing a word grid game in the terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml
    python -m src.main config.yaml --moves "0,1,2,submit" --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

import yaml

from .engine import GameConfig, GameSession, ManualScheduler
from .utils.grid_visualizer import render_session
from .utils.logger import configure_logging
from .verifiers.wordlist import load_word_list


HELP_TEXT = """Commands:
  <id> | t <id>   toggle a tile
  s | submit      submit the current word (play again once the game is over)
  c | clear       clear the current selection
  n | new         start the game over
  share           show the share text
  h | help        show this help
  q | quit        leave the game"""


def load_config(config_path: str | Path) -> GameConfig:
    """
    Load game configuration from a YAML file.

    A ``solution_words_file`` key names a word list (one word per line),
    resolved relative to the YAML file; its words are added to any inline
    ``solution_words``.

    Raises:
        FileNotFoundError: If the config or the word list doesn't exist
        pydantic.ValidationError: If the config can't produce a game
    """
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    words_file = data.pop("solution_words_file", None)
    if words_file:
        words_path = Path(words_file)
        if not words_path.is_absolute():
            words_path = path.parent / words_path
        data["solution_words"] = list(data.get("solution_words") or []) + load_word_list(words_path)

    return GameConfig(**data)


def execute(session: GameSession, scheduler: ManualScheduler, command: str) -> Tuple[bool, str]:
    """
    Run one player command against the session.

    Returns:
        (keep_playing, output) where output is the text to show the player
    """
    parts = command.strip().lower().split()
    if not parts:
        return True, ""

    name, args = parts[0], parts[1:]

    if name in ("q", "quit", "exit"):
        return False, "Bye!"

    if name in ("h", "help", "?"):
        return True, HELP_TEXT

    if name == "share":
        return True, session.share_text()

    if name in ("n", "new"):
        session.reset_session("full")
        return True, render_session(session.snapshot())

    if name in ("c", "clear"):
        session.reset_session("selection")
        return True, render_session(session.snapshot())

    if name in ("s", "submit"):
        if session.is_over:
            # The submit control reads "Play again?" once the game has ended.
            session.reset_session("full")
            return True, render_session(session.snapshot())
        result = session.submit_word()
        if result is None:
            return True, "Nothing to submit right now."
        shown = render_session(session.snapshot())
        if session.reset_pending:
            # The terminal has no display delay: show the outcome, then reset.
            scheduler.run_pending()
            shown += "\n\n" + render_session(session.snapshot())
        return True, shown

    if name in ("t", "tile"):
        if len(args) != 1:
            return True, "Usage: t <id>"
        name = args[0]

    try:
        tile_id = int(name)
    except ValueError:
        return True, f"Unknown command: {command.strip()!r}. Type 'h' for help."

    try:
        changed = session.toggle_tile(tile_id)
    except ValueError as e:
        return True, f"Error: {e}"

    shown = render_session(session.snapshot())
    if not changed:
        shown = f"Tile {tile_id} can't be selected now.\n" + shown
    return True, shown


def play(session: GameSession, scheduler: ManualScheduler, commands: Iterable[str]) -> Iterator[str]:
    """Run commands one at a time, yielding each output, until quit."""
    for command in commands:
        keep_playing, output = execute(session, scheduler, command)
        if output:
            yield output
        if not keep_playing:
            return


def _interactive_commands() -> Iterable[str]:
    while True:
        try:
            yield input("\nboggle> ")
        except EOFError:
            return


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Play a word grid game in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  game_id: 7
  columns: 4
  rows: 4
  letters: [A, C, E, F, M, N, R, D, C, X, U, F, I, E, N, F]
  solution_words: [ACE, CAM, RUN]
  solution_words_file: words.txt
  min_word_length: 3
  domain: words.xyz
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (default: the demo board)"
    )
    parser.add_argument(
        "--moves", "-m",
        help="Comma-separated commands to play instead of reading stdin"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log every engine event"
    )

    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    scheduler = ManualScheduler()
    session = GameSession.create(config=config, scheduler=scheduler)

    if args.verbose:
        print(f"Config: {args.config or 'demo board'}")
        print()

    print(render_session(session.snapshot()))

    if args.moves:
        commands: Iterable[str] = [m for m in args.moves.split(",") if m.strip()]
    else:
        print()
        print(HELP_TEXT)
        commands = _interactive_commands()

    for output in play(session, scheduler, commands):
        print()
        print(output)

    # Print summary
    print()
    print("=== Game Summary ===")
    print(f"Status: {session.status}")
    print(f"Score: {session.score} of {session.max_score}")
    if session.solved:
        print(f"Solved: {', '.join(session.solved)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
