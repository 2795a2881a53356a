"""Tests for config loading and the terminal game loop."""

import pytest
from pydantic import ValidationError

from src import main as cli
from src.engine import GameSession, ManualScheduler
from src.utils.grid_visualizer import render_session


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    """Keep the CLI from reconfiguring the root logger during tests."""
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)


@pytest.fixture
def game():
    scheduler = ManualScheduler()
    return GameSession.create(scheduler=scheduler), scheduler


class TestLoadConfig:
    """Test YAML configuration loading."""

    def test_inline_words(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text(
            "game_id: 7\n"
            "columns: 2\n"
            "rows: 2\n"
            "letters: [a, c, e, f]\n"
            "solution_words: [ace]\n"
            "min_word_length: 3\n"
        )
        config = cli.load_config(path)
        assert config.game_id == 7
        assert config.letters == ["A", "C", "E", "F"]
        assert config.solution_words == ["ACE"]

    def test_words_file_relative_to_config(self, tmp_path):
        (tmp_path / "words.txt").write_text("cam\nrun\n")
        path = tmp_path / "game.yaml"
        path.write_text("solution_words: [ACE]\nsolution_words_file: words.txt\n")
        config = cli.load_config(path)
        assert config.solution_words == ["ACE", "CAM", "RUN"]

    def test_empty_file_uses_defaults(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("")
        assert cli.load_config(path).num_tiles == 16

    def test_missing_config(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            cli.load_config(tmp_path / "nope.yaml")

    def test_missing_words_file(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("solution_words_file: missing.txt\n")
        with pytest.raises(FileNotFoundError):
            cli.load_config(path)

    def test_invalid_config(self, tmp_path):
        path = tmp_path / "game.yaml"
        path.write_text("columns: 5\nrows: 5\n")
        with pytest.raises(ValidationError):
            cli.load_config(path)


class TestExecute:
    """Test single commands."""

    def test_toggle_and_submit(self, game):
        session, scheduler = game
        for command in ("0", "t 1", "tile 2"):
            keep_playing, _ = cli.execute(session, scheduler, command)
            assert keep_playing
        assert session.current_word == "ACE"

        _, output = cli.execute(session, scheduler, "submit")
        assert "“ACE” is valid!" in output
        # the terminal applies the display reset straight away
        assert session.current_word == ""
        assert not session.reset_pending
        assert session.score == 1

    def test_rejected_toggle(self, game):
        session, scheduler = game
        cli.execute(session, scheduler, "0")
        _, output = cli.execute(session, scheduler, "15")
        assert output.startswith("Tile 15 can't be selected now.")

    def test_unknown_tile(self, game):
        session, scheduler = game
        _, output = cli.execute(session, scheduler, "99")
        assert output.startswith("Error:")

    def test_unknown_command(self, game):
        session, scheduler = game
        _, output = cli.execute(session, scheduler, "dance")
        assert "Unknown command" in output

    def test_submit_after_loss_plays_again(self, game):
        session, scheduler = game
        for command in ("0", "1", "5", "s"):
            cli.execute(session, scheduler, command)
        assert session.status == "lost"
        assert "Play again?" in render_session(session.snapshot())

        _, output = cli.execute(session, scheduler, "s")
        assert session.status == "in-progress"
        assert session.score == 0
        assert session.history == []
        assert "> Select a Tile" in output

    def test_submit_after_win_plays_again(self, game):
        session, scheduler = game
        for command in "0,1,2,s,1,0,4,s,6,10,14,s".split(","):
            cli.execute(session, scheduler, command)
        assert session.status == "won"

        cli.execute(session, scheduler, "submit")
        assert session.status == "in-progress"
        assert session.solved == []

    def test_new_game(self, game):
        session, scheduler = game
        cli.execute(session, scheduler, "s")
        cli.execute(session, scheduler, "n")
        assert session.status == "in-progress"

    def test_clear(self, game):
        session, scheduler = game
        cli.execute(session, scheduler, "0")
        cli.execute(session, scheduler, "c")
        assert session.current_word == ""

    def test_share_and_quit(self, game):
        session, scheduler = game
        _, output = cli.execute(session, scheduler, "share")
        assert output.endswith("words.xyz/0")
        keep_playing, output = cli.execute(session, scheduler, "q")
        assert not keep_playing

    def test_blank_command(self, game):
        session, scheduler = game
        assert cli.execute(session, scheduler, "   ") == (True, "")


class TestPlay:
    """Test command sequences and the entry point."""

    def test_play_stops_at_quit(self, game):
        session, scheduler = game
        outputs = list(cli.play(session, scheduler, ["0", "q", "1"]))
        assert outputs[-1] == "Bye!"
        assert session.current_word == "A"

    def test_main_with_moves(self, capsys):
        code = cli.main(["--moves", "0,1,2,s,1,0,4,s,6,10,14,s"])
        out = capsys.readouterr().out
        assert code == 0
        assert "You won! Score: 3 of 3" in out
        assert "Status: won" in out
        assert "Solved: ACE, CAM, RUN" in out

    def test_main_bad_config(self, tmp_path, capsys):
        code = cli.main([str(tmp_path / "missing.yaml")])
        assert code == 1
        assert "Error loading config" in capsys.readouterr().err
