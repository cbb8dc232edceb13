"""
Tests for the command-line entry point.
"""

from __future__ import annotations

from src.cli.play import main
from src.content import load_campaign

# Answers after the name along the winning path (see test_game.WINNING_SCRIPT)
WINNING_ANSWERS = [
    "2", "1", "1", "1", "1", "2", "2", "1", "1", "1", "1", "1", "1",
    "1", "2", "1", "1", "2", "1", "1", "1", "1", "1",
]


def _feed(monkeypatch, answers):
    responses = iter(answers)
    monkeypatch.setattr("builtins.input", lambda *args: next(responses))


class TestMain:
    """Tests for main()."""

    def test_full_game_exits_zero(self, monkeypatch, capsys):
        _feed(monkeypatch, WINNING_ANSWERS)

        status = main(["--name", "Aria", "--fast"])

        out = capsys.readouterr().out
        assert status == 0
        assert "Welcome, Aria!" in out
        assert "THE END" in out

    def test_losing_also_exits_zero(self, monkeypatch, capsys):
        _feed(monkeypatch, WINNING_ANSWERS[:17] + ["1"])

        status = main(["--name", "Aria", "--fast"])

        assert status == 0
        assert "Game Over! Your journey ends here." in capsys.readouterr().out

    def test_name_prompt_when_no_name_given(self, monkeypatch, capsys):
        _feed(monkeypatch, ["Bram"] + WINNING_ANSWERS)

        assert main(["--fast"]) == 0
        assert "Welcome, Bram!" in capsys.readouterr().out

    def test_export_campaign(self, tmp_path):
        path = tmp_path / "quest.json"

        assert main(["--export-campaign", str(path)]) == 0
        assert load_campaign(path).title == "Fantasy Quest"

    def test_export_to_unwritable_path(self, tmp_path, capsys):
        path = tmp_path / "no-such-dir" / "quest.json"

        assert main(["--export-campaign", str(path)]) == 2
        assert "Could not export campaign" in capsys.readouterr().err

    def test_play_exported_campaign(self, monkeypatch, tmp_path, capsys):
        path = tmp_path / "quest.json"
        main(["--export-campaign", str(path)])
        _feed(monkeypatch, WINNING_ANSWERS)

        assert main(["--campaign", str(path), "--name", "Aria", "--fast"]) == 0
        assert "THE END" in capsys.readouterr().out

    def test_missing_campaign_file(self, tmp_path, capsys):
        status = main(["--campaign", str(tmp_path / "missing.json")])

        assert status == 2
        assert "Could not load campaign" in capsys.readouterr().err

    def test_invalid_campaign_file(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text('{"title": "Broken", "scenarios": []}', encoding="utf-8")

        assert main(["--campaign", str(path)]) == 2

    def test_keyboard_interrupt(self, monkeypatch):
        def _interrupt(*args):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", _interrupt)

        assert main(["--fast"]) == 130
