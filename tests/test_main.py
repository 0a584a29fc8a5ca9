"""Tests for the command line entry point and config loading."""

import json

import pytest

from src.letterbox import KNOWN_PUZZLES, Puzzle, SolverConfig
from src.main import load_config, main


WORDS = "medals\nsorting\nsort\nting\ntot\n"


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text(WORDS, encoding="utf-8")
    return path


class TestLoadConfig:
    """YAML configuration."""

    def test_nested_sections(self, tmp_path):
        """Nested sections map onto the config models."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "hint_limit: 3\n"
            "search:\n"
            "  max_depth: 6\n"
            "  time_limit: 5\n"
            "generator:\n"
            "  seed: 42\n"
            "  probe:\n"
            "    window: 4\n",
            encoding="utf-8",
        )
        config = load_config(str(path))
        assert isinstance(config, SolverConfig)
        assert config.hint_limit == 3
        assert config.search.max_depth == 6
        assert config.search.time_limit == 5.0
        assert config.search.max_solutions == 20
        assert config.generator.seed == 42
        assert config.generator.probe.window == 4

    def test_empty_file(self, tmp_path):
        """An empty file gives the defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        assert load_config(str(path)) == SolverConfig()

    def test_missing_file(self, tmp_path):
        """A missing config raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_values(self, tmp_path):
        """Out-of-range values are rejected by validation."""
        path = tmp_path / "config.yaml"
        path.write_text("generator:\n  known_puzzle_probability: 2.0\n", encoding="utf-8")
        with pytest.raises(Exception):
            load_config(str(path))


class TestCommands:
    """End-to-end runs of each sub-command."""

    def test_solve(self, word_file, capsys):
        """Solve prints ranked chains."""
        assert main(["solve", "SAT", "ERN", "OIL", "DMG", "--words", str(word_file)]) == 0
        out = capsys.readouterr().out
        assert "Puzzle: SAT-ERN-OIL-DMG" in out
        assert "1. MEDALS -> SORTING (score 550.0)" in out

    def test_solve_json(self, word_file, capsys):
        """JSON output lists candidates with scores."""
        assert main(["--json", "solve", "SAT-ERN-OIL-DMG", "-w", str(word_file), "--top", "1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data == [{"words": ["MEDALS", "SORTING"], "score": 550.0, "letter_count": 12}]

    def test_solve_json_after_subcommand(self, word_file, capsys):
        """--json is also accepted after the sub-command."""
        assert main(["solve", "SAT-ERN-OIL-DMG", "--words", str(word_file), "--json", "-n", "1"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data[0]["words"] == ["MEDALS", "SORTING"]

    def test_solve_without_words(self, capsys):
        """A missing word list is reported and exits with 1."""
        assert main(["solve", "SAT-ERN-OIL-DMG"]) == 1
        assert "No word list" in capsys.readouterr().err

    def test_malformed_puzzle(self, word_file, capsys):
        """Duplicate letters are reported and exit with 1."""
        assert main(["solve", "SAT-ERN-OIL-DMS", "--words", str(word_file)]) == 1
        assert "Duplicate" in capsys.readouterr().err

    def test_hint(self, word_file, capsys):
        """Hints follow the last played word."""
        assert main(["hint", "SAT-ERN-OIL-DMG", "--words", str(word_file), "--chain", "medals"]) == 0
        assert capsys.readouterr().out.split() == ["SORTING", "SORT"]

    def test_hint_json_empty(self, word_file, capsys):
        """No hints gives an empty JSON list."""
        assert main([
            "--json", "hint", "SAT-ERN-OIL-DMG", "--words", str(word_file), "--chain", "MEDALS SORTING",
        ]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_check_solved(self, word_file, capsys):
        """A complete chain is reported as solved."""
        assert main(["check", "SAT-ERN-OIL-DMG", "--chain", "MEDALS SORTING", "--words", str(word_file)]) == 0
        assert "Solved! Score: 550.0" in capsys.readouterr().out

    def test_check_invalid(self, capsys):
        """Rule violations are printed and exit with 1."""
        assert main(["check", "SAT-ERN-OIL-DMG", "--chain", "MEDALS TING"]) == 1
        assert "ERROR BROKEN_CHAIN" in capsys.readouterr().out

    def test_generate(self, capsys):
        """Generate prints a well-formed layout."""
        assert main(["generate", "--seed", "1"]) == 0
        out = capsys.readouterr().out.strip()
        sides = out.split("-")
        assert len(sides) == 4
        assert len(set("".join(sides))) == 12

    def test_generate_json_from_pool(self, tmp_path, capsys):
        """Config settings reach the generator."""
        path = tmp_path / "config.yaml"
        path.write_text("generator:\n  known_puzzle_probability: 1.0\n", encoding="utf-8")
        assert main(["--config", str(path), "--json", "generate", "--seed", "3"]) == 0
        puzzle = Puzzle.model_validate_json(capsys.readouterr().out)
        assert puzzle in [Puzzle.create(sides) for sides in KNOWN_PUZZLES]

    def test_generate_json_after_subcommand(self, capsys):
        """generate takes --json after the sub-command."""
        assert main(["generate", "--seed", "3", "--json"]) == 0
        puzzle = Puzzle.model_validate_json(capsys.readouterr().out)
        assert len(puzzle.letters) == 12

    def test_bad_config(self, tmp_path, capsys):
        """An unreadable config exits with 1."""
        assert main(["--config", str(tmp_path / "nope.yaml"), "generate"]) == 1
        assert "Error loading config" in capsys.readouterr().err
