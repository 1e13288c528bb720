"""Test the batch runner and the command line entry point."""

import json

import pytest

from src.harness import BatchConfig, BatchRunner, CheckCase
from src.main import load_config, main


TUTORIAL = """Test level
---
 52125
5.....
2.....
2..$..
2.....
4.....
0@...@
"""

SOLVED = "#####\n#...#\n#...#\n#...#\n##.##\n.....\n"
TWO_DOORS = "#####\n#...#\n#...#\n#...#\n#..##\n.....\n"


@pytest.fixture
def workspace(tmp_path):
    """A directory holding the tutorial level and two candidate solutions."""
    (tmp_path / "tutorial.ttc").write_text(TUTORIAL)
    (tmp_path / "solved.txt").write_text(SOLVED)
    (tmp_path / "two_doors.txt").write_text(TWO_DOORS)
    return tmp_path


class TestBatchRunner:
    """Checking several cases in one run."""

    def test_cases_checked(self, workspace):
        """Each case is checked and compared with its expectation."""
        config = BatchConfig(cases=[
            CheckCase(name="solved", level="tutorial.ttc", solution="solved.txt"),
            CheckCase(name="doors", level="tutorial.ttc", solution="two_doors.txt",
                      expect="NO_TREASURE_ROOM"),
        ])
        result = BatchRunner.create(config, base_dir=workspace).run()

        assert result.total_cases == 2
        assert result.solved_count == 1
        assert result.matched_count == 2
        assert result.error_count == 0
        assert result.results[1].failure.reason == "NO_TREASURE_ROOM"
        assert tuple(result.results[1].failure.pos) == (2, 2)

    def test_unmet_expectation(self, workspace):
        """A case that passes when a failure was expected does not match."""
        config = BatchConfig(cases=[
            CheckCase(name="solved", level="tutorial.ttc", solution="solved.txt",
                      expect="DISCONTIGUOUS_AREAS"),
        ])
        result = BatchRunner.create(config, base_dir=workspace).run()
        assert result.solved_count == 1
        assert result.matched_count == 0

    def test_missing_file_recorded(self, workspace):
        """Unreadable cases are recorded instead of stopping the batch."""
        config = BatchConfig(cases=[
            CheckCase(name="missing", level="nope.ttc", solution="solved.txt"),
            CheckCase(name="solved", level="tutorial.ttc", solution="solved.txt"),
        ])
        result = BatchRunner.create(config, base_dir=workspace).run()
        assert result.error_count == 1
        assert result.results[0].error
        assert result.results[1].solved is True

    def test_bad_level_recorded(self, workspace):
        """Level parse errors are recorded as case errors."""
        (workspace / "broken.ttc").write_text("no separator here\n")
        config = BatchConfig(cases=[
            CheckCase(name="broken", level="broken.ttc", solution="solved.txt"),
        ])
        result = BatchRunner.create(config, base_dir=workspace).run()
        assert "Parse errors" in result.results[0].error

    def test_absolute_paths(self, workspace, tmp_path_factory):
        """Absolute case paths ignore the base directory."""
        config = BatchConfig(cases=[
            CheckCase(name="solved", level=str(workspace / "tutorial.ttc"),
                      solution=str(workspace / "solved.txt")),
        ])
        other = tmp_path_factory.mktemp("elsewhere")
        result = BatchRunner.create(config, base_dir=other).run()
        assert result.solved_count == 1

    def test_verbose_output(self, workspace, capsys):
        """Verbose runs print one line per case."""
        config = BatchConfig(cases=[
            CheckCase(name="solved", level="tutorial.ttc", solution="solved.txt"),
            CheckCase(name="doors", level="tutorial.ttc", solution="two_doors.txt"),
        ])
        BatchRunner.create(config, base_dir=workspace).run(verbose=True)
        out = capsys.readouterr().out
        assert "✓ solved: solved" in out
        assert "✗ doors: NO_TREASURE_ROOM at (2, 2)" in out
        assert "expected a solved board" in out

    def test_save_result(self, workspace):
        """Results are saved as JSON."""
        config = BatchConfig(cases=[
            CheckCase(name="doors", level="tutorial.ttc", solution="two_doors.txt"),
        ])
        runner = BatchRunner.create(config, base_dir=workspace)
        runner.run()
        output = workspace / "out" / "result.json"
        runner.save_result(output)

        data = json.loads(output.read_text())
        assert data["total_cases"] == 1
        assert data["results"][0]["failure"]["reason"] == "NO_TREASURE_ROOM"
        assert data["results"][0]["failure"]["pos"] == [2, 2]


class TestConfig:
    """Loading YAML batch configs."""

    def test_load_config(self, tmp_path):
        """Cases are read from YAML."""
        path = tmp_path / "batch.yaml"
        path.write_text(
            "cases:\n"
            "  - name: one\n"
            "    level: a.ttc\n"
            "    solution: a.txt\n"
            "    expect: NO_TREASURE_ROOM\n"
        )
        config = load_config(str(path))
        assert config.num_cases == 1
        assert config.cases[0].expect == "NO_TREASURE_ROOM"

    def test_empty_config(self, tmp_path):
        """An empty file is an empty batch."""
        path = tmp_path / "batch.yaml"
        path.write_text("")
        assert load_config(str(path)).num_cases == 0

    def test_missing_config(self, tmp_path):
        """A missing config file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_unknown_reason_rejected(self, tmp_path):
        """Expectations must be real failure reasons."""
        path = tmp_path / "batch.yaml"
        path.write_text("cases:\n  - {name: x, level: a, solution: b, expect: BAD}\n")
        with pytest.raises(Exception):
            load_config(str(path))


class TestCli:
    """The command line entry point."""

    def test_check_solved(self, workspace, capsys):
        """A solved board prints Solved! and exits 0."""
        code = main(["check", str(workspace / "tutorial.ttc"), str(workspace / "solved.txt")])
        assert code == 0
        assert "Solved!" in capsys.readouterr().out

    def test_check_failed(self, workspace, capsys):
        """A failing board prints the reason and position and exits 1."""
        code = main(["check", str(workspace / "tutorial.ttc"), str(workspace / "two_doors.txt")])
        assert code == 1
        assert "NO_TREASURE_ROOM at (2, 2)" in capsys.readouterr().out

    def test_check_verbose_renders(self, workspace, capsys):
        """Verbose checks draw the board first."""
        main(["check", "-v", str(workspace / "tutorial.ttc"), str(workspace / "solved.txt")])
        assert "4 # # . # #" in capsys.readouterr().out

    def test_check_missing_file(self, workspace, capsys):
        """Unreadable input exits 2."""
        code = main(["check", str(workspace / "nope.ttc"), str(workspace / "solved.txt")])
        assert code == 2
        assert "Error" in capsys.readouterr().err

    def test_batch(self, workspace, capsys):
        """The batch command writes a JSON report."""
        config = workspace / "batch.yaml"
        config.write_text(
            "cases:\n"
            "  - {name: solved, level: tutorial.ttc, solution: solved.txt}\n"
            "  - {name: doors, level: tutorial.ttc, solution: two_doors.txt, expect: NO_TREASURE_ROOM}\n"
        )
        output = workspace / "report.json"
        code = main(["batch", str(config), "--output", str(output)])
        assert code == 0
        assert json.loads(output.read_text())["matched_count"] == 2
        assert "=== Batch Summary ===" in capsys.readouterr().out

    def test_batch_missing_config(self, workspace, capsys):
        """A missing config exits 2."""
        assert main(["batch", str(workspace / "missing.yaml")]) == 2
