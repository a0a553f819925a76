"""Tests for the footmark command-line interface."""

import subprocess
import sys

import pytest

from footmark.cli import main

UNORGANIZED = "A[^2] B[^1].\n\n[^1]: one\n[^2]: two\n"
ORGANIZED = "A[^1] B[^2].\n\n[^1]: two\n[^2]: one\n"


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestCLIHelp:
    """--help and version."""

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "footmark" in capsys.readouterr().out

    def test_version(self, capsys):
        assert main(["version"]) == 0
        assert capsys.readouterr().out.startswith("footmark ")

    def test_module_entry_point(self):
        result = subprocess.run(
            [sys.executable, "-m", "footmark", "--help"],
            capture_output=True,
            text=True,
            timeout=60,
        )
        assert result.returncode == 0
        assert "organize" in result.stdout


class TestOrganizeCommand:
    """footmark organize."""

    def test_rewrites_file(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text(UNORGANIZED, encoding="utf-8")

        assert main(["organize", str(path)]) == 0

        assert path.read_text(encoding="utf-8") == ORGANIZED
        assert "1 relabeled" in capsys.readouterr().out

    def test_check_does_not_write(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text(UNORGANIZED, encoding="utf-8")

        assert main(["organize", "--check", str(path)]) == 1

        assert path.read_text(encoding="utf-8") == UNORGANIZED
        assert "Would reorganize" in capsys.readouterr().out

    def test_check_passes_on_organized_file(self, workdir):
        path = workdir / "notes.md"
        path.write_text(ORGANIZED, encoding="utf-8")

        assert main(["organize", "--check", str(path)]) == 0

    def test_diff(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text(UNORGANIZED, encoding="utf-8")

        main(["organize", "--check", "--diff", str(path)])

        out = capsys.readouterr().out
        assert "-A[^2] B[^1]." in out
        assert "+A[^1] B[^2]." in out

    def test_directory_expansion(self, workdir):
        (workdir / "docs").mkdir()
        md = workdir / "docs" / "a.md"
        txt = workdir / "docs" / "b.txt"
        md.write_text(UNORGANIZED, encoding="utf-8")
        txt.write_text(UNORGANIZED, encoding="utf-8")

        assert main(["-q", "organize", str(workdir / "docs")]) == 0

        assert md.read_text(encoding="utf-8") == ORGANIZED
        assert txt.read_text(encoding="utf-8") == UNORGANIZED

    def test_missing_file(self, workdir, capsys):
        assert main(["organize", str(workdir / "nope.md")]) == 1
        assert "not found" in capsys.readouterr().err


class TestCursorCommands:
    """footmark new / next / prev / auto-reference."""

    def test_new_creates_footnote(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text("Hello world\n", encoding="utf-8")

        assert main(["new", str(path), "--line", "1", "--col", "2"]) == 0

        assert path.read_text(encoding="utf-8") == "Hello[^1] world\n\n[^1]: \n"
        out = capsys.readouterr().out
        assert "New footnote created" in out
        assert f"{path}:3:6" in out

    def test_new_respects_organize_on_new(self, workdir):
        (workdir / ".footmark.toml").write_text("organize_on_new = true\n")
        path = workdir / "notes.md"
        path.write_text("first second[^1]\n\n[^1]: one\n", encoding="utf-8")

        assert main(["new", str(path), "--line", "1", "--col", "0"]) == 0

        assert path.read_text(encoding="utf-8") == (
            "first[^1] second[^2]\n\n[^1]: \n\n[^2]: one\n"
        )

    def test_new_rejects_position_outside_file(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text("one line\n", encoding="utf-8")

        assert main(["new", str(path), "--line", "5"]) == 1
        assert "outside" in capsys.readouterr().err

    def test_next_and_prev(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text(ORGANIZED, encoding="utf-8")

        assert main(["next", str(path), "--line", "1", "--col", "3"]) == 0
        assert capsys.readouterr().out.strip() == f"{path}:1:9"

        assert main(["prev", str(path), "--line", "1", "--col", "9"]) == 0
        assert capsys.readouterr().out.strip() == f"{path}:1:3"

        assert main(["next", str(path), "--line", "1", "--col", "9"]) == 1

    def test_auto_reference(self, workdir, capsys):
        path = workdir / "notes.md"
        path.write_text("cat[^1] and cat\n\n[^1]: c\n", encoding="utf-8")

        assert main(["auto-reference", str(path)]) == 0

        assert path.read_text(encoding="utf-8") == "cat[^1] and cat[^1]\n\n[^1]: c\n"
        assert "Inserted 1 reference(s)" in capsys.readouterr().out


class TestConfigCommand:
    """footmark config."""

    def test_path_without_config(self, workdir, capsys):
        assert main(["config", "path"]) == 0
        assert "defaults" in capsys.readouterr().out

    def test_path_with_config(self, workdir, capsys):
        config = workdir / ".footmark.toml"
        config.write_text("debug_print = false\n")

        assert main(["config", "path"]) == 0
        assert capsys.readouterr().out.strip() == str(config.resolve())

    def test_show(self, workdir, capsys):
        assert main(["config", "show"]) == 0

        out = capsys.readouterr().out
        assert "organize_on_save = false" in out
        assert "[keys]" in out

    def test_bad_config(self, workdir, capsys):
        config = workdir / "broken.toml"
        config.write_text("this is = = not toml\n")

        assert main(["--config", str(config), "config", "show"]) == 1
        assert "Error loading config" in capsys.readouterr().err

    def test_missing_explicit_config(self, workdir, capsys):
        assert main(["--config", str(workdir / "absent.toml"), "organize", "x.md"]) == 1
        assert "Error loading config" in capsys.readouterr().err
