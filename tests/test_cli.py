"""Tests for the ``file-organizer`` command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from fileorganizer.cli import main


def test_help_exits_zero(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    assert "--dry-run" in capsys.readouterr().out


def test_missing_directory_argument(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 1
    err = capsys.readouterr().err
    assert "Directory path is required" in err
    assert "--help" in err


def test_nonexistent_directory(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path / "nope")]) == 1
    assert "does not exist or is not accessible" in capsys.readouterr().err


def test_path_is_a_file(tmp_path: Path, make_files) -> None:
    make_files("a.txt")
    assert main(["--directory", str(tmp_path / "a.txt")]) == 1


def test_organize_positional(tmp_path: Path, make_files, capsys: pytest.CaptureFixture[str]) -> None:
    make_files("a.png", "notes.txt")

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "Found 2 file(s) and 0 folder(s)" in out
    assert "[images]" in out
    assert "Files moved: 2" in out
    assert "Folders created: 2" in out
    assert "-> images/a.png" in out
    assert "Organization complete!" in out
    assert (tmp_path / "images" / "a.png").is_file()


def test_dry_run_flags(tmp_path: Path, make_files, capsys: pytest.CaptureFixture[str]) -> None:
    make_files("a.png")

    assert main(["-dir", str(tmp_path), "-d"]) == 0

    out = capsys.readouterr().out
    assert "DRY RUN (Preview only)" in out
    assert "No files were actually moved" in out
    assert "Files moved" not in out
    assert "Run without --dry-run" in out
    assert (tmp_path / "a.png").is_file()


def test_directory_option_wins_over_positional(tmp_path: Path, make_files) -> None:
    target = make_files("a.png", folder="target")
    ignored = make_files("b.png", folder="ignored")

    assert main([str(ignored), "--directory", str(target)]) == 0

    assert (target / "images" / "a.png").is_file()
    assert (ignored / "b.png").is_file()


def test_nothing_to_organize(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main([str(tmp_path)]) == 0
    assert "No files needed organization" in capsys.readouterr().out


def test_errors_are_listed(
    tmp_path: Path, make_files, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    make_files("stuck.txt")

    def _rename(self, target):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "rename", _rename)

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert "Errors: 1" in out
    assert "stuck.txt:" in out


def test_mappings_printed_before_errors(
    tmp_path: Path, make_files, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    make_files("stuck.txt", "ok.png")
    real_rename = Path.rename

    def _rename(self, target):
        if self.name == "stuck.txt":
            raise PermissionError(13, "Permission denied", str(self))
        return real_rename(self, target)

    monkeypatch.setattr(Path, "rename", _rename)

    assert main([str(tmp_path)]) == 0

    out = capsys.readouterr().out
    assert out.index("-> images/ok.png") < out.index("Errors: 1")


def test_symlinked_folder_keeps_given_name(tmp_path: Path, make_files) -> None:
    make_files("a.png", folder="stuff")
    link = tmp_path / "images"
    link.symlink_to(tmp_path / "stuff", target_is_directory=True)

    assert main([str(link)]) == 0

    assert (tmp_path / "stuff" / "a.png").is_file()
