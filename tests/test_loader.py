import os

import pytest

from ship_assembler.loader import PartsFileNotFoundError, PartsFileUnreadableError, load_lines


def test_load_lines_preserves_order_and_strips_newlines(tmp_path, capsys) -> None:
    path = tmp_path / "parts.txt"
    path.write_text("big engine\n\ncozy cabin\r\nlaser weapon\n", encoding="utf-8")

    lines = load_lines(str(path))

    assert lines == ["big engine", "", "cozy cabin", "laser weapon"]
    assert capsys.readouterr().out == f"Parts loaded from: {path}\n"


def test_load_lines_quiet(tmp_path, capsys) -> None:
    path = tmp_path / "parts.txt"
    path.write_text("wide wings", encoding="utf-8")
    assert load_lines(str(path), announce=False) == ["wide wings"]
    assert capsys.readouterr().out == ""


def test_load_lines_empty_file(tmp_path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    assert load_lines(str(path), announce=False) == []


def test_missing_file_names_path(tmp_path) -> None:
    path = tmp_path / "nope.txt"
    with pytest.raises(PartsFileNotFoundError) as excinfo:
        load_lines(str(path))
    assert str(path) in str(excinfo.value)
    assert "does not exist" in str(excinfo.value)
    assert isinstance(excinfo.value, FileNotFoundError)


def test_directory_is_unreadable(tmp_path) -> None:
    with pytest.raises(PartsFileUnreadableError) as excinfo:
        load_lines(str(tmp_path))
    assert "could not be opened" in str(excinfo.value)
    assert excinfo.value.__cause__ is not None


@pytest.mark.skipif(not hasattr(os, "geteuid") or os.geteuid() == 0, reason="root can read anything")
def test_permission_denied_is_unreadable(tmp_path) -> None:
    path = tmp_path / "locked.txt"
    path.write_text("big engine\n", encoding="utf-8")
    path.chmod(0)
    try:
        with pytest.raises(PartsFileUnreadableError):
            load_lines(str(path))
    finally:
        path.chmod(0o644)


def test_non_utf8_bytes_are_tolerated(tmp_path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"big engine\ncaf\xe9 weapon\n")

    lines = load_lines(str(path), announce=False)

    assert lines[0] == "big engine"
    assert lines[1].startswith("caf") and lines[1].endswith(" weapon")
