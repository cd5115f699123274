import pytest

from rustcraft.directory import DirectoryIterator, main


def test_nonexisting_directory(tmp_path):
    with pytest.raises(OSError):
        DirectoryIterator(str(tmp_path / "no-such-directory"))


def test_empty_directory(tmp_path):
    entries = sorted(DirectoryIterator(str(tmp_path)))
    assert entries == [".", ".."]


def test_nonempty_directory(tmp_path):
    (tmp_path / "foo.txt").write_text("The Foo Diaries\n")
    (tmp_path / "bar.png").write_text("<PNG>\n")
    (tmp_path / "crab.rs").write_text("//! Crab\n")
    entries = sorted(DirectoryIterator(str(tmp_path)))
    assert entries == [".", "..", "bar.png", "crab.rs", "foo.txt"]


def test_nul_in_path_is_rejected():
    with pytest.raises(ValueError):
        DirectoryIterator("bad\0path")


def test_close_stops_iteration(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    with DirectoryIterator(tmp_path) as entries:
        assert next(entries) == "."
    assert list(entries) == []


def test_bytes_path_yields_bytes(tmp_path):
    (tmp_path / "x").write_text("x")
    entries = sorted(DirectoryIterator(str(tmp_path).encode()))
    assert entries == [b".", b"..", b"x"]


def test_main_lists_entries(tmp_path, capsys):
    (tmp_path / "listed.txt").write_text("x")
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "'listed.txt'" in out


def test_main_reports_missing_directory(tmp_path, capsys):
    assert main([str(tmp_path / "missing")]) == 1
    assert capsys.readouterr().err