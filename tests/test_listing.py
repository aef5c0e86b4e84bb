import pytest

from helixkit.listing import BadDirectory, ListDirectoryError, list_directory


def test_lists_all_entries(tmp_path):
    names = ["a.txt", "b", ".hidden"]
    for name in names:
        (tmp_path / name).write_text("x")
    (tmp_path / "sub").mkdir()
    assert sorted(list_directory(str(tmp_path))) == sorted(names + ["sub"])


def test_empty_directory(tmp_path):
    assert list_directory(str(tmp_path)) == []


def test_missing_directory_raises(tmp_path):
    with pytest.raises(BadDirectory):
        list_directory(str(tmp_path / "missing"))


def test_file_is_not_a_directory(tmp_path):
    target = tmp_path / "file"
    target.write_text("x")
    with pytest.raises(ListDirectoryError):
        list_directory(str(target))