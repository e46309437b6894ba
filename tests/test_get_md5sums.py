from __future__ import annotations

import os
from pathlib import Path

import pytest

from conftest import make_data_dir
from somaver.digest import get_md5sums, md5_bytes
from somaver.errors import DataDirectoryNotFoundError, SomaverError, UnexpectedEntryError


def test_one_entry_per_file_keyed_by_absolute_path(tmp_path: Path):
    data_dir = make_data_dir(tmp_path, {"b.txt": b"bravo", "a.txt": b"alpha", "c.bin": b"\x00\x01"})

    md5sums = get_md5sums(tmp_path, "demo", "1.0.0")

    expected_keys = [str((data_dir / f).absolute()) for f in ("a.txt", "b.txt", "c.bin")]
    # ordered by file name
    assert list(md5sums) == expected_keys
    assert all(os.path.isabs(k) for k in md5sums)
    assert md5sums[expected_keys[0]] == md5_bytes(b"alpha")
    assert md5sums[expected_keys[2]] == md5_bytes(b"\x00\x01")


def test_relative_root_still_yields_absolute_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    make_data_dir(tmp_path, {"x.txt": b"x"})
    monkeypatch.chdir(tmp_path)

    md5sums = get_md5sums(".", "demo", "1.0.0")

    (key,) = md5sums
    assert os.path.isabs(key)
    assert Path(key).resolve() == (tmp_path / "demo" / "1.0.0" / "data" / "x.txt").resolve()


def test_hash_is_content_addressed(tmp_path: Path):
    make_data_dir(tmp_path, {"one.txt": b"same bytes", "two.txt": b"same bytes", "three.txt": b"other"})

    md5sums = get_md5sums(tmp_path, "demo", "1.0.0")
    by_name = {Path(k).name: v for k, v in md5sums.items()}

    assert by_name["one.txt"] == by_name["two.txt"]
    assert by_name["one.txt"] != by_name["three.txt"]


def test_changing_one_byte_changes_only_that_digest(tmp_path: Path):
    data_dir = make_data_dir(tmp_path, {"a.txt": b"aaaa", "b.txt": b"bbbb"})
    before = get_md5sums(tmp_path, "demo", "1.0.0")

    (data_dir / "b.txt").write_bytes(b"bbbc")
    after = get_md5sums(tmp_path, "demo", "1.0.0")

    a_key = str((data_dir / "a.txt").absolute())
    b_key = str((data_dir / "b.txt").absolute())
    assert after[a_key] == before[a_key]
    assert after[b_key] != before[b_key]


def test_idempotent_on_unmodified_directory(tmp_path: Path):
    make_data_dir(tmp_path, {"a.txt": b"a", "b.txt": b"b"})

    first = get_md5sums(tmp_path, "demo", "1.0.0")
    second = get_md5sums(tmp_path, "demo", "1.0.0")

    assert first == second
    assert list(first) == list(second)
    assert first is not second


def test_empty_data_directory_gives_empty_mapping(tmp_path: Path):
    make_data_dir(tmp_path)
    assert get_md5sums(tmp_path, "demo", "1.0.0") == {}


def test_missing_directory_raises_not_found(tmp_path: Path):
    with pytest.raises(DataDirectoryNotFoundError, match="data directory not found"):
        get_md5sums(tmp_path, "demo", "9.9.9")

    # also catchable as the builtin category
    with pytest.raises(FileNotFoundError):
        get_md5sums(tmp_path, "absent", "1.0.0")


def test_version_folder_without_data_subdir_raises_not_found(tmp_path: Path):
    (tmp_path / "demo" / "1.0.0").mkdir(parents=True)
    with pytest.raises(DataDirectoryNotFoundError):
        get_md5sums(tmp_path, "demo", "1.0.0")


def test_subdirectory_is_rejected(tmp_path: Path):
    data_dir = make_data_dir(tmp_path, {"a.txt": b"a"})
    (data_dir / "nested").mkdir()

    with pytest.raises(UnexpectedEntryError, match="nested"):
        get_md5sums(tmp_path, "demo", "1.0.0")


def test_hidden_files_are_skipped(tmp_path: Path):
    make_data_dir(tmp_path, {"a.txt": b"a", ".DS_Store": b"junk"})

    md5sums = get_md5sums(tmp_path, "demo", "1.0.0")

    assert [Path(k).name for k in md5sums] == ["a.txt"]


@pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
def test_symlinked_file_is_hashed_by_target_content(tmp_path: Path):
    target = tmp_path / "elsewhere.txt"
    target.write_bytes(b"linked content")
    data_dir = make_data_dir(tmp_path)
    try:
        (data_dir / "link.txt").symlink_to(target)
    except OSError:
        pytest.skip("cannot create symlinks here")

    md5sums = get_md5sums(tmp_path, "demo", "1.0.0")

    assert md5sums == {str((data_dir / "link.txt").absolute()): md5_bytes(b"linked content")}


def test_invalid_name_or_version_is_rejected(tmp_path: Path):
    with pytest.raises(ValueError, match="name"):
        get_md5sums(tmp_path, "", "1.0.0")
    with pytest.raises(ValueError, match="version"):
        get_md5sums(tmp_path, "demo", "../1.0.0")


def test_errors_share_base_class():
    assert issubclass(DataDirectoryNotFoundError, SomaverError)
    assert issubclass(UnexpectedEntryError, SomaverError)


def test_unreadable_file_propagates_os_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    make_data_dir(tmp_path, {"a.txt": b"a"})

    def denied(path):
        raise PermissionError(f"permission denied: {path}")

    monkeypatch.setattr("somaver.digest.collect.md5_file", denied)

    with pytest.raises(PermissionError, match="a.txt"):
        get_md5sums(tmp_path, "demo", "1.0.0")
