"""Tests for file discovery and directory validation."""

import pytest

from tvrename.utils.file_util import RenameInputError, collect_media_files, require_directory


def _touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x")
    return path


def test_collects_video_files_recursively_and_sorted(tmp_path):
    _touch(tmp_path / "b.mkv")
    _touch(tmp_path / "disc2" / "a.MKV")
    _touch(tmp_path / "disc1" / "c.mp4")
    _touch(tmp_path / "notes.txt")
    _touch(tmp_path / "cover.jpg")

    found = collect_media_files(tmp_path)

    assert [f.path.relative_to(tmp_path.resolve()).as_posix() for f in found] == [
        "b.mkv",
        "disc1/c.mp4",
        "disc2/a.MKV",
    ]
    assert all(f.path.is_absolute() for f in found)


def test_already_renamed_files_are_left_out(tmp_path):
    _touch(tmp_path / "Show S01E01 Pilot.mkv")
    _touch(tmp_path / "title_t01.mkv")

    found = collect_media_files(tmp_path, "Show")

    assert [f.path.name for f in found] == ["title_t01.mkv"]


def test_require_directory(tmp_path):
    assert require_directory(str(tmp_path)) == tmp_path.resolve()

    with pytest.raises(RenameInputError):
        require_directory(None)
    with pytest.raises(RenameInputError, match="does not exist"):
        require_directory(tmp_path / "missing")
    with pytest.raises(RenameInputError, match="Not a directory"):
        require_directory(_touch(tmp_path / "file.mkv"))


def test_renamed_files_with_sanitized_series_name_are_left_out(tmp_path):
    _touch(tmp_path / "Marvels Agents of SHIELD S01E01 Pilot.mkv")
    _touch(tmp_path / "title_t02.mkv")

    found = collect_media_files(tmp_path, "Marvel's Agents of S.H.I.E.L.D.")

    assert [f.path.name for f in found] == ["title_t02.mkv"]


def test_series_name_without_safe_characters_keeps_everything(tmp_path):
    _touch(tmp_path / "title_t01.mkv")

    assert [f.path.name for f in collect_media_files(tmp_path, "!!!")] == ["title_t01.mkv"]
