import os

import pytest

from wnpkg.files import (
    DirEntry,
    FileType,
    has_dir,
    list_dir,
    make_dir,
    remove_dir,
    remove_tree,
)


def test_make_dir_then_has_dir(tmp_path):
    target = tmp_path / "build"
    assert has_dir(target) is False
    make_dir(target)
    assert has_dir(target) is True


def test_make_dir_existing_raises(tmp_path):
    target = tmp_path / "build"
    make_dir(target)
    with pytest.raises(FileExistsError):
        make_dir(target)


def test_make_dir_missing_parent_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        make_dir(tmp_path / "a" / "b")


def test_has_dir_false_for_file(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("data")
    assert has_dir(f) is False


def test_remove_dir_removes_empty_directory(tmp_path):
    target = tmp_path / "empty"
    make_dir(target)
    remove_dir(target)
    assert has_dir(target) is False


def test_remove_dir_non_empty_raises(tmp_path):
    target = tmp_path / "full"
    make_dir(target)
    (target / "x").write_text("x")
    with pytest.raises(OSError):
        remove_dir(target)
    assert has_dir(target) is True


def test_list_dir_reports_names_and_types(tmp_path):
    (tmp_path / "index.js").write_text("")
    (tmp_path / "node_modules").mkdir()
    entries = sorted(list_dir(tmp_path), key=lambda e: e.name)
    assert entries == [
        DirEntry("index.js", FileType.FILE),
        DirEntry("node_modules", FileType.DIR),
    ]
    assert [e.is_dir for e in entries] == [False, True]


def test_list_dir_excludes_dot_entries(tmp_path):
    (tmp_path / "a").write_text("")
    names = {e.name for e in list_dir(tmp_path)}
    assert "." not in names and ".." not in names
    assert names == {"a"}


def test_list_dir_missing_directory_is_empty(tmp_path):
    assert list_dir(tmp_path / "missing") == []


def test_remove_tree_removes_nested_content(tmp_path):
    root = tmp_path / "wnpkg-build"
    (root / "source" / "deep").mkdir(parents=True)
    (root / "source" / "index.js").write_text("js")
    (root / "source" / "deep" / "f").write_text("f")
    (root / "top").write_text("t")
    remove_tree(root)
    assert not root.exists()


def test_remove_tree_missing_path_is_noop(tmp_path):
    remove_tree(tmp_path / "missing")
    assert list(tmp_path.iterdir()) == []


def test_remove_tree_leaves_file_argument_alone(tmp_path):
    f = tmp_path / "keep.txt"
    f.write_text("keep")
    remove_tree(f)
    assert f.read_text() == "keep"


def test_remove_tree_does_not_follow_symlinks(tmp_path):
    outside = tmp_path / "outside"
    outside.mkdir()
    (outside / "precious").write_text("p")
    root = tmp_path / "root"
    root.mkdir()
    os.symlink(outside, root / "link")
    remove_tree(root)
    assert not root.exists()
    assert (outside / "precious").read_text() == "p"