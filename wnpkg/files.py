"""Small filesystem helpers used while preparing the build folder."""

from __future__ import annotations

import contextlib
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class FileType(Enum):
    """Kind of a directory entry."""

    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    name: str
    filetype: FileType

    @property
    def is_dir(self) -> bool:
        return self.filetype is FileType.DIR


def make_dir(path: PathLike) -> None:
    """Create a single directory with mode 0755; raise OSError on failure."""
    os.mkdir(path, 0o755)


def remove_dir(path: PathLike) -> None:
    """Remove an empty directory; raise OSError on failure."""
    os.rmdir(path)


def has_dir(path: PathLike) -> bool:
    """Tell whether *path* exists and is a directory."""
    return os.path.isdir(path)


def list_dir(path: PathLike) -> list[DirEntry]:
    """List the entries of *path*, without "." and "..".

    A directory that cannot be opened yields an empty list. Symbolic links
    are reported as files, whatever they point to.
    """
    try:
        with os.scandir(path) as it:
            return [
                DirEntry(
                    entry.name,
                    FileType.DIR if entry.is_dir(follow_symlinks=False) else FileType.FILE,
                )
                for entry in it
            ]
    except OSError:
        return []


def remove_tree(path: PathLike) -> None:
    """Remove *path* and everything under it, ignoring individual failures.

    Nothing happens when *path* is not a directory.
    """
    if not has_dir(path):
        return
    root = Path(path)
    for entry in list_dir(root):
        child = root / entry.name
        if entry.is_dir:
            remove_tree(child)
        else:
            with contextlib.suppress(OSError):
                child.unlink()
    with contextlib.suppress(OSError):
        remove_dir(root)