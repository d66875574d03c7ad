#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Data Room Name-Length Audit
# Copyright (C) 2025 Peter J. Marko
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/tree_walker.py

"""
Lazy, depth-first enumeration of a directory tree.

`walk_tree()` yields the root first and then every reachable descendant in
pre-order, with the children of each directory sorted by name so that repeated
runs over an unchanged tree produce identical reports.

Entries whose metadata cannot be read (permission errors, entries removed
mid-walk, broken links) are skipped silently rather than failing the whole
walk. Symbolic links below the root are never followed and are not reported.
"""

import enum
import logging
import os
from dataclasses import dataclass
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class EntryKind(enum.Enum):
    DIRECTORY = "directory"
    FILE = "file"


@dataclass(frozen=True)
class FilesystemEntry:
    """One directory or file produced by the walker."""

    path: str
    name: str
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is EntryKind.FILE


def to_display_text(text: str) -> str:
    """Replaces undecodable filename bytes with U+FFFD so the text is valid UTF-8."""
    return os.fsencode(text).decode("utf-8", errors="replace")


def normalize_separators(path: str) -> str:
    """Uses '/' as the only directory separator."""
    path = path.replace(os.sep, "/")
    if os.altsep:
        path = path.replace(os.altsep, "/")
    return path


def _make_entry(path: str, name: str, kind: EntryKind) -> FilesystemEntry:
    return FilesystemEntry(
        path=normalize_separators(to_display_text(path)),
        name=to_display_text(name),
        kind=kind,
    )


def _root_name(root: str) -> str:
    name = os.path.basename(os.path.normpath(root))
    # A filesystem root such as '/' has no final component.
    return name or root


def _classify(dir_entry: os.DirEntry) -> Optional[EntryKind]:
    """Returns the entry kind, or None for links, special files and unreadable entries."""
    try:
        if dir_entry.is_symlink():
            return None
        if dir_entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if dir_entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError as e:
        logger.debug(f"Skipping unreadable entry {dir_entry.path!r}: {e}")
    return None


def _sorted_children(directory: str) -> list:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda child: child.name)
    except OSError as e:
        logger.debug(f"Skipping contents of {directory!r}: {e}")
        return []


def _walk_children(directory: str) -> Iterator[FilesystemEntry]:
    # Explicit stack of pending children so depth is not bound by the recursion limit.
    stack = [iter(_sorted_children(directory))]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue
        kind = _classify(child)
        if kind is None:
            continue
        yield _make_entry(child.path, child.name, kind)
        if kind is EntryKind.DIRECTORY:
            stack.append(iter(_sorted_children(child.path)))


def walk_tree(root: str) -> Iterator[FilesystemEntry]:
    """
    Yields a FilesystemEntry for `root` and for everything beneath it.

    The root itself is resolved through a symlink if it is one. A root that
    cannot be stat'ed yields nothing; a root directory that cannot be listed
    yields only itself.

    Args:
        root (str): The directory (or file) to start from, as given by the user.
    """
    root = os.fspath(root)
    if os.path.isdir(root):
        kind = EntryKind.DIRECTORY
    elif os.path.isfile(root):
        kind = EntryKind.FILE
    else:
        logger.debug(f"Root {root!r} is not a readable directory or file.")
        return

    yield _make_entry(root, _root_name(root), kind)
    if kind is EntryKind.DIRECTORY:
        yield from _walk_children(root)

# === End of src/tree_walker.py ===
