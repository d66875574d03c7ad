#!/usr/bin/env python3
# -*- coding: utf-8 -*-
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
# Filename: tests/conftest.py

import sys
import os

# Add the 'src' directory to the Python path
# This ensures that modules like 'tree_walker', 'report_writer', etc.,
# are imported by their top-level names, the same way the scripts import
# each other, so exception classes and patch targets are shared.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
src_path = os.path.join(project_root, 'src')

if src_path not in sys.path:
    sys.path.insert(0, src_path)

import pytest

# test_deeply_nested_tree_is_fully_walked builds a 1200-level tree; pytest's
# recursive tmp-dir cleanup (shutil.rmtree) needs headroom to delete it.
if sys.getrecursionlimit() < 5000:
    sys.setrecursionlimit(5000)


@pytest.fixture
def make_tree(tmp_path):
    """
    Builds a directory tree under tmp_path/'root' from a list of relative paths.
    Paths ending in '/' become directories, everything else an empty file.
    """
    def _make(relative_paths):
        root = tmp_path / "root"
        root.mkdir()
        for rel in relative_paths:
            target = root / rel
            if rel.endswith("/"):
                target.mkdir(parents=True, exist_ok=True)
            else:
                target.parent.mkdir(parents=True, exist_ok=True)
                target.touch()
        return root
    return _make


@pytest.fixture
def output_dir(tmp_path):
    """A separate directory for reports, outside the audited tree."""
    out = tmp_path / "reports"
    out.mkdir()
    return out

# === End of tests/conftest.py ===
