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
# Filename: src/restriction_checker.py

"""
Name restriction rules for data room imports.

The only rule is a maximum name length of 150 characters, counted in Unicode
code points. A violating name is recorded as a `RestrictionRecord` in the
report writer passed in by the caller.
"""

import enum
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

sys.path.append(str(Path(__file__).resolve().parent))
from report_writer import ReportWriteError  # noqa: E402

MAX_LENGTH = 150


class RestrictionKind(enum.Enum):
    MAXIMUM_CHARACTERS = f"Maximum characters of {MAX_LENGTH} reached"
    CSV_WRITER_ERROR = "CSV Error"

    def __str__(self):
        return self.value


class RestrictionError(Exception):
    """A restriction check that could not be recorded."""

    def __init__(self, kind: RestrictionKind = RestrictionKind.CSV_WRITER_ERROR):
        super().__init__(kind.value)
        self.kind = kind


@dataclass(frozen=True)
class RestrictionRecord:
    """One row of a folder or file name restriction report."""

    path: str
    restriction: str


def exceeds_max_length(name: str) -> bool:
    return len(name) > MAX_LENGTH


def check_restrictions(name: str, path: str, writer) -> Optional[RestrictionRecord]:
    """
    Records `path` in `writer` if `name` breaks a restriction.

    Args:
        name (str): The base name of the folder or file.
        path (str): The full path written to the report.
        writer (ReportWriter): The restriction report to append to.

    Returns:
        The record that was written, or None if the name is acceptable.

    Raises:
        RestrictionError: If the record could not be written.
    """
    if not exceeds_max_length(name):
        return None

    record = RestrictionRecord(path=path, restriction=RestrictionKind.MAXIMUM_CHARACTERS.value)
    try:
        writer.append(record)
    except (ReportWriteError, OSError) as e:
        raise RestrictionError(RestrictionKind.CSV_WRITER_ERROR) from e
    return record

# === End of src/restriction_checker.py ===
