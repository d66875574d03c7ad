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
# Filename: src/report_writer.py

"""
Append-only CSV report writers.

A `ReportWriter` owns one output file for its whole lifetime and turns each
dataclass record into one CSV row. The header row is taken from the record's
field names and written on the first append, so a report that never receives
a row stays empty. Booleans are written as `true`/`false`.
"""

import csv
import dataclasses
from dataclasses import dataclass
from pathlib import Path


class ReportWriteError(Exception):
    """Raised when a record cannot be serialized to its report."""


@dataclass(frozen=True)
class FolderRecord:
    """One row of the folder structure report."""

    path: str
    should_be_data_room: bool = False


def _format_value(value):
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


class ReportWriter:
    """Writes records of a single dataclass type to one CSV file."""

    def __init__(self, path, record_type):
        if not dataclasses.is_dataclass(record_type):
            raise TypeError(f"{record_type!r} is not a dataclass type.")
        self.path = Path(path)
        self.record_type = record_type
        self.fieldnames = [field.name for field in dataclasses.fields(record_type)]
        self.rows_written = 0
        self._header_written = False
        # Created (or truncated) once; OSError propagates to the caller.
        self._file = open(self.path, "w", encoding="utf-8", newline="")
        self._writer = csv.DictWriter(self._file, fieldnames=self.fieldnames, lineterminator="\n")

    def append(self, record):
        """Serializes one record as one row, writing the header on first use."""
        if not isinstance(record, self.record_type):
            raise ReportWriteError(
                f"Expected a {self.record_type.__name__} record for '{self.path.name}', "
                f"got {type(record).__name__}."
            )
        if self._file.closed:
            raise ReportWriteError(f"Report '{self.path.name}' is already closed.")

        row = {name: _format_value(getattr(record, name)) for name in self.fieldnames}
        try:
            if not self._header_written:
                self._writer.writeheader()
                self._header_written = True
            self._writer.writerow(row)
        except (OSError, csv.Error, UnicodeError) as e:
            raise ReportWriteError(f"Failed to write to '{self.path.name}': {e}") from e
        self.rows_written += 1

    def flush(self):
        if not self._file.closed:
            self._file.flush()

    def close(self):
        if not self._file.closed:
            self._file.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

# === End of src/report_writer.py ===
