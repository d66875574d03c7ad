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
# Filename: src/audit_folder_structure.py

"""
Audits a directory tree before it is imported into a data room.

This script walks every folder and file below a root directory and produces
three CSV reports in the output directory (the current working directory by
default):

1.  `folder_structure.csv`: every folder, one row each, with a
    `should_be_data_room` column (always `false`) for later manual annotation.
2.  `folder_name_restrictions.csv`: folders whose name is longer than 150
    characters.
3.  `file_name_restrictions.csv`: files whose name is longer than 150
    characters.

Paths are written with '/' as the separator. Any failure to write a report
aborts the run with exit code 1; unreadable entries inside the tree are
skipped.

Usage:
    pdm run audit -- path/to/export

    # Write the reports somewhere else and hide the progress bar
    pdm run audit -- path/to/export --output-dir output/reports --quiet
"""

import argparse
import contextlib
import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from colorama import Fore, init
from tqdm import tqdm

# Ensure the src directory is in the Python path
sys.path.append(str(Path(__file__).resolve().parent))
from config_loader import APP_CONFIG, get_config_value  # noqa: E402
from report_writer import FolderRecord, ReportWriteError, ReportWriter  # noqa: E402
from restriction_checker import (  # noqa: E402
    RestrictionError,
    RestrictionRecord,
    check_restrictions,
)
from tree_walker import walk_tree  # noqa: E402

# Initialize colorama
init(autoreset=True)

FOLDER_STRUCTURE_FILENAME = "folder_structure.csv"
FOLDER_RESTRICTIONS_FILENAME = "folder_name_restrictions.csv"
FILE_RESTRICTIONS_FILENAME = "file_name_restrictions.csv"


@dataclass
class AuditSummary:
    folders: int = 0
    files: int = 0
    long_folder_names: int = 0
    long_file_names: int = 0


def run_audit(root_dir, output_dir=".", show_progress=False) -> AuditSummary:
    """
    Walks `root_dir` and writes the three audit reports into `output_dir`.

    All three reports are flushed and closed on every exit path.

    Raises:
        FileNotFoundError: If `root_dir` does not exist. No report is created.
        OSError: If a report cannot be created.
        ReportWriteError: If a folder structure row cannot be written.
        RestrictionError: If a restriction row cannot be written.
    """
    if not os.path.exists(root_dir):
        raise FileNotFoundError(f"Root directory not found: {root_dir}")

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    summary = AuditSummary()

    with contextlib.ExitStack() as stack:
        structure_writer = stack.enter_context(
            ReportWriter(output_dir / FOLDER_STRUCTURE_FILENAME, FolderRecord))
        folder_writer = stack.enter_context(
            ReportWriter(output_dir / FOLDER_RESTRICTIONS_FILENAME, RestrictionRecord))
        file_writer = stack.enter_context(
            ReportWriter(output_dir / FILE_RESTRICTIONS_FILENAME, RestrictionRecord))

        entries = tqdm(walk_tree(root_dir), desc="Scanning", unit=" entries",
                       ncols=80, disable=not show_progress)
        for entry in entries:
            if entry.is_dir:
                summary.folders += 1
                structure_writer.append(FolderRecord(path=entry.path, should_be_data_room=False))
                if check_restrictions(entry.name, entry.path, folder_writer):
                    summary.long_folder_names += 1
            elif entry.is_file:
                summary.files += 1
                if check_restrictions(entry.name, entry.path, file_writer):
                    summary.long_file_names += 1

        for writer in (structure_writer, folder_writer, file_writer):
            writer.flush()

    return summary


def resolve_log_level(name, default=logging.INFO) -> int:
    """Maps a level name such as 'debug' to its number; unknown names give `default`."""
    level = logging.getLevelName(str(name).strip().upper())
    if isinstance(level, int):
        return level
    logging.getLogger(__name__).warning(f"Unknown log_level '{name}' in config. Using {logging.getLevelName(default)}.")
    return default


def main():
    """Parses arguments, runs the audit, and reports the result."""
    parser = argparse.ArgumentParser(
        description="Export the folder structure of a directory tree and flag names that are too long for a data room.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("root_dir", help="The root directory to audit.")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for the CSV reports. Defaults to [Reports] output_dir in config.ini, or the current directory.",
    )
    parser.add_argument("--quiet", action="store_true", help="Hide the progress bar and informational logging.")
    parser.add_argument("--no-color", action="store_true", help="Disable colored console output.")
    args = parser.parse_args()

    log_level_name = get_config_value(APP_CONFIG, 'Audit', 'log_level', fallback='INFO')
    log_level = logging.WARNING if args.quiet else resolve_log_level(log_level_name)
    logging.basicConfig(level=log_level, format='%(levelname)s: %(message)s')

    C_GREEN, C_CYAN, C_RED = (Fore.GREEN, Fore.CYAN, Fore.RED)
    if args.no_color:
        C_GREEN, C_CYAN, C_RED = ('', '', '')

    output_dir = args.output_dir or get_config_value(APP_CONFIG, 'Reports', 'output_dir', fallback='.')
    show_progress = not args.quiet and get_config_value(
        APP_CONFIG, 'Audit', 'show_progress', value_type=bool, fallback=True)

    try:
        summary = run_audit(args.root_dir, output_dir=output_dir, show_progress=show_progress)
    except FileNotFoundError as e:
        logging.error(f"{C_RED}{e}")
        sys.exit(1)
    except RestrictionError as e:
        logging.error(f"{C_RED}Failed to record a name restriction: {e} ({e.__cause__})")
        sys.exit(1)
    except (ReportWriteError, OSError) as e:
        logging.error(f"{C_RED}Failed to write audit reports: {e}")
        sys.exit(1)

    logging.info(
        f"Scanned {summary.folders} folders and {summary.files} files; "
        f"{summary.long_folder_names} folder names and {summary.long_file_names} file names are too long."
    )
    print(f"{C_GREEN}Folder structure exported to '{FOLDER_STRUCTURE_FILENAME}'.")
    print(f"{C_CYAN}Too long folder and file names are exported to "
          f"'{FOLDER_RESTRICTIONS_FILENAME}' and '{FILE_RESTRICTIONS_FILENAME}'.")


if __name__ == "__main__":
    main()

# === End of src/audit_folder_structure.py ===
