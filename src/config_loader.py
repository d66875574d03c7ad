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
# Filename: src/config_loader.py

"""
Configuration Loader (config_loader.py)

Loads the optional `config.ini` that tunes the ambient behaviour of the audit
(progress bar, log level, report directory). The maximum name length is not
configurable and is never read from here.

Global Objects Provided:
-   `PROJECT_ROOT`: An absolute path to the project's root directory.
-   `APP_CONFIG`: A `configparser.ConfigParser` instance holding all data from
    `config.ini` (empty if the file is absent).

Usage by other scripts:
    from config_loader import APP_CONFIG, get_config_value

    show_progress = get_config_value(APP_CONFIG, 'Audit', 'show_progress',
                                     value_type=bool, fallback=True)
"""

import configparser
import os
import logging
import pathlib
import re

CONFIG_FILENAME = "config.ini"
CONFIG_OVERRIDE_ENV = "DATAROOM_AUDIT_CONFIG"
INLINE_COMMENT_RE = re.compile(r"(^|\s)[;#].*$", re.DOTALL)

logger = logging.getLogger(__name__)


def get_project_root() -> str:
    """
    Determines the project root by searching upwards for pyproject.toml.
    Falls back to the current working directory for non-editable installs.
    """
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return os.getcwd()

PROJECT_ROOT = get_project_root()

def load_app_config(config_path=None):
    config = configparser.ConfigParser()

    # An explicit override is used for sandboxed testing.
    if config_path is None:
        override_path = os.getenv(CONFIG_OVERRIDE_ENV)
        if override_path and os.path.exists(override_path):
            config_path = override_path
            logger.debug(f"Using override config from env var: {config_path}")
        else:
            config_path = os.path.join(PROJECT_ROOT, CONFIG_FILENAME)

    if os.path.exists(config_path):
        try:
            # 'utf-8-sig' tolerates a BOM written by Windows editors.
            config.read(config_path, encoding='utf-8-sig')
            logger.debug(f"Successfully loaded configuration from: {config_path}")
        except configparser.Error as e:
            logger.error(f"Error parsing configuration file {config_path}: {e}")
    else:
        logger.debug(f"{CONFIG_FILENAME} not found at {config_path}. Using fallbacks.")

    return config

def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str):
    """
    Helper to get a typed value from a configparser.ConfigParser object,
    with a fallback, type conversion, and stripping of inline comments.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: The value to return if the key is missing or conversion fails.
        value_type (type): The expected type (str, int, bool).

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_section(section) or not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)

    # Strip inline comments such as "value ; comment" or "value # comment".
    # A '#' or ';' inside a value (e.g. "exports/#2024") is kept.
    cleaned_value = INLINE_COMMENT_RE.sub('', raw_value).strip()

    if value_type == str:
        return cleaned_value
    elif value_type == int:
        try:
            return int(cleaned_value)
        except ValueError:
            logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                           f"to int. Using fallback: {fallback}")
            return fallback
    elif value_type == bool:
        lowered = cleaned_value.lower()
        if lowered in configparser.ConfigParser.BOOLEAN_STATES:
            return configparser.ConfigParser.BOOLEAN_STATES[lowered]
        logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                       f"to bool. Using fallback: {fallback}")
        return fallback
    else:
        logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
        return fallback

# Global config object, loaded once
APP_CONFIG = load_app_config()

# === End of src/config_loader.py ===
