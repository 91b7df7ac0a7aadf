# coding=utf-8
#
# flatpak-update - unattended Flatpak updates with Telegram reports
#
# Copyright (C) 2026  flatpak-update contributors
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the Free Software
# Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301,
# USA.

import logging
import sys

LOGGER_NAME = 'flatpak-update'
FORMAT_LOG = '[%(asctime)s] [%(levelname)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LEVEL_ALIASES = {"WARN": "WARNING"}


class _BelowWarning(logging.Filter):
    def filter(self, record):
        return record.levelno < logging.WARNING


def init_logs(
        level="INFO",
        format_=FORMAT_LOG,
        log_path=None,
        name=LOGGER_NAME,
):
    """
    Configure the updater logger.

    Debug and info messages go to stdout, warnings and errors to stderr.
    If `log_path` is given, everything is also written to that file.
    """
    log_formatter = logging.Formatter(format_, datefmt=DATE_FORMAT)

    out_handler = logging.StreamHandler(sys.stdout)
    out_handler.addFilter(_BelowWarning())
    err_handler = logging.StreamHandler(sys.stderr)
    err_handler.setLevel(logging.WARNING)
    handlers = [out_handler, err_handler]
    if log_path is not None:
        handlers.append(logging.FileHandler(log_path, encoding='utf-8'))

    log = logging.getLogger(name)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(log_formatter)
        log.addHandler(handler)
    log.propagate = False

    if isinstance(level, str):
        level = LEVEL_ALIASES.get(level.upper(), level.upper())
    try:
        # if loglevel is unknown just use `DEBUG`
        log.setLevel(level)
        log_level = level
    except (ValueError, TypeError):
        log_level = "DEBUG"
        log.setLevel(log_level)

    return log, log_level
