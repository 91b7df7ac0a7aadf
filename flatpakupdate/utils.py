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
import shutil
import socket
from typing import Iterable, List, Optional


class MissingDependencyError(Exception):
    """Some required executables are not available."""
    def __init__(self, missing: List[str]):
        super().__init__(
            "Missing required dependencies: " + " ".join(missing))
        self.missing = missing


def check_dependencies(
        tools: Iterable[str], log: Optional[logging.Logger] = None):
    """
    Make sure all tools are on PATH.

    :raises MissingDependencyError: listing every missing tool
    """
    missing = [tool for tool in tools if shutil.which(tool) is None]
    if missing:
        error = MissingDependencyError(missing)
        if log:
            log.error("%s", error)
        raise error
    if log:
        log.info("All dependencies are installed")


def get_hostname() -> str:
    return socket.getfqdn()
