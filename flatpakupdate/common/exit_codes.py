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
from dataclasses import dataclass


@dataclass(frozen=True)
class EXIT:
    OK = 0

    ERR = 1
    ERR_CONFIG = 1  # required environment variable is missing
    ERR_DEPENDENCY = 1  # required executable is not on PATH
    ERR_SCAN = 1  # unable to run the update check at all
    ERR_UPDATE = 1  # at least one package failed to update
    ERR_NOTIFY = 1  # report could not be delivered

    SIGINT = 130
    SIGTERM = 143
