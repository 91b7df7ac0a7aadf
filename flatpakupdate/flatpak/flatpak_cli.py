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

from typing import List

from ..common.package_manager import PackageManager
from . import parser


class FlatpakCLI(PackageManager):
    def __init__(self, log, workspace, direct: bool = False,
                 show_rate: bool = False):
        super().__init__(log, workspace, direct=direct, show_rate=show_rate)
        self.package_manager: str = "flatpak"

    def get_check_cmd(self) -> List[str]:
        """
        Without `-y` flatpak prints the summary and asks for confirmation.
        """
        return [self.package_manager, "update"]

    def get_update_cmd(self, package: str) -> List[str]:
        return [self.package_manager, "update", "-y", package]

    def parse_updates(self, output: str) -> List[str]:
        return parser.parse_update_output(output)

    def nothing_to_do(self, output: str) -> bool:
        return parser.nothing_to_do(output)
