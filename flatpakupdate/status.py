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
from enum import Enum
from typing import Iterable, List, Tuple


class FinalStatus(Enum):
    UPDATED = "updated"
    FAILED = "failed"

    def __bool__(self):
        return self == FinalStatus.UPDATED


class UpdateReport:
    """
    Outcome of updating every package of a single scan.

    Each package of `update_set` can be recorded only once, so after
    all of them are processed `updated` and `failed` partition it.
    """
    def __init__(self, update_set: Iterable[str]):
        self.update_set: Tuple[str, ...] = tuple(update_set)
        self.updated: List[str] = []
        self.failed: List[str] = []

    def record(self, package: str, status: FinalStatus):
        if package not in self.update_set:
            raise ValueError(f"{package} is not in the update set")
        if package in self.updated or package in self.failed:
            raise ValueError(f"{package} is already recorded")
        if status:
            self.updated.append(package)
        else:
            self.failed.append(package)

    @property
    def total(self) -> int:
        return len(self.update_set)

    @property
    def has_updates(self) -> bool:
        return bool(self.update_set)

    @property
    def complete(self) -> bool:
        return len(self.updated) + len(self.failed) == self.total

    @property
    def success_rate(self) -> int:
        """
        Percent of successfully updated packages, rounded down.
        """
        if not self.total:
            return 0
        return len(self.updated) * 100 // self.total
