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

from typing import Iterable

from .common.exit_codes import EXIT
from .status import FinalStatus, UpdateReport


class UpdateManager:
    """
    Update packages one by one and collect the outcome.
    """

    def __init__(self, packages: Iterable[str], package_manager, log):
        self.packages = tuple(packages)
        self.package_manager = package_manager
        self.log = log

    def run(self) -> UpdateReport:
        """
        Run `update_package` for all packages, a failure does not stop
        the remaining ones.
        """
        report = UpdateReport(self.packages)
        if not self.packages:
            self.log.info("No packages to update")
            return report

        self.log.info("Starting update process for %d package(s)",
                      len(self.packages))
        for package in self.packages:
            try:
                code = self.package_manager.update_package(package)
            except Exception as exc:  # pylint: disable=broad-except
                self.log.error("Failed to update: %s (%s)", package, exc)
                report.record(package, FinalStatus.FAILED)
                continue
            self.collect_result(report, package, code)

        self.log.info("Update process completed")
        self.log.info("Successfully updated: %d package(s)",
                      len(report.updated))
        self.log.info("Failed to update: %d package(s)", len(report.failed))
        return report

    def collect_result(self, report: UpdateReport, package: str, code: int):
        if code == EXIT.OK:
            report.record(package, FinalStatus.UPDATED)
            self.log.info("Successfully updated: %s", package)
        else:
            report.record(package, FinalStatus.FAILED)
            self.log.error("Failed to update: %s (exit code: %d)",
                           package, code)
