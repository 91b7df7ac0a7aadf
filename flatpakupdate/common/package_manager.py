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
""" package manager base class """
import subprocess
from typing import List, Optional

from .monitored_command import MonitoredCommand, DirectCommand, LoggedCommand
from .process_result import ProcessResult
from .progress_reporter import ProgressReporter, NetworkRateSampler


class ScanError(Exception):
    """The update check could not be run at all."""


class PackageManager:
    """ main package manager class """
    CHECK_TIMEOUT = 30

    def __init__(self, log, workspace, direct: bool = False,
                 show_rate: bool = False):
        self.package_manager: Optional[str] = None
        self.log = log
        self.workspace = workspace
        self.direct = direct
        self.show_rate = show_rate

    def get_updates(self) -> List[str]:
        """
        Return identifiers of packages with a pending update.

        A timeout or a non-zero exit code of the check is only reported,
        the captured output is parsed anyway.

        :raises ScanError: if the check command cannot be run
        """
        self.log.info("Running %s update check "
                      "(this may take a moment)...", self.package_manager)
        with ProgressReporter("Checking for updates", self.log,
                              sampler=self._sampler()):
            try:
                result = self.run_check()
            except OSError as exc:
                raise ScanError(
                    f"Cannot run {self.package_manager}: {exc}") from exc

        if result.timed_out:
            self.log.warning("Update check timed out after %d seconds",
                             self.CHECK_TIMEOUT)
        elif result.code:
            self.log.warning("Update check command exited with code: %d",
                             result.code)
        self.log.debug("Update check exit code: %d", result.code)

        output = result.text
        output_path = self.workspace.new_file(
            prefix=f"{self.package_manager}-scan-")
        output_path.write_text(output, encoding="utf-8")
        self.log.debug("Full update output saved to: %s", output_path)

        self.log.info("Parsing update output...")
        nothing_to_do = self.nothing_to_do(output)
        if nothing_to_do:
            self.log.info("No updates available")
        packages = self.parse_updates(output)
        if not packages and output.strip() and not nothing_to_do:
            self.workspace.keep(output_path)
            self.log.warning(
                "No updates parsed but output exists. Check %s for details",
                output_path)
        else:
            self.workspace.discard(output_path)

        for package in packages:
            self.log.info("Update available for: %s", package)
        self.log.info("Found %d update(s) available", len(packages))
        return packages

    def run_check(self) -> ProcessResult:
        """
        Run the update check declining any confirmation prompt.
        """
        cmd = self.get_check_cmd()
        self.log.debug("run command: %s", " ".join(cmd))
        with subprocess.Popen(cmd,
                              stdin=subprocess.PIPE,
                              stdout=subprocess.PIPE,
                              stderr=subprocess.STDOUT) as proc:
            return ProcessResult.process_communicate(
                proc, input_=b"n\n", timeout=self.CHECK_TIMEOUT)

    def update_package(self, package: str) -> int:
        """
        Update a single package, return exit code of the update command.
        """
        self.log.info("Starting update for: %s", package)
        command = self.get_update_command(package)
        return self.run_monitored(command, f"Updating {package}")

    def get_update_command(self, package: str) -> MonitoredCommand:
        cmd = self.get_update_cmd(package)
        if self.direct:
            return DirectCommand(cmd, self.log)
        return LoggedCommand(cmd, self.log, self.workspace, package)

    def run_monitored(self, command: MonitoredCommand, label: str) -> int:
        """
        Start the command and wait for it while reporting progress.
        """
        command.start()
        with ProgressReporter(label, self.log, is_alive=command.is_alive,
                              sampler=self._sampler()):
            try:
                return command.wait()
            except BaseException:
                command.terminate()
                raise

    def _sampler(self) -> Optional[NetworkRateSampler]:
        if not self.show_rate:
            return None
        return NetworkRateSampler()

    def get_check_cmd(self) -> List[str]:
        """
        Return command listing pending updates without applying them.
        """
        raise NotImplementedError()

    def get_update_cmd(self, package: str) -> List[str]:
        """
        Return command updating the package without asking.
        """
        raise NotImplementedError()

    def parse_updates(self, output: str) -> List[str]:
        """
        Return identifiers of updatable packages found in check output.
        """
        raise NotImplementedError()

    def nothing_to_do(self, output: str) -> bool:
        """
        Whether the check output says explicitly there is nothing to update.
        """
        return False
