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
"""
Adapters running a single package manager command in a child process.

Both adapters expose the same capability interface, so one control loop
(`PackageManager.run_monitored`) drives them and the progress reporter.
"""
import re
import subprocess
import threading
from collections import deque
from pathlib import Path
from typing import List, Optional

from .exit_codes import EXIT
from .process_result import ProcessResult


class MonitoredCommand:
    """
    Command started in the background and waited for by the caller.
    """
    def __init__(self, command: List[str], log):
        self.command = command
        self.log = log
        self.proc: Optional[subprocess.Popen] = None
        self._running = False

    def start(self):
        raise NotImplementedError()

    def is_alive(self) -> bool:
        return self._running

    def wait(self) -> int:
        """
        Block until the command finishes and return its exit code.
        """
        raise NotImplementedError()

    def terminate(self):
        if self.proc is not None and self.proc.poll() is None:
            self.log.debug("Terminating: %s", " ".join(self.command))
            self.proc.terminate()


class DirectCommand(MonitoredCommand):
    """
    Exit code of the command decides the outcome, output is only logged.
    """
    def start(self):
        self.log.debug("run command: %s", " ".join(self.command))
        self.proc = subprocess.Popen(
            self.command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
        self._running = True

    def wait(self) -> int:
        try:
            result = ProcessResult.process_communicate(self.proc)
        finally:
            self._running = False
        if result:
            for line in result.out.splitlines():
                self.log.debug("%s out: %s", self.command[0], line)
        self.log.debug("command exit code: %i", result.code)
        return result.code


class LoggedCommand(MonitoredCommand):
    """
    Stream output into a log file, echo progress lines as they come.

    A worker thread copies the output of the child line by line
    and writes its exit code to a sidecar file once it terminates.
    The log is removed after a successful run; on failure it is kept
    until the workspace is cleaned up and its tail is logged.
    """
    PROGRESS_LINE = re.compile(
        r"(downloading|Installing|Updating|[0-9]+%|[0-9]+\.[0-9]+ [kMG]B"
        r"|Receiving)")
    TAIL_LINES = 3

    def __init__(self, command: List[str], log, workspace, name: str):
        super().__init__(command, log)
        self.workspace = workspace
        self.name = name
        self.log_path: Optional[Path] = None
        self.exit_code_path: Optional[Path] = None
        self._worker: Optional[threading.Thread] = None

    def start(self):
        safe_name = self.name.replace("/", "_")
        self.log_path = self.workspace.new_file(
            prefix=f"flatpak-update-{safe_name}-", suffix=".log")
        self.exit_code_path = self.workspace.track(
            self.log_path.with_name(self.log_path.name + ".exitcode"))

        self.log.debug("run command: %s", " ".join(self.command))
        self.proc = subprocess.Popen(
            self.command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
        )
        self._worker = threading.Thread(
            target=self._stream, name=f"output {self.name}", daemon=True)
        self._worker.start()

    def _stream(self):
        with open(self.log_path, "w", encoding="utf-8") as log_file:
            for chunk in self.proc.stdout:
                # a chunk ends at a newline; carriage-return redraws of a
                # progress bar inside it are split into separate lines
                for part in chunk.split(b"\r"):
                    line = ProcessResult.sanitize_output(part, single=True)
                    if not line.strip():
                        continue
                    log_file.write(line + "\n")
                    log_file.flush()
                    if self.PROGRESS_LINE.search(line):
                        self.log.info("%s: %s", self.name, line.strip())
        code = self.proc.wait()
        self.exit_code_path.write_text(f"{code}\n")

    def is_alive(self) -> bool:
        return self._worker is not None and self._worker.is_alive()

    def terminate(self):
        """
        Stop the child and wait until the worker has written the sidecar,
        so a following cleanup removes it.
        """
        super().terminate()
        if self._worker is not None:
            self._worker.join()

    def wait(self) -> int:
        self._worker.join()
        code = self._read_exit_code()
        self.log.debug("command exit code: %i", code)

        if code == EXIT.OK:
            self.workspace.discard(self.log_path)
        elif self.log_path.exists():
            self.log.debug("Error details: %s", " | ".join(self.tail()))
        return code

    def _read_exit_code(self) -> int:
        try:
            return int(self.exit_code_path.read_text().strip())
        except (OSError, ValueError):
            # the worker died before the child finished
            return EXIT.ERR
        finally:
            self.workspace.discard(self.exit_code_path)

    def tail(self) -> List[str]:
        with open(self.log_path, encoding="utf-8") as log_file:
            return list(deque(
                (line.rstrip("\n") for line in log_file),
                maxlen=self.TAIL_LINES))
