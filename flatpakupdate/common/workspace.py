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
import os
import tempfile
from pathlib import Path
from typing import List, Optional


class Workspace:
    """
    Registry of temporary files created during a single run.

    Every file handed out by `new_file` (or registered with `track`)
    is removed by `cleanup` unless it was released with `keep`.
    """

    def __init__(self, log, directory: Optional[str] = None):
        self.log = log
        self.directory = directory
        self._files: List[Path] = []

    def new_file(self, prefix: str, suffix: str = ".log") -> Path:
        """
        Create an empty temporary file and start tracking it.
        """
        fd, name = tempfile.mkstemp(
            prefix=prefix, suffix=suffix, dir=self.directory)
        os.close(fd)
        return self.track(Path(name))

    def track(self, path: Path) -> Path:
        if path not in self._files:
            self._files.append(path)
        return path

    def keep(self, path: Path):
        """
        Stop tracking the file, it will survive `cleanup`.
        """
        if path in self._files:
            self._files.remove(path)

    def discard(self, path: Path):
        """
        Remove the file now.
        """
        self.keep(path)
        self._remove(path)

    def cleanup(self):
        self.log.debug("Cleaning up temporary files...")
        while self._files:
            self._remove(self._files.pop())

    def _remove(self, path: Path):
        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as exc:
            # best effort, leftovers are in the system temporary directory
            self.log.debug("Could not remove %s: %s", path, exc)

    @property
    def files(self) -> List[Path]:
        return list(self._files)
