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
import io
import subprocess
from unittest.mock import Mock

import pytest

from flatpakupdate.common.workspace import Workspace

ENVIRON = {
    "TELEGRAM_BOT_TOKEN": "123:secret",
    "TELEGRAM_CHAT_ID": "-1001",
    "FLATPAK_HOSTNAME": "desktop.example.org",
}

SCAN_TWO_UPDATES = b"""\
Looking for updates...

        ID                     Branch    Op   Remote    Download
 1.     org.app.One            stable    u    flathub   < 12.3 MB
 2.     org.app.Two            stable    u    flathub   < 1.1 MB

Proceed with these changes to the system installation? [Y/n]: n
"""


class FakePopen:
    """
    Finished process with prepared output, enough for `subprocess.Popen`
    users in the updater.
    """
    def __init__(self, args, output=b"", returncode=0, timeout=False):
        self.args = args
        self.stdout = io.BytesIO(output)
        self.returncode = None
        self._returncode = returncode
        self._timeout = timeout
        self.killed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def communicate(self, input=None, timeout=None):
        if self._timeout and not self.killed:
            raise subprocess.TimeoutExpired(self.args, timeout)
        out = self.stdout.read()
        self.returncode = -9 if self.killed else self._returncode
        return out, None

    def wait(self, timeout=None):
        self.returncode = self._returncode
        return self.returncode

    def poll(self):
        return self.returncode

    def kill(self):
        self.killed = True

    def terminate(self):
        self.killed = True


class FakeFlatpak:
    """
    Stand-in for `subprocess.Popen` answering like the flatpak CLI.

    `updates` maps package to (output, exit code) of `flatpak update -y`.
    """
    def __init__(self):
        self.check_output = b"Looking for updates...\nNothing to do.\n"
        self.check_returncode = 0
        self.check_timeout = False
        self.updates = {}
        self.missing = False
        self.calls = []

    def __call__(self, args, **_kwargs):
        self.calls.append(list(args))
        if self.missing:
            raise FileNotFoundError(2, "No such file or directory", args[0])
        if "-y" not in args:
            return FakePopen(args, self.check_output, self.check_returncode,
                             timeout=self.check_timeout)
        output, returncode = self.updates.get(args[-1], (b"", 1))
        return FakePopen(args, output, returncode)

    @property
    def updated(self):
        return [call[-1] for call in self.calls if "-y" in call]


@pytest.fixture()
def fake_flatpak():
    return FakeFlatpak()


@pytest.fixture()
def log():
    return Mock()


@pytest.fixture()
def workspace(log, tmp_path):
    return Workspace(log, directory=str(tmp_path))


def logged(log_method):
    """
    Return messages passed to a mocked logger method, formatted.
    """
    return [call.args[0] % call.args[1:] for call in log_method.call_args_list]
