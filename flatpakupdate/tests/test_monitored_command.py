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
from unittest.mock import patch

from flatpakupdate.common.monitored_command import DirectCommand, LoggedCommand
from flatpakupdate.tests.conftest import FakePopen, logged

UPDATE_OUTPUT = (
    b"Looking for updates...\n"
    b"Updating 1/1...\r[####      ] 40%  1.2 MB/s\r[##########] 100%\n"
    b"Info: org.app.One is end-of-life\n"
    b"Updates complete.\n"
)


def run(command):
    command.start()
    return command.wait()


@patch('subprocess.Popen')
def test_logged_success_removes_log(popen, log, workspace, tmp_path):
    popen.return_value = FakePopen([], UPDATE_OUTPUT, 0)
    command = LoggedCommand(
        ["flatpak", "update", "-y", "org.app.One"], log, workspace,
        "org.app.One")

    assert run(command) == 0
    assert not list(tmp_path.iterdir())
    assert workspace.files == []
    assert logged(log.info) == [
        "org.app.One: Updating 1/1...",
        "org.app.One: [####      ] 40%  1.2 MB/s",
        "org.app.One: [##########] 100%",
    ]


@patch('subprocess.Popen')
def test_logged_failure_keeps_log(popen, log, workspace):
    popen.return_value = FakePopen(
        [], b"one\ntwo\nthree\nerror: four\n", 42)
    command = LoggedCommand(
        ["flatpak", "update", "-y", "app/x86_64"], log, workspace,
        "app/x86_64")

    assert run(command) == 42
    assert command.log_path.name.startswith("flatpak-update-app_x86_64-")
    assert command.log_path.read_text() == \
        "one\ntwo\nthree\nerror: four\n"
    assert not command.exit_code_path.exists()
    assert command.tail() == ["two", "three", "error: four"]
    assert "Error details: two | three | error: four" in logged(log.debug)

    workspace.cleanup()
    assert not command.log_path.exists()


@patch('subprocess.Popen')
def test_logged_missing_exit_code_is_failure(popen, log, workspace):
    popen.return_value = FakePopen([], b"", 0)
    command = LoggedCommand(["flatpak"], log, workspace, "org.app.One")
    with patch.object(LoggedCommand, "_stream"):
        assert run(command) == 1


def test_logged_terminated_leaves_no_files(log, workspace, tmp_path):
    command = LoggedCommand(
        ["sh", "-c", "sleep 5"], log, workspace, "org.app.One")
    command.start()
    command.terminate()
    assert not command.is_alive()
    assert command.exit_code_path.exists()

    workspace.cleanup()
    assert not list(tmp_path.iterdir())


@patch('subprocess.Popen')
def test_direct(popen, log):
    popen.return_value = FakePopen([], b"error: failed\n", 3)
    command = DirectCommand(["flatpak", "update", "-y", "org.app.One"], log)
    command.start()
    assert command.is_alive()
    assert command.wait() == 3
    assert not command.is_alive()
    assert "flatpak out: error: failed" in logged(log.debug)
