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
import subprocess
from typing import Union, Optional
from .exit_codes import EXIT


class ProcessResult:
    """
    Representation of system process output: (exit code, out, err).

    `timed_out` is set when the process was killed after exceeding
    its time limit; `out` and `err` then hold what it printed until then.
    """
    def __init__(
            self, code: int = EXIT.OK, out: str = "", err: str = "",
            timed_out: bool = False
    ):
        self.code: int = code
        self.out: str = out
        self.err: str = err
        self.timed_out = timed_out

    @classmethod
    def process_communicate(
            cls, proc, input_: Optional[bytes] = None,
            timeout: Optional[float] = None
    ):
        timed_out = False
        try:
            out, err = proc.communicate(input=input_, timeout=timeout)
        except subprocess.TimeoutExpired:
            timed_out = True
            proc.kill()
            out, err = proc.communicate()
        result = cls.from_untrusted_out_err(out, err)
        result.code = proc.returncode
        result.timed_out = timed_out
        return result

    @classmethod
    def from_untrusted_out_err(
            cls,
            untrusted_out: Optional[Union[str, bytes]],
            untrusted_err: Optional[Union[str, bytes]] = ""
    ):
        out = ProcessResult.sanitize_output(cls._to_bytes(untrusted_out))
        err = ProcessResult.sanitize_output(cls._to_bytes(untrusted_err))
        return cls(EXIT.OK, out, err)

    @staticmethod
    def _to_bytes(untrusted: Optional[Union[str, bytes]]) -> bytes:
        if untrusted is None:
            return b''
        if isinstance(untrusted, str):
            return untrusted.encode()
        return untrusted

    @staticmethod
    def sanitize_output(untrusted_bytes: bytes, single: bool = False) -> str:
        untrusted_str = untrusted_bytes.decode('ascii', errors='ignore')
        return ''.join([c for c in untrusted_str
                        if 0x20 <= ord(c) <= 0x7e
                        or c == '\t'  # column separator in tables
                        or (c == '\n' and not single)])

    @property
    def text(self) -> str:
        """
        Combined output, as printed to a terminal.
        """
        if self.out and self.err:
            return self.out + "\n" + self.err
        return self.out or self.err

    def __bool__(self):
        return bool(self.code)

    def __repr__(self):
        return f"{self.code}; {self.out}; {self.err}"
