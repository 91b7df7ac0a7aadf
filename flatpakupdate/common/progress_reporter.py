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

import threading
import time
from typing import Callable, Optional

from tqdm import tqdm


class NetworkRateSampler:
    """
    Download rate of the interface holding the default route.
    """
    ROUTE_TABLE = "/proc/net/route"
    RX_BYTES = "/sys/class/net/{}/statistics/rx_bytes"
    NOT_AVAILABLE = "N/A"

    def __init__(self, interface: Optional[str] = None):
        if interface is None:
            interface = self.default_interface()
        self.interface = interface
        self._last_bytes: Optional[int] = None
        self._last_time: Optional[float] = None

    @classmethod
    def default_interface(cls) -> Optional[str]:
        """
        Return name of the first interface with the default route.
        """
        try:
            with open(cls.ROUTE_TABLE) as file:
                next(file, None)  # header
                for line in file:
                    fields = line.split()
                    if len(fields) > 1 and fields[1] == "00000000":
                        return fields[0]
        except OSError:
            pass
        return None

    def read_rx_bytes(self) -> Optional[int]:
        if not self.interface:
            return None
        try:
            with open(self.RX_BYTES.format(self.interface)) as file:
                return int(file.read().strip())
        except (OSError, ValueError):
            return None

    def sample(self, now: float) -> str:
        """
        Return human-readable rate since the previous sample.
        """
        current = self.read_rx_bytes()
        if current is None:
            return self.NOT_AVAILABLE

        rate = self.NOT_AVAILABLE
        if self._last_bytes is not None:
            bytes_diff = current - self._last_bytes
            time_diff = now - self._last_time
            if time_diff > 0 and bytes_diff > 0:
                rate = tqdm.format_sizeof(
                    bytes_diff / time_diff, suffix="B/s", divisor=1024)
        self._last_bytes = current
        self._last_time = now
        return rate


class ProgressReporter:
    """
    Periodically log how long a monitored job has been running.

    Runs in a separate thread, which is stopped and joined on `stop()`
    (or on leaving the `with` block). It only observes the job.
    """
    POLL_INTERVAL = 1
    REPORT_INTERVAL = 10

    def __init__(
            self,
            label: str,
            log,
            is_alive: Optional[Callable[[], bool]] = None,
            sampler: Optional[NetworkRateSampler] = None,
            poll_interval: float = POLL_INTERVAL,
            report_interval: float = REPORT_INTERVAL,
    ):
        self.label = label
        self.log = log
        self.is_alive = is_alive
        self.sampler = sampler
        self.poll_interval = poll_interval
        self.report_interval = report_interval
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._start_time = None

    def start(self):
        self._start_time = time.monotonic()
        if self.sampler is not None:
            # first sample is only a baseline
            self.sampler.sample(self._start_time)
        self._thread = threading.Thread(
            target=self._run, name=f"progress {self.label}", daemon=True)
        self._thread.start()

    def stop(self):
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    def _run(self):
        last_report = self._start_time
        while not self._stop.wait(self.poll_interval):
            if self.is_alive is not None and not self.is_alive():
                break
            now = time.monotonic()
            if now - last_report >= self.report_interval:
                self.report(now)
                last_report = now

    def report(self, now: float):
        elapsed = tqdm.format_interval(now - self._start_time)
        if self.sampler is None:
            self.log.info("%s... (elapsed: %s)", self.label, elapsed)
        else:
            self.log.info("%s... (elapsed: %s, rate: %s)",
                          self.label, elapsed, self.sampler.sample(now))
