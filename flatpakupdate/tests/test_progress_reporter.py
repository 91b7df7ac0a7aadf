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
from unittest.mock import Mock

from flatpakupdate.common.progress_reporter import (
    ProgressReporter, NetworkRateSampler)
from flatpakupdate.tests.conftest import logged

ROUTES = (
    "Iface\tDestination\tGateway \tFlags\tRefCnt\tUse\tMetric\tMask\n"
    "wlp2s0\t0002A8C0\t00000000\t0001\t0\t0\t600\t00FFFFFF\n"
    "wlp2s0\t00000000\t0102A8C0\t0003\t0\t0\t600\t00000000\n"
)


def sampler_for(tmp_path, monkeypatch):
    routes = tmp_path / "route"
    routes.write_text(ROUTES)
    monkeypatch.setattr(NetworkRateSampler, "ROUTE_TABLE", str(routes))
    monkeypatch.setattr(NetworkRateSampler, "RX_BYTES",
                        str(tmp_path / "{}.rx"))
    return NetworkRateSampler()


def test_default_interface(tmp_path, monkeypatch):
    sampler = sampler_for(tmp_path, monkeypatch)
    assert sampler.interface == "wlp2s0"


def test_no_default_route(tmp_path, monkeypatch):
    monkeypatch.setattr(
        NetworkRateSampler, "ROUTE_TABLE", str(tmp_path / "missing"))
    sampler = NetworkRateSampler()
    assert sampler.interface is None
    assert sampler.sample(10.0) == "N/A"


def test_rate(tmp_path, monkeypatch):
    sampler = sampler_for(tmp_path, monkeypatch)
    counter = tmp_path / "wlp2s0.rx"

    counter.write_text("1000\n")
    assert sampler.sample(0.0) == "N/A"  # baseline
    counter.write_text(f"{1000 + 2048 * 10}\n")
    assert sampler.sample(10.0) == "2.00kB/s"
    # nothing received
    assert sampler.sample(20.0) == "N/A"


def test_unreadable_counter(tmp_path, monkeypatch):
    sampler = sampler_for(tmp_path, monkeypatch)
    assert sampler.sample(0.0) == "N/A"
    (tmp_path / "wlp2s0.rx").write_text("garbage")
    assert sampler.sample(10.0) == "N/A"


def test_report_line(log):
    reporter = ProgressReporter("Updating org.app.One", log)
    reporter._start_time = 100.0
    reporter.report(172.5)
    assert logged(log.info) == ["Updating org.app.One... (elapsed: 01:12)"]


def test_report_line_with_rate(log):
    sampler = Mock()
    sampler.sample.return_value = "1.50MB/s"
    reporter = ProgressReporter("Updating org.app.One", log, sampler=sampler)
    reporter._start_time = 0.0
    reporter.report(10.0)
    assert logged(log.info) == [
        "Updating org.app.One... (elapsed: 00:10, rate: 1.50MB/s)"]


def test_stops_when_job_finishes(log):
    alive = iter([True, True, False])
    reporter = ProgressReporter(
        "Updating", log, is_alive=lambda: next(alive),
        poll_interval=0.01, report_interval=0)
    reporter.start()
    reporter._thread.join(timeout=5)
    assert not reporter._thread.is_alive()
    reporter.stop()
    assert log.info.call_count == 2


def test_stop_joins_thread(log):
    reporter = ProgressReporter("Updating", log, poll_interval=60)
    with reporter:
        thread = reporter._thread
        assert thread.is_alive()
    assert not thread.is_alive()
    log.info.assert_not_called()
