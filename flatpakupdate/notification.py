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
Format the update report and deliver it via the Telegram Bot API.
"""
import html
from datetime import datetime
from typing import List, Optional

import requests

from .status import UpdateReport

TIME_FORMAT = '%Y-%m-%d %H:%M:%S'


def _header(title: str, hostname: str) -> List[str]:
    return [f"<b>{title}</b>",
            f"<b>Host:</b> <code>{html.escape(hostname)}</code>"]


def _time(now: Optional[datetime]) -> str:
    return (now or datetime.now()).strftime(TIME_FORMAT)


def _package_list(icon: str, title: str, packages: List[str]) -> List[str]:
    lines = ["", f"{icon} <b>{title} ({len(packages)}):</b>"]
    lines.extend(f"  • <code>{html.escape(pkg)}</code>" for pkg in packages)
    return lines


def format_report_message(
        report: UpdateReport, hostname: str, now: Optional[datetime] = None
) -> str:
    lines = _header("🖥️ Flatpak Update Report", hostname)
    lines.append(f"<b>Time:</b> {_time(now)}")
    lines.append("")

    if not report.has_updates:
        lines.append("✅ <b>Status:</b> No updates available")
        return "\n".join(lines)

    lines.append(f"📦 <b>Total Updates:</b> {report.total}")
    if report.updated:
        lines.extend(_package_list(
            "✅", "Successfully Updated", report.updated))
    if report.failed:
        lines.extend(_package_list("❌", "Failed Updates", report.failed))
    lines.append("")
    lines.append(f"📊 <b>Success Rate:</b> {report.success_rate}%")
    return "\n".join(lines)


def format_error_message(
        hostname: str, error: str, now: Optional[datetime] = None
) -> str:
    lines = _header("⚠️ Flatpak Update Error", hostname)
    lines.append(f"<b>Error:</b> {html.escape(error)}")
    lines.append(f"<b>Time:</b> {_time(now)}")
    return "\n".join(lines)


class TelegramNotifier:
    """
    Send messages to a single chat, no retries.
    """
    TIMEOUT = 30

    def __init__(self, api_endpoint: str, bot_token: str, chat_id: str, log):
        self.url = f"{api_endpoint}/bot{bot_token}/sendMessage"
        self.chat_id = chat_id
        self.log = log

    def send(self, text: str) -> bool:
        """
        Post the message, return `True` if Telegram accepted it.
        """
        self.log.debug("Sending Telegram message to chat ID: %s",
                       self.chat_id)
        payload = {"chat_id": self.chat_id,
                   "text": text,
                   "parse_mode": "HTML"}
        try:
            response = requests.post(
                self.url, json=payload, timeout=self.TIMEOUT)
        except requests.RequestException as exc:
            # do not log the url, it contains the bot token
            self.log.error("Failed to send Telegram message: %s",
                           type(exc).__name__)
            return False

        if response.status_code != 200:
            self.log.error(
                "Failed to send Telegram message. HTTP code: %d, "
                "Response: %s", response.status_code, response.text)
            return False

        self.log.debug("Telegram message sent successfully")
        return True
