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
from dataclasses import dataclass
from typing import Mapping, Optional

from .utils import get_hostname

DEFAULT_API_HOST = "api.telegram.org"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(Exception):
    """Required configuration is missing."""


@dataclass(frozen=True)
class Settings:
    bot_token: str
    chat_id: str
    api_host: str = DEFAULT_API_HOST
    log_level: str = DEFAULT_LOG_LEVEL
    hostname: str = ""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None):
        """
        Read settings from environment variables.

        :raises ConfigError: if the bot token or chat ID is not set
        """
        if environ is None:
            environ = os.environ
        return cls(
            bot_token=_required(environ, "TELEGRAM_BOT_TOKEN"),
            chat_id=_required(environ, "TELEGRAM_CHAT_ID"),
            api_host=environ.get("TELEGRAM_API_HOST") or DEFAULT_API_HOST,
            log_level=environ.get("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
            hostname=environ.get("FLATPAK_HOSTNAME") or get_hostname(),
        )

    @property
    def api_endpoint(self) -> str:
        return f"https://{self.api_host}"


def _required(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if not value:
        raise ConfigError(f"Error: {name} environment variable is required")
    return value
