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
import argparse


class UpdaterArgs:
    # To keep the option table in one place
    OPTIONS = {
        ("--log",): {"action": 'store',
                     "default": None,
                     "help": 'Provide logging level, overrides LOG_LEVEL. '
                             'Values: DEBUG, INFO (default), WARN, ERROR'},
        ("--log-file",): {"action": 'store',
                          "default": None,
                          "help": 'Write the log also to the given file'},
        ("--show-rate",): {"action": 'store_true',
                           "help": 'Report network download rate together '
                                   'with progress'},
    }
    EXCLUSIVE_OPTIONS = {
        ("--logged",): {"action": 'store_true',
                        "help": 'DEFAULT. Stream output of each update into '
                                'a temporary log and echo progress lines'},
        ("--direct",): {"action": 'store_true',
                        "help": 'Run each update directly and rely only on '
                                'its exit code'},
    }

    @staticmethod
    def add_arguments(parser):
        """
        Add updater arguments to the parser.
        """
        for arg, properties in UpdaterArgs.OPTIONS.items():
            parser.add_argument(*arg, **properties)
        mode = parser.add_mutually_exclusive_group()
        for arg, properties in UpdaterArgs.EXCLUSIVE_OPTIONS.items():
            mode.add_argument(*arg, **properties)


def parse_args(args=None):
    parser = argparse.ArgumentParser(
        description='Update Flatpak applications and report the result '
                    'to a Telegram chat.',
        epilog='Configuration is read from environment variables: '
               'TELEGRAM_BOT_TOKEN, TELEGRAM_CHAT_ID (both required), '
               'TELEGRAM_API_HOST, LOG_LEVEL, FLATPAK_HOSTNAME.')
    UpdaterArgs.add_arguments(parser)
    return parser.parse_args(args)
