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
Parse the transaction summary printed by `flatpak update`.

EXAMPLE OUTPUT:
Looking for updates…

        ID                            Branch   Op   Remote    Download
  1.     org.gnome.Platform            46       u    flathub   < 200.1 MB
  2.     org.mozilla.firefox           stable   u    flathub   < 95.4 MB

Proceed with these changes to the system installation? [Y/n]: n
"""
import re
from typing import Iterable, List

NOTHING_TO_DO = "Nothing to do"
PROMPT = "Proceed with these changes"

# ordinal, identifier, branch, operation flag `u` (update)
UPDATE_ROW = re.compile(
    r"^\s*[0-9]+\.\s+([-a-zA-Z0-9._]+)\s+([-a-zA-Z0-9._]+)\s+u\s+")


def nothing_to_do(output: str) -> bool:
    return NOTHING_TO_DO in output


def parse_update_output(output: str) -> List[str]:
    """
    Return identifiers of packages to update, in the order of the summary.

    Returns an empty list if flatpak reports there is nothing to do.
    Lines from the confirmation prompt onwards are never parsed.
    """
    if nothing_to_do(output):
        return []
    return list(_unique(_update_rows(output.splitlines())))


def _update_rows(lines: Iterable[str]):
    for line in lines:
        if PROMPT in line:
            break
        match = UPDATE_ROW.match(line)
        if match and match.group(1):
            yield match.group(1)


def _unique(packages: Iterable[str]):
    seen = set()
    for package in packages:
        if package not in seen:
            seen.add(package)
            yield package
