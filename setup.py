#!/usr/bin/python3
#
# Copyright (C) 2026  flatpak-update contributors
#
# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License along
# with this program; if not, see <http://www.gnu.org/licenses/>.
import setuptools

if __name__ == '__main__':
    setuptools.setup(
        name='flatpak-update',
        version=open('version').read().strip(),
        description='Unattended Flatpak updater with Telegram reports',
        license='GPL2+',
        packages=setuptools.find_packages(
            include=("flatpakupdate", "flatpakupdate*")),
        python_requires='>=3.8',
        install_requires=[
            'requests',
            'tqdm',
        ],
        extras_require={
            'test': ['pytest'],
        },
        entry_points={
            'console_scripts':
                'flatpak-update = flatpakupdate.flatpak_update:main',
        },
    )
