# This file is part of Shprompt.
#
# Shprompt is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the
# Free Software Foundation, either version 3 of the License, (or at your
# option) any later version.
#
# Shprompt is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or
# FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
# for more details.
#
# You should have received a copy of the GNU General Public License
# along with Shprompt.  If not, see <https://www.gnu.org/licenses/>.

import os
import pathlib

import shprompt.exception


# Location structure -> interface
#
#     .config/shprompt/                           config()
#         template                                config_template()

class Locations(object):
    SHPROMPT_DIR_NAME = 'shprompt'
    TEMPLATE_FILE_NAME = 'template'

    def __init__(self, environ=None):
        if environ is None:
            environ = os.environ
        self.home = Locations.normalize_dir(
            'home directory',
            environ.get('HOME', None),
            pathlib.Path.home())
        self.config_base = Locations.normalize_dir(
            'application configuration directory (e.g. XDG_CONFIG_HOME)',
            environ.get('XDG_CONFIG_HOME', None),
            self.home / '.config')

    def __repr__(self):
        return f'Locations(config={self.config()})'

    def config(self):
        return self.config_base / Locations.SHPROMPT_DIR_NAME

    def config_template(self):
        return self.config() / Locations.TEMPLATE_FILE_NAME

    # Returns the template stored in the config directory, or None if there isn't one.
    def read_template(self):
        path = self.config_template()
        try:
            return path.read_text().rstrip('\n')
        except FileNotFoundError:
            return None
        except OSError as e:
            raise shprompt.exception.KillShellException(f'Unable to read template from {path}: {e}')

    @staticmethod
    def normalize_dir(description, provided, *defaults):
        dir = provided if provided else None
        d = 0
        while dir is None and d < len(defaults):
            dir = defaults[d]
            d += 1
        if dir is None:
            raise shprompt.exception.KillShellException(
                f'Unable to locate {description}.')
        if not isinstance(dir, pathlib.Path):
            dir = pathlib.Path(dir)
        return dir.expanduser()
