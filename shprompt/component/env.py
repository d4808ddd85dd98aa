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

import shprompt.componentmodule

HELP = '''
{env name=NAME}

The value of the environment variable NAME. Nothing is shown if the variable
is not set. The name option is required.
'''


def display(context, options):
    name = shprompt.componentmodule.pop_required('env', options, 'name')
    return context.getenv(name)
