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

HELP = '''
{jobs}

The background job indicator passed in by the shell (shprompt --jobs ...),
typically the number of background jobs. Nothing is shown if the indicator is
missing or empty.
'''


def display(context, options):
    jobs = context.background_jobs()
    return jobs if jobs else None
