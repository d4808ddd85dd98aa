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

# Components needing a git repository. The rest only read the context or the environment.
git = [
    'git_branch',
    'git_commit',
    'git_stash',
    'git_status'
]

all = [
    'cwd',
    'env',
    'hostname',
    'jobs',
    'user'
] + git
