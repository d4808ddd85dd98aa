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

import pygit2

HELP = '''
{git_stash}

The number of stash entries in the current git repository, followed by +,
e.g. 2+. Nothing is shown outside a repository, or if there are no stashes.
'''


def display(context, options):
    repository = context.repository_mut()
    if repository is None:
        return None
    try:
        count = len(repository.listall_stashes())
    except pygit2.GitError:
        return None
    return None if count == 0 else f'{count}+'
