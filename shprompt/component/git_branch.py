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
{git_branch}

The name of the branch checked out in the current git repository. Nothing is
shown outside a repository, or if HEAD is detached.
'''


def display(context, options):
    repository = context.repository()
    if repository is None:
        return None
    if repository.head_is_detached or repository.head_is_unborn:
        return None
    try:
        return repository.head.shorthand
    except pygit2.GitError:
        return None
