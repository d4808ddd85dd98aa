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
{git_status}

A summary of the state of the current git repository:

    *   A file was modified in the working tree.
    +   A new file was added to the working tree.
    -   A file was deleted from the working tree.
    ^   A change is staged.

Nothing is shown outside a repository, or if the working tree is clean.
'''

INDEX_CHANGED = (pygit2.GIT_STATUS_INDEX_NEW |
                 pygit2.GIT_STATUS_INDEX_MODIFIED |
                 pygit2.GIT_STATUS_INDEX_DELETED |
                 pygit2.GIT_STATUS_INDEX_RENAMED |
                 pygit2.GIT_STATUS_INDEX_TYPECHANGE)

# Checked in this order
FLAGS = [
    (pygit2.GIT_STATUS_WT_MODIFIED, '*'),
    (pygit2.GIT_STATUS_WT_NEW, '+'),
    (pygit2.GIT_STATUS_WT_DELETED, '-'),
    (INDEX_CHANGED, '^')
]


def display(context, options):
    repository = context.repository()
    if repository is None:
        return None
    try:
        statuses = repository.status()
    except pygit2.GitError:
        return None
    if len(statuses) == 0:
        return None
    return summarize(statuses.values())


def summarize(statuses):
    combined = 0
    for status in statuses:
        combined |= int(status)
    summary = ''.join(symbol for flag, symbol in FLAGS if combined & flag)
    return summary if summary else None
