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

import pathlib

import shprompt.componentmodule
import shprompt.style

HELP = '''
{cwd [style=default|short|long] [underline_repo=true|false] [bold_repo=true|false]}

The current directory.

style=default: The absolute path, with the home directory replaced by ~.

style=long: The absolute path.

style=short: Like default, but every directory except the last one, and the
root of the current git repository, is shortened to its first character (two
characters for a directory starting with a dot).

underline_repo, bold_repo: Decorate the repository root in a short path.
'''

NAME = 'cwd'
DEFAULT = 'default'
SHORT = 'short'
LONG = 'long'
STYLES = (DEFAULT, SHORT, LONG)


def display(context, options):
    style = shprompt.componentmodule.pop_choice(NAME, options, 'style', STYLES, DEFAULT)
    underline_repo = shprompt.componentmodule.pop_boolean(NAME, options, 'underline_repo')
    bold_repo = shprompt.componentmodule.pop_boolean(NAME, options, 'bold_repo')
    current_dir = context.current_directory()
    if style == LONG:
        return long(current_dir)
    home_dir = context.home_directory()
    if style == DEFAULT:
        return replace_home_dir(current_dir, home_dir)
    repository = context.repository()
    repository_root = None if repository is None else repository_root_of(repository)
    return short(current_dir, home_dir, repository_root, underline_repo, bold_repo, context.shell_kind())


def long(current_dir):
    return pathlib.Path(current_dir).as_posix()


# Replace the home directory portion of the path with ~
def replace_home_dir(current_dir, home_dir):
    path = pathlib.Path(current_dir).as_posix()
    home = pathlib.Path(home_dir).as_posix()
    if home == '/':
        return path
    if path == home:
        return '~'
    if path.startswith(home + '/'):
        return '~' + path[len(home):]
    return path


def short(current_dir, home_dir, repository_root, underline_repo=False, bold_repo=False, shell=None):
    if shell is None:
        shell = shprompt.style.Shell.NO_WRAP
    parts = replace_home_dir(current_dir, home_dir).split('/')
    repository_index = None
    if repository_root is not None:
        # The repository root comes from git, with symlinks resolved. If the current directory
        # was reached through a symlink, the root isn't one of its ancestors.
        repository_parts = replace_home_dir(repository_root, home_dir).split('/')
        if parts[:len(repository_parts)] == repository_parts:
            repository_index = len(repository_parts) - 1
    last_index = len(parts) - 1
    shortened = []
    for i, part in enumerate(parts):
        if i == repository_index:
            # Don't truncate the repository
            part = shell.quote(part)
            if underline_repo:
                part = shprompt.style.decorate(part, shprompt.style.Attribute.UNDERLINE, shell)
            if bold_repo:
                part = shprompt.style.decorate(part, shprompt.style.Attribute.BOLD, shell)
            shortened.append(part)
        elif i == last_index:
            shortened.append(shell.quote(part))
        else:
            shortened.append(shell.quote(part[:2] if part.startswith('.') else part[:1]))
    return shprompt.style.PromptText('/'.join(shortened))


# The working directory of the repository, e.g. /home/jao/git/shprompt for
# the repository in /home/jao/git/shprompt/.git
def repository_root_of(repository):
    workdir = repository.workdir
    if workdir is None:
        # Bare repository
        return pathlib.Path(repository.path).parent
    return pathlib.Path(workdir)
