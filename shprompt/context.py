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

import pygit2

from shprompt.style import Shell


class Context(object):
    """External state consulted by components during one render.

    The current directory and the git repository are computed on first use and
    cached for the rest of the render. A Context is meant to be used by one render
    at a time.

    C{environ} defaults to C{os.environ}. C{home} and C{current_dir}, if given,
    override C{$HOME} and C{$PWD}.
    """

    def __init__(self, shell=Shell.ZSH, last_exit_status=0, jobs=None, environ=None, home=None, current_dir=None):
        if isinstance(shell, str):
            shell = Shell.of(shell)
        self.shell = shell
        self.status = last_exit_status
        self.jobs = jobs
        self.environ = os.environ if environ is None else environ
        self.home = None if home is None else pathlib.Path(home)
        self.current_dir = None if current_dir is None else pathlib.Path(current_dir)
        self.repository_discovered = False
        self.git_repository = None

    def __repr__(self):
        return (f'Context(shell={self.shell.value}, '
                f'status={self.status}, '
                f'jobs={self.jobs}, '
                f'cwd={self.current_dir})')

    def current_directory(self):
        if self.current_dir is None:
            # $PWD preserves symlinks the user cd'ed through, os.getcwd() doesn't.
            pwd = self.environ.get('PWD')
            self.current_dir = pathlib.Path(pwd if pwd else os.getcwd())
        return self.current_dir

    def home_directory(self):
        if self.home is None:
            home = self.environ.get('HOME')
            self.home = pathlib.Path(home) if home else pathlib.Path.home()
        return self.home

    def repository(self):
        if not self.repository_discovered:
            self.repository_discovered = True
            self.git_repository = Context.discover(self.current_directory())
        return self.git_repository

    # Exclusive access to the repository. Needed for reading stashes. Other components
    # should use repository().
    def repository_mut(self):
        return self.repository()

    def last_exit_status(self):
        return self.status

    def background_jobs(self):
        return self.jobs

    def shell_kind(self):
        return self.shell

    def getenv(self, name):
        return self.environ.get(name)

    def has_env(self, name):
        return name in self.environ

    # Not being in a repository is normal, so that yields None rather than an exception.
    @staticmethod
    def discover(directory):
        try:
            repository_path = pygit2.discover_repository(str(directory))
            return None if repository_path is None else pygit2.Repository(repository_path)
        except (pygit2.GitError, KeyError, ValueError):
            return None
