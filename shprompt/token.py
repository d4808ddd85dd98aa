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

"""Tokens are produced by the parser, once per render, and never modified.

A template is parsed into a list of tokens:
    - C{Literal}: Text copied to the prompt as is.
    - C{Style}: A color, or reset.
    - C{Invocation}: A component, with its options (key=value pairs).
    - C{Conditional}: {if ...}...{else}...{end}, holding nested token lists.
"""

from enum import Enum


class ComponentName(Enum):
    CWD = 'cwd'
    GIT_BRANCH = 'git_branch'
    GIT_COMMIT = 'git_commit'
    GIT_STASH = 'git_stash'
    GIT_STATUS = 'git_status'
    HOSTNAME = 'hostname'
    JOBS = 'jobs'
    ENV = 'env'
    USER = 'user'

    @staticmethod
    def named(name):
        try:
            return ComponentName(name)
        except ValueError:
            return None

    @staticmethod
    def names():
        return [component.value for component in ComponentName]


class Token(object):

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self):
        return hash(repr(self))


class Literal(Token):

    def __init__(self, text):
        self.text = text

    def __repr__(self):
        return f'Literal({self.text!r})'


class Style(Token):

    def __init__(self, color):
        self.color = color

    def __repr__(self):
        return f'Style({self.color.template_name()})'


class Invocation(Token):

    def __init__(self, name, options=None):
        self.name = name
        self.options = {} if options is None else dict(options)

    def __repr__(self):
        options = ''.join(f' {k}={v}' for k, v in self.options.items())
        return f'Invocation({self.name.value}{options})'


class Conditional(Token):

    def __init__(self, condition, then_branch, else_branch=None):
        self.condition = condition
        self.then_branch = list(then_branch)
        self.else_branch = None if else_branch is None else list(else_branch)

    def __repr__(self):
        if self.else_branch is None:
            return f'Conditional({self.condition}, {self.then_branch})'
        else:
            return f'Conditional({self.condition}, {self.then_branch}, {self.else_branch})'


# Conditions

class Condition(object):

    def __eq__(self, other):
        return type(self) is type(other) and self.__dict__ == other.__dict__

    def __hash__(self):
        return hash(repr(self))

    def holds(self, context):
        assert False


class ExitStatusZero(Condition):
    KEYWORD = 'success'

    def __repr__(self):
        return 'ExitStatusZero()'

    def holds(self, context):
        return context.last_exit_status() == 0


class EnvVarSet(Condition):

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f'EnvVarSet(${self.name})'

    def holds(self, context):
        return context.has_env(self.name)
