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

from enum import Enum

from prompt_toolkit.output.vt100 import FG_ANSI_COLORS

import shprompt.exception

ESC = '\033'


class Shell(Enum):
    ZSH = 'zsh'
    BASH = 'bash'
    NO_WRAP = 'no_wrap'

    @staticmethod
    def of(name):
        try:
            return Shell(name)
        except ValueError:
            raise shprompt.exception.KillShellException(f'Unsupported shell: {name}, valid shells are: bash, zsh')

    # Include a string as a literal escape sequence. The wrapped string must not move the cursor,
    # otherwise line editing gets confused about the width of the prompt.
    def wrap(self, escape):
        return (f'%{{{escape}%}}' if self is Shell.ZSH else
                f'\\[{escape}\\]' if self is Shell.BASH else
                escape)

    # Quote text (a directory or branch name) so that the shell shows it as is. The init
    # scripts turn off prompt_subst (zsh) and promptvars (bash), so $(...) and `...` are never
    # run. zsh still expands % sequences, and bash still decodes backslash sequences.
    def quote(self, text):
        if isinstance(text, PromptText):
            return text
        if self is Shell.ZSH:
            text = text.replace('%', '%%')
        elif self is Shell.BASH:
            text = text.replace('\\', '\\\\')
        return PromptText(text)


# Text already quoted for a shell, possibly containing wrapped escape sequences.
class PromptText(str):
    pass


# Prompt colors, named after the prompt_toolkit ANSI color each one maps to.
class Color(Enum):
    BLACK = 'ansiblack'
    DARK_GREY = 'ansibrightblack'
    BLUE = 'ansibrightblue'
    DARK_BLUE = 'ansiblue'
    GREEN = 'ansibrightgreen'
    DARK_GREEN = 'ansigreen'
    RED = 'ansibrightred'
    DARK_RED = 'ansired'
    CYAN = 'ansibrightcyan'
    DARK_CYAN = 'ansicyan'
    MAGENTA = 'ansibrightmagenta'
    DARK_MAGENTA = 'ansimagenta'
    YELLOW = 'ansibrightyellow'
    DARK_YELLOW = 'ansiyellow'
    WHITE = 'ansiwhite'
    RESET = 'ansidefault'

    def template_name(self):
        return self.name.lower()

    def code(self):
        return FG_ANSI_COLORS[self.value]

    def escape(self):
        return f'{ESC}[{self.code()}m'

    def is_reset(self):
        return self is Color.RESET

    @staticmethod
    def named(name):
        # Returns None if name isn't a color
        for color in Color:
            if color.template_name() == name:
                return color
        return None

    @staticmethod
    def names():
        return [color.template_name() for color in Color]


class Attribute(Enum):
    BOLD = (1, 22)
    UNDERLINE = (4, 24)

    def on(self):
        return f'{ESC}[{self.value[0]}m'

    def off(self):
        return f'{ESC}[{self.value[1]}m'


def color_start(color, shell):
    assert not color.is_reset(), color
    return shell.wrap(color.escape())


def color_reset(shell):
    return shell.wrap(Color.RESET.escape())


def decorate(s, attribute, shell):
    return f'{shell.wrap(attribute.on())}{s}{shell.wrap(attribute.off())}'
