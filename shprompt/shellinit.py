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

"""Generates the shell code that installs shprompt, e.g. in .zshrc:

    eval "$(shprompt init --shell zsh '{cwd style=short} {green}{git_branch}{reset} $ ')"

Before each prompt, the installed hook runs shprompt, passing the exit status of
the previous command and the number of background jobs (empty if there are none).
The prompt is not subject to parameter expansion or command substitution, so a
directory or branch name containing $(...) is shown, not run.
"""

import os
import pathlib
import shlex

import psutil

import shprompt.exception
from shprompt.style import Shell

ZSH_INIT = '''\
_shprompt_precmd() {{
    local exit_status=$?
    PROMPT="$({command} --shell zsh --status $exit_status --jobs "${{${{#jobstates}}:#0}}"{template})"
}}
typeset -ga precmd_functions
precmd_functions+=(_shprompt_precmd)
unsetopt prompt_subst
'''

BASH_INIT = '''\
_shprompt_prompt_command() {{
    local exit_status=$?
    local jobs_count
    jobs_count=$(jobs -p | wc -l | tr -d ' ')
    [ "$jobs_count" = 0 ] && jobs_count=
    PS1="$({command} --shell bash --status $exit_status --jobs "$jobs_count"{template})"
}}
PROMPT_COMMAND="_shprompt_prompt_command${{PROMPT_COMMAND:+;$PROMPT_COMMAND}}"
shopt -u promptvars
'''


def init_script(shell, executable, template=None):
    if shell is Shell.ZSH:
        script = ZSH_INIT
    elif shell is Shell.BASH:
        script = BASH_INIT
    else:
        raise shprompt.exception.KillShellException(f'init is not supported for {shell.value}')
    template = '' if template is None else f' -- {shlex.quote(template)}'
    return script.format(command=shlex.quote(str(executable)), template=template)


# The shell running shprompt: the parent process if it is a supported shell, otherwise $SHELL.
def detect_shell(environ=None):
    if environ is None:
        environ = os.environ
    candidates = []
    try:
        candidates.append(psutil.Process(os.getppid()).name())
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        pass
    login_shell = environ.get('SHELL')
    if login_shell:
        candidates.append(pathlib.Path(login_shell).name)
    for candidate in candidates:
        shell = shell_named(candidate)
        if shell is not None:
            return shell
    raise shprompt.exception.KillShellException(
        f'Unable to determine shell (tried: {", ".join(candidates)}), use --shell zsh or --shell bash')


def shell_named(process_name):
    # Login shells are named -zsh, -bash
    name = process_name.lstrip('-')
    return (Shell.ZSH if name == Shell.ZSH.value else
            Shell.BASH if name == Shell.BASH.value else
            None)
