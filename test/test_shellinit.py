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
import shutil
import subprocess

import psutil

import shprompt.shellinit
from shprompt.exception import KillShellException
from shprompt.render import prompt
from shprompt.shellinit import init_script, shell_named
from shprompt.style import Shell

from test_base import TestDir, check_match, fail, make_context


def test_zsh():
    script = init_script(Shell.ZSH, '/usr/local/bin/shprompt')
    assert 'precmd_functions+=(_shprompt_precmd)' in script, script
    assert 'PROMPT="$(/usr/local/bin/shprompt --shell zsh --status $exit_status' in script, script
    assert '${${#jobstates}:#0}' in script, script
    assert ' -- ' not in script, script


def test_bash():
    script = init_script(Shell.BASH, '/usr/local/bin/shprompt')
    assert 'PS1="$(/usr/local/bin/shprompt --shell bash --status $exit_status' in script, script
    assert 'PROMPT_COMMAND="_shprompt_prompt_command' in script, script


def test_template_quoted():
    script = init_script(Shell.ZSH, 'shprompt', "{cwd} {if success}${else}!{end} it's ")
    assert """ -- '{cwd} {if success}${else}!{end} it'"'"'s '""" in script, script
    script = init_script(Shell.BASH, '/opt/my tools/shprompt', '{cwd}')
    assert "'/opt/my tools/shprompt' --shell bash" in script, script
    assert " -- '{cwd}'" in script, script


def test_prompt_expansion_off():
    assert 'unsetopt prompt_subst' in init_script(Shell.ZSH, 'shprompt')
    assert 'shopt -u promptvars' in init_script(Shell.BASH, 'shprompt')


def test_directory_name_not_run_by_bash():
    bash = shutil.which('bash')
    if bash is None:
        return
    with TestDir() as test_dir:
        directory = test_dir / '$(echo INJECTED) `echo INJECTED` \\w'
        directory.mkdir()
        rendered = prompt('{cwd style=long} {red}$ {reset}',
                          make_context(shell=Shell.BASH, current_dir=directory))
        # Stands in for shprompt in the installed hook
        (test_dir / 'prompt.txt').write_text(rendered)
        command = test_dir / 'fake_shprompt'
        command.write_text('#!/bin/sh\ncat "$(dirname "$0")/prompt.txt"\n')
        command.chmod(0o755)
        script = init_script(Shell.BASH, command)
        # ${PS1@P} is what bash shows for PS1
        shown = subprocess.run([bash, '--norc', '--noprofile', '-c',
                                'eval "$1"; _shprompt_prompt_command; printf %s "${PS1@P}"', 'bash', script],
                               stdout=subprocess.PIPE,
                               universal_newlines=True)
        if shown.returncode != 0:
            # bash older than 4.4 has no @P
            return
        # \[ and \] become \001 and \002, which readline uses to measure the prompt
        shown = shown.stdout.replace('\001', '').replace('\002', '')
        check_match(shown, f'{directory.as_posix()} \033[91m$ \033[39m')


def test_no_wrap_unsupported():
    try:
        init_script(Shell.NO_WRAP, 'shprompt')
        fail()
    except KillShellException:
        pass


def test_shell_named():
    check_match(shell_named('zsh'), Shell.ZSH)
    check_match(shell_named('-zsh'), Shell.ZSH)
    check_match(shell_named('bash'), Shell.BASH)
    check_match(shell_named('-bash'), Shell.BASH)
    check_match(shell_named('fish'), None)
    check_match(shell_named('no_wrap'), None)


def test_detect_shell_from_login_shell():
    # The process running the tests isn't a shell, unless it is run from one.
    parent = shell_named_of_parent()
    check_match(shprompt.shellinit.detect_shell({'SHELL': '/usr/bin/zsh'}), parent or Shell.ZSH)
    check_match(shprompt.shellinit.detect_shell({'SHELL': '/bin/bash'}), parent or Shell.BASH)
    if parent is None:
        try:
            shprompt.shellinit.detect_shell({'SHELL': '/usr/bin/fish'})
            fail()
        except KillShellException as e:
            assert 'fish' in str(e), str(e)


def shell_named_of_parent():
    try:
        return shell_named(psutil.Process(os.getppid()).name())
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return None


def main():
    test_zsh()
    test_bash()
    test_template_quoted()
    test_prompt_expansion_off()
    test_directory_name_not_run_by_bash()
    test_no_wrap_unsupported()
    test_shell_named()
    test_detect_shell_from_login_shell()


if __name__ == '__main__':
    main()
