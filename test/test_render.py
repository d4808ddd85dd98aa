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

from shprompt.exception import InvalidOptions, KillRenderException, ParseError
from shprompt.render import prompt
from shprompt.style import Shell
from shprompt.util import Trace

from test_base import TestDir, check_match, commit_file, fail, make_context, make_repository

RED = '\033[91m'
GREEN = '\033[92m'
RESET = '\033[39m'


def test_cwd():
    context = make_context(current_dir='/home/alice/proj', home='/home/alice')
    check_match(prompt('{cwd} $ ', context), '~/proj $ ')


def test_suppressed_outside_repository():
    with TestDir() as test_dir:
        context = make_context(current_dir=test_dir, home='/home/alice')
        check_match(prompt('{red}{git_branch}{reset} $ ', context), ' $ ')


def test_short_cwd_in_repository():
    with TestDir() as test_dir:
        home = test_dir / 'foo'
        repo_dir = home / 'axx' / 'bxx' / 'repo'
        make_repository(repo_dir)
        current_dir = repo_dir / 'cxx' / 'dxx'
        current_dir.mkdir(parents=True)
        context = make_context(current_dir=current_dir, home=home)
        check_match(prompt('{cwd style=short}', context), '~/a/b/repo/c/dxx')


def test_branch_in_repository():
    with TestDir() as test_dir:
        repository = make_repository(test_dir, branch='main')
        commit_file(repository, 'a.txt', 'a\n')
        context = make_context(current_dir=test_dir, home='/home/alice')
        check_match(prompt('{red}[{git_branch}]{reset} $ ', context), f'{RED}[main]{RESET} $ ')
        check_match(prompt('{red}[{git_branch}{git_status}]{reset} $ ', context),
                    f'{RED}[main]{RESET} $ ')
        (test_dir / 'a.txt').write_text('changed\n')
        context = make_context(current_dir=test_dir, home='/home/alice')
        check_match(prompt('{red}[{git_branch}{git_status}]{reset} $ ', context),
                    f'{RED}[main*]{RESET} $ ')


def test_literal_round_trip():
    context = make_context()
    for template in ('', 'abc', ' $ ', '> ', 'a}b', '%# ', 'x{{y'):
        check_match(prompt(template, context), template)


def test_decorative_groups_kept():
    context = make_context()
    check_match(prompt('{green}>{reset} ', context), f'{GREEN}>{RESET} ')
    check_match(prompt('{green}{red}x', context), f'{GREEN}{RED}x')


def test_groups():
    context = make_context(environ={'USER': 'alice'})
    check_match(prompt('{user}@{green}{jobs}{reset}:{cwd}', context), 'alice@:~/proj')
    context = make_context(environ={'USER': 'alice'}, jobs='3')
    check_match(prompt('{user}@{green}{jobs}{reset}:{cwd}', context), f'alice@{GREEN}3{RESET}:~/proj')
    # Nothing to show, and no color: the text before the next color goes too
    context = make_context(environ={})
    check_match(prompt('[{user}] {green}$', context), f'{GREEN}$')


def test_conditionals():
    template = '{if success}{green}${else}{red}!{end}{reset} '
    check_match(prompt(template, make_context(status=0)), f'{GREEN}${RESET} ')
    check_match(prompt(template, make_context(status=1)), f'{RED}!{RESET} ')
    template = '{if $VIRTUAL_ENV}({env name=VIRTUAL_ENV}) {end}$ '
    check_match(prompt(template, make_context(environ={'VIRTUAL_ENV': 'venv'})), '(venv) $ ')
    check_match(prompt(template, make_context(environ={})), '$ ')


def test_shell_wrapping():
    context = make_context(shell=Shell.ZSH)
    check_match(prompt('{red}x{reset}', context), f'%{{{RED}%}}x%{{{RESET}%}}')
    context = make_context(shell=Shell.BASH)
    check_match(prompt('{red}x{reset}', context), f'\\[{RED}\\]x\\[{RESET}\\]')


def test_values_quoted_for_shell():
    environ = {'NAME': '$(echo INJECTED) `id` \\w 100%'}
    template = '{red}{env name=NAME}{reset}'
    check_match(prompt(template, make_context(shell=Shell.BASH, environ=environ)),
                f'\\[{RED}\\]$(echo INJECTED) `id` \\\\w 100%\\[{RESET}\\]')
    check_match(prompt(template, make_context(shell=Shell.ZSH, environ=environ)),
                f'%{{{RED}%}}$(echo INJECTED) `id` \\w 100%%%{{{RESET}%}}')
    check_match(prompt(template, make_context(shell=Shell.NO_WRAP, environ=environ)),
                f'{RED}$(echo INJECTED) `id` \\w 100%{RESET}')
    # Literal text belongs to the user, and is left alone
    check_match(prompt('\\u $ ', make_context(shell=Shell.BASH)), '\\u $ ')


def test_errors():
    context = make_context()
    try:
        prompt('{cwd bogus=1}', context)
        fail()
    except InvalidOptions as e:
        assert 'bogus=1' in str(e), str(e)
    try:
        prompt('{cwd} {if success}', context)
        fail()
    except ParseError:
        pass
    try:
        prompt(None, context)
        fail()
    except KillRenderException:
        pass


def test_trace():
    with TestDir() as test_dir:
        trace_file = test_dir / 'trace.txt'
        trace = Trace()
        trace.enable(str(trace_file))
        try:
            check_match(prompt('{cwd} $ ', make_context(), trace), '~/proj $ ')
        finally:
            trace.disable()
        check_match(trace.is_enabled(), False)
        lines = trace_file.read_text().splitlines()
        check_match(len(lines), 4)
        check_match([line.split(': ', 1)[1].split(' -> ')[0] for line in lines],
                    ['parse', 'resolve', 'squash', 'render'])
        assert "'~/proj $ '" in lines[3], lines[3]


def test_trace_disabled():
    trace = Trace()
    check_match(prompt('x', make_context(), trace), 'x')


def main():
    test_cwd()
    test_suppressed_outside_repository()
    test_short_cwd_in_repository()
    test_branch_in_repository()
    test_literal_round_trip()
    test_decorative_groups_kept()
    test_groups()
    test_conditionals()
    test_shell_wrapping()
    test_values_quoted_for_shell()
    test_errors()
    test_trace()
    test_trace_disabled()


if __name__ == '__main__':
    main()
