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

import socket

from shprompt.exception import InvalidOptions, MissingRequiredOption
from shprompt.item import ABSENT, ColorReset, ColorStart, Text, Value
from shprompt.parser import parse
from shprompt.resolver import resolve
from shprompt.style import Shell

from test_base import check_match, fail, make_context

RED = ColorStart('\033[91m')
DARK_GREEN = ColorStart('\033[32m')
RESET = ColorReset('\033[39m')


def resolve_template(template, context=None):
    if context is None:
        context = make_context()
    return resolve(parse(template), context)


def test_literal():
    check_match(resolve_template(''), [])
    check_match(resolve_template('abc'), [Text('abc')])
    check_match(resolve_template('{{x'), [Text('{{'), Text('x')])


def test_style():
    check_match(resolve_template('{red}{dark_green}{reset}'), [RED, DARK_GREEN, RESET])
    check_match(resolve_template('{red}', make_context(shell=Shell.ZSH)), [ColorStart('%{\033[91m%}')])
    check_match(resolve_template('{reset}', make_context(shell=Shell.BASH)), [ColorReset('\\[\033[39m\\]')])


def test_invocation():
    context = make_context(environ={'USER': 'alice', 'VIRTUAL_ENV': 'venv'}, jobs='2')
    check_match(resolve_template('{cwd}', context), [Value('~/proj')])
    check_match(resolve_template('{cwd style=long}', context), [Value('/home/alice/proj')])
    check_match(resolve_template('{user}', context), [Value('alice')])
    check_match(resolve_template('{jobs}', context), [Value('2')])
    check_match(resolve_template('{env name=VIRTUAL_ENV}', context), [Value('venv')])
    check_match(resolve_template('{hostname}', context), [Value(socket.gethostname())])


def test_absent():
    context = make_context(environ={})
    check_match(resolve_template('{user}', context), [ABSENT])
    check_match(resolve_template('{jobs}', context), [ABSENT])
    check_match(resolve_template('{jobs}', make_context(jobs='')), [ABSENT])
    check_match(resolve_template('{env name=VIRTUAL_ENV}', context), [ABSENT])
    # Set but empty is still a value
    check_match(resolve_template('{env name=EMPTY}', make_context(environ={'EMPTY': ''})), [Value('')])


def test_invalid_options():
    try:
        resolve_template('{cwd bogus=1}')
        fail()
    except InvalidOptions as e:
        check_match(e.component, 'cwd')
        check_match(e.options, {'bogus': '1'})
        assert 'bogus=1' in str(e), str(e)
    try:
        resolve_template('{user b=2 a=1}')
        fail()
    except InvalidOptions as e:
        check_match(str(e), 'invalid options: a=1, b=2')
    try:
        resolve_template('{cwd style=tiny}')
        fail()
    except InvalidOptions as e:
        assert 'style=tiny' in str(e), str(e)
    try:
        resolve_template('{cwd style=short bold_repo=yes}')
        fail()
    except InvalidOptions as e:
        assert 'bold_repo=yes' in str(e), str(e)


def test_missing_required_option():
    try:
        resolve_template('{env}')
        fail()
    except MissingRequiredOption as e:
        check_match(e.option, 'name')
        assert 'name' in str(e), str(e)


def test_invalid_options_in_unselected_branch():
    # Only the selected branch is resolved
    check_match(resolve_template('{if success}ok{else}{env}{end}'), [Text('ok')])


def test_exit_status_conditional():
    template = '{if success}ok{else}{red}fail{reset}{end} $ '
    check_match(resolve_template(template, make_context(status=0)),
                [Text('ok'), Text(' $ ')])
    check_match(resolve_template(template, make_context(status=1)),
                [RED, Text('fail'), RESET, Text(' $ ')])
    check_match(resolve_template('{if success}ok{end}', make_context(status=127)), [])


def test_env_conditional():
    template = '{if $VIRTUAL_ENV}({env name=VIRTUAL_ENV}){else}-{end}'
    check_match(resolve_template(template, make_context(environ={'VIRTUAL_ENV': 'venv'})),
                [Text('('), Value('venv'), Text(')')])
    check_match(resolve_template(template, make_context(environ={'VIRTUAL_ENV': ''})),
                [Text('('), Value(''), Text(')')])
    check_match(resolve_template(template, make_context(environ={})),
                [Text('-')])


def test_nested_conditional():
    template = '{if $A}a{if success}b{else}c{end}{end}'
    check_match(resolve_template(template, make_context(environ={'A': '1'}, status=0)),
                [Text('a'), Text('b')])
    check_match(resolve_template(template, make_context(environ={'A': '1'}, status=2)),
                [Text('a'), Text('c')])
    check_match(resolve_template(template, make_context(environ={}, status=0)), [])


def main():
    test_literal()
    test_style()
    test_invocation()
    test_absent()
    test_invalid_options()
    test_missing_required_option()
    test_invalid_options_in_unselected_branch()
    test_exit_status_conditional()
    test_env_conditional()
    test_nested_conditional()


if __name__ == '__main__':
    main()
