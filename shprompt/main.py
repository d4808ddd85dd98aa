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
import shutil
import sys

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import ANSI

import shprompt.componentmodule
import shprompt.exception
import shprompt.locations
import shprompt.parser
import shprompt.render
import shprompt.shellinit
import shprompt.util
import shprompt.version
from shprompt.cliargs import CommandLine, anon, boolean_flag, flag
from shprompt.context import Context
from shprompt.style import Color, Shell
from shprompt.token import ComponentName

DEFAULT_TEMPLATE = '{cwd} {git_branch} $ '
TEMPLATE_VAR = 'SHPROMPT_TEMPLATE'
TRACE_VAR = 'SHPROMPT_TRACE'

USAGE = f'''\
shprompt {shprompt.version.VERSION}

Usage:
    shprompt [--shell zsh|bash|no_wrap] [--status N] [--jobs JOBS] [--trace FILE] [--preview] [TEMPLATE]
    shprompt init [--shell zsh|bash] [TEMPLATE]
    shprompt help [COMPONENT]

TEMPLATE defaults to ${TEMPLATE_VAR}, then ~/.config/shprompt/template, then "{DEFAULT_TEMPLATE}".'''


def template_from(templates, environ=None):
    if environ is None:
        environ = os.environ
    if len(templates) > 1:
        raise shprompt.exception.KillShellException(f'Only one template may be specified.\n{USAGE}')
    if len(templates) == 1:
        return templates[0]
    template = environ.get(TEMPLATE_VAR)
    if template:
        return template
    template = shprompt.locations.Locations(environ).read_template()
    if template:
        return template
    return DEFAULT_TEMPLATE


def run_prompt(argv):
    args = CommandLine(USAGE,
                       shell=flag('-s', '--shell', default=Shell.ZSH.value),
                       status=flag('--status', default='0'),
                       jobs=flag('-j', '--jobs'),
                       trace=flag('--trace'),
                       preview=boolean_flag('-p', '--preview'),
                       template=anon()).parse(argv)
    template = template_from(args['template'])
    shell = Shell.NO_WRAP if args['preview'] else Shell.of(args['shell'])
    try:
        status = int(args['status'])
    except ValueError:
        raise shprompt.exception.KillShellException(f'--status must be an integer: {args["status"]}')
    trace = shprompt.util.Trace()
    trace_target = args['trace'] if args['trace'] else os.environ.get(TRACE_VAR)
    if trace_target:
        trace.enable(trace_target)
    try:
        context = Context(shell, last_exit_status=status, jobs=args['jobs'])
        output = shprompt.render.prompt(template, context, trace)
    finally:
        trace.disable()
    if args['preview']:
        print_formatted_text(ANSI(output))
    else:
        sys.stdout.write(output)
        sys.stdout.flush()
    return 0


def run_init(argv):
    args = CommandLine(USAGE,
                       shell=flag('-s', '--shell'),
                       template=anon()).parse(argv)
    templates = args['template']
    if len(templates) > 1:
        raise shprompt.exception.KillShellException(f'Only one template may be specified.\n{USAGE}')
    template = templates[0] if templates else None
    if template is not None:
        # Fail now rather than before every prompt
        shprompt.parser.parse(template)
    shell = shprompt.shellinit.detect_shell() if args['shell'] is None else Shell.of(args['shell'])
    print(shprompt.shellinit.init_script(shell, executable(), template), end='')
    return 0


def run_help(argv):
    if len(argv) == 0:
        print(USAGE)
        print()
        print('Components:')
        for name in ComponentName:
            module = shprompt.componentmodule.component_module(name)
            git = ' (git)' if module.needs_repository() else ''
            print(f'    {name.value}{git}')
        print()
        print(f'Colors: {", ".join(Color.names())}')
        print()
        print('Conditionals: {if success}...{else}...{end}, {if $NAME}...{end}')
    else:
        for name in argv:
            component = ComponentName.named(name)
            if component is None:
                raise shprompt.exception.KillShellException(f'Unknown component: {name}')
            print(shprompt.componentmodule.component_module(component).help().strip())
    return 0


def executable():
    argv0 = sys.argv[0] if sys.argv and sys.argv[0] else None
    if argv0 and pathlib.Path(argv0).name == 'shprompt' and pathlib.Path(argv0).exists():
        return pathlib.Path(argv0).resolve()
    found = shutil.which('shprompt')
    return found if found else 'shprompt'


def main(argv=None):
    if argv is None:
        argv = sys.argv[1:]
    try:
        if len(argv) > 0 and argv[0] == 'init':
            return run_init(argv[1:])
        elif len(argv) > 0 and argv[0] == 'help':
            return run_help(argv[1:])
        else:
            return run_prompt(argv)
    except shprompt.exception.KillShellException as e:
        shprompt.util.print_to_stderr(str(e))
        return 2
    except shprompt.exception.KillRenderException as e:
        shprompt.util.print_to_stderr(f'shprompt: {e}')
        return 1


if __name__ == '__main__':
    sys.exit(main())
