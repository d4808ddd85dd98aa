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

# Command line parsing. E.g.
#
#     CommandLine(USAGE,
#                 shell=flag('-s', '--shell', default='zsh'),
#                 preview=boolean_flag('--preview'),
#                 template=anon()).parse(sys.argv[1:])
#
# returns a dict mapping each var (shell, preview, template) to its value.


from shprompt.exception import KillShellException


class AnonArg(object):

    def __init__(self):
        self.var = None  # Filled in by CommandLine

    def __repr__(self):
        return 'AnonArg()'

    def has_flag(self, flag):
        return False

    def is_anon(self):
        return True

    def is_boolean(self):
        return False


class FlagArg(object):

    def __init__(self, flags, default, boolean):
        for f in flags:
            if not FlagArg.valid(f):
                raise KillShellException(f'Invalid flag: {f}')
        self.var = None  # Filled in by CommandLine
        self.flags = flags
        self.default = default
        self.boolean = boolean

    def __repr__(self):
        return '|'.join(self.flags)

    def has_flag(self, flag):
        return flag in self.flags

    def is_anon(self):
        return False

    def is_boolean(self):
        return self.boolean

    # -x or --xyz
    @staticmethod
    def valid(f):
        return ((len(f) == 2 and f[0] == '-' and f[1] != '-') or
                (len(f) > 2 and f.startswith('--')))


class CommandLine(object):

    def __init__(self, usage, **var_arg):
        self.usage = usage
        self.var_arg = var_arg
        for var, arg in self.var_arg.items():
            arg.var = var
        self.anon_arg = None
        for arg in self.var_arg.values():
            if arg.is_anon():
                assert self.anon_arg is None, 'Only one anon() is allowed'
                self.anon_arg = arg

    def parse(self, argv):
        values = {}  # var -> value
        for arg in self.var_arg.values():
            if not arg.is_anon():
                values[arg.var] = arg.default
        anon = []
        a = 0
        while a < len(argv):
            token = argv[a]
            a += 1
            if token == '--':
                # Everything else is anon, e.g. a template starting with -
                anon.extend(argv[a:])
                break
            elif token.startswith('-') and len(token) > 1:
                arg = self.arg_of(token)
                if arg.is_boolean():
                    values[arg.var] = True
                elif a == len(argv):
                    self.report_error(f'Value missing for flag: {token}')
                else:
                    # The value may start with -, e.g. --status -1.
                    values[arg.var] = argv[a]
                    a += 1
            else:
                anon.append(token)
        if self.anon_arg is not None:
            values[self.anon_arg.var] = anon
        elif len(anon) > 0:
            self.report_error(f'Unexpected arguments: {" ".join(anon)}')
        return values

    def arg_of(self, flag):
        for arg in self.var_arg.values():
            if arg.has_flag(flag):
                return arg
        self.report_error(f'Unrecognized flag: {flag}')

    def report_error(self, message):
        raise KillShellException(f'{message}\n{self.usage}')


def flag(*flags, default=None):
    return FlagArg(flags, default, boolean=False)


def boolean_flag(*flags):
    return FlagArg(flags, False, boolean=True)


def anon():
    return AnonArg()
