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
import sys

import shprompt.exception


# Utility to print to stderr, flushing stdout first, to minimize weird ordering due to buffering.
def print_to_stderr(message):
    sys.stdout.flush()
    print(message, file=sys.stderr, flush=True)


class Trace(object):

    def __init__(self):
        self.tracefile = None
        self.description = None

    def __repr__(self):
        return f'Trace({self.description})'

    def is_enabled(self):
        return self.tracefile is not None

    def enable(self, target):
        if target is sys.stdout:
            self.tracefile = sys.stdout
            self.description = 'stdout'
        else:
            try:
                self.tracefile = open(target, 'a')
                self.description = target
            except OSError as e:
                raise shprompt.exception.KillShellException(
                    f'Unable to start tracing to {target}: {e}')

    def disable(self):
        if self.tracefile and self.tracefile is not sys.stdout:
            self.tracefile.close()
        self.tracefile = None
        self.description = None

    # output: output of the phase, e.g. the tokens produced by parsing
    def write(self, phase, output):
        assert self.tracefile
        print(f'{os.getpid()}: {phase} -> {output}', file=self.tracefile, flush=True)
