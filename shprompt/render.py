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

import shprompt.parser
import shprompt.resolver
import shprompt.squash


def render(items):
    buffer = []
    for item in items:
        # squash() removes absent items
        assert not item.is_absent(), items
        buffer.append(item.text)
    return ''.join(buffer)


def prompt(template, context, trace=None):
    """Render C{template} using the external state in C{context}.

    Raises ParseError for a malformed template, and InvalidOptions for a
    component invocation with bad options. Nothing is rendered in either case.
    If C{trace} is enabled, the output of each phase is written to it.
    """
    def write_trace(phase, output):
        if trace is not None and trace.is_enabled():
            trace.write(phase, output)

    tokens = shprompt.parser.parse(template)
    write_trace('parse', tokens)
    items = shprompt.resolver.resolve(tokens, context)
    write_trace('resolve', items)
    items = shprompt.squash.squash(items)
    write_trace('squash', items)
    output = render(items)
    write_trace('render', repr(output))
    return output
