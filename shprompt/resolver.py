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

import shprompt.componentmodule
import shprompt.exception
import shprompt.style
from shprompt.item import ABSENT, ColorReset, ColorStart, Text, Value
from shprompt.token import Conditional, Invocation, Literal, Style


# Turns tokens into resolved items. Each token yields one item, except for a
# conditional, which yields the items of the branch selected by its condition.
# Raises InvalidOptions on the first invocation with bad options.
def resolve(tokens, context):
    items = []
    for token in tokens:
        if isinstance(token, Conditional):
            branch = (token.then_branch if token.condition.holds(context) else
                      token.else_branch)
            if branch is not None:
                items.extend(resolve(branch, context))
        else:
            items.append(resolve_token(token, context))
    return items


def resolve_token(token, context):
    if isinstance(token, Literal):
        return Text(token.text)
    elif isinstance(token, Style):
        shell = context.shell_kind()
        return (ColorReset(shprompt.style.color_reset(shell)) if token.color.is_reset() else
                ColorStart(shprompt.style.color_start(token.color, shell)))
    elif isinstance(token, Invocation):
        return resolve_invocation(token, context)
    else:
        assert False, token


def resolve_invocation(token, context):
    # The handler removes every option it consumes. Anything left over wasn't recognized.
    options = dict(token.options)
    value = shprompt.componentmodule.component_module(token.name).display(context, options)
    if len(options) > 0:
        raise shprompt.exception.InvalidOptions(token.name.value, options)
    return ABSENT if value is None else Value(str(context.shell_kind().quote(value)))
