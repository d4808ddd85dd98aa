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

"""Removes colors and text surrounding components that have nothing to show.

The resolved items are split into groups. A group starts with a color, or follows
a reset, and ends with a reset, or precedes the next color. E.g., for
C{"{cwd} {red}[{git_branch}]{reset} $ "}, the groups are:

    - C{cwd}, C{" "}
    - C{red}, C{"["}, C{git_branch}, C{"]"}, C{reset}
    - C{" $ "}

A group is kept if it contains only text and colors, or if it contains at
least one component value. Otherwise (a component with nothing to show, and no
component with something to show) the whole group is dropped. Outside a
repository, the example renders as C{"~/src  $ "}, without an empty pair of
brackets, and without escape sequences coloring nothing.
"""


def into_groups(items):
    groups = []
    group = []
    for item in items:
        if item.is_color_start():
            if len(group) > 0:
                groups.append(group)
                group = []
            group.append(item)
        elif item.is_color_reset():
            group.append(item)
            groups.append(group)
            group = []
        else:
            group.append(item)
    groups.append(group)
    return groups


def keep_group(group):
    decorative_only = all(item.is_decorative() for item in group)
    has_value = any(item.is_value() for item in group)
    return decorative_only or has_value


def squash(items):
    squashed = []
    for group in into_groups(items):
        if keep_group(group):
            squashed.extend(item for item in group if not item.is_absent())
    return squashed
