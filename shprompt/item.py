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

# Resolved items: what each token turned into at render time.


class Item(object):

    def __init__(self, text):
        self.text = text

    def __repr__(self):
        return f'{self.__class__.__name__}({self.text!r})'

    def __eq__(self, other):
        return type(self) is type(other) and self.text == other.text

    def __hash__(self):
        return hash((self.__class__.__name__, self.text))

    def is_color_start(self):
        return False

    def is_color_reset(self):
        return False

    def is_value(self):
        return False

    def is_absent(self):
        return False

    # Text and color markers only: nothing that depends on a component.
    def is_decorative(self):
        return False


class Text(Item):

    def is_decorative(self):
        return True


class ColorStart(Item):

    def is_color_start(self):
        return True

    def is_decorative(self):
        return True


class ColorReset(Item):

    def is_color_reset(self):
        return True

    def is_decorative(self):
        return True


class Value(Item):

    def is_value(self):
        return True


# A component that legitimately has nothing to show. Not an error.
class Absent(Item):

    def __init__(self):
        super().__init__(None)

    def __repr__(self):
        return 'Absent()'

    def is_absent(self):
        return True


ABSENT = Absent()
