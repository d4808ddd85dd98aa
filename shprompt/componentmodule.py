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

import importlib

import shprompt.component
import shprompt.exception
from shprompt.token import ComponentName


class ComponentModule:

    def __init__(self, name):
        self._name = name
        self._display = None
        self._help = None
        component_module = importlib.import_module(f'shprompt.component.{name.value}')
        for k, v in component_module.__dict__.items():
            if k == 'display':
                self._display = v
            elif k == 'HELP':
                self._help = v
        assert self._display is not None, name

    def __repr__(self):
        return f'ComponentModule({self._name.value})'

    # Returns the component's text, or None if there is nothing to show. Consumed options
    # are removed from options.
    def display(self, context, options):
        return self._display(context, options)

    def help(self):
        return self._help

    def needs_repository(self):
        return self._name.value in shprompt.component.git


_COMPONENT_MODULES = None


def component_modules():
    global _COMPONENT_MODULES
    if _COMPONENT_MODULES is None:
        modules = {}
        for name in ComponentName:
            assert name.value in shprompt.component.all, name
            modules[name] = ComponentModule(name)
        _COMPONENT_MODULES = modules
    return _COMPONENT_MODULES


def component_module(name):
    return component_modules()[name]


# Option helpers for display functions. Each removes the option it reads.

def pop_choice(component, options, key, choices, default):
    value = options.pop(key, None)
    if value is None:
        return default
    if value not in choices:
        raise shprompt.exception.InvalidOptions(component, {key: value})
    return value


def pop_boolean(component, options, key, default=False):
    value = options.pop(key, None)
    if value is None:
        return default
    if value == 'true':
        return True
    if value == 'false':
        return False
    raise shprompt.exception.InvalidOptions(component, {key: value})


def pop_required(component, options, key):
    value = options.pop(key, None)
    if value is None:
        raise shprompt.exception.MissingRequiredOption(component, key)
    return value
