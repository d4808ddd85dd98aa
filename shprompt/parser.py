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

import shprompt.exception
from shprompt.exception import ParseError, UnknownIdentifierError, UnterminatedError
from shprompt.style import Color
from shprompt.token import (ComponentName, Conditional, EnvVarSet, ExitStatusZero, Invocation, Literal, Style)


# ----------------------------------------------------------------------------------------------------------------------

# Input

class Source(object):

    def __init__(self, text, position=0):
        self.text = text
        self.start = position
        self.end = position

    def __repr__(self):
        return f'{self.__class__.__name__}([{self.start}:{self.end}]{self.text[self.start:self.end]})'

    def more(self):
        return self.end < len(self.text)

    def peek(self, n=1):
        start = self.end
        end = self.end + n
        return self.text[start:end] if end <= len(self.text) else None

    def next_char(self):
        c = None
        if self.end < len(self.text):
            c = self.text[self.end]
            self.end += 1
        return c


# {else} or {end}. Ends the token sequence currently being parsed.
class Terminator(object):

    def __init__(self, keyword, position):
        self.keyword = keyword
        self.position = position

    def __repr__(self):
        return f'{{{self.keyword}}}@{self.position}'


# ----------------------------------------------------------------------------------------------------------------------

# Parsing

# Grammar:
#
#     template:
#             item*
#
#     item:
#             {{
#             literal
#             { ws* brace ws* }
#
#     literal:
#             Maximal run of characters other than {
#
#     brace:
#             color
#             reset
#             component [ws+ option]*
#             if ws+ condition
#             else
#             end
#
#     option:
#             identifier = value
#
#     condition:
#             success
#             $NAME
#
# {if ...} is followed by a template, then optionally {else} and another template, then {end}.
# identifier: letters and underscore. value: anything but whitespace and }. NAME: uppercase
# letters and underscore.

class Parser(object):
    OPEN = '{'
    CLOSE = '}'
    ESCAPED_OPEN = '{{'
    ASSIGN = '='
    ENV_PREFIX = '$'
    IF = 'if'
    ELSE = 'else'
    END = 'end'

    def __init__(self, text):
        self.text = text
        self.source = Source(text)

    def __repr__(self):
        return str(self.source)

    def parse(self):
        tokens, terminator = self.sequence()
        if terminator is not None:
            raise ParseError(self.text, terminator.position, f'{{{terminator.keyword}}} without matching {{if}}')
        assert not self.source.more()
        return tokens

    # Returns (tokens, terminator). terminator is None if the end of input was reached.
    def sequence(self):
        tokens = []
        while self.source.more():
            if self.source.peek(2) == Parser.ESCAPED_OPEN:
                self.source.end += 2
                tokens.append(Literal(Parser.ESCAPED_OPEN))
            elif self.source.peek() == Parser.OPEN:
                x = self.brace()
                if isinstance(x, Terminator):
                    return tokens, x
                tokens.append(x)
            else:
                tokens.append(self.literal())
        return tokens, None

    def literal(self):
        start = self.source.end
        while self.source.more() and self.source.peek() != Parser.OPEN:
            self.source.next_char()
        return Literal(self.text[start:self.source.end])

    def brace(self):
        start = self.source.end
        found_open = self.source.next_char()
        assert found_open == Parser.OPEN
        self.skip_whitespace()
        identifier_position = self.source.end
        identifier = self.identifier()
        if identifier is None:
            self.fail('expected a color, component, or keyword')
        if identifier == Parser.IF:
            return self.conditional(start)
        if identifier in (Parser.ELSE, Parser.END):
            self.skip_whitespace()
            self.expect(Parser.CLOSE)
            return Terminator(identifier, start)
        color = Color.named(identifier)
        if color is not None:
            self.skip_whitespace()
            self.expect(Parser.CLOSE)
            return Style(color)
        component = ComponentName.named(identifier)
        if component is not None:
            return Invocation(component, self.options())
        raise UnknownIdentifierError(self.text, identifier_position, identifier)

    def options(self):
        options = {}
        while True:
            n_spaces = self.skip_whitespace()
            if self.source.peek() == Parser.CLOSE:
                self.source.next_char()
                return options
            if not self.source.more():
                self.fail(f"expected '{Parser.CLOSE}'")
            if n_spaces == 0:
                self.fail(f"expected whitespace or '{Parser.CLOSE}'")
            key_position = self.source.end
            key = self.identifier()
            if key is None:
                self.fail(f"expected an option or '{Parser.CLOSE}'")
            self.expect(Parser.ASSIGN)
            value = self.value()
            if key in options:
                raise ParseError(self.text, key_position, f'duplicate option: {key}')
            options[key] = value

    def conditional(self, start):
        if self.skip_whitespace() == 0:
            self.fail('expected whitespace after if')
        condition = self.condition()
        self.skip_whitespace()
        self.expect(Parser.CLOSE)
        then_branch, terminator = self.sequence()
        if terminator is None:
            raise UnterminatedError(self.text, start, 'unterminated {if}, expected {else} or {end}')
        else_branch = None
        if terminator.keyword == Parser.ELSE:
            else_branch, terminator = self.sequence()
            if terminator is None:
                raise UnterminatedError(self.text, start, 'unterminated {if}, expected {end}')
            if terminator.keyword == Parser.ELSE:
                raise ParseError(self.text, terminator.position, '{else} already seen, expected {end}')
        return Conditional(condition, then_branch, else_branch)

    def condition(self):
        position = self.source.end
        if self.source.peek() == Parser.ENV_PREFIX:
            self.source.next_char()
            name = self.scan(lambda c: ('A' <= c <= 'Z') or c == '_')
            if len(name) == 0:
                self.fail('expected an environment variable name')
            return EnvVarSet(name)
        identifier = self.identifier()
        if identifier is None:
            self.fail(f'expected {ExitStatusZero.KEYWORD} or ${{NAME}}')
        if identifier == ExitStatusZero.KEYWORD:
            return ExitStatusZero()
        raise UnknownIdentifierError(self.text, position, identifier, 'condition')

    # Lexical helpers

    def identifier(self):
        identifier = self.scan(lambda c: (c.isascii() and c.isalpha()) or c == '_')
        return identifier if len(identifier) > 0 else None

    def value(self):
        value = self.scan(lambda c: not c.isspace() and c != Parser.CLOSE)
        if len(value) == 0:
            self.fail('expected an option value')
        return value

    def scan(self, qualifies):
        start = self.source.end
        c = self.source.peek()
        while c is not None and qualifies(c):
            self.source.next_char()
            c = self.source.peek()
        return self.text[start:self.source.end]

    def skip_whitespace(self):
        return len(self.scan(lambda c: c.isspace()))

    def expect(self, symbol):
        if self.source.peek() == symbol:
            self.source.next_char()
        else:
            self.fail(f"expected '{symbol}'")

    def fail(self, expected):
        if self.source.more():
            raise ParseError(self.text, self.source.end, expected)
        else:
            raise UnterminatedError(self.text, self.source.end, expected)


def parse(template):
    if not isinstance(template, str):
        raise shprompt.exception.KillRenderException(f'Template must be a string: {template!r}')
    return Parser(template).parse()
