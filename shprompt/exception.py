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

"""Exceptions that abort a render, or the whole shprompt process.

Both families extend BaseException, so that they cannot be caught by
"except Exception" in code that deals with external state (git, filesystem).
"Nothing to show" is never an exception: components return None for that.
"""


# Exception for terminating a render. The prompt is not printed, not even partially.
class KillRenderException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)
        self.cause = cause

    def __str__(self):
        return str(self.cause)


# Malformed template. Raised before any component is resolved.
class ParseError(KillRenderException):
    SNIPPET_SIZE = 10

    def __init__(self, text, position, expected):
        super().__init__(expected)
        self.text = text
        self.position = position
        self.expected = expected

    def __str__(self):
        if self.position >= len(self.text):
            return f'Parsing error at end of "{self.text}": {self.expected}'
        snippet_start = max(self.position - ParseError.SNIPPET_SIZE, 0)
        snippet_end = min(self.position + ParseError.SNIPPET_SIZE + 1, len(self.text))
        snippet = self.text[snippet_start:snippet_end]
        if snippet_start > 0:
            snippet = '...' + snippet
            offset = self.position - snippet_start + 3
        else:
            offset = self.position
        if snippet_end < len(self.text):
            snippet = snippet + '...'
        return f'Parsing error at position {offset} of "{snippet}": {self.expected}'


class UnknownIdentifierError(ParseError):

    def __init__(self, text, position, identifier, kind='identifier'):
        super().__init__(text, position, f'unknown {kind}: {identifier}')
        self.identifier = identifier


class UnterminatedError(ParseError):

    def __init__(self, text, position, expected):
        super().__init__(text, position, expected)


# A component invocation kept option keys its handler did not consume, or had
# an option value the handler could not use.
class InvalidOptions(KillRenderException):

    def __init__(self, component, options, message=None):
        self.component = component
        self.options = dict(options)
        if message is None:
            pairs = ', '.join(f'{key}={self.options[key]}' for key in sorted(self.options))
            message = f'invalid options: {pairs}'
        super().__init__(message)


class MissingRequiredOption(InvalidOptions):

    def __init__(self, component, option):
        super().__init__(component, {}, f'{component}: missing required option: {option}')
        self.option = option


# Exception for terminating shprompt itself: bad command line, unsupported shell, etc.
class KillShellException(BaseException):

    def __init__(self, cause):
        super().__init__(cause)

    def __str__(self):
        return str(self.args[0])
