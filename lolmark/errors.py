# -*- coding: utf-8 -*-
#
# This file is part of `lolmark`, a library for the LOLcode markup dialect
#
# Copyright © 2025 by the lolmark authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
Exceptions raised while reading a LOLcode markup document.

Errors found by the parser (:class:`ParseError` and its subclasses) are fatal:
the first one is raised and no document is returned. Errors found by the
resolver (:class:`ResolveError`) are collected, see
:class:`~lolmark.resolver.Resolver`.

Every error knows the position in the source text where it occurred. Use
:meth:`LolError.location` to get a line and column number, or
:meth:`LolError.format` to get a message prefixed with ``line:column``.

"""


class LolError(Exception):
    """Base class for all lolmark errors.

    ``message`` describes the error; ``pos`` is the offset in the source text,
    or None if it is not known.

    """
    def __init__(self, message, pos=None):
        self.message = message
        self.pos = pos
        super().__init__(message)

    def location(self, text):
        """Return a tuple (line, column) for our position in ``text``.

        Both values start at 1. Returns None if our position is unknown.

        """
        if self.pos is None:
            return None
        line = text.count('\n', 0, self.pos) + 1
        column = self.pos - (text.rfind('\n', 0, self.pos) + 1) + 1
        return line, column

    def format(self, text):
        """Return our message prefixed with ``line:column`` in ``text``."""
        location = self.location(text)
        if location:
            return "{}:{}: {}".format(*location, self.message)
        return self.message


class ParseError(LolError):
    """Raised when the token stream does not follow the grammar."""


class UnexpectedToken(ParseError):
    """Raised when the parser found another token than it expected.

    ``token`` is the offending :class:`~lolmark.lex.Token`, ``expected`` a
    tuple of the token kinds that would have been valid there.

    """
    def __init__(self, token, expected, message=None):
        self.token = token
        self.expected = tuple(expected)
        if message is None:
            message = "expected {}, found {}".format(
                " or ".join(self.expected), describe(token))
        super().__init__(message, token.pos)


class UnterminatedBlock(UnexpectedToken):
    """Raised when a block misses its closing marker.

    This happens when the closing marker of an enclosing scope (``#OIC``,
    ``#KTHXBYE``) or the end of the input is reached first. The ``block``
    attribute names the unterminated construct, e.g. ``"PARAGRAF"``.

    """
    def __init__(self, token, expected, block):
        self.block = block
        message = "unterminated {}: expected {}, found {}".format(
            block, " or ".join(expected), describe(token))
        super().__init__(token, expected, message)


class LexicalIncompleteComment(UnterminatedBlock):
    """Raised when an ``#OBTW`` comment never reaches its ``#TLDR``."""
    def __init__(self, token):
        super().__init__(token, ("#TLDR",), "#OBTW comment")


class DuplicateVariableDefine(ParseError):
    """Raised on a second variable definition in the same scope.

    ``name`` is the variable name of the second definition, ``previous`` the
    token that started the first definition in that scope.

    """
    def __init__(self, token, name, previous):
        self.token = token
        self.name = name
        self.previous = previous
        message = "duplicate variable definition {!r} (scope already defines one at {})".format(
            name, previous.pos)
        super().__init__(message, token.pos)


class ResolveError(LolError):
    """Base class for errors found while resolving variables."""


class UnresolvedVariable(ResolveError):
    """A variable is used but not defined in any enclosing scope."""
    def __init__(self, name, pos=None):
        self.name = name
        super().__init__("unresolved variable {!r}".format(name), pos)


def describe(token):
    """Return a short description of a token for use in error messages."""
    if token.text and token.text.upper() != token.kind:
        return "{} {!r}".format(token.kind, token.text)
    return token.kind
