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
Some utility functions.
"""


def whitespace_key(text):
    r"""Return a key to determine the importance of the whitespace.

    This is used by e.g. the :func:`collapse_whitespace` function. A two-tuple
    is returned: ``(newlines spaces)``, where the first value is the number of
    newlines in the text, and the second value the number of spaces.

    """
    return text.count('\n'), text.count(' ')


def collapse_whitespace(whitespaces):
    r"""Return the "most important" whitespace of the specified strings.

    This is used to combine whitespace requirements. For example, newlines
    are preferred over single spaces, and a single space is preferred over
    an empty string. For example::

        >>> collapse_whitespace(['\n', ' '])
        '\n'
        >>> collapse_whitespace([' ', ''])
        ' '

    """
    return max(whitespaces, key=whitespace_key, default='')


def combine_text(fragments):
    r"""Concatenate text fragments collapsing whitespace before and after the
    fragments.

    ``fragments`` is an iterable of (``before``, ``text``, ``after``) tuples,
    where ``before`` and ``after`` are whitespace. If a ``text`` is empty, the
    whitespace before and after are collapsed into the other surrounding
    whitespace. Returns a tree-tuple (``before``, ``text``, ``after``)
    containing the first ``before`` value, the combined ``text``, and the last
    ``after`` value.

    """
    result = []
    whitespace = []
    for before, text, after in fragments:
        whitespace.append(before)
        if text:
            result.append(collapse_whitespace(whitespace))
            result.append(text)
            whitespace.clear()
        whitespace.append(after)
    return ''.join(result[:1]), ''.join(result[1:]), collapse_whitespace(whitespace)


def join_text(tokens):
    r"""Return the stripped text of the tokens.

    Where the text of two tokens does not touch (i.e. a line break was
    between them), a single space is inserted. Whitespace inside a token is
    kept::

        >>> from lolmark.lex import Token
        >>> join_text([Token('TEXT', ' My  Doc ', 10), Token('TEXT', 'rocks', 20)])
        'My  Doc rocks'

    """
    pieces = []
    end = None
    for t in tokens:
        if pieces and t.pos == end:
            pieces[-1] += t.text
        else:
            pieces.append(t.text)
        end = t.end
    return ' '.join(filter(None, (p.strip() for p in pieces)))
