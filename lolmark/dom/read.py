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
Simple helper functions to easily build DOM elements reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. This is the best
when building DOM snippets using this module and inserting them in other
documents.

If you set the ``with_origin`` argument in the reader functions to True, the
origin tokens are preserved, so the DOM nodes know their position in the
originating text.

The returned nodes are not resolved, variable uses stay in the tree. Use
:func:`lolmark.resolve` for that.

"""

from .. import lex
from ..parser import Parser


# init two parsers, accessible by 0 (False) and 1 (True) :-)
_parser = [Parser(with_origin=False), Parser(with_origin=True)]


def lol_document(text, with_origin=False):
    """Return a :class:`.lol.Document` from the text.

    Example::

        >>> from lolmark.dom import read
        >>> node = read.lol_document("#HAI #GIMMEH BOLD hi #MKAY #KTHXBYE")
        >>> node.dump()
        <lol.Document (1 child)>
         ╰╴<lol.Body (1 child)>
            ╰╴<lol.Bold 'hi'>
        >>> node.write()
        '#HAI\\n#GIMMEH BOLD hi #MKAY\\n#KTHXBYE'

    Raises a :class:`~lolmark.errors.ParseError` if the text is not a valid
    document.

    """
    return _parser[with_origin].parse(lex.significant(lex.tokenize(text)))


def lol(text, with_origin=False):
    """Return one body element from the text.

    The text is read as the contents of a document body, so it should not
    contain the ``#HAI`` and ``#KTHXBYE`` markers. Example::

        >>> from lolmark.dom import read
        >>> read.lol("#LEMME SEE name #MKAY")
        <lol.VariableUse (1 child)>

    If ``with_origin`` is True, the positions are relative to the text given
    to this function.

    """
    tokens = lex.significant(lex.tokenize(text))
    for node in _parser[with_origin].parse_body(tokens):
        return node
