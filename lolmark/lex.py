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
Turn LOLcode markup text into a stream of tokens.

The lexing itself is done by *parce* using the :class:`~.lang.lolcode.LolCode`
language definition. :func:`tokenize` flattens the resulting tree into
:class:`Token` tuples, each with a ``kind``, the exact matched ``text`` and the
``pos`` in the source text. The stream always ends with an :data:`EOF` token.

:func:`significant` drops the whitespace tokens; the parser only sees the
remaining tokens.

Lexing never fails: every character ends up in some token. Unknown ``#`` words
become :data:`INVALID` tokens and an unterminated comment simply runs to the
end of the text; the parser reports those.

"""

import collections

import parce
import parce.action as a

from .lang.lolcode import LolCode


# token kinds that are not a keyword
IDENT = "IDENT"
TEXT = "TEXT"
COMMENT = "COMMENT"
WHITESPACE = "WHITESPACE"
INVALID = "INVALID"
EOF = "EOF"

# hashed keywords
HAI = "#HAI"
KTHXBYE = "#KTHXBYE"
OBTW = "#OBTW"
TLDR = "#TLDR"
MAEK = "#MAEK"
GIMMEH = "#GIMMEH"
OIC = "#OIC"
MKAY = "#MKAY"
I = "#I"
IT = "#IT"
LEMME = "#LEMME"

# plain-word keywords
HEAD = "HEAD"
TITLE = "TITLE"
PARAGRAF = "PARAGRAF"
BOLD = "BOLD"
ITALICS = "ITALICS"
LIST = "LIST"
ITEM = "ITEM"
NEWLINE = "NEWLINE"
SOUNDZ = "SOUNDZ"
VIDZ = "VIDZ"
HAZ = "HAZ"
IZ = "IZ"
SEE = "SEE"


# the kind of tokens whose text does not determine the kind
_action_kinds = {
    a.Name.Variable: IDENT,
    a.Text: TEXT,
    a.Comment: COMMENT,
    a.Whitespace: WHITESPACE,
    a.Keyword.Invalid: INVALID,
}


class Token(collections.namedtuple("Token", "kind text pos")):
    """A token: its ``kind``, the matched ``text`` and the ``pos`` in the source.

    For keywords, the kind is the keyword in upper case, e.g. ``"#HAI"`` or
    ``"BOLD"``, regardless of how it was written in the source.

    """
    __slots__ = ()

    def __repr__(self):
        return "<Token {} {!r} [{}:{}]>".format(self.kind, self.text, self.pos, self.end)

    @property
    def end(self):
        """The position right after the token."""
        return self.pos + len(self.text)

    @property
    def length(self):
        """The length of the token's text."""
        return len(self.text)


def kind(action, text):
    """Return the token kind for a parce action and the token's text."""
    try:
        return _action_kinds[action]
    except KeyError:
        return text.upper()


def tokenize(text):
    """Yield all :class:`Token` instances for ``text``, including whitespace.

    The last token is always an :data:`EOF` token with empty text at the end
    of the text.

    """
    for t in parce.root(LolCode.root, text).tokens():
        yield Token(kind(t.action, t.text), t.text, t.pos)
    yield Token(EOF, "", len(text))


def significant(tokens):
    """Yield the tokens that are not whitespace, in the same order."""
    return (t for t in tokens if t.kind != WHITESPACE)
