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
The recursive-descent parser that builds a :class:`~.dom.lol.Document`.

The :class:`Parser` reads the significant tokens (see
:func:`~.lex.significant`) and has one method per grammar production. The
first token that does not fit raises a :class:`~.errors.ParseError`; there is
no error recovery and no partial document is returned.

Example::

    >>> from lolmark import lex
    >>> from lolmark.parser import Parser
    >>> tokens = lex.significant(lex.tokenize("#HAI #GIMMEH BOLD hi #MKAY #KTHXBYE"))
    >>> Parser().parse(tokens).dump()
    <lol.Document (1 child) [0:35]>
     ╰╴<lol.Body (1 child) [5:26]>
        ╰╴<lol.Bold 'hi' [5:26]>

"""

from .lex import (
    Token, IDENT, TEXT, COMMENT, EOF, HAI, KTHXBYE, OBTW, TLDR, MAEK, GIMMEH,
    OIC, MKAY, I, IT, LEMME, HEAD, TITLE, PARAGRAF, BOLD, ITALICS, LIST, ITEM, NEWLINE,
    SOUNDZ, VIDZ, HAZ, IZ, SEE)
from .dom import lol
from .errors import (
    UnexpectedToken, UnterminatedBlock, LexicalIncompleteComment,
    DuplicateVariableDefine)


#: Tokens that end an enclosing scope; finding one of those instead of the
#: closer of a block means the block is unterminated.
ENDINGS = (OIC, KTHXBYE, EOF)

#: Also a new block can't start inside a head, paragraph or list.
BLOCK_ENDINGS = ENDINGS + (MAEK,)

#: The elements ``#GIMMEH`` may introduce, per scope.
BODY_INLINE = (BOLD, ITALICS, NEWLINE, SOUNDZ, VIDZ)
PARAGRAPH_INLINE = BODY_INLINE
ITEM_INLINE = (BOLD, ITALICS)

_bracket_types = {
    TITLE: lol.Title,
    BOLD: lol.Bold,
    ITALICS: lol.Italics,
    SOUNDZ: lol.Audio,
    VIDZ: lol.Video,
}


class TokenStream:
    """The tokens a Parser reads from, with a current position.

    The tokens are read in a list. If the last token is not an EOF token, one
    is added.

    """
    def __init__(self, tokens):
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].kind != EOF:
            end = self._tokens[-1].end if self._tokens else 0
            self._tokens.append(Token(EOF, "", end))
        self._index = 0

    @property
    def token(self):
        """The current token."""
        return self._tokens[self._index]

    @property
    def kind(self):
        """The kind of the current token."""
        return self._tokens[self._index].kind

    def peek(self, offset=1):
        """Return the token ``offset`` tokens after the current one.

        Beyond the end, the EOF token is returned.

        """
        return self._tokens[min(self._index + offset, len(self._tokens) - 1)]

    def next(self):
        """Return the current token and advance to the next one."""
        token = self.token
        if self._index < len(self._tokens) - 1:
            self._index += 1
        return token

    def expect(self, *kinds):
        """Return the current token and advance, if it is one of ``kinds``.

        Raises :class:`~.errors.UnexpectedToken` otherwise.

        """
        if self.kind not in kinds:
            raise UnexpectedToken(self.token, kinds)
        return self.next()


class Parser:
    """Build a :class:`~.dom.lol.Document` from significant tokens.

    If ``with_origin`` is True (the default), the created nodes keep the tokens
    they are read from, so they know their position in the source text.

    A Parser keeps no state between calls, so one instance can be used for any
    number of documents, also from different threads.

    """
    def __init__(self, with_origin=True):
        self.with_origin = with_origin

    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create an Element, keeping its origin if :attr:`with_origin` is True.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances. All nodes that are read from tokens are created using
        this method.

        """
        if self.with_origin:
            return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children)
        return element_class.from_origin(tuple(head_origin), tuple(tail_origin), *children)

    def unexpected(self, token, expected, block, endings=ENDINGS):
        """Return the exception to raise for an unexpected token in ``block``.

        If the token is one of the ``endings``, an
        :class:`~.errors.UnterminatedBlock` is returned, otherwise an
        :class:`~.errors.UnexpectedToken`.

        """
        if token.kind in endings:
            return UnterminatedBlock(token, expected, block)
        return UnexpectedToken(token, expected)

    def close(self, stream, kind, block, endings=ENDINGS):
        """Return the closing token of ``block``, which must be of ``kind``."""
        if stream.kind != kind:
            raise self.unexpected(stream.token, (kind,), block, endings)
        return stream.next()

    ## public entry points
    def parse(self, tokens):
        """Return a Document from the tokens."""
        return self.document(TokenStream(tokens))

    def parse_body(self, tokens):
        """Return a list of body elements from the tokens.

        This reads the tokens as the contents of a document body upto the end
        of the input, without ``#HAI`` and ``#KTHXBYE`` markers.

        """
        stream = TokenStream(tokens)
        return list(self.body_elements(stream, EOF))

    ## productions
    def document(self, stream):
        """``#HAI`` comments [head] body ``#KTHXBYE``."""
        hai = stream.expect(HAI)
        children = list(self.comments(stream))
        if stream.kind == MAEK and stream.peek().kind == HEAD:
            children.append(self.head(stream))
        children.append(lol.Body(*self.body_elements(stream, KTHXBYE)))
        kthxbye = stream.next()
        stream.expect(EOF)
        return self.factory(lol.Document, (hai,), (kthxbye,), *children)

    def comments(self, stream):
        """Yield zero or more Comment elements."""
        while stream.kind == OBTW:
            yield self.comment(stream)

    def comment(self, stream):
        """``#OBTW`` text ``#TLDR``."""
        origin = [stream.next()]
        while stream.kind == COMMENT:
            origin.append(stream.next())
        if stream.kind != TLDR:
            raise LexicalIncompleteComment(stream.token)
        origin.append(stream.next())
        return self.factory(lol.Comment, origin)

    def head(self, stream):
        """``#MAEK HEAD`` comments title comments ``#OIC``."""
        head_origin = stream.next(), stream.next()
        children = list(self.comments(stream))
        if stream.kind != GIMMEH:
            # an #OIC here closes the head, it is the title that is missing
            raise self.unexpected(stream.token, (GIMMEH,), HEAD, (KTHXBYE, EOF, MAEK))
        if stream.peek().kind != TITLE:
            raise UnexpectedToken(stream.peek(), (TITLE,))
        children.append(self.bracket(stream, BLOCK_ENDINGS))
        children.extend(self.comments(stream))
        oic = self.close(stream, OIC, HEAD, BLOCK_ENDINGS)
        return self.factory(lol.Head, head_origin, (oic,), *children)

    def body_elements(self, stream, end):
        """Yield body elements and comments until a token of kind ``end``.

        The ``end`` token is not consumed. At most one variable definition is
        allowed.

        """
        expected = (GIMMEH, MAEK, I, LEMME, OBTW, TEXT, end)
        define = None
        while True:
            yield from self.comments(stream)
            token = stream.token
            if token.kind == end:
                return
            elif token.kind == I:
                yield self.scoped_define(stream, define)
                define = token
            elif token.kind == MAEK:
                word = stream.peek()
                if word.kind == PARAGRAF:
                    yield self.paragraph(stream)
                elif word.kind == LIST:
                    yield self.list(stream)
                else:
                    raise UnexpectedToken(word, (PARAGRAF, LIST))
            elif token.kind == GIMMEH:
                yield self.inline(stream, BODY_INLINE)
            elif token.kind == LEMME:
                yield self.variable_use(stream)
            elif token.kind == TEXT:
                yield self.text(stream)
            elif end != EOF and token.kind == EOF:
                raise UnterminatedBlock(token, expected, HAI)
            else:
                raise UnexpectedToken(token, expected)

    def paragraph(self, stream):
        """``#MAEK PARAGRAF`` [define] inline elements ``#OIC``."""
        head_origin = stream.next(), stream.next()
        children = []
        define = None
        while True:
            children.extend(self.comments(stream))
            token = stream.token
            if token.kind == OIC:
                break
            elif token.kind == I:
                children.append(self.scoped_define(stream, define))
                define = token
            elif token.kind == GIMMEH:
                children.append(self.inline(stream, PARAGRAPH_INLINE))
            elif token.kind == LEMME:
                children.append(self.variable_use(stream))
            elif token.kind == TEXT:
                children.append(self.text(stream))
            else:
                expected = (GIMMEH, I, LEMME, OBTW, TEXT, OIC)
                raise self.unexpected(token, expected, PARAGRAF, BLOCK_ENDINGS)
        oic = stream.next()
        return self.factory(lol.Paragraph, head_origin, (oic,), *children)

    def list(self, stream):
        """``#MAEK LIST`` [define] list items ``#OIC``."""
        head_origin = stream.next(), stream.next()
        children = []
        define = None
        while True:
            children.extend(self.comments(stream))
            token = stream.token
            if token.kind == OIC:
                break
            elif token.kind == I:
                children.append(self.scoped_define(stream, define))
                define = token
            elif token.kind == GIMMEH:
                if stream.peek().kind != ITEM:
                    raise UnexpectedToken(stream.peek(), (ITEM,))
                children.append(self.list_item(stream))
            else:
                expected = (GIMMEH, I, OBTW, OIC)
                raise self.unexpected(token, expected, LIST, BLOCK_ENDINGS)
        oic = stream.next()
        return self.factory(lol.List, head_origin, (oic,), *children)

    def list_item(self, stream):
        """``#GIMMEH ITEM`` text, bold, italics and variable uses ``#MKAY``."""
        head_origin = stream.next(), stream.next()
        children = []
        while True:
            children.extend(self.comments(stream))
            token = stream.token
            if token.kind == MKAY:
                break
            elif token.kind == GIMMEH:
                children.append(self.inline(stream, ITEM_INLINE))
            elif token.kind == LEMME:
                children.append(self.variable_use(stream))
            elif token.kind == TEXT:
                children.append(self.text(stream))
            else:
                expected = (GIMMEH, LEMME, OBTW, TEXT, MKAY)
                raise self.unexpected(token, expected, ITEM)
        mkay = stream.next()
        return self.factory(lol.ListItem, head_origin, (mkay,), *children)

    def inline(self, stream, allowed):
        """``#GIMMEH`` followed by one of the ``allowed`` words."""
        word = stream.peek()
        if word.kind not in allowed:
            raise UnexpectedToken(word, allowed)
        if word.kind == NEWLINE:
            return self.factory(lol.Newline, (stream.next(), stream.next()))
        return self.bracket(stream)

    def bracket(self, stream, endings=ENDINGS):
        """``#GIMMEH`` word text ``#MKAY`` for title, bold, italics, audio and video."""
        gimmeh, word = stream.next(), stream.next()
        text = self.text_tokens(stream)
        mkay = self.close(stream, MKAY, word.kind, endings)
        return self.factory(_bracket_types[word.kind], (gimmeh, word, *text), (mkay,))

    def scoped_define(self, stream, previous):
        """Read a variable definition in a scope.

        ``previous`` is the first token of the definition that the scope
        already has, or None. If there is one, DuplicateVariableDefine is
        raised.

        """
        token = stream.token
        node = self.variable_define(stream)
        if previous:
            raise DuplicateVariableDefine(token, node.name, previous)
        return node

    def variable_define(self, stream):
        """``#I HAZ`` identifier ``#IT IZ`` text ``#MKAY``."""
        head_origin = stream.next(), stream.expect(HAZ)
        ident = stream.expect(IDENT)
        value_origin = [stream.expect(IT), stream.expect(IZ)]
        value_origin.extend(self.text_tokens(stream))
        mkay = self.close(stream, MKAY, "#I HAZ")
        return self.factory(lol.VariableDefine, head_origin, (mkay,),
            self.factory(lol.Identifier, (ident,)),
            self.factory(lol.Value, value_origin))

    def variable_use(self, stream):
        """``#LEMME SEE`` identifier ``#MKAY``."""
        head_origin = stream.next(), stream.expect(SEE)
        ident = stream.expect(IDENT)
        mkay = self.close(stream, MKAY, "#LEMME SEE")
        return self.factory(lol.VariableUse, head_origin, (mkay,),
            self.factory(lol.Identifier, (ident,)))

    def text(self, stream):
        """One or more text tokens."""
        return self.factory(lol.Text, self.text_tokens(stream))

    def text_tokens(self, stream):
        """Return the list of text tokens at the current position."""
        tokens = []
        while stream.kind == TEXT:
            tokens.append(stream.next())
        return tokens
