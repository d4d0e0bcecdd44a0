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
Elements of a LOLcode markup document.

A parsed document looks like this::

    >>> from lolmark.dom import read
    >>> read.lol_document('''#HAI
    ... #MAEK HEAD #GIMMEH TITLE My Doc #MKAY #OIC
    ... #MAEK PARAGRAF Hello #GIMMEH BOLD world #MKAY #OIC
    ... #KTHXBYE''').dump()
    <lol.Document (2 children)>
     ├╴<lol.Head (1 child)>
     │  ╰╴<lol.Title 'My Doc'>
     ╰╴<lol.Body (1 child)>
        ╰╴<lol.Paragraph (2 children)>
           ├╴<lol.Text 'Hello'>
           ╰╴<lol.Bold 'world'>

Comments are kept in the tree where they appear; they are attached to the
element that follows them, see :meth:`~.element.Element.comments`. Renderers
that do not care about comments can skip all :class:`Comment` instances.

"""

from ..lex import TEXT, COMMENT
from . import element
from .util import join_text


class Document(element.BlockElement):
    """A full LOLcode markup document, from ``#HAI`` to ``#KTHXBYE``.

    The children are zero or more :class:`Comment` nodes, an optional
    :class:`Head` and the :class:`Body`.

    Note that the :attr:`head` attribute returns the :class:`Head` element
    (not the head text, like other elements do).

    """
    space_after_head = space_between = space_before_tail = '\n'

    def write_head(self):
        return '#HAI'

    def write_tail(self):
        return '#KTHXBYE'

    @property
    def head(self):
        """The :class:`Head` element, or None."""
        for n in self / Head:
            return n

    @property
    def body(self):
        """The :class:`Body` element."""
        for n in self / Body:
            return n


class Head(element.BlockElement):
    """The ``#MAEK HEAD`` ... ``#OIC`` block, containing the :class:`Title`."""
    head = '#MAEK HEAD'
    tail = '#OIC'
    space_after_head = space_between = space_before_tail = ' '

    @property
    def title(self):
        """The title text, or None if there is no Title element."""
        for n in self / Title:
            return n.head


class Body(element.Element):
    """The contents of the document, after the head."""
    space_between = '\n'

    @property
    def define(self):
        """The :class:`VariableDefine` of the document, or None."""
        return _define(self)


class Text(element.TextElement):
    """Raw text."""
    space_before = space_after = ' '

    @classmethod
    def read_head(cls, origin):
        return join_text(origin)


class Substitution(Text):
    """Text that replaced a :class:`VariableUse` when resolving variables.

    The ``name`` attribute holds the name of the variable.

    """
    __slots__ = ('name',)

    def __init__(self, head, *children, name=None, **attrs):
        self.name = name
        super().__init__(head, *children, **attrs)

    def repr_head(self):
        return "{}={}".format(self.name, super().repr_head())

    def body_equals(self, other):
        return self.head == other.head and self.name == other.name

    def _clone(self, children):
        return type(self)(self.head, *children, name=self.name, **self.spacing())


class Comment(element.TextElement):
    """An ``#OBTW`` ... ``#TLDR`` comment."""
    space_before = space_after = ' '

    @classmethod
    def read_head(cls, origin):
        return join_text(t for t in origin if t.kind == COMMENT)

    def write_head(self):
        return '#OBTW {} #TLDR'.format(self.head) if self.head else '#OBTW #TLDR'


class Bracket(element.TextBlockElement):
    """Base class for a text element between ``#GIMMEH WORD`` and ``#MKAY``.

    The head value is the text between the keyword and the ``#MKAY``.

    """
    keyword = '<fill in>'
    tail = '#MKAY'
    space_before = space_after = space_before_tail = ' '

    @classmethod
    def read_head(cls, origin):
        return join_text(t for t in origin if t.kind == TEXT)

    def write_head(self):
        text = '#GIMMEH ' + self.keyword
        return text + ' ' + self.head if self.head else text


class Title(Bracket):
    """The document title: ``#GIMMEH TITLE`` text ``#MKAY``."""
    keyword = 'TITLE'


class Bold(Bracket):
    """Bold text: ``#GIMMEH BOLD`` text ``#MKAY``."""
    keyword = 'BOLD'


class Italics(Bracket):
    """Italic text: ``#GIMMEH ITALICS`` text ``#MKAY``."""
    keyword = 'ITALICS'


class Audio(Bracket):
    """An audio reference: ``#GIMMEH SOUNDZ`` url ``#MKAY``."""
    keyword = 'SOUNDZ'


class Video(Bracket):
    """A video reference: ``#GIMMEH VIDZ`` url ``#MKAY``."""
    keyword = 'VIDZ'


class Newline(element.HeadElement):
    """A line break: ``#GIMMEH NEWLINE``."""
    head = '#GIMMEH NEWLINE'
    space_before = space_after = ' '


class Paragraph(element.BlockElement):
    """A ``#MAEK PARAGRAF`` ... ``#OIC`` block.

    Contains text and inline elements, and at most one
    :class:`VariableDefine`.

    """
    head = '#MAEK PARAGRAF'
    tail = '#OIC'
    space_after_head = space_between = space_before_tail = ' '

    @property
    def define(self):
        """The :class:`VariableDefine` of this paragraph, or None."""
        return _define(self)


class List(element.BlockElement):
    """A ``#MAEK LIST`` ... ``#OIC`` block.

    Contains :class:`ListItem` elements, and at most one
    :class:`VariableDefine`.

    """
    head = '#MAEK LIST'
    tail = '#OIC'
    space_after_head = space_between = space_before_tail = '\n'

    @property
    def define(self):
        """The :class:`VariableDefine` of this list, or None."""
        return _define(self)

    @property
    def items(self):
        """The list of :class:`ListItem` elements."""
        return list(self / ListItem)


class ListItem(element.BlockElement):
    """A ``#GIMMEH ITEM`` ... ``#MKAY`` list item.

    Contains text, :class:`Bold`, :class:`Italics` and :class:`VariableUse`
    elements.

    """
    head = '#GIMMEH ITEM'
    tail = '#MKAY'
    space_after_head = space_between = space_before_tail = ' '


class Identifier(element.TextElement):
    """The name of a variable."""
    space_before = space_after = ' '


class Value(element.TextElement):
    """The ``#IT IZ`` value part of a :class:`VariableDefine`."""
    space_before = space_after = ' '

    @classmethod
    def read_head(cls, origin):
        return join_text(t for t in origin if t.kind == TEXT)

    def write_head(self):
        return '#IT IZ ' + self.head if self.head else '#IT IZ'


class VariableDefine(element.BlockElement):
    """A variable definition: ``#I HAZ`` name ``#IT IZ`` value ``#MKAY``.

    Has two children: an :class:`Identifier` and a :class:`Value`.

    """
    head = '#I HAZ'
    tail = '#MKAY'
    space_after_head = space_between = space_before_tail = ' '
    space_before = space_after = ' '

    @property
    def name(self):
        """The variable name."""
        for n in self / Identifier:
            return n.head

    @property
    def value(self):
        """The text the variable is bound to."""
        for n in self / Value:
            return n.head


class VariableUse(element.BlockElement):
    """A variable reference: ``#LEMME SEE`` name ``#MKAY``.

    Has one :class:`Identifier` child.

    """
    head = '#LEMME SEE'
    tail = '#MKAY'
    space_after_head = space_before_tail = ' '
    space_before = space_after = ' '

    @property
    def name(self):
        """The variable name."""
        for n in self / Identifier:
            return n.head


def _define(node):
    """Return the VariableDefine child of the node, or None."""
    for n in node / VariableDefine:
        return n
