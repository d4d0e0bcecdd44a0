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
The :class:`Element` base classes of the LOLcode DOM.

An element has an optional *head* text, written before its children, and an
optional *tail* text, written after them. In LOLcode markup the head is the
opening marker (e.g. ``#MAEK PARAGRAF``, or ``#GIMMEH BOLD`` plus the text)
and the tail is the closing ``#OIC`` or ``#MKAY``.

Elements are created by the :class:`~lolmark.parser.Parser` from tokens
(:meth:`HeadElement.with_origin` keeps the tokens, so the element knows its
position in the source text), or by hand using the constructor.

:meth:`Element.write` turns an element and its descendants back into LOLcode
markup. Each element type states the whitespace it wants before and after
itself, after its head, between its children and before its tail; where
several wishes meet, the most important one wins (a newline beats a space, a
space beats nothing).

"""

from parce.util import caching_dict

from ..node import Node
from .util import combine_text


class _SpaceProperty:
    """Descriptor for a whitespace preference with a class-level default.

    Values that differ from the default are stored in the ``_space`` dict of
    the instance, which only exists when there are such values.

    """
    __slots__ = ('name', 'default')

    def __init__(self, name, default):
        self.name = name
        self.default = default

    def __get__(self, obj, cls):
        return getattr(obj, '_space', {}).get(self.name, self.default)

    def __set__(self, obj, value):
        if value != self.default:
            try:
                obj._space[self.name] = value
            except AttributeError:
                obj._space = {self.name: value}
        else:
            self.__delete__(obj)

    def __delete__(self, obj):
        space = getattr(obj, '_space', None)
        if space:
            space.pop(self.name, None)
            if not space:
                del obj._space


class ElementType(type):
    """Metaclass for Element.

    Adds an empty ``__slots__`` if the class body does not define one, and
    turns the ``space_*`` defaults in the class body into
    :class:`_SpaceProperty` descriptors (shared between classes with the same
    default).

    """
    _props = caching_dict(_SpaceProperty, True)

    def __new__(cls, name, bases, namespace):
        for n in ('before', 'after_head', 'between', 'before_tail', 'after'):
            if 'space_' + n in namespace:
                namespace['space_' + n] = cls._props[n, namespace['space_' + n]]
        namespace.setdefault('__slots__', ())
        return type.__new__(cls, name, bases, namespace)


class Element(Node, metaclass=ElementType):
    """Base class for all element types; has no head or tail.

    The children are given to the constructor. Keyword arguments can override
    the whitespace preferences ``space_before``, ``space_after_head``,
    ``space_between``, ``space_before_tail`` and ``space_after``.

    """
    __slots__ = ("_space",)

    _head = None
    _tail = None

    space_before = ""       #: whitespace before this element
    space_after_head = ""   #: whitespace before first child
    space_between = ""      #: whitespace between children
    space_before_tail = ""  #: whitespace before tail
    space_after = ""        #: whitespace after this element

    def __init__(self, *children, **attrs):
        super().__init__(*children)
        for attribute, value in attrs.items():
            setattr(self, attribute, value)

    def __repr__(self):
        cls = type(self)
        parts = ["{}.{}".format(cls.__module__.rpartition('.')[2], cls.__name__)]
        head = self.repr_head()
        if head is not None:
            parts.append(head)
        if len(self):
            parts.append("({} {})".format(len(self), "child" if len(self) == 1 else "children"))
        if self.pos is not None:
            parts.append("[{}:{}]".format(self.pos, self.end))
        return "<{}>".format(" ".join(parts))

    def spacing(self):
        """Return the whitespace preferences that differ from the class defaults.

        The returned dict can be given as keyword arguments to the constructor.

        """
        return {'space_' + n: v for n, v in getattr(self, '_space', {}).items()}

    def copy(self, with_children=True):
        """Return a copy without origin; with copied children if ``with_children``."""
        children = (n.copy() for n in self) if with_children else ()
        return self._clone(children)

    def copy_with_origin(self, with_children=True):
        """Return a copy that keeps the origin tokens, if we have them."""
        children = (n.copy_with_origin() for n in self) if with_children else ()
        node = self._clone(children)
        node.copy_origin_from(self)
        return node

    def _clone(self, children):
        """Return a new instance of our type with the given children."""
        return type(self)(*children, **self.spacing())

    def copy_origin_from(self, other):
        """Take over the origin tokens of ``other``, as far as we can hold them."""
        for attribute in ('head_origin', 'tail_origin'):
            try:
                setattr(self, attribute, getattr(other, attribute))
            except AttributeError:
                pass

    @property
    def pos(self):
        """The position of this element in the source text.

        Taken from the first origin token of this element, or of the first
        descendant that has one. None if no origin is known.

        """
        for node in self._with_origin():
            return node.head_origin[0].pos

    @property
    def end(self):
        """The end position of this element in the source text, or None."""
        tail_origin = getattr(self, 'tail_origin', None)
        if tail_origin:
            return tail_origin[-1].end
        for node in reversed(self):
            if node.end is not None:
                return node.end
        head_origin = getattr(self, 'head_origin', None)
        if head_origin:
            return head_origin[-1].end

    def _with_origin(self):
        """Yield ourselves and our descendants that have a head origin."""
        for node in (self, *self.descendants()):
            if getattr(node, 'head_origin', None):
                yield node

    @property
    def head(self):
        """The head value."""
        return self._head

    @head.setter
    def head(self, head):
        self._head = head

    @property
    def tail(self):
        """The tail value."""
        return self._tail

    @classmethod
    def read_head(cls, head_origin):
        """Compute the head value from the origin tokens; joins their text."""
        return ''.join(t.text for t in head_origin)

    def write_head(self):
        """Return the markup for the head, or None if there is no head."""
        return self.head

    def write_tail(self):
        """Return the markup for the tail, or None if there is no tail."""
        return self.tail

    def repr_head(self):
        """Return the head as shown by ``repr()``, or None."""
        return None

    def fragments(self):
        """Yield (space_before, text, space_after) tuples for us and all descendants.

        Whitespace-only tuples (with empty text) carry the spacing between and
        after children.

        """
        head = self.write_head()
        if head is not None:
            yield self.space_before, head, self.space_after_head if len(self) else self.space_after
        for i, node in enumerate(self):
            if i:
                yield '', '', self.space_between
            yield from node.fragments()
        tail = self.write_tail()
        if tail is not None:
            yield self.space_before_tail, tail, self.space_after
        elif len(self):
            yield '', '', self.space_after

    def write(self):
        """Return this element and its descendants as LOLcode markup."""
        return combine_text(self.fragments())[1]

    def comments(self):
        """Return the comments directly preceding this element, in document order."""
        from .lol import Comment
        comments = []
        for node in self.left_siblings():
            if not isinstance(node, Comment):
                break
            comments.insert(0, node)
        return comments


class HeadElement(Element):
    """Element with a fixed head, defined by the class."""
    __slots__ = ('head_origin',)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        """Create an element from origin tokens, without keeping them."""
        return cls(*children, **attrs)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        """Create an element from origin tokens and keep them.

        The element then knows its :attr:`pos` and :attr:`end` in the source.

        """
        node = cls.from_origin(head_origin, tail_origin, *children, **attrs)
        node.head_origin = head_origin  #: tuple of Tokens the head is read from
        if tail_origin:
            node.tail_origin = tail_origin  #: tuple of Tokens the tail is read from
        return node


class BlockElement(HeadElement):
    """Element with a fixed head and a fixed tail, defined by the class."""
    __slots__ = ('tail_origin',)


class TextElement(HeadElement):
    """Element with a variable head text, given to the constructor.

    Two text elements are equal (see :meth:`~lolmark.node.Node.equals`) when
    their head texts are equal.

    """
    __slots__ = ('_head',)

    def __init__(self, head, *children, **attrs):
        self._head = head
        super().__init__(*children, **attrs)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children, **attrs):
        return cls(cls.read_head(head_origin), *children, **attrs)

    def _clone(self, children):
        return type(self)(self.head, *children, **self.spacing())

    def repr_head(self):
        if self.head is not None:
            return repr(self.head)

    def body_equals(self, other):
        return self.head == other.head


class TextBlockElement(TextElement):
    """TextElement that also has a fixed tail, e.g. a closing ``#MKAY``."""
    __slots__ = ('tail_origin',)

