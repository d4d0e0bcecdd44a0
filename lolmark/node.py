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
The :class:`Node` class, a tree type based on a Python list.

Every element of a parsed LOLcode document is a Node. Renderers only read the
tree: they walk the children in document order, look up the parent, and query
for nodes of a certain element type using the operators described below.

"""

import itertools
import weakref


#: Line prefixes used by :meth:`Node.dump`: (continuing, done, child, last child).
DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
}


def _no_parent():
    return None


class Node(list):
    """A list of child nodes, with a weak reference to a parent node.

    Because the parent is weakly referenced, a tree has no reference cycles;
    keep a reference to the root node to keep the tree alive. A Node is always
    True, also without children. Nodes compare by identity with ``==``; use
    :meth:`equals` to compare the contents of two trees.

    Four operators select nodes by type. The right hand side is an element
    class, a tuple of classes, or an instance (which then must be of the same
    type and have an equal body):

    * ``node / Bold``: the children that are a Bold
    * ``node // VariableUse``: all descendants that are a VariableUse
    * ``node << Paragraph``: the ancestors that are a Paragraph
    * ``node ^ Comment``: the children that are *not* a Comment

    """
    __slots__ = ('__weakref__', '_parent')

    __hash__ = object.__hash__

    def __init__(self, *children):
        super().__init__(children)
        self._parent = _no_parent
        ref = weakref.ref(self)
        for node in children:
            node._parent = ref

    def __repr__(self):
        return '<{} ({} {})>'.format(
            type(self).__name__, len(self), "child" if len(self) == 1 else "children")

    def __bool__(self):
        return True

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    def _select(self, other, nodes, keep=True):
        """Return an iterator over the ``nodes`` that match ``other`` (or not).

        Returns NotImplemented if ``other`` is not a Node, type or tuple.

        """
        if isinstance(other, Node):
            def matches(node):
                return type(node) is type(other) and node.body_equals(other)
        elif isinstance(other, (type, tuple)):
            def matches(node):
                return isinstance(node, other)
        else:
            return NotImplemented
        return filter(matches, nodes) if keep else itertools.filterfalse(matches, nodes)

    def __truediv__(self, other):
        return self._select(other, self)

    def __floordiv__(self, other):
        return self._select(other, self.descendants())

    def __lshift__(self, other):
        return self._select(other, self.ancestors())

    def __xor__(self, other):
        return self._select(other, self, False)

    @property
    def parent(self):
        """The parent Node, or None."""
        return self._parent()

    def __setitem__(self, index, node):
        """Put a node at ``index``; slices are not supported."""
        node._parent = weakref.ref(self)
        super().__setitem__(index, node)

    def replace_with(self, node):
        """Put ``node`` in our place in the parent. We must have a parent."""
        parent = self.parent
        parent[parent.index(self)] = node

    def copy(self):
        """Return a deep copy of this node."""
        return type(self)(*(n.copy() for n in self))

    def equals(self, other):
        """Return True if ``other`` is a tree with the same types and contents.

        The nodes must have the same type, the same number of children, and
        :meth:`body_equals` must return True for every pair of nodes.

        """
        return (type(self) is type(other) and len(self) == len(other)
                and self.body_equals(other)
                and all(a.equals(b) for a, b in zip(self, other)))

    def body_equals(self, other):
        """Compare the node's own contents (not the children); True by default."""
        return True

    def ancestors(self):
        """Yield the parent, its parent, and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def descendants(self):
        """Yield all descendants, depth-first, in document order."""
        for node in self:
            yield node
            yield from node.descendants()

    def left_siblings(self):
        """Yield the siblings before us, nearest first."""
        parent = self.parent
        if parent is not None:
            yield from reversed(parent[:parent.index(self)])

    def dump(self, file=None, style="round"):
        """Print this node and its descendants as an indented tree.

        The ``style`` is one of the keys of :data:`DUMP_STYLES`; the output is
        written to ``file``, or stdout if None.

        """
        cont, done, child, last = DUMP_STYLES[style]
        print(repr(self), file=file)
        def lines(node, prefix):
            for n in node:
                is_last = n is node[-1]
                print(prefix + (last if is_last else child) + repr(n), file=file)
                lines(n, prefix + (done if is_last else cont))
        lines(self, "")
