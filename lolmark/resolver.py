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
Resolve variable uses in a parsed document.

A document, each paragraph and each list can define one variable. A
:class:`~.dom.lol.VariableUse` is replaced with the value of the variable
defined in the nearest enclosing scope that defines it. For example::

    >>> import lolmark
    >>> doc = lolmark.parse("#HAI #I HAZ x #IT IZ world #MKAY hello #LEMME SEE x #MKAY #KTHXBYE")
    >>> result = lolmark.resolve(doc)
    >>> result.errors
    []
    >>> result.document.body.dump()
    <lol.Body (3 children) [5:57]>
     ├╴<lol.VariableDefine (2 children) [5:32]>
     │  ├╴<lol.Identifier 'x' [12:13]>
     │  ╰╴<lol.Value 'world' [14:27]>
     ├╴<lol.Text 'hello' [32:39]>
     ╰╴<lol.Substitution x='world' [39:57]>

The resolver never modifies the document it is given, it works on a copy.

"""

import collections
import itertools
import logging

from .dom import lol
from .errors import UnresolvedVariable


logger = logging.getLogger(__name__)


#: The element types that can define a variable.
SCOPE_TYPES = (lol.Body, lol.Paragraph, lol.List)


#: The result of :meth:`Resolver.resolve`: the resolved ``document`` and the
#: list of collected ``errors``.
Result = collections.namedtuple("Result", "document errors")


class Scope:
    """The variable bindings of a body, paragraph or list element.

    The ``node`` is the scope element, the ``parent`` the Scope of the
    enclosing element (None for the body).

    """
    def __init__(self, node, parent=None):
        self.node = node        #: The element this scope belongs to.
        self.parent = parent    #: The parent Scope (None for the root Scope)
        self.variables = {}     #: Mapping from variable name to its value.
        define = node.define
        if define is not None:
            self.variables[define.name] = define.value

    def __repr__(self):
        return "<{} {} {}>".format(type(self).__name__, type(self.node).__name__, self.variables)

    def ancestors(self):
        """Yield the ancestor scopes."""
        scope = self
        while scope.parent:
            scope = scope.parent
            yield scope

    def lookup(self, name):
        """Return the value of the variable ``name``.

        The innermost scope is searched first. Raises KeyError if no scope
        defines the name.

        """
        for scope in itertools.chain((self,), self.ancestors()):
            try:
                return scope.variables[name]
            except KeyError:
                pass
        raise KeyError(name)


class Resolver:
    """Replace variable uses with their values.

    If ``fail_fast`` is True, the first unresolved variable is raised as an
    :class:`~.errors.UnresolvedVariable` exception; otherwise all unresolved
    variables are collected and the uses stay in the document.

    """
    def __init__(self, fail_fast=False):
        self.fail_fast = fail_fast

    def resolve(self, document):
        """Return a :data:`Result` with a resolved copy of the document."""
        document = document.copy_with_origin()
        scopes = self.collect(document)
        errors = []
        uses = list(document // lol.VariableUse)
        for use in uses:
            try:
                scope = scopes[next(use << SCOPE_TYPES)]
                value = scope.lookup(use.name)
            except (StopIteration, KeyError):
                error = UnresolvedVariable(use.name, use.pos)
                logger.debug("unresolved variable %r at %s", use.name, use.pos)
                if self.fail_fast:
                    raise error
                errors.append(error)
            else:
                use.replace_with(self.substitution(use, value))
        logger.debug("resolved %d of %d variable uses", len(uses) - len(errors), len(uses))
        return Result(document, errors)

    def collect(self, document):
        """Return a dictionary mapping each scope element to its :class:`Scope`.

        The elements are visited in document order, so the scope of an
        enclosing element is always created before the scopes inside it.

        """
        scopes = {}
        for node in itertools.chain((document,), document.descendants()):
            if isinstance(node, SCOPE_TYPES):
                parent = None
                for n in node << SCOPE_TYPES:
                    parent = scopes[n]
                    break
                scopes[node] = Scope(node, parent)
        return scopes

    def substitution(self, use, value):
        """Return the :class:`~.dom.lol.Substitution` that replaces a use.

        If the use has an origin, the substitution gets the combined origin
        tokens, so it knows its position in the source text.

        """
        node = lol.Substitution(value, name=use.name, **use.spacing())
        try:
            node.head_origin = use.head_origin + use[0].head_origin + use.tail_origin
        except (AttributeError, IndexError):
            pass
        return node
