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
The lolmark module.

Reads documents written in the LOLcode markup dialect into a validated
document tree. The pipeline is: :func:`tokenize` the text, drop the
whitespace, :func:`parse` the tokens into a :class:`~.dom.lol.Document` and
:func:`resolve` the variable uses in it. The :func:`process` function does all
of this at once::

    >>> import lolmark
    >>> result = lolmark.process("#HAI #GIMMEH BOLD hi #MKAY #KTHXBYE")
    >>> result.document.body[0].head
    'hi'

"""

import logging

from . import lex
from .lex import tokenize
from .parser import Parser
from .pkginfo import version, version_string
from .resolver import Resolver, Result


__all__ = (
    'tokenize', 'parse', 'resolve', 'process', 'Result',
    'version', 'version_string',
)


logger = logging.getLogger(__name__)


def parse(text, with_origin=True):
    """Return an unresolved :class:`~.dom.lol.Document` for the text.

    If ``with_origin`` is True (the default), the nodes know their position
    in the text. Raises a :class:`~.errors.ParseError` if the text is not a
    valid document.

    """
    document = Parser(with_origin).parse(lex.significant(tokenize(text)))
    logger.debug("parsed document of %d characters", len(text))
    return document


def resolve(document, fail_fast=False):
    """Return a :class:`~.resolver.Result` with a resolved copy of the document.

    If ``fail_fast`` is True, the first unresolved variable is raised as an
    :class:`~.errors.UnresolvedVariable`; otherwise the errors are collected
    in the result.

    """
    return Resolver(fail_fast).resolve(document)


def process(text, fail_fast=False, with_origin=True):
    """Parse and resolve the text, returning a :class:`~.resolver.Result`."""
    return resolve(parse(text, with_origin), fail_fast)
