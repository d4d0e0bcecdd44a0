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
This module defines a DOM (Document Object Model) for LOLcode markup documents.

The DOM is a simple tree structure where every construct of the markup
(paragraph, list, bold text, variable definition, etc.) is represented by a
node with possible child nodes. The element types are in the :mod:`.lol`
module.

This DOM is used in two ways:

1. The :class:`~lolmark.parser.Parser` builds it from a token stream. When
   the origin tokens are kept, every node knows its position in the source
   text.

2. A renderer walks a (resolved) document in document order to create output
   in another format. Every node can also write itself back as LOLcode markup
   using :meth:`~.element.Element.write`.

"""
