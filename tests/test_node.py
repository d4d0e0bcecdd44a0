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
Test the node module.
"""

### find lolmark
import sys
sys.path.insert(0, '.')

import io

from lolmark.node import Node


class N1(Node):
    pass


class N2(Node):
    pass


class N3(Node):
    pass


class M1(N1):
    pass


class M2(N2):
    pass


class M3(N3):
    pass


tree = \
N1(
    N2(
        N3(),
        M3(),
        N2(),
        M1(),
    ),
    N1(
        M2(),
    ),
)


def test_main():
    assert next(tree//M3) is tree[0][1]
    assert len(list(tree/N2)) == 1
    assert sum(1 for _ in tree//N2) == 3     # M2 inherits from N2 :-)
    assert next(tree[1][0] << N1) is tree[1]
    assert len(list(tree[0] ^ N3)) == 2
    tree2 = tree.copy()
    assert tree.equals(tree2)
    tree2[0][3] = N1()
    assert not tree.equals(tree2)
    assert tree2[0][3].parent is tree2[0]


def test_navigation():
    assert tree.parent is None
    assert list(tree[0][2].left_siblings()) == [tree[0][1], tree[0][0]]
    assert list(tree[1][0].ancestors()) == [tree[1], tree]
    assert [type(n) for n in tree.descendants()] == [N2, N3, M3, N2, M1, N1, M2]


def test_modify():
    t = N1(N2(), N3())
    n = M1()
    t[1].replace_with(n)
    assert t[1] is n
    assert n.parent is t
    assert [type(n) for n in t] == [N2, M1]
    t[0] = M2()
    assert t[0].parent is t


def test_dump():
    f = io.StringIO()
    N1(N2(N3()), N1()).dump(f, "ascii")
    assert f.getvalue() == (
        "<N1 (2 children)>\n"
        " |-<N2 (1 child)>\n"
        " |  `-<N3 (0 children)>\n"
        " `-<N1 (0 children)>\n")



if __name__ == "__main__" and 'test_main' in globals():
    test_main()
