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
Test the parser, using the scenarios of simple documents, more complex
documents and the errors raised for invalid documents.

"""

### find lolmark
import sys
sys.path.insert(0, '.')

import pytest

import lolmark
from lolmark import errors
from lolmark.dom import lol


DOCUMENT = r"""
#HAI
#OBTW the head #TLDR
#MAEK HEAD #GIMMEH TITLE My
   Doc #MKAY #OIC
#I HAZ greeting #IT IZ hello there #MKAY
#MAEK PARAGRAF
  #OBTW intro #TLDR
  Some #GIMMEH BOLD bold #MKAY and #GIMMEH ITALICS italic #MKAY text.
  #GIMMEH NEWLINE
  #LEMME SEE greeting #MKAY
  #I HAZ name #IT IZ Bob #MKAY
#OIC
#MAEK LIST
  #GIMMEH ITEM one #MKAY
  #GIMMEH ITEM #GIMMEH BOLD two #MKAY #LEMME SEE name #MKAY #MKAY
#OIC
#gimmeh soundz song.mp3 #mkay
#GIMMEH VIDZ movie.mp4 #MKAY
#KTHXBYE
"""


def test_scenarios():
    doc = lolmark.parse("#HAI#KTHXBYE")
    assert doc.equals(lol.Document(lol.Body()))
    assert doc.head is None
    assert len(doc.body) == 0

    doc = lolmark.parse("#HAI#MAEK HEAD#GIMMEH TITLE My Doc#MKAY#OIC#KTHXBYE")
    assert doc.equals(lol.Document(lol.Head(lol.Title('My Doc')), lol.Body()))
    assert doc.head.title == "My Doc"

    doc = lolmark.parse("#HAI#GIMMEH BOLD hi#MKAY#KTHXBYE")
    assert doc.equals(lol.Document(lol.Body(lol.Bold('hi'))))

    doc = lolmark.parse("#HAI#I HAZ x#IT IZ world#MKAY#LEMME SEE x#MKAY#KTHXBYE")
    assert doc.equals(lol.Document(lol.Body(
        lol.VariableDefine(lol.Identifier('x'), lol.Value('world')),
        lol.VariableUse(lol.Identifier('x')),
    )))

    with pytest.raises(errors.UnterminatedBlock) as excinfo:
        lolmark.parse("#HAI#MAEK PARAGRAF hello#KTHXBYE")
    assert excinfo.value.block == "PARAGRAF"
    assert excinfo.value.token.kind == "#KTHXBYE"
    assert "#OIC" in excinfo.value.expected


def test_main():
    doc = lolmark.parse(DOCUMENT)
    assert [type(n) for n in doc] == [lol.Comment, lol.Head, lol.Body]
    assert doc[0].head == "the head"
    assert doc.head.comments() == [doc[0]]
    assert doc.head.title == "My Doc"

    body = doc.body
    assert [type(n) for n in body] == [
        lol.VariableDefine, lol.Paragraph, lol.List, lol.Audio, lol.Video]
    assert body.define.name == "greeting"
    assert body.define.value == "hello there"
    assert body[3].head == "song.mp3"
    assert body[4].head == "movie.mp4"

    p = body[1]
    assert p.equals(lol.Paragraph(
        lol.Comment('intro'),
        lol.Text('Some'),
        lol.Bold('bold'),
        lol.Text('and'),
        lol.Italics('italic'),
        lol.Text('text.'),
        lol.Newline(),
        lol.VariableUse(lol.Identifier('greeting')),
        lol.VariableDefine(lol.Identifier('name'), lol.Value('Bob')),
    ))
    assert p.define.name == "name"
    assert p[1].comments() == [p[0]]
    assert p[2].comments() == []

    l = body[2]
    assert l.define is None
    assert len(l.items) == 2
    assert l.items[1].equals(lol.ListItem(
        lol.Bold('two'),
        lol.VariableUse(lol.Identifier('name')),
    ))

    # query operators
    assert [n.name for n in doc // lol.VariableUse] == ["greeting", "name"]
    assert next(l.items[1][1] << lol.List) is l
    assert len(list(p ^ lol.Comment)) == 8


def test_origin():
    text = "#HAI #MAEK PARAGRAF hello\n world #OIC #KTHXBYE"
    doc = lolmark.parse(text)
    p = doc.body[0]
    assert p.pos == 5
    assert p.end == len(text) - 9
    assert p[0].head == "hello world"
    assert text[p[0].pos:p[0].end] == " hello\n world "
    assert doc.pos == 0
    assert doc.end == len(text)

    doc = lolmark.parse(text, with_origin=False)
    assert doc.pos is None
    assert doc.body[0][0].head == "hello world"


def test_write():
    """Writing a document and parsing it again yields the same tree."""
    doc = lolmark.parse(DOCUMENT)
    output = doc.write()
    assert output.startswith("#HAI\n#OBTW the head #TLDR\n#MAEK HEAD #GIMMEH TITLE My Doc #MKAY #OIC\n")
    assert output.endswith("\n#KTHXBYE")
    assert lolmark.parse(output).equals(doc)

    doc = lol.Document(lol.Body(lol.Paragraph(lol.Text('Hi'), lol.Bold('there'))))
    assert doc.write() == "#HAI\n#MAEK PARAGRAF Hi #GIMMEH BOLD there #MKAY #OIC\n#KTHXBYE"
    assert lolmark.parse(doc.write()).equals(doc)


def test_case_insensitive():
    doc = lolmark.parse("#hai #maek paragraf #gimmeh bold Hi #mkay #oic #kthxbye")
    assert doc.equals(lol.Document(lol.Body(lol.Paragraph(lol.Bold('Hi')))))


def test_errors():
    def error(text):
        with pytest.raises(errors.ParseError) as excinfo:
            lolmark.parse(text)
        return excinfo.value

    # the literal '#IHASH' is not a keyword
    e = error("#HAI#IHASH HAZ x#ITHASH IZ world#MKAY#KTHXBYE")
    assert type(e) is errors.UnexpectedToken
    assert e.token.kind == "INVALID"
    assert e.token.text == "#IHASH"
    assert e.pos == 4

    e = error("hello")
    assert type(e) is errors.UnexpectedToken
    assert e.expected == ("#HAI",)

    e = error("#HAI #KTHXBYE trailing")
    assert type(e) is errors.UnexpectedToken
    assert e.expected == ("EOF",)

    e = error("#HAI #GIMMEH BOLD hi")
    assert type(e) is errors.UnterminatedBlock
    assert e.block == "BOLD"

    e = error("#HAI #GIMMEH BOLD hi #KTHXBYE")
    assert type(e) is errors.UnterminatedBlock
    assert e.block == "BOLD"
    assert e.expected == ("#MKAY",)

    e = error("#HAI hi")
    assert type(e) is errors.UnterminatedBlock
    assert e.token.kind == "EOF"

    e = error("#HAI #OBTW never ends #KTHXBYE")
    assert type(e) is errors.LexicalIncompleteComment
    assert e.expected == ("#TLDR",)
    assert isinstance(e, errors.UnterminatedBlock)

    e = error("#HAI #MAEK LIST #GIMMEH ITEM a #MKAY #MAEK PARAGRAF b #OIC #OIC #KTHXBYE")
    assert type(e) is errors.UnterminatedBlock
    assert e.block == "LIST"

    e = error("#HAI #MAEK LIST hello #OIC #KTHXBYE")
    assert type(e) is errors.UnexpectedToken

    e = error("#HAI #MAEK LIST #GIMMEH BOLD x #MKAY #OIC #KTHXBYE")
    assert e.token.kind == "BOLD"
    assert e.expected == ("ITEM",)

    e = error("#HAI #MAEK PARAGRAF #MAEK LIST #OIC #OIC #KTHXBYE")
    assert type(e) is errors.UnterminatedBlock
    assert e.block == "PARAGRAF"

    # only bold and italics in list items
    e = error("#HAI #MAEK LIST #GIMMEH ITEM #GIMMEH NEWLINE #MKAY #OIC #KTHXBYE")
    assert e.token.kind == "NEWLINE"

    # head is only allowed at the start
    e = error("#HAI hi #MAEK HEAD #GIMMEH TITLE x #MKAY #OIC #KTHXBYE")
    assert e.token.kind == "HEAD"

    # a head needs a title
    e = error("#HAI #MAEK HEAD #OIC #KTHXBYE")
    assert type(e) is errors.UnexpectedToken
    assert e.token.kind == "#OIC"
    assert e.expected == ("#GIMMEH",)

    e = error("#HAI #MAEK HEAD #GIMMEH BOLD x #MKAY #OIC #KTHXBYE")
    assert type(e) is errors.UnexpectedToken
    assert e.expected == ("TITLE",)

    # a head that is never closed
    e = error("#HAI #MAEK HEAD #KTHXBYE")
    assert type(e) is errors.UnterminatedBlock
    assert e.block == "HEAD"

    e = error("#HAI #MAEK HEAD #GIMMEH TITLE x #MKAY #MAEK PARAGRAF #OIC #KTHXBYE")
    assert type(e) is errors.UnterminatedBlock
    assert e.block == "HEAD"

    e = error("#HAI #LEMME SEE #MKAY #KTHXBYE")
    assert e.expected == ("IDENT",)

    e = error("#HAI #I HAZ x #MKAY #KTHXBYE")
    assert e.expected == ("#IT",)


def test_duplicate_define():
    text = "#HAI #I HAZ x #IT IZ 1 #MKAY #I HAZ y #IT IZ 2 #MKAY #KTHXBYE"
    with pytest.raises(errors.DuplicateVariableDefine) as excinfo:
        lolmark.parse(text)
    e = excinfo.value
    assert e.name == "y"
    assert e.pos == text.index("#I HAZ y")
    assert e.previous.pos == 5

    text = "#HAI #MAEK PARAGRAF #I HAZ x #IT IZ 1 #MKAY hi #I HAZ x #IT IZ 2 #MKAY #OIC #KTHXBYE"
    with pytest.raises(errors.DuplicateVariableDefine):
        lolmark.parse(text)

    text = "#HAI #MAEK LIST #I HAZ x #IT IZ 1 #MKAY #I HAZ z #IT IZ 2 #MKAY #OIC #KTHXBYE"
    with pytest.raises(errors.DuplicateVariableDefine):
        lolmark.parse(text)

    # one define per scope is fine
    text = "#HAI #I HAZ x #IT IZ 1 #MKAY #MAEK PARAGRAF #I HAZ x #IT IZ 2 #MKAY #OIC #KTHXBYE"
    doc = lolmark.parse(text)
    assert doc.body.define.value == "1"
    assert doc.body[1].define.value == "2"



if __name__ == "__main__" and 'test_main' in globals():
    test_main()
