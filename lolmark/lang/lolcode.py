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
LOLcode markup language definition.

The :class:`LolCode` language is a *parce* language definition. Its ``root``
lexicon recognizes the hashed keywords, free text and whitespace. The words
that follow some hashed keywords (``HEAD`` after ``#MAEK``, ``BOLD`` after
``#GIMMEH``, the variable name after ``#I HAZ``, etc.) are recognized in a
small lexicon that is entered after that keyword and left again after the
word. Outside those positions the same words are just text.

Everything between ``#OBTW`` and ``#TLDR`` is comment text.

The :func:`lolmark.lex.tokenize` function turns the lexed text into a flat
stream of :class:`~lolmark.lex.Token` tuples.

"""

import re

from parce import Language, lexicon, default_target
import parce.action as a


#: Hashed keywords that do not switch the lexer to another lexicon.
HASHED_KEYWORDS = ("HAI", "KTHXBYE", "OIC", "MKAY", "TLDR")

#: Words that may follow ``#MAEK``.
MAEK_WORDS = ("HEAD", "PARAGRAF", "LIST")

#: Words that may follow ``#GIMMEH``.
GIMMEH_WORDS = ("TITLE", "BOLD", "ITALICS", "NEWLINE", "SOUNDZ", "VIDZ", "ITEM")

#: The end of a keyword: no word character may follow.
KEYWORD_END = r"(?!\w)"

#: An identifier (variable name).
RE_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"


def keyword_pattern(words, prefix=""):
    """Return a regular expression matching one of the words as a keyword."""
    return "{}(?:{}){}".format(prefix, "|".join(words), KEYWORD_END)


class LolCode(Language):
    """LOLcode markup language definition."""
    @lexicon(re_flags=re.IGNORECASE)
    def root(cls):
        yield r"#OBTW" + KEYWORD_END, a.Keyword, cls.comment
        yield r"#MAEK" + KEYWORD_END, a.Keyword, cls.maek
        yield r"#GIMMEH" + KEYWORD_END, a.Keyword, cls.gimmeh
        yield r"#I" + KEYWORD_END, a.Keyword, cls.haz
        yield r"#IT" + KEYWORD_END, a.Keyword, cls.iz
        yield r"#LEMME" + KEYWORD_END, a.Keyword, cls.see
        yield keyword_pattern(HASHED_KEYWORDS, "#"), a.Keyword
        yield r"#\w*", a.Keyword.Invalid
        # a run of text must contain at least one non-whitespace character
        yield r"[ \t]*[^#\s][^#\r\n]*", a.Text
        yield r"\s+", a.Whitespace

    @lexicon(re_flags=re.IGNORECASE)
    def maek(cls):
        """The block type after ``#MAEK``."""
        yield r"\s+", a.Whitespace
        yield keyword_pattern(MAEK_WORDS), a.Keyword.Word, -1
        yield default_target, -1

    @lexicon(re_flags=re.IGNORECASE)
    def gimmeh(cls):
        """The element type after ``#GIMMEH``."""
        yield r"\s+", a.Whitespace
        yield keyword_pattern(GIMMEH_WORDS), a.Keyword.Word, -1
        yield default_target, -1

    @lexicon(re_flags=re.IGNORECASE)
    def haz(cls):
        """``HAZ`` and the variable name after ``#I``."""
        yield r"\s+", a.Whitespace
        yield r"HAZ" + KEYWORD_END, a.Keyword.Word, -1, cls.identifier
        yield default_target, -1

    @lexicon(re_flags=re.IGNORECASE)
    def iz(cls):
        """``IZ`` after ``#IT``."""
        yield r"\s+", a.Whitespace
        yield r"IZ" + KEYWORD_END, a.Keyword.Word, -1
        yield default_target, -1

    @lexicon(re_flags=re.IGNORECASE)
    def see(cls):
        """``SEE`` and the variable name after ``#LEMME``."""
        yield r"\s+", a.Whitespace
        yield r"SEE" + KEYWORD_END, a.Keyword.Word, -1, cls.identifier
        yield default_target, -1

    @lexicon
    def identifier(cls):
        yield r"\s+", a.Whitespace
        yield RE_IDENTIFIER, a.Name.Variable, -1
        yield default_target, -1

    @lexicon(re_flags=re.IGNORECASE)
    def comment(cls):
        yield r"#TLDR" + KEYWORD_END, a.Keyword, -1
        yield r"[^#]+|#", a.Comment
