# -*- coding: utf-8 -*-
#
# This file is part of `tutti`, a front-end for the Alda music language
#
# Copyright © 2021 by the tutti authors
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
Simple helper functions to easily build DOM elements reading from text.

By default the generated DOM nodes do not know their position in the
originating text, because the origin tokens are not preserved. This is the best
when building DOM snippets using this module and inserting them in existing
documents.

If you set the ``with_origin`` argument in the reader functions to True, the
origin tokens are preserved, so the DOM nodes know their position in the
originating text.

All reader functions raise :class:`~tutti.errors.ParseError` on invalid input;
the error knows the line and column of the offending text.

"""


from parce.transform import Transformer

from ..errors import ParseError
from ..lang.alda import Alda


# init two transformers, accessible by 0 (False) and 1 (True) :-)
_transformer = [Transformer(), Transformer()]
_transformer[0].transform_name_template = "{}AdHocTransform"


#: the start rules and the root lexicons they use
START_RULES = {
    "score": Alda.root,
    "part": Alda.part,
    "music_data": Alda.fragment,
}


def transform(root_lexicon, text, with_origin):
    """Transform text using the root lexicon, and locate a ParseError in the text."""
    try:
        return _transformer[with_origin].transform_text(root_lexicon, text)
    except ParseError as e:
        e.locate(text)
        raise


def score(text, with_origin=False):
    """Return a :class:`.alda.Score` from the text.

    Example::

        >>> from tutti.dom import read
        >>> node = read.score('piano: c8 d e')
        >>> node.dump()
        <alda.Score (1 child)>
         ╰╴<alda.Instrument (2 children)>
            ├╴<alda.InstrumentCall (1 child)>
            │  ╰╴<alda.Name 'piano'>
            ╰╴<alda.MusicData (3 children)>
               ├╴<alda.Note (2 children)>
               │  ├╴<alda.Pitch 'c'>
               │  ╰╴<alda.Duration (1 child)>
               │     ╰╴<alda.NoteLength (1 child)>
               │        ╰╴<alda.Number '8'>
               ├╴<alda.Note (1 child)>
               │  ╰╴<alda.Pitch 'd'>
               ╰╴<alda.Note (1 child)>
                  ╰╴<alda.Pitch 'e'>
        >>> node.write()
        'piano: c8 d e'

    """
    return transform(Alda.root, text, with_origin)


def part(text, with_origin=False):
    """Return a :class:`.alda.Score` with exactly one instrument from the text."""
    return transform(Alda.part, text, with_origin)


def music_data(text, with_origin=False):
    """Return a :class:`.alda.MusicData` from the text, which should contain
    music events without an instrument call."""
    return transform(Alda.fragment, text, with_origin)


def read(text, start="score", with_origin=False):
    """Read text starting with the named start rule.

    The ``start`` is one of ``"score"``, ``"part"`` or ``"music_data"``. An
    unknown start rule raises a :class:`KeyError`.

    """
    return transform(START_RULES[start], text, with_origin)


def event(text, with_origin=False):
    """Return one event element from the text, read as music data.

    Example::

        >>> from tutti.dom import read
        >>> read.event("c+4.")
        <alda.Note (2 children)>

    """
    for node in music_data(text, with_origin):
        return node
