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
Elements and their base classes for Alda documents.

Every kind of node that can appear in an Alda parse tree has its own class
here. The passes in :mod:`tutti.hoist`, :mod:`tutti.resolve`,
:mod:`tutti.consolidate` and :mod:`tutti.project` only handle these classes.

"""

import re

from . import element


_name = re.compile(r"[a-zA-Z]{2}[\w\-+]*\Z")


## Base classes:

class Event(element.Element):
    """Base class for elements that can occur in music data."""


class Value(element.TextElement):
    """Base class for elements that can be the value of an attribute change."""


## Score structure:

class Score(element.Element):
    """A full Alda score.

    Contains an optional :class:`GlobalAttributes` and :class:`Instrument`
    elements.

    """
    space_between = '\n'


class GlobalAttributes(element.Element):
    """The attribute changes that precede the first instrument call.

    Contains :class:`AttributeChange` elements.

    """
    space_between = ', '

    def write_head(self):
        return '('

    def write_tail(self):
        return ')'


class Instrument(element.Element):
    """An instrument call with its music.

    Contains an :class:`InstrumentCall` and a :class:`MusicData` element.
    After instance resolution the InstrumentCall is replaced by a
    :class:`Tracks` element.

    """
    space_between = ' '


class InstrumentCall(element.BlockElement):
    """The instrument names, and maybe a nickname, ending with a colon.

    Contains :class:`Name` and at most one :class:`Nickname` element.

    """
    head = ''
    tail = ':'

    def concat(self, node, next_node):
        return ' ' if isinstance(next_node, Nickname) else '/'


class Name(element.TextElement):
    """An instrument name, or a nickname referred to by name."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and bool(_name.match(head))


class Nickname(element.TextElement):
    """The nickname given to an instrument call, e.g. ``"band"``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and bool(_name.match(head))

    @classmethod
    def read_head(cls, origin):
        return ''.join(t.text for t in origin[1:-1])

    def write_head(self):
        return '"{}"'.format(self.head)


class Tracks(element.Element):
    """The resolved instrument instances of an instrument call.

    Contains :class:`Track` elements.

    """
    space_between = '/'
    tail = ':'


class Track(element.TextElement):
    """One resolved instrument instance, the head value is an
    :class:`~tutti.resolve.Instance`."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, tuple) and len(head) == 2

    def repr_head(self):
        return str(self.head)

    def write_head(self):
        return str(self.head)


class MusicData(element.Element):
    """The music events of an instrument call."""
    space_between = ' '


## Attributes:

class AttributeChanges(Event, element.BlockElement):
    """One or more attribute changes between parentheses.

    Contains :class:`AttributeChange` elements.

    """
    head = '('
    tail = ')'
    space_between = ', '


class AttributeChange(element.Element):
    """An attribute name followed by one or more values."""
    space_between = ' '


class AttributeName(element.TextElement):
    """The name of an attribute, e.g. ``tempo``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)


class Word(Value):
    """A textual attribute value, e.g. ``on``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str)


class Number(Value):
    """A number, the head value is the text of the digits, e.g. ``'16'``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and head.isdigit()


## Music events:

class Note(Event):
    """A note, contains a :class:`Pitch` and optionally a :class:`Duration`."""


class Pitch(element.TextElement):
    """The note name (``a`` ... ``g``), can contain :class:`Accidental`
    elements."""
    @classmethod
    def check_head(cls, head):
        return head in ('a', 'b', 'c', 'd', 'e', 'f', 'g')


class Accidental(element.TextElement):
    """An accidental: ``+`` sharp, ``-`` flat or ``_`` natural."""
    @classmethod
    def check_head(cls, head):
        return head in ('+', '-', '_')


class Rest(Event, element.HeadElement):
    """A rest, optionally contains a :class:`Duration`."""
    head = 'r'


class Chord(Event):
    """Notes (or rests) sounding at the same time, e.g. ``c/e/g``."""
    space_between = '/'


class OctaveSet(Event, element.HeadElement):
    """Sets the octave, contains a :class:`Number`, e.g. ``o4``."""
    head = 'o'


class OctaveUp(Event, element.HeadElement):
    """Raises the octave, ``>``."""
    head = '>'


class OctaveDown(Event, element.HeadElement):
    """Lowers the octave, ``<``."""
    head = '<'


class Barline(Event, element.HeadElement):
    """A barline, ``|``. Has no musical meaning."""
    head = '|'


## Durations:

class Duration(element.Element):
    """A duration, containing :class:`NoteLength`, :class:`Tie` and
    :class:`Slur` elements."""


class NoteLength(element.Element):
    """A note length, contains a :class:`Number` and optionally
    :class:`Dots`."""


class Dots(element.TextElement):
    """One or more dots after a note length number, e.g. ``'..'``."""
    @classmethod
    def check_head(cls, head):
        return isinstance(head, str) and head != '' and not head.strip('.')


class Tie(element.HeadElement):
    """A tie (``~`` between two note lengths)."""
    head = '~'


class Slur(element.HeadElement):
    """A slur (``~`` at the end of a duration)."""
    head = '~'
