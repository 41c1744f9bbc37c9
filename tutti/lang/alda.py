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
Alda language and transform definition.

The :class:`Alda` language definition has three root lexicons: ``root`` for a
full score, ``part`` for one instrument call with its music, and ``fragment``
for bare music data, such as a line typed in an interactive session that
continues the music of the current instruments.

An :class:`AldaTransform` transforms the parce tree to a
:class:`~tutti.dom.alda.Score` (or, for the ``fragment`` lexicon, a
:class:`~tutti.dom.alda.MusicData`) element tree. Text that can't be lexed
gets the ``Invalid`` action, and the transform raises a
:class:`~tutti.errors.ParseError` as soon as it encounters such a token.

"""

import parce.action as a
from parce import Language, lexicon, skip, default_action, default_target
from parce.rule import bygroup
from parce.transform import Transform
from parce.util import Dispatcher

from tutti.dom import alda
from tutti.errors import ParseError


NAME = r"[a-zA-Z]{2}[\w\-+]*"
NICKNAME = r'(")({})(")'.format(NAME)
QUOTED = r'"[^"\n]*"'
INSTRUMENT_CALL = r"{0}(?:/{0})*(?:\s+{1})?\s*:".format(NAME, QUOTED)
ATTRIBUTE_NAME = r"[a-zA-Z][\w\-]*!?"

# the actions the transform looks at
NickStart = a.Delimiter.Nickname.Start
NickEnd = a.Delimiter.Nickname.End
Dots = a.Delimiter.Dots
Tie = a.Delimiter.Tie
Slur = a.Delimiter.Slur
ChordSeparator = a.Delimiter.Separator.Chord
OctaveUp = a.Operator.Octave.Up
OctaveDown = a.Operator.Octave.Down
Barline = a.Delimiter.Separator.Bar
InvalidNickname = a.Invalid.Nickname


class Alda(Language):
    """Alda language definition."""
    @lexicon
    def root(cls):
        """A full score: global attributes and instrument calls."""
        yield r'(?=' + INSTRUMENT_CALL + ')', skip, cls.instrument, cls.instrument_call
        yield r'\(', a.Delimiter.Bracket.Start, cls.attribute_changes
        yield from cls.common()
        yield default_action, a.Invalid

    @lexicon
    def part(cls):
        """One instrument call with its music data."""
        yield r'(?=' + INSTRUMENT_CALL + ')', skip, cls.instrument, cls.instrument_call
        yield from cls.common()
        yield default_action, a.Invalid

    @lexicon
    def fragment(cls):
        """Music data without an instrument call."""
        yield from cls.events()
        yield default_action, a.Invalid

    @lexicon
    def instrument(cls):
        """An instrument call and its music data, never has tokens itself."""
        yield default_target, -1

    @lexicon
    def instrument_call(cls):
        """Instrument names, separated by slashes, and maybe a nickname."""
        yield NAME, a.Name.Class
        yield r'/', a.Delimiter.Separator
        yield NICKNAME, bygroup(NickStart, a.Name.Variable, NickEnd)
        yield QUOTED, InvalidNickname
        yield r':', a.Delimiter, -1, cls.music_data
        yield r'\s+', skip
        yield default_action, a.Invalid

    @lexicon
    def music_data(cls):
        """The music events after an instrument call, up to the next call."""
        yield r'(?=' + INSTRUMENT_CALL + ')', skip, -2
        yield from cls.events()
        yield default_action, a.Invalid

    @classmethod
    def common(cls):
        """Whitespace and comments."""
        yield r'\s+', skip
        yield r'#[^\n]*', a.Comment

    @classmethod
    def events(cls):
        """Music events."""
        yield r'[a-g]', a.Text.Music.Pitch, cls.note
        yield r'r(?![a-zA-Z])', a.Text.Music.Rest, cls.rest
        yield r'(o)(\d+)', bygroup(a.Keyword, a.Number)
        yield r'>', OctaveUp
        yield r'<', OctaveDown
        yield r'\|', Barline
        yield r'/', ChordSeparator
        yield r'\(', a.Delimiter.Bracket.Start, cls.attribute_changes
        yield from cls.common()

    @lexicon(consume=True)
    def note(cls):
        """A note: pitch name, accidentals and an optional duration."""
        yield r'[-+_]', a.Text.Music.Pitch.Accidental
        yield r'(?=[\d~])', skip, cls.duration
        yield default_target, -1

    @lexicon(consume=True)
    def rest(cls):
        """A rest with an optional duration."""
        yield r'(?=[\d~])', skip, cls.duration
        yield default_target, -1

    @lexicon
    def duration(cls):
        """Note lengths with dots, ties and a slur; also ends the note or rest."""
        yield r'(\d+)(\.*)', bygroup(a.Number, Dots)
        yield r'~(?=\d)', Tie
        yield r'~', Slur, -2
        yield default_target, -2

    @lexicon(consume=True)
    def attribute_changes(cls):
        """Attribute changes between parentheses, separated by commas."""
        yield r'\)', a.Delimiter.Bracket.End, -1
        yield r',', a.Delimiter.Separator
        yield ATTRIBUTE_NAME, a.Name.Attribute, cls.attribute_value
        yield from cls.common()
        yield default_action, a.Invalid

    @lexicon
    def attribute_value(cls):
        """The value(s) of one attribute change."""
        yield r'(?=[,)])', skip, -1
        yield r'\d+', a.Number
        yield r'[a-zA-Z][\w\-]*', a.Name.Constant
        yield from cls.common()
        yield default_action, a.Invalid


class AldaTransform(Transform):
    """Transform Alda to :mod:`tutti.dom.alda` elements."""

    ## helper methods and factory
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create an Element, keeping its origin.

        The ``head_origin`` and optionally ``tail_origin`` is an iterable of
        Token instances. All elements with a head or tail should be created
        using this method, so that it can be overridden for the case you don't
        want to remember the origin.

        """
        return element_class.with_origin(tuple(head_origin), tuple(tail_origin), *children)

    def invalid(self, token, message="invalid input"):
        """Return a ParseError for the token, to be raised by the caller."""
        return ParseError("{}: {}".format(message, repr(token.text)), token.text, token.pos)

    def common(self, items):
        """Yield the tokens and sub-context Items, skipping comments.

        Raises a ParseError on an ``Invalid`` token.

        """
        for i in items:
            if i.is_token:
                if i.action is InvalidNickname:
                    raise self.invalid(i, "invalid nickname")
                elif i.action is a.Invalid:
                    raise self.invalid(i)
                elif i.action is not a.Comment:
                    yield i
            else:
                yield i

    def create_events(self, items):
        """Return a list of event elements from the items, combining chords."""
        events = []
        separator = None
        items = self.common(items)
        for i in items:
            if i.is_token:
                if i.action is ChordSeparator:
                    if separator or not events or not isinstance(events[-1], (alda.Note, alda.Rest, alda.Chord)):
                        raise self.invalid(i, "misplaced chord separator")
                    separator = i
                    continue
                node = self._event(i.action, i, items)
            else:
                node = i.obj
            if separator:
                if not isinstance(node, (alda.Note, alda.Rest)):
                    raise self.invalid(separator, "chord separator not followed by a note")
                chord = events.pop()
                if not isinstance(chord, alda.Chord):
                    chord = alda.Chord(chord)
                chord.append(node)
                node = chord
                separator = None
            events.append(node)
        if separator:
            raise self.invalid(separator, "chord separator not followed by a note")
        return events

    @Dispatcher
    def _event(self, action, token, items):
        """Dispatches for event tokens. Raises ParseError for unknown ones."""
        raise self.invalid(token)

    @_event(a.Keyword)
    def octave_set_event(self, token, items):
        r"""Called for ``o``, reads the octave number from the items."""
        number = next(items)
        return self.factory(alda.OctaveSet, (token,), (), self.factory(alda.Number, (number,)))

    @_event(OctaveUp)
    def octave_up_event(self, token, items):
        return self.factory(alda.OctaveUp, (token,))

    @_event(OctaveDown)
    def octave_down_event(self, token, items):
        return self.factory(alda.OctaveDown, (token,))

    @_event(Barline)
    def barline_event(self, token, items):
        return self.factory(alda.Barline, (token,))

    ### transforming methods
    def root(self, items):
        """Build a :class:`~tutti.dom.alda.Score`.

        Attribute changes before the first instrument call become the
        :class:`~tutti.dom.alda.GlobalAttributes`.

        """
        changes = []
        instruments = []
        for i in self.common(items):
            if i.is_token:
                raise self.invalid(i)
            elif i.name == "attribute_changes":
                changes.extend(i.obj)
            elif i.name == "instrument":
                instruments.append(i.obj)
        if changes:
            instruments.insert(0, alda.GlobalAttributes(*changes))
        return alda.Score(*instruments)

    def part(self, items):
        """Build a :class:`~tutti.dom.alda.Score` with exactly one instrument."""
        instruments = [i.obj for i in self.common(items) if not i.is_token]
        if len(instruments) != 1:
            raise ParseError("expected one instrument call, got {}".format(len(instruments)))
        return alda.Score(*instruments)

    def fragment(self, items):
        """Build a :class:`~tutti.dom.alda.MusicData` from bare music."""
        return alda.MusicData(*self.create_events(items))

    def instrument(self, items):
        """Build an :class:`~tutti.dom.alda.Instrument`."""
        call = music = None
        for name, obj in items.items():
            if name == "instrument_call":
                call = obj
            elif name == "music_data":
                music = obj
        return alda.Instrument(call, music if music is not None else alda.MusicData())

    def instrument_call(self, items):
        """Build an :class:`~tutti.dom.alda.InstrumentCall`."""
        tail = (items.pop(),) if items and items[-1] == ':' else ()
        names = []
        nickname = []
        for i in self.common(items):
            if i.action is a.Name.Class:
                names.append(self.factory(alda.Name, (i,)))
            elif i.action is NickStart or nickname and len(nickname) < 3:
                nickname.append(i)
        if nickname:
            names.append(self.factory(alda.Nickname, nickname))
        return self.factory(alda.InstrumentCall, (), tail, *names)

    def music_data(self, items):
        """Build a :class:`~tutti.dom.alda.MusicData`."""
        return alda.MusicData(*self.create_events(items))

    def note(self, items):
        """Build a :class:`~tutti.dom.alda.Note`."""
        pitch = None
        duration = ()
        for i in self.common(items):
            if not i.is_token:
                duration = (i.obj,)
            elif i.action is a.Text.Music.Pitch:
                pitch = self.factory(alda.Pitch, (i,))
            else:
                pitch.append(self.factory(alda.Accidental, (i,)))
        return alda.Note(pitch, *duration)

    def rest(self, items):
        """Build a :class:`~tutti.dom.alda.Rest`."""
        duration = [i.obj for i in self.common(items[1:]) if not i.is_token]
        return self.factory(alda.Rest, items[:1], (), *duration)

    def duration(self, items):
        """Build a :class:`~tutti.dom.alda.Duration`."""
        nodes = []
        for i in self.common(items):
            if i.action is a.Number:
                nodes.append(alda.NoteLength(self.factory(alda.Number, (i,))))
            elif i.action is Dots:
                nodes[-1].append(self.factory(alda.Dots, (i,)))
            elif i.action is Tie:
                nodes.append(self.factory(alda.Tie, (i,)))
            elif i.action is Slur:
                nodes.append(self.factory(alda.Slur, (i,)))
        return alda.Duration(*nodes)

    def attribute_changes(self, items):
        """Build :class:`~tutti.dom.alda.AttributeChanges`."""
        head = items[:1]
        if not items.peek(-1, a.Delimiter.Bracket.End):
            raise self.invalid(items[0], "missing closing parenthesis after")
        tail = (items.pop(),)
        changes = []
        for i in self.common(items[1:]):
            if not i.is_token:
                changes[-1].extend(i.obj)
            elif i.action is a.Name.Attribute:
                changes.append(alda.AttributeChange(self.factory(alda.AttributeName, (i,))))
        return self.factory(alda.AttributeChanges, head, tail, *changes)

    def attribute_value(self, items):
        """Return a list of :class:`~tutti.dom.alda.Value` elements."""
        values = []
        for i in self.common(items):
            if i.action is a.Number:
                values.append(self.factory(alda.Number, (i,)))
            else:
                values.append(self.factory(alda.Word, (i,)))
        return values


class AldaAdHocTransform(AldaTransform):
    """AldaTransform that does not keep the origin tokens.

    This is used to create pieces (nodes) of an Alda document from text, and
    then use those pieces to compose a larger Score. It is undesirable that
    origin tokens then would mistakenly be used as if they originated from the
    document that's being edited.

    """
    def factory(self, element_class, head_origin, tail_origin=(), *children):
        """Create an Element *without* keeping its origin."""
        return element_class.from_origin(tuple(head_origin), tuple(tail_origin), *children)
