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
Interpret Alda text piece by piece, keeping the instrument instances.

A :class:`Session` is what an interactive Alda shell would use: every line
the user types is interpreted in the context of what was entered before.
A line can be bare music, continuing the music of the instruments that were
called last, or an instrument call with music, or a whole score. For
example::

    >>> from tutti.session import Session
    >>> s = Session()
    >>> s.interpret('piano: c d')
    {Instance(name='piano', number=1): (part "piano" 1 (note (pitch "c")) (note (pitch "d")))}
    >>> s.interpret('e f')
    {Instance(name='piano', number=1): (part "piano" 1 (note (pitch "e")) (note (pitch "f")))}
    >>> s.context
    'music_data'
    >>> s.prompt()
    'p> '

"""

import logging
import re

from . import parser
from .dom import alda, read
from .errors import ParseError, ResolutionError
from .resolve import ResolutionState


logger = logging.getLogger(__name__)


class Session:
    """Interprets Alda text, keeping the resolution state between calls.

    ``contexts`` are the start rules that are tried in order for every piece
    of text (see :func:`.dom.read.read`).

    """
    def __init__(self, contexts=("music_data", "part", "score")):
        #: The start rules to try, in order.
        self.contexts = contexts
        #: The start rule that read the last piece of text successfully.
        self.context = None
        #: The ResolutionState, carried from call to call.
        self.state = ResolutionState.initial()
        #: The tuple of Instances of the most recent instrument call.
        self.current = ()
        #: All text that was interpreted successfully.
        self.history = []

    def read(self, text):
        """Return the tuple (context, node) for the first context that can
        read the text.

        Raises ParseError("Invalid Alda syntax") if no context can.

        """
        for context in self.contexts:
            try:
                return context, read.read(text, context, with_origin=True)
            except ParseError as e:
                logger.debug("can't read text as %s: %s", context, e)
        logger.error("Invalid Alda syntax.")
        raise ParseError("Invalid Alda syntax")

    def interpret(self, text):
        """Interpret the text and return the dictionary of projected parts.

        Music data is played by the instruments of the most recent call.
        The session's state is only updated if all steps succeed.

        """
        context, node = self.read(text)
        if isinstance(node, alda.MusicData):
            if not self.current:
                raise ResolutionError("music data without current instrument")
            tracks = alda.Tracks(*(alda.Track(i) for i in self.current))
            node = alda.Score(alda.Instrument(tracks, node))
        result = parser.process(node, self.state)
        for instrument in result.score / alda.Instrument:
            self.current = tuple(t.head for t in instrument[0])
        self.state = result.state
        self.context = context
        self.history.append(text)
        return result.parts

    def abbreviation(self, instance):
        """Return the short name for the instance, used in the prompt.

        These are the initials of a nickname that denotes exactly this
        instance, or else the initials of the instrument name.

        """
        for nickname, instances in self.state.nicknames.items():
            if instances == (instance,):
                return ''.join(re.findall(r'(\w)\w*', nickname))
        return ''.join(re.findall(r'(\w)\w*-', str(instance)))

    def prompt(self):
        """Return the prompt text, giving a clue about the current instruments."""
        return "{}> ".format("/".join(map(self.abbreviation, self.current)))
