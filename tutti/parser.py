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
Read Alda text and turn it into a ``part`` expression for every instrument
instance.

This runs all the steps: reading the text (see :mod:`.dom.read`), moving the
global attributes (:mod:`.hoist`), resolving the instrument instances
(:mod:`.resolve`), collecting the music per instance (:mod:`.consolidate`)
and projecting it (:mod:`.project`). For example::

    >>> from tutti.parser import parse_input
    >>> for instance, form in parse_input("piano: c8 d").items():
    ...     print(instance, form)
    ...
    piano-1 (part "piano" 1 (note (pitch "c") (duration (note-length 8))) (note (pitch "d")))

"""

import collections
import logging

from .consolidate import consolidate_instruments
from .dom import alda, read
from .hoist import apply_global_attributes
from .project import lispify_parts
from .resolve import resolve_score


logger = logging.getLogger(__name__)


#: The result of :func:`parse`: the resolved Score, the final
#: ResolutionState and the dictionary of projected parts.
Parse = collections.namedtuple("Parse", "score state parts")


def process(score, state=None):
    """Run all the steps after reading on a :class:`~.dom.alda.Score`.

    If a ResolutionState ``state`` is given, instance resolution continues
    from that state. Returns a :class:`Parse` tuple.

    """
    score = apply_global_attributes(score)
    state = resolve_score(score, state)
    resolved = alda.Score(*state.score)
    parts = lispify_parts(consolidate_instruments(resolved))
    logger.debug("projected %d part(s): %s", len(parts), ", ".join(map(str, parts)))
    return Parse(resolved, state, parts)


def parse(text, start="score", state=None):
    """Read the text, starting with the named ``start`` rule, and process it.

    The ``start`` rule is ``"score"`` (the default) or ``"part"``. Music
    data can't be processed on its own, because it has no instrument to play
    it; use a :class:`~.session.Session` for that.

    Raises :class:`~.errors.ParseError` if the text is not valid Alda; in
    that case no further steps are run.
    Raises a ValueError if the start rule reads music data.

    """
    node = read.read(text, start, with_origin=True)
    if not isinstance(node, alda.Score):
        raise ValueError("start rule {} gives music data without instrument call".format(repr(start)))
    logger.debug("read %d character(s) using start rule %s", len(text), start)
    return process(node, state)


def parse_input(text, start="score", state=None):
    """Return a dictionary mapping every Instance to its ``part`` Form.

    See :func:`parse` for the arguments.

    """
    return parse(text, start, state).parts
