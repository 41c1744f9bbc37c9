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


r"""
Resolve instrument calls to numbered instrument instances.

Every name in an instrument call denotes one or more :class:`Instance`
objects: a base instrument name with a number. Instances are assigned while
reading the score from left to right:

* a name without a nickname in the call reuses the instances the name was
  bound to before, or gets instance number 1 if it is new;

* a name in a call with a nickname always gets a new instance (one more than
  the highest number used for that base name so far), unless the name itself
  is a known nickname;

* the nickname is then bound to all the instances of the call, so later
  calls can refer to the whole group by the nickname.

For example::

    >>> from tutti.dom import read
    >>> from tutti.resolve import assign_instances
    >>> score = read.score('clarinet: c  clarinet "thor": d  thor: e')
    >>> assign_instances(score).write()
    'clarinet-1: c\nclarinet-2: d\nclarinet-2: e'

The state is kept in an immutable :class:`ResolutionState`; every instrument
call results in a new state (see :func:`update_state`).

"""

import collections
import functools
import itertools
import logging

from .dom import alda
from .errors import ResolutionError


logger = logging.getLogger(__name__)


class Instance(collections.namedtuple("Instance", "name number")):
    """A numbered instance of a base instrument, e.g. ``clarinet-2``."""
    __slots__ = ()

    def __str__(self):
        return "{}-{}".format(self.name, self.number)


class ResolutionState(collections.namedtuple("ResolutionState", "table nicknames score")):
    """The state of the resolver after an instrument call.

    ``table`` maps every name and nickname seen so far to a tuple of
    Instances; ``nicknames`` only maps the nicknames; ``score`` is the tuple
    of rewritten :class:`~.dom.alda.Instrument` nodes. A state is never
    modified, a new one is created instead.

    """
    __slots__ = ()

    @classmethod
    def initial(cls):
        """Return the empty state to start with."""
        return cls({}, {}, ())

    def instances(self):
        """Yield all Instances in the table, including duplicates."""
        return itertools.chain.from_iterable(self.table.values())

    def allocated(self, name):
        """Return the highest instance number in the table for the base name,
        0 if there is none."""
        return max((i.number for i in self.instances() if i.name == name), default=0)


def assign(name, nickname, state):
    """Return the tuple of Instances for one base ``name`` in a call.

    ``nickname`` is the nickname of the call or None.

    """
    if nickname is None:
        return state.table.get(name) or (Instance(name, 1),)
    elif name in state.nicknames:
        return state.nicknames[name]
    return (Instance(name, state.allocated(name) + 1),)


def call_names(call):
    """Return the tuple (names, nickname) of an InstrumentCall node."""
    names = [n.head for n in call / alda.Name]
    nicknames = [n.head for n in call / alda.Nickname]
    if not names:
        raise ResolutionError("instrument call without names")
    elif len(nicknames) > 1:
        raise ResolutionError("instrument call with more than one nickname: {}".format(
            ", ".join(nicknames)))
    return names, nicknames[0] if nicknames else None


def update_state(state, instrument):
    """Resolve one :class:`~.dom.alda.Instrument` and return the new state.

    The rewritten Instrument, having a :class:`~.dom.alda.Tracks` node
    instead of the :class:`~.dom.alda.InstrumentCall`, is appended to the
    ``score`` of the new state.

    An Instrument that already has Tracks is kept as is, and each instance
    is bound to its base name, as a bare call of that name would do. An
    instance number may be at most one more than the highest number
    allocated for its base name, so numbering stays without gaps.

    """
    call = instrument[0] if len(instrument) else None
    if isinstance(call, alda.Tracks):
        for track in call:
            instance = track.head
            if not 0 < instance.number <= state.allocated(instance.name) + 1:
                raise ResolutionError("instance number out of sequence: {}".format(instance))
            table = dict(state.table)
            table[instance.name] = (instance,)
            state = state._replace(table=table)
        return state._replace(score=state.score + (instrument.copy_with_origin(),))
    elif not isinstance(call, alda.InstrumentCall):
        raise ResolutionError("instrument without instrument call: {}".format(repr(instrument)))

    names, nickname = call_names(call)
    resolved = [(name, assign(name, nickname, state)) for name in names]
    whole_group = tuple(i for name, instances in resolved for i in instances)

    table = dict(state.table)
    table.update(resolved)
    nicknames = state.nicknames
    if nickname is not None:
        table[nickname] = whole_group
        nicknames = dict(nicknames)
        nicknames[nickname] = whole_group
    logger.debug("%s resolved to %s", call.write(), ", ".join(map(str, whole_group)))

    tracks = alda.Tracks(*(alda.Track(i) for i in whole_group))
    node = alda.Instrument(tracks, *(n.copy_with_origin() for n in instrument[1:]))
    return ResolutionState(table, nicknames, state.score + (node,))


def resolve(instruments, state=None):
    """Resolve the instruments in order and return the final ResolutionState.

    If a ``state`` from an earlier run is given, its table and nicknames are
    used, but its score is not.

    """
    state = ResolutionState.initial() if state is None else state._replace(score=())
    return functools.reduce(update_state, instruments, state)


def resolve_score(score, state=None):
    """Resolve the instruments of a Score and return the final ResolutionState.

    Children of the score that are not instruments are dropped.

    """
    for node in score ^ alda.Instrument:
        logger.warning("dropping %s", repr(node))
    return resolve(score / alda.Instrument, state)


def assign_instances(score, state=None):
    """Return a new :class:`~.dom.alda.Score` with all instrument calls resolved."""
    return alda.Score(*resolve_score(score, state).score)
