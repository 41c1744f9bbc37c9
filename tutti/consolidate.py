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
Collect the music of every instrument instance.
"""

from .dom import alda
from .errors import ResolutionError


def consolidate_instruments(score):
    """Return a dictionary mapping every Instance to a list of its events.

    The ``score`` must be resolved (see :func:`~.resolve.assign_instances`).
    The dictionary is ordered by the first appearance of the instances; the
    events of all calls that target an instance are concatenated in score
    order. The event nodes are not copied, an event in a group call appears
    in the lists of all instances of the group.

    """
    parts = {}
    for instrument in score / alda.Instrument:
        tracks = instrument[0] if len(instrument) else None
        if not isinstance(tracks, alda.Tracks):
            raise ResolutionError("unresolved instrument: {}".format(repr(instrument)))
        events = [e for music in instrument / alda.MusicData for e in music]
        for track in tracks:
            parts.setdefault(track.head, []).extend(events)
    return parts
