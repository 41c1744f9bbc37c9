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
Move the global attributes of a score into the music of the first instrument.
"""

import logging

from .dom import alda


logger = logging.getLogger(__name__)


def apply_global_attributes(score):
    """Return a new :class:`~.dom.alda.Score` with the global attributes moved.

    If the first child of the score is a :class:`~.dom.alda.GlobalAttributes`,
    its attribute changes become a leading :class:`~.dom.alda.AttributeChanges`
    in the music data of the first instrument that follows. All other children
    are copied unchanged. The original score is not modified.

    For example::

        >>> from tutti.dom import read
        >>> from tutti.hoist import apply_global_attributes
        >>> apply_global_attributes(read.score("(tempo 90) piano: c d")).write()
        'piano: (tempo 90) c d'

    If there are global attributes, but no instrument, they are left in place.

    """
    nodes = [n.copy_with_origin() for n in score]
    if nodes and isinstance(nodes[0], alda.GlobalAttributes):
        for index, node in enumerate(nodes[1:], 1):
            if isinstance(node, alda.Instrument):
                changes = alda.AttributeChanges(*nodes[0])
                for music in node / alda.MusicData:
                    music.insert(0, changes)
                    break
                else:
                    node.append(alda.MusicData(changes))
                del nodes[0]
                logger.debug("moved %d global attribute change(s) to instrument %d",
                             len(changes), index)
                break
        else:
            logger.warning("global attributes without instrument are left in place")
    return alda.Score(*nodes)
