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
Test tutti.consolidate.
"""

### find tutti
import sys
sys.path.insert(0, '.')

import pytest

from tutti.consolidate import consolidate_instruments
from tutti.dom import read
from tutti.errors import ResolutionError
from tutti.resolve import Instance, assign_instances


def events(parts):
    """Return the written events per instance name."""
    return {str(i): [e.write() for e in nodes] for i, nodes in parts.items()}


def test_main():
    parts = consolidate_instruments(assign_instances(read.score("piano: c piano: d")))
    assert list(parts) == [Instance('piano', 1)]
    assert events(parts) == {'piano-1': ['c', 'd']}


def test_group():
    parts = consolidate_instruments(assign_instances(read.score("guitar/bass: c")))
    assert list(parts) == [Instance('guitar', 1), Instance('bass', 1)]
    assert events(parts) == {'guitar-1': ['c'], 'bass-1': ['c']}
    # the events are shared, not copied
    assert parts[Instance('guitar', 1)][0] is parts[Instance('bass', 1)][0]


def test_order():
    score = read.score('violin: c viola: d violin "solo": e violin: f viola: g')
    parts = consolidate_instruments(assign_instances(score))
    assert [str(i) for i in parts] == ['violin-1', 'viola-1', 'violin-2']
    assert events(parts) == {
        'violin-1': ['c'],
        'viola-1': ['d', 'g'],
        'violin-2': ['e', 'f'],
    }


def test_unresolved():
    with pytest.raises(ResolutionError):
        consolidate_instruments(read.score("piano: c"))


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
