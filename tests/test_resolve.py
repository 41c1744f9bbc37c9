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
Test tutti.resolve.
"""

### find tutti
import sys
sys.path.insert(0, '.')

import pytest

from tutti.dom import alda, read
from tutti.errors import ResolutionError
from tutti.resolve import (
    Instance, ResolutionState, assign, assign_instances, resolve, resolve_score,
    update_state)


def tracks(score):
    """Return the instances of every instrument as a list of lists of strings."""
    return [[str(t.head) for t in instrument[0]] for instrument in score]


def test_main():
    # nicknamed calls always allocate the next number
    score = assign_instances(read.score('clarinet "first": c clarinet "second": d clarinet "third": e'))
    assert tracks(score) == [['clarinet-1'], ['clarinet-2'], ['clarinet-3']]

    # a bare repeat reuses the instance
    score = assign_instances(read.score('piano: c piano: d'))
    assert tracks(score) == [['piano-1'], ['piano-1']]
    assert score.write() == "piano-1: c\npiano-1: d"


def test_nickname():
    text = 'clarinet: c clarinet "thor": d thor: e'
    state = resolve_score(read.score(text))
    assert tracks(state.score) == [['clarinet-1'], ['clarinet-2'], ['clarinet-2']]
    clarinet2 = (Instance('clarinet', 2),)
    assert state.table['thor'] == clarinet2
    assert state.table['clarinet'] == clarinet2
    assert state.nicknames == {'thor': clarinet2}

    # a nickname is referred to later by a bare name
    score = assign_instances(read.score('piano "pf": c  pf: d  piano: e'))
    assert tracks(score) == [['piano-1'], ['piano-1'], ['piano-1']]
    assert score.write() == "piano-1: c\npiano-1: d\npiano-1: e"


def test_group():
    score = assign_instances(read.score('guitar/bass: c'))
    assert tracks(score) == [['guitar-1', 'bass-1']]

    score = assign_instances(read.score('violin/viola "strings": c strings: d violin: e'))
    assert tracks(score) == [['violin-1', 'viola-1'], ['violin-1', 'viola-1'], ['violin-1']]

    # a known nickname in a nicknamed call is reused
    score = assign_instances(read.score('violin "vn": c vn/cello "both": d both: e'))
    assert tracks(score) == [['violin-1'], ['violin-1', 'cello-1'], ['violin-1', 'cello-1']]

    score = assign_instances(read.score('violin "first": c violin "second": d first: e second: f'))
    assert tracks(score) == [['violin-1'], ['violin-2'], ['violin-1'], ['violin-2']]


def test_assign():
    state = ResolutionState.initial()
    assert assign('oboe', None, state) == (Instance('oboe', 1),)
    assert assign('oboe', 'o', state) == (Instance('oboe', 1),)
    state = ResolutionState({'oboe': (Instance('oboe', 3),)}, {}, ())
    assert assign('oboe', None, state) == (Instance('oboe', 3),)
    assert assign('oboe', 'o', state) == (Instance('oboe', 4),)
    assert str(Instance('oboe', 4)) == "oboe-4"


def test_immutable_state():
    state = ResolutionState.initial()
    instrument = read.score('tuba "tu": c')[0]
    new = update_state(state, instrument)
    assert state.table == {} and state.nicknames == {} and state.score == ()
    assert new.table == {'tuba': (Instance('tuba', 1),), 'tu': (Instance('tuba', 1),)}
    assert len(new.score) == 1
    # the input is not modified
    assert isinstance(instrument[0], alda.InstrumentCall)


def test_idempotence():
    score = read.score('flute: c flute "fl2": d flute: e fl2: f')
    state = resolve_score(score)
    resolved = alda.Score(*state.score)
    state2 = resolve(resolved / alda.Instrument, state)
    assert tracks(state2.score) == tracks(state.score)
    assert state2.table == state.table
    assert state2.nicknames == state.nicknames

    # a resolved score resolves to the same tracks without its final state
    score = read.score('piano: c')
    once = assign_instances(score)
    twice = assign_instances(once)
    assert tracks(twice) == [['piano-1']]
    assert twice.equals(once)

    resolved = assign_instances(read.score('flute: c flute "fl2": d oboe/flute: e'))
    assert tracks(assign_instances(resolved)) == tracks(resolved)
    state = resolve_score(resolved)
    assert state.table == {'flute': (Instance('flute', 2),), 'oboe': (Instance('oboe', 1),)}

    # tracks are bound, so later calls see them
    resolved.extend(read.score('flute: f flute "fl3": g oboe: a'))
    assert tracks(assign_instances(resolved)) == tracks(resolved)[:3] + [
        ['flute-2'], ['flute-3'], ['oboe-1']]


def test_continue():
    state = resolve_score(read.score('piano "pf": c'))
    state = resolve_score(read.score('piano: d piano "echo": e pf: f'), state)
    assert len(state.score) == 3
    assert tracks(state.score) == [['piano-1'], ['piano-2'], ['piano-1']]


def test_errors():
    music = alda.MusicData()
    # harp-2 without harp-1 leaves a gap
    gap = alda.Instrument(alda.Tracks(alda.Track(Instance('harp', 2))), music)
    with pytest.raises(ResolutionError):
        resolve([gap])
    with pytest.raises(ResolutionError):
        resolve([alda.Instrument(alda.Tracks(alda.Track(Instance('harp', 0))), music)])
    with pytest.raises(ResolutionError):
        resolve([alda.Instrument(alda.MusicData())])
    with pytest.raises(ResolutionError):
        resolve([alda.Instrument(alda.InstrumentCall(), alda.MusicData())])
    with pytest.raises(ResolutionError):
        resolve([alda.Instrument(alda.InstrumentCall(
            alda.Name('harp'), alda.Nickname('xx'), alda.Nickname('yy')), alda.MusicData())])


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
