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
Test tutti.hoist.
"""

### find tutti
import sys
sys.path.insert(0, '.')

from tutti.dom import alda, read
from tutti.hoist import apply_global_attributes


def test_main():
    score = read.score("(tempo 100) piano: c")
    hoisted = apply_global_attributes(score)
    assert hoisted.write() == "piano: (tempo 100) c"
    assert len(hoisted) == 1
    music = hoisted[0][1]
    assert isinstance(music[0], alda.AttributeChanges)
    assert music[0].equals(alda.AttributeChanges(
        alda.AttributeChange(alda.AttributeName('tempo'), alda.Number('100'))))
    assert music[1].equals(alda.Note(alda.Pitch('c')))

    # the original score is not modified
    assert isinstance(score[0], alda.GlobalAttributes)
    assert len(score[1][1]) == 1


def test_first_instrument_only():
    hoisted = apply_global_attributes(read.score("(tempo 100, quant 90) piano: c violin: d"))
    assert hoisted.write() == "piano: (tempo 100, quant 90) c\nviolin: d"


def test_pass_through():
    score = read.score("piano: c violin: d")
    hoisted = apply_global_attributes(score)
    assert hoisted is not score
    assert hoisted.equals(score)

    # no instrument: the global attributes stay
    score = read.score("(tempo 100)")
    assert apply_global_attributes(score).equals(score)

    # empty music data
    assert apply_global_attributes(read.score("(quant 50) piano:")).write() == "piano: (quant 50)"

    # instrument without music data
    score = alda.Score(
        alda.GlobalAttributes(alda.AttributeChange(alda.AttributeName('tempo'), alda.Number('60'))),
        alda.Instrument(alda.InstrumentCall(alda.Name('piano'))))
    assert apply_global_attributes(score).write() == "piano: (tempo 60)"


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
