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
Test tutti.duration.
"""

from fractions import Fraction

### find tutti
import sys
sys.path.insert(0, '.')

import pytest

from tutti.duration import *
from tutti.errors import UnsupportedDurationError
from tutti.project import Form, Projector, NOTE_LENGTH, DURATION, TIE, SLUR
from tutti.dom import read


def test_main():

    assert note_length(4) == 1
    assert note_length(4, 1) == Fraction(3, 2)
    assert note_length(8, 2) == Fraction(7, 8)
    assert note_length(1) == 4
    assert note_length(2, 1) == 3
    assert note_length(16) == Fraction(1, 4)
    assert note_length(3) == Fraction(4, 3)

    assert to_string(4) == "4"
    assert to_string(8, 2) == "8.."

    assert from_string("4") == 1
    assert from_string("4.") == Fraction(3, 2)
    assert from_string("8..") == Fraction(7, 8)

    with pytest.raises(ValueError):
        note_length(0)
    with pytest.raises(ValueError):
        note_length(4, -1)
    with pytest.raises(ValueError):
        from_string("x")


def test_duration():
    assert duration(Form(NOTE_LENGTH, 4, 1)) == Fraction(3, 2)
    with pytest.raises(UnsupportedDurationError):
        duration(Form(NOTE_LENGTH, 4), TIE, Form(NOTE_LENGTH, 8))
    with pytest.raises(UnsupportedDurationError):
        duration(Form(NOTE_LENGTH, 4), SLUR)
    with pytest.raises(UnsupportedDurationError):
        duration()


def test_beats():
    p = Projector()
    assert beats(p.project(read.event("c8..")[1])) == Fraction(7, 8)
    assert beats(p.project(read.event("c2")[1][0])) == 2
    with pytest.raises(UnsupportedDurationError):
        beats(p.project(read.event("c4~4")[1]))
    with pytest.raises(ValueError):
        beats(p.project(read.event("c")))


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
