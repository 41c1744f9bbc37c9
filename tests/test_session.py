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
Test tutti.session.
"""

### find tutti
import sys
sys.path.insert(0, '.')

import pytest

from tutti.errors import ParseError, ResolutionError
from tutti.resolve import Instance
from tutti.session import Session


def test_main():
    s = Session()
    assert s.prompt() == "> "

    parts = s.interpret("piano: c d")
    assert s.context == "part"
    assert s.current == (Instance('piano', 1),)
    assert s.prompt() == "p> "
    assert repr(parts[Instance('piano', 1)]) == '(part "piano" 1 (note (pitch "c")) (note (pitch "d")))'

    # music data continues the current instrument
    parts = s.interpret("e f")
    assert s.context == "music_data"
    assert repr(parts[Instance('piano', 1)]) == '(part "piano" 1 (note (pitch "e")) (note (pitch "f")))'

    # a whole score
    parts = s.interpret("piano: g\nviolin: a")
    assert s.context == "score"
    assert list(parts) == [Instance('piano', 1), Instance('violin', 1)]
    assert s.current == (Instance('violin', 1),)

    s.interpret("piano/tuba-bass: c")
    assert s.prompt() == "p/tb> "
    assert s.history == ["piano: c d", "e f", "piano: g\nviolin: a", "piano/tuba-bass: c"]


def test_nickname_prompt():
    s = Session()
    s.interpret('trumpet "lead-horn": c')
    assert s.prompt() == "lh> "
    s.interpret('trumpet/trombone "brass": c')
    assert s.prompt() == "t/t> "
    s.interpret('brass: d')
    assert s.current == (Instance('trumpet', 2), Instance('trombone', 1))


def test_errors():
    s = Session()
    with pytest.raises(ResolutionError):
        s.interpret("c d")
    assert s.context is None

    s.interpret("piano: c")
    state = s.state
    with pytest.raises(ParseError) as info:
        s.interpret("piano: h")
    assert str(info.value) == "Invalid Alda syntax"
    assert s.state is state
    assert s.current == (Instance('piano', 1),)
    assert s.history == ["piano: c"]


def test_contexts():
    s = Session(contexts=("score",))
    s.interpret("piano: c")
    with pytest.raises(ParseError):
        s.interpret("d")


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
