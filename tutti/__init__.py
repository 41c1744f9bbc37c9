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
The tutti module.

On first import, our own language definitions are added to tutti's registry,
which falls back to the parce registry.

"""

import os.path

from .dom import read
from .lang.alda import Alda
from .parser import parse_input, process
from .pkginfo import version, version_string
from .registry import find


__all__ = ('find', 'load', 'parse_input', 'version', 'version_string')


def load(filename, encoding="utf-8"):
    """Convenience function to read Alda text from ``filename`` and return the
    dictionary mapping every instrument Instance to its ``part`` Form.

    The root lexicon is guessed from the filename and the contents, and
    defaults to the Alda score lexicon. Raises :class:`OSError` if the file
    can't be read and :class:`~.errors.ParseError` if its contents are not
    valid.

    """
    with open(os.path.abspath(filename), encoding=encoding) as f:
        text = f.read()
    lexicon = find(filename=os.path.basename(filename), contents=text)
    if lexicon is None or lexicon.language is not Alda:
        lexicon = Alda.root
    return process(read.transform(lexicon, text, True)).parts
