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
Exceptions raised by tutti.

:class:`ParseError` is raised for invalid Alda input, before any pass runs.
:class:`ResolutionError` denotes a broken invariant while assigning instrument
instances; it is never recovered from. :class:`UnsupportedDurationError` is
raised when a duration can't be expressed in beats yet.

"""


class ParseError(ValueError):
    """Raised when Alda text can't be read.

    ``text`` is the offending text fragment and ``pos`` its position in the
    source. The ``line`` and ``column`` (both starting at 1) are set by
    :meth:`locate`, which the reader functions in :mod:`tutti.dom.read` call.

    """
    def __init__(self, message, text=None, pos=None):
        super().__init__(message)
        self.message = message
        self.text = text
        self.pos = pos
        self.line = None
        self.column = None

    def locate(self, source):
        """Compute :attr:`line` and :attr:`column` from the full source text."""
        if self.pos is not None:
            self.line = source.count('\n', 0, self.pos) + 1
            self.column = self.pos - (source.rfind('\n', 0, self.pos) + 1) + 1

    def __str__(self):
        if self.line is not None:
            return "{} (line {}, column {})".format(self.message, self.line, self.column)
        elif self.pos is not None:
            return "{} (position {})".format(self.message, self.pos)
        return self.message


class ResolutionError(RuntimeError):
    """Raised when instrument instances can't be resolved consistently."""


class UnsupportedDurationError(NotImplementedError):
    """Raised for durations that combine ties, slurs or several note lengths."""
