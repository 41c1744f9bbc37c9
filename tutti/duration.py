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
Functions to deal with Alda's note lengths.

A note length is written as a number, the note type (4 for a quarter note,
8 for an eighth note, etc.), optionally followed by dots. Its value is
computed in beats, where a quarter note is one beat. The value is a
:class:`~fractions.Fraction`.

Durations that combine note lengths with ties, or end with a slur, can't be
computed yet; :func:`duration` raises :class:`~.errors.UnsupportedDurationError`
for them.

"""

import fractions

from .errors import UnsupportedDurationError
from .project import Form, NOTE_LENGTH, DURATION


def note_length(number, dots=0):
    r"""Return the length in beats of a note of type ``number`` with ``dots``.

    Every dot adds half of the previous addition. For example::

        >>> from tutti.duration import note_length
        >>> note_length(4)
        Fraction(1, 1)
        >>> note_length(4, 1)
        Fraction(3, 2)
        >>> note_length(8, 2)
        Fraction(7, 8)
        >>> note_length(1)
        Fraction(4, 1)

    Raises a ValueError if ``number`` is not positive or ``dots`` is negative.

    """
    if number <= 0:
        raise ValueError("note type must be positive: {}".format(number))
    if dots < 0:
        raise ValueError("number of dots can't be negative: {}".format(dots))
    return fractions.Fraction(4, number) * (2 - fractions.Fraction(1, 1 << dots))


def duration(*components):
    r"""Return the length in beats of the components of a projected duration.

    The components are the arguments of a ``duration`` form: ``note-length``
    forms and the ``tie`` and ``slur`` symbols. Only a single note length is
    supported, for example::

        >>> from tutti.project import Form, NOTE_LENGTH, TIE
        >>> duration(Form(NOTE_LENGTH, 2, 1))
        Fraction(3, 1)

    All other combinations raise :class:`~.errors.UnsupportedDurationError`.

    """
    if len(components) == 1 and isinstance(components[0], Form) \
            and components[0].head is NOTE_LENGTH:
        return note_length(*components[0].args)
    raise UnsupportedDurationError("unsupported duration: {}".format(
        " ".join(map(repr, components))))


def beats(form):
    r"""Return the length in beats of a projected ``note-length`` or
    ``duration`` form.

    Raises a ValueError for other forms.

    """
    if form.head is NOTE_LENGTH:
        return note_length(*form.args)
    elif form.head is DURATION:
        return duration(*form.args)
    raise ValueError("not a note length or duration: {}".format(repr(form)))


def to_string(number, dots=0):
    r"""Return the Alda notation for a note length.

    For example::

        >>> to_string(8, 2)
        '8..'

    """
    return '{}{}'.format(number, '.' * dots)


def from_string(text):
    r"""Convert an Alda note length string (e.g. ``'4.'``) to beats.

    For example::

        >>> from_string('8..')
        Fraction(7, 8)

    Raises a ValueError if an invalid note length is specified.

    """
    dots = text.count('.')
    return note_length(int(text.strip(' \t.')), dots)
