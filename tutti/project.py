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
Project the events of an instrument instance to evaluable expressions.

An expression is a :class:`Form`: a tuple with a :class:`~parce.util.Symbol`
as its head, followed by arguments, which can be integers, strings, symbols
or other forms. For example::

    >>> from tutti.dom import read
    >>> from tutti.project import Projector
    >>> Projector().project(read.event("c4."))
    (note (pitch "c") (duration (note-length 4 1)))

A few element types get special treatment:

* :class:`~.dom.alda.Number` becomes an integer,
* :class:`~.dom.alda.Dots` becomes the number of dots,
* :class:`~.dom.alda.Tie` and :class:`~.dom.alda.Slur` become the symbols
  :data:`TIE` and :data:`SLUR`,
* :class:`~.dom.alda.NoteLength` and :class:`~.dom.alda.Duration` become
  forms headed by :data:`NOTE_LENGTH` and :data:`DURATION`.

All other elements become a form headed by the symbol of their tag, followed
by their head value (for text elements) and their projected children.

"""

from parce.util import Dispatcher, Symbol

from .dom import alda, element


PART = Symbol("part")
NOTE_LENGTH = Symbol("note-length")
DURATION = Symbol("duration")
TIE = Symbol("tie")
SLUR = Symbol("slur")


class Form(tuple):
    """An expression: a head symbol followed by arguments."""
    __slots__ = ()

    def __new__(cls, head, *args):
        return tuple.__new__(cls, (head,) + args)

    def __repr__(self):
        return "({})".format(" ".join(map(_repr_arg, self)))

    @property
    def head(self):
        """The head symbol."""
        return self[0]

    @property
    def args(self):
        """The arguments (everything after the head)."""
        return self[1:]


def _repr_arg(value):
    """Return the Lisp-like representation of a Form argument."""
    if isinstance(value, str):
        return '"{}"'.format(value.replace('\\', '\\\\').replace('"', '\\"'))
    return repr(value)


class Projector:
    """Projects elements to :class:`Form` expressions.

    The node type is looked up exactly, so subclassing an element type does
    not inherit its projection. Inherit from this class to change the
    projection of some element types.

    """
    def part(self, instance, events):
        """Return the ``part`` form for an instance and its event nodes."""
        return Form(PART, instance.name, instance.number, *map(self.project, events))

    def project(self, node):
        """Return the projection of the node and its children."""
        return self._project(type(node), node)

    @Dispatcher
    def _project(self, cls, node):
        """Called for element types without their own projection."""
        if not isinstance(node, element.Element):
            raise TypeError("can't project {}".format(repr(node)))
        head = (node.head,) if isinstance(node, element.TextElement) else ()
        return Form(Symbol(node.tag), *head, *map(self.project, node))

    @_project(alda.Track)
    def track(self, node):
        return Form(Symbol(node.tag), str(node.head))

    @_project(alda.Number)
    def number(self, node):
        return int(node.head)

    @_project(alda.Dots)
    def dots(self, node):
        return len(node.head)

    @_project(alda.Tie)
    def tie(self, node):
        return TIE

    @_project(alda.Slur)
    def slur(self, node):
        return SLUR

    @_project(alda.NoteLength)
    def note_length(self, node):
        return Form(NOTE_LENGTH, *map(self.project, node))

    @_project(alda.Duration)
    def duration(self, node):
        return Form(DURATION, *map(self.project, node))


def lispify_parts(parts, projector=None):
    """Return a dictionary mapping every Instance to its ``part`` Form.

    ``parts`` is the dictionary returned by
    :func:`~.consolidate.consolidate_instruments`.

    """
    projector = projector or Projector()
    return {instance: projector.part(instance, events)
            for instance, events in parts.items()}
