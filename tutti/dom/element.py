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
The element base classes of the Alda DOM.

An :class:`Element` is a :class:`~tutti.node.Node` that can be written back
to Alda text with :meth:`~Element.write`: its ``head`` is written before the
children and its ``tail`` after them.

Elements are created in two ways. :class:`~tutti.lang.alda.AldaTransform`
calls :meth:`HeadElement.with_origin` with the parce tokens an element was
read from, so the element knows its position in the source text
(:attr:`~Element.pos` and :attr:`~Element.end`). Or an element is simply
instantiated, e.g. ``alda.Note(alda.Pitch('c'))``; it then has no origin.

Every element class has a ``tag``: its name in kebab-case, e.g.
``"note-length"`` for ``NoteLength``. The :class:`ElementType` metaclass sets
it. The projector in :mod:`tutti.project` uses the tag as the symbol of the
form it creates for an element.

"""

import itertools
import reprlib
import re

from ..node import Node


#: The origin of an element that was not read from text.
NO_ORIGIN = ((), ())


class ElementType(type):
    """Metaclass for Element.

    Gives every class an empty ``__slots__`` and a ``tag`` unless the class
    body defines them.

    """
    def __new__(cls, name, bases, namespace):
        namespace.setdefault('__slots__', ())
        namespace.setdefault('tag', re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '-', name).lower())
        return type.__new__(cls, name, bases, namespace)


class Element(Node, metaclass=ElementType):
    """Base class for all Alda elements.

    Writes its children only, separated by ``space_between`` or whatever
    :meth:`concat` returns. Has no origin of its own; its position is
    computed from its descendants.

    """
    head = None
    tail = None

    space_after_head = ""
    space_between = ""
    space_before_tail = ""

    def origin(self):
        """Return the tuple (head_tokens, tail_tokens) this element was read from."""
        return NO_ORIGIN

    def _set_origin(self, origin):
        pass

    def _clone(self, children):
        """Return a new element of the same type with the children."""
        return type(self)(*children)

    def copy(self):
        """Return a copy without origin."""
        return self._clone(n.copy() for n in self)

    def copy_with_origin(self):
        """Return a copy that keeps the origin tokens, also of the descendants."""
        node = self._clone(n.copy_with_origin() for n in self)
        node._set_origin(self.origin())
        return node

    def repr_head(self):
        """Return the head as it is shown in the repr, None by default."""
        return None

    def __repr__(self):
        cls = type(self)
        words = ["{}.{}".format(cls.__module__.rpartition('.')[2], cls.__name__)]
        head = self.repr_head()
        if head is not None:
            words.append(head)
        if len(self):
            words.append("({} {})".format(len(self), "child" if len(self) == 1 else "children"))
        if self.pos is not None:
            words.append("[{}:{}]".format(self.pos, self.end))
        return "<{}>".format(" ".join(words))

    @property
    def pos(self):
        """The position of the first token this element or a descendant was
        read from, or None."""
        for node in itertools.chain((self,), self.descendants()):
            head = node.origin()[0]
            if head:
                return head[0].pos

    @property
    def end(self):
        """The end position of the last token this element or a descendant was
        read from, or None."""
        head, tail = self.origin()
        if tail:
            return tail[-1].end
        for node in reversed(self):
            end = node.end
            if end is not None:
                return end
        if head:
            return head[-1].end

    def write_head(self):
        return self.head

    def write_tail(self):
        return self.tail

    def concat(self, node, next_node):
        """Return the text to put between two adjacent children."""
        return self.space_between

    def write(self):
        """Return the Alda text of this element and its children."""
        head = self.write_head()
        tail = self.write_tail()
        text = [head] if head else []
        if len(self):
            if head:
                text.append(self.space_after_head)
            text.append(self[0].write())
            for node, next_node in zip(self, self[1:]):
                text.append(self.concat(node, next_node))
                text.append(next_node.write())
            if tail:
                text.append(self.space_before_tail)
        if tail:
            text.append(tail)
        return ''.join(text)


class HeadElement(Element):
    """Element with a fixed head, that can remember its origin tokens."""
    __slots__ = ('_origin',)

    def origin(self):
        try:
            return self._origin
        except AttributeError:
            return NO_ORIGIN

    def _set_origin(self, origin):
        self._origin = origin

    @classmethod
    def read_head(cls, head_origin):
        """Return the head value for the tokens, by default their text."""
        return ''.join(t.text for t in head_origin)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children):
        """Create an element from the tokens it was read from, but forget them."""
        return cls(*children)

    @classmethod
    def with_origin(cls, head_origin=(), tail_origin=(), *children):
        """Create an element from the tokens it was read from and keep them."""
        node = cls.from_origin(head_origin, tail_origin, *children)
        node._set_origin((tuple(head_origin), tuple(tail_origin)))
        return node


class BlockElement(HeadElement):
    """Element with a fixed head and a fixed tail, e.g. ``(`` and ``)``."""


class TextElement(HeadElement):
    """Element with a head value that differs per instance.

    The head is the first constructor argument. When an element is created
    by hand, :meth:`check_head` validates it and a TypeError is raised for
    an invalid head; elements read from text or copied are not checked.

    """
    __slots__ = ('head',)

    def __init__(self, head, *children):
        if not self.check_head(head):
            raise TypeError("invalid head value for {}: {}".format(type(self).__name__, repr(head)))
        self.head = head
        super().__init__(*children)

    @classmethod
    def unchecked(cls, head, *children):
        """Create an element without validating the head."""
        node = cls.__new__(cls)
        node.head = head
        Node.__init__(node, *children)
        return node

    @classmethod
    def check_head(cls, head):
        """Return True if head is a valid head value."""
        return not isinstance(head, Element)

    @classmethod
    def from_origin(cls, head_origin=(), tail_origin=(), *children):
        return cls.unchecked(cls.read_head(head_origin), *children)

    def _clone(self, children):
        return self.unchecked(self.head, *children)

    def repr_head(self):
        return reprlib.repr(self.head)

    def body_equals(self, other):
        return self.head == other.head
