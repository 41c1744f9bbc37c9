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
The list-based tree type all Alda parse trees are made of.

A :class:`Node` is a Python list of child nodes that also knows its parent.
The element classes in :mod:`tutti.dom.alda` inherit from it, so a score can
be queried with a few operators::

    >>> from tutti.dom import alda, read
    >>> score = read.score('piano: c d  violin: e')
    >>> [n.head for n in score // alda.Name]
    ['piano', 'violin']
    >>> len(list(score / alda.Instrument))
    2

"""

import itertools
import weakref


#: Line drawing characters for :meth:`Node.dump`: the continuing vertical
#: line, an empty indent, a branch and the last branch.
DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
    "square":  (" │ ", "   ", " ├╴", " └╴"),
    "flat":    ("│", " ", "├", "╰"),
}


def _no_parent():
    return None


def _select(nodes, cls, keep=True):
    """Yield the nodes that are (``keep``) or are not instances of ``cls``.

    Returns NotImplemented when cls is not a class or a tuple, so that
    Python raises the usual TypeError for the operator.

    """
    if not isinstance(cls, (type, tuple)):
        return NotImplemented
    return (n for n in nodes if isinstance(n, cls) is keep)


class Node(list):
    """A tree node: a list of child nodes with a weak reference to the parent.

    Nodes added with the constructor, :meth:`append`, :meth:`extend`,
    :meth:`insert` or item assignment get their parent set. Removing a node
    leaves its parent in place; the passes in :mod:`tutti` never move nodes
    from one tree to another, they build new trees from copies.

    A node is always true, also without children, and only equal to itself;
    :meth:`equals` compares two trees by structure.

    The query operators take a class or a tuple of classes:

    ``node / cls``
        the children that are an instance of cls
    ``node // cls``
        the descendants that are an instance of cls, in document order
    ``node << cls``
        the ancestors that are an instance of cls
    ``node ^ cls``
        the children that are not an instance of cls

    """
    __slots__ = ('__weakref__', '_parent')

    def __init__(self, *children):
        self._parent = _no_parent
        list.__init__(self, children)
        self._adopt(children)

    def _adopt(self, nodes):
        ref = weakref.ref(self)
        for node in nodes:
            node._parent = ref

    def __repr__(self):
        return '<{} ({} {})>'.format(type(self).__name__, len(self),
            "child" if len(self) == 1 else "children")

    def __bool__(self):
        return True

    __hash__ = object.__hash__

    def __eq__(self, other):
        return self is other

    def __ne__(self, other):
        return self is not other

    @property
    def parent(self):
        """The parent node, None for the root node."""
        return self._parent()

    def root(self):
        """Return the topmost ancestor, or self if there is no parent."""
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    def is_root(self):
        """Return True if this node has no parent."""
        return self.parent is None

    def is_last(self):
        """Return True if this node is the last child of its parent."""
        return self.parent[-1] is self

    def __truediv__(self, cls):
        return _select(self, cls)

    def __floordiv__(self, cls):
        return _select(self.descendants(), cls)

    def __lshift__(self, cls):
        return _select(self.ancestors(), cls)

    def __xor__(self, cls):
        return _select(self, cls, False)

    def append(self, node):
        list.append(self, node)
        self._adopt((node,))

    def extend(self, nodes):
        nodes = tuple(nodes)
        list.extend(self, nodes)
        self._adopt(nodes)

    def insert(self, index, node):
        list.insert(self, index, node)
        self._adopt((node,))

    def __setitem__(self, k, new):
        if isinstance(k, slice):
            new = tuple(new)
            list.__setitem__(self, k, new)
            self._adopt(new)
        else:
            list.__setitem__(self, k, new)
            self._adopt((new,))

    def copy(self):
        """Return a deep copy of this node and its children."""
        return type(self)(*(n.copy() for n in self))

    def body_equals(self, other):
        """Compare what a node holds besides its children, True by default.

        Called by :meth:`equals` for nodes of the same type.

        """
        return True

    def equals(self, other):
        """Return True if other is a tree of the same types and contents."""
        return (type(self) is type(other)
                and len(self) == len(other)
                and self.body_equals(other)
                and all(a.equals(b) for a, b in zip(self, other)))

    def ancestors(self):
        """Yield the parent, its parent, and so on up to the root."""
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def descendants(self, reverse=False):
        """Yield all descendants depth-first, backwards if ``reverse`` is True."""
        for node in (reversed(self) if reverse else self):
            yield node
            yield from node.descendants(reverse)

    def dump(self, file=None, style="round"):
        """Print the tree with line drawing characters to file (default stdout).

        ``style`` is one of the keys of :data:`DUMP_STYLES`.

        """
        line, blank, branch, last = DUMP_STYLES[style or "round"]

        def dump_children(node, indent):
            count = len(node)
            for i, child in zip(itertools.count(1), node):
                is_last = i == count
                print(indent + (last if is_last else branch) + repr(child), file=file)
                dump_children(child, indent + (blank if is_last else line))

        print(repr(self), file=file)
        dump_children(self, "")
