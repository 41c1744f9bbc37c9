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
This module defines a DOM (Document Object Model) for Alda source files.

The Alda DOM is a simple tree structure where every kind of musical or
structural item in a score is represented by a node of its own class (see
:mod:`~tutti.dom.alda`), with possible child nodes.

This DOM is used in two ways:

1. Transform a *parce* tree of Alda source text (see :mod:`~tutti.dom.read`).
   The tokens can be stored in the nodes (in the ``origin`` attributes), so
   every node knows its position in the source text.

2. Rewriting: the passes in :mod:`tutti` build new trees from an existing
   one, and every tree can be written back to Alda text using
   :meth:`~tutti.dom.element.Element.write`.

"""
