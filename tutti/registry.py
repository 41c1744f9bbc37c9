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
Finding the Alda language definition by name, filename, mimetype or contents.

The Alda root lexicon is registered in a :class:`parce.registry.Registry` of
its own, that falls back to the registry of the languages bundled with
:mod:`parce`, so :func:`find` also returns other languages parce knows::

    >>> from tutti.registry import find
    >>> find(filename="prelude.alda")
    Alda.root
    >>> find("json")
    Json.root

"""

__all__ = ['find', 'register']


import parce.registry


#: tutti's own registry, falls back to the languages bundled with parce
registry = parce.registry.Registry(parce.registry.registry)


def find(name=None, *, filename=None, mimetype=None, contents=None):
    """Return the root lexicon for a language, or None.

    The language is looked up by ``name`` (or alias) if given, otherwise the
    ``filename``, ``mimetype`` and ``contents`` are used to guess the best
    matching language.

    """
    return registry.find(name, filename, mimetype, contents)


def register(lexicon_name, *,
    name = None,
    desc = None,
    aliases = (),
    filenames = (),
    mimetypes = (),
    guesses = (),
):
    """Add the root lexicon with the full dotted ``lexicon_name`` to the registry.

    ``filenames``, ``mimetypes`` and ``guesses`` are lists of (pattern,
    weight) tuples, as :meth:`parce.registry.Registry.add` expects them.

    """
    registry.add(
        lexicon_name, name = name, desc = desc, aliases = aliases,
        filenames = filenames, mimetypes = mimetypes, guesses = guesses)


register("tutti.lang.alda.Alda.root",
    name = "Alda",
    desc = "Alda music programming language",
    aliases = ["alda"],
    filenames = [("*.alda", 1)],
    mimetypes = [("text/x-alda", 1)],
    guesses = [(r'^\s*[a-zA-Z]{2}[\w\-+]*(?:/[a-zA-Z]{2}[\w\-+]*)*\s*(?:"[^"\n]+"\s*)?:', 0.5)],
)
