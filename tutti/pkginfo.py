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
Meta-information about the tutti package.

This information is used by the package metadata and by :mod:`tutti`.

"""

import collections
Version = collections.namedtuple("Version", "major minor patch")


#: name of the package
name = "tutti"

#: the current version
version = Version(0, 1, 0)
version_suffix = ""
#: the current version as a string
version_string = "{}.{}.{}".format(*version) + version_suffix

#: short description
description = "Front-end for the Alda music language"

#: long description
long_description = \
    "The tutti package reads Alda music text, resolves the instrument " \
    "instances it references and projects the music of every instance " \
    "into expressions for an evaluator."

#: maintainer name
maintainer = "tutti authors"

#: license
license = "GPL v3"
