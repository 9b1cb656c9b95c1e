#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

from .Configuration import Configuration
from .Curves import sample_cubic, sample_quadratic
from .Parser import PathParser, parse_path, sample_points
from .PathCommand import CommandKind, PathCommand
from .PathErrors import InvalidArgument, MalformedNumber, PathError, UnsupportedCommand
from .PathResult import PathResult
from .Point import Point
from .SVGReader import read_element, read_svg, read_svg_string
from .Tokenizer import tokenize

__version__ = "1.0.0"
