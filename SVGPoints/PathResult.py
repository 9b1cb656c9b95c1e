#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import collections #For the named tuple.

_PathResultBase = collections.namedtuple("PathResult", [
	"points", #Tuple of all points of the path, in the order in which they are drawn.
	"closed", #Whether the path was closed with a Z command.
])

class PathResult(_PathResultBase):
	"""
	The outcome of reading one path: the points to draw lines between, and
	whether the path closes.

	Results can't be modified after they are made.
	"""
	__slots__ = ()

	def __new__(cls, points=(), closed=False):
		return super().__new__(cls, tuple(points), bool(closed))
