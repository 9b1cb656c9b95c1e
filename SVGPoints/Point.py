#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import collections #For the named tuple.

Point = collections.namedtuple("Point", [
	"x", #The X coordinate of the point.
	"y", #The Y coordinate of the point.
])
Point.__doc__ = """
A position in the plane of the path.

Points are values: two points with the same coordinates are equal.
"""

def reflect(control, anchor) -> Point:
	"""
	Mirrors a control point around an anchor point.

	This gives the first handle of a smooth curve, which continues the tangent
	of the curve that ended in the anchor.
	:param control: The handle of the previous curve to mirror.
	:param anchor: The point where the previous curve ended.
	:return: The mirrored handle.
	"""
	return Point(2 * anchor.x - control.x, 2 * anchor.y - control.y)
