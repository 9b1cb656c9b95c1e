#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import typing

from . import Curves #To draw the curves.
from . import Logger #To report what was read.
from . import PathErrors #To report paths we can't read.
from . import Tokenizer #To split the path data into commands.
from .PathCommand import CommandKind
from .PathResult import PathResult
from .Point import Point, reflect

class PathParser:
	"""
	Reads the path data of SVG paths, turning it into points to draw straight
	lines between.

	The parser holds no state between paths, so the same parser can be used
	for any number of paths.
	"""

	def __init__(self, samples_per_curve=100) -> None:
		"""
		Creates a parser.
		:param samples_per_curve: How many points to draw for each curve.
		"""
		self.samples_per_curve = Curves.check_samples(samples_per_curve)

	def parse_path(self, path_data) -> PathResult:
		"""
		Reads the path data of a path element.

		If anything in the path can't be read, an error is raised and nothing
		of the path is returned.
		:param path_data: The contents of the D attribute of a path.
		:return: The points of the path, and whether it is closed.
		"""
		points, closed = self._interpret(Tokenizer.tokenize(path_data))
		Logger.log("d", "Read path of {count} points ({state}).".format(count=len(points), state="closed" if closed else "open"))
		return PathResult(points, closed)

	def sample_points(self, commands) -> typing.List[Point]:
		"""
		Draws a sequence of path commands.
		:param commands: The commands to draw, in order.
		:return: The points to draw lines between, in order.
		"""
		points, _ = self._interpret(commands)
		return points

	def _check_arguments(self, command) -> None:
		"""
		Verifies that a command can be drawn with the arguments it has.
		:param command: The command to check.
		"""
		kind = command.kind
		if kind == CommandKind.invalid:
			raise PathErrors.UnsupportedCommand(command.token)
		if kind.group_size == 0:
			if command.arguments:
				raise PathErrors.InvalidArgument("Command {token} takes no arguments, but got {count}.".format(token=command.token, count=len(command.arguments)))
		elif len(command.arguments) % kind.group_size != 0:
			raise PathErrors.InvalidArgument("Command {token} takes its arguments in groups of {size}, but got {count}.".format(token=command.token, size=kind.group_size, count=len(command.arguments)))

	def _interpret(self, commands) -> typing.Tuple[typing.List[Point], bool]:
		"""
		Draws path commands in order, tracking the current position and the
		handles of previous curves.
		:param commands: The commands to draw.
		:return: The points to draw lines between, and whether the path was
		closed.
		"""
		points = []
		closed = False
		current = Point(0.0, 0.0) #Starting position.
		subpath_start = current #Track movement command for Z command to return to beginning.
		previous_cubic = None #Second handle of the previous C or S command, if the previous command was one. This is always absolute!
		previous_quadratic = None #And the handle of the previous Q or T command, for the T command.

		for command in commands:
			self._check_arguments(command)
			kind = command.kind
			if command.relative:
				dx, dy = current
			else:
				dx, dy = 0.0, 0.0

			if kind == CommandKind.moveto or kind == CommandKind.lineto:
				for index, (x, y) in enumerate(command.groups()):
					current = Point(dx + x, dy + y)
					points.append(current)
					if kind == CommandKind.moveto and index == 0: #Further pairs are lines, which don't start a new path.
						subpath_start = current
					if command.relative:
						dx, dy = current
			elif kind == CommandKind.horizontal_lineto:
				for (x,) in command.groups():
					current = Point(dx + x, current.y)
					points.append(current)
					if command.relative:
						dx = current.x
			elif kind == CommandKind.vertical_lineto:
				for (y,) in command.groups():
					current = Point(current.x, dy + y)
					points.append(current)
					if command.relative:
						dy = current.y
			elif kind == CommandKind.cubic_curveto:
				for x1, y1, x2, y2, x3, y3 in command.groups():
					handle1 = Point(dx + x1, dy + y1)
					previous_cubic = Point(dx + x2, dy + y2)
					end = Point(dx + x3, dy + y3)
					points.extend(Curves.sample_cubic(current, handle1, previous_cubic, end, self.samples_per_curve))
					current = end
					if command.relative:
						dx, dy = current
			elif kind == CommandKind.smooth_cubic_curveto:
				for x2, y2, x3, y3 in command.groups():
					#Mirror the handle around the current position.
					handle1 = reflect(previous_cubic, current) if previous_cubic is not None else current
					previous_cubic = Point(dx + x2, dy + y2) #For the next curve, store the coordinates of the second handle.
					end = Point(dx + x3, dy + y3)
					points.extend(Curves.sample_cubic(current, handle1, previous_cubic, end, self.samples_per_curve))
					current = end
					if command.relative:
						dx, dy = current
			elif kind == CommandKind.quadratic_curveto:
				for x1, y1, x2, y2 in command.groups():
					previous_quadratic = Point(dx + x1, dy + y1)
					end = Point(dx + x2, dy + y2)
					points.extend(Curves.sample_quadratic(current, previous_quadratic, end, self.samples_per_curve))
					current = end
					if command.relative:
						dx, dy = current
			elif kind == CommandKind.smooth_quadratic_curveto:
				for x2, y2 in command.groups():
					previous_quadratic = reflect(previous_quadratic, current) if previous_quadratic is not None else current
					end = Point(dx + x2, dy + y2)
					points.extend(Curves.sample_quadratic(current, previous_quadratic, end, self.samples_per_curve))
					current = end
					if command.relative:
						dx, dy = current
			elif kind == CommandKind.closepath:
				closed = True
				current = subpath_start

			#Smooth curves may only mirror the handle of a curve of the same type directly before them.
			if not kind.is_cubic():
				previous_cubic = None
			if not kind.is_quadratic():
				previous_quadratic = None

		return points, closed

def parse_path(path_data, samples_per_curve=100) -> PathResult:
	"""
	Reads the path data of a path element.
	:param path_data: The contents of the D attribute of a path.
	:param samples_per_curve: How many points to draw for each curve.
	:return: The points of the path, and whether it is closed.
	"""
	return PathParser(samples_per_curve).parse_path(path_data)

def sample_points(commands, samples_per_curve=100) -> typing.List[Point]:
	"""
	Draws a sequence of path commands.
	:param commands: The commands to draw, in order.
	:param samples_per_curve: How many points to draw for each curve.
	:return: The points to draw lines between, in order.
	"""
	return PathParser(samples_per_curve).sample_points(commands)
