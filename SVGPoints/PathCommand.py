#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import enum #For the types of commands.
import typing

class CommandKind(enum.Enum):
	"""
	The types of drawing commands that can appear in path data.

	Each kind knows in its ``group_size`` how many arguments one repetition of
	the command consumes.
	"""

	def __new__(cls, name, group_size):
		member = object.__new__(cls)
		member._value_ = name
		member.group_size = group_size
		return member

	moveto = ("moveto", 2)
	lineto = ("lineto", 2)
	horizontal_lineto = ("horizontal_lineto", 1)
	vertical_lineto = ("vertical_lineto", 1)
	cubic_curveto = ("cubic_curveto", 6)
	smooth_cubic_curveto = ("smooth_cubic_curveto", 4)
	quadratic_curveto = ("quadratic_curveto", 4)
	smooth_quadratic_curveto = ("smooth_quadratic_curveto", 2)
	closepath = ("closepath", 0)
	invalid = ("invalid", None) #Can't be drawn, so it has no arguments to speak of.

	def is_cubic(self) -> bool:
		"""
		Whether this command draws a cubic curve, and so leaves a handle behind
		for the next smooth cubic curve.
		"""
		return self in (CommandKind.cubic_curveto, CommandKind.smooth_cubic_curveto)

	def is_quadratic(self) -> bool:
		"""
		Whether this command draws a quadratic curve.
		"""
		return self in (CommandKind.quadratic_curveto, CommandKind.smooth_quadratic_curveto)

_letters = { #Both capital and lower case letters map to the same kind. The case determines absolute or relative coordinates.
	"M": CommandKind.moveto,
	"L": CommandKind.lineto,
	"H": CommandKind.horizontal_lineto,
	"V": CommandKind.vertical_lineto,
	"C": CommandKind.cubic_curveto,
	"S": CommandKind.smooth_cubic_curveto,
	"Q": CommandKind.quadratic_curveto,
	"T": CommandKind.smooth_quadratic_curveto,
	"Z": CommandKind.closepath
}
_letters.update({letter.lower(): kind for letter, kind in list(_letters.items())})

def kind_of(token) -> CommandKind:
	"""
	Finds the kind of command that a command letter stands for.

	Letters are matched exactly. Anything that is not a known path command,
	including the elliptical arc (A and a), is invalid.
	:param token: The command letter.
	:return: The kind of command.
	"""
	return _letters.get(token, CommandKind.invalid)

class PathCommand:
	"""
	Data structure that represents one command in path data, with all of the
	numbers that followed the command letter.

	If the command letter was repeated implicitly (e.g. "L 1 2 3 4" draws two
	lines), all of the arguments are in the same command.
	"""

	def __init__(self, token, arguments=None) -> None:
		"""
		Creates the command.
		:param token: The letter of the command as it appeared in the path.
		:param arguments: The numbers following the letter.
		"""
		self.token = token
		self.kind = kind_of(token)
		self.arguments = list(arguments) if arguments is not None else [] #type: typing.List[float]

	@property
	def relative(self) -> bool:
		"""
		Whether the coordinates of this command are relative to the current
		position, which is the case for lower case command letters.
		"""
		return self.token.islower()

	def groups(self) -> typing.Generator[typing.List[float], None, None]:
		"""
		Splits the arguments into the repetitions of this command.

		The caller has to make sure that the arguments can be split evenly.
		:return: A sequence of argument lists, one for each repetition.
		"""
		size = self.kind.group_size
		if not size:
			return
		for i in range(0, len(self.arguments), size):
			yield self.arguments[i:i + size]

	def __eq__(self, other) -> bool:
		if not isinstance(other, PathCommand):
			return NotImplemented
		return self.token == other.token and self.arguments == other.arguments

	def __repr__(self) -> str:
		return "PathCommand({token!r}, {arguments!r})".format(token=self.token, arguments=self.arguments)
