#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

class PathError(Exception):
	"""
	Base class for everything that can go wrong while reading a path.

	Any of these aborts the path that was being read. Nothing of that path is
	returned.
	"""
	pass

class MalformedNumber(PathError):
	"""
	An argument of a path command could not be read as a number.
	"""

	def __init__(self, text, token=None) -> None:
		"""
		Creates the error.
		:param text: The piece of text that should have been a number.
		:param token: The command letter whose arguments contained the text.
		"""
		self.text = text
		self.token = token
		if token is None:
			super().__init__("Malformed number: {text!r}".format(text=text))
		else:
			super().__init__("Malformed number {text!r} in arguments of command {token}.".format(text=text, token=token))

class UnsupportedCommand(PathError):
	"""
	A path command letter that this library can't draw, such as the elliptical
	arc A.
	"""

	def __init__(self, token) -> None:
		"""
		Creates the error.
		:param token: The offending command letter.
		"""
		self.token = token
		super().__init__("Unsupported path command: {token}".format(token=token))

class InvalidArgument(PathError, ValueError):
	"""
	A parameter doesn't satisfy the requirements of the function it was given
	to, for instance a sample count of 0 or an incomplete set of coordinates
	for a curve.
	"""
	pass
