#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import re #Splitting the path data into commands and numbers.
import typing

from . import PathErrors #To report numbers we can't read.
from .PathCommand import PathCommand

_command_regex = re.compile(r"([A-Za-z])([0-9.,\-\s]*)") #One letter, followed by everything that could make up its arguments.
_candidate_regex = re.compile(r"-?[0-9.]+|-") #Anything that looks like it wants to be a number. The minus sign starts a new one.
_number_regex = re.compile(r"-?[0-9]+(?:\.[0-9]+)?") #What a number must actually look like.

def parse_arguments(arguments, token=None) -> typing.List[float]:
	"""
	Reads the numbers in the arguments of a command.

	Numbers are separated by commas, whitespace or by the minus sign of the
	next number. Scientific notation is not supported.
	:param arguments: The text following a command letter.
	:param token: The command letter, to report with errors.
	:return: The numbers, in order.
	"""
	result = []
	for candidate in _candidate_regex.findall(arguments):
		if not _number_regex.fullmatch(candidate):
			raise PathErrors.MalformedNumber(candidate, token)
		result.append(float(candidate))
	return result

def tokenize(path_data) -> typing.Generator[PathCommand, None, None]:
	"""
	Splits path data into separate commands.

	The commands are produced lazily. Since all commands in path data are
	single letters, each letter starts a new command that takes all numbers up
	to the next letter. Letters that are not path commands produce a command
	of the invalid kind. Those are only rejected when they are drawn.
	:param path_data: The contents of the D attribute of a path.
	:return: A sequence of commands with their arguments.
	"""
	position = 0
	for match in _command_regex.finditer(path_data):
		stray = path_data[position:match.start()]
		if stray.strip(): #Something between commands that can't be part of any number.
			raise PathErrors.MalformedNumber(stray.strip())
		position = match.end()
		token = match.group(1)
		yield PathCommand(token, parse_arguments(match.group(2), token))
	stray = path_data[position:]
	if stray.strip():
		raise PathErrors.MalformedNumber(stray.strip())
