#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import logging #The actual logging back-end.

logger = logging.getLogger("SVGPoints")
logger.addHandler(logging.NullHandler()) #Applications decide where the messages go.

_levels = {
	"d": logging.DEBUG,
	"i": logging.INFO,
	"w": logging.WARNING,
	"e": logging.ERROR,
	"c": logging.CRITICAL
}

def log(level, message) -> None:
	"""
	Logs a message for the application that uses this library.

	The level is given as a single letter: "d" for debug, "i" for info, "w" for
	warnings, "e" for errors and "c" for critical failures.
	:param level: The severity of the message.
	:param message: The text to log.
	"""
	if level not in _levels:
		logger.warning("Unknown log level {level} for message: {message}".format(level=level, message=message))
		return
	logger.log(_levels[level], message)
