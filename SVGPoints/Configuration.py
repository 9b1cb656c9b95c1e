#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

from . import Curves #To validate the sample count.
from . import PathErrors #To reject invalid settings.

class Configuration:
	"""
	Settings for reading a whole SVG document.

	The ``on_error`` setting decides what happens if one of the paths in a
	document can't be read:
	* ``"abort"``: The error is raised and no paths are returned at all.
	* ``"skip"``: The error is logged and takes the place of that path in the
	  results, so that the other paths still line up with the document.
	"""

	error_policies = {"abort", "skip"}

	def __init__(self, samples_per_curve=100, on_error="abort") -> None:
		"""
		Creates the configuration, validating the settings.
		:param samples_per_curve: How many points to use for each curve.
		:param on_error: What to do with paths that can't be read.
		"""
		self.samples_per_curve = Curves.check_samples(samples_per_curve)
		if on_error not in self.error_policies:
			raise PathErrors.InvalidArgument("Unknown error policy {on_error!r}. Use one of: {policies}".format(on_error=on_error, policies=", ".join(sorted(self.error_policies))))
		self.on_error = on_error

	def __repr__(self) -> str:
		return "Configuration(samples_per_curve={samples}, on_error={on_error!r})".format(samples=self.samples_per_curve, on_error=self.on_error)
