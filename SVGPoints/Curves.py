#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

import numpy #Evaluating the curves for all parameters at once.
import typing

from . import PathErrors #To reject invalid sample counts.
from .Point import Point

def check_samples(samples) -> int:
	"""
	Verifies that a number of samples is usable to approximate a curve.
	:param samples: The requested number of points per curve.
	:return: The same number of points, as Python integer.
	"""
	if isinstance(samples, bool) or not isinstance(samples, (int, numpy.integer)):
		raise PathErrors.InvalidArgument("The number of samples per curve must be an integer, not {samples!r}.".format(samples=samples))
	if samples <= 0:
		raise PathErrors.InvalidArgument("The number of samples per curve must be positive, not {samples}.".format(samples=samples))
	return int(samples)

def parameters(samples) -> numpy.ndarray:
	"""
	Gets the parameter values at which to sample a curve.

	The start of the curve (t=0) is left out, since that point was already
	drawn by the previous command. The end of the curve (t=1) is included.
	:param samples: How many parameter values to get.
	:return: An array with the values 1/N, 2/N, ..., N/N.
	"""
	samples = check_samples(samples)
	return numpy.arange(1, samples + 1, dtype=numpy.float64) / samples

def _to_points(xs, ys) -> typing.List[Point]:
	return [Point(float(x), float(y)) for x, y in zip(xs, ys)]

def sample_quadratic(start, handle, end, samples=100) -> typing.List[Point]:
	"""
	Samples points along a quadratic Bézier curve.

	The curve goes from the start to the end, pulled towards the handle in
	between:
	B(t) = (1-t)²·start + 2(1-t)t·handle + t²·end
	:param start: The point where the curve starts.
	:param handle: The control point of the curve.
	:param end: The point where the curve ends.
	:param samples: How many points to return.
	:return: Exactly ``samples`` points on the curve, at evenly spaced
	parameter values. The starting point is not included. The last point is the
	end of the curve.
	"""
	t = parameters(samples)
	one_minus_t = 1.0 - t

	#Bernstein polynomials.
	b0 = one_minus_t * one_minus_t
	b1 = 2.0 * one_minus_t * t
	b2 = t * t

	xs = b0 * start[0] + b1 * handle[0] + b2 * end[0]
	ys = b0 * start[1] + b1 * handle[1] + b2 * end[1]
	return _to_points(xs, ys)

def sample_cubic(start, handle1, handle2, end, samples=100) -> typing.List[Point]:
	"""
	Samples points along a cubic Bézier curve.

	B(t) = (1-t)³·start + 3(1-t)²t·handle1 + 3(1-t)t²·handle2 + t³·end
	:param start: The point where the curve starts.
	:param handle1: The control point near the start of the curve.
	:param handle2: The control point near the end of the curve.
	:param end: The point where the curve ends.
	:param samples: How many points to return.
	:return: Exactly ``samples`` points on the curve, at evenly spaced
	parameter values. The starting point is not included. The last point is the
	end of the curve.
	"""
	t = parameters(samples)
	one_minus_t = 1.0 - t

	b0 = one_minus_t ** 3
	b1 = 3.0 * (one_minus_t ** 2) * t
	b2 = 3.0 * one_minus_t * (t ** 2)
	b3 = t ** 3

	xs = b0 * start[0] + b1 * handle1[0] + b2 * handle2[0] + b3 * end[0]
	ys = b0 * start[1] + b1 * handle1[1] + b2 * handle2[1] + b3 * end[1]
	return _to_points(xs, ys)
