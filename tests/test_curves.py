#Library to read SVG path data as sequences of points.
#Copyright (C) 2026 Ghostkeeper
#This library is free software: you can redistribute it and/or modify it under the terms of the GNU Affero General Public License as published by the Free Software Foundation, either version 3 of the License, or (at your option) any later version.
#This library is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU Affero General Public License for details.
#You should have received a copy of the GNU Affero General Public License along with this library. If not, see <https://gnu.org/licenses/>.

"""
Tests for Bézier curve sampling.

Run:
	pytest tests/test_curves.py -v
"""

import numpy
import pytest

from SVGPoints import Curves
from SVGPoints.PathErrors import InvalidArgument
from SVGPoints.Point import Point

@pytest.mark.parametrize("samples", [1, 2, 3, 10, 100, 257])
def test_quadratic_sample_count(samples):
	points = Curves.sample_quadratic(Point(0, 0), Point(3, 8), Point(-5, 2), samples)
	assert len(points) == samples
	assert points[-1] == pytest.approx(Point(-5, 2))

@pytest.mark.parametrize("samples", [1, 2, 3, 10, 100, 257])
def test_cubic_sample_count(samples):
	points = Curves.sample_cubic(Point(1, 1), Point(4, -2), Point(7, 9), Point(12.5, 3.25), samples)
	assert len(points) == samples
	assert points[-1] == pytest.approx(Point(12.5, 3.25))

def test_quadratic_halfway():
	"""
	With two samples, the curve is evaluated at t=0.5 and t=1.
	"""
	points = Curves.sample_quadratic(Point(0, 0), Point(0, 10), Point(10, 10), 2)
	assert points[0] == pytest.approx(Point(2.5, 7.5))
	assert points[1] == pytest.approx(Point(10, 10))

def test_cubic_halfway():
	points = Curves.sample_cubic(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0), 2)
	#(1/8)·0 + (3/8)·(0, 10) + (3/8)·(10, 10) + (1/8)·(10, 0)
	assert points[0] == pytest.approx(Point(5, 7.5))

def test_start_not_included():
	points = Curves.sample_cubic(Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3), 4)
	assert Point(0, 0) not in points

def test_straight_line_is_evenly_spaced():
	"""
	A quadratic curve with its handle halfway is a straight line at constant
	speed.
	"""
	points = Curves.sample_quadratic(Point(0, 0), Point(5, 0), Point(10, 0), 5)
	assert [point.x for point in points] == pytest.approx([2, 4, 6, 8, 10])
	assert all(point.y == 0 for point in points)

def test_points_are_python_floats():
	points = Curves.sample_cubic(Point(0, 0), Point(1, 2), Point(3, 4), Point(5, 6), 3)
	for point in points:
		assert type(point.x) is float
		assert type(point.y) is float

def test_restartable():
	"""
	Sampling the same curve twice gives the same points, and the result can be
	iterated more than once.
	"""
	first = Curves.sample_quadratic(Point(0, 0), Point(1, 5), Point(2, 0), 7)
	second = Curves.sample_quadratic(Point(0, 0), Point(1, 5), Point(2, 0), 7)
	assert first == second
	assert list(first) == list(first)

def test_parameters():
	assert list(Curves.parameters(4)) == pytest.approx([0.25, 0.5, 0.75, 1.0])

def test_numpy_integer_samples():
	assert len(Curves.sample_quadratic(Point(0, 0), Point(1, 1), Point(2, 0), numpy.int64(3))) == 3

@pytest.mark.parametrize("samples", [0, -1, 2.5, "10", None, True])
def test_invalid_samples(samples):
	with pytest.raises(InvalidArgument):
		Curves.sample_cubic(Point(0, 0), Point(1, 1), Point(2, 2), Point(3, 3), samples)
