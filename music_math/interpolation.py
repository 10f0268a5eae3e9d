"""Interpolation between control points.

:func:`linear` blends two points; :func:`hermite` fits a cubic Hermite spline
through the middle pair of four points, estimating the tangents from the
outer neighbours (a Catmull-Rom style curve), which gives smoother results
when reading between samples of a wavetable or an automation curve.

Neither function clamps *t*: values outside [0, 1] extrapolate.

Code that picks a method at runtime can use the :class:`Method` tag and
:func:`interpolate`:

    music_math.interpolation.interpolate("cubic", y0, y1, y2, y3, frac)
"""

import enum
import typing

import music_math.numeric


class Method (enum.Enum):

	"""Interpolation strategy selector."""

	NONE = "none"
	LINEAR = "linear"
	CUBIC = "cubic"


def linear (a: float, b: float, t: float) -> float:

	"""Linear interpolation from *a* (t=0) to *b* (t=1)."""

	one = music_math.numeric.constant(1, t)
	return a * (one - t) + b * t


def hermite (p0: float, p1: float, p2: float, p3: float, t: float) -> float:

	"""
	Cubic Hermite interpolation from *p1* (t=0) to *p2* (t=1).

	The tangent at *p1* is taken from its neighbours *p0* and *p2*, and the
	tangent at *p2* from *p1* and *p3*.

	Parameters:
		p0: Point before the segment, shapes the tangent at *p1*.
		p1: Start of the segment.
		p2: End of the segment.
		p3: Point after the segment, shapes the tangent at *p2*.
		t: Position within the segment, normally in [0, 1].

	Returns:
		The interpolated value.

	Raises:
		NumericConversionError: The type of *t* cannot represent 2 or 3.
	"""

	one = music_math.numeric.constant(1, t)
	two = music_math.numeric.constant(2, t)
	three = music_math.numeric.constant(3, t)

	t2 = t * t
	t3 = t2 * t

	# Tangents at p1 and p2
	m0 = (p2 - p0) / two
	m1 = (p3 - p1) / two

	# Hermite basis
	a = two * t3 - three * t2 + one
	b = t3 - two * t2 + t
	c = -two * t3 + three * t2
	d = t3 - t2

	return a * p1 + b * m0 + c * p2 + d * m1


def interpolate (
	method: typing.Union[Method, str],
	p0: float,
	p1: float,
	p2: float,
	p3: float,
	t: float
) -> float:

	"""
	Interpolate between *p1* and *p2* with a method chosen at runtime.

	*method* is a :class:`Method` member or its value (``"none"``,
	``"linear"``, ``"cubic"``).  ``NONE`` holds *p1* for the whole segment,
	``LINEAR`` ignores the outer points, ``CUBIC`` uses all four.

	Raises :class:`ValueError` for unknown method names.
	"""

	if not isinstance(method, Method):
		try:
			method = Method(method)
		except ValueError:
			available = ", ".join(f'"{m.value}"' for m in Method)
			raise ValueError(
				f"Unknown interpolation method {method!r}. Available methods: {available}"
			) from None

	if method is Method.LINEAR:
		return linear(p1, p2, t)
	if method is Method.CUBIC:
		return hermite(p0, p1, p2, p3, t)
	return p1
