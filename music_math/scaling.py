"""Range remapping and level conversion.

:func:`linlin` and :func:`linexp` map a value from a source range into a
destination range, clipping it to the source range first so the result never
leaves the destination.  A zero-width source range maps everything to
``to_min``.

:func:`dbamp` and :func:`ampdb` convert between decibels and linear
amplitude (0 dB = 1.0, about -6.02 dB = 0.5).
"""

import fractions

import numpy

import music_math.numeric
import music_math.range_ops


def linlin (value: float, from_min: float, from_max: float, to_min: float, to_max: float) -> float:

	"""
	Map *value* linearly from ``[from_min, from_max]`` to ``[to_min, to_max]``.

	Example:
		```python
		linlin(0.5, 0.0, 1.0, 0.0, 10.0)   # 5.0
		linlin(64, 0, 127, 20.0, 80.0)     # ~50.2
		```
	"""

	denominator = from_max - from_min

	if denominator == 0:
		return to_min

	value = music_math.range_ops.clip(value, from_min, from_max)

	return (value - from_min) * (to_max - to_min) / denominator + to_min


def linexp (
	value: float,
	from_min: float,
	from_max: float,
	to_min: float,
	to_max: float,
	exponent: float
) -> float:

	"""
	Map *value* from ``[from_min, from_max]`` to ``[to_min, to_max]`` along a power curve.

	The clipped value is normalised to [0, 1] and raised to *exponent*
	before scaling.  Exponents above 1 spend more of the source range near
	``to_min``, which suits perceptual parameters such as filter cutoff.

	Parameters:
		value: The input to map.
		from_min: Lower bound of the source range.
		from_max: Upper bound of the source range.
		to_min: Output when *value* is at (or below) *from_min*.
		to_max: Output when *value* is at (or above) *from_max*.
		exponent: Curve exponent; 1 gives the same result as :func:`linlin`.

	Returns:
		The mapped value.
	"""

	denominator = from_max - from_min

	if denominator == 0:
		return to_min

	value = music_math.range_ops.clip(value, from_min, from_max)
	normalised = ((value - from_min) / denominator) ** exponent

	return normalised * (to_max - to_min) + to_min


def dbamp (db: float) -> float:

	"""Convert decibels to linear amplitude: ``10 ** (db / 20)``."""

	ten = music_math.numeric.constant(10, db)
	twenty = music_math.numeric.constant(20, db)

	return ten ** (db / twenty)


def ampdb (amp: float) -> float:

	"""
	Convert linear amplitude to decibels: ``20 * log10(amp)``.

	Silence and negative amplitudes are not rejected: ``ampdb(0.0)`` is
	``-inf`` and a negative amplitude gives ``nan``, as ``numpy.log10``
	returns them (with a ``RuntimeWarning``).

	``Fraction`` amplitudes are converted to ``float`` first, since
	``numpy.log10`` has no rational loop.
	"""

	if isinstance(amp, fractions.Fraction):
		amp = float(amp)

	twenty = music_math.numeric.constant(20, amp)

	return twenty * numpy.log10(amp)
