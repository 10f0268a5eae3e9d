"""Range operators: keep a scalar inside ``[min, max]``.

- :func:`clip` pins out-of-range values to the nearest bound.
- :func:`wrap` wraps them around modulo the range, like a phase accumulator.
- :func:`fold` reflects them back off the bounds, like a triangle wave.

``wrap`` and ``fold`` divide by the width of the range.  A zero-width range
(``min == max``) is the caller's responsibility: it is not guarded here, and
for built-in types Python raises ``ZeroDivisionError``.
"""

import typing

import music_math.numeric

T = typing.TypeVar("T")


def clip (value: T, min: T, max: T) -> T:

	"""
	Clip *value* into ``[min, max]``.

	Works for any ordered type.  The bounds are not validated: when
	``min > max`` the ``< min`` test runs first and decides the result.
	"""

	if value < min:
		return min
	if value > max:
		return max
	return value


def wrap (value: float, min: float, max: float) -> float:

	"""
	Wrap *value* around into ``[min, max]``.

	Values inside the range (bounds included) are returned unchanged.

	Example:
		```python
		wrap(-1.0, 0.0, 10.0)  # 9.0
		wrap(11.0, 0.0, 10.0)  # 1.0
		```
	"""

	span = max - min

	if value < min:
		return max - ((min - value) % span)
	if value > max:
		return min + ((value - max) % span)
	return value


def fold (value: float, min: float, max: float) -> float:

	"""
	Fold *value* back into ``[min, max]`` by mirroring it off the bounds.

	Moving past either bound reverses direction, so a steadily rising input
	traces a triangle wave between ``min`` and ``max``.

	Example:
		```python
		fold(-1.0, 0.0, 10.0)  # 1.0
		fold(11.0, 0.0, 10.0)  # 9.0
		```

	Float offsets use Python's floor modulo, so a tiny negative offset can round
	up to the full period: ``fold(-1e-17, 0.0, 10.0)`` is ``0.0``, not ``1e-17``.

	Raises:
		NumericConversionError: The value's type cannot represent 2.
	"""

	span = max - min
	period = span * music_math.numeric.constant(2, span)
	offset = abs((value - min) % period)

	return min + (period - offset if offset > span else offset)
