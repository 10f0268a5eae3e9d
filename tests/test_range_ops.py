import fractions

import numpy
import pytest

import music_math.numeric
import music_math.range_ops


# ─── clip ─────────────────────────────────────────────────────────────────────


def test_clip_integers () -> None:

	"""Integers inside the range pass through; outside they pin to the nearest bound."""

	assert music_math.range_ops.clip(5, 0, 10) == 5
	assert music_math.range_ops.clip(5, 10, 20) == 10
	assert music_math.range_ops.clip(5, 0, 4) == 4
	assert music_math.range_ops.clip(-10, 0, 4) == 0


def test_clip_floats () -> None:

	"""Floats are clipped the same way."""

	assert music_math.range_ops.clip(0.25, 0.1, 0.125) == 0.125
	assert music_math.range_ops.clip(-0.5, 0.1, 0.125) == 0.1


def test_clip_is_idempotent_and_bounded () -> None:

	"""Clipping twice changes nothing, and the result is always within the bounds."""

	for value in [-100.0, -0.5, 0.0, 3.3, 7.0, 10.0, 55.5]:
		once = music_math.range_ops.clip(value, 0.0, 7.0)
		assert music_math.range_ops.clip(once, 0.0, 7.0) == once
		assert 0.0 <= once <= 7.0


def test_clip_inverted_bounds_checks_min_first () -> None:

	"""With min > max the lower-bound test wins for small values, the upper for large ones."""

	assert music_math.range_ops.clip(0, 10, 5) == 10
	assert music_math.range_ops.clip(20, 10, 5) == 5
	assert music_math.range_ops.clip(7, 10, 5) == 10


def test_clip_strings () -> None:

	"""Any ordered type can be clipped."""

	assert music_math.range_ops.clip("z", "a", "m") == "m"


# ─── wrap ─────────────────────────────────────────────────────────────────────


def test_wrap_below_range () -> None:

	"""A value just below the range wraps to just below the top."""

	assert music_math.range_ops.wrap(-1.0, 0.0, 10.0) == pytest.approx(9.0)


def test_wrap_above_range () -> None:

	"""A value just above the range wraps to just above the bottom."""

	assert music_math.range_ops.wrap(11.0, 0.0, 10.0) == pytest.approx(1.0)


def test_wrap_inside_range_is_identity () -> None:

	"""Values inside the range, bounds included, are unchanged."""

	for value in [0.0, 5.0, 10.0]:
		assert music_math.range_ops.wrap(value, 0.0, 10.0) == value


def test_wrap_several_periods () -> None:

	"""Values many ranges away still land at the right phase."""

	assert music_math.range_ops.wrap(33.0, 0.0, 10.0) == pytest.approx(3.0)
	assert music_math.range_ops.wrap(-27.0, 0.0, 10.0) == pytest.approx(3.0)


def test_wrap_offset_range () -> None:

	"""Ranges that do not start at zero wrap relative to their bounds."""

	assert music_math.range_ops.wrap(-1.0, -5.0, 5.0) == -1.0
	assert music_math.range_ops.wrap(7.0, -5.0, 5.0) == pytest.approx(-3.0)


def test_wrap_zero_range_is_not_guarded () -> None:

	"""A zero-width range is the caller's problem and surfaces as a division error."""

	with pytest.raises(ZeroDivisionError):
		music_math.range_ops.wrap(3.0, 1.0, 1.0)


def test_fold_zero_range_is_not_guarded () -> None:

	"""fold leaves a zero-width range to the caller too."""

	with pytest.raises(ZeroDivisionError):
		music_math.range_ops.fold(3.0, 1.0, 1.0)


# ─── fold ─────────────────────────────────────────────────────────────────────


def test_fold_below_range () -> None:

	"""A value below the range reflects off the lower bound."""

	assert music_math.range_ops.fold(-1.0, 0.0, 10.0) == pytest.approx(1.0)


def test_fold_above_range () -> None:

	"""A value above the range reflects off the upper bound."""

	assert music_math.range_ops.fold(11.0, 0.0, 10.0) == pytest.approx(9.0)


def test_fold_inside_range_is_identity () -> None:

	"""Values inside the range are unchanged."""

	assert music_math.range_ops.fold(5.0, 0.0, 10.0) == pytest.approx(5.0)


def test_fold_tiny_negative_offset_rounds_to_bound () -> None:

	"""Floor modulo rounds a tiny negative offset up to the period, landing on min."""

	assert music_math.range_ops.fold(-1e-17, 0.0, 10.0) == 0.0


def test_fold_traces_triangle_wave () -> None:

	"""A rising input bounces back and forth between the bounds."""

	outputs = [music_math.range_ops.fold(float(x), 0.0, 4.0) for x in range(-4, 13)]

	assert outputs == pytest.approx([4, 3, 2, 1, 0, 1, 2, 3, 4, 3, 2, 1, 0, 1, 2, 3, 4])


def test_fold_integers () -> None:

	"""Integer arguments fold with integer arithmetic."""

	result = music_math.range_ops.fold(-1, 0, 10)

	assert result == 1
	assert isinstance(result, int)


def test_fold_keeps_float32 () -> None:

	"""Single-precision input stays single precision."""

	result = music_math.range_ops.fold(numpy.float32(11.0), numpy.float32(0.0), numpy.float32(10.0))

	assert isinstance(result, numpy.float32)
	assert result == pytest.approx(9.0)


def test_fold_fractions_are_exact () -> None:

	"""Exact rational types are folded without rounding."""

	half = fractions.Fraction(1, 2)

	assert music_math.range_ops.fold(fractions.Fraction(5, 4), 0, 1) == fractions.Fraction(3, 4)
	assert music_math.range_ops.fold(-half, 0, 1) == half


def test_fold_unconvertible_type_raises () -> None:

	"""A type that cannot represent the constant 2 fails loudly."""

	class Level (float):

		def __new__ (cls, value: float) -> "Level":
			if not isinstance(value, float):
				raise TypeError("levels are built from floats only")
			return super().__new__(cls, value)

		def __sub__ (self, other: float) -> "Level":
			return Level(float(self) - float(other))

	with pytest.raises(music_math.numeric.NumericConversionError):
		music_math.range_ops.fold(Level(-1.0), Level(0.0), Level(10.0))
