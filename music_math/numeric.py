"""Literal constants in the caller's numeric type.

The math in this package is written once and runs over any scalar type that
supports the arithmetic involved: ``int``, ``float``, ``Fraction``,
``Decimal`` and NumPy scalars such as ``numpy.float32``.  Literal constants
(the ``2`` in ``2 * t ** 3``) are converted into the type of the working value
first, so a single-precision computation stays single precision instead of
being promoted by a Python ``float`` literal.

If a type cannot represent a required constant the computation cannot be
carried out faithfully, and :class:`NumericConversionError` is raised.
"""

import logging
import typing

logger = logging.getLogger(__name__)


class NumericConversionError(TypeError):
	pass


def constant (literal: typing.Union[int, float], like: typing.Any) -> typing.Any:

	"""
	Convert *literal* into the numeric type of *like*.

	*like* may be a sample value (its type is used) or a type object.

	Raises:
		NumericConversionError: The type cannot construct the literal.
	"""

	kind = like if isinstance(like, type) else type(like)

	try:
		return kind(literal)
	except (TypeError, ValueError, ArithmeticError) as exc:
		logger.debug(f"Cannot convert {literal!r} to {kind.__name__}: {exc}")
		raise NumericConversionError(
			f"Could not convert {literal!r} to {kind.__name__}"
		) from exc
