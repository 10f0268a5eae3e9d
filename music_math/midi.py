"""MIDI note utilities.

Pitch conversion, safe transposition, and lookups between MIDI note numbers
and names.  Names follow ``music_math.constants.note_names`` (C4 = 60,
sharps spelled ``#``).

Lookups that can miss return ``None`` rather than raising:

    music_math.midi.get_midi_note_name(69)          # "A4"
    music_math.midi.get_midi_note_name(128)         # None
    music_math.midi.get_midinote_from_name("C#3")   # 49
    music_math.midi.transpose(120, 12)              # None (above G9)
"""

import logging
import operator
import typing

import numpy

import music_math.constants
import music_math.constants.note_names
import music_math.numeric

logger = logging.getLogger(__name__)

Int = typing.TypeVar("Int", int, numpy.integer)


def to_frequency (note: int, dtype: typing.Type = float) -> typing.Any:

	"""
	Convert a MIDI note number to a frequency in Hz (A4 = 69 = 440 Hz).

	The note and every constant are converted to *dtype* before the
	calculation, so ``dtype=numpy.float32`` gives a single-precision result.

	Raises:
		NumericConversionError: *dtype* cannot represent the note or a constant.
	"""

	note = music_math.numeric.constant(note, dtype)
	base = music_math.numeric.constant(music_math.constants.REFERENCE_FREQUENCY, dtype)
	reference = music_math.numeric.constant(music_math.constants.REFERENCE_NOTE, dtype)
	divisor = music_math.numeric.constant(music_math.constants.SEMITONES_PER_OCTAVE, dtype)
	two = music_math.numeric.constant(2, dtype)

	return base * two ** ((note - reference) / divisor)


def transpose (note: Int, semitones: Int) -> typing.Optional[Int]:

	"""
	Transpose *note* by *semitones*, staying within the MIDI range.

	Returns the transposed note, in the same type as *note*, or ``None`` if
	the result falls outside 0-127.  For fixed-width NumPy integer types the
	addition is overflow-checked against the type's limits, and an overflow
	also returns ``None``.

	Raises:
		TypeError: Either argument is not an integer.
	"""

	transposed = operator.index(note) + operator.index(semitones)

	if isinstance(note, numpy.integer):
		limits = numpy.iinfo(type(note))
		if not limits.min <= transposed <= limits.max:
			logger.debug(f"transpose({note}, {semitones}) overflows {type(note).__name__}")
			return None

	if not music_math.constants.MIDI_NOTE_MIN <= transposed <= music_math.constants.MIDI_NOTE_MAX:
		logger.debug(f"transpose({note}, {semitones}) = {transposed} is outside the MIDI note range")
		return None

	return type(note)(transposed)


def get_midi_note_name (note: int) -> typing.Optional[str]:

	"""Return the name of MIDI note *note* (e.g. ``"A4"``), or ``None`` outside 0-127."""

	if not 0 <= note < len(music_math.constants.note_names.MIDI_NOTE_NAMES):
		return None

	return music_math.constants.note_names.MIDI_NOTE_NAMES[note]


def get_midinote_from_name (name: str) -> typing.Optional[int]:

	"""
	Return the MIDI note number for *name*, or ``None`` if it is not a known name.

	Matching is exact: ``"A4"`` is 69 but ``"a4"`` and ``"Bb4"`` are not found.
	"""

	try:
		return music_math.constants.note_names.MIDI_NOTE_NAMES.index(name)
	except ValueError:
		return None


def note_name_to_octave_position (name: str) -> typing.Optional[int]:

	"""Return the position of pitch class *name* in the octave (C = 0 ... B = 11), case-insensitively."""

	try:
		return music_math.constants.note_names.NOTE_NAMES.index(name.upper())
	except ValueError:
		return None


def octave_position_to_note_name (position: int) -> str:

	"""Return the pitch-class name for *position*, reduced modulo 12 (so 14 is ``"D"``)."""

	index = position % music_math.constants.SEMITONES_PER_OCTAVE
	return music_math.constants.note_names.NOTE_NAMES[index]
