"""
music_math - small numeric helpers for music and audio code.

Every function is a pure, single-value transform: no state, no buffers, no
I/O.  They are meant to be composed inside synthesis engines, sequencers and
MIDI tools, and work over ``int``, ``float``, ``Fraction``, ``Decimal`` and
NumPy scalars alike (``numpy.float32`` in, ``numpy.float32`` out).

Modules:

- **Range operators** (``music_math.range_ops``): ``clip()``, ``wrap()``,
  ``fold()``.
- **Interpolation** (``music_math.interpolation``): ``linear()``,
  ``hermite()``, and the ``Method`` tag with ``interpolate()`` for choosing
  one at runtime.
- **Scaling** (``music_math.scaling``): ``linlin()``, ``linexp()``,
  ``dbamp()``, ``ampdb()``.
- **MIDI** (``music_math.midi``): ``to_frequency()``, ``transpose()``, and
  lookups between note numbers, note names and octave positions.
- **Constants** (``music_math.constants``): tuning reference, MIDI range, and
  the ``NOTE_NAMES`` / ``MIDI_NOTE_NAMES`` tables.

Minimal example:

    ```python
    import music_math

    cutoff = music_math.linexp(0.5, 0.0, 1.0, 20.0, 20000.0, 3.0)
    gain = music_math.dbamp(-6.0)
    freq = music_math.to_frequency(music_math.get_midinote_from_name("A4"))
    ```

Lookups that can miss (note names, transposition) return ``None``.  If a
numeric type cannot represent a constant an operation needs,
``NumericConversionError`` is raised.
"""

import music_math.constants.note_names
import music_math.interpolation
import music_math.midi
import music_math.numeric
import music_math.range_ops
import music_math.scaling


clip = music_math.range_ops.clip
wrap = music_math.range_ops.wrap
fold = music_math.range_ops.fold

Method = music_math.interpolation.Method
linear = music_math.interpolation.linear
hermite = music_math.interpolation.hermite
interpolate = music_math.interpolation.interpolate

linlin = music_math.scaling.linlin
linexp = music_math.scaling.linexp
dbamp = music_math.scaling.dbamp
ampdb = music_math.scaling.ampdb

to_frequency = music_math.midi.to_frequency
transpose = music_math.midi.transpose
get_midi_note_name = music_math.midi.get_midi_note_name
get_midinote_from_name = music_math.midi.get_midinote_from_name
note_name_to_octave_position = music_math.midi.note_name_to_octave_position
octave_position_to_note_name = music_math.midi.octave_position_to_note_name

NOTE_NAMES = music_math.constants.note_names.NOTE_NAMES
MIDI_NOTE_NAMES = music_math.constants.note_names.MIDI_NOTE_NAMES

NumericConversionError = music_math.numeric.NumericConversionError
