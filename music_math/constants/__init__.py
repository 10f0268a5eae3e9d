"""Constants for music_math.

- ``music_math.constants.note_names`` - Pitch-class and MIDI note name tables

Tuning and MIDI range constants are defined here.  Tuning is twelve-tone
equal temperament referenced to A4 (MIDI 69) = 440 Hz.
"""

# Tuning reference: A4 = 440 Hz
REFERENCE_NOTE = 69
REFERENCE_FREQUENCY = 440.0
SEMITONES_PER_OCTAVE = 12

# MIDI note range
MIDI_NOTE_MIN = 0
MIDI_NOTE_MAX = 127
MIDI_NOTE_COUNT = 128
