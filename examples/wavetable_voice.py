import logging

import music_math
import music_math.constants

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TABLE_SIZE = 16
SAMPLE_RATE = 48000.0

# One cycle of a bent triangle, stored coarsely so reads have to interpolate.
TABLE = [music_math.fold(4.0 * i / TABLE_SIZE - 1.0, -1.0, 1.0) ** 3 for i in range(TABLE_SIZE)]


def read_table (phase: float, method: music_math.Method) -> float:

	"""Read TABLE at a fractional *phase* in [0, 1), treating it as one looping cycle."""

	position = phase * TABLE_SIZE
	index = int(position)
	p0, p1, p2, p3 = (TABLE[(index + k) % TABLE_SIZE] for k in (-1, 0, 1, 2))

	return music_math.interpolate(method, p0, p1, p2, p3, position - index)


def main () -> None:

	root = music_math.get_midinote_from_name("E2")
	gain = music_math.dbamp(-12.0)

	# The last interval lands above G9 and is dropped.
	for interval in (0, 7, 12, 16, 31, 96):

		pitch = music_math.transpose(root, interval)

		if pitch is None:
			logger.warning(f"E2 + {interval} semitones is outside the MIDI range - skipping")
			continue

		freq = music_math.to_frequency(pitch)
		brightness = music_math.linexp(pitch, 0, music_math.constants.MIDI_NOTE_MAX, 0.0, 1.0, 2.0)
		increment = freq / SAMPLE_RATE

		samples = [
			gain * read_table(music_math.wrap(n * increment, 0.0, 1.0) % 1.0, music_math.Method.CUBIC)
			for n in range(64)
		]
		peak = max(abs(s) for s in samples)

		logger.info(
			f"{music_math.get_midi_note_name(pitch):>4} "
			f"({music_math.octave_position_to_note_name(pitch):<2}) "
			f"{freq:8.2f} Hz  brightness {brightness:.2f}  peak {music_math.ampdb(peak):6.1f} dBFS"
		)


if __name__ == "__main__":
	main()
