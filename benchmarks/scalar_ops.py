"""Scalar operation benchmark.

Times the per-call cost of the hot-path helpers (range operators, level
conversion and range mapping) with ``timeit``.

Usage:
    python benchmarks/scalar_ops.py [--number N] [--repeat R] [--float32]

Options:
    --number N      Calls per timing run (default: 100000)
    --repeat R      Timing runs per operation; the fastest is reported (default: 5)
    --float32       Benchmark with numpy.float32 arguments instead of float
"""

import argparse
import logging
import statistics
import timeit
import typing

import numpy

# Keep benchmark output clean.
logging.basicConfig(level=logging.ERROR)

import music_math.range_ops
import music_math.scaling

# ---------------------------------------------------------------------------

Case = typing.Tuple[str, typing.Callable[..., typing.Any], typing.Tuple[typing.Any, ...]]


def _cases (kind: typing.Type) -> typing.List[Case]:

	"""Build (name, function, arguments) triples, with float arguments converted to *kind*."""

	def f (*values: float) -> typing.Tuple[typing.Any, ...]:
		return tuple(kind(v) for v in values)

	return [
		("clip",   music_math.range_ops.clip,  (20, 0, 10)),
		("wrap",   music_math.range_ops.wrap,  f(20.0, 0.0, 10.0)),
		("fold",   music_math.range_ops.fold,  f(20.0, 0.0, 10.0)),
		("ampdb",  music_math.scaling.ampdb,   f(20.0)),
		("dbamp",  music_math.scaling.dbamp,   f(20.0)),
		("linexp", music_math.scaling.linexp,  f(0.5, 0.0, 1.0, 1.0, 10.0, 2.0)),
		("linlin", music_math.scaling.linlin,  f(0.5, 0.0, 1.0, 0.0, 10.0)),
	]


def _run_benchmark (cases: typing.List[Case], number: int, repeat: int) -> typing.List[typing.Tuple[str, typing.List[float]]]:

	"""Return per-call timings (seconds) for every case."""

	results = []

	for name, fn, args in cases:
		runs = timeit.repeat(lambda: fn(*args), number=number, repeat=repeat)
		results.append((name, [run / number for run in runs]))

	return results


def _print_report (results: typing.List[typing.Tuple[str, typing.List[float]]], number: int, repeat: int, label: str) -> None:

	print(f"\nScalar Operation Benchmark - {label}, {repeat} x {number} calls")
	print(f"{'─' * 50}")
	print(f"  {'Operation':<10} {'Best':>10} {'Median':>10}")
	print(f"{'─' * 50}")

	for name, per_call in results:
		best_ns   = min(per_call) * 1e9
		median_ns = statistics.median(per_call) * 1e9
		print(f"  {name:<10} {best_ns:>7.1f} ns {median_ns:>7.1f} ns")

	print(f"{'─' * 50}")
	print()


def main () -> None:

	parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument("--number",  type=int, default=100000, help="Calls per timing run (default: 100000)")
	parser.add_argument("--repeat",  type=int, default=5,      help="Timing runs per operation (default: 5)")
	parser.add_argument("--float32", action="store_true",      help="Use numpy.float32 arguments")
	args = parser.parse_args()

	kind: typing.Type = numpy.float32 if args.float32 else float
	label = "numpy.float32" if args.float32 else "float"

	results = _run_benchmark(_cases(kind), args.number, args.repeat)
	_print_report(results, args.number, args.repeat, label)


if __name__ == "__main__":
	main()
