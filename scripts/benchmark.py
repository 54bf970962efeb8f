#!/usr/bin/env python
"""Benchmark utf8util against the stdlib codec it replaces.

For each sample, times :func:`utf8util.encoded_length` against
``len(text.encode("utf-8"))`` and :func:`utf8util.is_well_formed` against a
strict ``bytes.decode`` with ``time.perf_counter()``.

Can be run standalone for human-readable output, or with ``--json-only`` for
machine-readable JSON.
"""

from __future__ import annotations

import argparse
import io
import json
import statistics
import time
from collections.abc import Callable

import utf8util

_SAMPLES: dict[str, str] = {
    "ascii": "Hello world, this is a plain ASCII text. " * 250,
    "latin": "Héllo wörld café résumé naïve façade. " * 250,
    "cjk": "これはテストです。日本語のテキスト。中文测试文本。" * 250,
    "emoji": "Hello 🌍🌎🌏 party 🎉 time ⏰ " * 250,
}


def _stdlib_is_well_formed(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def _time_call(func: Callable[[], object], iterations: int) -> float:
    """Return the median per-call time in microseconds over five runs."""
    runs = []
    for _ in range(5):
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        runs.append((time.perf_counter() - start) / iterations * 1e6)
    return statistics.median(runs)


def run(iterations: int) -> dict[str, dict[str, float]]:
    results: dict[str, dict[str, float]] = {}
    for name, text in _SAMPLES.items():
        data = text.encode("utf-8")
        results[name] = {
            "encoded_length_us": _time_call(
                lambda t=text: utf8util.encoded_length(t), iterations
            ),
            "stdlib_encode_us": _time_call(
                lambda t=text: len(t.encode("utf-8")), iterations
            ),
            "is_well_formed_us": _time_call(
                lambda d=data: utf8util.is_well_formed(d), iterations
            ),
            "is_well_formed_stream_us": _time_call(
                lambda d=data: utf8util.is_well_formed_stream(io.BytesIO(d)),
                iterations,
            ),
            "stdlib_decode_us": _time_call(
                lambda d=data: _stdlib_is_well_formed(d), iterations
            ),
        }
    return results


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark utf8util against the stdlib UTF-8 codec.",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=200,
        help="Calls per timing run (default: 200)",
    )
    parser.add_argument(
        "--json-only",
        action="store_true",
        default=False,
        help="Print only JSON output (for consumption by other scripts)",
    )
    args = parser.parse_args()

    results = run(args.iterations)
    if args.json_only:
        print(json.dumps(results, indent=2))
        return

    print(f"utf8util {utf8util.__version__}, {args.iterations} iterations per run")
    for name, timings in results.items():
        print(f"\n{name}:")
        for label, micros in timings.items():
            print(f"  {label:<28} {micros:10.2f} us")


if __name__ == "__main__":
    main()
