"""
Opt-in profiling of the simulation hot paths.

Disabled by default; `enable_profiling()` turns recording on and prints a
summary table when the process exits.
"""

import time
from functools import wraps
from collections import defaultdict
from typing import Dict
import atexit


class Profiler:
    def __init__(self):
        self.stats: Dict[str, Dict] = defaultdict(lambda: {
            'calls': 0,
            'total_time': 0.0,
            'max_time': 0.0
        })
        self.enabled = False
        self._registered = False

    def enable(self):
        self.enabled = True
        if not self._registered:
            atexit.register(self.print_stats)
            self._registered = True

    def record(self, name: str, elapsed: float):
        entry = self.stats[name]
        entry['calls'] += 1
        entry['total_time'] += elapsed
        entry['max_time'] = max(entry['max_time'], elapsed)

    def print_stats(self):
        if not self.stats:
            return

        print("\n" + "=" * 70)
        print("PROFILING")
        print("=" * 70)
        print(f"{'Function':<35} {'Calls':>8} {'Total(s)':>10} {'Avg(ms)':>8} {'Max(ms)':>8}")
        print("-" * 70)

        ordered = sorted(self.stats.items(), key=lambda x: x[1]['total_time'], reverse=True)
        for name, data in ordered:
            calls = data['calls']
            avg_ms = data['total_time'] / calls * 1000 if calls else 0
            print(f"{name:<35} {calls:>8} {data['total_time']:>10.3f} "
                  f"{avg_ms:>8.3f} {data['max_time'] * 1000:>8.3f}")

        print("=" * 70)


profiler = Profiler()


def enable_profiling():
    profiler.enable()


def profile(func):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if not profiler.enabled:
            return func(*args, **kwargs)
        start = time.perf_counter()
        result = func(*args, **kwargs)
        profiler.record(func.__qualname__, time.perf_counter() - start)
        return result
    return wrapper


class profile_block:
    def __init__(self, name: str):
        self.name = name
        self.start = None

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, *args):
        if profiler.enabled:
            profiler.record(self.name, time.perf_counter() - self.start)
