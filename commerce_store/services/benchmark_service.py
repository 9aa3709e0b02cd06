"""
Benchmark Service - container timing experiments

Compares bulk insert, membership probes and iteration across Python's
built-in containers. Works on its own random integers and never touches a
DataStore.

Methodology:
1 build a data set of N random integers (seeded if requested)
2 run warm-up rounds over every container
3 time add / contains / iterate with time.perf_counter_ns()
4 report results fastest first
"""
import logging
import random
import time
from bisect import bisect_left, insort
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Dict, List, Optional, Set

logger = logging.getLogger(__name__)

CONCLUSIONS = [
    "dict/set are usually fastest for membership tests (O(1) average).",
    "A bisect-sorted list keeps items ordered; lookups are O(log N) but inserts shift memory (O(N)).",
    "list iterates fastest, but `in` on a list is a linear scan (O(N) per probe).",
    "deque matches list for appends and iteration, and is just as slow for `in`.",
]


@dataclass
class BenchmarkResult:
    """Timing of one experiment"""
    name: str
    nanos: int

    @property
    def millis(self) -> float:
        return self.nanos / 1_000_000


def time_nanos(fn: Callable[[], Any]) -> int:
    """Wall time of a single call, in nanoseconds"""
    t0 = time.perf_counter_ns()
    fn()
    return time.perf_counter_ns() - t0


class ContainerBenchmark:
    """
    Times list, deque, set, bisect-sorted list and dict operations

    Args:
        size: Number of elements inserted (N)
        probes: Number of membership lookups (M)
        warmup_rounds: Untimed rounds before measuring
        seed: Random seed for reproducible data sets
    """

    def __init__(self, size: int, probes: int, warmup_rounds: int = 2, seed: Optional[int] = None):
        if size <= 0 or probes <= 0:
            raise ValueError(f"size and probes must be > 0 (got size={size}, probes={probes})")
        if warmup_rounds < 0:
            raise ValueError(f"warmup_rounds must be >= 0 (got {warmup_rounds})")

        self.size = size
        self.probes = probes
        self.warmup_rounds = warmup_rounds
        self._rnd = random.Random(seed)

        self.array_list: List[int] = []
        self.linked: Deque[int] = deque()
        self.hash_set: Set[int] = set()
        self.sorted_list: List[int] = []
        self.hash_map: Dict[int, int] = {}

    def _fill_all(self, data: List[int]) -> None:
        self.array_list.clear()
        self.linked.clear()
        self.hash_set.clear()
        self.sorted_list.clear()
        self.hash_map.clear()
        for x in data:
            self.array_list.append(x)
            self.linked.append(x)
            self.hash_set.add(x)
            insort(self.sorted_list, x)
            self.hash_map[x] = x

    def _sorted_contains(self, value: int) -> bool:
        pos = bisect_left(self.sorted_list, value)
        return pos < len(self.sorted_list) and self.sorted_list[pos] == value

    def run(self) -> List[BenchmarkResult]:
        """
        Run every experiment

        Returns:
            Results sorted fastest first
        """
        data = [self._rnd.randrange(self.size * 10) for _ in range(self.size)]

        logger.info(f"Benchmark: N={self.size}, M={self.probes}, warm-up rounds={self.warmup_rounds}")
        for _ in range(self.warmup_rounds):
            self._fill_all(data)
            probe = data[self.size // 2]
            _ = probe in self.array_list, probe in self.linked, probe in self.hash_set
            _ = self._sorted_contains(probe), probe in self.hash_map
            _ = sum(self.array_list) + sum(self.linked) + sum(self.hash_set) + sum(self.sorted_list)

        results: List[BenchmarkResult] = []

        def fill(container_clear: Callable[[], None], add: Callable[[int], Any]) -> Callable[[], None]:
            def _run() -> None:
                container_clear()
                for x in data:
                    add(x)
            return _run

        results.append(BenchmarkResult("list.append(N)", time_nanos(
            fill(self.array_list.clear, self.array_list.append))))
        results.append(BenchmarkResult("deque.append(N)", time_nanos(
            fill(self.linked.clear, self.linked.append))))
        results.append(BenchmarkResult("set.add(N)", time_nanos(
            fill(self.hash_set.clear, self.hash_set.add))))
        results.append(BenchmarkResult("sorted_list.insort(N)", time_nanos(
            fill(self.sorted_list.clear, lambda x: insort(self.sorted_list, x)))))
        results.append(BenchmarkResult("dict.setitem(N)", time_nanos(
            fill(self.hash_map.clear, lambda x: self.hash_map.__setitem__(x, x)))))

        probe_keys = [data[self._rnd.randrange(self.size)] for _ in range(self.probes)]

        def count_found(contains: Callable[[int], bool]) -> Callable[[], int]:
            return lambda: sum(1 for k in probe_keys if contains(k))

        results.append(BenchmarkResult("list.contains(M)", time_nanos(
            count_found(self.array_list.__contains__))))
        results.append(BenchmarkResult("deque.contains(M)", time_nanos(
            count_found(self.linked.__contains__))))
        results.append(BenchmarkResult("set.contains(M)", time_nanos(
            count_found(self.hash_set.__contains__))))
        results.append(BenchmarkResult("sorted_list.bisect(M)", time_nanos(
            count_found(self._sorted_contains))))
        results.append(BenchmarkResult("dict.contains(M)", time_nanos(
            count_found(self.hash_map.__contains__))))

        results.append(BenchmarkResult("list.iterate(sum)", time_nanos(lambda: sum(self.array_list))))
        results.append(BenchmarkResult("deque.iterate(sum)", time_nanos(lambda: sum(self.linked))))
        results.append(BenchmarkResult("set.iterate(sum)", time_nanos(lambda: sum(self.hash_set))))
        results.append(BenchmarkResult("sorted_list.iterate(sum)", time_nanos(lambda: sum(self.sorted_list))))

        results.sort(key=lambda r: r.nanos)
        logger.info(f"Benchmark finished: {len(results)} experiments")
        return results

    @staticmethod
    def format_report(results: List[BenchmarkResult]) -> str:
        """Human-readable report (smaller is better) with typical conclusions"""
        lines = ["Results (smaller is better):"]
        for result in results:
            lines.append(f" - {result.name:<26} : {result.millis:.3f} ms")

        lines.append("")
        lines.append("Typical conclusions (may vary by machine):")
        lines.extend(f"- {conclusion}" for conclusion in CONCLUSIONS)
        return "\n".join(lines)
