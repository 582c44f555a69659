"""
RGBA Color - Hex Parser Benchmark

Times the registered hex parser strategies against each other on the
same samples and checks that they agree on every result.
"""

import logging
import time
from dataclasses import dataclass
from typing import Dict, Iterable, Optional

import numpy as np

from rgbacolor.constants import BENCHMARK_DEFAULT_REPEAT
from rgbacolor.errors import ErrorReason, InvalidArgumentError
from rgbacolor.services.hex_parsers import AVAILABLE_PARSERS, get_parser
from rgbacolor.utils.logger import loggerRaise

logger = logging.getLogger('ParserBenchmark')


@dataclass(frozen=True)
class BenchmarkResult:
    """Timing summary for one strategy"""
    parser: str
    calls: int
    total_ms: float
    mean_us: float
    median_us: float


def compare_parsers(samples: Iterable[str], repeat: int = BENCHMARK_DEFAULT_REPEAT,
                    parsers: Optional[Iterable[str]] = None) -> Dict[str, BenchmarkResult]:
    """Time each parser strategy on the given hex samples.

    Args:
        samples: Hex strings every strategy must accept
        repeat: Parses per sample per strategy
        parsers: Strategy names (defaults to all registered)

    Returns:
        Dict of strategy name -> BenchmarkResult

    Raises:
        InvalidArgumentError: If a sample is malformed, a name is unknown,
            there are no samples or repeat is not a positive integer
        RuntimeError: If strategies disagree on a sample
    """
    samples = list(samples)
    names = list(parsers) if parsers is not None else list(AVAILABLE_PARSERS)
    if not samples:
        loggerRaise(InvalidArgumentError(
            "At least one sample is required",
            ErrorReason.WRONG_LENGTH, 'samples', samples))
    if isinstance(repeat, bool) or not isinstance(repeat, int):
        loggerRaise(InvalidArgumentError(
            "repeat must be an integer",
            ErrorReason.WRONG_TYPE, 'repeat', repeat))
    if repeat < 1:
        loggerRaise(InvalidArgumentError(
            "repeat must be at least 1",
            ErrorReason.OUT_OF_RANGE, 'repeat', repeat))

    strategies = {name: get_parser(name) for name in names}

    # Agreement check runs once, outside the timed loop
    for sample in samples:
        decoded = {name: strategy.parse(sample) for name, strategy in strategies.items()}
        if len(set(decoded.values())) > 1:
            raise RuntimeError(f"Parsers disagree on '{sample}': {decoded}")

    results = {}
    for name, strategy in strategies.items():
        timings = np.empty(len(samples) * repeat, dtype=np.float64)
        idx = 0
        for sample in samples:
            for _ in range(repeat):
                start = time.perf_counter()
                strategy.parse(sample)
                timings[idx] = time.perf_counter() - start
                idx += 1

        result = BenchmarkResult(
            parser=name,
            calls=len(timings),
            total_ms=float(timings.sum() * 1e3),
            mean_us=float(timings.mean() * 1e6),
            median_us=float(np.median(timings) * 1e6),
        )
        logger.info(f"{name}: {result.calls} calls, {result.total_ms:.3f}ms total, "
                    f"{result.median_us:.2f}us median")
        results[name] = result

    return results
