"""Benchmarks for Huffman encoding and decoding.

This module times torchhuffman encoding, tree reconstruction and decoding on
synthetic text of increasing length and alphabet skew.
"""

from __future__ import annotations

import random
import string
import time
from typing import Any, Callable

import numpy as np
import torch

from torchhuffman import (
    code_statistics,
    decode,
    encode,
    tree_from_code,
)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Parameters
    ----------
    func : callable
        Function to benchmark.
    *args : Any
        Positional arguments to pass to func.
    warmup : int, optional
        Number of warmup iterations. Default is 3.
    iterations : int, optional
        Number of timed iterations. Default is 10.
    **kwargs : Any
        Keyword arguments to pass to func.

    Returns
    -------
    dict
        Dictionary with timing statistics:
        - 'mean': Mean time in seconds
        - 'std': Standard deviation in seconds
        - 'min': Minimum time in seconds
        - 'max': Maximum time in seconds
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_result(name: str, timing: dict[str, float]) -> None:
    """Print benchmark result."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  Time: {format_time(timing['mean'])} +/- {format_time(timing['std'])}"
    )


def generate_text(
    length: int,
    skew: float = 1.0,
    seed: int | None = None,
) -> str:
    """Generate text with Zipf-distributed letters.

    Parameters
    ----------
    length : int
        Number of characters.
    skew : float, optional
        Zipf exponent. Zero gives uniform letters. Default is 1.
    seed : int, optional
        Random seed for reproducibility.

    Returns
    -------
    str
        Generated text.
    """
    rng = random.Random(seed)
    alphabet = string.ascii_lowercase + " "
    weights = [1.0 / (rank + 1) ** skew for rank in range(len(alphabet))]
    return "".join(rng.choices(alphabet, weights=weights, k=length))


class BenchHuffman:
    """Benchmarks for Huffman coding functions."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def run_all(self, length: int = 100_000) -> None:
        """Benchmark every stage on a single input."""
        text = generate_text(length, seed=0)
        code, data = encode(text)

        print("=" * 60)
        print(f"Huffman coding, {length} characters")
        print("=" * 60)

        print_result("encode", self._bench(encode, text))
        print_result("tree_from_code", self._bench(tree_from_code, code))
        print_result("decode", self._bench(decode, code, data))

        symbols = torch.tensor([ord(character) for character in text])
        print_result("encode (tensor)", self._bench(encode, symbols))

    def run_scaling(self) -> None:
        """Report timing and compression against input length and skew."""
        print("=" * 60)
        print("Scaling")
        print("=" * 60)

        for skew in (0.0, 1.0, 2.0):
            for length in (1_000, 10_000, 100_000):
                text = generate_text(length, skew=skew, seed=0)
                statistics = code_statistics(text)
                timing = self._bench(encode, text)
                print(
                    f"  skew={skew:.1f} n={length:>7}: "
                    f"{format_time(timing['mean'])}, "
                    f"{statistics.expected_length.item():.3f} bits/symbol "
                    f"(entropy {statistics.entropy.item():.3f}), "
                    f"ratio {statistics.compression_ratio.item():.3f}"
                )


if __name__ == "__main__":
    bench = BenchHuffman(warmup=3, iterations=10)
    bench.run_all()
    print("\n")
    bench.run_scaling()
