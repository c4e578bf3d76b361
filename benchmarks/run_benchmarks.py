#!/usr/bin/env python3
"""Benchmark suite for pyskiplist comparing against a plain dict."""

import argparse
import json
import os
import time
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pyskiplist import SkipList, bytes_comparator


class Metrics:
    def __init__(self):
        self.set_latencies: List[float] = []
        self.get_latencies: List[float] = []
        self.delete_latencies: List[float] = []

    def to_dict(self) -> Dict:
        out = {}
        for name, lat in (
            ("set_latencies", self.set_latencies),
            ("get_latencies", self.get_latencies),
            ("delete_latencies", self.delete_latencies),
        ):
            if not lat:
                continue
            out[name] = {
                "p50": float(np.percentile(lat, 50)),
                "p95": float(np.percentile(lat, 95)),
                "p99": float(np.percentile(lat, 99)),
                "mean": float(np.mean(lat)),
            }
        return out

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()
        fig.add_trace(go.Box(y=self.set_latencies, name="Set Latency", boxpoints="outliers"))
        fig.add_trace(go.Box(y=self.get_latencies, name="Get Latency", boxpoints="outliers"))
        if self.delete_latencies:
            fig.add_trace(go.Box(y=self.delete_latencies, name="Delete Latency", boxpoints="outliers"))
        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )
        fig.write_html(output_path)


class BenchmarkSuite:
    def __init__(self, num_entries: int, value_size: int, seed: int):
        self.num_entries = num_entries
        self.seed = seed
        self._keys = [str(i).encode() for i in range(num_entries)]
        self._values = [os.urandom(value_size) for _ in range(num_entries)]

    def run_skiplist_benchmark(self) -> Metrics:
        lst = SkipList(bytes_comparator, seed=self.seed)
        metrics = Metrics()

        for i in tqdm(range(self.num_entries), desc="SkipList Set"):
            start = time.perf_counter()
            lst.set(self._keys[i], self._values[i])
            metrics.set_latencies.append((time.perf_counter() - start) * 1e6)

        for i in tqdm(range(self.num_entries), desc="SkipList Get"):
            start = time.perf_counter()
            lst.get(self._keys[i])
            metrics.get_latencies.append((time.perf_counter() - start) * 1e6)

        for i in tqdm(range(self.num_entries), desc="SkipList Delete"):
            start = time.perf_counter()
            lst.delete(self._keys[i])
            metrics.delete_latencies.append((time.perf_counter() - start) * 1e6)

        return metrics

    def run_dict_benchmark(self) -> Metrics:
        d: Dict[bytes, bytes] = {}
        metrics = Metrics()

        for i in tqdm(range(self.num_entries), desc="dict Set"):
            start = time.perf_counter()
            d[self._keys[i]] = self._values[i]
            metrics.set_latencies.append((time.perf_counter() - start) * 1e6)

        for i in tqdm(range(self.num_entries), desc="dict Get"):
            start = time.perf_counter()
            d.get(self._keys[i])
            metrics.get_latencies.append((time.perf_counter() - start) * 1e6)

        return metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of entries")
    parser.add_argument("--value-size", type=int, default=64, help="Size of values in bytes")
    parser.add_argument("--seed", type=int, default=0, help="Seed for level promotion")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.value_size, args.seed)
    skiplist_metrics = suite.run_skiplist_benchmark()
    dict_metrics = suite.run_dict_benchmark()

    skiplist_metrics.plot_latencies(
        "SkipList Latency Distribution",
        args.output / "skiplist_latencies.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump({
            "skiplist": skiplist_metrics.to_dict(),
            "dict": dict_metrics.to_dict(),
        }, f, indent=2)


if __name__ == "__main__":
    main()
