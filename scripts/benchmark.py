#!/usr/bin/env python3
"""Benchmark script for typeselect performance testing.

Outputs results in JSON format compatible with github-action-benchmark.
"""

from __future__ import annotations

import argparse
import json
import time
from dataclasses import dataclass
from pathlib import Path


class Marker:
    """Ancestor shared by half of the synthetic universe."""


@dataclass(frozen=True)
class Tag:
    value: int


def make_universe(size: int) -> tuple:
    """Build synthetic descriptors spread over ten namespaces."""
    from typeselect.domain.model.type_descriptor import TypeDescriptor

    return tuple(
        TypeDescriptor(
            qualified_name=f"bench.ns{i % 10}.Type{i}",
            namespace=f"bench.ns{i % 10}",
            ancestors=(Marker, object) if i % 2 else (object,),
            is_generic_type_definition=i % 7 == 0,
            attributes=(Tag(i % 5),),
        )
        for i in range(size)
    )


def benchmark_import_time() -> float:
    """Measure import time of typeselect package."""
    start = time.perf_counter()
    import typeselect  # noqa: F401

    return time.perf_counter() - start


def benchmark_build(iterations: int) -> float:
    """Measure time to build a four-conjunct filter."""
    from typeselect.presentation.api.dsl import TypeSelector

    selector = TypeSelector(())
    start = time.perf_counter()
    for _ in range(iterations):
        (
            selector.select()
            .in_namespaces("bench.ns1", "bench.ns3")
            .inherited_from(Marker)
            .with_attribute(Tag, lambda t: t.value > 1)
            .which_are_not_generic()
            .build()
        )
    return time.perf_counter() - start


def benchmark_apply(size: int) -> float:
    """Measure evaluation of a four-conjunct filter over size candidates."""
    from typeselect.presentation.api.dsl import TypeSelector

    universe = make_universe(size)
    built = (
        TypeSelector(universe)
        .select()
        .in_namespaces("bench.ns1", "bench.ns3")
        .inherited_from(Marker)
        .with_attribute(Tag, lambda t: t.value > 1)
        .which_are_not_generic()
        .build()
    )
    start = time.perf_counter()
    built.apply(universe)
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run typeselect benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    parser.add_argument(
        "--size",
        type=int,
        default=100_000,
        help="Number of candidates for the apply benchmark",
    )
    args = parser.parse_args()

    results = [
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": benchmark_import_time(),
        },
        {
            "name": "Filter Build (10k iterations)",
            "unit": "seconds",
            "value": benchmark_build(10_000),
        },
        {
            "name": f"Filter Apply ({args.size} candidates)",
            "unit": "seconds",
            "value": benchmark_apply(args.size),
        },
    ]

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
