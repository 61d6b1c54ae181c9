#!/usr/bin/env python3
"""Benchmark script for fastlinks link generation.

Outputs results in JSON format compatible with github-action-benchmark.
"""

import argparse
import json
import time
from pathlib import Path
from typing import Annotated

ITERATIONS = 10000


def benchmark_import_time() -> float:
    """Measure import time of fastlinks package."""
    start = time.perf_counter()
    import fastlinks  # noqa: F401

    return time.perf_counter() - start


def _controller() -> type:
    from fastlinks import PathVariable, RequestParam, request_mapping

    @request_mapping("/customers/{customer}")
    class OrderController:
        @request_mapping("/orders/{order}")
        def show(
            self,
            order: Annotated[int, PathVariable()],
            page: Annotated[int | None, RequestParam()] = None,
            tags: Annotated[list[str] | None, RequestParam()] = None,
        ) -> None: ...

    return OrderController


def benchmark_cold_links() -> float:
    """Measure link generation with a fresh template cache every time."""
    from fastlinks import FastLinks, method_on

    controller = _controller()
    start = time.perf_counter()
    for n in range(ITERATIONS):
        links = FastLinks.from_settings()
        links.link_to(method_on(controller, 7).show(n, page=2, tags=["a", "b"]))
    return time.perf_counter() - start


def benchmark_cached_links() -> float:
    """Measure link generation served from the template cache."""
    from fastlinks import FastLinks, method_on

    controller = _controller()
    links = FastLinks.from_settings()
    start = time.perf_counter()
    for n in range(ITERATIONS):
        links.link_to(method_on(controller, 7).show(n, page=2, tags=["a", "b"]))
    return time.perf_counter() - start


def main() -> None:
    """Run benchmarks and output results."""
    parser = argparse.ArgumentParser(description="Run fastlinks benchmarks")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("benchmark-results.json"),
        help="Output file for benchmark results",
    )
    args = parser.parse_args()

    results = []

    # Import time
    import_time = benchmark_import_time()
    results.append(
        {
            "name": "Import Time",
            "unit": "seconds",
            "value": import_time,
        }
    )

    results.append(
        {
            "name": "Cold Links (10k iterations)",
            "unit": "seconds",
            "value": benchmark_cold_links(),
        }
    )
    results.append(
        {
            "name": "Cached Links (10k iterations)",
            "unit": "seconds",
            "value": benchmark_cached_links(),
        }
    )

    # Write results
    args.output.write_text(json.dumps(results, indent=2))
    print(f"Benchmark results written to {args.output}")
    for r in results:
        print(f"  {r['name']}: {r['value']:.4f} {r['unit']}")


if __name__ == "__main__":
    main()
