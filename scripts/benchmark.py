#!/usr/bin/env python3
"""Compare latency of the synchronous and delayed asynchronous lookups."""

import argparse
import statistics
import time

import httpx

ENDPOINTS = {
    "list": ("/", "/async-books"),
    "isbn": ("/isbn/{isbn}", "/async-isbn/{isbn}"),
    "author": ("/author/{author}", "/async-author/{author}"),
    "title": ("/title/{title}", "/async-title/{title}"),
    "review": ("/review/{isbn}", "/async-review/{isbn}"),
}


def benchmark_endpoint(client: httpx.Client, path: str, num_requests: int) -> dict:
    """Hit one endpoint repeatedly and return latency statistics."""
    latencies = []
    errors = 0

    for _ in range(num_requests):
        try:
            start = time.perf_counter()
            response = client.get(path)
            elapsed = (time.perf_counter() - start) * 1000  # ms

            if response.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
        except httpx.HTTPError as e:
            errors += 1
            print(f"  {path}: EXCEPTION ({e})")

    if not latencies:
        return {"path": path, "error": "All requests failed"}

    return {
        "path": path,
        "successful_requests": len(latencies),
        "failed_requests": errors,
        "mean": statistics.mean(latencies),
        "median": statistics.median(latencies),
        "p95": sorted(latencies)[int(len(latencies) * 0.95)],
    }


def print_result(result: dict) -> None:
    if "error" in result:
        print(f"  {result['path']:<32} ERROR: {result['error']}")
        return
    print(
        f"  {result['path']:<32} "
        f"mean {result['mean']:8.2f}ms  "
        f"median {result['median']:8.2f}ms  "
        f"p95 {result['p95']:8.2f}ms  "
        f"failed {result['failed_requests']}"
    )


def main():
    parser = argparse.ArgumentParser(description="Benchmark book catalog service")
    parser.add_argument("--url", default="http://localhost:8000", help="Base URL of the service")
    parser.add_argument("--isbn", default="1", help="ISBN to look up")
    parser.add_argument("--author", default="Jane Austen", help="Author to search")
    parser.add_argument("--title", default="Pride and Prejudice", help="Title to search")
    parser.add_argument("--requests", type=int, default=10, help="Requests per endpoint")
    parser.add_argument(
        "--endpoint",
        choices=sorted(ENDPOINTS),
        action="append",
        help="Endpoint to benchmark (repeatable, default all)",
    )

    args = parser.parse_args()
    params = {"isbn": args.isbn, "author": args.author, "title": args.title}

    print("=" * 50)
    print("Book Catalog Benchmark")
    print("=" * 50)
    print()

    with httpx.Client(base_url=args.url, timeout=30.0) as client:
        for name in args.endpoint or sorted(ENDPOINTS):
            print(f"{name}:")
            for template in ENDPOINTS[name]:
                print_result(benchmark_endpoint(client, template.format(**params), args.requests))
            print()


if __name__ == "__main__":
    main()
