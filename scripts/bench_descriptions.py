#!/usr/bin/env python3
"""Benchmark description CRUD: throughput (ops/s) and latency per operation.

Usage:
  Start the API with an admin, then run against it:
    export ADMIN_ADDRESS=0x1111111111111111111111111111111111111111
    uv run uvicorn --factory descregistry.main:create_descregistry_app
    export API_URL=http://localhost:8000 BENCH_CALLER=$ADMIN_ADDRESS
    uv run python scripts/bench_descriptions.py [--num-accounts 100]
"""
from __future__ import annotations

import argparse
import os
import secrets
import statistics
import sys
import time

import httpx


def _percentiles(latencies: list[float]) -> tuple[float, float, float]:
    n = len(latencies)
    ordered = sorted(latencies)
    p50 = statistics.median(ordered) * 1000
    p95 = ordered[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    p99 = ordered[int(n * 0.99) - 1] * 1000 if n >= 100 else p95
    return p50, p95, p99


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark description CRUD")
    parser.add_argument("--num-accounts", type=int, default=50, help="Accounts to cycle through add/update/get/remove")
    parser.add_argument("--text-size", type=int, default=64, help="Description length in characters")
    parser.add_argument("--output", type=str, default="/results/bench_descriptions.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    caller = os.environ.get("BENCH_CALLER", "")
    if not caller:
        print("BENCH_CALLER must be set to an account holding ADMIN")
        return 2
    headers = {"X-Caller-Address": caller, "Content-Type": "application/json"}

    accounts = ["0x" + secrets.token_hex(20) for _ in range(args.num_accounts)]
    text = "d" * args.text_size
    latencies: dict[str, list[float]] = {"add": [], "update": [], "get": [], "remove": []}
    errors = 0

    print(f"Cycling {len(accounts)} accounts through add/update/get/remove...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0, headers=headers) as client:
        for i, account in enumerate(accounts):
            steps = [
                ("add", lambda: client.post(f"{api_url}/v1/descriptions", json={"account": account, "text": f"{text} {i}"})),
                ("update", lambda: client.put(f"{api_url}/v1/descriptions/{account}", json={"text": f"{text} {i} v2"})),
                ("get", lambda: client.get(f"{api_url}/v1/descriptions/{account}")),
                ("remove", lambda: client.delete(f"{api_url}/v1/descriptions/{account}")),
            ]
            for name, call in steps:
                t0 = time.perf_counter()
                r = call()
                elapsed = time.perf_counter() - t0
                if r.status_code in (200, 201, 204):
                    latencies[name].append(elapsed)
                else:
                    errors += 1
    total_elapsed = time.perf_counter() - start_total

    total_ops = sum(len(v) for v in latencies.values())
    if total_ops == 0:
        print("No successful operations.")
        return 1

    lines = [f"Description CRUD benchmark (ops={total_ops}, errors={errors})"]
    lines.append(f"  Throughput: {total_ops / total_elapsed:.2f} ops/s")
    for name, values in latencies.items():
        if not values:
            continue
        p50, p95, p99 = _percentiles(values)
        lines.append(f"  {name:<7} p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms")
    lines.append(f"  Total time: {total_elapsed:.2f} s")
    summary = "\n".join(lines) + "\n"
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
