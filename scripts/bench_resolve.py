#!/usr/bin/env python3
"""Benchmark permission resolution: latency (p50, p95, p99) and QPS.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080 \\
         KEYCLOAK_REALM=agency KEYCLOAK_CLIENT_ID=agency-rbac KEYCLOAK_CLIENT_SECRET=... \\
         BENCH_USER=... BENCH_PASSWORD=...
  uv run python scripts/bench_resolve.py --agency-id <uuid> [--num-requests 500]

The benchmark user must be a member of the agency. Pass --member-id to
benchmark /members/{id}/permissions instead of /my-permissions.
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def get_token(
    keycloak_url: str,
    realm: str,
    client_id: str,
    client_secret: str,
    username: str,
    password: str,
) -> str:
    url = f"{keycloak_url.rstrip('/')}/realms/{realm}/protocol/openid-connect/token"
    r = httpx.post(
        url,
        data={
            "grant_type": "password",
            "client_id": client_id,
            "client_secret": client_secret,
            "username": username,
            "password": password,
        },
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=30.0,
    )
    r.raise_for_status()
    return r.json()["access_token"]


def percentile(sorted_values: list[float], fraction: float) -> float:
    index = max(int(len(sorted_values) * fraction) - 1, 0)
    return sorted_values[index]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark permission resolution")
    parser.add_argument("--agency-id", required=True, help="Agency the benchmark user belongs to")
    parser.add_argument("--member-id", default=None, help="Resolve this member instead of the caller")
    parser.add_argument("--num-requests", type=int, default=200, help="Number of requests")
    parser.add_argument("--output", type=str, default="/results/bench_resolve.txt", help="Output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    keycloak_url = os.environ.get("KEYCLOAK_URL", "http://localhost:8080")
    realm = os.environ.get("KEYCLOAK_REALM", "agency")
    client_id = os.environ.get("KEYCLOAK_CLIENT_ID", "agency-rbac")
    client_secret = os.environ.get("KEYCLOAK_CLIENT_SECRET", "")
    user = os.environ.get("BENCH_USER", "testuser")
    password = os.environ.get("BENCH_PASSWORD", "testpass")

    print("Getting token...")
    token = get_token(keycloak_url, realm, client_id, client_secret, user, password)
    headers = {"Authorization": f"Bearer {token}"}

    if args.member_id:
        path = f"/v1/agencies/{args.agency_id}/members/{args.member_id}/permissions"
    else:
        path = f"/v1/agencies/{args.agency_id}/my-permissions"

    latencies: list[float] = []
    errors = 0
    print(f"Running {args.num_requests} requests against {path}...")
    start_total = time.perf_counter()
    with httpx.Client(timeout=30.0) as client:
        for _ in range(args.num_requests):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}{path}", headers=headers)
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1
    total_elapsed = time.perf_counter() - start_total

    n = len(latencies)
    if n == 0:
        print("No successful requests.")
        return 1

    ordered = sorted(latencies)
    qps = n / total_elapsed
    p50 = statistics.median(latencies) * 1000
    p95 = percentile(ordered, 0.95) * 1000 if n >= 20 else p50
    p99 = percentile(ordered, 0.99) * 1000 if n >= 100 else p95

    summary = (
        f"Resolution benchmark ({path}, requests={n}, errors={errors})\n"
        f"  QPS: {qps:.2f}\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms, p99={p99:.1f} ms\n"
        f"  Total time: {total_elapsed:.2f} s\n"
    )
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError as e:
        print(f"Could not write {args.output}: {e}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
