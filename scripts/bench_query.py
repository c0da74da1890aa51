#!/usr/bin/env python3
"""Benchmark access permission grant and query latency.

Usage:
  export API_URL=http://localhost:8000 KEYCLOAK_URL=http://localhost:8080
  export KEYCLOAK_REALM=iot KEYCLOAK_CLIENT_ID=accessperm-api KEYCLOAK_CLIENT_SECRET=...
  export BENCH_USER=admin BENCH_PASSWORD=admin
  python scripts/bench_query.py --scope-id <uuid> --access-info-id <uuid> [--num-queries 200]

The bench user must hold access_info write/read/delete in the scope
(see scripts/seed_admin.py).
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx

DOMAINS = ["device", "user", "role", "group", "credential"]


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


def _percentile(latencies: list[float], q: float) -> float:
    ordered = sorted(latencies)
    return ordered[max(int(len(ordered) * q) - 1, 0)] * 1000


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark access permission queries")
    parser.add_argument("--scope-id", required=True, help="Scope to grant and query in")
    parser.add_argument("--access-info-id", required=True, help="Access info receiving grants")
    parser.add_argument("--num-queries", type=int, default=100, help="Number of query requests")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    token = get_token(
        os.environ.get("KEYCLOAK_URL", "http://localhost:8080"),
        os.environ.get("KEYCLOAK_REALM", "iot"),
        os.environ.get("KEYCLOAK_CLIENT_ID", "accessperm-api"),
        os.environ.get("KEYCLOAK_CLIENT_SECRET", ""),
        os.environ.get("BENCH_USER", "admin"),
        os.environ.get("BENCH_PASSWORD", "admin"),
    )
    headers = {"Authorization": f"Bearer {token}"}
    base = f"{api_url}/v1/scopes/{args.scope_id}"

    created: list[str] = []
    latencies: list[float] = []
    errors = 0
    with httpx.Client(timeout=30.0, headers=headers) as client:
        for domain in DOMAINS:
            r = client.post(
                f"{base}/access-permissions",
                json={
                    "access_info_id": args.access_info_id,
                    "permission": {"domain": domain, "action": "read", "target_scope_id": args.scope_id},
                },
            )
            if r.status_code == 201:
                created.append(r.json()["id"])

        print(f"Querying {args.num_queries} times...")
        start_total = time.perf_counter()
        for _ in range(args.num_queries):
            t0 = time.perf_counter()
            r = client.get(f"{base}/access-infos/{args.access_info_id}/permissions")
            if r.status_code == 200:
                latencies.append(time.perf_counter() - t0)
            else:
                errors += 1
        total_elapsed = time.perf_counter() - start_total

        for access_permission_id in created:
            client.delete(f"{base}/access-permissions/{access_permission_id}")

    n = len(latencies)
    if n == 0:
        print("No successful queries.")
        return 1

    print(
        f"Query benchmark (n={n}, errors={errors})\n"
        f"  Throughput: {n / total_elapsed:.2f} req/s\n"
        f"  Latency: p50={statistics.median(latencies) * 1000:.1f} ms, "
        f"p95={_percentile(latencies, 0.95):.1f} ms, p99={_percentile(latencies, 0.99):.1f} ms"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
