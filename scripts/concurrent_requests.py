#!/usr/bin/env python3
"""
Send concurrent sample requests to a running yt-sampler instance.

This script checks:
- The service is reachable and reports its health
- N simultaneous /downloadUrl requests all complete
- Each successful response is a single audio/mpeg attachment

Usage:
    python scripts/concurrent_requests.py --url https://www.youtube.com/watch?v=... -n 5
"""

import argparse
import asyncio
import sys
import time

import aiohttp


DEFAULT_API_BASE_URL = "http://localhost:8080"


async def sample_request(
    session: aiohttp.ClientSession,
    api_base_url: str,
    payload: dict,
    request_id: int,
    timeout: float,
) -> dict:
    """Send a single /downloadUrl request."""
    start_time = time.time()

    try:
        async with session.post(
            f"{api_base_url}/downloadUrl",
            json=payload,
            timeout=aiohttp.ClientTimeout(total=timeout),
        ) as response:
            body = await response.read()
            elapsed = time.time() - start_time
            content_type = response.headers.get("Content-Type", "")

            error = None
            if response.status != 200:
                error = body.decode("utf-8", errors="replace")

            return {
                "request_id": request_id,
                "status": response.status,
                "elapsed": elapsed,
                "size": len(body),
                "disposition": response.headers.get("Content-Disposition", ""),
                "success": response.status == 200 and content_type.startswith("audio/mpeg"),
                "error": error,
            }
    except Exception as e:
        elapsed = time.time() - start_time
        return {
            "request_id": request_id,
            "status": 0,
            "elapsed": elapsed,
            "size": 0,
            "disposition": "",
            "success": False,
            "error": str(e),
        }


async def check_health(api_base_url: str) -> bool:
    async with aiohttp.ClientSession() as session:
        async with session.get(
            f"{api_base_url}/health", timeout=aiohttp.ClientTimeout(total=5)
        ) as response:
            data = await response.json()
            print(f"Health: {data.get('status')} (HTTP {response.status})")
            for name in ("downloader", "audio_service"):
                print(f"  {name}: {data.get(name)}")
            return response.status == 200 and data.get("status") == "healthy"


async def run_concurrent_test(args: argparse.Namespace, num_requests: int) -> bool:
    """Run num_requests simultaneous sample requests."""
    print(f"\n{'='*60}")
    print(f"Testing {num_requests} concurrent sample requests")
    print(f"{'='*60}\n")

    payload = {
        "url": args.url,
        "spliceDuration": args.splice_duration,
        "spliceCount": args.splice_count,
        "reverse": args.reverse,
    }

    async with aiohttp.ClientSession() as session:
        start_time = time.time()
        tasks = [
            sample_request(session, args.api, payload, i + 1, args.timeout)
            for i in range(num_requests)
        ]
        results = await asyncio.gather(*tasks)
        total_time = time.time() - start_time

    successful = sum(1 for r in results if r["success"])
    failed = num_requests - successful

    for r in results:
        status = "✓" if r["success"] else "✗"
        print(
            f"  Request {r['request_id']}: {status} HTTP {r['status']} "
            f"{r['elapsed']:.2f}s, {r['size']} bytes {r['disposition']}"
        )
        if r["error"]:
            print(f"    Error: {r['error']}")

    filenames = {r["disposition"] for r in results if r["success"]}

    print(f"\n{'='*60}")
    print("Summary:")
    print(f"{'='*60}")
    print(f"  Total requests: {num_requests}")
    print(f"  Successful: {successful}")
    print(f"  Failed: {failed}")
    print(f"  Distinct filenames: {len(filenames)}")
    print(f"  Total time: {total_time:.2f}s")
    print(f"  Max time: {max(r['elapsed'] for r in results):.2f}s")

    if failed > 0:
        print(f"\n❌ FAIL: {failed} requests failed")
        return False

    print(f"\n✓ All {num_requests} concurrent requests completed successfully!")
    return True


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Concurrent /downloadUrl smoke test")
    parser.add_argument("--api", default=DEFAULT_API_BASE_URL, help="yt-sampler base URL")
    parser.add_argument("--url", required=True, help="Media URL to sample")
    parser.add_argument("--splice-duration", type=float, default=2.0)
    parser.add_argument("--splice-count", type=int, default=3)
    parser.add_argument("--reverse", action="store_true")
    parser.add_argument("-n", "--requests", type=int, nargs="+", default=[3, 5])
    parser.add_argument("--timeout", type=float, default=600.0)
    return parser.parse_args()


async def main():
    args = parse_args()

    try:
        if not await check_health(args.api):
            print("WARNING: service is degraded, requests will likely fail")
    except Exception as e:
        print(f"ERROR: Cannot connect to API at {args.api}: {e}")
        sys.exit(1)

    results = [await run_concurrent_test(args, n) for n in args.requests]

    passed = sum(results)
    total = len(results)
    print(f"\nRuns passed: {passed}/{total}")
    sys.exit(0 if passed == total else 1)


if __name__ == "__main__":
    asyncio.run(main())
