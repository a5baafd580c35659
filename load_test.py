"""
Load test for the complexity analyzer API.

Fires concurrent /analyze requests at a running server and reports the
timing of each one along with the returned bound.
"""

import asyncio
import os
import time
from typing import List, Tuple

import httpx


API_URL = os.getenv("ANALYZER_URL", "http://localhost:8080/api/v1/analyze")

# Samples covering each branch of the rule cascade
SAMPLE_CODES = [
    "x = 1\ny = x + 2",
    "for i in range(n): print(i)",
    "def bubble_sort(arr):\n    for i in range(len(arr)):\n        for j in range(len(arr)-i-1):\n            if arr[j] > arr[j+1]:\n                arr[j], arr[j+1] = arr[j+1], arr[j]",
    "def binary_search(arr, target):\n    left, right = 0, len(arr)-1\n    while left <= right:\n        mid = (left+right)//2\n        if arr[mid] == target:\n            return mid\n        elif arr[mid] < target:\n            left = mid+1\n        else:\n            right = mid-1\n    return -1",
    "def fib(n):\n    if n <= 1:\n        return n\n    return fib(n-1) + fib(n-2)",
    "for i in range(n):\n    for j in range(n):\n        total += i * j",
]


async def make_request(
    client: httpx.AsyncClient,
    code: str,
    request_num: int
) -> Tuple[int, float, dict]:
    """
    Make a single request to the API.

    Args:
        client: HTTP client
        code: Code to analyze
        request_num: Request number

    Returns:
        Tuple of (request_num, time_taken, response_data)
    """
    start = time.perf_counter()

    try:
        response = await client.post(API_URL, json={"code": code}, timeout=30.0)
        data = response.json()
    except (httpx.HTTPError, ValueError) as e:
        data = {"error": str(e)}

    return (request_num, time.perf_counter() - start, data)


async def run_load_test(num_requests: int = 50) -> List[float]:
    """
    Run concurrent requests and print per-request and summary timings.

    Args:
        num_requests: Number of concurrent requests to make

    Returns:
        Response times of the successful requests
    """
    print("=" * 80)
    print(f"LOAD TEST - {num_requests} concurrent requests -> {API_URL}")
    print("=" * 80)

    payloads = [SAMPLE_CODES[i % len(SAMPLE_CODES)] for i in range(num_requests)]
    overall_start = time.perf_counter()

    async with httpx.AsyncClient() as client:
        results = await asyncio.gather(*[
            make_request(client, code, i + 1)
            for i, code in enumerate(payloads)
        ])

    overall_elapsed = time.perf_counter() - overall_start

    print(f"{'Req #':<8} {'Time (s)':<12} {'Status':<10} {'Result'}")
    print("-" * 80)

    times = []
    for req_num, elapsed, data in sorted(results, key=lambda r: r[0]):
        if data.get("success"):
            result = data["result"]
            summary = (
                f"{result['timeComplexity']['bigO']} "
                f"(confidence {result['confidence']:.2f}, {', '.join(result['method'])})"
            )
            status = "OK"
            times.append(elapsed)
        else:
            summary = str(data.get("error") or data.get("message") or "Unknown")[:50]
            status = "FAILED"

        print(f"{req_num:<8} {elapsed:<12.3f} {status:<10} {summary}")

    print("=" * 80)
    print(f"Successful:            {len(times)}/{num_requests}")
    print(f"Total time:            {overall_elapsed:.3f}s")
    print(f"Requests per second:   {num_requests / overall_elapsed:.2f}")

    if times:
        ordered = sorted(times)
        print(f"Min / Avg / Max:       {ordered[0]:.3f}s / {sum(times) / len(times):.3f}s / {ordered[-1]:.3f}s")
        print(f"Median:                {ordered[len(ordered) // 2]:.3f}s")

    print("=" * 80)
    return times


if __name__ == "__main__":
    try:
        asyncio.run(run_load_test(int(os.getenv("LOAD_TEST_REQUESTS", "50"))))
    except KeyboardInterrupt:
        print("\nLoad test interrupted by user")
