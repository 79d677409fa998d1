"""Drive a batch of Lambda samples from the command line.

Each worker thread owns one sampler; all of them share a single invoker, mirroring
how a load-testing host runs one sampler instance per thread.
"""

from __future__ import annotations

import argparse
import math
import statistics
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Sequence

from lambda_sampler.core.config import get_settings
from lambda_sampler.core.logging_config import get_logger
from lambda_sampler.core.types import SampleResult
from lambda_sampler.sampler.config_source import SamplerConfig, StaticConfigSource
from lambda_sampler.sampler.invocation_sampler import InvocationSampler
from lambda_sampler.sampler.invoker import LambdaInvoker, RemoteInvoker

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Invoke a Lambda function and report latencies.")
    parser.add_argument("--threads", type=int, default=1, help="Concurrent samplers")
    parser.add_argument("--iterations", type=int, default=1, help="Samples per thread")
    parser.add_argument("--function-name", help="Defaults to LAMBDA_FUNCTION_NAME")
    payload = parser.add_mutually_exclusive_group()
    payload.add_argument("--payload", help="Defaults to LAMBDA_PAYLOAD")
    payload.add_argument("--payload-file", type=Path, help="Read the payload from a file")
    parser.add_argument("--qualifier", help="Version or alias to invoke")
    parser.add_argument("--label", help="Sample label used in the report")
    return parser


def resolve_config(args: argparse.Namespace) -> SamplerConfig:
    settings = get_settings()
    if args.payload_file is not None:
        payload = args.payload_file.read_text(encoding="utf-8")
    elif args.payload is not None:
        payload = args.payload
    else:
        payload = settings.lambda_payload
    return SamplerConfig(
        function_name=(
            args.function_name if args.function_name is not None else settings.lambda_function_name
        ),
        payload=payload,
        qualifier=args.qualifier or settings.lambda_qualifier,
    )


def run_worker(
    invoker: RemoteInvoker, config: SamplerConfig, iterations: int, label: str | None = None
) -> list[SampleResult]:
    sampler = InvocationSampler(StaticConfigSource(config), invoker, name=label)
    return [sampler.sample() for _ in range(iterations)]


def run_batch(
    invoker: RemoteInvoker,
    config: SamplerConfig,
    *,
    threads: int,
    iterations: int,
    label: str | None = None,
) -> list[SampleResult]:
    with ThreadPoolExecutor(max_workers=threads, thread_name_prefix="sampler") as executor:
        futures = [
            executor.submit(run_worker, invoker, config, iterations, label) for _ in range(threads)
        ]
        results: list[SampleResult] = []
        for future in futures:
            results.extend(future.result())
    return results


def summarize(results: Sequence[SampleResult]) -> dict[str, Any]:
    """Count, failures and elapsed-time statistics in milliseconds."""

    elapsed = sorted(result.elapsed_ms for result in results)
    failures = sum(1 for result in results if not result.success)
    if not elapsed:
        return {"count": 0, "failures": 0}

    p95_index = max(0, math.ceil(0.95 * len(elapsed)) - 1)
    return {
        "count": len(elapsed),
        "failures": failures,
        "min_ms": round(elapsed[0], 3),
        "mean_ms": round(statistics.fmean(elapsed), 3),
        "p95_ms": round(elapsed[p95_index], 3),
        "max_ms": round(elapsed[-1], 3),
    }


def main(argv: Sequence[str] | None = None, invoker: RemoteInvoker | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.threads < 1 or args.iterations < 1:
        logger.error("invalid_arguments", threads=args.threads, iterations=args.iterations)
        return 2

    try:
        config = resolve_config(args)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("invalid_arguments", payload_file=str(args.payload_file), error=str(exc))
        return 2
    logger.info(
        "sample_batch_started",
        function_name=config.function_name,
        threads=args.threads,
        iterations=args.iterations,
    )
    results = run_batch(
        invoker or LambdaInvoker(),
        config,
        threads=args.threads,
        iterations=args.iterations,
        label=args.label,
    )
    summary = summarize(results)
    logger.info("sample_batch_completed", **summary)

    errors: dict[str, int] = {}
    for result in results:
        if not result.success:
            errors[result.response_message] = errors.get(result.response_message, 0) + 1
    for message, count in errors.items():
        logger.warning("sample_batch_error", count=count, message=message)

    return 1 if summary["failures"] else 0


if __name__ == "__main__":
    sys.exit(main())
