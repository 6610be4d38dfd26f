"""CLI entry point for the agentic test harness."""

import argparse
import asyncio
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from agentic_harness.config import HarnessConfig
from agentic_harness.controller import RunController
from agentic_harness.display import ConsoleRenderer
from agentic_harness.registry import TestRegistry
from agentic_harness.sample import sample_registry


async def run(config: HarnessConfig, registry: TestRegistry, stream: TextIO) -> int:
    """Run the registry for the configured number of cycles and return exit code."""
    log = logging.getLogger("agentic_harness")

    controller = RunController(registry=registry)
    controller.subscribe(ConsoleRenderer(stream=stream, show_logs=config.show_logs))

    for cycle in range(1, config.runs + 1):
        if cycle > 1:
            controller.reset()
        log.info("Run cycle %d of %d", cycle, config.runs)
        await controller.run()

    has_failures = any(
        result.status == "failed" for result in controller.state.results
    )
    return 1 if has_failures else 0


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Run the built-in sanity checks and show live progress"
    )
    parser.add_argument(
        "--config",
        default="{}",
        help="JSON configuration for the harness",
    )

    args = parser.parse_args()

    try:
        config = HarnessConfig.model_validate_json(args.config)
    except ValidationError as e:
        parser.error(f"invalid --config: {e}")

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    exit_code = asyncio.run(run(config, sample_registry(), sys.stdout))
    sys.exit(exit_code)


if __name__ == "__main__":  # pragma: no cover
    main()
