"""Protean Engine runner for the BlueSpring domains.

Starts Engine workers that process events asynchronously. In production the
Notifications engine consumes the Ordering streams, which is what keeps email
sending off the request path.

Usage:
    python src/server.py                        # Run all domain engines
    python src/server.py --domain notifications # Run only the notifications engine
"""

import argparse
import asyncio

from protean.server.engine import Engine

from domains import DOMAIN_NAMES, get_domain
from shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


async def run(domain_names):
    engines = []
    for name in domain_names:
        domain = get_domain(name)
        engines.append(Engine(domain))
        logger.info("engine_starting", domain=name)

    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="BlueSpring Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    configure_logging(file_prefix="bluespring_engine")
    domain_names = [args.domain] if args.domain else list(DOMAIN_NAMES)

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
