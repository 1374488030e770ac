#!/usr/bin/env python3
"""
Recommendation Pipeline Test Script

Calls the recommendation service directly (no HTTP server) against the real
AI gateway, so prompts and retry behavior can be checked locally.

Usage:
    python scripts/test_recommendations.py builds --budget 1500 --use-case Gaming
    python scripts/test_recommendations.py builds -b 2500 -u "Video Editing" -r "quiet, no RGB"
    python scripts/test_recommendations.py peripherals -b 400 -u Gaming \\
        --cpu "AMD Ryzen 7 7800X3D" --gpu "NVIDIA RTX 4070 Super"
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from decimal import Decimal

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv

load_dotenv()

from pcbuilder.schemas.recommendations import (
    BuildGenerationRequest,
    BuildSnapshot,
    PeripheralRequest,
)
from pcbuilder.services.completion_gateway import ConfigurationError, get_completion_gateway
from pcbuilder.services.recommendation_service import (
    RecommendationOutcome,
    generate_pc_builds,
    recommend_peripherals,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def print_outcome(outcome: RecommendationOutcome) -> None:
    """Pretty print the outcome. The completion is shown as JSON when it parses."""
    print("\n" + "=" * 60)
    print(f"STATUS: {outcome.status_code}")
    print("=" * 60)

    if not outcome.ok:
        print(f"\nError: {outcome.error}\n")
        return

    try:
        print(json.dumps(json.loads(outcome.content), indent=2))
    except json.JSONDecodeError:
        print("\nCompletion is not valid JSON, raw text follows:\n")
        print(outcome.content)


async def run_builds(budget: Decimal, use_case: str, requirements: str | None) -> RecommendationOutcome:
    print(f"\nBudget:       ${budget}")
    print(f"Use case:     {use_case}")
    if requirements:
        print(f"Requirements: {requirements}")
    print("\nCalling AI gateway for three build tiers...")

    request = BuildGenerationRequest(
        budget=budget, use_case=use_case, custom_requirements=requirements
    )
    return await generate_pc_builds(get_completion_gateway(), request)


async def run_peripherals(
    budget: Decimal, use_case: str, cpu: str, gpu: str
) -> RecommendationOutcome:
    print(f"\nBudget remaining: ${budget}")
    print(f"Use case:         {use_case}")
    print(f"CPU / GPU:        {cpu} / {gpu}")
    print("\nCalling AI gateway for peripherals...")

    request = PeripheralRequest(
        budget=budget,
        use_case=use_case,
        build=BuildSnapshot(components={"cpu": {"model": cpu}, "gpu": {"model": gpu}}),
    )
    return await recommend_peripherals(get_completion_gateway(), request)


def main():
    parser = argparse.ArgumentParser(
        description="Try the AI recommendation pipeline locally",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    builds = subparsers.add_parser("builds", help="Generate Good/Better/Best builds")
    builds.add_argument("--budget", "-b", type=Decimal, required=True, help="Budget in USD")
    builds.add_argument("--use-case", "-u", default="Gaming", help="Primary use case")
    builds.add_argument("--requirements", "-r", help="Custom requirements (optional)")

    peripherals = subparsers.add_parser("peripherals", help="Recommend peripherals for a build")
    peripherals.add_argument("--budget", "-b", type=Decimal, required=True, help="Budget remaining in USD")
    peripherals.add_argument("--use-case", "-u", default="Gaming", help="Primary use case")
    peripherals.add_argument("--cpu", required=True, help="CPU model of the build")
    peripherals.add_argument("--gpu", required=True, help="GPU model of the build")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        if args.command == "builds":
            outcome = asyncio.run(run_builds(args.budget, args.use_case, args.requirements))
        else:
            outcome = asyncio.run(run_peripherals(args.budget, args.use_case, args.cpu, args.gpu))
    except ConfigurationError:
        print("\nERROR: AI_GATEWAY_API_KEY environment variable not set!")
        print("   Please set it in your .env file or export it:")
        print("   export AI_GATEWAY_API_KEY=your-api-key")
        sys.exit(1)

    print_outcome(outcome)
    sys.exit(0 if outcome.ok else 1)


if __name__ == "__main__":
    main()
