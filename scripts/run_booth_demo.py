#!/usr/bin/env python3
"""Booth kiosk console demo.

Walks simulated voters through the kiosk: scan, vote for a random
candidate on success, reset. Prints each outcome and the final booth
counters. Uses the demo roster and the BOOTH_* environment variables.

Usage:
    python scripts/run_booth_demo.py [options]

Options:
    --voters N           Number of simulated voters to walk up (default: 10)
    --seed N             Seed for the simulation (default: BOOTH_RANDOM_SEED)
    --fast               No scanning delay
    --verbose            Show structured logs
"""

import argparse
import asyncio
import os
import random
import sys
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.bootstrap.booth import build_booth_kiosk
from src.bootstrap.logging import configure_structlog
from src.config.booth_config import BoothConfig
from src.domain.models.authentication import OutcomeKind
from src.domain.models.session_state import SessionPhase

# Load environment variables
load_dotenv()


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"


_OUTCOME_COLORS = {
    OutcomeKind.SUCCESS: Colors.GREEN,
    OutcomeKind.DUPLICATE: Colors.YELLOW,
    OutcomeKind.FAILURE: Colors.RED,
}


def print_banner(config: BoothConfig) -> None:
    print(f"{Colors.HEADER}{Colors.BOLD}")
    print("=" * 60)
    print(f"  BIOMETRIC VOTING BOOTH {config.booth_id}")
    print("=" * 60)
    print(f"{Colors.ENDC}")


async def run_demo(args: argparse.Namespace) -> None:
    config = BoothConfig.from_environment()
    if args.seed is not None:
        config = replace(config, random_seed=args.seed)
    if args.fast:
        config = replace(config, scan_delay_seconds=0.0)

    kiosk = build_booth_kiosk(config)
    rng = random.Random(config.random_seed)
    print_banner(config)

    for walk_up in range(1, args.voters + 1):
        result = await kiosk.start_scan()
        outcome = result.outcome
        color = _OUTCOME_COLORS[outcome.kind]
        print(f"{Colors.DIM}[{walk_up:>3}]{Colors.ENDC} ", end="")
        print(f"{color}{outcome.kind.value.upper():<10}{Colors.ENDC}", end="")

        alert = kiosk.get_active_alert()
        if alert is not None:
            print(f" {alert.title}")
        else:
            print()

        if result.state.phase is SessionPhase.BALLOT_OPEN:
            candidate = rng.choice(kiosk.get_candidates())
            receipt = kiosk.submit_vote(candidate.id)
            print(
                f"      {Colors.GREEN}vote recorded{Colors.ENDC} "
                f"{receipt.record.voter_id} -> {candidate.name} ({candidate.party})"
            )
            kiosk.reset_session()

    stats = kiosk.get_stats()
    print()
    print(f"{Colors.BOLD}Booth counters{Colors.ENDC}")
    print(f"  Registered voters:     {stats.total_registered}")
    print(f"  Votes cast:            {stats.voted_count}")
    print(f"  Turnout:               {stats.turnout_rate:.1%}")
    print(f"  Duplicate attempts:    {stats.duplicate_attempts}")
    print(f"  Verification failures: {stats.verification_failures}")
    print(f"  Verification rate:     {stats.verification_rate:.1%}")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Walk simulated voters through the booth kiosk",
    )
    parser.add_argument(
        "--voters", type=int, default=10, help="Number of simulated voters"
    )
    parser.add_argument("--seed", type=int, default=None, help="Simulation seed")
    parser.add_argument("--fast", action="store_true", help="No scanning delay")
    parser.add_argument("--verbose", action="store_true", help="Show structured logs")
    args = parser.parse_args()

    if not args.verbose:
        os.environ.setdefault("LOG_LEVEL", "CRITICAL")
    configure_structlog(environment="development")

    asyncio.run(run_demo(args))


if __name__ == "__main__":
    main()
