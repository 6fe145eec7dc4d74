#!/usr/bin/env python3
"""Serve the booth kiosk API.

Loads a ``.env`` file if present, then runs the FastAPI app under uvicorn.
Booth settings come from the BOOTH_* environment variables.

Usage:
    python scripts/run_booth.py [options]

Options:
    --host HOST          Interface to bind (default: 127.0.0.1)
    --port PORT          Port to bind (default: 8000)
    --reload             Reload on source changes (development only)
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import uvicorn
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Serve the biometric voting booth API",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on source changes (development only)",
    )
    args = parser.parse_args()

    uvicorn.run(
        "src.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
