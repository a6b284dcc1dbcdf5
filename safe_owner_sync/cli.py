"""
Command-line entry point

    safe-owner-sync --safe-address=0x... --new-owners=0xA,0xB,... --chain-id=1 \
        [--new-threshold=N] [--alchemy-api-key=KEY] [--out-filename=FILE]

The API key falls back to the ALCHEMY_API_KEY environment variable. The batch
is written as indented JSON for upload to the Safe Transaction Builder.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from safe_owner_sync.builder.pipeline import default_output_filename, generate_transactions
from safe_owner_sync.core.errors import SafeOwnerSyncError
from safe_owner_sync.fetcher.state_fetcher import Web3SafeStateFetcher

logger = logging.getLogger("safe_owner_sync")

USAGE = (
    "Usage: safe-owner-sync --safe-address=SAFE_ADDRESS "
    "--new-owners=NEW_OWNER_1,NEW_OWNER_2,... --chain-id=CHAIN_ID "
    "[--new-threshold=NEW_THRESHOLD] --alchemy-api-key=ALCHEMY_API_KEY "
    "[--out-filename=FILENAME]"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="safe-owner-sync",
        description="Generate a Safe Transaction Builder batch that updates owners and threshold.",
    )
    parser.add_argument("--safe-address", help="Safe contract address")
    parser.add_argument("--new-owners", help="Comma-separated desired owner addresses")
    parser.add_argument("--chain-id", help="Chain id of the Safe")
    parser.add_argument("--new-threshold", type=int, default=None, help="Desired threshold")
    parser.add_argument("--alchemy-api-key", default=None, help="Alchemy API key (or ALCHEMY_API_KEY)")
    parser.add_argument("--out-filename", default=None, help="Output JSON file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each planned operation")
    return parser


def parse_owner_list(raw: str) -> List[str]:
    """Split a comma-separated owner list, dropping empty entries."""
    return [part.strip() for part in raw.split(",") if part.strip()]


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    api_key = args.alchemy_api_key or os.environ.get("ALCHEMY_API_KEY")
    if not args.safe_address or not args.new_owners or not args.chain_id or not api_key:
        print(USAGE)
        return 1

    out_path = Path(args.out_filename or default_output_filename(args.chain_id, args.safe_address))
    fetcher = Web3SafeStateFetcher(chain_id=args.chain_id, api_key=api_key)

    try:
        batch = generate_transactions(
            safe_address=args.safe_address,
            new_owners=parse_owner_list(args.new_owners),
            chain_id=args.chain_id,
            fetcher=fetcher,
            new_threshold=args.new_threshold,
        )
    except SafeOwnerSyncError as e:
        logger.error("Error: %s", e)
        return 1

    try:
        with open(out_path, "w", encoding="utf-8") as f:
            json.dump(batch.to_json_dict(), f, indent=2)
    except OSError as e:
        logger.error("Error: cannot write %s: %s", out_path, e)
        return 1

    logger.info("Transaction JSON has been saved to %s", out_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
