from __future__ import annotations

import argparse
import json
import sys

from .checkout import run_checkout
from .core.logging_config import setup_logging
from .core.settings import get_settings
from .engine.loader import load_campaigns


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="shipping_campaigns",
        description="Run the configured shipping campaigns over a checkout JSON payload.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="checkout input JSON file ('-' = stdin)",
    )
    parser.add_argument(
        "--campaigns",
        default=None,
        help="campaign set YAML (default: CAMPAIGNS_PATH setting)",
    )
    args = parser.parse_args(argv)

    setup_logging()

    if args.input == "-":
        payload = json.load(sys.stdin)
    else:
        with open(args.input, "r", encoding="utf-8") as f:
            payload = json.load(f)

    campaigns = load_campaigns(args.campaigns or get_settings().CAMPAIGNS_PATH)
    out = run_checkout(payload, campaigns=campaigns)

    json.dump(out, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
