#!/usr/bin/env python3
"""
Print estimated 1RM for every formula across a range of reps.

Usage:
    python scripts/print_formula_table.py 100
    python scripts/print_formula_table.py 100 --max-reps 10 --decimals 1

Reads .env for:
- ONEREPMAX_MAX_REPS (defaults to 12)
- ONEREPMAX_DECIMALS (defaults to 2)
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pandas as pd
from dotenv import load_dotenv
from pydantic import ValidationError


def main(argv=None):
    load_dotenv()

    from onerepmax.config import calculator_config
    from onerepmax.models import OneRepMaxRequest
    from onerepmax.tables import rep_range_frame

    cfg = calculator_config()
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("weight", type=float, help="Weight lifted")
    parser.add_argument("--max-reps", type=int, default=cfg.max_reps, help="Highest rep count in the table")
    parser.add_argument("--decimals", type=int, default=cfg.decimals, help="Decimal places")
    args = parser.parse_args(argv)

    try:
        # validates weight/decimals and the upper end of the rep range
        OneRepMaxRequest(weight=args.weight, reps=args.max_reps, decimals=args.decimals)
    except ValidationError as e:
        print(f"❌ Invalid arguments:\n{e}")
        return 1

    df = rep_range_frame(args.weight, range(1, args.max_reps + 1), args.decimals)
    with pd.option_context("display.max_columns", None, "display.width", 200):
        print(f"🏋️ Estimated 1RM for {args.weight:g} by reps\n")
        print(df.to_string())
    return 0


if __name__ == "__main__":
    sys.exit(main())
