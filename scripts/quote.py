#!/usr/bin/env python
"""
Quote a single rental from the command line.

Usage:
    python scripts/quote.py 2025-05-05 2025-05-07 Compact 30 --license-years 5
    python scripts/quote.py 2025-05-05 2025-05-07 Racer 24 --license-issued 2019-03-01 --trace
"""
import argparse
import logging
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from rental_pricing.config.logging_config import configure_logging
from rental_pricing.engine import PricingEngine, QuoteRequest


def main():
    parser = argparse.ArgumentParser(description="Rental price quote")
    parser.add_argument("pickup_date", help="Pickup date (YYYY-MM-DD)")
    parser.add_argument("dropoff_date", help="Dropoff date (YYYY-MM-DD)")
    parser.add_argument("vehicle_type", help="Compact, Electric, Cabrio or Racer")
    parser.add_argument("age", type=int, help="Driver age in years")
    parser.add_argument("--license-years", help="Years the driver has held a license")
    parser.add_argument("--license-issued", help="License issue date (YYYY-MM-DD), used when --license-years is omitted")
    parser.add_argument("--pickup", default="", help="Pickup location")
    parser.add_argument("--dropoff", default="", help="Dropoff location")
    parser.add_argument("--trace", action="store_true", help="Print the per-day pricing trace")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--log-format", default="text", choices=["text", "json"])

    args = parser.parse_args()
    configure_logging(args.log_level, args.log_format)
    logging.getLogger(__name__).info("Quoting %s from %s to %s", args.vehicle_type, args.pickup_date, args.dropoff_date)

    request = QuoteRequest(
        pickup_location=args.pickup,
        dropoff_location=args.dropoff,
        pickup_date=args.pickup_date,
        dropoff_date=args.dropoff_date,
        vehicle_type=args.vehicle_type,
        age=args.age,
        license_years=args.license_years,
        license_issued=args.license_issued,
    )
    result = PricingEngine().calculate(request)

    if not result.success:
        print(f"❌ {result.error}")
        sys.exit(1)

    if args.trace:
        print(result.get_trace_text())
        print()
    print(f"✅ {result.price}")


if __name__ == "__main__":
    main()
