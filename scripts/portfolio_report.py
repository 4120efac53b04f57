#!/usr/bin/env python3
"""Build a portfolio, print its financial summary and export the report.

Usage:
    python scripts/portfolio_report.py --properties 20 --seed 42
    python scripts/portfolio_report.py --region Luzon --lease-status leased
    python scripts/portfolio_report.py --showcase-only --output reports/
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from propfolio.analytics import (
    FilterCriteria,
    filter_properties,
    format_currency,
    market_value_trend,
    summarize,
)
from propfolio.config import IncomeSource, PortfolioConfig
from propfolio.exceptions import PropfolioError
from propfolio.logging import get_logger, setup_logging
from propfolio.scenarios import DemoPortfolioScenario
from propfolio.sinks import CsvReportSink, JsonFileSink

logger = get_logger("report")


def main() -> int:
    """Generate the portfolio and export the financial report."""
    config = PortfolioConfig.from_env()

    parser = argparse.ArgumentParser(description="Portfolio financial report")
    parser.add_argument("--properties", type=int, default=8, help="Random properties (default: 8)")
    parser.add_argument("--seed", type=int, default=config.seed, help="Random seed")
    parser.add_argument("--showcase-only", action="store_true", help="Only the fixed demo properties")
    parser.add_argument("--search", default="", help="Free-text search on name/address/region")
    parser.add_argument("--type", dest="property_type", default="all", help="Property type filter")
    parser.add_argument("--region", default="all", help="Region filter (Luzon, Visayas, Mindanao)")
    parser.add_argument("--payment-status", default="all", help="Cash, Amortized or Fully Paid")
    parser.add_argument("--lease-status", default="all", choices=["all", "leased", "vacant"])
    parser.add_argument(
        "--income-source",
        default=config.income.source.value,
        choices=[s.value for s in IncomeSource],
        help="Lease shape used for gross income",
    )
    parser.add_argument("--output", type=Path, default=config.export.output_dir, help="Output directory")
    parser.add_argument("--json", action="store_true", help="Also write JSON snapshots")
    parser.add_argument("--log-level", default=config.log_level)
    parser.add_argument("--log-format", default=config.log_format, choices=["standard", "json"])
    parser.add_argument("--log-file", type=Path, default=None, help="Also write logs to this file")
    args = parser.parse_args()

    setup_logging(args.log_level, args.log_format, args.log_file)
    config.income.source = IncomeSource(args.income_source)

    scenario = DemoPortfolioScenario(
        num_properties=0 if args.showcase_only else args.properties,
        seed=args.seed,
        config=config,
    )
    store = scenario.generate()

    criteria = FilterCriteria(
        search=args.search,
        property_type=args.property_type,
        region=args.region,
        payment_status=args.payment_status,
        lease_status=args.lease_status,
    )
    properties = filter_properties(store.fetch_properties(), criteria)
    payments = store.fetch_payments()
    leases = store.fetch_leases()

    summary = summarize(properties, payments, leases=leases, config=config)
    logger.info("Properties in report: %d", len(properties))
    logger.info("Total acquisition cost: %s", format_currency(summary.total_acquisition_cost))
    logger.info("Total market value: %s", format_currency(summary.total_market_value))
    logger.info("Value change: %.1f%%", summary.value_change_percentage)
    logger.info("Net operating income: %s", format_currency(summary.net_operating_income))
    logger.info("ROI: %.2f%%", summary.roi)
    logger.info("Pending payments: %s", format_currency(summary.pending_payments))

    for point in market_value_trend(properties, config.trend.bucket_count, config.trend.bucket_unit):
        logger.info("  %s: %s", point.label, format_currency(point.value))

    try:
        report = CsvReportSink(args.output, config.export.filename_prefix).write_report(properties)
        if args.json:
            sink = JsonFileSink(args.output, pretty=config.export.pretty_json)
            sink.write_batch("properties", properties)
            sink.write_batch("leases", leases)
            sink.write_batch("payments", payments)
            sink.write_summary("financial_summary", summary)
    except PropfolioError as exc:
        logger.error("Export failed: %s", exc)
        return 1

    print(f"Report written to: {report}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
