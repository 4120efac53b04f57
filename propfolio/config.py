"""Configuration management for propfolio."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from propfolio.exceptions import ConfigurationError


class BucketUnit(str, Enum):
    MONTH = "month"
    YEAR = "year"


class IncomeSource(str, Enum):
    """Which lease shape feeds gross rental income."""

    EMBEDDED = "embedded"  # lease-on-property (legacy display shape)
    STANDALONE = "standalone"  # Lease records from tenant management
    PREFER_STANDALONE = "prefer_standalone"


@dataclass
class TrendConfig:
    """Market value trend configuration."""

    bucket_count: int = 6
    bucket_unit: BucketUnit = BucketUnit.MONTH


@dataclass
class ScheduleConfig:
    """Defaults stamped on generated PDC drafts."""

    payment_type: str = "Rent"
    payment_method: str = "Check"


@dataclass
class IncomeConfig:
    """Income reconciliation between embedded and standalone leases."""

    source: IncomeSource = IncomeSource.EMBEDDED
    scope_payments_to_properties: bool = False


@dataclass
class ExportConfig:
    """Report export configuration."""

    output_dir: Path = field(default_factory=lambda: Path("output"))
    filename_prefix: str = "financial_report"
    pretty_json: bool = False


@dataclass
class PortfolioConfig:
    """Main configuration for propfolio."""

    trend: TrendConfig = field(default_factory=TrendConfig)
    schedule: ScheduleConfig = field(default_factory=ScheduleConfig)
    income: IncomeConfig = field(default_factory=IncomeConfig)
    export: ExportConfig = field(default_factory=ExportConfig)
    due_window_days: int = 30
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"  # "standard" | "json"

    @classmethod
    def from_env(cls) -> "PortfolioConfig":
        """Create config from environment variables."""
        import os

        try:
            trend = TrendConfig(
                bucket_count=int(os.getenv("PROPFOLIO_TREND_BUCKETS", "6")),
                bucket_unit=BucketUnit(os.getenv("PROPFOLIO_TREND_UNIT", "month")),
            )
            income = IncomeConfig(
                source=IncomeSource(os.getenv("PROPFOLIO_INCOME_SOURCE", "embedded")),
                scope_payments_to_properties=(
                    os.getenv("PROPFOLIO_SCOPE_PAYMENTS", "false").lower() == "true"
                ),
            )
            due_window_days = int(os.getenv("PROPFOLIO_DUE_WINDOW_DAYS", "30"))
            seed = int(os.getenv("PROPFOLIO_SEED")) if os.getenv("PROPFOLIO_SEED") else None
        except ValueError as exc:
            raise ConfigurationError(f"Invalid propfolio environment setting: {exc}") from exc

        if trend.bucket_count < 1:
            raise ConfigurationError("PROPFOLIO_TREND_BUCKETS must be at least 1")

        schedule = ScheduleConfig(
            payment_type=os.getenv("PROPFOLIO_PDC_PAYMENT_TYPE", "Rent"),
            payment_method=os.getenv("PROPFOLIO_PDC_PAYMENT_METHOD", "Check"),
        )

        export = ExportConfig(
            output_dir=Path(os.getenv("PROPFOLIO_OUTPUT_DIR", "output")),
            filename_prefix=os.getenv("PROPFOLIO_REPORT_PREFIX", "financial_report"),
            pretty_json=os.getenv("PROPFOLIO_PRETTY_JSON", "false").lower() == "true",
        )

        return cls(
            trend=trend,
            schedule=schedule,
            income=income,
            export=export,
            due_window_days=due_window_days,
            seed=seed,
            log_level=os.getenv("PROPFOLIO_LOG_LEVEL", "INFO"),
            log_format=os.getenv("PROPFOLIO_LOG_FORMAT", "standard"),
        )
