"""CSV financial report sink."""

import logging
from datetime import date
from pathlib import Path
from typing import Iterable

from propfolio.analytics.valuation import current_value
from propfolio.exceptions import ExportError
from propfolio.models.property import Property

logger = logging.getLogger(__name__)

HEADERS = [
    "Property Name",
    "Type",
    "Location",
    "Acquisition Cost",
    "Market Value",
    "Payment Status",
    "Last Updated",
]


def _quoted(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


def _plain(value: object) -> str:
    return str(getattr(value, "value", value))


class CsvReportSink:
    """Write the financial report for a (filtered) property set."""

    def __init__(self, output_dir: str | Path, filename_prefix: str = "financial_report") -> None:
        """Initialize CSV report sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write reports into.
        filename_prefix : str
            File name stem; the ISO date is appended.
        """
        self.output_dir = Path(output_dir)
        self.filename_prefix = filename_prefix

    def filename_for(self, as_of: date) -> str:
        return f"{self.filename_prefix}_{as_of.isoformat()}.csv"

    def render_report(self, properties: Iterable[Property], as_of: date | None = None) -> str:
        """Render the report: one header line plus one line per property."""
        today = as_of or date.today()
        lines = [",".join(HEADERS)]
        for prop in properties:
            lines.append(
                ",".join(
                    [
                        _quoted(prop.property_name),
                        _plain(prop.property_type),
                        _plain(prop.location),
                        str(prop.acquisition.total_cost),
                        str(current_value(prop)),
                        _plain(prop.payment.status),
                        today.isoformat(),
                    ]
                )
            )
        return "\n".join(lines) + "\n"

    def write_report(self, properties: Iterable[Property], as_of: date | None = None) -> Path:
        """Write ``<prefix>_<ISO-date>.csv`` and return its path.

        Raises
        ------
        ExportError
            If the report cannot be written.
        """
        today = as_of or date.today()
        content = self.render_report(properties, as_of=today)
        file_path = self.output_dir / self.filename_for(today)
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise ExportError(f"Failed to write report {file_path}: {exc}") from exc
        logger.info("Financial report written to %s", file_path)
        return file_path
