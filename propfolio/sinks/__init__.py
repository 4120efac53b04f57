"""Output sinks for exporting portfolio data."""

from propfolio.sinks.csv_report import CsvReportSink
from propfolio.sinks.json_file import JsonFileSink

__all__ = ["CsvReportSink", "JsonFileSink"]
