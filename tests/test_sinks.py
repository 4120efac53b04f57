"""Tests for CSV and JSON sinks."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from conftest import make_property
from propfolio.analytics.financial import FinancialSummary
from propfolio.exceptions import ExportError
from propfolio.models import PaymentStatus, Property
from propfolio.sinks import CsvReportSink, JsonFileSink
from propfolio.sinks.serialization import serialize_value, to_dict


class TestCsvReportSink:
    """Tests for the financial report CSV."""

    def test_header_and_one_line_per_property(self, appraised_property: Property) -> None:
        properties = [appraised_property, make_property(name="Second", status=PaymentStatus.CASH)]

        content = CsvReportSink("unused").render_report(properties, as_of=date(2024, 6, 15))
        lines = content.splitlines()

        assert len(lines) == 3
        assert lines[0] == "Property Name,Type,Location,Acquisition Cost,Market Value,Payment Status,Last Updated"
        assert lines[1] == '"Test Property",Condominium,Luzon,10000000,12000000,Fully Paid,2024-06-15'
        assert lines[2].split(",")[-2] == "Cash"

    def test_name_quotes_are_doubled(self) -> None:
        prop = make_property(name='The "Tower", Unit 5')

        lines = CsvReportSink("unused").render_report([prop], as_of=date(2024, 6, 15)).splitlines()

        assert lines[1].startswith('"The ""Tower"", Unit 5",')

    def test_empty_report_has_header_only(self) -> None:
        assert CsvReportSink("unused").render_report([]).splitlines() == [
            "Property Name,Type,Location,Acquisition Cost,Market Value,Payment Status,Last Updated"
        ]

    def test_write_report(self, tmp_path: Path, appraised_property: Property) -> None:
        sink = CsvReportSink(tmp_path / "reports")

        path = sink.write_report([appraised_property], as_of=date(2024, 6, 15))

        assert path.name == "financial_report_2024-06-15.csv"
        assert len(path.read_text(encoding="utf-8").splitlines()) == 2

    def test_write_failure_raises_export_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")

        with pytest.raises(ExportError):
            CsvReportSink(blocker).write_report([], as_of=date(2024, 6, 15))


class TestJsonFileSink:
    """Tests for JSON snapshots."""

    def test_write_batch(self, tmp_path: Path, appraised_property: Property) -> None:
        sink = JsonFileSink(tmp_path)

        path = sink.write_batch("properties", [appraised_property])
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data[0]["property_id"] == "prop-001"
        assert data[0]["property_type"] == "Condominium"
        assert data[0]["acquisition"]["unit_lot_cost"] == "10000000"
        assert data[0]["appraisals"][1]["appraisal_date"] == "2024-01-01"
        assert sink.counts() == {"properties": 1}

    def test_write_summary(self, tmp_path: Path) -> None:
        sink = JsonFileSink(tmp_path, pretty=True)

        path = sink.write_summary("financial_summary", FinancialSummary(roi=Decimal("1.5")))
        data = json.loads(path.read_text(encoding="utf-8"))

        assert data["roi"] == "1.5"
        assert data["upcoming_due_dates"] == 0


class TestSerialization:
    """Tests for serialization helpers."""

    def test_serialize_values(self) -> None:
        assert serialize_value(Decimal("1.10")) == "1.10"
        assert serialize_value(PaymentStatus.CASH) == "Cash"
        assert serialize_value(date(2024, 1, 2)) == "2024-01-02"
        assert serialize_value({"a": [Decimal("1")]}) == {"a": ["1"]}

    def test_to_dict_non_dataclass(self) -> None:
        assert to_dict({"x": Decimal("2")}) == {"x": "2"}
        assert to_dict(5) == {"value": "5"}
