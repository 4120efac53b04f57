"""Tests for the portfolio report command-line script."""

import importlib.util
import json
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "portfolio_report.py"


@pytest.fixture
def report_main():
    """Load ``main`` from the report script."""
    module_spec = importlib.util.spec_from_file_location("portfolio_report", SCRIPT)
    module = importlib.util.module_from_spec(module_spec)
    module_spec.loader.exec_module(module)
    return module.main


class TestPortfolioReport:
    """Tests for scripts/portfolio_report.py."""

    def test_writes_csv_and_json(self, report_main, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            sys,
            "argv",
            ["portfolio_report.py", "--properties", "3", "--seed", "42", "--output", str(tmp_path), "--json"],
        )

        assert report_main() == 0

        reports = list(tmp_path.glob("financial_report_*.csv"))
        assert len(reports) == 1
        assert len(reports[0].read_text(encoding="utf-8").splitlines()) == 6
        summary = json.loads((tmp_path / "financial_summary.json").read_text(encoding="utf-8"))
        assert "net_operating_income" in summary

    def test_filters_apply_to_report(self, report_main, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            sys,
            "argv",
            ["portfolio_report.py", "--showcase-only", "--search", "bgc", "--output", str(tmp_path)],
        )

        assert report_main() == 0

        lines = next(tmp_path.glob("*.csv")).read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert lines[1].startswith('"BGC Corporate Office Suite"')
