"""Tests for the demo portfolio scenario."""

import pytest

from propfolio.analytics.financial import FinancialSummary
from propfolio.exceptions import InvalidEntityStateError
from propfolio.scenarios import DemoPortfolioScenario
from propfolio.store import PortfolioStore


class TestDemoPortfolioScenario:
    """Tests for DemoPortfolioScenario."""

    def test_generate(self, seed: int) -> None:
        store = DemoPortfolioScenario(num_properties=4, lease_rate=0.5, seed=seed).generate()

        summary = store.summary()
        assert summary["properties"] == 6
        assert summary["tenants"] == 3
        assert summary["leases"] == 3
        assert summary["payments"] > 0
        assert all(p.appraisals for p in store.fetch_properties())

    def test_payments_belong_to_leases(self, seed: int) -> None:
        store = DemoPortfolioScenario(num_properties=4, lease_rate=1.0, seed=seed).generate()

        lease_ids = {lease.lease_id for lease in store.fetch_leases()}
        assert {p.lease_id for p in store.fetch_payments()} <= lease_ids

    def test_showcase_only(self, seed: int) -> None:
        store = DemoPortfolioScenario(num_properties=0, lease_rate=0.0, seed=seed).generate()

        names = {p.property_name for p in store.fetch_properties()}
        assert names == {"Makati Prime Condominium Unit", "BGC Corporate Office Suite"}

    def test_reset_requires_confirmation(self, seed: int) -> None:
        scenario = DemoPortfolioScenario(num_properties=1, seed=seed)
        store = scenario.generate()

        with pytest.raises(InvalidEntityStateError):
            scenario.reset(store, actor="admin@example.com")

    def test_reset_replaces_data_and_audits(self, seed: int) -> None:
        scenario = DemoPortfolioScenario(num_properties=2, lease_rate=0.0, seed=seed)
        store = PortfolioStore()
        store.add_property(scenario.generate().fetch_properties()[0])

        entry = scenario.reset(store, confirm=True, actor="admin@example.com")

        assert store.summary()["properties"] == 4
        assert [e.action for e in store.audit_log()] == ["clear_all", "reset_to_demo"]
        assert entry.details["loaded"]["properties"] == 4

    def test_portfolio_summary(self, seed: int) -> None:
        scenario = DemoPortfolioScenario(num_properties=2, seed=seed)
        store = scenario.generate()

        result = scenario.get_portfolio_summary(store)

        assert result["entities"]["properties"] == 4
        assert isinstance(result["financial"], FinancialSummary)
        assert result["financial"].total_acquisition_cost > 0
