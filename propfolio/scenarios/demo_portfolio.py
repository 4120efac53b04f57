"""Demo portfolio scenario: a populated store for demos and resets."""

from __future__ import annotations

import logging
import random
from typing import Any

from propfolio.analytics.financial import FinancialSummary, summarize
from propfolio.analytics.schedule import generate_monthly_schedule
from propfolio.config import PortfolioConfig
from propfolio.exceptions import InvalidEntityStateError
from propfolio.generators import (
    AppraisalGenerator,
    LeaseGenerator,
    PaymentBehavior,
    PropertyGenerator,
    TenantGenerator,
    demo_properties,
)
from propfolio.models.base import AuditEntry
from propfolio.store.portfolio import PortfolioStore

logger = logging.getLogger(__name__)


class DemoPortfolioScenario:
    """Generate a demo portfolio with tenancy and payment history.

    This scenario creates:
    - The fixed showcase properties plus ``num_properties`` random ones
    - One to four yearly appraisals per property
    - Tenants and standalone leases for a share of the properties
    - Monthly PDC payments per lease, with past-due checks settled
    """

    def __init__(
        self,
        num_properties: int = 8,
        lease_rate: float = 0.5,
        collection_rate: float = 0.9,
        include_showcase: bool = True,
        seed: int | None = None,
        *,
        config: PortfolioConfig | None = None,
    ) -> None:
        """Initialize demo portfolio scenario.

        Parameters
        ----------
        num_properties : int
            Number of random properties on top of the showcase ones.
        lease_rate : float
            Share of properties with a standalone lease (0.0 to 1.0).
        collection_rate : float
            Probability that a due PDC clears.
        include_showcase : bool
            Whether to add the fixed demo properties.
        seed : int | None
            Random seed for reproducibility.
        config : PortfolioConfig | None
            Optional configuration; its seed is used when ``seed`` is None.
        """
        self.config = config or PortfolioConfig()
        self.seed = seed if seed is not None else self.config.seed
        self.num_properties = num_properties
        self.lease_rate = lease_rate
        self.collection_rate = collection_rate
        self.include_showcase = include_showcase

        if self.seed is not None:
            random.seed(self.seed)

        self._property_gen = PropertyGenerator(seed=self.seed)
        self._appraisal_gen = AppraisalGenerator(seed=self.seed)
        self._tenant_gen = TenantGenerator(seed=self.seed)
        self._lease_gen = LeaseGenerator(seed=self.seed)
        self._payment_behavior = PaymentBehavior(seed=self.seed)

    def generate(self, store: PortfolioStore | None = None) -> PortfolioStore:
        """Populate ``store`` (or a new one) with the demo portfolio.

        Returns
        -------
        PortfolioStore
            Store containing all generated data.
        """
        store = store if store is not None else PortfolioStore()
        logger.info("Starting demo portfolio scenario: %d random properties", self.num_properties)

        candidates = demo_properties() if self.include_showcase else []
        candidates.extend(self._property_gen.generate_batch(self.num_properties))

        stored = []
        for prop in candidates:
            if not prop.appraisals:
                prop.appraisals = self._appraisal_gen.generate_history(prop, random.randint(1, 4))
            stored.append(store.add_property(prop))

        logger.info("Generated %d properties", len(stored))

        num_leased = int(len(stored) * self.lease_rate)
        for prop in random.sample(stored, num_leased):
            tenant = store.add_tenant(self._tenant_gen.generate())
            lease = store.add_lease(self._lease_gen.generate(prop, tenant.tenant_id))
            drafts = list(generate_monthly_schedule(lease, self.config.schedule))
            self._payment_behavior.settle(drafts, collection_rate=self.collection_rate)
            store.add_payments_batch(drafts)

        logger.info("Generated %d leases with %d payments", len(store.leases), len(store.payments))
        return store

    def reset(self, store: PortfolioStore, *, confirm: bool = False, actor: str) -> AuditEntry:
        """Replace all store data with a fresh demo portfolio.

        Raises
        ------
        InvalidEntityStateError
            If ``confirm`` is not set.
        """
        if not confirm:
            raise InvalidEntityStateError("reset requires confirm=True")
        store.clear_all(confirm=True, actor=actor)
        self.generate(store)
        return store.record_audit("reset_to_demo", actor, loaded=store.summary())

    def get_portfolio_summary(self, store: PortfolioStore) -> dict[str, Any]:
        """Financial summary of everything in ``store``."""
        summary: FinancialSummary = summarize(
            store.fetch_properties(),
            store.fetch_payments(),
            leases=store.fetch_leases(),
            config=self.config,
        )
        return {"entities": store.summary(), "financial": summary}
