"""Synthetic and demo data generators."""

from propfolio.generators.demo import demo_properties
from propfolio.generators.portfolio import (
    AppraisalGenerator,
    LeaseGenerator,
    PaymentBehavior,
    PropertyGenerator,
    TenantGenerator,
)

__all__ = [
    "AppraisalGenerator",
    "LeaseGenerator",
    "PaymentBehavior",
    "PropertyGenerator",
    "TenantGenerator",
    "demo_properties",
]
