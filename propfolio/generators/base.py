"""Seeded Faker base for portfolio generators."""

from __future__ import annotations

import random
from abc import ABC
from decimal import Decimal

from faker import Faker


class BaseGenerator(ABC):
    """Shared Faker instance, seeding and peso amount helpers.

    Parameters
    ----------
    seed : int | None
        Seeds both Faker and ``random`` for reproducible portfolios.
    locale : str
        Faker locale; ``en_PH`` gives Philippine names and addresses.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_PH",
    ) -> None:
        self.fake = Faker(locale)
        if seed is not None:
            self.fake.seed_instance(seed)
            random.seed(seed)

    @staticmethod
    def amount(low: int, high: int, step: int = 1) -> Decimal:
        """Random whole amount in ``[low, high] * step`` pesos."""
        return Decimal(random.randint(low, high) * step)

    @staticmethod
    def scaled(base: Decimal, low: float, high: float, places: str = "1") -> Decimal:
        """``base`` times a random factor in ``[low, high]``, quantized."""
        factor = Decimal(str(round(random.uniform(low, high), 4)))
        return (base * factor).quantize(Decimal(places))
