"""In-memory data store for maintaining entity relationships."""

from propfolio.store.portfolio import PortfolioStore

__all__ = ["PortfolioStore"]
