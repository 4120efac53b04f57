"""Scenarios for generating realistic portfolio data sets."""

from propfolio.scenarios.demo_portfolio import DemoPortfolioScenario

__all__ = ["DemoPortfolioScenario"]
