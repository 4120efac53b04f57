"""Pure aggregation functions over portfolio entity collections."""

from propfolio.analytics.documents import pending_documents, upcoming_due_documents
from propfolio.analytics.filters import FilterCriteria, filter_properties
from propfolio.analytics.financial import FinancialSummary, summarize
from propfolio.analytics.portfolio import PortfolioCounts, PortfolioSummary, aggregate
from propfolio.analytics.schedule import generate_monthly_schedule
from propfolio.analytics.trends import TrendPoint, appraisal_history, market_value_trend
from propfolio.analytics.valuation import (
    Appreciation,
    appreciation,
    current_value,
    prior_value,
    value_as_of,
)
from propfolio.analytics.views import dashboard_summary, format_currency, lease_rows

__all__ = [
    "Appreciation",
    "FilterCriteria",
    "FinancialSummary",
    "PortfolioCounts",
    "PortfolioSummary",
    "TrendPoint",
    "aggregate",
    "appraisal_history",
    "appreciation",
    "current_value",
    "dashboard_summary",
    "filter_properties",
    "format_currency",
    "generate_monthly_schedule",
    "lease_rows",
    "market_value_trend",
    "pending_documents",
    "prior_value",
    "summarize",
    "upcoming_due_documents",
    "value_as_of",
]
