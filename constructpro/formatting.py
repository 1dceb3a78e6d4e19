"""Display helpers: status badges, money and dates."""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple, Union

Number = Union[int, float, Decimal]

# status -> (label, badge variant)
PROJECT_STATUS_LABELS = {
    "planning": ("Planning", "secondary"),
    "in_progress": ("In Progress", "default"),
    "completed": ("Completed", "default"),
}

INQUIRY_STATUS_LABELS = {
    "new": ("New", "secondary"),
    "contacted": ("Contacted", "default"),
    "converted": ("Converted", "default"),
    "closed": ("Closed", "outline"),
}


def project_status_badge(status: Optional[str]) -> Tuple[str, str]:
    """Label and variant for a project status; unknown values read as Planning."""
    return PROJECT_STATUS_LABELS.get(status or "", PROJECT_STATUS_LABELS["planning"])


def inquiry_status_badge(status: Optional[str]) -> Tuple[str, str]:
    """Label and variant for an inquiry status; unknown values read as New."""
    return INQUIRY_STATUS_LABELS.get(status or "", INQUIRY_STATUS_LABELS["new"])


def _round_half_up(value: Decimal, step: str) -> Decimal:
    return value.quantize(Decimal(step), rounding=ROUND_HALF_UP)


def format_budget_short(budget: Optional[Number]) -> str:
    """Compact budget for the public portfolio: $2.5M, $750K, $900."""
    if not budget:
        return "Contact for pricing"
    value = Decimal(str(budget))
    if value >= 1_000_000:
        return f"${_round_half_up(value / 1_000_000, '0.1')}M"
    if value >= 1_000:
        return f"${_round_half_up(value / 1_000, '1')}K"
    return f"${_round_half_up(value, '1'):,}"


def format_budget(budget: Optional[Number]) -> str:
    """Full budget for dashboard tables: $1,250,000 or '-'."""
    if not budget:
        return "-"
    value = float(budget)
    if value.is_integer():
        return f"${value:,.0f}"
    return f"${value:,.2f}"


def format_date(value: Optional[Union[date, datetime]]) -> str:
    """Dashboard date format, e.g. Mar 05, 2024."""
    if value is None:
        return "-"
    return value.strftime("%b %d, %Y")
