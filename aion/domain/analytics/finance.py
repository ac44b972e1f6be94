"""Financial rollups over a period: totals, savings and category breakdowns."""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum

from aion.domain.analytics.common import round_half_up
from aion.domain.analytics.moods import WEEKDAY_LABELS
from aion.domain.clock import as_utc
from aion.domain.entities import Transaction, TransactionType

LAST_INSTANT = datetime.max.replace(tzinfo=timezone.utc)

EXPENSE_CATEGORIES: dict[str, str] = {
    "housing": "Housing",
    "food": "Food & Dining",
    "transportation": "Transportation",
    "shopping": "Shopping",
    "utilities": "Utilities",
    "entertainment": "Entertainment",
    "health": "Health",
    "other": "Other",
}

INCOME_CATEGORIES: dict[str, str] = {
    "salary": "Salary",
    "freelance": "Freelance",
    "investment": "Investment",
    "gift": "Gift",
    "other": "Other",
}

CATEGORY_COLORS: dict[str, str] = {
    "housing": "#4F46E5",
    "food": "#10B981",
    "transportation": "#F59E0B",
    "shopping": "#EC4899",
    "utilities": "#6366F1",
    "entertainment": "#8B5CF6",
    "health": "#14B8A6",
    "other": "#9CA3AF",
    "salary": "#059669",
    "freelance": "#0D9488",
    "investment": "#0369A1",
    "gift": "#7C3AED",
}
NEUTRAL_COLOR = "#9CA3AF"


class FinancePeriod(str, Enum):
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


@dataclass
class CategoryTotal:
    category: str
    label: str
    amount: float
    color: str
    percentage: int = 0


@dataclass
class FinanceDay:
    day: str
    income: float = 0.0
    expenses: float = 0.0


@dataclass
class FinanceSummary:
    period: FinancePeriod
    start: datetime
    end: datetime
    income: float
    expenses: float
    net_savings: float
    savings_rate: float
    categories: list[CategoryTotal] = field(default_factory=list)
    top_expenses: list[CategoryTotal] = field(default_factory=list)


def category_label(category: str) -> str:
    """Display label; an unknown category is shown as-is."""
    return EXPENSE_CATEGORIES.get(category) or INCOME_CATEGORIES.get(category) or category


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, NEUTRAL_COLOR)


def period_bounds(period: FinancePeriod, reference: datetime) -> tuple[datetime, datetime]:
    """Inclusive start and end of the week (Monday first), month or year
    containing ``reference``."""
    ref = as_utc(reference)
    midnight = ref.replace(hour=0, minute=0, second=0, microsecond=0)

    if period is FinancePeriod.WEEK:
        start = midnight - timedelta(days=midnight.weekday())
    elif period is FinancePeriod.MONTH:
        start = midnight.replace(day=1)
    else:
        start = midnight.replace(month=1, day=1)

    try:
        following = _next_period_start(period, start)
    except (OverflowError, ValueError):
        # The last period of year 9999 has no successor
        return start, LAST_INSTANT
    return start, following - timedelta(microseconds=1)


def _next_period_start(period: FinancePeriod, start: datetime) -> datetime:
    if period is FinancePeriod.WEEK:
        return start + timedelta(days=7)
    if period is FinancePeriod.MONTH:
        if start.month == 12:
            return start.replace(year=start.year + 1, month=1)
        return start.replace(month=start.month + 1)
    return start.replace(year=start.year + 1)


def in_period(transactions: list[Transaction], start: datetime, end: datetime) -> list[Transaction]:
    return [t for t in transactions if start <= as_utc(t.date) <= end]


def type_total(transactions: list[Transaction], type_: TransactionType) -> float:
    return sum(t.amount for t in transactions if t.type == type_)


def totals_by_type(transactions: list[Transaction]) -> dict[str, float]:
    """Income and expense totals, both keys always present."""
    return {
        TransactionType.INCOME.value: type_total(transactions, TransactionType.INCOME),
        TransactionType.EXPENSE.value: type_total(transactions, TransactionType.EXPENSE),
    }


def category_totals(
    transactions: list[Transaction],
    type_: TransactionType = TransactionType.EXPENSE,
) -> list[CategoryTotal]:
    """Sum of ``type_`` transactions per category, in first-seen order."""
    sums: dict[str, float] = {}
    for t in transactions:
        if t.type == type_:
            sums[t.category] = sums.get(t.category, 0.0) + t.amount

    return [
        CategoryTotal(
            category=category,
            label=category_label(category),
            amount=amount,
            color=category_color(category),
        )
        for category, amount in sums.items()
    ]


def summarize_finances(
    transactions: list[Transaction],
    period: FinancePeriod,
    reference: datetime,
    top: int = 3,
) -> FinanceSummary:
    start, end = period_bounds(period, reference)
    selected = in_period(transactions, start, end)

    income = type_total(selected, TransactionType.INCOME)
    expenses = type_total(selected, TransactionType.EXPENSE)
    net = income - expenses
    savings_rate = net / income * 100 if income > 0 else 0.0

    categories = category_totals(selected, TransactionType.EXPENSE)
    if expenses > 0:
        for item in categories:
            item.percentage = round_half_up(item.amount / expenses * 100)
    top_expenses = sorted(categories, key=lambda c: c.amount, reverse=True)[:top]

    return FinanceSummary(
        period=period,
        start=start,
        end=end,
        income=income,
        expenses=expenses,
        net_savings=net,
        savings_rate=savings_rate,
        categories=categories,
        top_expenses=top_expenses,
    )


def daily_cash_flow(transactions: list[Transaction], week_start: datetime) -> list[FinanceDay]:
    """Income and expenses per day for the seven days from ``week_start``."""
    first = as_utc(week_start).date()
    days = [FinanceDay(day=label) for label in WEEKDAY_LABELS]
    # Labels follow the calendar weekday, so rotate when the week does not start on Monday.
    days = days[first.weekday():] + days[:first.weekday()]

    for t in transactions:
        offset = (as_utc(t.date).date() - first).days
        if not 0 <= offset < 7:
            continue
        if t.type == TransactionType.INCOME:
            days[offset].income += t.amount
        elif t.type == TransactionType.EXPENSE:
            days[offset].expenses += t.amount
    return days
