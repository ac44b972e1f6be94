"""Unit tests for financial rollups."""

from datetime import datetime, timedelta, timezone

from aion.domain.analytics import (
    FinancePeriod,
    category_totals,
    daily_cash_flow,
    period_bounds,
    summarize_finances,
    totals_by_type,
    type_total,
)
from aion.domain.entities import Transaction, TransactionType

UTC = timezone.utc
EXPENSE = TransactionType.EXPENSE
INCOME = TransactionType.INCOME


def _txn(amount, category, type_, when) -> Transaction:
    return Transaction(user_id=1, amount=amount, category=category, date=when, type=type_)


def test_week_bounds_run_monday_to_sunday(now):
    start, end = period_bounds(FinancePeriod.WEEK, now)

    assert start == datetime(2024, 3, 11, tzinfo=UTC)
    assert end == datetime(2024, 3, 17, 23, 59, 59, 999999, tzinfo=UTC)


def test_month_and_year_bounds(now):
    assert period_bounds(FinancePeriod.MONTH, now) == (
        datetime(2024, 3, 1, tzinfo=UTC),
        datetime(2024, 3, 31, 23, 59, 59, 999999, tzinfo=UTC),
    )
    assert period_bounds(FinancePeriod.MONTH, datetime(2024, 12, 15, tzinfo=UTC))[1] == (
        datetime(2024, 12, 31, 23, 59, 59, 999999, tzinfo=UTC)
    )
    assert period_bounds(FinancePeriod.YEAR, now) == (
        datetime(2024, 1, 1, tzinfo=UTC),
        datetime(2024, 12, 31, 23, 59, 59, 999999, tzinfo=UTC),
    )


def test_last_periods_of_the_calendar_end_at_the_last_instant():
    last = datetime.max.replace(tzinfo=UTC)
    reference = datetime(9999, 12, 30, tzinfo=UTC)

    assert period_bounds(FinancePeriod.YEAR, reference) == (datetime(9999, 1, 1, tzinfo=UTC), last)
    assert period_bounds(FinancePeriod.MONTH, reference) == (datetime(9999, 12, 1, tzinfo=UTC), last)
    assert period_bounds(FinancePeriod.WEEK, reference) == (datetime(9999, 12, 27, tzinfo=UTC), last)
    assert period_bounds(FinancePeriod.MONTH, datetime(9999, 11, 5, tzinfo=UTC))[1] == (
        datetime(9999, 11, 30, 23, 59, 59, 999999, tzinfo=UTC)
    )


def test_food_expenses_roll_up(now):
    transactions = [_txn(100, "food", EXPENSE, now), _txn(50, "food", EXPENSE, now)]

    totals = category_totals(transactions, EXPENSE)

    assert len(totals) == 1
    assert totals[0].category == "food"
    assert totals[0].label == "Food & Dining"
    assert totals[0].amount == 150


def test_category_totals_partition_expense_total(now):
    transactions = [
        _txn(12.5, "food", EXPENSE, now),
        _txn(600, "housing", EXPENSE, now),
        _txn(33.3, "shopping", EXPENSE, now),
        _txn(7, "food", EXPENSE, now),
        _txn(2000, "salary", INCOME, now),
        _txn(19.99, "pets", EXPENSE, now),
    ]

    totals = category_totals(transactions, EXPENSE)

    assert abs(sum(t.amount for t in totals) - type_total(transactions, EXPENSE)) < 1e-9
    assert [t.category for t in totals] == ["food", "housing", "shopping", "pets"]


def test_unknown_category_uses_raw_label_and_neutral_colour(now):
    (pets,) = category_totals([_txn(20, "pets", EXPENSE, now)])
    assert pets.label == "pets"
    assert pets.color == "#9CA3AF"


def test_income_categories_are_labelled(now):
    (salary,) = category_totals([_txn(20, "salary", INCOME, now)], INCOME)
    assert salary.label == "Salary"
    assert salary.color == "#059669"


def test_totals_by_type(now):
    transactions = [_txn(30, "food", EXPENSE, now), _txn(100, "gift", INCOME, now)]
    assert totals_by_type(transactions) == {"income": 100, "expense": 30}
    assert totals_by_type([]) == {"income": 0, "expense": 0}


def test_summary_for_the_week(now):
    transactions = [
        _txn(1000, "salary", INCOME, now),
        _txn(150, "food", EXPENSE, now - timedelta(days=1)),
        _txn(600, "housing", EXPENSE, now - timedelta(days=2)),
        _txn(999, "shopping", EXPENSE, now - timedelta(days=10)),
    ]

    summary = summarize_finances(transactions, FinancePeriod.WEEK, now)

    assert summary.income == 1000
    assert summary.expenses == 750
    assert summary.net_savings == 250
    assert summary.savings_rate == 25.0
    assert [c.category for c in summary.top_expenses] == ["housing", "food"]
    assert [c.percentage for c in summary.top_expenses] == [80, 20]


def test_savings_rate_is_zero_without_income(now):
    summary = summarize_finances([_txn(40, "food", EXPENSE, now)], FinancePeriod.MONTH, now)

    assert summary.savings_rate == 0
    assert summary.net_savings == -40


def test_top_expenses_keep_three_largest(now):
    transactions = [
        _txn(amount, category, EXPENSE, now)
        for amount, category in [(10, "food"), (40, "health"), (30, "shopping"), (20, "utilities")]
    ]

    summary = summarize_finances(transactions, FinancePeriod.MONTH, now)

    assert [c.category for c in summary.top_expenses] == ["health", "shopping", "utilities"]


def test_daily_cash_flow(now):
    monday = datetime(2024, 3, 11, tzinfo=UTC)
    transactions = [
        _txn(30, "food", EXPENSE, monday + timedelta(hours=12)),
        _txn(100, "freelance", INCOME, now),
        _txn(500, "salary", INCOME, monday - timedelta(days=1)),
    ]

    days = daily_cash_flow(transactions, monday)

    assert [d.day for d in days] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert days[0].expenses == 30
    assert days[2].income == 100
    assert sum(d.income for d in days) == 100
