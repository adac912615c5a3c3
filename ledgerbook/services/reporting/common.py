from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID


INCOME = "income"
EXPENSE = "expense"
ASSET = "asset"
LIABILITY = "liability"

TRANSACTION_TYPES = (INCOME, EXPENSE, ASSET, LIABILITY)

NET_INCOME_LABEL = "Net Income"


@dataclass(frozen=True)
class TransactionRecord:
    """Ledger row as consumed by the statement aggregator."""

    id: UUID | None
    company_id: UUID | None
    date: date
    account: str
    amount: int
    type: str
    description: str | None = None


@dataclass
class ParsedRange:
    from_date: date
    to_date: date

    @property
    def days(self) -> int:
        return (self.to_date - self.from_date).days + 1


def default_period(from_date: date | None, to_date: date | None, *, today: date | None = None) -> ParsedRange:
    """
    Fill in missing report bounds:
    - to_date defaults to today
    - from_date defaults to January 1st of to_date's year
    Reversed bounds are swapped.
    """
    if to_date is None:
        to_date = today or date.today()
    if from_date is None:
        from_date = date(to_date.year, 1, 1)
    if from_date > to_date:
        from_date, to_date = to_date, from_date
    return ParsedRange(from_date=from_date, to_date=to_date)


def previous_period(period: ParsedRange) -> ParsedRange:
    """Window of the same length that ends the day before `period` starts."""
    to_date = period.from_date - timedelta(days=1)
    return ParsedRange(from_date=to_date - timedelta(days=period.days - 1), to_date=to_date)


def period_for_keyword(keyword: str, *, today: date | None = None) -> ParsedRange | None:
    now = today or date.today()
    k = (keyword or "").strip().lower().replace("_", " ")
    if k == "today":
        return ParsedRange(now, now)
    if k == "yesterday":
        d = now - timedelta(days=1)
        return ParsedRange(d, d)
    if k == "this month":
        return ParsedRange(now.replace(day=1), now)
    if k == "last month":
        first_this = now.replace(day=1)
        last_prev = first_this - timedelta(days=1)
        return ParsedRange(last_prev.replace(day=1), last_prev)
    if k == "this year":
        return ParsedRange(date(now.year, 1, 1), now)
    if k == "last year":
        return ParsedRange(date(now.year - 1, 1, 1), date(now.year - 1, 12, 31))
    if k == "last week":
        return ParsedRange(now - timedelta(days=7), now)
    if k in ("last 3 months", "three months"):
        return ParsedRange(now - timedelta(days=90), now)
    return None
