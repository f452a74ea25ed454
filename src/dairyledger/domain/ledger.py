"""Ledger aggregation: period bucketing, per-period totals and running totals.

The module-level functions are pure: they work on entries that were already
fetched, never touch the database, and never mutate their inputs.
``LedgerService`` is the pull-based entry point that fetches a month of
entries from the Record Store and runs them through these functions.
"""

from collections.abc import Iterable, Sequence
from datetime import date, datetime, time
from typing import Any, Optional

from dairyledger.database.base import Database
from dairyledger.domain.balance import ZERO, as_decimal, balance_delta
from dairyledger.domain.entities import (
    Account,
    AccountKind,
    BalanceReport,
    DailySummary,
    Entry,
    EntryKind,
    LedgerStatement,
    Period,
    PeriodStatement,
    PeriodSummary,
    RunningTotalRow,
)
from dairyledger.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    invalid_window,
)
from dairyledger.utils.date_parser import get_day_bounds, get_month_range

SUPPLIER_PERIOD_BOUNDARIES = (10, 20)


def _ordinal(day: int) -> str:
    if day in (1, 21, 31):
        return f"{day}st"
    return f"{day}th"


def build_periods(
    account_kind: AccountKind | str, month_start: date, month_end: date
) -> list[Period]:
    """Build the reporting periods of one account-month.

    Customers get a single period covering the month. Suppliers get three:
    days 1-10, 11-20 and 21 to the last day of the month.

    Raises:
        ValidationError: If the window is inverted or the kind is invalid
    """
    kind = AccountKind.parse(account_kind)
    if month_start > month_end:
        raise ValidationError(invalid_window(month_start, month_end))

    if kind == AccountKind.CUSTOMER:
        return [Period(month_start.strftime("%B %Y"), month_start, month_end)]

    first_end, second_end = SUPPLIER_PERIOD_BOUNDARIES
    return [
        Period(
            f"1st - {first_end}th",
            month_start.replace(day=1),
            month_start.replace(day=first_end),
        ),
        Period(
            f"{first_end + 1}th - {second_end}th",
            month_start.replace(day=first_end + 1),
            month_start.replace(day=second_end),
        ),
        Period(
            f"{_ordinal(second_end + 1)} - {month_end.day}th",
            month_start.replace(day=second_end + 1),
            month_end,
        ),
    ]


def bucket_index(account_kind: AccountKind, day_of_month: int) -> int:
    """Return the period index an entry dated on ``day_of_month`` belongs to."""
    if account_kind == AccountKind.CUSTOMER:
        return 0
    first_end, second_end = SUPPLIER_PERIOD_BOUNDARIES
    if day_of_month <= first_end:
        return 0
    if day_of_month <= second_end:
        return 1
    return 2


def compute_period_summaries(
    account_kind: AccountKind | str,
    entries: Iterable[Entry],
    month_start: date,
    month_end: date,
) -> list[PeriodSummary]:
    """Partition a month of entries into periods and total them by kind.

    Entries are expected to be pre-filtered to the month and sorted by
    creation time; they are bucketed by day of month only and keep the
    order they are given in. Every period is returned, empty or not, in
    chronological order.

    Args:
        account_kind: ``customer`` or ``supplier``
        entries: Entries of one account within ``[month_start, month_end]``
        month_start: First day of the month
        month_end: Last day of the month

    Returns:
        One PeriodSummary per period

    Raises:
        ValidationError: If ``month_start > month_end`` or the account kind
            is neither customer nor supplier
    """
    kind = AccountKind.parse(account_kind)
    periods = build_periods(kind, month_start, month_end)

    buckets: list[dict[str, Any]] = [
        {
            "entries": [],
            "total_quantity": ZERO,
            "total_amount": ZERO,
            "credit_amount": ZERO,
            "debit_amount": ZERO,
        }
        for _ in periods
    ]

    for entry in entries:
        bucket = buckets[bucket_index(kind, entry.created_at.day)]
        bucket["entries"].append(entry)

        entry_kind = EntryKind.parse(entry.kind)
        if entry_kind in (EntryKind.PURCHASE, EntryKind.SALE):
            bucket["total_quantity"] += as_decimal(entry.quantity)
            bucket["total_amount"] += as_decimal(entry.amount)
        elif entry_kind == EntryKind.CREDIT:
            bucket["credit_amount"] += as_decimal(entry.amount)
        elif entry_kind == EntryKind.DEBIT:
            bucket["debit_amount"] += as_decimal(entry.amount)
        else:
            # Unknown kinds are listed but excluded from every total
            continue

    return [
        PeriodSummary(
            period=period,
            entries=tuple(bucket["entries"]),
            total_quantity=bucket["total_quantity"],
            total_amount=bucket["total_amount"],
            credit_amount=bucket["credit_amount"],
            debit_amount=bucket["debit_amount"],
        )
        for period, bucket in zip(periods, buckets)
    ]


def compute_running_totals(
    period_entries: Sequence[Entry], account_kind: AccountKind | str
) -> list[RunningTotalRow]:
    """Pair each entry of a period with the running total after it.

    The total starts at zero and only reflects the entries passed in, so it
    generally differs from the account's stored balance unless the window
    covers the account's whole history.

    Raises:
        ValidationError: If the account kind is neither customer nor supplier
    """
    kind = AccountKind.parse(account_kind)
    running_total = ZERO
    rows: list[RunningTotalRow] = []

    for sequence, entry in enumerate(period_entries, start=1):
        running_total += balance_delta(kind, entry.kind, entry.amount)
        rows.append(RunningTotalRow(sequence=sequence, entry=entry, running_total=running_total))

    return rows


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Sort entries by creation time, using the id as insertion-order tiebreaker."""
    return sorted(entries, key=lambda entry: (entry.created_at, entry.id))


def summarize_day(day: date, entries: Iterable[Entry]) -> DailySummary:
    """Total every entry of a single day by kind."""
    totals = {kind: ZERO for kind in EntryKind}
    count = 0
    for entry in entries:
        totals[EntryKind.parse(entry.kind)] += as_decimal(entry.amount)
        count += 1

    return DailySummary(
        day=day,
        total_purchase=totals[EntryKind.PURCHASE],
        total_sales=totals[EntryKind.SALE],
        total_credit=totals[EntryKind.CREDIT],
        total_debit=totals[EntryKind.DEBIT],
        entry_count=count,
    )


def summarize_balances(accounts: Iterable[Account]) -> BalanceReport:
    """Total outstanding customer receivables and supplier payables."""
    receivable = ZERO
    receivable_count = 0
    payable = ZERO
    payable_count = 0

    for account in accounts:
        balance = as_decimal(account.balance)
        if balance <= 0:
            continue
        if account.kind == AccountKind.CUSTOMER:
            receivable += balance
            receivable_count += 1
        else:
            payable += balance
            payable_count += 1

    return BalanceReport(
        total_receivable=receivable,
        receivable_count=receivable_count,
        total_payable=payable,
        payable_count=payable_count,
    )


class LedgerService:
    """Service for building ledger statements and reports."""

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def monthly_statement(self, account_id: int, month: Optional[date] = None) -> LedgerStatement:
        """Build the period-by-period statement of one account for a month.

        Args:
            account_id: Account ID
            month: Any day of the month to report on (defaults to today)

        Returns:
            LedgerStatement with one PeriodStatement per period

        Raises:
            NotFoundError: If the account does not exist
        """
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))

        month_start, month_end = get_month_range(month or date.today())
        entries = sort_entries(
            self.db.list_entries(
                account_id=account_id,
                start=datetime.combine(month_start, time.min),
                end=datetime.combine(month_end, time.max),
            )
        )

        summaries = compute_period_summaries(account.kind, entries, month_start, month_end)
        periods = tuple(
            PeriodStatement(
                summary=summary,
                rows=tuple(compute_running_totals(summary.entries, account.kind)),
            )
            for summary in summaries
        )
        return LedgerStatement(
            account=account,
            month_start=month_start,
            month_end=month_end,
            periods=periods,
        )

    def daily_summary(self, day: Optional[date] = None) -> DailySummary:
        """Total purchases, sales, credits and debits recorded on a day."""
        day = day or date.today()
        start, end = get_day_bounds(day)
        return summarize_day(day, self.db.list_entries_between(start=start, end=end))

    def balance_report(self) -> BalanceReport:
        """Total receivables and payables from the stored account balances."""
        return summarize_balances(self.db.list_accounts())
