from __future__ import annotations

import random
import unittest
from datetime import date
from decimal import Decimal

from ledgerbook.services.reporting.common import NET_INCOME_LABEL, ParsedRange, TransactionRecord
from ledgerbook.services.reporting.financial_statement_service import aggregate

PERIOD = ParsedRange(date(2026, 1, 1), date(2026, 12, 31))


def _txn(account: str, type: str, amount: int | float | Decimal, day: int = 1) -> TransactionRecord:
    return TransactionRecord(
        id=None,
        company_id=None,
        date=date(2026, 1, day),
        account=account,
        amount=amount,
        type=type,
    )


SAMPLE = [
    _txn("Sales", "income", 1000),
    _txn("Rent", "expense", 300),
    _txn("Cash", "asset", 5000),
    _txn("Loan", "liability", 2000),
]


class StatementAggregationTests(unittest.TestCase):
    def test_example_ledger_totals(self):
        fs = aggregate(SAMPLE, PERIOD)
        self.assertEqual(fs.income_statement.total_revenue, 1000)
        self.assertEqual(fs.income_statement.total_expense, 300)
        self.assertEqual(fs.income_statement.net_income, 700)
        self.assertEqual(fs.balance_sheet.total_assets, 5000)
        self.assertEqual(fs.balance_sheet.total_liabilities, 2000)
        self.assertEqual(fs.balance_sheet.total_equity, 3000)

    def test_period_is_carried_through(self):
        fs = aggregate([], PERIOD)
        self.assertEqual(fs.period.start_date, date(2026, 1, 1))
        self.assertEqual(fs.period.end_date, date(2026, 12, 31))

    def test_empty_ledger_gives_zero_totals(self):
        fs = aggregate([], PERIOD)
        self.assertEqual(fs.balance_sheet.assets, [])
        self.assertEqual(fs.balance_sheet.liabilities, [])
        self.assertEqual(fs.income_statement.revenues, [])
        self.assertEqual(fs.income_statement.expenses, [])
        self.assertEqual(fs.balance_sheet.total_assets, 0)
        self.assertEqual(fs.balance_sheet.total_liabilities, 0)
        self.assertEqual(fs.balance_sheet.total_equity, 0)
        self.assertEqual(fs.income_statement.total_revenue, 0)
        self.assertEqual(fs.income_statement.total_expense, 0)
        self.assertEqual(fs.income_statement.net_income, 0)

    def test_equity_is_single_net_income_line(self):
        fs = aggregate(SAMPLE, PERIOD)
        self.assertEqual(len(fs.balance_sheet.equity), 1)
        self.assertEqual(fs.balance_sheet.equity[0].account, NET_INCOME_LABEL)
        self.assertEqual(fs.balance_sheet.equity[0].amount, 700)

        labelled = aggregate(SAMPLE, PERIOD, net_income_label="Retained earnings")
        self.assertEqual(labelled.balance_sheet.equity[0].account, "Retained earnings")

    def test_same_account_and_type_are_merged(self):
        fs = aggregate([_txn("Sales", "income", 400), _txn("Sales", "income", 600, day=15)], PERIOD)
        self.assertEqual(len(fs.income_statement.revenues), 1)
        self.assertEqual(fs.income_statement.revenues[0].account, "Sales")
        self.assertEqual(fs.income_statement.revenues[0].amount, 1000)

    def test_label_reused_with_other_type_lands_in_both_sections(self):
        fs = aggregate([_txn("Deposit", "asset", 500), _txn("Deposit", "liability", 200)], PERIOD)
        self.assertEqual([s.amount for s in fs.balance_sheet.assets], [500])
        self.assertEqual([s.amount for s in fs.balance_sheet.liabilities], [200])
        self.assertEqual(fs.balance_sheet.total_equity, 300)

    def test_expenses_are_positive_magnitudes(self):
        fs = aggregate([_txn("Rent", "expense", 300), _txn("Power", "expense", 45)], PERIOD)
        self.assertEqual(fs.income_statement.total_expense, 345)
        self.assertEqual(fs.income_statement.net_income, -345)

    def test_unknown_type_and_negative_amount_are_excluded(self):
        rows = SAMPLE + [_txn("Capital", "equity", 9999), _txn("Sales", "income", -50)]
        with self.assertLogs("ledgerbook.services.reporting.financial_statement_service", level="WARNING"):
            fs = aggregate(rows, PERIOD)
        self.assertEqual(fs.income_statement.total_revenue, 1000)
        self.assertEqual(fs.balance_sheet.total_assets, 5000)

    def test_section_sums_match_totals_and_identities_hold(self):
        rng = random.Random(7)
        accounts = ["Sales", "Fees", "Rent", "Wages", "Cash", "Bank", "Loan", "Card"]
        types = ["income", "expense", "asset", "liability"]
        rows = [
            _txn(rng.choice(accounts), rng.choice(types), rng.randint(0, 10_000), day=rng.randint(1, 28))
            for _ in range(200)
        ]
        fs = aggregate(rows, PERIOD)
        bs, inc = fs.balance_sheet, fs.income_statement
        self.assertEqual(sum(s.amount for s in bs.assets), bs.total_assets)
        self.assertEqual(sum(s.amount for s in bs.liabilities), bs.total_liabilities)
        self.assertEqual(sum(s.amount for s in inc.revenues), inc.total_revenue)
        self.assertEqual(sum(s.amount for s in inc.expenses), inc.total_expense)
        self.assertEqual(inc.net_income, inc.total_revenue - inc.total_expense)
        self.assertEqual(bs.total_equity, bs.total_assets - bs.total_liabilities)

    def test_order_of_rows_does_not_matter(self):
        rows = SAMPLE + [_txn("Sales", "income", 250, day=9), _txn("Bank", "asset", 75, day=3)]
        expected = aggregate(rows, PERIOD)
        shuffled = list(rows)
        random.Random(42).shuffle(shuffled)
        self.assertEqual(aggregate(shuffled, PERIOD), expected)
        self.assertEqual(aggregate(list(reversed(rows)), PERIOD), expected)

    def test_fractional_amounts_are_excluded_not_truncated(self):
        rows = [
            _txn("Sales", "income", 1000),
            _txn("Sales", "income", 1.9),
            _txn("Fees", "income", 0.6),
            _txn("Interest", "income", Decimal("25.00")),
        ]
        with self.assertLogs("ledgerbook.services.reporting.financial_statement_service", level="WARNING") as logs:
            fs = aggregate(rows, PERIOD)
        self.assertIn("count=2", logs.output[0])
        self.assertEqual(fs.income_statement.total_revenue, 1025)
        self.assertEqual(
            [(s.account, s.amount) for s in fs.income_statement.revenues],
            [("Interest", 25), ("Sales", 1000)],
        )


if __name__ == "__main__":
    unittest.main()
