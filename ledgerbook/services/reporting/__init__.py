from ledgerbook.services.reporting.financial_metrics import compute_metrics
from ledgerbook.services.reporting.financial_statement_service import FinancialStatementService, aggregate
from ledgerbook.services.reporting.repository import SqlTransactionSource, TransactionSource

__all__ = [
    "FinancialStatementService",
    "SqlTransactionSource",
    "TransactionSource",
    "aggregate",
    "compute_metrics",
]
