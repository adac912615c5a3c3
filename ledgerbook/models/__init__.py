from ledgerbook.models.company import Company
from ledgerbook.models.transaction import Transaction

__all__ = [
    "Company",
    "Transaction",
]
