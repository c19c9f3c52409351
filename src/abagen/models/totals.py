"""Running credit/debit totals for a single generated file."""

from __future__ import annotations

from pydantic import BaseModel

from abagen.core.types import Cents
from abagen.models.transaction_code import TransactionCode


class RunningTotals(BaseModel):
    """Batch control figures, accumulated as detail records are written."""

    credit_total: Cents = 0
    debit_total: Cents = 0
    record_count: int = 0

    def add(self, amount: Cents, code: TransactionCode) -> None:
        if code.is_debit:
            self.debit_total += amount
        else:
            self.credit_total += amount
        self.record_count += 1

    @property
    def net_total(self) -> Cents:
        return abs(self.credit_total - self.debit_total)
