"""Direct-entry transaction codes accepted in detail records."""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class TransactionCode(StrEnum):
    EXTERNALLY_INITIATED_DEBIT = "13"
    EXTERNALLY_INITIATED_CREDIT = "50"
    AUSTRALIAN_GOVERNMENT_SECURITY_INTEREST = "51"
    FAMILY_ALLOWANCE = "52"
    PAYROLL_PAYMENT = "53"
    PENSION_PAYMENT = "54"
    ALLOTMENT = "55"
    DIVIDEND = "56"
    DEBENTURE_OR_NOTE_INTEREST = "57"

    @property
    def is_debit(self) -> bool:
        """Only an externally initiated debit counts towards the debit total."""
        return self is TransactionCode.EXTERNALLY_INITIATED_DEBIT

    @classmethod
    def lookup(cls, value: Any) -> TransactionCode | None:
        """Return the member for a code such as ``"53"``, or None if unknown."""
        if value is None or isinstance(value, bool):
            return None
        try:
            return cls(str(value))
        except ValueError:
            return None
