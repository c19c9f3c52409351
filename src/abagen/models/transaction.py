"""Transaction value object, a ready-made ITransaction implementation.

Field types are loose: the generator's validator owns the
ABA content rules, so an out-of-range value here is reported as a
DetailValidationError at generation time rather than rejected on construction.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class Transaction(BaseModel):
    """Single direct-entry payment or debit instruction."""

    account_name: str
    account_number: str
    bsb: str
    amount: int  # cents
    transaction_code: str
    reference: str = ""
    indicator: Optional[str] = None  # W, X, Y or blank
    remitter: Optional[str] = None  # falls back to the file remitter
    tax_withholding: int = 0  # cents

    model_config = {"frozen": True}
