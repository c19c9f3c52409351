"""Protocol interfaces for abagen inputs.

Structural typing: any object exposing these attributes can be encoded,
no inheritance required.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from abagen.core.types import AccountNumber, BsbCode, CentsLike


@runtime_checkable
class ITransaction(Protocol):
    """Read-only view of one direct-entry transaction."""

    @property
    def account_name(self) -> str: ...

    @property
    def account_number(self) -> AccountNumber: ...

    @property
    def bsb(self) -> BsbCode: ...

    @property
    def amount(self) -> CentsLike: ...

    @property
    def indicator(self) -> str | None: ...

    @property
    def transaction_code(self) -> str: ...

    @property
    def reference(self) -> str: ...

    @property
    def remitter(self) -> str | None: ...

    @property
    def tax_withholding(self) -> CentsLike: ...
