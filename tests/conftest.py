"""Shared fixtures: a valid originator header and transaction builders."""

from __future__ import annotations

from datetime import date
from types import SimpleNamespace

import pytest

from abagen.models.header import FileHeader
from abagen.models.transaction import Transaction

PROCESSING_DATE = date(2024, 1, 15)


@pytest.fixture
def header() -> FileHeader:
    return FileHeader(
        bsb="123-456",
        account_number="123456789",
        bank_name="ABC",
        user_name="TEST USER",
        remitter="TEST REMITTER",
        direct_entry_id="123456",
        description="PAYROLL",
        processing_date=PROCESSING_DATE,
    )


@pytest.fixture
def make_transaction():
    """Build a valid payroll Transaction, overriding any field."""

    def _make(**overrides) -> Transaction:
        fields = {
            "account_name": "JOHN SMITH",
            "account_number": "987654321",
            "bsb": "654-321",
            "amount": 1000,
            "transaction_code": "53",
            "reference": "SALARY",
        }
        fields.update(overrides)
        return Transaction(**fields)

    return _make


@pytest.fixture
def make_plain_transaction():
    """Duck-typed transaction with no model validation at all."""

    def _make(**overrides) -> SimpleNamespace:
        fields = {
            "account_name": "JANE CITIZEN",
            "account_number": "11223344",
            "bsb": "082-001",
            "amount": "2500",
            "indicator": None,
            "transaction_code": "50",
            "reference": "INV 1001",
            "remitter": None,
            "tax_withholding": "0",
        }
        fields.update(overrides)
        return SimpleNamespace(**fields)

    return _make
