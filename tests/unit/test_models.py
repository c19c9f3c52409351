"""Tests for FileHeader, Transaction and RunningTotals."""

from __future__ import annotations

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from abagen.core.config import AbaSettings
from abagen.core.protocols import ITransaction
from abagen.models.header import FileHeader, normalize_processing_date
from abagen.models.totals import RunningTotals
from abagen.models.transaction_code import TransactionCode


class TestProcessingDate:
    def test_date_kept(self):
        assert normalize_processing_date(date(2024, 2, 29)) == date(2024, 2, 29)

    def test_datetime_truncated(self):
        assert normalize_processing_date(datetime(2024, 3, 1, 17, 45)) == date(2024, 3, 1)

    def test_timestamp_uses_local_date(self):
        ts = 1705320000
        assert normalize_processing_date(ts) == datetime.fromtimestamp(ts).date()

    def test_digit_string_is_timestamp(self):
        ts = 1705320000
        assert normalize_processing_date(str(ts)) == datetime.fromtimestamp(ts).date()

    def test_iso_strings(self):
        assert normalize_processing_date("2024-06-30") == date(2024, 6, 30)
        assert normalize_processing_date("2024-06-30T23:59:00") == date(2024, 6, 30)

    def test_unparseable_string_rejected_by_model(self, header):
        with pytest.raises(ValidationError):
            header.with_processing_date("next tuesday")

    @pytest.mark.parametrize("value", [10**20, str(10**20)])
    def test_out_of_range_timestamp_rejected_by_model(self, header, value):
        with pytest.raises(ValidationError):
            header.with_processing_date(value)


class TestFileHeader:
    def test_defaults_to_today_and_account_included(self):
        header = FileHeader(
            bsb="123-456", account_number="1", bank_name="ABC", user_name="A",
            remitter="B", direct_entry_id="123456", description="C",
        )
        assert header.processing_date == date.today()
        assert header.include_account_number is True

    def test_is_immutable(self, header):
        with pytest.raises(ValidationError):
            header.bsb = "999-999"

    def test_with_processing_date_returns_normalized_copy(self, header):
        moved = header.with_processing_date(datetime(2025, 7, 1, 9, 30))
        assert moved.processing_date == date(2025, 7, 1)
        assert header.processing_date == date(2024, 1, 15)

    def test_with_account_number(self, header):
        assert header.with_account_number(False).include_account_number is False

    def test_from_settings_with_overrides(self):
        settings = AbaSettings(
            bsb="062-000", account_number="12345678", bank_name="CBA",
            user_name="ACME PTY LTD", remitter="ACME", direct_entry_id="301500",
        )
        header = FileHeader.from_settings(settings, processing_date=date(2024, 5, 1))
        assert header.bank_name == "CBA"
        assert header.description == "Payroll"
        assert header.processing_date == date(2024, 5, 1)


class TestTransaction:
    def test_satisfies_protocol(self, make_transaction):
        assert isinstance(make_transaction(), ITransaction)

    def test_optional_fields_default(self, make_transaction):
        txn = make_transaction()
        assert txn.indicator is None
        assert txn.remitter is None
        assert txn.tax_withholding == 0

    def test_plain_object_satisfies_protocol(self, make_plain_transaction):
        assert isinstance(make_plain_transaction(), ITransaction)

    def test_missing_attribute_fails_protocol(self, make_plain_transaction):
        txn = make_plain_transaction()
        del txn.tax_withholding
        assert not isinstance(txn, ITransaction)


class TestRunningTotals:
    def test_starts_at_zero(self):
        totals = RunningTotals()
        assert (totals.credit_total, totals.debit_total, totals.record_count, totals.net_total) == (0, 0, 0, 0)

    def test_debit_code_goes_to_debit_total(self):
        totals = RunningTotals()
        totals.add(500, TransactionCode.EXTERNALLY_INITIATED_DEBIT)
        totals.add(2000, TransactionCode.PAYROLL_PAYMENT)
        totals.add(300, TransactionCode.DIVIDEND)
        assert totals.debit_total == 500
        assert totals.credit_total == 2300
        assert totals.record_count == 3

    def test_net_total_is_absolute(self):
        totals = RunningTotals()
        totals.add(5000, TransactionCode.EXTERNALLY_INITIATED_DEBIT)
        totals.add(1200, TransactionCode.EXTERNALLY_INITIATED_CREDIT)
        assert totals.net_total == 3800
