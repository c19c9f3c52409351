"""AbaFileGenerator: descriptive record, detail records, batch control record.

An instance holds only the immutable FileHeader. Totals live in a
RunningTotals created per ``generate`` call, so one generator can build any
number of files.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from abagen.core.exceptions import DetailValidationError
from abagen.core.protocols import ITransaction
from abagen.generator.schema import LINE_SEPARATOR, RecordType, render_record
from abagen.generator.validator import (
    as_batch,
    cents,
    validate_header,
    validate_trace,
    validate_transaction,
)
from abagen.models.header import FileHeader
from abagen.models.totals import RunningTotals
from abagen.models.transaction_code import TransactionCode

logger = logging.getLogger(__name__)

PROCESSING_DATE_FORMAT = "%d%m%y"


class AbaFileGenerator:
    """Encodes one originator's transactions as an ABA direct-entry file."""

    def __init__(self, header: FileHeader) -> None:
        self._header = header

    @property
    def header(self) -> FileHeader:
        return self._header

    def descriptive_record(self) -> str:
        """Validate the header and render the type 0 line."""
        header = self._header
        validate_header(header)

        values = {
            "bank_name": header.bank_name,
            "user_name": header.user_name,
            "direct_entry_id": header.direct_entry_id,
            "description": header.description,
            "processing_date": header.processing_date.strftime(PROCESSING_DATE_FORMAT),
        }
        if header.include_account_number:
            values["bsb"] = header.bsb
            values["account_number"] = header.account_number

        return render_record(RecordType.DESCRIPTIVE, values)

    def detail_record(self, transaction: ITransaction, *, index: int | None = None) -> str:
        """Validate one transaction and render its type 1 line.

        Trace BSB and account are always the file's own, not the payee's.
        """
        validate_trace(self._header)
        validate_transaction(transaction, index=index)

        return render_record(
            RecordType.DETAIL,
            {
                "bsb": transaction.bsb,
                "account_number": transaction.account_number,
                "indicator": transaction.indicator or " ",
                "transaction_code": str(TransactionCode.lookup(transaction.transaction_code)),
                "amount": str(cents(transaction.amount)),
                "account_name": transaction.account_name,
                "reference": transaction.reference,
                "trace_bsb": self._header.bsb,
                "trace_account_number": self._header.account_number,
                "remitter": transaction.remitter or self._header.remitter,
                "tax_withholding": str(cents(transaction.tax_withholding)),
            },
        )

    def batch_control_record(self, totals: RunningTotals | None = None) -> str:
        """Render the type 7 trailer. With no totals, an empty batch is assumed."""
        if totals is None:
            totals = RunningTotals()
        return render_record(
            RecordType.BATCH_CONTROL,
            {
                "net_total": str(totals.net_total),
                "credit_total": str(totals.credit_total),
                "debit_total": str(totals.debit_total),
                "record_count": str(totals.record_count),
            },
        )

    def generate(self, transactions: Iterable[ITransaction] | ITransaction | Any) -> str:
        """Build the complete file.

        Lines are CRLF-separated with no separator after the trailer.

        Raises:
            HeaderValidationError: if the header is invalid.
            DetailValidationError: on the first invalid transaction.
            FieldOverflowError: if a value or total does not fit its column.
        """
        batch = as_batch(transactions)
        totals = RunningTotals()

        lines = [self.descriptive_record()]
        logger.debug("Descriptive record built, %d transactions to encode", len(batch))

        for index, transaction in enumerate(batch):
            try:
                lines.append(self.detail_record(transaction, index=index))
            except DetailValidationError as exc:
                logger.warning("Rejected transaction #%d: invalid %s", index, exc.field)
                raise
            totals.add(cents(transaction.amount), TransactionCode.lookup(transaction.transaction_code))

        lines.append(self.batch_control_record(totals))
        logger.info(
            "ABA file generated: %d records, credits=%d debits=%d net=%d",
            totals.record_count,
            totals.credit_total,
            totals.debit_total,
            totals.net_total,
        )
        return LINE_SEPARATOR.join(lines)
