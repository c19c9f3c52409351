"""Field checks for descriptive-record inputs and transactions.

Validation is pure: inputs are only read, and the first broken rule is
raised as a HeaderValidationError or DetailValidationError carrying the
field name, the offending value and the expected format.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from abagen.core.exceptions import DetailValidationError, HeaderValidationError
from abagen.core.protocols import ITransaction
from abagen.core.types import Cents
from abagen.generator.schema import DIGITS, FieldRule, RecordType, field_rule
from abagen.models.header import FileHeader
from abagen.models.transaction_code import TransactionCode

TRANSACTION_ATTRIBUTES = (
    "account_name",
    "account_number",
    "bsb",
    "amount",
    "indicator",
    "transaction_code",
    "reference",
    "remitter",
    "tax_withholding",
)

# Checked in this order after the BSB.
_HEADER_FIELDS = ("account_number", "bank_name", "user_name", "direct_entry_id", "description")


def is_bsb(value: Any) -> bool:
    """True for ``NNN-NNN``."""
    if not isinstance(value, str) or len(value) != 7 or value[3] != "-":
        return False
    return set(value[:3] + value[4:]) <= DIGITS


def fits(rule: FieldRule, value: str) -> bool:
    """Length and character-class check of ``value`` against a column rule."""
    if len(value) > rule.width:
        return False
    if rule.exact and len(value) != rule.width:
        return False
    if rule.required and not value:
        return False
    return rule.charset is None or set(value) <= rule.charset


def _cents_text(value: Any) -> str | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value
    return None


def cents(value: Any) -> Cents:
    """Integer cents from an int or a decimal-digit string. None counts as zero."""
    if value is None:
        return 0
    text = _cents_text(value)
    if text is None or not text or not set(text) <= DIGITS:
        raise ValueError(f"Not an unsigned amount in cents: {value!r}")
    return int(text)


def as_batch(transactions: Any) -> list[Any]:
    """A single transaction (or any non-sequence) becomes a one-element batch."""
    if isinstance(transactions, (ITransaction, str, bytes, Mapping)) or not isinstance(transactions, Iterable):
        return [transactions]
    return list(transactions)


def validate_header(header: FileHeader) -> None:
    """Check every schema-governed descriptive record field.

    The header remitter is not checked here; it only matters when a
    transaction falls back to it, and its width is enforced on render.

    Raises:
        HeaderValidationError: on the first field that breaks its rule.
    """
    bsb_rule = field_rule(RecordType.DESCRIPTIVE, "bsb")
    if not is_bsb(header.bsb):
        raise HeaderValidationError("bsb", header.bsb, bsb_rule.expected)

    for name in _HEADER_FIELDS:
        value = getattr(header, name)
        rule = field_rule(RecordType.DESCRIPTIVE, name)
        if not isinstance(value, str) or not fits(rule, value):
            raise HeaderValidationError(name, value, rule.expected)


def validate_trace(header: FileHeader) -> None:
    """Check the file identity written into every detail record's trace fields.

    Raises:
        HeaderValidationError: if the header BSB or account number is invalid.
    """
    if not is_bsb(header.bsb):
        raise HeaderValidationError("bsb", header.bsb, field_rule(RecordType.DETAIL, "trace_bsb").expected)

    rule = field_rule(RecordType.DETAIL, "trace_account_number")
    if not isinstance(header.account_number, str) or not fits(rule, header.account_number):
        raise HeaderValidationError("account_number", header.account_number, rule.expected)


def validate_transaction(transaction: Any, *, index: int | None = None) -> None:
    """Check one transaction against the detail record rules.

    ``index`` is the transaction's position in its batch and is only used
    to label the error.

    Raises:
        DetailValidationError: on the first field that breaks its rule, or if
            the object does not expose the ITransaction attributes at all.
    """
    if not isinstance(transaction, ITransaction):
        raise DetailValidationError(
            "transaction",
            type(transaction).__name__,
            "Transactions must provide " + ", ".join(TRANSACTION_ATTRIBUTES) + ".",
            index=index,
        )

    def invalid(name: str, value: Any) -> DetailValidationError:
        return DetailValidationError(
            name, value, field_rule(RecordType.DETAIL, name).expected, index=index
        )

    def check_text(name: str, value: Any) -> None:
        if not isinstance(value, str) or not fits(field_rule(RecordType.DETAIL, name), value):
            raise invalid(name, value)

    def check_cents(name: str, value: Any) -> None:
        text = _cents_text(value)
        if text is None or not fits(field_rule(RecordType.DETAIL, name), text):
            raise invalid(name, value)

    if not is_bsb(transaction.bsb):
        raise invalid("bsb", transaction.bsb)

    check_text("account_number", transaction.account_number)

    # None, "" and " " all mean "no indicator"
    if transaction.indicator:
        check_text("indicator", transaction.indicator)

    check_cents("amount", transaction.amount)
    check_text("account_name", transaction.account_name)
    check_text("reference", transaction.reference)

    if transaction.remitter:
        check_text("remitter", transaction.remitter)

    if TransactionCode.lookup(transaction.transaction_code) is None:
        raise invalid("transaction_code", transaction.transaction_code)

    if transaction.tax_withholding is not None:
        check_cents("tax_withholding", transaction.tax_withholding)


def find_invalid_transactions(transactions: Iterable[Any] | ITransaction) -> list[DetailValidationError]:
    """Pre-flight a whole batch, collecting one error per invalid transaction."""
    errors = []
    for index, transaction in enumerate(as_batch(transactions)):
        try:
            validate_transaction(transaction, index=index)
        except DetailValidationError as exc:
            errors.append(exc)
    return errors
