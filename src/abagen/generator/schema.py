"""Fixed-width layouts of the three ABA record types.

Every record is 120 columns. Fields are listed in column order; both the
validator (widths, character classes) and the encoder (padding) read the
same rules, so a column width is only ever declared here.
"""

from __future__ import annotations

import string
from enum import StrEnum
from typing import Mapping, Optional

from pydantic import BaseModel

from abagen.core.exceptions import FieldOverflowError

RECORD_WIDTH = 120
LINE_SEPARATOR = "\r\n"

# Character classes. Whitespace is the space character only.
DIGITS = frozenset(string.digits)
UPPERCASE = frozenset(string.ascii_uppercase)
LETTERS_SPACE = frozenset(string.ascii_letters + " ")
LETTERS_SPACE_PLUS = frozenset(string.ascii_letters + " +")
ALPHANUMERIC_SPACE_PLUS = frozenset(string.ascii_letters + string.digits + " +")
PRINTABLE = frozenset(chr(c) for c in range(0x20, 0x7F))
INDICATORS = frozenset("WXY ")


class RecordType(StrEnum):
    DESCRIPTIVE = "0"
    DETAIL = "1"
    BATCH_CONTROL = "7"


class Pad(StrEnum):
    LEFT = "left"  # right-justified, e.g. amounts
    RIGHT = "right"  # left-justified, e.g. names


class FieldRule(BaseModel):
    """Column definition for one field of a record."""

    name: str
    width: int
    pad: Pad = Pad.RIGHT
    fill: str = " "
    literal: Optional[str] = None  # fixed content, never caller-supplied
    charset: Optional[frozenset[str]] = None
    exact: bool = False  # value must fill the whole column
    required: bool = False
    expected: str = ""

    model_config = {"frozen": True}


def _literal(name: str, value: str) -> FieldRule:
    return FieldRule(name=name, width=len(value), literal=value)


def _blank(name: str, width: int) -> FieldRule:
    return FieldRule(name=name, width=width, literal=" " * width)


_BSB_EXPECTED = "Required format is 000-000."
_ACCOUNT_EXPECTED = "Must be up to 9 digits only."

DESCRIPTIVE_RECORD: tuple[FieldRule, ...] = (
    _literal("record_type", RecordType.DESCRIPTIVE.value),
    FieldRule(name="bsb", width=7, exact=True, expected=_BSB_EXPECTED),
    FieldRule(name="account_number", width=9, pad=Pad.LEFT, charset=DIGITS, expected=_ACCOUNT_EXPECTED),
    _blank("account_reserved", 1),
    _literal("sequence_number", "01"),
    FieldRule(
        name="bank_name", width=3, exact=True, charset=UPPERCASE,
        expected="Must be capital letter abbreviation of length 3.",
    ),
    _blank("reserved_1", 7),
    FieldRule(
        name="user_name", width=26, charset=LETTERS_SPACE_PLUS,
        expected="Must be letters only and up to 26 characters long.",
    ),
    FieldRule(
        name="direct_entry_id", width=6, exact=True, charset=DIGITS,
        expected="Must be 6 digits long.",
    ),
    FieldRule(
        name="description", width=12, charset=LETTERS_SPACE,
        expected="Must be letters only and up to 12 characters long.",
    ),
    FieldRule(name="processing_date", width=6, exact=True, charset=DIGITS, expected="DDMMYY."),
    _blank("reserved_2", 40),
)

DETAIL_RECORD: tuple[FieldRule, ...] = (
    _literal("record_type", RecordType.DETAIL.value),
    FieldRule(name="bsb", width=7, exact=True, expected=_BSB_EXPECTED),
    FieldRule(name="account_number", width=9, pad=Pad.LEFT, charset=DIGITS, expected=_ACCOUNT_EXPECTED),
    FieldRule(
        name="indicator", width=1, charset=INDICATORS,
        expected="Must be one of W, X, Y or blank.",
    ),
    FieldRule(
        name="transaction_code", width=2, exact=True, charset=DIGITS,
        expected="Must be a TransactionCode value.",
    ),
    FieldRule(
        name="amount", width=10, pad=Pad.LEFT, fill="0", charset=DIGITS, required=True,
        expected="Must be expressed in cents, as an unsigned integer, no longer than 10 digits.",
    ),
    FieldRule(
        name="account_name", width=32, charset=PRINTABLE,
        expected="Cannot exceed 32 printable characters.",
    ),
    FieldRule(
        name="reference", width=18, charset=ALPHANUMERIC_SPACE_PLUS,
        expected="Must be letters or numbers only and up to 18 characters long.",
    ),
    FieldRule(name="trace_bsb", width=7, exact=True, expected=_BSB_EXPECTED),
    FieldRule(name="trace_account_number", width=9, pad=Pad.LEFT, charset=DIGITS, expected=_ACCOUNT_EXPECTED),
    FieldRule(
        name="remitter", width=16, charset=LETTERS_SPACE_PLUS,
        expected="Must be letters only and up to 16 characters long.",
    ),
    FieldRule(
        name="tax_withholding", width=8, pad=Pad.LEFT, fill="0", charset=DIGITS, required=True,
        expected="Must be expressed in cents, as an unsigned integer, no longer than 8 digits.",
    ),
)

BATCH_CONTROL_RECORD: tuple[FieldRule, ...] = (
    _literal("record_type", RecordType.BATCH_CONTROL.value),
    _literal("bsb", "999-999"),
    _blank("reserved_1", 12),
    FieldRule(name="net_total", width=10, pad=Pad.LEFT, fill="0", charset=DIGITS),
    FieldRule(name="credit_total", width=10, pad=Pad.LEFT, fill="0", charset=DIGITS),
    FieldRule(name="debit_total", width=10, pad=Pad.LEFT, fill="0", charset=DIGITS),
    _blank("reserved_2", 24),
    FieldRule(name="record_count", width=6, pad=Pad.LEFT, fill="0", charset=DIGITS),
    _blank("reserved_3", 40),
)

LAYOUTS: dict[RecordType, tuple[FieldRule, ...]] = {
    RecordType.DESCRIPTIVE: DESCRIPTIVE_RECORD,
    RecordType.DETAIL: DETAIL_RECORD,
    RecordType.BATCH_CONTROL: BATCH_CONTROL_RECORD,
}

_RULES: dict[RecordType, dict[str, FieldRule]] = {
    record_type: {rule.name: rule for rule in layout} for record_type, layout in LAYOUTS.items()
}


def field_rule(record_type: RecordType, name: str) -> FieldRule:
    """Look up a single field rule, e.g. ``field_rule(RecordType.DETAIL, "amount")``."""
    return _RULES[record_type][name]


def pad_field(rule: FieldRule, value: str, record_type: RecordType | str = "") -> str:
    """Pad ``value`` to the rule's width. Over-wide values raise, never truncate."""
    if len(value) > rule.width:
        raise FieldOverflowError(str(record_type), rule.name, value, rule.width)
    if rule.pad == Pad.LEFT:
        return value.rjust(rule.width, rule.fill)
    return value.ljust(rule.width, rule.fill)


def render_record(record_type: RecordType, values: Mapping[str, str]) -> str:
    """Lay out one 120-column line; fields missing from ``values`` render blank."""
    parts = []
    for rule in LAYOUTS[record_type]:
        value = rule.literal if rule.literal is not None else values.get(rule.name, "")
        parts.append(pad_field(rule, value, record_type))
    return "".join(parts)
