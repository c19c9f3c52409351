"""Descriptive record inputs: who is sending the batch and when."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from abagen.core.config import AbaSettings
from abagen.core.types import AccountNumber, BsbCode


def _from_timestamp(value: Any) -> Any:
    try:
        return datetime.fromtimestamp(value).date()
    except (OverflowError, OSError, ValueError):
        return value


def normalize_processing_date(value: Any) -> Any:
    """Reduce timestamps, datetimes and date strings to a calendar date.

    Numbers and all-digit strings are POSIX timestamps in local time.
    Anything unrecognised is passed through for pydantic to reject.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _from_timestamp(value)
    if isinstance(value, str):
        text = value.strip()
        if text.isdigit():
            return _from_timestamp(int(text))
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return value
    return value


class FileHeader(BaseModel):
    """File-level fields shared by the descriptive record and every trace field."""

    bsb: BsbCode
    account_number: AccountNumber
    bank_name: str
    user_name: str
    remitter: str
    direct_entry_id: str
    description: str
    processing_date: date = Field(default_factory=date.today)
    include_account_number: bool = True

    model_config = {"frozen": True}

    @field_validator("processing_date", mode="before")
    @classmethod
    def _coerce_processing_date(cls, value: Any) -> Any:
        return normalize_processing_date(value)

    @classmethod
    def from_settings(cls, settings: AbaSettings, **overrides: Any) -> FileHeader:
        """Build a header from environment settings, with per-file overrides."""
        fields: dict[str, Any] = {
            "bsb": settings.bsb,
            "account_number": settings.account_number,
            "bank_name": settings.bank_name,
            "user_name": settings.user_name,
            "remitter": settings.remitter,
            "direct_entry_id": settings.direct_entry_id,
            "description": settings.description,
            "include_account_number": settings.include_account_number,
        }
        fields.update(overrides)
        return cls.model_validate(fields)

    def with_processing_date(self, value: date | datetime | int | float | str) -> FileHeader:
        """Return a copy released on a different processing date."""
        return self._replace(processing_date=value)

    def with_account_number(self, include: bool) -> FileHeader:
        """Return a copy that does (or does not) embed BSB/account in the header.

        Some banks require these 17 columns to be blank.
        """
        return self._replace(include_account_number=include)

    def _replace(self, **changes: Any) -> FileHeader:
        # model_copy skips validators, so re-validate to keep dates normalized
        return type(self).model_validate({**self.model_dump(), **changes})
