"""Application configuration using pydantic-settings with the ABA_ env prefix."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class AbaSettings(BaseSettings):
    """Originator identity used to build the descriptive record.

    Values are checked against the record schema only when a file is
    generated, not at load time.
    """

    model_config = {"env_prefix": "ABA_"}

    bsb: str = ""
    account_number: str = ""
    bank_name: str = ""  # APCA 3-letter abbreviation, e.g. "CBA"
    user_name: str = ""
    remitter: str = ""
    direct_entry_id: str = ""
    description: str = "Payroll"
    include_account_number: bool = True

    log_level: str = "INFO"
