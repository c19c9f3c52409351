"""ABA file generation wired up from application settings."""

from __future__ import annotations

from typing import Any

from abagen.core.config import AbaSettings
from abagen.core.logging_config import configure_logging
from abagen.generator.aba_file import AbaFileGenerator
from abagen.models.header import FileHeader


def create_generator(settings: AbaSettings | None = None, **overrides: Any) -> AbaFileGenerator:
    """Create a generator for the originator described by ``settings``.

    Keyword overrides replace individual header fields, most commonly
    ``processing_date`` or ``description``. The package logger is set to
    ``settings.log_level``.
    """
    if settings is None:
        settings = AbaSettings()

    configure_logging(settings.log_level)

    return AbaFileGenerator(FileHeader.from_settings(settings, **overrides))


__all__ = ["AbaFileGenerator", "create_generator"]
