"""Type aliases used across abagen."""

from __future__ import annotations

Cents = int
CentsLike = int | str  # int cents or a decimal-digit string
BsbCode = str  # "NNN-NNN"
AccountNumber = str  # up to 9 digits
