from __future__ import annotations

from typing import Optional


class SolarCalcError(Exception):
    """Base error."""


class DomainError(SolarCalcError, ValueError):
    """Raised when an inverse-trigonometric stage gets an argument outside [-1, 1]."""

    def __init__(self, step: str, value: float, detail: Optional[str] = None):
        self.step = step
        self.value = value
        msg = f"{step}: argument {value!r} outside [-1, 1]"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)
