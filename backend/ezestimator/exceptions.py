"""Custom exception hierarchy for EZ Estimator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldError:
    """One rejected input field and the constraint it broke."""

    field: str
    constraint: str

    def __str__(self) -> str:
        return f"{self.field}: {self.constraint}"


class EstimatorError(Exception):
    """Base exception for all EZ Estimator errors."""


class ParameterValidationError(EstimatorError):
    """Raised when raw project input fails validation.

    ``errors`` lists every offending field, so a form can flag them all at
    once instead of one per submit.
    """

    def __init__(self, errors: list[FieldError]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))


class InputContractError(EstimatorError):
    """Raised when the engine is handed parameters that bypassed validation."""

    def __init__(self, field: str, constraint: str) -> None:
        self.field = field
        self.constraint = constraint
        super().__init__(f"{field}: {constraint}")
