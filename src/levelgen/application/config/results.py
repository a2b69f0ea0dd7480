"""Issues reported by ``validate_config`` and the CLI exit code they imply."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Errors block compilation; warnings only flag likely mistakes."""

    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """One finding against a configuration field.

    Attributes:
        severity: Whether the issue blocks compilation
        path: JSON path of the field (e.g., "rules[2].object")
        message: What is wrong
        value: Offending value, for errors that have one
        suggestion: How to silence a warning
    """

    severity: Severity
    path: str
    message: str
    value: Any = None
    suggestion: str | None = None


@dataclass
class ValidationResult:
    """Issues in the order the checks found them."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @property
    def exit_code(self) -> int:
        """0 when clean, 1 with errors, 2 with warnings only."""
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> None:
        self.issues.append(ValidationIssue(Severity.ERROR, path, message, value=value))

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> None:
        self.issues.append(
            ValidationIssue(Severity.WARNING, path, message, suggestion=suggestion)
        )
