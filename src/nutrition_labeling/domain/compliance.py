"""Domain models for label compliance checks."""

from dataclasses import dataclass
from enum import Enum


class CheckSeverity(Enum):
    """How much a failed check matters."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ComplianceStatus(Enum):
    """Overall outcome of a compliance report."""

    COMPLIANT = "compliant"
    WARNINGS = "warnings"
    ERRORS = "errors"


@dataclass(frozen=True)
class ComplianceCheck:
    """Result of one rule applied to a label."""

    rule_id: str
    rule_name: str
    passed: bool
    severity: CheckSeverity
    message: str
    cfr_reference: str | None = None


@dataclass(frozen=True)
class ComplianceReport:
    """All checks run against a label and the status they add up to."""

    checks: tuple[ComplianceCheck, ...]

    @property
    def errors_count(self) -> int:
        return self._failed_with(CheckSeverity.ERROR)

    @property
    def warnings_count(self) -> int:
        return self._failed_with(CheckSeverity.WARNING)

    @property
    def status(self) -> ComplianceStatus:
        if self.errors_count:
            return ComplianceStatus.ERRORS
        if self.warnings_count:
            return ComplianceStatus.WARNINGS
        return ComplianceStatus.COMPLIANT

    def _failed_with(self, severity: CheckSeverity) -> int:
        return sum(
            1
            for check in self.checks
            if not check.passed and check.severity is severity
        )
