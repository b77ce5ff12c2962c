"""Lint report models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class LintSeverity(str, Enum):
    """Severity of a lint finding."""

    ERROR = "error"
    WARNING = "warning"


class LintIssue(BaseModel):
    """A single structural problem in the corpus."""

    rule: str
    severity: LintSeverity
    path: str
    line: int | None = None
    message: str

    def format(self) -> str:
        location = f"{self.path}:{self.line}" if self.line else self.path
        return f"{location}: {self.severity.value} [{self.rule}] {self.message}"


class LintReport(BaseModel):
    """Outcome of linting a corpus."""

    docs_path: str
    files_checked: int = 0
    issues: list[LintIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def errors(self) -> list[LintIssue]:
        return [issue for issue in self.issues if issue.severity is LintSeverity.ERROR]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def warnings(self) -> list[LintIssue]:
        return [issue for issue in self.issues if issue.severity is LintSeverity.WARNING]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def ok(self) -> bool:
        return not self.errors

    def by_path(self) -> dict[str, list[LintIssue]]:
        grouped: dict[str, list[LintIssue]] = {}
        for issue in self.issues:
            grouped.setdefault(issue.path, []).append(issue)
        return grouped
