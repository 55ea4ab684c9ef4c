"""Machine-readable results of a check run."""

from __future__ import annotations

from pydantic import BaseModel

from xmlindent.models.resource import Resource
from xmlindent.models.violation import Violation


class FileReport(BaseModel):
    """Violations found in one file."""

    path: str
    violations: list[Violation] = []


class LintReport(BaseModel):
    """Result of checking a set of files."""

    files_checked: int = 0
    files: list[FileReport] = []

    @property
    def total_violations(self) -> int:
        return sum(len(f.violations) for f in self.files)

    @property
    def clean(self) -> bool:
        return self.total_violations == 0

    @classmethod
    def from_violations(
        cls, files_checked: int, violations: dict[Resource, list[Violation]]
    ) -> LintReport:
        files = [
            FileReport(path=str(resource), violations=found)
            for resource, found in sorted(violations.items(), key=lambda item: str(item[0]))
        ]
        return cls(files_checked=files_checked, files=files)
