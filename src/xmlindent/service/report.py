"""Human-readable rendering of a LintReport."""

from __future__ import annotations

from xmlindent.models.report import LintReport


def render_text(report: LintReport) -> str:
    """One ``path:line:column: message`` line per violation, then a summary line."""
    lines = [
        f"{file.path}:{violation.location}: {violation.message}"
        for file in report.files
        for violation in file.violations
    ]
    if report.clean:
        lines.append(f"{report.files_checked} file(s) checked, no indentation violations")
    else:
        lines.append(
            f"{report.files_checked} file(s) checked, "
            f"{report.total_violations} violation(s) in {len(report.files)} file(s)"
        )
    return "\n".join(lines)
