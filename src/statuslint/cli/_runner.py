from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from statuslint.cli._files import discover_files
from statuslint.core.linter import check_source, fix_source

if TYPE_CHECKING:
    from statuslint.core.config import StatuslintConfig
    from statuslint.core.diagnostic import Diagnostic
    from statuslint.core.status_table import StatusCodeTable


@dataclass
class CheckResult:
    path: str
    diagnostics: list[Diagnostic] = field(default_factory=list)
    corrected: int = 0
    error: str | None = None

    @property
    def remaining(self) -> list[Diagnostic]:
        """Diagnostics still present after corrections were written."""
        if not self.corrected:
            return self.diagnostics
        return [d for d in self.diagnostics if not d.correctable]


@dataclass
class CheckReport:
    style: str
    results: list[CheckResult] = field(default_factory=list)

    @property
    def all_diagnostics(self) -> list[Diagnostic]:
        dd: list[Diagnostic] = []
        for r in self.results:
            dd.extend(r.diagnostics)
        return dd

    @property
    def remaining(self) -> list[Diagnostic]:
        dd: list[Diagnostic] = []
        for r in self.results:
            dd.extend(r.remaining)
        return dd

    @property
    def corrected(self) -> int:
        return sum(r.corrected for r in self.results)


def _check_file(
    path: str,
    *,
    config: StatuslintConfig,
    table: StatusCodeTable | None,
    fix: bool,
) -> CheckResult:
    result = CheckResult(path=path)
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        result.error = str(exc)
        return result

    if not fix:
        result.diagnostics = check_source(text, config=config, table=table, path=path)
        return result

    fixed, diagnostics = fix_source(text, config=config, table=table, path=path)
    result.diagnostics = diagnostics
    if fixed != text:
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(fixed)
        except OSError as exc:
            result.error = str(exc)
            return result
        result.corrected = sum(1 for d in diagnostics if d.correctable)
    return result


def run_check(
    paths: tuple[str, ...],
    *,
    config: StatuslintConfig,
    table: StatusCodeTable | None = None,
    fix: bool = False,
) -> CheckReport:
    """Check every file under *paths* and return a report.

    With ``fix=True`` correctable offenses are rewritten in place.
    """
    report = CheckReport(style=str(config.enforced_style))
    for path in discover_files(paths, config):
        report.results.append(_check_file(str(path), config=config, table=table, fix=fix))
    return report
