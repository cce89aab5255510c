from __future__ import annotations

import json
import os
from typing import TYPE_CHECKING

from statuslint import __version__
from statuslint.core._types import Severity
from statuslint.core.status_table import symbol_literal

if TYPE_CHECKING:
    from statuslint.cli._runner import CheckReport
    from statuslint.core.diagnostic import Diagnostic
    from statuslint.core.rule import Rule
    from statuslint.core.status_table import StatusCodeTable

_SEVERITY_COLORS: dict[Severity, str] = {
    Severity.ERROR: "\033[31m",  # red
    Severity.WARNING: "\033[33m",  # yellow
    Severity.CONVENTION: "\033[36m",  # cyan
}
_GREEN = "\033[32m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_RESET = "\033[0m"


def _use_color(no_color_flag: bool) -> bool:
    if no_color_flag:
        return False
    return not os.environ.get("NO_COLOR", "")


def _c(text: str, code: str, *, color: bool) -> str:
    if not color:
        return text
    return f"{code}{text}{_RESET}"


def format_text(report: CheckReport, *, no_color: bool = False) -> str:
    color = _use_color(no_color)
    lines: list[str] = []
    w = lines.append

    w(f"statuslint {__version__} (enforced style: {report.style})")
    w("")

    for result in report.results:
        if result.error:
            err = _c("ERROR", "\033[31m", color=color)
            w(f"{result.path}: {err}: {result.error}")
            continue
        for d in result.diagnostics:
            location = _c(f"{result.path}:{d.line}:{d.column}", _BOLD, color=color)
            sev = _c(d.severity[0].upper(), _SEVERITY_COLORS.get(d.severity, ""), color=color)
            tag = "[Corrected] " if result.corrected and d.correctable else ""
            w(f"{location}: {sev}: {tag}[{d.rule_id}] {d.message}")
            w(_c(f"    {d.node.source}", _DIM, color=color))

    if lines[-1]:
        w("")
    w(_summary_line(report, color=color))
    return "\n".join(lines)


def _summary_line(report: CheckReport, *, color: bool) -> str:
    files = len(report.results)
    file_noun = "file" if files == 1 else "files"
    total = len(report.all_diagnostics)
    if total == 0:
        return _c(f"{files} {file_noun} inspected, no offenses detected.", _GREEN, color=color)
    noun = "offense" if total == 1 else "offenses"
    line = f"{files} {file_noun} inspected, {total} {noun} detected"
    if report.corrected:
        line += f", {report.corrected} corrected"
    correctable = sum(1 for d in report.remaining if d.correctable)
    if correctable:
        line += f", {correctable} autocorrectable"
    return line + "."


def _diagnostic_json(d: Diagnostic) -> dict[str, object]:
    return {
        "rule_id": d.rule_id,
        "severity": str(d.severity),
        "message": d.message,
        "path": d.path,
        "line": d.line,
        "column": d.column,
        "source": d.node.source,
        "replacement": d.replacement,
    }


def format_json(report: CheckReport) -> str:
    data = {
        "version": __version__,
        "style": report.style,
        "files": [
            {
                "path": r.path,
                "error": r.error,
                "corrected": r.corrected,
                "offenses": [_diagnostic_json(d) for d in r.diagnostics],
            }
            for r in report.results
        ],
        "summary": {
            "files": len(report.results),
            "offenses": len(report.all_diagnostics),
            "corrected": report.corrected,
        },
    }
    return json.dumps(data, indent=2)


def format_codes_text(table: StatusCodeTable) -> str:
    if not table.available:
        return "HTTP status registry unavailable (install statuslint[registry])."
    lines = [f"statuslint {__version__} - {len(table)} status codes", ""]
    lines.extend(f"  {code}  {symbol_literal(symbol)}" for code, symbol in table.items())
    return "\n".join(lines)


def format_codes_json(table: StatusCodeTable) -> str:
    data = {
        "version": __version__,
        "available": table.available,
        "codes": (
            [{"code": code, "symbol": symbol} for code, symbol in table.items()]
            if table.available
            else []
        ),
    }
    return json.dumps(data, indent=2)


def format_rules_text(rules: list[Rule], *, no_color: bool = False) -> str:
    color = _use_color(no_color)
    id_w = max((len(r.id) for r in rules), default=0)
    lines = [f"statuslint {__version__} - {len(rules)} rules", ""]
    for r in rules:
        rule_id = _c(r.id.ljust(id_w), _BOLD, color=color)
        severity = _c(str(r.severity), _SEVERITY_COLORS.get(r.severity, ""), color=color)
        lines.append(f"  {rule_id}  {severity}  {r.summary}")
        if r.hint:
            lines.append(f"    hint: {r.hint}")
    return "\n".join(lines)


def format_rules_json(rules: list[Rule]) -> str:
    data = {
        "version": __version__,
        "rules": [
            {
                "id": r.id,
                "severity": str(r.severity),
                "summary": r.summary,
                "hint": r.hint,
                "layer": r.layer,
            }
            for r in rules
        ],
        "total": len(rules),
    }
    return json.dumps(data, indent=2)
