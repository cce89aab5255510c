from importlib.metadata import version

from statuslint.checks.http_status import HttpStatusCheck
from statuslint.checks.styles import (
    WHITELIST_STATUS,
    NumericStyleChecker,
    StyleChecker,
    SymbolicStyleChecker,
    checker_for,
)
from statuslint.core._types import LiteralKind, Severity, Style
from statuslint.core.config import ConfigError, StatuslintConfig, load_config
from statuslint.core.diagnostic import Correction, Diagnostic, StatusStyleError
from statuslint.core.linter import check_source, fix_source
from statuslint.core.nodes import ArgumentNode, CallNode, Span
from statuslint.core.rule import Rule
from statuslint.core.status_table import (
    StatusCodeTable,
    TableUnavailableError,
    load_table,
    symbol_literal,
)

__version__ = version("statuslint")


__all__ = [
    "WHITELIST_STATUS",
    "ArgumentNode",
    "CallNode",
    "ConfigError",
    "Correction",
    "Diagnostic",
    "HttpStatusCheck",
    "LiteralKind",
    "NumericStyleChecker",
    "Rule",
    "Severity",
    "Span",
    "StatusCodeTable",
    "StatusStyleError",
    "StatuslintConfig",
    "Style",
    "StyleChecker",
    "SymbolicStyleChecker",
    "TableUnavailableError",
    "__version__",
    "check_source",
    "checker_for",
    "fix_source",
    "load_config",
    "load_table",
    "symbol_literal",
]
