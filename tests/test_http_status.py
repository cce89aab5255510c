import pytest

from statuslint.checks.http_status import HttpStatusCheck
from statuslint.checks.styles import NumericStyleChecker, SymbolicStyleChecker
from statuslint.core._types import Severity, Style
from statuslint.core.config import StatuslintConfig
from statuslint.core.diagnostic import Correction
from statuslint.core.status_table import StatusCodeTable
from tests.conftest import make_call

_NUMERIC = StatuslintConfig(enforced_style=Style.NUMERIC)


def test_default_style_is_symbolic(table: StatusCodeTable) -> None:
    check = HttpStatusCheck(table=table)
    assert check.config.enforced_style == Style.SYMBOLIC
    assert check.checker_class is SymbolicStyleChecker


def test_numeric_style_selects_numeric_checker(table: StatusCodeTable) -> None:
    assert HttpStatusCheck(_NUMERIC, table).checker_class is NumericStyleChecker


def test_symbolic_offense(table: StatusCodeTable) -> None:
    call = make_call("200")
    diagnostic = HttpStatusCheck(table=table).on_call(call, path="spec/a_spec.rb")
    assert diagnostic is not None
    assert diagnostic.rule_id == "HS-001"
    assert diagnostic.severity == Severity.CONVENTION
    assert diagnostic.message == "Prefer `:ok` over `200` to describe HTTP status code."
    assert diagnostic.replacement == ":ok"
    assert diagnostic.node is call.arguments[0]
    assert diagnostic.path == "spec/a_spec.rb"


def test_numeric_offense(table: StatusCodeTable) -> None:
    diagnostic = HttpStatusCheck(_NUMERIC, table).on_call(make_call(":not_found"))
    assert diagnostic is not None
    assert diagnostic.message == "Prefer `404` over `:not_found` to describe HTTP status code."
    assert diagnostic.replacement == "404"


def test_numeric_whitelist(table: StatusCodeTable) -> None:
    assert HttpStatusCheck(_NUMERIC, table).on_call(make_call(":success")) is None


@pytest.mark.parametrize("style", list(Style))
@pytest.mark.parametrize(
    "call",
    [
        make_call('"200"'),
        make_call("200", ":extra"),
        make_call(":ok", "200"),
        make_call("200", has_receiver=True),
        make_call(":ok", has_receiver=True),
    ],
)
def test_non_matching_shapes_are_silent(style, call, table: StatusCodeTable) -> None:  # type: ignore[no-untyped-def]
    check = HttpStatusCheck(StatuslintConfig(enforced_style=style), table)
    assert check.on_call(call) is None


def test_supports_autocorrect_follows_table(
    table: StatusCodeTable, unavailable_table: StatusCodeTable
) -> None:
    assert HttpStatusCheck(table=table).supports_autocorrect() is True
    assert HttpStatusCheck(table=unavailable_table).supports_autocorrect() is False


def test_autocorrect_covers_argument_span(table: StatusCodeTable) -> None:
    check = HttpStatusCheck(table=table)
    call = make_call("404")
    diagnostic = check.on_call(call)
    assert diagnostic is not None
    assert check.autocorrect(diagnostic) == Correction(call.arguments[0].span, ":not_found")


def test_degraded_mode_reports_without_correction(unavailable_table: StatusCodeTable) -> None:
    check = HttpStatusCheck(table=unavailable_table)
    diagnostic = check.on_call(make_call("200"))
    assert diagnostic is not None
    assert "`symbolic`" in diagnostic.message
    assert "`numeric`" in diagnostic.message
    assert diagnostic.replacement is None
    assert check.autocorrect(diagnostic) is None


def test_unresolvable_literal_has_no_correction(table: StatusCodeTable) -> None:
    check = HttpStatusCheck(table=table)
    diagnostic = check.on_call(make_call("999"))
    assert diagnostic is not None
    assert diagnostic.correctable is False
    assert check.autocorrect(diagnostic) is None


def test_uses_process_table_by_default() -> None:
    pytest.importorskip("starlette.status")
    diagnostic = HttpStatusCheck().on_call(make_call("404"))
    assert diagnostic is not None
    assert diagnostic.replacement == ":not_found"
