import logging

import pytest

from statuslint import check_source, fix_source
from statuslint.checks.http_status import HttpStatusCheck
from statuslint.core._types import Style
from statuslint.core.config import StatuslintConfig
from statuslint.core.diagnostic import StatusStyleError
from statuslint.core.status_table import StatusCodeTable
from statuslint.rules.http_status import HS_001
from tests.conftest import assert_diagnostic, assert_no_diagnostics

_SYMBOLIC = StatuslintConfig(enforced_style=Style.SYMBOLIC)
_NUMERIC = StatuslintConfig(enforced_style=Style.NUMERIC)

SPEC = """\
RSpec.describe "widgets", type: :request do
  it { is_expected.to have_http_status 200 }
  it { is_expected.to have_http_status :not_found }
  it { is_expected.to have_http_status :success }
  it "creates" do
    post "/widgets"
    expect(response).to have_http_status(201) # created
  end
end
"""


# --- check_source ---


def test_symbolic_style(table: StatusCodeTable) -> None:
    diagnostics = check_source(SPEC, config=_SYMBOLIC, table=table, path="w_spec.rb")
    assert [d.node.source for d in diagnostics] == ["200", "201"]
    d = assert_diagnostic(diagnostics, "Prefer `:ok` over `200` to describe HTTP status code.")
    assert (d.line, d.column) == (2, 40)
    assert d.path == "w_spec.rb"
    assert_diagnostic(diagnostics, "Prefer `:created` over `201` to describe HTTP status code.")


def test_numeric_style(table: StatusCodeTable) -> None:
    diagnostics = check_source(SPEC, config=_NUMERIC, table=table)
    assert len(diagnostics) == 1
    assert_diagnostic(diagnostics, "Prefer `404` over `:not_found` to describe HTTP status code.")


def test_numeric_whitelist_only(table: StatusCodeTable) -> None:
    text = "it { is_expected.to have_http_status :success }\n"
    assert_no_diagnostics(check_source(text, config=_NUMERIC, table=table))


@pytest.mark.parametrize("config", [_SYMBOLIC, _NUMERIC])
@pytest.mark.parametrize(
    "text",
    [
        'have_http_status("200")',
        "have_http_status(200, :extra)",
        "resource.have_http_status(200)",
        "resource.have_http_status(:ok)",
    ],
)
def test_non_matching_calls(text: str, config: StatuslintConfig, table: StatusCodeTable) -> None:
    assert_no_diagnostics(check_source(text, config=config, table=table))


@pytest.mark.parametrize(
    "text",
    [
        "expect(response).to(ok ? have_http_status(:ok) : have_http_status(404))",
        "expect(response).to match(status: have_http_status(404))",
    ],
)
def test_call_after_colon_is_checked(text: str, table: StatusCodeTable) -> None:
    diagnostics = check_source(text, config=_SYMBOLIC, table=table)
    assert len(diagnostics) == 1
    assert_diagnostic(diagnostics, "Prefer `:not_found` over `404` to describe HTTP status code.")


def test_hex_literal_is_checked(table: StatusCodeTable) -> None:
    fixed, diagnostics = fix_source("have_http_status 0x194", config=_SYMBOLIC, table=table)
    assert_diagnostic(diagnostics, "Prefer `:not_found` over `404` to describe HTTP status code.")
    assert fixed == "have_http_status :not_found"


def test_degraded_mode(unavailable_table: StatusCodeTable) -> None:
    diagnostics = check_source(SPEC, config=_SYMBOLIC, table=unavailable_table)
    assert len(diagnostics) == 2
    for d in diagnostics:
        assert d.message == "Prefer `symbolic` over `numeric` to describe HTTP status code."
        assert d.replacement is None


def test_degraded_mode_whitelist(unavailable_table: StatusCodeTable) -> None:
    text = "have_http_status(:success)"
    assert_no_diagnostics(check_source(text, config=_NUMERIC, table=unavailable_table))


def test_strict_raises(table: StatusCodeTable) -> None:
    with pytest.raises(StatusStyleError, match="2 offenses") as exc_info:
        check_source(SPEC, config=_SYMBOLIC, table=table, strict=True)
    assert len(exc_info.value.diagnostics) == 2


def test_strict_clean_source(table: StatusCodeTable) -> None:
    assert check_source("have_http_status(:ok)", table=table, strict=True) == []


def test_failing_check_is_logged_and_skipped(
    table: StatusCodeTable,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    original = HttpStatusCheck.on_call
    calls = 0

    def flaky(self, call, *, path=""):  # type: ignore[no-untyped-def]
        nonlocal calls
        calls += 1
        if calls == 1:
            raise RuntimeError("boom")
        return original(self, call, path=path)

    monkeypatch.setattr(HttpStatusCheck, "on_call", flaky)
    with caplog.at_level(logging.ERROR, logger="statuslint"):
        diagnostics = check_source(SPEC, config=_SYMBOLIC, table=table)
    assert [d.node.source for d in diagnostics] == ["201"]
    assert f"Check {HS_001.id} raised on line 2" in caplog.text


def test_diagnostics_logged_at_debug(
    table: StatusCodeTable, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.DEBUG, logger="statuslint"):
        check_source("have_http_status 404", table=table, path="a_spec.rb")
    assert "[HS-001] a_spec.rb:1:18: Prefer `:not_found` over `404`" in caplog.text


# --- fix_source ---


def test_fix_symbolic(table: StatusCodeTable) -> None:
    fixed, diagnostics = fix_source(SPEC, config=_SYMBOLIC, table=table)
    assert len(diagnostics) == 2
    assert "have_http_status :ok }" in fixed
    assert "have_http_status(:created) # created" in fixed
    assert_no_diagnostics(check_source(fixed, config=_SYMBOLIC, table=table))


def test_fix_numeric(table: StatusCodeTable) -> None:
    fixed, _ = fix_source(SPEC, config=_NUMERIC, table=table)
    assert "have_http_status 404 }" in fixed
    assert "have_http_status :success }" in fixed
    assert_no_diagnostics(check_source(fixed, config=_NUMERIC, table=table))


def test_fix_round_trip_every_code(table: StatusCodeTable) -> None:
    for code, _ in table.items():
        fixed, _ = fix_source(f"have_http_status({code})", config=_SYMBOLIC, table=table)
        assert_no_diagnostics(check_source(fixed, config=_SYMBOLIC, table=table))


def test_fix_round_trip_every_symbol(table: StatusCodeTable) -> None:
    for _, symbol in table.items():
        text = f"have_http_status :{symbol}"
        fixed, _ = fix_source(text, config=_NUMERIC, table=table)
        assert_no_diagnostics(check_source(fixed, config=_NUMERIC, table=table))


def test_fix_leaves_unresolvable(table: StatusCodeTable) -> None:
    fixed, diagnostics = fix_source("have_http_status(999)", table=table)
    assert fixed == "have_http_status(999)"
    assert len(diagnostics) == 1


def test_fix_unavailable_table_is_noop(unavailable_table: StatusCodeTable) -> None:
    fixed, diagnostics = fix_source(SPEC, table=unavailable_table)
    assert fixed == SPEC
    assert len(diagnostics) == 2
