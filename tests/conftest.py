import pytest

from statuslint.core.diagnostic import Diagnostic
from statuslint.core.nodes import ArgumentNode, CallNode, Span
from statuslint.core.source import classify
from statuslint.core.status_table import LEGACY_ALIASES, StatusCodeTable

SAMPLE_CODES: dict[int, str] = {
    200: "ok",
    201: "created",
    204: "no_content",
    301: "moved_permanently",
    302: "found",
    400: "bad_request",
    401: "unauthorized",
    403: "forbidden",
    404: "not_found",
    413: "content_too_large",
    418: "im_a_teapot",
    422: "unprocessable_content",
    500: "internal_server_error",
    503: "service_unavailable",
}


@pytest.fixture
def table() -> StatusCodeTable:
    return StatusCodeTable(SAMPLE_CODES, LEGACY_ALIASES)


@pytest.fixture
def unavailable_table() -> StatusCodeTable:
    return StatusCodeTable.unavailable()


def make_arg(source: str, *, start: int = 17) -> ArgumentNode:
    kind, value = classify(source)
    return ArgumentNode(source, kind, value, Span(start, start + len(source), 1, start + 1))


def make_call(
    *sources: str,
    method: str = "have_http_status",
    has_receiver: bool = False,
) -> CallNode:
    """Build ``method(<sources...>)`` the way the scanner would."""
    arguments: list[ArgumentNode] = []
    offset = len(method) + 1
    for source in sources:
        arguments.append(make_arg(source, start=offset))
        offset += len(source) + 2
    return CallNode(method, has_receiver, tuple(arguments), Span(0, offset, 1, 1))


def assert_diagnostic(diagnostics: list[Diagnostic], message: str) -> Diagnostic:
    matching = [d for d in diagnostics if d.message == message]
    assert matching, f"Expected {message!r}, got: {[d.message for d in diagnostics] or 'none'}"
    return matching[0]


def assert_no_diagnostics(diagnostics: list[Diagnostic]) -> None:
    assert diagnostics == [], f"Expected no diagnostics, got: {[d.message for d in diagnostics]}"


