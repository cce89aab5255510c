from statuslint.core._types import Severity
from statuslint.core.rule import Rule

_LAYER = "rspec.rails"

HS_001 = Rule(
    "HS-001",
    Severity.CONVENTION,
    "Inconsistent HTTP status notation in have_http_status",
    hint="Use the notation selected by enforced_style (symbolic or numeric)",
    layer=_LAYER,
)
