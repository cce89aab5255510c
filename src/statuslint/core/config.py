from __future__ import annotations

import dataclasses
import fnmatch
import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path, PurePath
from typing import Any

from statuslint.core._types import Style


class ConfigError(ValueError):
    """Raised when a config file contains an invalid value."""


@dataclass(frozen=True)
class StatuslintConfig:
    """Configuration for statuslint.

    Can be loaded from ``.statuslint.toml`` or ``pyproject.toml
    [tool.statuslint]`` via :func:`load_config`.

    Example ``pyproject.toml``::

        [tool.statuslint]
        enforced_style = "numeric"
        exclude = ["spec/fixtures/*"]

    """

    enforced_style: Style = Style.SYMBOLIC
    """Notation required for ``have_http_status`` arguments."""

    include: frozenset[str] = frozenset({"*.rb"})
    """Glob patterns a file name must match to be checked when walking directories."""

    exclude: frozenset[str] = field(default_factory=frozenset)
    """Glob patterns of paths to skip. Matched against the full path and the file name."""

    # Compiled from ``exclude``; not part of equality, hash or repr.
    _exclude_patterns: tuple[re.Pattern[str], ...] = field(
        default=(), init=False, compare=False, hash=False, repr=False
    )

    def __post_init__(self) -> None:
        patterns = tuple(re.compile(fnmatch.translate(p)) for p in self.exclude)
        object.__setattr__(self, "_exclude_patterns", patterns)

    def includes(self, path: Path | str) -> bool:
        """Return ``True`` if *path* passes the ``include`` / ``exclude`` filters."""
        p = PurePath(path)
        if not any(fnmatch.fnmatch(p.name, pattern) for pattern in self.include):
            return False
        return not self.is_excluded(p)

    def is_excluded(self, path: Path | str) -> bool:
        p = PurePath(path)
        candidates = (p.as_posix(), p.name)
        return any(pat.match(c) for pat in self._exclude_patterns for c in candidates)


def load_config(path: Path | str | None = None) -> StatuslintConfig:
    """Load :class:`StatuslintConfig` from a TOML file.

    When ``path`` is ``None``, walks up from the current directory looking for
    ``.statuslint.toml`` first, then ``pyproject.toml [tool.statuslint]``.  A
    ``pyproject.toml`` without a ``[tool.statuslint]`` section acts as a
    project root marker and stops the search.

    Raises:
        :class:`ConfigError`: If the file is not valid TOML or contains an
            unrecognised value (e.g. ``enforced_style = "roman"``).

    """
    if path is not None:
        resolved = Path(path)
        data = _read_file(resolved) if resolved.exists() else {}
    else:
        data = _find_config()

    return _parse_config(data)


def _find_config() -> dict[str, Any]:
    """Walk up from CWD looking for a config file."""
    current = Path.cwd()
    while True:
        own_toml = current / ".statuslint.toml"
        if own_toml.exists():
            return _read_file(own_toml)

        pyproject = current / "pyproject.toml"
        if pyproject.exists():
            return _read_file(pyproject)

        parent = current.parent
        if parent == current:
            break
        current = parent

    return {}


def _read_file(path: Path) -> dict[str, Any]:
    """Read a TOML file and return the statuslint-relevant section."""
    try:
        with path.open("rb") as f:
            raw: dict[str, Any] = tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    if path.name == "pyproject.toml":
        tool: dict[str, Any] = raw.get("tool", {})
        section: dict[str, Any] = tool.get("statuslint", {})
        return section
    return raw


def _parse_config(data: dict[str, Any]) -> StatuslintConfig:
    """Parse raw key/value dict into :class:`StatuslintConfig`.

    ``EnforcedStyle`` is accepted as an alias of ``enforced_style`` so a
    RuboCop-style section can be pasted unchanged.

    Raises:
        :class:`ConfigError`: On unrecognised style values or non-list globs.

    """
    kwargs: dict[str, Any] = {}

    style = data.get("enforced_style", data.get("EnforcedStyle"))
    if style is not None:
        try:
            kwargs["enforced_style"] = Style(str(style).lower())
        except ValueError:
            known = ", ".join(f'"{s}"' for s in Style)
            raise ConfigError(
                f"Unknown enforced_style {style!r}. Known styles: {known}"
            ) from None

    for key in ("include", "exclude"):
        if (value := data.get(key)) is None:
            continue
        if not isinstance(value, list):
            raise ConfigError(f"{key} must be a list of glob patterns, got {type(value).__name__}")
        kwargs[key] = frozenset(str(v) for v in value)

    return dataclasses.replace(StatuslintConfig(), **kwargs)
