from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from statuslint.core.config import StatuslintConfig


def discover_files(paths: Iterable[str], config: StatuslintConfig) -> Iterator[Path]:
    """Yield files to check, in a stable order, without duplicates.

    Files named explicitly are checked unless excluded; directories are
    walked recursively and filtered by ``config.include`` / ``config.exclude``.
    """
    seen: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_dir():
            candidates = sorted(p for p in path.rglob("*") if p.is_file() and config.includes(p))
        else:
            candidates = [] if config.is_excluded(path) else [path]
        for candidate in candidates:
            key = candidate.resolve()
            if key in seen:
                continue
            seen.add(key)
            yield candidate
