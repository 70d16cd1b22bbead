"""Lookup of translation packs stored as JSON files."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

log = logging.getLogger(__name__)


@dataclass
class LanguageService:
    """Finds language files by their language code."""

    languages_dir: Path = field(default_factory=lambda: Path("assets/core/languages"))

    def get_language(self, lang_code: str) -> dict[str, Any] | None:
        """Return the language data whose code matches, or None.

        Unreadable or malformed files are logged and skipped; when several
        files share a code, the last one by file name wins.
        """
        directory = Path(self.languages_dir)
        found = None
        for path in sorted(directory.iterdir(), key=lambda p: p.name):
            if path.is_dir():
                continue
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                log.error("%s: %s", path, exc)
                continue
            if isinstance(data, dict) and data.get("code") == lang_code:
                found = data
        return found