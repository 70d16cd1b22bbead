"""Reading and writing the single settings document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pymongo.database import Database


@dataclass
class SettingsService:
    """Access to the application settings stored in the database."""

    database: Database

    def update_settings(self, settings: dict[str, Any]) -> None:
        """Overwrite the stored settings with the given fields."""
        fields = {key: value for key, value in settings.items() if key != "_id"}
        self.database["settings"].update_one({}, {"$set": fields})

    def get_settings(self) -> dict[str, Any]:
        """Return the stored settings; raise LookupError if there are none."""
        doc = self.database["settings"].find_one({})
        if doc is None:
            raise LookupError("settings not found")
        return {key: value for key, value in doc.items() if key != "_id"}