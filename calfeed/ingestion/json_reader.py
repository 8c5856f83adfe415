"""JSON file reader for event records."""

import json
from pathlib import Path

from pydantic import ValidationError

from calfeed.exceptions import IngestionError
from calfeed.models.event import EventRecord


class JSONReader:
    """Reader for JSON event exports."""

    def read(self, path: Path) -> list[EventRecord]:
        """Read event records from a JSON file.

        Supports two formats:
        - Array of events: [{event1}, {event2}, ...]
        - Object with events key: {events: [...]}
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise IngestionError(f"Failed to read JSON file: {e}") from e

        try:
            return [EventRecord.model_validate(e) for e in self._extract_events(data)]
        except ValidationError as e:
            raise IngestionError(f"Invalid event record in {path}: {e}") from e

    def _extract_events(self, data: dict | list) -> list:
        if isinstance(data, list):
            return data

        if isinstance(data, dict) and isinstance(data.get("events"), list):
            return data["events"]

        raise IngestionError(
            "JSON format not recognized. Expected array of events "
            "or object with 'events' key."
        )
