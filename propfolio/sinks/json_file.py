"""JSON file sink for exporting portfolio snapshots and summaries."""

import json
import logging
from pathlib import Path
from typing import Any

from propfolio.exceptions import ExportError
from propfolio.sinks.serialization import serialize_value, to_dict

logger = logging.getLogger(__name__)


class JsonFileSink:
    """Output records and summaries to JSON files."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write JSON files.
        pretty : bool
            Pretty-print JSON output.
        """
        self.output_dir = Path(output_dir)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, entity_type: str, records: list[Any]) -> Path:
        """Write a batch of records to ``<entity_type>.json``."""
        data = [to_dict(record) for record in records]
        path = self._dump(f"{entity_type}.json", data)
        self._counts[entity_type] = len(records)
        return path

    def write_summary(self, name: str, summary: Any) -> Path:
        """Write a single summary object (e.g. ``FinancialSummary``)."""
        return self._dump(f"{name}.json", serialize_value(summary))

    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def _dump(self, filename: str, data: Any) -> Path:
        file_path = self.output_dir / filename
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(file_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(data, f, indent=2, ensure_ascii=False, default=str)
                else:
                    json.dump(data, f, ensure_ascii=False, default=str)
        except OSError as exc:
            raise ExportError(f"Failed to write {file_path}: {exc}") from exc
        logger.debug("Wrote %s", file_path)
        return file_path
