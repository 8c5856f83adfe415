"""Loading event records from files."""

from calfeed.ingestion.json_reader import JSONReader

__all__ = ["JSONReader"]
