"""Output layer for calendar documents."""

from calfeed.output.ics_writer import ICSWriter

__all__ = ["ICSWriter"]
