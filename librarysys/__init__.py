"""Library users, catalogue resources, loans, reservations, notifications and events, with JSON persistence."""

__version__ = "0.1.0"