"""Entity Lookup - resolve UUID-or-slug identifiers to entities."""

__version__ = "0.1.0"
