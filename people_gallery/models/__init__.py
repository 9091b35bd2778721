"""Data records persisted by the gallery."""

from .person import DEFAULT_NAME, PEOPLE_ADAPTER, Person

__all__ = ["DEFAULT_NAME", "PEOPLE_ADAPTER", "Person"]
