"""Enumeration types for listing entities."""

from enum import Enum


class PropertyStatus(str, Enum):
    FOR_SALE = "for-sale"
    FOR_RENT = "for-rent"
    SOLD = "sold"
    RENTED = "rented"

    @classmethod
    def coerce(cls, value: str) -> "PropertyStatus | str":
        """Return the matching member, or the raw string for unknown tags."""
        try:
            return cls(value)
        except ValueError:
            return value
