"""Domain models for the listing site."""

from allzone.models.contact import ContactSubmission
from allzone.models.enums import PropertyStatus
from allzone.models.property import PropertyRecord

__all__ = ["ContactSubmission", "PropertyRecord", "PropertyStatus"]
