"""Contact form submission model."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from allzone.exceptions import InvalidRecordError
from allzone.serialization import ensure_aware, parse_timestamp, serialize_value


@dataclass
class ContactSubmission:
    """A message left through one of the site's contact forms."""

    id: str
    name: str
    email: str
    date_created: datetime
    phone: str = ""
    country_code: str = ""
    message: str = ""

    def __post_init__(self) -> None:
        self.date_created = ensure_aware(self.date_created)

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON form."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "countryCode": self.country_code,
            "message": self.message,
            "dateCreated": serialize_value(self.date_created),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ContactSubmission":
        """Build a submission from its persisted JSON form."""
        if not isinstance(data, dict):
            raise InvalidRecordError(f"contact record must be an object, got {type(data).__name__}")
        try:
            return cls(
                id=str(data["id"]),
                name=str(data["name"]),
                email=str(data["email"]),
                phone=str(data.get("phone", "")),
                country_code=str(data.get("countryCode", "")),
                message=str(data.get("message", "")),
                date_created=parse_timestamp(data["dateCreated"]),
            )
        except KeyError as exc:
            raise InvalidRecordError(f"contact record is missing field {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidRecordError(f"contact record has a malformed field: {exc}") from exc
