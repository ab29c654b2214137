"""Property listing model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from allzone.exceptions import InvalidRecordError
from allzone.models.enums import PropertyStatus
from allzone.serialization import ensure_aware, parse_timestamp, serialize_value, utc_now


def _as_int(data: dict[str, Any], key: str) -> int:
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRecordError(f"{key} must be an integer, got {value!r}")
    return value


def _as_str(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise InvalidRecordError(f"{key} must be a string, got {value!r}")
    return value


@dataclass
class PropertyRecord:
    """A single property listing.

    ``price`` is display text and is never parsed. ``status`` holds a
    ``PropertyStatus`` member when the tag is known and the raw string
    otherwise, so unrecognised tags survive a save/load cycle.
    """

    id: str
    name: str
    price: str
    location: str
    bedrooms: int
    bathrooms: int
    sqft: int
    status: PropertyStatus | str
    description: str
    date_created: datetime
    date_updated: datetime
    images: list[str] = field(default_factory=list)
    featured: bool = False

    def __post_init__(self) -> None:
        self.status = PropertyStatus.coerce(self.status)
        self.images = list(self.images)
        self.date_created = ensure_aware(self.date_created)
        self.date_updated = ensure_aware(self.date_updated)
        self.validate()

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise InvalidRecordError("property id is immutable once assigned")
        super().__setattr__(name, value)

    def validate(self) -> None:
        """Check the record invariants.

        Fields stay assignable after construction, so anything about to be
        persisted is checked again here.

        Raises
        ------
        InvalidRecordError
            If any invariant does not hold.
        """
        if not isinstance(self.id, str) or not self.id:
            raise InvalidRecordError("property id must be a non-empty string")
        for key in ("bedrooms", "bathrooms", "sqft"):
            value = getattr(self, key)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidRecordError(f"{self.id}: {key} must be an integer, got {value!r}")
        if self.bedrooms < 0 or self.bathrooms < 0:
            raise InvalidRecordError(f"{self.id}: bedrooms and bathrooms must be non-negative")
        if self.sqft <= 0:
            raise InvalidRecordError(f"{self.id}: sqft must be positive")
        if not isinstance(self.featured, bool):
            raise InvalidRecordError(f"{self.id}: featured must be a boolean")
        if not all(isinstance(image, str) for image in self.images):
            raise InvalidRecordError(f"{self.id}: images must be a list of strings")
        for key in ("date_created", "date_updated"):
            if not isinstance(getattr(self, key), datetime):
                raise InvalidRecordError(f"{self.id}: {key} must be a datetime")
        if ensure_aware(self.date_updated) < ensure_aware(self.date_created):
            raise InvalidRecordError(f"{self.id}: dateUpdated is earlier than dateCreated")

    def touch(self, now: datetime | None = None) -> None:
        """Mark the record as updated.

        Raises
        ------
        InvalidRecordError
            If ``now`` is earlier than ``date_created``.
        """
        stamp = ensure_aware(now or utc_now())
        if stamp < self.date_created:
            raise InvalidRecordError(f"{self.id}: cannot mark updated before dateCreated")
        self.date_updated = stamp

    def to_dict(self) -> dict[str, Any]:
        """Convert to the persisted JSON form."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "location": self.location,
            "bedrooms": self.bedrooms,
            "bathrooms": self.bathrooms,
            "sqft": self.sqft,
            "status": serialize_value(self.status),
            "description": self.description,
            "images": list(self.images),
            "featured": self.featured,
            "dateCreated": serialize_value(self.date_created),
            "dateUpdated": serialize_value(self.date_updated),
        }

    @classmethod
    def from_dict(cls, data: Any) -> "PropertyRecord":
        """Build a record from its persisted JSON form.

        Files written by the earlier site use ``_id`` instead of ``id``;
        both are accepted.
        """
        if not isinstance(data, dict):
            raise InvalidRecordError(f"property record must be an object, got {type(data).__name__}")

        try:
            record_id = data["id"] if "id" in data else data["_id"]
            if not isinstance(record_id, str):
                raise InvalidRecordError(f"id must be a string, got {record_id!r}")

            images = data.get("images", [])
            if not isinstance(images, list) or not all(isinstance(i, str) for i in images):
                raise InvalidRecordError(f"{record_id}: images must be a list of strings")

            featured = data.get("featured", False)
            if not isinstance(featured, bool):
                raise InvalidRecordError(f"{record_id}: featured must be a boolean")

            return cls(
                id=record_id,
                name=_as_str(data, "name"),
                price=_as_str(data, "price"),
                location=_as_str(data, "location"),
                bedrooms=_as_int(data, "bedrooms"),
                bathrooms=_as_int(data, "bathrooms"),
                sqft=_as_int(data, "sqft"),
                status=_as_str(data, "status"),
                description=data.get("description", ""),
                images=images,
                featured=featured,
                date_created=parse_timestamp(data["dateCreated"]),
                date_updated=parse_timestamp(data["dateUpdated"]),
            )
        except KeyError as exc:
            raise InvalidRecordError(f"property record is missing field {exc.args[0]!r}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidRecordError(f"property record has a malformed field: {exc}") from exc
