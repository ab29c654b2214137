"""Built-in listings used to seed an empty property store."""

from datetime import datetime

from allzone.models import PropertyRecord, PropertyStatus

_UNSPLASH_PARAMS = "?ixlib=rb-4.0.3&auto=format&fit=crop&w=500&q=80"

_CATALOG = [
    {
        "name": "Modern Family Home",
        "price": "$750,000",
        "location": "123 Oak Street, Riverside",
        "bedrooms": 4,
        "bathrooms": 3,
        "sqft": 2500,
        "description": "Beautiful modern family home with spacious rooms and great location.",
        "image": "https://images.unsplash.com/photo-1505843513577-22bb7d21e455",
    },
    {
        "name": "Downtown Condo",
        "price": "$450,000",
        "location": "456 City Center, Downtown",
        "bedrooms": 2,
        "bathrooms": 2,
        "sqft": 1200,
        "description": "Stylish downtown condo with city views and modern amenities.",
        "image": "https://images.unsplash.com/photo-1502672260266-1c1ef2d93688",
    },
    {
        "name": "Luxury Villa",
        "price": "$1,250,000",
        "location": "789 Pine Avenue, Hillcrest",
        "bedrooms": 5,
        "bathrooms": 4,
        "sqft": 3800,
        "description": "Stunning luxury villa with premium finishes and mountain views.",
        "image": "https://images.unsplash.com/photo-1512917774080-9991f1c4c750",
    },
]


def default_properties(now: datetime) -> list[PropertyRecord]:
    """Build the three featured seed listings ``prop_1`` to ``prop_3``.

    Every call stamps the records with ``now``, so a re-seed after the
    backing file is removed carries fresh timestamps.
    """
    return [
        PropertyRecord(
            id=f"prop_{n}",
            name=entry["name"],
            price=entry["price"],
            location=entry["location"],
            bedrooms=entry["bedrooms"],
            bathrooms=entry["bathrooms"],
            sqft=entry["sqft"],
            status=PropertyStatus.FOR_SALE,
            description=entry["description"],
            images=[entry["image"] + _UNSPLASH_PARAMS],
            featured=True,
            date_created=now,
            date_updated=now,
        )
        for n, entry in enumerate(_CATALOG, start=1)
    ]
