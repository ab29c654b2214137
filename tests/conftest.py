"""Pytest configuration and fixtures."""

import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable, Iterator

import pytest
from faker import Faker

from allzone.config import StoreConfig
from allzone.models import PropertyRecord, PropertyStatus
from allzone.store import ContactStore, PropertyStore

FIXED_NOW = datetime(2024, 6, 15, 10, 30, 0, 123456, tzinfo=timezone.utc)


@pytest.fixture(autouse=True)
def _drop_console_handlers() -> Iterator[None]:
    """Remove handlers installed by setup_logging once a test ends."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def fake(seed: int) -> Faker:
    """Seeded Faker instance."""
    faker = Faker("en_US")
    faker.seed_instance(seed)
    return faker


@pytest.fixture
def fixed_now() -> datetime:
    """Fixed timestamp returned by the store clock."""
    return FIXED_NOW


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory that does not exist yet."""
    return tmp_path / "data"


@pytest.fixture
def store_config(data_dir: Path) -> StoreConfig:
    """Store config pointing at the temporary data directory."""
    return StoreConfig(data_dir=data_dir)


@pytest.fixture
def store(store_config: StoreConfig, fixed_now: datetime) -> PropertyStore:
    """Property store with a frozen clock."""
    return PropertyStore(store_config, clock=lambda: fixed_now)


@pytest.fixture
def contact_store(store_config: StoreConfig, fixed_now: datetime) -> ContactStore:
    """Contact store with a frozen clock."""
    return ContactStore(store_config, clock=lambda: fixed_now)


@pytest.fixture
def make_record(fake: Faker) -> Callable[..., PropertyRecord]:
    """Factory building well-formed listings with Faker values."""

    def _make(record_id: str, **overrides: object) -> PropertyRecord:
        created = fake.date_time_between(start_date="-2y", end_date="-1d", tzinfo=timezone.utc)
        values: dict[str, object] = {
            "id": record_id,
            "name": f"{fake.street_suffix()} {fake.word().title()} Residence",
            "price": f"${fake.random_int(100, 5000) * 1000:,}",
            "location": f"{fake.street_address()}, {fake.city()}",
            "bedrooms": fake.random_int(0, 6),
            "bathrooms": fake.random_int(0, 5),
            "sqft": fake.random_int(300, 6000),
            "status": PropertyStatus.FOR_SALE,
            "description": fake.sentence(),
            "images": [fake.image_url() for _ in range(fake.random_int(0, 3))],
            "featured": fake.boolean(),
            "date_created": created,
            "date_updated": created + timedelta(hours=fake.random_int(0, 48)),
        }
        values.update(overrides)
        return PropertyRecord(**values)

    return _make
