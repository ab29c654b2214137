"""Configuration management for allzone."""

from dataclasses import dataclass, field
from pathlib import Path

from allzone.exceptions import ConfigurationError

CORRUPT_POLICIES = ("reseed", "raise")


@dataclass
class StoreConfig:
    """Location and recovery policy of the flat-file stores."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    properties_file: str = "properties.json"
    contacts_file: str = "contacts.json"
    on_corrupt: str = "reseed"

    def __post_init__(self) -> None:
        self.data_dir = Path(self.data_dir)
        if self.on_corrupt not in CORRUPT_POLICIES:
            raise ConfigurationError(
                f"on_corrupt must be one of {', '.join(CORRUPT_POLICIES)}, got {self.on_corrupt!r}"
            )

    @property
    def properties_path(self) -> Path:
        """Path of the property listings file."""
        return self.data_dir / self.properties_file

    @property
    def contacts_path(self) -> Path:
        """Path of the contact submissions file."""
        return self.data_dir / self.contacts_file


@dataclass
class SiteConfig:
    """Main configuration for allzone."""

    store: StoreConfig = field(default_factory=StoreConfig)
    port: int = 3000
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "SiteConfig":
        """Create config from environment variables."""
        import os

        store = StoreConfig(
            data_dir=Path(os.getenv("DATA_DIR", "data")),
            properties_file=os.getenv("PROPERTIES_FILE", "properties.json"),
            contacts_file=os.getenv("CONTACTS_FILE", "contacts.json"),
            on_corrupt=os.getenv("ON_CORRUPT", "reseed").lower(),
        )

        port_str = os.getenv("PORT", "3000")
        try:
            port = int(port_str)
        except ValueError as exc:
            raise ConfigurationError(f"PORT must be an integer, got {port_str!r}") from exc

        return cls(
            store=store,
            port=port,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
