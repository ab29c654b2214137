"""File-backed store for contact form submissions."""

import re
from collections.abc import Callable, Iterable
from datetime import datetime

from allzone.config import StoreConfig
from allzone.logging import get_logger
from allzone.models import ContactSubmission
from allzone.serialization import utc_now
from allzone.store.json_file import FlatFileStore
from allzone.validation import validate_email, validate_name, validate_phone

logger = get_logger(__name__)

_SEQUENTIAL_ID = re.compile(r"^contact_(\d+)$")


class ContactStore(FlatFileStore):
    """Contact submissions kept as one JSON array beside the listings.

    A missing file is an empty inbox; nothing is seeded. Under the
    ``reseed`` policy a corrupt file is moved aside and the inbox starts
    empty again.
    """

    record_type = ContactSubmission
    label = "contact"

    def __init__(
        self,
        config: StoreConfig | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config = config or StoreConfig()
        super().__init__(self.config.contacts_path, on_corrupt=self.config.on_corrupt, clock=clock)

    def list_all(self) -> list[ContactSubmission]:
        """Return every submission, oldest first."""
        return self._load_or_recover() or []

    def next_id(self, submissions: Iterable[ContactSubmission]) -> str:
        """Return the next free ``contact_<n>`` identifier."""
        highest = 0
        for submission in submissions:
            match = _SEQUENTIAL_ID.match(submission.id)
            if match:
                highest = max(highest, int(match.group(1)))
        return f"contact_{highest + 1}"

    def add(
        self,
        name: str,
        email: str,
        phone: str = "",
        country_code: str = "+971",
        message: str = "",
    ) -> ContactSubmission:
        """Validate and append a submission.

        Raises
        ------
        ValidationError
            If the name is empty, the email is malformed, or the phone
            number has the wrong number of digits for its country code.
        """
        submission_name = validate_name(name)
        submission_email = validate_email(email)
        digits = validate_phone(phone, country_code)

        with self.lock:
            submissions = self.list_all()
            submission = ContactSubmission(
                id=self.next_id(submissions),
                name=submission_name,
                email=submission_email,
                phone=digits,
                country_code=country_code,
                message=message.strip(),
                date_created=self.clock(),
            )
            submissions.append(submission)
            self._save(submissions)

        logger.info("Stored contact submission %s", submission.id)
        return submission
