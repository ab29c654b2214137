"""Server-side checks for contact form input.

These mirror the checks the site's forms run in the browser, so a
submission that bypasses the page is held to the same rules.
"""

import re

from allzone.exceptions import ValidationError

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$", re.IGNORECASE)

# Expected national number length per dialing code
PHONE_LENGTHS = {
    "+91": (10, "Please enter exactly 10 digits for Indian phone number"),
    "+971": (9, "Please enter exactly 9 digits for UAE phone number"),
}


def validate_name(name: str) -> str:
    name = name.strip()
    if not name:
        raise ValidationError("name", "Please enter your name")
    return name


def validate_email(email: str) -> str:
    """Return the trimmed address or raise ``ValidationError``."""
    email = email.strip()
    if not email or not EMAIL_PATTERN.match(email):
        raise ValidationError("email", "Please enter a valid email address")
    return email


def normalize_phone(phone: str) -> str:
    """Strip everything but digits."""
    return re.sub(r"[^0-9]", "", phone)


def validate_phone(phone: str, country_code: str) -> str:
    """Return the digits of ``phone`` after checking their count.

    An empty number is allowed. Only dialing codes listed in
    ``PHONE_LENGTHS`` have a length rule.
    """
    digits = normalize_phone(phone)
    if digits and country_code in PHONE_LENGTHS:
        length, message = PHONE_LENGTHS[country_code]
        if len(digits) != length:
            raise ValidationError("phone", message)
    return digits
